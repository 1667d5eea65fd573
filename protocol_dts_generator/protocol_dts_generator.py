import json

import click

from .gen_logging import configure_logging
from .pipeline import GeneratorConfig, OutputMode, ProtocolGenerator, ProtocolGeneratorError, load_schema_files


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--strict", is_flag=True, default=False, help="Fail on shapes and references that cannot be interpreted")
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write anything, exit with status 1 if the output files are out of date",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.option("--quiet", "-q", is_flag=True, default=False)
@click.argument("schemas", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output_dir", type=click.Path(file_okay=False, resolve_path=True))
def protocol_dts_generator(config, strict, check, verbose, quiet, schemas, output_dir):
    """Generate declaration files from protocol SCHEMAS into OUTPUT_DIR.

    Domains of all SCHEMAS are concatenated in argument order.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        if config is not None:
            with open(config, encoding="utf-8") as f:
                config = GeneratorConfig.from_dict(json.load(f))
        else:
            config = GeneratorConfig()

        # CLI flags override the config file
        if strict:
            config.strict = True
        if check:
            config.output.mode = OutputMode.CHECK

        codegen = ProtocolGenerator.from_documents(load_schema_files(schemas), config)
        codegen.run(output_dir)
    except ProtocolGeneratorError as e:
        raise click.ClickException(str(e)) from e
