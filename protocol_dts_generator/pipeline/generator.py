"""
Pipeline generator - runs the three emission passes and persists them.
"""

from __future__ import annotations

from pathlib import Path

from ..gen_logging import get_logger
from .config import GeneratorConfig, OutputMode
from .emitters import ApiModuleEmitter, MappingModuleEmitter, ModuleTemplates, ProtocolModuleEmitter
from .errors import GenerationError
from .naming import module_name_from_path
from .schema_ast import Domain, ProtocolParser
from .writer import AtomicWriter, validate_declarations, write_plain

logger = get_logger(__name__)


class ProtocolGenerator:
    """
    Generates the protocol, mapping and API declaration modules.

    The passes run one after the other over the same immutable domain list;
    each pass renders into its own TextBuilder.
    """

    def __init__(self, domains: list[Domain], config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            domains: Domains of all schema documents, in order
            config: Generator configuration
        """
        self.domains = domains
        self.config = config or GeneratorConfig()
        self.templates = ModuleTemplates(self.config.add_generation_comment)
        self.protocol_module_name = module_name_from_path(self.config.protocol_file_name)

    @classmethod
    def from_documents(cls, documents: list[dict], config: GeneratorConfig | None = None) -> ProtocolGenerator:
        """Parse and concatenate schema documents, then build a generator over them."""
        config = config or GeneratorConfig()
        domains = ProtocolParser(strict=config.strict).parse_all(documents)
        return cls(domains, config)

    def generate_protocol(self) -> str:
        return ProtocolModuleEmitter(self.domains, self.config, self.protocol_module_name, self.templates).emit()

    def generate_mapping(self) -> str:
        return MappingModuleEmitter(
            self.domains,
            self.config,
            self.config.mapping_module_name,
            self.protocol_module_name,
            self.templates,
        ).emit()

    def generate_api(self) -> str:
        return ApiModuleEmitter(
            self.domains,
            self.config,
            self.config.api_module_name,
            self.protocol_module_name,
            self.templates,
        ).emit()

    def generate(self) -> dict[str, str]:
        """
        Run all passes.

        Returns:
            File name -> module text, in emission order
        """
        return {
            self.config.protocol_file_name: self.generate_protocol(),
            self.config.mapping_file_name: self.generate_mapping(),
            self.config.api_file_name: self.generate_api(),
        }

    def write(self, output_dir: str | Path) -> list[Path]:
        """
        Generate and write every artifact into output_dir.

        Artifacts are written one at a time; a failure leaves the
        previously written ones in place.

        Returns:
            The written paths
        """
        output_dir = Path(output_dir)
        output = self.config.output
        writer = AtomicWriter()
        written = []
        for file_name, content in self.generate().items():
            path = output_dir / file_name
            logger.info("Writing to %s", path)
            if output.atomic_write:
                writer.write(path, content, validate=output.validate_before_write)
            else:
                if output.validate_before_write:
                    validate_declarations(content)
                write_plain(path, content)
            written.append(path)
        return written

    def check(self, output_dir: str | Path) -> list[Path]:
        """
        Compare the generated artifacts with the files in output_dir.

        Returns:
            Paths that are missing or differ from the generated text
        """
        output_dir = Path(output_dir)
        stale = []
        for file_name, content in self.generate().items():
            path = output_dir / file_name
            # Byte comparison, so line ending changes count as stale
            if not path.exists() or path.read_bytes() != content.encode("utf-8"):
                logger.info("Out of date: %s", path)
                stale.append(path)
            else:
                logger.debug("Up to date: %s", path)
        return stale

    def run(self, output_dir: str | Path) -> list[Path]:
        """Write or check the artifacts depending on the configured output mode."""
        if self.config.output.mode == OutputMode.CHECK:
            stale = self.check(output_dir)
            if stale:
                raise GenerationError(f"Generated declarations are out of date: {', '.join(str(p) for p in stale)}")
            return []
        return self.write(output_dir)
