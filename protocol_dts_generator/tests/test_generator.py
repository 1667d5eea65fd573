"""
Tests for running all passes and persisting the artifacts.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from protocol_dts_generator.pipeline import (
    AtomicWriter,
    ConfigError,
    GenerationError,
    GeneratorConfig,
    OutputMode,
    ProtocolGenerator,
    load_schema_files,
)
from protocol_dts_generator.pipeline.writer import validate_declarations

TEST_DATA = Path(__file__).parent / "test_data"
SCHEMA_FILES = [TEST_DATA / "js_protocol.json", TEST_DATA / "browser_protocol.json"]
VALID_MODULE = "export namespace A {\n}\n\nexport default A;\n"


def build_generator(config=None):
    return ProtocolGenerator.from_documents(load_schema_files(SCHEMA_FILES), config)


class TestProtocolGenerator:
    def test_generate_returns_artifacts_in_order(self):
        artifacts = build_generator().generate()
        assert list(artifacts) == ["protocol.d.ts", "protocol-mapping.d.ts", "protocol-proxy-api.d.ts"]

    def test_generation_is_deterministic(self):
        first = build_generator().generate()
        second = build_generator().generate()
        assert first == second

    def test_passes_do_not_share_state(self):
        generator = build_generator()
        api_first = generator.generate_api()
        generator.generate_protocol()
        generator.generate_mapping()
        assert generator.generate_api() == api_first

    def test_every_artifact_starts_with_same_banner(self):
        artifacts = list(build_generator().generate().values())
        banners = {text.split("\n\n", 1)[0] for text in artifacts}
        assert len(banners) == 1

    def test_every_artifact_is_valid(self):
        for content in build_generator().generate().values():
            validate_declarations(content)

    def test_write(self, tmp_path):
        written = build_generator().write(tmp_path / "types")

        assert [p.name for p in written] == ["protocol.d.ts", "protocol-mapping.d.ts", "protocol-proxy-api.d.ts"]
        for path in written:
            assert path.exists()
        assert (tmp_path / "types" / "protocol.d.ts").read_text(encoding="utf-8").endswith("export default Protocol;\n")
        # no temporary files left behind
        assert sorted(p.name for p in (tmp_path / "types").iterdir()) == sorted(p.name for p in written)

    def test_write_without_atomic_writer(self, tmp_path):
        config = GeneratorConfig.from_dict({"output": {"atomic_write": False}})
        written = build_generator(config).write(tmp_path)
        assert len(written) == 3

    def test_write_logs_each_path(self, tmp_path, caplog):
        with caplog.at_level("INFO", logger="protocol_dts_generator"):
            build_generator().write(tmp_path)
        assert caplog.text.count("Writing to ") == 3

    def test_write_with_unusual_line_separators_in_descriptions(self, tmp_path):
        document = {
            "domains": [
                {
                    "domain": "Foo",
                    "description": "See\u2028{ example",
                    "types": [{"id": "Id", "description": "a\rb", "type": "string"}],
                }
            ]
        }
        written = ProtocolGenerator.from_documents([document]).write(tmp_path)

        code = written[0].read_text(encoding="utf-8")
        assert "    /**\n     * See\n     * { example\n     */\n" in code
        assert "        /**\n         * a\n         * b\n         */\n" in code

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_atomic_and_plain_writes_use_same_mode(self, tmp_path):
        build_generator().write(tmp_path / "atomic")
        config = GeneratorConfig.from_dict({"output": {"atomic_write": False}})
        build_generator(config).write(tmp_path / "plain")

        for name in ["protocol.d.ts", "protocol-mapping.d.ts", "protocol-proxy-api.d.ts"]:
            atomic_mode = stat.S_IMODE((tmp_path / "atomic" / name).stat().st_mode)
            plain_mode = stat.S_IMODE((tmp_path / "plain" / name).stat().st_mode)
            assert atomic_mode == plain_mode

    def test_custom_file_names(self, tmp_path):
        config = GeneratorConfig.from_dict(
            {
                "protocol_file_name": "cdp.d.ts",
                "mapping_file_name": "cdp-mapping.d.ts",
                "api_file_name": "cdp-api.d.ts",
                "api_module_name": "CdpApi",
            }
        )
        artifacts = build_generator(config).generate()

        assert list(artifacts) == ["cdp.d.ts", "cdp-mapping.d.ts", "cdp-api.d.ts"]
        assert "export namespace Cdp {" in artifacts["cdp.d.ts"]
        assert artifacts["cdp-api.d.ts"].endswith("export default CdpApi;\n")

    def test_indent_option(self):
        config = GeneratorConfig.from_dict({"indent": "  ", "add_generation_comment": False})
        code = build_generator(config).generate_protocol()
        assert "\n  export type integer = number\n" in code
        assert "\n    export type RemoteObjectId = string;\n" in code


class TestCheckMode:
    def test_check_reports_missing_files(self, tmp_path):
        stale = build_generator().check(tmp_path)
        assert [p.name for p in stale] == ["protocol.d.ts", "protocol-mapping.d.ts", "protocol-proxy-api.d.ts"]

    def test_check_after_write_is_clean(self, tmp_path):
        generator = build_generator()
        generator.write(tmp_path)
        assert generator.check(tmp_path) == []

    def test_check_reports_modified_file(self, tmp_path):
        generator = build_generator()
        generator.write(tmp_path)
        (tmp_path / "protocol-mapping.d.ts").write_text("// edited\n", encoding="utf-8")
        assert generator.check(tmp_path) == [tmp_path / "protocol-mapping.d.ts"]

    def test_check_reports_line_ending_changes(self, tmp_path):
        generator = build_generator()
        generator.write(tmp_path)
        path = tmp_path / "protocol.d.ts"
        path.write_bytes(path.read_bytes().replace(b"\n", b"\r\n"))
        assert generator.check(tmp_path) == [path]

    def test_run_in_check_mode_raises_and_writes_nothing(self, tmp_path):
        config = GeneratorConfig()
        config.output.mode = OutputMode.CHECK
        with pytest.raises(GenerationError):
            build_generator(config).run(tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_run_writes_by_default(self, tmp_path):
        assert len(build_generator().run(tmp_path)) == 3


class TestAtomicWriter:
    def test_write_replaces_file(self, tmp_path):
        path = tmp_path / "out" / "a.d.ts"
        writer = AtomicWriter()
        writer.write(path, "export namespace A {\n}\n\nexport default A;\n")
        writer.write(path, "export namespace B {\n}\n\nexport default B;\n")
        assert path.read_text(encoding="utf-8").endswith("export default B;\n")

    def test_invalid_content_is_not_written(self, tmp_path):
        path = tmp_path / "a.d.ts"
        with pytest.raises(GenerationError):
            AtomicWriter().write(path, "export namespace A {\n\nexport default A;\n")
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_new_file_follows_umask(self, tmp_path):
        previous = os.umask(0o022)
        try:
            AtomicWriter().write(tmp_path / "a.d.ts", VALID_MODULE)
        finally:
            os.umask(previous)
        assert stat.S_IMODE((tmp_path / "a.d.ts").stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_existing_file_keeps_its_mode(self, tmp_path):
        path = tmp_path / "a.d.ts"
        path.write_text("old", encoding="utf-8")
        path.chmod(0o640)
        AtomicWriter().write(path, VALID_MODULE)
        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    def test_braces_in_comments_are_ignored(self):
        validate_declarations("/**\n * Returns {a: 1\n */\nexport namespace A {\n}\nexport default A;\n")

    def test_missing_default_export(self):
        with pytest.raises(GenerationError):
            validate_declarations("export namespace A {\n}\n")

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate=seen.append).write(tmp_path / "x.d.ts", "anything")
        assert seen == ["anything"]


class TestGeneratorConfig:
    def test_round_trip(self):
        config = GeneratorConfig.from_dict({"strict": True, "output": {"mode": "check"}})
        assert config.strict
        assert config.output.mode is OutputMode.CHECK
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_invalid_output_mode(self):
        with pytest.raises(ConfigError) as exc_info:
            GeneratorConfig.from_dict({"output": {"mode": "merge"}})
        assert "Invalid output mode 'merge'" in str(exc_info.value)

    def test_unknown_keys_are_ignored(self):
        config = GeneratorConfig.from_dict({"no_such_option": 1})
        assert not hasattr(config, "no_such_option")
