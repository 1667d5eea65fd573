import pytest

from protocol_dts_generator.pipeline.emitters import TextBuilder
from protocol_dts_generator.pipeline.errors import EmitterError


class TestTextBuilder:
    def test_blocks_track_indentation(self):
        builder = TextBuilder()
        builder.emit_open_block("export namespace A")
        builder.emit_open_block("export interface B")
        builder.emit_line("x: string;")
        builder.emit_close_block()
        builder.emit_close_block()

        assert builder.getvalue() == ("export namespace A {\n    export interface B {\n        x: string;\n    }\n}\n")
        assert builder.depth == 0

    def test_empty_line_has_no_indentation(self):
        builder = TextBuilder()
        builder.emit_open_block("export namespace A")
        builder.emit_line()
        assert builder.getvalue().endswith("{\n\n")

    def test_custom_indent_and_open_char(self):
        builder = TextBuilder(indent="\t")
        builder.emit_open_block("items", open_char=": [")
        builder.emit_line("1,")
        builder.emit_close_block("]")
        assert builder.getvalue() == "items: [\n\t1,\n]\n"

    def test_description_splits_on_any_newline(self):
        builder = TextBuilder()
        builder.emit_description("first\r\nsecond\nthird")
        assert builder.getvalue() == "/**\n * first\n * second\n * third\n */\n"

    @pytest.mark.parametrize("separator", ["\r", "\x0b", "\x0c", "\x85", "\u2028", "\u2029"])
    def test_description_splits_on_every_line_boundary(self, separator):
        builder = TextBuilder()
        builder.emit_description(f"a{separator}b")
        assert builder.getvalue() == "/**\n * a\n * b\n */\n"

    def test_missing_description_emits_nothing(self):
        builder = TextBuilder()
        builder.emit_description(None)
        builder.emit_description("")
        assert builder.getvalue() == ""

    def test_close_at_depth_zero_raises(self):
        builder = TextBuilder()
        with pytest.raises(EmitterError):
            builder.emit_close_block()

    def test_reset(self):
        builder = TextBuilder()
        builder.emit_open_block("export namespace A")
        builder.emit_line("x;")
        builder.reset()

        assert builder.getvalue() == ""
        assert builder.depth == 0
        builder.emit_line("y;")
        assert builder.getvalue() == "y;\n"
