"""
Indentation-aware text accumulator used by the emission passes.
"""

from __future__ import annotations

from ..errors import EmitterError


class TextBuilder:
    """Append-only output buffer that tracks the current block depth.

    One builder belongs to one emission pass. reset() returns it to the
    initial state so the same instance can serve another pass.
    """

    def __init__(self, indent: str = "    "):
        self.indent = indent
        self.depth = 0
        self._parts: list[str] = []

    def get_indent(self, depth: int | None = None) -> str:
        return self.indent * (self.depth if depth is None else depth)

    def emit(self, text: str) -> None:
        self._parts.append(text)

    def emit_line(self, text: str = "") -> None:
        """Emit one indented line, or a bare newline when text is empty."""
        if text:
            self._parts.append(f"{self.get_indent()}{text}\n")
        else:
            self._parts.append("\n")

    def emit_open_block(self, header: str, open_char: str = " {") -> None:
        self.emit_line(f"{header}{open_char}")
        self.depth += 1

    def emit_close_block(self, close_char: str = "}") -> None:
        if self.depth == 0:
            raise EmitterError(f"Cannot close block '{close_char}' at depth 0")
        self.depth -= 1
        self.emit_line(close_char)

    def emit_description(self, description: str | None) -> None:
        """Emit a description as a /** ... */ comment block, split on any line boundary."""
        if not description:
            return
        self.emit_line("/**")
        for line in description.splitlines():
            self.emit_line(f" * {line}")
        self.emit_line(" */")

    def getvalue(self) -> str:
        return "".join(self._parts)

    def reset(self) -> None:
        self.depth = 0
        self._parts = []
