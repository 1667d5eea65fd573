"""
jinja2 templates for the text surrounding each generated module.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..naming import to_title_case

TEMPLATES_DIR = Path(__file__).parent.parent.parent.resolve().absolute() / "templates"

GENERATION_MESSAGE = "Auto-generated by protocol_dts_generator, do not edit manually."


class ModuleTemplates:
    """Renders the banner/imports prefix and the default-export suffix of a module."""

    def __init__(self, add_generation_comment: bool = True):
        self.add_generation_comment = add_generation_comment
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
        self.jinja_env.filters["title_case"] = to_title_case
        self.prefix = self.jinja_env.from_string((TEMPLATES_DIR / "prefix.d.ts.jinja2").read_text(encoding="utf-8"))
        self.suffix = self.jinja_env.from_string((TEMPLATES_DIR / "suffix.d.ts.jinja2").read_text(encoding="utf-8"))

    def render_prefix(self, imports: list[str] | None = None) -> str:
        return self.prefix.render(
            add_generation_comment=self.add_generation_comment,
            message=GENERATION_MESSAGE,
            imports=imports or [],
        )

    def render_suffix(self, module_name: str) -> str:
        return self.suffix.render(module_name=module_name)
