"""
Base class for emission passes.

Provides the pieces the three passes have in common: module prefix and
suffix, interfaces and their properties.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import GeneratorConfig
from ..schema_ast.nodes import Domain, PropertyDef
from .templates import ModuleTemplates
from .text_builder import TextBuilder
from .type_resolver import TypeShapeResolver


class DeclarationEmitter(ABC):
    """Abstract base class for one emission pass over the domain list.

    Every call to emit() works on a fresh TextBuilder, so passes never
    share indentation or buffered text.
    """

    def __init__(self, domains: list[Domain], config: GeneratorConfig, templates: ModuleTemplates | None = None):
        self.domains = domains
        self.config = config
        self.templates = templates or ModuleTemplates(config.add_generation_comment)
        self.resolver = TypeShapeResolver(config.indent)

    def emit(self) -> str:
        """Run the pass and return the module text."""
        builder = TextBuilder(self.config.indent)
        self.emit_module(builder)
        return builder.getvalue()

    @abstractmethod
    def emit_module(self, builder: TextBuilder) -> None:
        """Emit the whole module into builder."""

    def emit_prefix(self, builder: TextBuilder, imports: list[str] | None = None) -> None:
        builder.emit(self.templates.render_prefix(imports))
        if imports:
            builder.emit_line()

    def emit_suffix(self, builder: TextBuilder, module_name: str) -> None:
        builder.emit(self.templates.render_suffix(module_name))

    def emit_interface(self, builder: TextBuilder, name: str, props: tuple[PropertyDef, ...] | None) -> None:
        """Emit an interface; no declared properties means an open string-keyed interface."""
        builder.emit_open_block(f"export interface {name}")
        if props is None:
            builder.emit_line("[key: string]: string;")
        else:
            for prop in props:
                self.emit_property(builder, prop)
        builder.emit_close_block()

    def emit_property(self, builder: TextBuilder, prop: PropertyDef) -> None:
        builder.emit_description(prop.description)
        builder.emit_line(f"{self.resolver.property_def(prop, builder.depth)};")
