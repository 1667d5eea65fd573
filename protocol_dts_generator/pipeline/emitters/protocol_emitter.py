"""
Protocol module pass.

Emits one namespace per domain holding the domain types and the
request/response/event payload interfaces of its commands and events.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..naming import event_payload_name, request_name, response_name, to_title_case
from ..schema_ast.nodes import Command, Domain, Event, ObjectShape, TypeDef
from .base import DeclarationEmitter
from .templates import ModuleTemplates
from .text_builder import TextBuilder


class ProtocolModuleEmitter(DeclarationEmitter):
    """Emits the primary module (e.g. protocol.d.ts)."""

    def __init__(
        self,
        domains: list[Domain],
        config: GeneratorConfig,
        module_name: str,
        templates: ModuleTemplates | None = None,
    ):
        super().__init__(domains, config, templates)
        self.module_name = to_title_case(module_name)

    def emit_module(self, builder: TextBuilder) -> None:
        self.emit_prefix(builder)
        builder.emit_open_block(f"export namespace {self.module_name}")
        self._emit_global_type_defs(builder)
        for domain in self.domains:
            self._emit_domain(builder, domain)
        builder.emit_close_block()
        self.emit_suffix(builder, self.module_name)

    def _emit_global_type_defs(self, builder: TextBuilder) -> None:
        builder.emit_line()
        builder.emit_line("export type integer = number")

    def _emit_domain(self, builder: TextBuilder, domain: Domain) -> None:
        builder.emit_line()
        builder.emit_description(domain.description)
        builder.emit_open_block(f"export namespace {to_title_case(domain.domain)}")
        for type_def in domain.types:
            self._emit_domain_type(builder, type_def)
        for command in domain.commands:
            self._emit_command(builder, command)
        for event in domain.events:
            self._emit_event(builder, event)
        builder.emit_close_block()

    def _emit_domain_type(self, builder: TextBuilder, type_def: TypeDef) -> None:
        builder.emit_line()
        builder.emit_description(type_def.description)

        # $ref targets name types by their id, so the id is declared unchanged
        name = type_def.id
        if isinstance(type_def.shape, ObjectShape):
            self.emit_interface(builder, name, type_def.shape.properties)
        else:
            builder.emit_line(f"export type {name} = {self.resolver.resolve(type_def.shape, builder.depth)};")

    def _emit_command(self, builder: TextBuilder, command: Command) -> None:
        # Command descriptions go to the API module; the payload interfaces stay bare
        if command.parameters is not None:
            builder.emit_line()
            self.emit_interface(builder, request_name(command.name), command.parameters)

        if command.returns is not None:
            builder.emit_line()
            self.emit_interface(builder, response_name(command.name), command.returns)

    def _emit_event(self, builder: TextBuilder, event: Event) -> None:
        if event.parameters is None:
            return

        builder.emit_line()
        builder.emit_description(event.description)
        self.emit_interface(builder, event_payload_name(event.name), event.parameters)
