"""
Mapping module pass.

Emits the Events and Commands interfaces, keyed by domain-qualified
names, pointing at the payload declarations of the protocol module.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..naming import (
    event_payload_name,
    qualified_declaration,
    qualified_member_name,
    request_name,
    response_name,
    to_title_case,
)
from ..schema_ast.nodes import Command, Domain, Event, ObjectShape, PropertyDef, RefShape
from .base import DeclarationEmitter
from .templates import ModuleTemplates
from .text_builder import TextBuilder

MAPPING_DESCRIPTION = "Mappings from protocol event and command names to the types required for them."


def is_weak_interface(params: tuple[PropertyDef, ...]) -> bool:
    """True when every parameter is optional, so the whole parameter object may be omitted."""
    return all(p.optional for p in params)


class MappingModuleEmitter(DeclarationEmitter):
    """Emits the mapping module (e.g. protocol-mapping.d.ts)."""

    def __init__(
        self,
        domains: list[Domain],
        config: GeneratorConfig,
        module_name: str,
        protocol_module_name: str,
        templates: ModuleTemplates | None = None,
    ):
        super().__init__(domains, config, templates)
        self.module_name = to_title_case(module_name)
        self.protocol_module_name = protocol_module_name
        self.protocol_prefix = to_title_case(protocol_module_name)

    def emit_module(self, builder: TextBuilder) -> None:
        self.emit_prefix(builder, imports=[self.protocol_module_name])
        builder.emit_description(MAPPING_DESCRIPTION)
        builder.emit_open_block(f"export namespace {self.module_name}")

        event_defs = tuple(self.event_mapping(e, d.domain) for d in self.domains for e in d.events)
        self.emit_interface(builder, "Events", event_defs)

        builder.emit_line()

        command_defs = tuple(self.command_mapping(c, d.domain) for d in self.domains for c in d.commands)
        self.emit_interface(builder, "Commands", command_defs)

        builder.emit_close_block()
        self.emit_suffix(builder, self.module_name)

    def event_mapping(self, event: Event, domain_name: str) -> PropertyDef:
        """Property mapping an event name to a tuple holding its payload type, or an empty tuple."""
        if event.parameters is not None:
            payload_type = f"[{qualified_declaration(self.protocol_prefix, domain_name, event_payload_name(event.name))}]"
        else:
            payload_type = "[]"

        return PropertyDef(
            name=qualified_member_name(domain_name, event.name),
            shape=RefShape(target=payload_type),
            description=event.description,
        )

    def command_mapping(self, command: Command, domain_name: str) -> PropertyDef:
        """Property mapping a command name to its {paramsType, returnType} pair."""
        request_type = "[]"
        if command.parameters is not None:
            optional = "?" if is_weak_interface(command.parameters) else ""
            request_type = f"[{qualified_declaration(self.protocol_prefix, domain_name, request_name(command.name))}{optional}]"

        if command.returns is not None:
            response_type = qualified_declaration(self.protocol_prefix, domain_name, response_name(command.name))
        else:
            response_type = "void"

        return PropertyDef(
            name=qualified_member_name(domain_name, command.name),
            shape=ObjectShape(
                properties=(
                    PropertyDef(name="paramsType", shape=RefShape(target=request_type)),
                    PropertyDef(name="returnType", shape=RefShape(target=response_type)),
                )
            ),
            description=command.description,
        )
