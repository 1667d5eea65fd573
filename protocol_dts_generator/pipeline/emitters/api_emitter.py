"""
API module pass.

Emits one {Domain}Api interface per domain with a promise-returning method
per command and an on() overload per event that carries parameters,
plus the ProtocolApi aggregate.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..naming import (
    domain_api_name,
    event_payload_name,
    qualified_declaration,
    request_name,
    response_name,
    to_title_case,
)
from ..schema_ast.nodes import Command, Domain, Event
from .base import DeclarationEmitter
from .templates import ModuleTemplates
from .text_builder import TextBuilder

API_DESCRIPTION = "API generated from Protocol commands and events."


class ApiModuleEmitter(DeclarationEmitter):
    """Emits the API module (e.g. protocol-proxy-api.d.ts)."""

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
        builder.emit_description(API_DESCRIPTION)
        builder.emit_open_block(f"export namespace {self.module_name}")

        builder.emit_line()
        builder.emit_open_block("export interface ProtocolApi")
        for domain in self.domains:
            # Field keeps the raw domain name
            builder.emit_line(f"{domain.domain}: {domain_api_name(domain.domain)};")
            builder.emit_line()
        builder.emit_close_block()
        builder.emit_line()

        for domain in self.domains:
            self._emit_domain_api(builder, domain)
        builder.emit_close_block()
        self.emit_suffix(builder, self.module_name)

    def _emit_domain_api(self, builder: TextBuilder, domain: Domain) -> None:
        builder.emit_line()
        builder.emit_open_block(f"export interface {domain_api_name(domain.domain)}")
        for command in domain.commands:
            self._emit_api_command(builder, command, domain.domain)
        for event in domain.events:
            self._emit_api_event(builder, event, domain.domain)
        builder.emit_close_block()

    def _emit_api_command(self, builder: TextBuilder, command: Command, domain_name: str) -> None:
        builder.emit_description(command.description)
        params = ""
        if command.parameters is not None:
            params = f"params: {qualified_declaration(self.protocol_prefix, domain_name, request_name(command.name))}"
        response = "void"
        if command.returns is not None:
            response = qualified_declaration(self.protocol_prefix, domain_name, response_name(command.name))
        builder.emit_line(f"{command.name}({params}): Promise<{response}>;")
        builder.emit_line()

    def _emit_api_event(self, builder: TextBuilder, event: Event, domain_name: str) -> None:
        # Events without parameters have no payload declaration to listen for
        if event.parameters is None:
            return

        builder.emit_description(event.description)
        payload = qualified_declaration(self.protocol_prefix, domain_name, event_payload_name(event.name))
        builder.emit_line(f"on(event: '{event.name}', listener: (params: {payload}) => void): void;")
        builder.emit_line()
