"""
Protocol schema parser that builds the schema model.

Phase 1 of the pipeline: turn the nested key/value schema documents into
immutable model nodes. Only the structure is checked; the contents of
descriptions, names and kinds are taken as they are.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ...gen_logging import get_logger
from ..errors import SchemaError
from .nodes import (
    ArrayShape,
    Command,
    Domain,
    Event,
    ObjectShape,
    PrimitiveShape,
    PropertyDef,
    RefShape,
    Shape,
    TypeDef,
)

logger = get_logger(__name__)


class ProtocolParser:
    """Parses protocol schema documents into a list of domains."""

    # Primitive kinds understood by the declaration language
    PRIMITIVE_KINDS = {"string", "integer", "number", "boolean", "any"}

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse_all(self, documents: Iterable[dict[str, Any]]) -> list[Domain]:
        """
        Parse several schema documents and concatenate their domains.

        Domains keep their first-seen order; duplicate domain names are not merged.
        """
        domains: list[Domain] = []
        for index, document in enumerate(documents):
            domains.extend(self.parse(document, f"#{index}"))

        seen: set[str] = set()
        for domain in domains:
            if domain.domain in seen:
                logger.warning("Domain %s is declared more than once", domain.domain)
            seen.add(domain.domain)

        missing = self.unresolved_references(domains)
        if missing:
            if self.strict:
                raise SchemaError(f"Unresolved references: {', '.join(missing)}")
            logger.warning("%d unresolved references, first: %s", len(missing), missing[0])
        return domains

    def parse(self, document: dict[str, Any], path: str = "#") -> list[Domain]:
        """
        Parse a single schema document.

        Args:
            document: The decoded schema ({"version": ..., "domains": [...]})
            path: Path prefix used in error messages

        Returns:
            The document's domains, in declaration order
        """
        self._expect_mapping(document, path)
        raw_domains = self._expect_list(document.get("domains"), f"{path}/domains")
        domains = [self._parse_domain(d, f"{path}/domains/{i}") for i, d in enumerate(raw_domains)]
        logger.debug("Parsed %d domains from %s", len(domains), path)
        return domains

    def unresolved_references(self, domains: list[Domain]) -> list[str]:
        """Return the sorted qualified references that do not name a declared type."""
        declared = {f"{d.domain}.{t.id}" for d in domains for t in d.types}
        missing: set[str] = set()
        for domain in domains:
            for shape in _domain_shapes(domain):
                for ref in _references(shape):
                    qualified = ref if "." in ref else f"{domain.domain}.{ref}"
                    if qualified not in declared:
                        missing.add(qualified)
        return sorted(missing)

    def _parse_domain(self, raw: Any, path: str) -> Domain:
        self._expect_mapping(raw, path)
        name = self._expect_key(raw, "domain", path)

        types = tuple(self._parse_type(t, f"{path}/types/{i}") for i, t in enumerate(self._optional_list(raw, "types", path)))
        commands = tuple(self._parse_command(c, f"{path}/commands/{i}") for i, c in enumerate(self._optional_list(raw, "commands", path)))
        events = tuple(self._parse_event(e, f"{path}/events/{i}") for i, e in enumerate(self._optional_list(raw, "events", path)))

        return Domain(
            domain=name,
            description=raw.get("description"),
            types=types,
            commands=commands,
            events=events,
            dependencies=tuple(self._optional_list(raw, "dependencies", path)),
            experimental=bool(raw.get("experimental", False)),
            deprecated=bool(raw.get("deprecated", False)),
        )

    def _parse_type(self, raw: Any, path: str) -> TypeDef:
        self._expect_mapping(raw, path)
        return TypeDef(
            id=self._expect_key(raw, "id", path),
            shape=self._parse_shape(raw, path),
            description=raw.get("description"),
            experimental=bool(raw.get("experimental", False)),
            deprecated=bool(raw.get("deprecated", False)),
        )

    def _parse_command(self, raw: Any, path: str) -> Command:
        self._expect_mapping(raw, path)
        return Command(
            name=self._expect_key(raw, "name", path),
            description=raw.get("description"),
            parameters=self._parse_properties(raw, "parameters", path),
            returns=self._parse_properties(raw, "returns", path),
            redirect=raw.get("redirect"),
            experimental=bool(raw.get("experimental", False)),
            deprecated=bool(raw.get("deprecated", False)),
        )

    def _parse_event(self, raw: Any, path: str) -> Event:
        self._expect_mapping(raw, path)
        return Event(
            name=self._expect_key(raw, "name", path),
            description=raw.get("description"),
            parameters=self._parse_properties(raw, "parameters", path),
            experimental=bool(raw.get("experimental", False)),
            deprecated=bool(raw.get("deprecated", False)),
        )

    def _parse_properties(self, raw: dict[str, Any], key: str, path: str) -> tuple[PropertyDef, ...] | None:
        """Parse a property list; an absent key stays None (distinct from an empty list)."""
        if key not in raw:
            return None
        items = self._expect_list(raw[key], f"{path}/{key}")
        return tuple(self._parse_property(p, f"{path}/{key}/{i}") for i, p in enumerate(items))

    def _parse_property(self, raw: Any, path: str) -> PropertyDef:
        self._expect_mapping(raw, path)
        return PropertyDef(
            name=self._expect_key(raw, "name", path),
            shape=self._parse_shape(raw, path),
            optional=bool(raw.get("optional", False)),
            description=raw.get("description"),
            experimental=bool(raw.get("experimental", False)),
            deprecated=bool(raw.get("deprecated", False)),
        )

    def _parse_shape(self, raw: Any, path: str) -> Shape:
        """
        Parse a shape node recursively.

        Args:
            raw: The shape dictionary (a type, property or array items record)
            path: Current path in schema (for error messages)

        Returns:
            Appropriate Shape subclass
        """
        self._expect_mapping(raw, path)

        # Handle $ref
        if "$ref" in raw:
            return RefShape(target=str(raw["$ref"]), source_path=path)

        kind = raw.get("type")
        if kind is None:
            if self.strict:
                raise SchemaError("Shape has neither '$ref' nor 'type'", path)
            logger.debug("Shape without type at %s degrades to any", path)
            return PrimitiveShape(kind="any", source_path=path)

        if kind == "array":
            if "items" not in raw:
                if self.strict:
                    raise SchemaError("Array shape has no 'items'", path)
                return ArrayShape(items=PrimitiveShape(kind="any", source_path=f"{path}/items"), source_path=path)
            return ArrayShape(items=self._parse_shape(raw["items"], f"{path}/items"), source_path=path)

        if kind == "object":
            if "properties" not in raw:
                return ObjectShape(properties=None, source_path=path)
            props = self._expect_list(raw["properties"], f"{path}/properties")
            return ObjectShape(
                properties=tuple(self._parse_property(p, f"{path}/properties/{i}") for i, p in enumerate(props)),
                source_path=path,
            )

        if kind not in self.PRIMITIVE_KINDS and self.strict:
            raise SchemaError(f"Unknown primitive kind '{kind}'", path)

        enum = raw.get("enum")
        if enum is not None:
            enum = tuple(str(v) for v in self._expect_list(enum, f"{path}/enum"))
        return PrimitiveShape(kind=str(kind), enum=enum, source_path=path)

    def _expect_mapping(self, value: Any, path: str) -> None:
        if not isinstance(value, dict):
            raise SchemaError(f"Expected an object, got {type(value).__name__}", path)

    def _expect_list(self, value: Any, path: str) -> list[Any]:
        if not isinstance(value, list):
            raise SchemaError(f"Expected a list, got {type(value).__name__}", path)
        return value

    def _expect_key(self, raw: dict[str, Any], key: str, path: str) -> str:
        if key not in raw:
            raise SchemaError(f"Missing required key '{key}'", path)
        return str(raw[key])

    def _optional_list(self, raw: dict[str, Any], key: str, path: str) -> list[Any]:
        if key not in raw:
            return []
        return self._expect_list(raw[key], f"{path}/{key}")


def _domain_shapes(domain: Domain) -> Iterable[Shape]:
    for type_def in domain.types:
        yield type_def.shape
    for command in domain.commands:
        for prop in (command.parameters or ()) + (command.returns or ()):
            yield prop.shape
    for event in domain.events:
        for prop in event.parameters or ():
            yield prop.shape


def _references(shape: Shape) -> Iterable[str]:
    if isinstance(shape, RefShape):
        yield shape.target
    elif isinstance(shape, ArrayShape) and shape.items is not None:
        yield from _references(shape.items)
    elif isinstance(shape, ObjectShape):
        for prop in shape.properties or ():
            yield from _references(prop.shape)


def load_schema_files(paths: Iterable[str | Path]) -> list[dict[str, Any]]:
    """Read JSON schema documents from disk, in the given order."""
    documents = []
    for path in paths:
        logger.debug("Reading schema %s", path)
        with open(path, encoding="utf-8") as f:
            documents.append(json.load(f))
    return documents
