"""
Schema model node definitions for protocol schemas.

These nodes represent the parsed structure of a protocol schema
(domains, types, commands and events) before any emission.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Shape:
    """Base class for all shape nodes."""

    # Original source location in schema (for error messages)
    source_path: str = ""


@dataclass(frozen=True)
class RefShape(Shape):
    """Represents a $ref to a type id (possibly domain-qualified, e.g. "DOM.NodeId")."""

    target: str = ""


@dataclass(frozen=True)
class ArrayShape(Shape):
    """Represents an array type."""

    items: Shape | None = None


@dataclass(frozen=True)
class ObjectShape(Shape):
    """Represents an object type.

    properties is None when the schema declares no properties, which
    makes the object open ("any"-keyed).
    """

    properties: tuple[PropertyDef, ...] | None = None


@dataclass(frozen=True)
class PrimitiveShape(Shape):
    """Represents a primitive type (string, integer, number, boolean, any)."""

    kind: str = ""
    enum: tuple[str, ...] | None = None


@dataclass(frozen=True)
class PropertyDef:
    """Represents a named, possibly optional, property of an object, command or event."""

    name: str
    shape: Shape
    optional: bool = False
    description: str | None = None
    experimental: bool = False
    deprecated: bool = False


@dataclass(frozen=True)
class TypeDef:
    """Represents a named type declared by a domain."""

    id: str
    shape: Shape
    description: str | None = None
    experimental: bool = False
    deprecated: bool = False


@dataclass(frozen=True)
class Command:
    """Represents a command with optional parameters and returns."""

    name: str
    description: str | None = None
    parameters: tuple[PropertyDef, ...] | None = None
    returns: tuple[PropertyDef, ...] | None = None
    redirect: str | None = None
    experimental: bool = False
    deprecated: bool = False


@dataclass(frozen=True)
class Event:
    """Represents an event with optional parameters."""

    name: str
    description: str | None = None
    parameters: tuple[PropertyDef, ...] | None = None
    experimental: bool = False
    deprecated: bool = False


@dataclass(frozen=True)
class Domain:
    """Represents a protocol domain."""

    domain: str
    description: str | None = None
    types: tuple[TypeDef, ...] = field(default_factory=tuple)
    commands: tuple[Command, ...] = field(default_factory=tuple)
    events: tuple[Event, ...] = field(default_factory=tuple)
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    experimental: bool = False
    deprecated: bool = False
