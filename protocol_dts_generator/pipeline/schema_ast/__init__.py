"""
Schema model module.

Contains the node definitions and parser for protocol schemas.
"""

from __future__ import annotations

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
from .parser import ProtocolParser, load_schema_files

__all__ = [
    "Shape",
    "RefShape",
    "ArrayShape",
    "ObjectShape",
    "PrimitiveShape",
    "PropertyDef",
    "TypeDef",
    "Command",
    "Event",
    "Domain",
    "ProtocolParser",
    "load_schema_files",
]
