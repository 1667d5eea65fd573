"""
Emission passes producing the declaration modules.
"""

from __future__ import annotations

from .api_emitter import ApiModuleEmitter
from .base import DeclarationEmitter
from .mapping_emitter import MappingModuleEmitter, is_weak_interface
from .protocol_emitter import ProtocolModuleEmitter
from .templates import ModuleTemplates
from .text_builder import TextBuilder
from .type_resolver import TypeShapeResolver

__all__ = [
    "DeclarationEmitter",
    "ProtocolModuleEmitter",
    "MappingModuleEmitter",
    "ApiModuleEmitter",
    "ModuleTemplates",
    "TextBuilder",
    "TypeShapeResolver",
    "is_weak_interface",
]
