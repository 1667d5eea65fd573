"""
Writer module - persists generated artifacts.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, validate_declarations, write_plain

__all__ = [
    "AtomicWriter",
    "validate_declarations",
    "write_plain",
]
