"""
Pipeline - protocol schema to declaration file generator.

1. Parser: Parse schema documents into the immutable schema model
2. Emitters: Three passes (protocol, mapping, API) over the same domains,
   each rendering into its own TextBuilder
3. Writer: Persist each artifact atomically (or compare in check mode)
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import ConfigError, EmitterError, GenerationError, ProtocolGeneratorError, SchemaError
from .generator import ProtocolGenerator
from .schema_ast import ProtocolParser, load_schema_files
from .writer import AtomicWriter

__all__ = [
    "ProtocolGenerator",
    "ProtocolParser",
    "load_schema_files",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "ProtocolGeneratorError",
    "SchemaError",
    "ConfigError",
    "EmitterError",
    "GenerationError",
    "AtomicWriter",
]
