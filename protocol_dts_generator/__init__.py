"""Protocol schema to declaration file generator

Translates protocol schemas (domains of types, commands and events) into
three declaration modules: the protocol type namespace, the event/command
mapping, and the proxy API interfaces.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    EmitterError,
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    ProtocolGenerator,
    ProtocolGeneratorError,
    ProtocolParser,
    SchemaError,
)

__all__ = [
    "ProtocolGenerator",
    "ProtocolParser",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "ProtocolGeneratorError",
    "SchemaError",
    "EmitterError",
    "GenerationError",
    "AtomicWriter",
]
