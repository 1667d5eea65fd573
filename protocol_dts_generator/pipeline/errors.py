"""
Exceptions raised by the declaration generator pipeline.
"""

from __future__ import annotations


class ProtocolGeneratorError(Exception):
    """Base class for all generator errors."""

    pass


class SchemaError(ProtocolGeneratorError):
    """Raised when a schema document does not have the expected shape.

    This can happen when:
    - A record is not a mapping, or a list is not a list
    - A required key (domain, id, name) is missing
    - Strict mode is enabled and a shape or reference cannot be interpreted
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class EmitterError(ProtocolGeneratorError):
    """Raised when the text builder is used inconsistently (e.g. unbalanced blocks)."""

    pass


class GenerationError(ProtocolGeneratorError):
    """Raised when a generated artifact fails validation or is stale in check mode."""

    pass


class ConfigError(ProtocolGeneratorError):
    """Raised when a configuration value cannot be interpreted."""

    pass
