"""
Configuration for the declaration generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import ConfigError


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls what happens to the files in the output directory.
    """

    FORCE = "force"  # Default: overwrite the artifacts
    CHECK = "check"  # Compare with existing artifacts, write nothing


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: Whether to write the artifacts or only check them
        validate_before_write: Whether to check braces are balanced before writing
        atomic_write: Whether to write through a temporary file
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for declaration generation."""

    # Output file names, relative to the output directory
    protocol_file_name: str = "protocol.d.ts"
    mapping_file_name: str = "protocol-mapping.d.ts"
    api_file_name: str = "protocol-proxy-api.d.ts"

    # Namespace names of the mapping and API modules
    mapping_module_name: str = "ProtocolMapping"
    api_module_name: str = "ProtocolProxyApi"

    # Indentation unit of the generated text
    indent: str = "    "

    # Fail on shapes and references that cannot be interpreted instead of passing them through
    strict: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    try:
                        mode = OutputMode(mode)
                    except ValueError as e:
                        choices = ", ".join(m.value for m in OutputMode)
                        raise ConfigError(f"Invalid output mode '{mode}', expected one of: {choices}") from e
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "protocol_file_name": self.protocol_file_name,
            "mapping_file_name": self.mapping_file_name,
            "api_file_name": self.api_file_name,
            "mapping_module_name": self.mapping_module_name,
            "api_module_name": self.api_module_name,
            "indent": self.indent,
            "strict": self.strict,
            "add_generation_comment": self.add_generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
