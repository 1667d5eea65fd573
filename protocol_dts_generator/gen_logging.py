"""
Logging configuration for the declaration generator.

Usage in pipeline modules:
    from protocol_dts_generator.gen_logging import get_logger
    logger = get_logger(__name__)

The root logger name is "protocol_dts_generator". Log levels are controlled by the CLI.
"""

from __future__ import annotations

import logging

import click

_LOGGER_NAME = "protocol_dts_generator"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a child logger under the protocol_dts_generator hierarchy.

    Args:
        name: Module __name__, or None for the root logger of the package.

    Returns:
        logging.Logger instance
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    # "protocol_dts_generator.pipeline.generator" -> "protocol_dts_generator.generator"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the package logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG
        (default)       -> INFO    (one line per written artifact)
        --quiet / -q    -> WARNING

    Args:
        verbose: Enable DEBUG-level output.
        quiet:   Suppress INFO output (WARNING+ only).
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called multiple times
    if any(isinstance(h, _ClickEchoHandler) for h in root_logger.handlers):
        return

    root_logger.addHandler(_ClickEchoHandler())


class _ClickEchoHandler(logging.Handler):
    """Writes the bare message to whatever click considers stderr at the time of the call."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(record.getMessage(), err=True)
        except Exception:
            self.handleError(record)
