"""
Program context: configuration and the fatal-error sink validators report to.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol

from .security.redaction import redact_value
from .utils.logging import get_logger
from .validation.errors import ValidationError


class ConfigurationError(ValueError):
    """Raised when program configuration values cannot be parsed."""


class ErrorReporter(Protocol):
    def fatal_error(self, error: ValidationError) -> None:
        """
        Receive a setup error reported while a validator is constructed.
        """


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def _parse_level(value: str, *, key: str) -> int:
    stripped = value.strip()
    if stripped.isdigit():
        return int(stripped)
    level = logging.getLevelName(stripped.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level for '{key}': {value!r}")
    return level


@dataclass
class ProgramConfig:
    """
    Behaviour switches for a ``Program``.
    """

    exit_on_fatal: bool = False
    exit_code: int = 2
    array_separator: str = ","
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        if not self.array_separator:
            raise ConfigurationError("array_separator must not be empty")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], **kwargs: Any) -> "ProgramConfig":
        """
        Build a config from string values keyed ``exit_on_fatal``,
        ``exit_code``, ``array_separator`` and ``log_level``. Keyword
        arguments win over mapping entries.
        """

        parsed: dict[str, Any] = {}
        if "exit_on_fatal" in values:
            parsed["exit_on_fatal"] = _parse_bool(values["exit_on_fatal"], key="exit_on_fatal")
        if "exit_code" in values:
            parsed["exit_code"] = _parse_int(values["exit_code"], key="exit_code")
        if "array_separator" in values:
            parsed["array_separator"] = values["array_separator"]
        if "log_level" in values:
            parsed["log_level"] = _parse_level(values["log_level"], key="log_level")
        parsed.update(kwargs)
        return cls(**parsed)

    @classmethod
    def from_env(cls, prefix: str = "ARGCHECK_", **kwargs: Any) -> "ProgramConfig":
        """
        Build a config from ``<prefix>EXIT_ON_FATAL`` style environment variables.
        """

        values = {}
        for key in ("exit_on_fatal", "exit_code", "array_separator", "log_level"):
            raw = os.getenv(f"{prefix}{key.upper()}")
            if raw is not None and raw != "":
                values[key] = raw
        return cls.from_mapping(values, **kwargs)


class Program:
    """
    Default error reporter.

    Fatal errors are logged and collected; with ``exit_on_fatal`` the first
    one also terminates the program with ``config.exit_code``.
    """

    def __init__(self, name: str = "program", config: Optional[ProgramConfig] = None) -> None:
        self.name = name
        self.config = config or ProgramConfig()
        self.fatal_errors: List[ValidationError] = []
        self.logger = get_logger(f"program.{name}")
        self.logger.setLevel(self.config.log_level)

    def fatal_error(self, error: ValidationError) -> None:
        self.fatal_errors.append(error)
        self.logger.error(
            "%s: %s",
            self.name,
            error.message,
            extra={"validator": repr(redact_value(error.validator))},
        )
        if self.config.exit_on_fatal:
            raise SystemExit(self.config.exit_code)

    @property
    def has_fatal_errors(self) -> bool:
        return bool(self.fatal_errors)
