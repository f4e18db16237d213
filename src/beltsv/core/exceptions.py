"""Custom exception hierarchy for beltsv.

Never use bare except clauses. Always catch specific exceptions.
"""
from __future__ import annotations


class BelTsvError(Exception):
    """Base exception for all beltsv errors."""


# I/O exceptions
class IOError(BelTsvError):  # noqa: A001
    """Base for file and wire-format failures."""


class UnsupportedFormatError(IOError):
    """Unsupported file format or extension."""

    def __init__(self, format: str, supported: list[str] | None = None) -> None:  # noqa: A002
        supported_str = ", ".join(supported) if supported else "unknown"
        super().__init__(f"Unsupported format '{format}'. Supported: {supported_str}")
        self.format = format
        self.supported = supported or []


class MalformedLineError(IOError):
    """A TSV line does not carry the expected number of fields."""

    def __init__(
        self,
        line_number: int,
        line: str,
        n_fields: int,
        expected: int = 4,
    ) -> None:
        super().__init__(
            f"Line {line_number}: expected {expected} tab-separated fields, "
            f"got {n_fields}: {line!r}"
        )
        self.line_number = line_number
        self.line = line
        self.n_fields = n_fields
        self.expected = expected


# Statement exceptions
class StatementParseError(BelTsvError):
    """A BEL statement could not be parsed."""

    def __init__(
        self,
        message: str,
        statement: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.statement = statement
        self.position = position


# Registry exceptions
class RegistryError(BelTsvError):
    """Base for translator registry failures."""


class DuplicateTranslatorError(RegistryError):
    """A translator id was registered twice."""

    def __init__(self, translator_id: str) -> None:
        super().__init__(f"Translator '{translator_id}' is already registered")
        self.translator_id = translator_id


class UnknownTranslatorError(RegistryError, UnsupportedFormatError):
    """No registered translator matches an id, extension, or media type."""


class ConfigError(BelTsvError):
    """Invalid translator configuration."""
