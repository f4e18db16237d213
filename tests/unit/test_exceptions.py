"""Tests for the custom exception hierarchy."""
from beltsv.core.exceptions import (
    BelTsvError,
    ConfigError,
    DuplicateTranslatorError,
    IOError as BTIOError,
    MalformedLineError,
    RegistryError,
    StatementParseError,
    UnknownTranslatorError,
    UnsupportedFormatError,
)


def test_base_exception() -> None:
    err = BelTsvError("base error")
    assert str(err) == "base error"


def test_unsupported_format() -> None:
    err = UnsupportedFormatError("xyz", supported=[".tab", ".tsv"])
    assert "xyz" in str(err)
    assert err.format == "xyz"
    assert err.supported == [".tab", ".tsv"]
    assert isinstance(err, BTIOError)


def test_malformed_line_error_stores_context() -> None:
    err = MalformedLineError(7, "PMID\t1", n_fields=2)
    assert err.line_number == 7
    assert err.n_fields == 2
    assert err.expected == 4
    assert "Line 7" in str(err)
    assert isinstance(err, BTIOError)


def test_statement_parse_error_stores_statement() -> None:
    err = StatementParseError("bad", statement="p(A", position=0)
    assert err.statement == "p(A"
    assert err.position == 0
    assert isinstance(err, BelTsvError)


def test_registry_errors() -> None:
    dup = DuplicateTranslatorError("tsv")
    assert dup.translator_id == "tsv"
    assert isinstance(dup, RegistryError)

    unknown = UnknownTranslatorError("xml", ["tsv"])
    assert isinstance(unknown, RegistryError)
    assert isinstance(unknown, UnsupportedFormatError)
    assert unknown.format == "xml"


def test_config_error_is_base() -> None:
    assert isinstance(ConfigError("bad"), BelTsvError)
