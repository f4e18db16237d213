"""Tests for io/parsers.py -- line splitting and two-stage construction."""
from __future__ import annotations

import pytest

from beltsv.core.exceptions import StatementParseError
from beltsv.core.models import BelStatement, MalformedLine, RawNanopub
from beltsv.io.parsers import (
    build_nanopub,
    pad_fields,
    split_line,
    trim_line,
)
from beltsv.statement.parser import BelStatementParser, StatementParser


class TestSplitLine:
    """Field splitting and arity checks."""

    def test_four_fields(self) -> None:
        assert split_line("a\tb\tc\td", 1) == ("a", "b", "c", "d")

    def test_extra_fields_ignored(self) -> None:
        assert split_line("a\tb\tc\td\te\tf", 1) == ("a", "b", "c", "d")

    def test_empty_fields_keep_position(self) -> None:
        assert split_line("\t\tc\td", 1) == ("", "", "c", "d")

    def test_too_few_fields(self) -> None:
        result = split_line("a\tb", 5)
        assert isinstance(result, MalformedLine)
        assert result.line_number == 5
        assert result.fields == ("a", "b")
        assert result.n_fields == 2

    def test_pad_fields(self) -> None:
        malformed = split_line("a\tb", 1)
        assert isinstance(malformed, MalformedLine)
        assert pad_fields(malformed) == ("a", "b", "", "")


class TestTrimLine:
    """Edge whitespace trimming."""

    def test_strips_spaces_and_carriage_return(self) -> None:
        assert trim_line("  a\tb\tc\td \r") == "a\tb\tc\td"

    def test_keeps_edge_tabs(self) -> None:
        assert trim_line("\tb\tc\t") == "\tb\tc\t"


class _RecordingParser(StatementParser):
    """Captures the raw record it is handed."""

    def __init__(self) -> None:
        self.seen: list[RawNanopub] = []

    def parse_statement(self, raw: RawNanopub) -> BelStatement:
        self.seen.append(raw)
        return BelStatement(subject=raw.statement_text.upper())


class TestBuildNanopub:
    """Two-stage construction."""

    def test_parser_sees_whole_raw_record(self) -> None:
        parser = _RecordingParser()
        nanopub = build_nanopub(("PMID", "1", "support", "p(a:b)"), parser, 9)

        assert len(parser.seen) == 1
        raw = parser.seen[0]
        assert raw.citation.type == "PMID"
        assert str(raw.summary_text) == "support"
        assert raw.statement_text == "p(a:b)"
        assert raw.line_number == 9
        assert nanopub.bel_statement.subject == "P(A:B)"

    def test_fields_mapped_positionally(self) -> None:
        nanopub = build_nanopub(
            ("PMID", "12345", "some support text", "p(HGNC:AKT1) -> p(HGNC:AKT2)"),
            BelStatementParser(),
        )
        assert nanopub.citation.type == "PMID"
        assert nanopub.citation.id == "12345"
        assert nanopub.summary_text.value == "some support text"
        assert str(nanopub.bel_statement) == "p(HGNC:AKT1) increases p(HGNC:AKT2)"

    def test_parser_errors_propagate(self) -> None:
        with pytest.raises(StatementParseError):
            build_nanopub(("PMID", "1", "s", "p(HGNC:AKT1"), BelStatementParser())
