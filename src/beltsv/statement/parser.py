"""BEL statement parsing.

The reader hands every raw nanopub to a ``StatementParser``; the parser
sees the whole record so implementations can consult citation or
summary context. ``BelStatementParser`` is a structural parser: it checks
term and relationship shape and normalises spacing and relationship
spelling, but does not resolve namespaces or validate function
signatures.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from beltsv.core.exceptions import StatementParseError
from beltsv.core.models import BelStatement, RawNanopub
from beltsv.statement.relationships import canonical_relationship

_FUNCTION_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*\s*\(")
_TOKEN_RE = re.compile(r"[^\s()]+")


class StatementParser(ABC):
    """Abstract base class for statement parsers."""

    @abstractmethod
    def parse_statement(self, raw: RawNanopub) -> BelStatement:
        """Parse the raw statement text carried by a nanopub.

        Args:
            raw: The nanopub with its statement still unparsed.

        Returns:
            The parsed statement.

        Raises:
            StatementParseError: If the statement text is malformed.
        """


class BelStatementParser(StatementParser):
    """Structural BEL statement parser.

    Accepts ``term``, ``term relationship term`` and
    ``term relationship (statement)``. Output is idempotent: parsing the
    string form of a parsed statement yields the same statement.
    """

    def parse_statement(self, raw: RawNanopub) -> BelStatement:
        return self.parse(raw.statement_text)

    def parse(self, text: str) -> BelStatement:
        """Parse statement text.

        Args:
            text: Raw BEL statement text. Empty text gives the empty statement.

        Returns:
            Normalised BelStatement.

        Raises:
            StatementParseError: On any structural error.
        """
        text = text.strip()
        if not text:
            return BelStatement()

        statement, pos = _parse_statement_at(text, 0)
        pos = _skip_ws(text, pos)
        if pos < len(text):
            raise StatementParseError(
                f"Unexpected text at position {pos}: {text[pos:]!r}",
                statement=text,
                position=pos,
            )
        return statement


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _parse_statement_at(text: str, pos: int) -> tuple[BelStatement, int]:
    """Parse one statement starting at ``pos``; stop before a closing paren."""
    pos = _skip_ws(text, pos)
    subject, pos = _scan_term(text, pos)
    pos = _skip_ws(text, pos)
    if pos >= len(text) or text[pos] == ")":
        return BelStatement(subject=subject), pos

    match = _TOKEN_RE.match(text, pos)
    if match is None:
        raise StatementParseError(
            f"Expected a relationship at position {pos}",
            statement=text,
            position=pos,
        )
    relationship = canonical_relationship(match.group())
    if relationship is None:
        raise StatementParseError(
            f"Unknown relationship {match.group()!r} at position {pos}",
            statement=text,
            position=pos,
        )

    pos = _skip_ws(text, match.end())
    if pos >= len(text):
        raise StatementParseError(
            f"Missing object after relationship {match.group()!r}",
            statement=text,
            position=pos,
        )

    obj: str | BelStatement
    if text[pos] == "(":
        nested_start = pos
        obj, pos = _parse_statement_at(text, pos + 1)
        pos = _skip_ws(text, pos)
        if pos >= len(text) or text[pos] != ")":
            raise StatementParseError(
                f"Unclosed nested statement opened at position {nested_start}",
                statement=text,
                position=nested_start,
            )
        if obj.is_simple:
            raise StatementParseError(
                f"Nested statement at position {nested_start} has no relationship",
                statement=text,
                position=nested_start,
            )
        pos += 1
    else:
        obj, pos = _scan_term(text, pos)

    return BelStatement(subject=subject, relationship=relationship, object=obj), pos


def _scan_term(text: str, pos: int) -> tuple[str, int]:
    """Scan a ``function(args)`` term; return its normalised text and end index."""
    match = _FUNCTION_RE.match(text, pos)
    if match is None:
        raise StatementParseError(
            f"Expected a BEL term at position {pos}",
            statement=text,
            position=pos,
        )

    depth = 0
    in_quote = False
    escaped = False
    i = match.end() - 1
    while i < len(text):
        ch = text[i]
        if in_quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quote = False
        elif ch == '"':
            in_quote = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return _normalize_term(text[pos : i + 1]), i + 1
        i += 1

    if in_quote:
        raise StatementParseError(
            f"Unterminated quoted string in term starting at position {pos}",
            statement=text,
            position=pos,
        )
    raise StatementParseError(
        f"Unbalanced parentheses in term starting at position {pos}",
        statement=text,
        position=pos,
    )


def _normalize_term(raw: str) -> str:
    """Collapse whitespace outside quotes; drop it next to parentheses."""
    out: list[str] = []
    in_quote = False
    escaped = False
    pending_space = False
    for ch in raw:
        if in_quote:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quote = False
            continue
        if ch.isspace():
            pending_space = True
            continue
        if pending_space and out and out[-1] != "(" and ch not in "()":
            out.append(" ")
        pending_space = False
        out.append(ch)
        if ch == '"':
            in_quote = True
    return "".join(out)
