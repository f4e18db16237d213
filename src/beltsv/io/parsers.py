"""Line-level TSV handling -- split lines into fields and build nanopubs."""
from __future__ import annotations

import re

from beltsv.core.models import (
    Citation,
    MalformedLine,
    Nanopub,
    RawNanopub,
    SummaryText,
)
from beltsv.statement.parser import StatementParser

FIELD_SEPARATOR = "\t"

# (citation type, citation id, summary text, statement text)
TSV_FIELD_COUNT = 4

TSV_EXTENSIONS = ("tsv", "tab")
TSV_MEDIA_TYPES = ("text/tab-separated-values",)

TsvFields = tuple[str, str, str, str]

# Surrounding whitespace other than tabs, so empty edge fields keep their slot.
_EDGE_WS_RE = re.compile(r"^[^\S\t]+|[^\S\t]+$")


def trim_line(line: str) -> str:
    """Strip leading/trailing whitespace from a line, keeping tabs."""
    return _EDGE_WS_RE.sub("", line)


def split_line(line: str, line_number: int) -> TsvFields | MalformedLine:
    """Split a trimmed line into the four positional TSV fields.

    Fields beyond the fourth are ignored.

    Args:
        line: Line text without its terminator.
        line_number: 1-based position of the line in the input.

    Returns:
        The four fields, or a MalformedLine if fewer than four are present.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < TSV_FIELD_COUNT:
        return MalformedLine(
            line_number=line_number,
            line=line,
            fields=tuple(parts),
            expected=TSV_FIELD_COUNT,
        )
    return (parts[0], parts[1], parts[2], parts[3])


def pad_fields(malformed: MalformedLine) -> TsvFields:
    """Fill the missing trailing fields of a malformed line with empty strings."""
    missing = TSV_FIELD_COUNT - len(malformed.fields)
    padded = malformed.fields + ("",) * missing
    return (padded[0], padded[1], padded[2], padded[3])


def build_nanopub(
    fields: TsvFields,
    parser: StatementParser,
    line_number: int | None = None,
) -> Nanopub:
    """Build a Nanopub from positional fields in two stages.

    The raw record is assembled first and handed to the statement parser;
    the final Nanopub is created with the parsed statement in place.

    Args:
        fields: (citation type, citation id, summary text, statement text).
        parser: Statement parser to apply to the raw record.
        line_number: Source line, passed to the parser for context.

    Returns:
        The finished Nanopub.

    Raises:
        StatementParseError: Propagated from the parser.
    """
    citation_type, citation_id, summary, statement_text = fields
    raw = RawNanopub(
        citation=Citation(type=citation_type, id=citation_id),
        summary_text=SummaryText(value=summary),
        statement_text=statement_text,
        line_number=line_number,
    )
    return Nanopub(
        citation=raw.citation,
        summary_text=raw.summary_text,
        bel_statement=parser.parse_statement(raw),
    )
