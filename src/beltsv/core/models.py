"""Core Pydantic data models for beltsv."""
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Citation(BaseModel):
    """Source document a nanopub is drawn from.

    Attributes:
        type: Citation type label (e.g., "PMID", "PubMed", "DOI").
        id: Identifier within the citation type (e.g., "12345").
    """

    type: str = ""  # noqa: A003
    id: str = ""  # noqa: A003

    model_config = {"frozen": True}


class SummaryText(BaseModel):
    """Free-form provenance text supporting a statement.

    Attributes:
        value: The summary text as written by the curator.
    """

    value: str = ""

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.value


class BelStatement(BaseModel):
    """A parsed, normalised BEL statement.

    A statement is either a lone subject term, or a subject term related
    to an object that is itself a term or a nested statement. The empty
    statement (no subject) renders as an empty string.

    Attributes:
        subject: Normalised subject term, e.g. ``p(HGNC:AKT1)``.
        relationship: Long-form relationship name, e.g. ``increases``.
        object: Object term or nested statement.
    """

    subject: str = ""
    relationship: str | None = None
    object: str | BelStatement | None = None  # noqa: A003

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_triple(self) -> BelStatement:
        if (self.relationship is None) != (self.object is None):
            msg = "relationship and object must be given together"
            raise ValueError(msg)
        if self.relationship is not None and not self.subject:
            msg = "a relationship requires a subject"
            raise ValueError(msg)
        return self

    @property
    def is_empty(self) -> bool:
        """True when the statement carries no subject."""
        return not self.subject

    @property
    def is_simple(self) -> bool:
        """True for a subject-only statement."""
        return bool(self.subject) and self.relationship is None

    def __str__(self) -> str:
        if self.relationship is None or self.object is None:
            return self.subject
        if isinstance(self.object, BelStatement):
            return f"{self.subject} {self.relationship} ({self.object})"
        return f"{self.subject} {self.relationship} {self.object}"


class RawNanopub(BaseModel):
    """First construction stage: positional fields with the statement unparsed.

    Attributes:
        citation: Citation built from the first two fields.
        summary_text: Summary built from the third field.
        statement_text: Raw statement text from the fourth field.
        line_number: 1-based source line, when read from text.
    """

    citation: Citation
    summary_text: SummaryText
    statement_text: str = ""
    line_number: int | None = None

    model_config = {"frozen": True}


class Nanopub(BaseModel):
    """A BEL nanopub: citation, supporting summary, and parsed statement.

    Built only once the statement has been parsed and never mutated
    afterwards.

    Attributes:
        citation: Source document.
        summary_text: Supporting text.
        bel_statement: Parsed statement.
    """

    citation: Citation
    summary_text: SummaryText = Field(default_factory=SummaryText)
    bel_statement: BelStatement = Field(default_factory=BelStatement)

    model_config = {"frozen": True}


class MalformedLine(BaseModel):
    """Result variant for a line that lacks the expected number of fields.

    Attributes:
        line_number: 1-based source line.
        line: The trimmed line text.
        fields: Fields actually present.
        expected: Number of fields required.
    """

    line_number: int
    line: str
    fields: tuple[str, ...] = ()
    expected: int = 4

    model_config = {"frozen": True}

    @property
    def n_fields(self) -> int:
        """Number of fields present on the line."""
        return len(self.fields)
