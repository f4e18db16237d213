"""Shared pytest fixtures for beltsv tests."""
from __future__ import annotations

import pytest

from beltsv.core.models import BelStatement, Citation, Nanopub, SummaryText
from beltsv.statement.parser import BelStatementParser


@pytest.fixture
def parser() -> BelStatementParser:
    """Default structural BEL parser."""
    return BelStatementParser()


@pytest.fixture
def akt_nanopub() -> Nanopub:
    """The nanopub encoded by ``AKT_LINE``."""
    return Nanopub(
        citation=Citation(type="PMID", id="12345"),
        summary_text=SummaryText(value="some support text"),
        bel_statement=BelStatement(
            subject="p(HGNC:AKT1)",
            relationship="increases",
            object="p(HGNC:AKT2)",
        ),
    )


@pytest.fixture
def sample_nanopubs(akt_nanopub: Nanopub) -> list[Nanopub]:
    """Two nanopubs, the second with a nested statement."""
    return [
        akt_nanopub,
        Nanopub(
            citation=Citation(type="DOI", id="10.1038/nature01234"),
            summary_text=SummaryText(value="TNF induces apoptosis via CASP8."),
            bel_statement=BelStatement(
                subject="p(HGNC:TNF)",
                relationship="increases",
                object=BelStatement(
                    subject="act(p(HGNC:CASP8))",
                    relationship="increases",
                    object='bp(GOBP:"apoptotic process")',
                ),
            ),
        ),
    ]
