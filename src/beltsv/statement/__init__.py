"""BEL statement parsing for beltsv."""
from beltsv.statement.parser import BelStatementParser, StatementParser
from beltsv.statement.relationships import RELATIONSHIPS, canonical_relationship

__all__ = [
    "RELATIONSHIPS",
    "BelStatementParser",
    "StatementParser",
    "canonical_relationship",
]
