"""BEL relationship vocabulary.

Maps every accepted spelling (long and short form) to the long-form
name used in normalised statements.
"""
from __future__ import annotations

# Long form -> short form (None when BEL defines no abbreviation).
RELATIONSHIPS: dict[str, str | None] = {
    "increases": "->",
    "decreases": "-|",
    "directlyIncreases": "=>",
    "directlyDecreases": "=|",
    "causesNoChange": "cnc",
    "regulates": "reg",
    "positiveCorrelation": "pos",
    "negativeCorrelation": "neg",
    "noCorrelation": None,
    "association": "--",
    "equivalentTo": "eq",
    "orthologous": None,
    "analogousTo": None,
    "transcribedTo": ":>",
    "translatedTo": ">>",
    "hasComponent": None,
    "hasComponents": None,
    "hasMember": None,
    "hasMembers": None,
    "hasVariant": None,
    "hasModification": None,
    "hasProduct": None,
    "hasReactant": None,
    "reactantIn": None,
    "includes": None,
    "isA": None,
    "subProcessOf": None,
    "rateLimitingStepOf": None,
    "biomarkerFor": None,
    "prognosticBiomarkerFor": None,
    "actsIn": None,
    "translocates": None,
}

_LOOKUP: dict[str, str] = {}
for _long, _short in RELATIONSHIPS.items():
    _LOOKUP[_long] = _long
    if _short is not None:
        _LOOKUP[_short] = _long


def canonical_relationship(token: str) -> str | None:
    """Return the long-form name for a relationship token, or None if unknown."""
    return _LOOKUP.get(token)
