"""Core enumerations for beltsv."""
from enum import StrEnum


class MalformedLinePolicy(StrEnum):
    """How the reader treats a line with fewer than four fields."""

    STRICT = "strict"    # Raise MalformedLineError on the first bad line
    LENIENT = "lenient"  # Pad missing trailing fields with ""
    SKIP = "skip"        # Drop the line and keep reading
