"""TSV reader -- text to Nanopub records."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from beltsv.config import TsvOptions, coerce_options
from beltsv.core.enums import MalformedLinePolicy
from beltsv.core.exceptions import MalformedLineError, UnsupportedFormatError
from beltsv.core.models import MalformedLine, Nanopub
from beltsv.io.parsers import (
    TSV_EXTENSIONS,
    TsvFields,
    build_nanopub,
    pad_fields,
    split_line,
    trim_line,
)
from beltsv.statement.parser import BelStatementParser, StatementParser

logger = structlog.get_logger(__name__)

SUPPORTED_EXTENSIONS = {f".{ext}" for ext in TSV_EXTENSIONS}


def read_nanopubs(
    data: str,
    options: TsvOptions | Mapping[str, Any] | None = None,
    parser: StatementParser | None = None,
) -> list[Nanopub]:
    """Read nanopubs from tab-separated text.

    Each non-empty line yields one Nanopub, in input order. A line of
    only tabs is not empty: it carries empty fields. Reading is
    eager and all-or-nothing: any error aborts the whole call.

    Args:
        data: TSV text, one nanopub per line.
        options: Reader options; see ``TsvOptions``.
        parser: Statement parser. Defaults to ``BelStatementParser``.

    Returns:
        List of Nanopub objects.

    Raises:
        MalformedLineError: A line has fewer than four fields and the
            policy is ``strict``.
        StatementParseError: Propagated from the statement parser.
    """
    opts = coerce_options(options)
    statement_parser = parser or BelStatementParser()

    nanopubs: list[Nanopub] = []
    n_skipped = 0
    for line_number, line in enumerate(data.split("\n"), start=1):
        trimmed = trim_line(line)
        if not trimmed:
            continue
        result = split_line(trimmed, line_number)
        if isinstance(result, MalformedLine):
            fields = _handle_malformed(result, opts.on_malformed)
            if fields is None:
                n_skipped += 1
                continue
        else:
            fields = result
        nanopubs.append(build_nanopub(fields, statement_parser, line_number))

    logger.info("read_nanopubs", n_records=len(nanopubs), n_skipped=n_skipped)
    return nanopubs


def _handle_malformed(
    malformed: MalformedLine, policy: MalformedLinePolicy,
) -> TsvFields | None:
    """Apply the malformed-line policy.

    Returns:
        Padded fields for ``lenient``, None for ``skip``.

    Raises:
        MalformedLineError: For ``strict``.
    """
    if policy == MalformedLinePolicy.STRICT:
        raise MalformedLineError(
            malformed.line_number,
            malformed.line,
            malformed.n_fields,
            malformed.expected,
        )
    if policy == MalformedLinePolicy.SKIP:
        logger.warning(
            "malformed_line_skipped",
            line_number=malformed.line_number,
            n_fields=malformed.n_fields,
        )
        return None
    logger.warning(
        "malformed_line_padded",
        line_number=malformed.line_number,
        n_fields=malformed.n_fields,
    )
    return pad_fields(malformed)


def read_nanopubs_file(
    path: Path,
    options: TsvOptions | Mapping[str, Any] | None = None,
    parser: StatementParser | None = None,
) -> list[Nanopub]:
    """Read nanopubs from a ``.tsv`` or ``.tab`` file.

    Args:
        path: Path to the input file.
        options: Reader options; ``encoding`` selects the file encoding.
        parser: Statement parser. Defaults to ``BelStatementParser``.

    Returns:
        List of Nanopub objects.

    Raises:
        UnsupportedFormatError: If the file extension is not recognised.
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    ext = path.suffix.lower()

    # Check extension first so unsupported formats fail fast
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(ext, sorted(SUPPORTED_EXTENSIONS))

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    opts = coerce_options(options)
    text = _read_text_with_fallback(path, opts.encoding)
    nanopubs = read_nanopubs(text, opts, parser)
    logger.info("read_nanopubs_file", path=str(path), n_records=len(nanopubs))
    return nanopubs


def _read_text_with_fallback(path: Path, encoding: str) -> str:
    """Read a text file, falling back to latin-1 on decode errors.

    A UTF-8 byte order mark is dropped when the encoding is UTF-8.
    """
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError:
        logger.warning("encoding_fallback", path=str(path), encoding=encoding)
        return path.read_text(encoding="latin-1")
