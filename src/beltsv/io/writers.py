"""TSV writer -- Nanopub records to tab-separated text."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import structlog

from beltsv.config import TsvOptions, coerce_options
from beltsv.core.exceptions import UnsupportedFormatError
from beltsv.core.models import Nanopub
from beltsv.io.parsers import FIELD_SEPARATOR, TSV_EXTENSIONS

logger = structlog.get_logger(__name__)

SUPPORTED_WRITE_EXTENSIONS = {f".{ext}" for ext in TSV_EXTENSIONS}

_LINE_BREAKS = str.maketrans("", "", "\r\n")


def format_nanopub(nanopub: Nanopub) -> str:
    """Serialise one nanopub to a TSV line, including the trailing newline.

    Line breaks are removed from the summary so each record stays on one
    line. Any object exposing ``citation``, ``summary_text`` and
    ``bel_statement`` is accepted.
    """
    return FIELD_SEPARATOR.join(
        [
            nanopub.citation.type,
            nanopub.citation.id,
            str(nanopub.summary_text).translate(_LINE_BREAKS),
            str(nanopub.bel_statement),
        ]
    ) + "\n"


def write_nanopubs(
    nanopubs: Iterable[Nanopub],
    output: TextIO | None = None,
    options: TsvOptions | Mapping[str, Any] | None = None,
) -> TextIO:
    """Append one TSV line per nanopub to ``output``.

    The iterable is consumed lazily and each line is written as soon as
    it is formatted. The sink is neither flushed nor closed.

    Args:
        nanopubs: Records to write, in output order.
        output: Text sink. A new StringIO is used when omitted.
        options: Accepted for symmetry with the reader; the line format
            has no options, so they are not consulted here.

    Returns:
        The sink that was written to.
    """
    sink: TextIO = output if output is not None else StringIO()

    n_records = 0
    for nanopub in nanopubs:
        sink.write(format_nanopub(nanopub))
        n_records += 1

    logger.info("write_nanopubs", n_records=n_records)
    return sink


def write_nanopubs_file(
    nanopubs: Iterable[Nanopub],
    path: Path,
    options: TsvOptions | Mapping[str, Any] | None = None,
) -> Path:
    """Write nanopubs to a ``.tsv`` or ``.tab`` file.

    Args:
        nanopubs: Records to write.
        path: Output file path. Parent directories are created.
        options: Writer options; ``encoding`` selects the file encoding.

    Returns:
        Path to the written file.

    Raises:
        UnsupportedFormatError: If the extension is not recognised.
    """
    path = Path(path)
    ext = path.suffix.lower()
    if ext not in SUPPORTED_WRITE_EXTENSIONS:
        raise UnsupportedFormatError(ext, sorted(SUPPORTED_WRITE_EXTENSIONS))

    opts = coerce_options(options)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=opts.encoding, newline="") as f:
        write_nanopubs(nanopubs, f, opts)

    logger.info("write_nanopubs_file", path=str(path))
    return path
