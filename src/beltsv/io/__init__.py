"""beltsv I/O module -- TSV reader, writer, and line helpers."""
from beltsv.io.parsers import build_nanopub, split_line
from beltsv.io.readers import read_nanopubs, read_nanopubs_file
from beltsv.io.writers import format_nanopub, write_nanopubs, write_nanopubs_file

__all__ = [
    "build_nanopub",
    "format_nanopub",
    "read_nanopubs",
    "read_nanopubs_file",
    "split_line",
    "write_nanopubs",
    "write_nanopubs_file",
]
