"""beltsv -- tab-separated translator for BEL nanopubs.

Reads and writes nanopubs (citation, summary text, BEL statement) as
one tab-separated line per record.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("beltsv")
except PackageNotFoundError:
    # Fallback for source-only usage before installation.
    __version__ = "0.1.0"
__license__ = "Apache-2.0"
