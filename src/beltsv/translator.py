"""TSV translator plugin: static descriptor, codec object, and factory."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

from pydantic import BaseModel

from beltsv.config import TsvOptions, coerce_options
from beltsv.core.models import Nanopub
from beltsv.io.parsers import TSV_EXTENSIONS, TSV_MEDIA_TYPES
from beltsv.io.readers import read_nanopubs
from beltsv.io.writers import write_nanopubs
from beltsv.statement.parser import BelStatementParser, StatementParser


class TranslatorDescriptor(BaseModel):
    """Static metadata a translator registers with the host framework.

    Attributes:
        id: Short unique identifier (e.g., "tsv").
        name: Human-readable name.
        description: One-paragraph description.
        media_types: Media types the translator handles.
        extensions: File extensions without a leading dot.
    """

    id: str  # noqa: A003
    name: str
    description: str = ""
    media_types: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()

    model_config = {"frozen": True}


TSV_DESCRIPTOR = TranslatorDescriptor(
    id="tsv",
    name="Tab-separated Translator",
    description=(
        "Read/write functionality for BEL nanopubs stored in tab-separated "
        "files: citation type, citation id, summary text, and BEL statement."
    ),
    media_types=TSV_MEDIA_TYPES,
    extensions=TSV_EXTENSIONS,
)


class Translator(ABC):
    """Abstract base class for nanopub format translators."""

    @property
    @abstractmethod
    def descriptor(self) -> TranslatorDescriptor:
        """Static metadata for this translator."""

    @abstractmethod
    def read(self, data: str) -> list[Nanopub]:
        """Decode text into nanopubs."""

    @abstractmethod
    def write(
        self, nanopubs: Iterable[Nanopub], output: TextIO | None = None,
    ) -> TextIO:
        """Encode nanopubs into ``output`` and return it."""


class TsvTranslator(Translator):
    """Bidirectional TSV codec.

    Holds only its options and statement parser; calls share no other
    state.
    """

    def __init__(
        self,
        options: TsvOptions | Mapping[str, Any] | None = None,
        parser: StatementParser | None = None,
    ) -> None:
        self.options = coerce_options(options)
        self.parser = parser or BelStatementParser()

    @property
    def descriptor(self) -> TranslatorDescriptor:
        return TSV_DESCRIPTOR

    def read(self, data: str) -> list[Nanopub]:
        return read_nanopubs(data, self.options, self.parser)

    def write(
        self, nanopubs: Iterable[Nanopub], output: TextIO | None = None,
    ) -> TextIO:
        return write_nanopubs(nanopubs, output, self.options)


def create_translator(
    options: TsvOptions | Mapping[str, Any] | None = None,
) -> TsvTranslator:
    """Create a ready-to-use TSV translator.

    Args:
        options: Translator options.

    Returns:
        A TsvTranslator with the default BEL statement parser.
    """
    return TsvTranslator(options)
