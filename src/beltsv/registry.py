"""Translator registry -- explicit registration of format translators.

The host framework builds a registry at startup and registers each
translator's descriptor with its factory. Lookups resolve an id, a file
extension, or a media type.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from beltsv.core.exceptions import DuplicateTranslatorError, UnknownTranslatorError
from beltsv.translator import (
    TSV_DESCRIPTOR,
    Translator,
    TranslatorDescriptor,
    create_translator,
)

logger = structlog.get_logger(__name__)

TranslatorFactory = Callable[[Mapping[str, Any] | None], Translator]


class TranslatorRegistry:
    """Lookup table of translator descriptors and factories."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[TranslatorDescriptor, TranslatorFactory]] = {}

    def register(
        self, descriptor: TranslatorDescriptor, factory: TranslatorFactory,
    ) -> None:
        """Register a translator.

        Args:
            descriptor: Static translator metadata.
            factory: Callable building a translator from an options mapping.

        Raises:
            DuplicateTranslatorError: If the id is already registered.
        """
        if descriptor.id in self._entries:
            raise DuplicateTranslatorError(descriptor.id)
        self._entries[descriptor.id] = (descriptor, factory)
        logger.info(
            "translator_registered",
            translator_id=descriptor.id,
            extensions=list(descriptor.extensions),
            media_types=list(descriptor.media_types),
        )

    def get(self, key: str) -> TranslatorDescriptor:
        """Resolve a translator by id, file extension, or media type.

        Extensions match case-insensitively, with or without a leading dot.

        Raises:
            UnknownTranslatorError: If nothing matches.
        """
        return self._resolve(key)[0]

    def create(
        self, key: str, options: Mapping[str, Any] | None = None,
    ) -> Translator:
        """Build a translator through its registered factory.

        Raises:
            UnknownTranslatorError: If nothing matches ``key``.
        """
        _, factory = self._resolve(key)
        return factory(options)

    def descriptors(self) -> list[TranslatorDescriptor]:
        """All registered descriptors, in registration order."""
        return [descriptor for descriptor, _ in self._entries.values()]

    def _resolve(self, key: str) -> tuple[TranslatorDescriptor, TranslatorFactory]:
        if key in self._entries:
            return self._entries[key]

        lowered = key.lower()
        extension = lowered.removeprefix(".")
        for descriptor, factory in self._entries.values():
            if extension in (ext.lower() for ext in descriptor.extensions):
                return descriptor, factory
            if lowered in (mt.lower() for mt in descriptor.media_types):
                return descriptor, factory

        raise UnknownTranslatorError(key, sorted(self._entries))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self._resolve(key)
        except UnknownTranslatorError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._entries)


def register_tsv_translator(registry: TranslatorRegistry) -> None:
    """Register the TSV translator with ``registry``."""
    registry.register(TSV_DESCRIPTOR, create_translator)


def default_registry() -> TranslatorRegistry:
    """Return a new registry with the TSV translator registered."""
    registry = TranslatorRegistry()
    register_tsv_translator(registry)
    return registry
