"""Configuration for the TSV translator.

Options may be supplied as a ``TsvOptions`` instance, a plain mapping
(the host framework's options hash), or loaded from a YAML file.
Unrecognised keys are ignored.
"""
from __future__ import annotations

import codecs
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from beltsv.core.enums import MalformedLinePolicy
from beltsv.core.exceptions import ConfigError


class TsvOptions(BaseModel):
    """TSV reader/writer options.

    Attributes:
        on_malformed: Policy for lines with fewer than four fields.
        encoding: Text encoding used by the file helpers.
    """

    on_malformed: MalformedLinePolicy = MalformedLinePolicy.STRICT
    encoding: str = "utf-8"

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            msg = f"unknown encoding: {value}"
            raise ValueError(msg) from exc
        return value


def coerce_options(options: TsvOptions | Mapping[str, Any] | None) -> TsvOptions:
    """Normalise caller-supplied options into a ``TsvOptions``.

    Args:
        options: ``None``, a mapping of option values, or ``TsvOptions``.

    Returns:
        A validated TsvOptions instance.

    Raises:
        ConfigError: If an option key is not a string or a recognised
            option has an invalid value.
    """
    if options is None:
        return TsvOptions()
    if isinstance(options, TsvOptions):
        return options
    data = dict(options)
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigError(f"Invalid TSV option keys: {bad_keys!r}")
    try:
        return TsvOptions.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid TSV options: {exc}") from exc


def load_options(path: Path) -> TsvOptions:
    """Load TSV options from a YAML file.

    The file may hold the options at the top level or under a ``tsv:``
    section, so one config file can serve several translators.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        TsvOptions read from the file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the file is not valid YAML or holds invalid values.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    section = data.get("tsv", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'tsv' to be a mapping in {path}")
    return coerce_options(section)
