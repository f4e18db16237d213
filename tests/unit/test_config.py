"""Tests for TSV option handling and YAML loading."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from beltsv.config import TsvOptions, coerce_options, load_options
from beltsv.core.enums import MalformedLinePolicy
from beltsv.core.exceptions import ConfigError


class TestCoerceOptions:
    """Options normalisation."""

    def test_none_gives_defaults(self) -> None:
        opts = coerce_options(None)
        assert opts.on_malformed == MalformedLinePolicy.STRICT
        assert opts.encoding == "utf-8"

    def test_instance_passes_through(self) -> None:
        opts = TsvOptions(on_malformed="skip")
        assert coerce_options(opts) is opts

    def test_mapping_is_validated(self) -> None:
        opts = coerce_options({"on_malformed": "lenient"})
        assert opts.on_malformed == MalformedLinePolicy.LENIENT

    def test_unknown_keys_ignored(self) -> None:
        opts = coerce_options({"validate": True, "unused": 1})
        assert opts == TsvOptions()

    def test_invalid_policy_raises(self) -> None:
        with pytest.raises(ConfigError):
            coerce_options({"on_malformed": "sometimes"})

    def test_unknown_encoding_raises(self) -> None:
        with pytest.raises(ConfigError):
            coerce_options({"encoding": "no-such-codec"})

    def test_encoding_alias_accepted(self) -> None:
        assert coerce_options({"encoding": "latin_1"}).encoding == "latin_1"

    def test_non_string_keys_raise(self) -> None:
        with pytest.raises(ConfigError):
            coerce_options({1: "x"})


class TestLoadOptions:
    """YAML config loading."""

    def test_load_tsv_section(self, tmp_path: Path) -> None:
        path = tmp_path / "translators.yaml"
        path.write_text(yaml.dump({"tsv": {"on_malformed": "skip", "encoding": "latin-1"}}))
        opts = load_options(path)
        assert opts.on_malformed == MalformedLinePolicy.SKIP
        assert opts.encoding == "latin-1"

    def test_load_top_level_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "tsv.yaml"
        path.write_text("on_malformed: lenient\n")
        assert load_options(path).on_malformed == MalformedLinePolicy.LENIENT

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_options(path) == TsvOptions()

    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_options(Path("nonexistent.yaml"))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("tsv: [unclosed\n")
        with pytest.raises(ConfigError):
            load_options(path)

    def test_unknown_encoding_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tsv.yaml"
        path.write_text("encoding: no-such-codec\n")
        with pytest.raises(ConfigError):
            load_options(path)

    def test_non_string_keys_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tsv.yaml"
        path.write_text("tsv:\n  1: x\n")
        with pytest.raises(ConfigError):
            load_options(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- strict\n- lenient\n")
        with pytest.raises(ConfigError):
            load_options(path)
