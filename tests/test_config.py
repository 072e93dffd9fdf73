"""Tests for parser option loading (.inidoc.toml [parser] table, then flag overrides)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from inidoc.core.config import CONFIG_FILE_NAME, default_config_path, load_parser_options, read_parser_table
from inidoc.core.errors import ConfigError
from inidoc.core.models import CaseFolding, DuplicateKeyPolicy, ParserOptions, ValuePolicy


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadParserOptions:
    def test_defaults_without_config(self) -> None:
        options = load_parser_options()
        assert options == ParserOptions()
        assert options.duplicate_keys == DuplicateKeyPolicy.OVERWRITE
        assert options.case_folding == CaseFolding.NONE
        assert options.value_policy == ValuePolicy.JOIN

    def test_file_then_overrides(self, tmp_path: Path) -> None:
        cfg = _write(
            tmp_path / CONFIG_FILE_NAME,
            '[parser]\nduplicate_keys = "append"\ncase_folding = "lower"\n',
        )
        options = load_parser_options(
            cfg,
            {"case_folding": CaseFolding.NONE, "value_policy": "first", "duplicate_keys": None},
        )
        assert options.duplicate_keys == DuplicateKeyPolicy.APPEND
        assert options.case_folding == CaseFolding.NONE
        assert options.value_policy == ValuePolicy.FIRST

    def test_missing_parser_table_means_defaults(self, tmp_path: Path) -> None:
        cfg = _write(tmp_path / "other.toml", '[tool]\nname = "x"\n')
        assert read_parser_table(cfg) == {}
        assert load_parser_options(cfg) == ParserOptions()

    def test_default_config_path(self, tmp_path: Path) -> None:
        assert default_config_path(tmp_path) is None
        cfg = _write(tmp_path / CONFIG_FILE_NAME, "")
        assert default_config_path(tmp_path) == cfg

    def test_invalid_policy_rejected(self, tmp_path: Path) -> None:
        cfg = _write(tmp_path / CONFIG_FILE_NAME, '[parser]\nduplicate_keys = "sometimes"\n')
        with pytest.raises(ValidationError):
            load_parser_options(cfg)

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ParserOptions.model_validate({"interpolate": True})

    def test_malformed_toml(self, tmp_path: Path) -> None:
        cfg = _write(tmp_path / CONFIG_FILE_NAME, "[parser\n")
        with pytest.raises(ConfigError):
            load_parser_options(cfg)

    def test_parser_must_be_table(self, tmp_path: Path) -> None:
        cfg = _write(tmp_path / CONFIG_FILE_NAME, 'parser = "join"\n')
        with pytest.raises(ConfigError):
            read_parser_table(cfg)
