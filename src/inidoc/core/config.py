from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from inidoc.core.errors import ConfigError
from inidoc.core.models import ParserOptions

try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

# picked up from the working directory when no --config is given
CONFIG_FILE_NAME = ".inidoc.toml"


def default_config_path(cwd: Path) -> Optional[Path]:
    p = cwd / CONFIG_FILE_NAME
    return p if p.is_file() else None


def read_parser_table(path: Path) -> Dict[str, Any]:
    """The [parser] table of a TOML file; missing table means no settings."""
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot load {path}: {e}") from e

    table = data.get("parser", {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: 'parser' must be a table")
    return table


def load_parser_options(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ParserOptions:
    """
    File settings first, then non-None overrides on top.
    Unknown keys or bad policy names raise pydantic's ValidationError.
    """
    values: Dict[str, Any] = {}
    if config_path is not None:
        logger.debug("parser options from %s", config_path)
        values.update(read_parser_table(config_path))
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return ParserOptions.model_validate(values)
