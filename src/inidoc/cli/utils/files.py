from __future__ import annotations

from pathlib import Path

import typer


def read_input(path: Path) -> bytes:
    """Read an input file as raw bytes; '-' reads stdin."""
    if str(path) == "-":
        return typer.get_binary_stream("stdin").read()
    try:
        return path.read_bytes()
    except OSError as e:
        raise typer.BadParameter(f"Cannot read {path}: {e}") from e
