from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from inidoc.cli.ui.formatters import (
    DocumentRenderOptions,
    printable,
    render_document,
    render_flat,
    render_parse_error,
    render_tokens,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "section": "bold cyan",
        "key": "magenta",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    configure_logging(console, verbose=verbose)
    return UI(console=console, verbose=verbose)


def configure_logging(console: Console, *, verbose: bool = False) -> None:
    # Library modules only create loggers; handlers are set up here.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


__all__ = [
    "DocumentRenderOptions",
    "UI",
    "configure_logging",
    "get_ui",
    "printable",
    "render_document",
    "render_flat",
    "render_parse_error",
    "render_tokens",
]
