from __future__ import annotations

from pathlib import Path

import typer

from inidoc.cli.ui import get_ui, render_tokens
from inidoc.cli.utils.files import read_input
from inidoc.core.errors import ExitCode
from inidoc.core.models import TokenKind
from inidoc.parsers import lex


def tokens_cmd(
    path: Path = typer.Argument(..., help="INI file to tokenize ('-' for stdin)."),
) -> None:
    """Dump the token stream of a file."""
    ui = get_ui()
    tokens = lex(read_input(path))
    render_tokens(ui.console, tokens)

    if any(t.kind == TokenKind.ILLEGAL for t in tokens):
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))
    raise typer.Exit(code=int(ExitCode.OK))
