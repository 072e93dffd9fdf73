from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from inidoc.cli.commands.show import resolve_options
from inidoc.cli.ui import get_ui, printable, render_parse_error
from inidoc.cli.utils.files import read_input
from inidoc.core.document import get_section, get_value
from inidoc.core.errors import ExitCode
from inidoc.core.models import CaseFolding, DuplicateKeyPolicy
from inidoc.parsers import parse


def get_cmd(
    path: Path = typer.Argument(..., help="INI file to parse ('-' for stdin)."),
    section: str = typer.Argument(..., help="Section name ('' for entries before any header)."),
    key: str = typer.Argument(..., help="Key to look up."),
    config: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False, help="TOML file with a [parser] table (default: ./.inidoc.toml)."
    ),
    duplicate_keys: Optional[DuplicateKeyPolicy] = typer.Option(
        None, "--duplicate-keys", help="overwrite or append (overrides config if set)."
    ),
    case_folding: Optional[CaseFolding] = typer.Option(
        None, "--case-folding", help="Section name folding: none or lower."
    ),
) -> None:
    """Print a single value. Exits 1 on a parse error, 3 if the section or key is missing."""
    ui = get_ui()
    options, _ = resolve_options(ui.console, config, duplicate_keys, case_folding, None)

    document, result = parse(read_input(path), options)
    if document is None:
        render_parse_error(ui.console, result, source=str(path))
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))

    if options.case_folding == CaseFolding.LOWER:
        section = section.lower()

    found_section, ok = get_section(document, section)
    if not ok or found_section is None:
        ui.console.print(Text(f"No section {printable(section)!r}", style="warn"))
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    value, found = get_value(found_section, key)
    if not found:
        ui.console.print(Text(f"No key {key!r} in section {printable(section)!r}", style="warn"))
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    # the original bytes, undecodable ones included
    typer.echo(value.encode("utf-8", errors="surrogateescape"))
    raise typer.Exit(code=int(ExitCode.OK))
