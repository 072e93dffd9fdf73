from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from inidoc.cli.ui import DocumentRenderOptions, get_ui, render_document, render_flat, render_parse_error
from inidoc.cli.utils.files import read_input
from inidoc.core.config import default_config_path, load_parser_options
from inidoc.core.errors import ConfigError, ExitCode
from inidoc.core.models import CaseFolding, DuplicateKeyPolicy, ParserOptions, ValuePolicy
from inidoc.parsers import flatten_document, parse


def resolve_options(
    console: Console,
    config: Optional[Path],
    duplicate_keys: Optional[DuplicateKeyPolicy],
    case_folding: Optional[CaseFolding],
    value_policy: Optional[ValuePolicy],
) -> Tuple[ParserOptions, Optional[Path]]:
    config_path = config or default_config_path(Path.cwd())
    overrides = {
        "duplicate_keys": duplicate_keys,
        "case_folding": case_folding,
        "value_policy": value_policy,
    }
    try:
        return load_parser_options(config_path, overrides), config_path
    except (ConfigError, ValidationError) as e:
        console.print(Text.assemble(("Invalid parser options: ", "error"), str(e)))
        raise typer.Exit(code=int(ExitCode.ERROR))


def show_cmd(
    path: Path = typer.Argument(..., help="INI file to parse ('-' for stdin)."),
    flat: bool = typer.Option(False, "--flat", help="Print dotted section.key = value lines."),
    config: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False, help="TOML file with a [parser] table (default: ./.inidoc.toml)."
    ),
    duplicate_keys: Optional[DuplicateKeyPolicy] = typer.Option(
        None, "--duplicate-keys", help="overwrite or append (overrides config if set)."
    ),
    case_folding: Optional[CaseFolding] = typer.Option(
        None, "--case-folding", help="Section name folding: none or lower."
    ),
    value_policy: Optional[ValuePolicy] = typer.Option(
        None, "--value-policy", help="join or first."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse a file and show its sections and entries."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    options, config_path = resolve_options(console, config, duplicate_keys, case_folding, value_policy)
    if ui.verbose:
        console.print(f"[bold]Config:[/bold] {config_path or '-'}")
        console.print()

    document, result = parse(read_input(path), options)
    if document is None:
        render_parse_error(console, result, source=str(path))
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))

    if flat:
        render_flat(console, flatten_document(document))
    else:
        render_document(console, document, opts=DocumentRenderOptions(title=str(path)))

    raise typer.Exit(code=int(ExitCode.OK))
