from __future__ import annotations

import typer
from rich.console import Console

from inidoc import __version__
from inidoc.cli.commands.get import get_cmd
from inidoc.cli.commands.show import show_cmd
from inidoc.cli.commands.tokens import tokens_cmd

app = typer.Typer(
    name="inidoc",
    help="Inspect INI files: parse into sections/entries, dump tokens, look up values.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"inidoc {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("show")(show_cmd)
app.command("tokens")(tokens_cmd)
app.command("get")(get_cmd)


if __name__ == "__main__":  # pragma: no cover
    app()
