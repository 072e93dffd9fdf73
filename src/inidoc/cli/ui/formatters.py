from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from inidoc.core.models import Document, ParseResult, TokenKind
from inidoc.parsers.types import ParsedKV, Token


def printable(s: str) -> str:
    """Undo surrogateescape for display; undecodable bytes show as U+FFFD."""
    return s.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def _short(s: str, max_len: int = 140) -> str:
    s = printable(s or "")
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def _section_label(name: str) -> str:
    return f"[{printable(name)}]" if name else "(default)"


# ----------------------------
# Document tables
# ----------------------------

@dataclass(frozen=True)
class DocumentRenderOptions:
    title: Optional[str] = None
    show_empty_sections: bool = True
    max_value_len: int = 120


def render_document(
    console: Console,
    document: Document,
    *,
    opts: Optional[DocumentRenderOptions] = None,
) -> None:
    opts = opts or DocumentRenderOptions()

    total = sum(len(s.entries) for s in document.sections)
    title = opts.title or f"Entries ({total})"
    table = Table(title=title, show_lines=False)

    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")

    # cells are Text so brackets in names/values are never read as markup
    for section in document.sections:
        label = Text(_section_label(section.name))
        if not section.entries:
            if opts.show_empty_sections and section.name:
                table.add_row(label, "", Text("-", style="muted"), "")
            continue
        for e in section.entries:
            table.add_row(
                label,
                str(e.line or ""),
                Text(printable(e.key)),
                Text(_short(e.value, opts.max_value_len)),
            )

    console.print(table)


def render_flat(console: Console, entries: Sequence[ParsedKV]) -> None:
    if not entries:
        console.print("[muted]No entries.[/muted]")
        return
    for kv in entries:
        line = Text()
        line.append(printable(kv.key), style="key")
        line.append(" = ")
        line.append(printable(kv.value))
        console.print(line)


# ----------------------------
# Tokens
# ----------------------------

_KIND_STYLE = {
    TokenKind.SECTION: "section",
    TokenKind.KEY: "key",
    TokenKind.ASSIGN: "muted",
    TokenKind.COMMENT: "muted",
    TokenKind.ILLEGAL: "error",
}


def render_tokens(console: Console, tokens: Iterable[Token]) -> None:
    table = Table(title="Tokens", show_lines=False)
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Col", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Text")

    for tok in tokens:
        table.add_row(
            str(tok.position.line),
            str(tok.position.column),
            Text(tok.kind.value, style=_KIND_STYLE.get(tok.kind, "")),
            Text(_short(tok.text, 80)),
        )

    console.print(table)


# ----------------------------
# Errors
# ----------------------------

def render_parse_error(console: Console, result: ParseResult, *, source: str = "") -> None:
    prefix = f"{source}: " if source else ""
    console.print(Text(f"✗ {prefix}{result.describe()}", style="error"))
