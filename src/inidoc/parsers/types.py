from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from inidoc.core.models import Position, TokenKind


@dataclass(frozen=True)
class Token:
    """One lexeme. `raw` is a copy of the consumed bytes, never a view into the input."""
    kind: TokenKind
    raw: bytes
    position: Position

    @property
    def text(self) -> str:
        # invalid bytes map to lone surrogates, so distinct raw lexemes stay distinct
        return self.raw.decode("utf-8", errors="surrogateescape")


class TokenSource(Protocol):
    """Pull-based producer of tokens ending in exactly one EOF token."""
    def next_token(self) -> Token: ...


@dataclass(frozen=True)
class ParsedKV:
    """ A normalized key-value pair from a document."""
    key: str
    value: str
    line: Optional[int] = None
