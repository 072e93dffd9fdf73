from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from inidoc.core.errors import DocumentReleasedError
from inidoc.core.models import (
    CaseFolding,
    Document,
    Entry,
    ErrorKind,
    ParseResult,
    ParserOptions,
    Section,
    TokenKind,
    ValuePolicy,
)
from inidoc.parsers.types import Token, TokenSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """Outcome of dispatching one token: keep pulling, or stop with a result."""
    result: Optional[ParseResult] = None

    @classmethod
    def finish(cls, kind: ErrorKind, tok: Token) -> "Step":
        return cls(result=ParseResult(kind=kind, position=tok.position, token_text=tok.text))


CONTINUE = Step()


def section_name(tok: Token, folding: CaseFolding) -> str:
    name = tok.text
    if name.startswith("["):
        name = name[1:]
    if name.endswith("]"):
        name = name[:-1]
    if folding == CaseFolding.LOWER:
        name = name.lower()
    return name


def join_values(values: List[str], policy: ValuePolicy) -> str:
    if policy == ValuePolicy.FIRST:
        return values[0] if values else ""
    return " ".join(values)


class Parser:
    """
    Single-pass consumer of a token stream into a Document.

    Tokens are pulled on demand. The token that ends a key's value run is parked
    in a pending slot and dispatched on the next loop iteration, so long value
    runs or back-to-back statements never grow the call stack.
    """

    def __init__(
        self,
        tokens: TokenSource,
        document: Document,
        options: Optional[ParserOptions] = None,
    ) -> None:
        if document.released:
            raise DocumentReleasedError("parse into")
        self.tokens = tokens
        self.document = document
        self.options = options or ParserOptions()
        self.current: Section = document.default
        self._pending: Optional[Token] = None

    def _next(self) -> Token:
        if self._pending is not None:
            tok, self._pending = self._pending, None
            return tok
        return self.tokens.next_token()

    def parse(self) -> ParseResult:
        while True:
            result = self._dispatch(self._next()).result
            if result is None:
                continue
            if result.ok:
                logger.debug("parse finished at %s", result.position)
            else:
                logger.debug("parse halted: %s", result.describe())
            return result

    def _dispatch(self, tok: Token) -> Step:
        kind = tok.kind
        if kind == TokenKind.SECTION:
            self._enter_section(tok)
            return CONTINUE
        if kind == TokenKind.KEY:
            return self._statement(tok)
        if kind == TokenKind.COMMENT:
            return CONTINUE
        if kind == TokenKind.VALUE:
            return Step.finish(ErrorKind.VALUE_WITHOUT_KEY, tok)
        if kind == TokenKind.ASSIGN:
            return Step.finish(ErrorKind.UNEXPECTED_EQUALS, tok)
        if kind == TokenKind.EOF:
            return Step.finish(ErrorKind.EOF, tok)
        return Step.finish(ErrorKind.ILLEGAL_TOKEN, tok)

    def _enter_section(self, tok: Token) -> None:
        name = section_name(tok, self.options.case_folding)
        existing = self.document.get_section(name)
        if existing is not None:
            logger.debug("merging into section %r at %s", name, tok.position)
            self.current = existing
            return
        logger.debug("new section %r at %s", name, tok.position)
        self.current = self.document.add_section(name)

    def _statement(self, key: Token) -> Step:
        assign = self.tokens.next_token()
        if assign.kind != TokenKind.ASSIGN:
            return Step.finish(ErrorKind.KEY_WITHOUT_EQUALS, key)

        values: List[str] = []
        tok = self.tokens.next_token()
        while tok.kind == TokenKind.VALUE:
            values.append(tok.text)
            tok = self.tokens.next_token()
        self._pending = tok

        entry = Entry(
            key=key.text,
            value=join_values(values, self.options.value_policy),
            line=key.position.line,
        )
        self.current.put(entry, policy=self.options.duplicate_keys)
        return CONTINUE
