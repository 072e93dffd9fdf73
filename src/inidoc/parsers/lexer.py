from __future__ import annotations

from typing import Iterator, List, Optional, Union

from inidoc.core.models import Position, TokenKind
from inidoc.parsers.types import Token

BytesLike = Union[bytes, bytearray, memoryview, str]

_BLANK = b" \t\f\v"
_EOL = b"\r\n"
_COMMENT = b";#"


def to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Lexer:
    """
    Pull-based INI tokenizer.

    Rules (whitespace separates tokens, a line break ends a statement):
      [name]        -> SECTION (raw keeps the brackets)
      ; ... / # ... -> COMMENT up to end of line
      =             -> ASSIGN, then every run up to end of line is a VALUE
      word          -> KEY if more follows on the line, VALUE if it stands alone
      anything else -> ILLEGAL

    The stream always ends in exactly one EOF token.
    """

    def __init__(self, data: BytesLike) -> None:
        self._data = to_bytes(data)
        self._pos = 0
        self._line = 1
        self._line_start = 0
        self._in_value = False
        self._after_key = False
        self._eof: Optional[Token] = None

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return

    def _position(self, offset: int) -> Position:
        return Position(offset=offset, line=self._line, column=offset - self._line_start + 1)

    def _emit(self, kind: TokenKind, start: int, end: int) -> Token:
        pos = self._position(start)
        self._pos = end
        return Token(kind=kind, raw=self._data[start:end], position=pos)

    def _end_of_line(self, i: int) -> int:
        n = len(self._data)
        while i < n and self._data[i] not in _EOL:
            i += 1
        return i

    def _skip_blank(self, i: int) -> int:
        n = len(self._data)
        while i < n and self._data[i] in _BLANK:
            i += 1
        return i

    def _newline(self) -> None:
        data = self._data
        if data[self._pos] == 0x0D and self._pos + 1 < len(data) and data[self._pos + 1] == 0x0A:
            self._pos += 2
        else:
            self._pos += 1
        self._line += 1
        self._line_start = self._pos
        self._in_value = False
        self._after_key = False

    def _word_end(self, i: int, *, stop_at_equals: bool) -> int:
        data = self._data
        n = len(data)
        while i < n:
            c = data[i]
            if c in _BLANK or c in _EOL or c < 0x20:
                break
            if stop_at_equals and c == 0x3D:
                break
            i += 1
        return i

    def next_token(self) -> Token:
        if self._eof is not None:
            return self._eof

        data = self._data
        n = len(data)

        while True:
            self._pos = self._skip_blank(self._pos)
            if self._pos < n and data[self._pos] in _EOL:
                self._newline()
                continue
            break

        start = self._pos
        if start >= n:
            self._eof = self._emit(TokenKind.EOF, start, start)
            return self._eof

        c = data[start]

        if c in _COMMENT:
            return self._emit(TokenKind.COMMENT, start, self._end_of_line(start))

        if c < 0x20:
            return self._emit(TokenKind.ILLEGAL, start, start + 1)

        if self._in_value:
            return self._emit(TokenKind.VALUE, start, self._word_end(start, stop_at_equals=False))

        if c == 0x3D:  # '='
            self._in_value = True
            self._after_key = False
            return self._emit(TokenKind.ASSIGN, start, start + 1)

        if self._after_key:
            return self._emit(TokenKind.VALUE, start, self._word_end(start, stop_at_equals=True))

        # statement start
        if c == 0x5B:  # '['
            eol = self._end_of_line(start)
            close = data.find(b"]", start, eol)
            if close < 0:
                return self._emit(TokenKind.ILLEGAL, start, eol)
            return self._emit(TokenKind.SECTION, start, close + 1)

        if c == 0x5D:  # ']'
            return self._emit(TokenKind.ILLEGAL, start, start + 1)

        end = self._word_end(start, stop_at_equals=True)
        nxt = self._skip_blank(end)
        if nxt >= n or data[nxt] in _EOL or data[nxt] in _COMMENT:
            return self._emit(TokenKind.VALUE, start, end)
        self._after_key = True
        return self._emit(TokenKind.KEY, start, end)


def lex(data: BytesLike) -> List[Token]:
    """Tokenize a whole buffer (EOF token included)."""
    return list(Lexer(data))
