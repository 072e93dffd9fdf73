"""Tests for the INI lexer token contract."""

from __future__ import annotations

from inidoc.core.models import TokenKind
from inidoc.parsers.lexer import Lexer, lex


def _kinds(data: bytes | str) -> list[TokenKind]:
    return [t.kind for t in lex(data)]


def _pairs(data: bytes | str) -> list[tuple[str, str]]:
    return [(t.kind.value, t.text) for t in lex(data)]


class TestLexerStream:
    def test_empty_input_is_single_eof(self) -> None:
        tokens = lex(b"")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF
        assert tokens[0].raw == b""

    def test_exactly_one_eof_at_end(self) -> None:
        tokens = lex("[a]\nk = v w\n; note\n")
        eofs = [t for t in tokens if t.kind == TokenKind.EOF]
        assert len(eofs) == 1
        assert tokens[-1].kind == TokenKind.EOF

    def test_next_token_after_eof_repeats_same_token(self) -> None:
        lexer = Lexer(b"k=v")
        seen = list(lexer)
        assert lexer.next_token() is seen[-1]
        assert lexer.next_token() is seen[-1]

    def test_section_key_assign_values(self) -> None:
        assert _pairs("[a]\nk = v1 v2\n") == [
            ("section", "[a]"),
            ("key", "k"),
            ("assign", "="),
            ("value", "v1"),
            ("value", "v2"),
            ("eof", ""),
        ]

    def test_key_without_spaces_around_equals(self) -> None:
        assert _pairs("k=v") == [("key", "k"), ("assign", "="), ("value", "v"), ("eof", "")]

    def test_equals_inside_value_run_is_value(self) -> None:
        assert _pairs("url = a=b") == [
            ("key", "url"),
            ("assign", "="),
            ("value", "a=b"),
            ("eof", ""),
        ]

    def test_empty_value(self) -> None:
        assert _kinds("key =\n") == [TokenKind.KEY, TokenKind.ASSIGN, TokenKind.EOF]


class TestLexerClassification:
    def test_lone_word_is_value(self) -> None:
        assert _kinds("v") == [TokenKind.VALUE, TokenKind.EOF]

    def test_word_followed_by_word_is_key_then_value(self) -> None:
        assert _kinds("k v") == [TokenKind.KEY, TokenKind.VALUE, TokenKind.EOF]

    def test_leading_equals_is_assign(self) -> None:
        assert _kinds("= v") == [TokenKind.ASSIGN, TokenKind.VALUE, TokenKind.EOF]

    def test_comments(self) -> None:
        assert _pairs("; top\nk = v # trailing\n# last") == [
            ("comment", "; top"),
            ("key", "k"),
            ("assign", "="),
            ("value", "v"),
            ("comment", "# trailing"),
            ("comment", "# last"),
            ("eof", ""),
        ]

    def test_word_before_comment_is_value(self) -> None:
        assert _kinds("v ; c") == [TokenKind.VALUE, TokenKind.COMMENT, TokenKind.EOF]

    def test_unterminated_section_is_illegal(self) -> None:
        tokens = lex("[abc\nk=v")
        assert tokens[0].kind == TokenKind.ILLEGAL
        assert tokens[0].text == "[abc"
        assert tokens[1].kind == TokenKind.KEY

    def test_stray_close_bracket_is_illegal(self) -> None:
        assert _kinds("]") == [TokenKind.ILLEGAL, TokenKind.EOF]

    def test_control_byte_is_illegal(self) -> None:
        assert _kinds(b"\x00") == [TokenKind.ILLEGAL, TokenKind.EOF]


class TestLexerPositions:
    def test_line_and_column(self) -> None:
        tokens = lex("[a]\n  key = v\n")
        key = tokens[1]
        assert key.kind == TokenKind.KEY
        assert key.position.line == 2
        assert key.position.column == 3
        assert key.position.offset == 6

    def test_crlf_and_cr_line_endings(self) -> None:
        tokens = lex("a=1\r\nb=2\rc=3")
        keys = [t for t in tokens if t.kind == TokenKind.KEY]
        assert [k.position.line for k in keys] == [1, 2, 3]
        assert [k.position.column for k in keys] == [1, 1, 1]

    def test_raw_range_matches_source(self) -> None:
        data = b"[sec]\nname = hello world\n"
        for tok in lex(data):
            start = tok.position.offset
            assert data[start : start + len(tok.raw)] == tok.raw

    def test_raw_is_independent_of_input_buffer(self) -> None:
        buf = bytearray(b"k = v")
        tokens = lex(buf)
        buf[:] = b"xxxxx"
        assert [t.raw for t in tokens] == [b"k", b"=", b"v", b""]

    def test_utf8_text(self) -> None:
        tokens = lex("name = café".encode("utf-8"))
        assert tokens[2].text == "café"

    def test_invalid_utf8_text_is_lossless(self) -> None:
        tokens = lex(b"k\xff = v\xfe")
        assert tokens[0].text != lex(b"k\xfe = v")[0].text
        assert [t.text.encode("utf-8", errors="surrogateescape") for t in tokens] == [b"k\xff", b"=", b"v\xfe", b""]
