from __future__ import annotations

from inidoc.parsers.common import flatten_document
from inidoc.parsers.errors import IniParseError
from inidoc.parsers.ini_parser import load, parse, parse_into
from inidoc.parsers.lexer import Lexer, lex
from inidoc.parsers.parser import Parser
from inidoc.parsers.types import ParsedKV, Token, TokenSource

__all__ = [
    "IniParseError",
    "Lexer",
    "ParsedKV",
    "Parser",
    "Token",
    "TokenSource",
    "flatten_document",
    "lex",
    "load",
    "parse",
    "parse_into",
]
