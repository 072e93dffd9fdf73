from __future__ import annotations

from inidoc.core.document import delete_section, get_section, get_value, release_document
from inidoc.core.errors import DocumentReleasedError, InidocError
from inidoc.core.models import (
    CaseFolding,
    Document,
    DuplicateKeyPolicy,
    Entry,
    ErrorKind,
    ParseResult,
    ParserOptions,
    Position,
    Section,
    TokenKind,
    ValuePolicy,
)
from inidoc.parsers import IniParseError, flatten_document, load, parse, parse_into

__version__ = "0.1.0"

__all__ = [
    "CaseFolding",
    "Document",
    "DocumentReleasedError",
    "DuplicateKeyPolicy",
    "Entry",
    "ErrorKind",
    "IniParseError",
    "InidocError",
    "ParseResult",
    "ParserOptions",
    "Position",
    "Section",
    "TokenKind",
    "ValuePolicy",
    "delete_section",
    "flatten_document",
    "get_section",
    "get_value",
    "load",
    "parse",
    "parse_into",
    "release_document",
]
