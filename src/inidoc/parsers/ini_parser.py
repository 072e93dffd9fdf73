from __future__ import annotations

import logging
from typing import Optional, Tuple

from inidoc.core.document import release_document
from inidoc.core.models import Document, ParseResult, ParserOptions
from inidoc.parsers.errors import IniParseError
from inidoc.parsers.lexer import BytesLike, Lexer
from inidoc.parsers.parser import Parser

logger = logging.getLogger(__name__)


def parse_into(
    data: BytesLike,
    document: Document,
    options: Optional[ParserOptions] = None,
) -> ParseResult:
    """
    Merge parsed content into a caller-owned document.
    On error the partial mutations stay in place for the caller to inspect.
    """
    return Parser(Lexer(data), document, options).parse()


def parse(
    data: BytesLike,
    options: Optional[ParserOptions] = None,
) -> Tuple[Optional[Document], ParseResult]:
    """
    Parse into a fresh document.
    On error the partial document is released here and None is returned in its place.
    """
    document = Document()
    result = parse_into(data, document, options)
    if not result.ok:
        logger.debug("releasing partial document after %s", result.kind.value)
        release_document(document)
        return None, result
    return document, result


def load(data: BytesLike, options: Optional[ParserOptions] = None) -> Document:
    document, result = parse(data, options)
    if document is None:
        raise IniParseError(result)
    return document
