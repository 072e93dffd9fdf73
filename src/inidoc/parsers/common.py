from __future__ import annotations

from typing import List

from inidoc.core.models import DEFAULT_SECTION, Document
from inidoc.parsers.types import ParsedKV


def flatten_document(document: Document, *, case_insensitive: bool = False) -> List[ParsedKV]:
    """
    Flatten sections into dot-path keys, in document order.

    Examples:
      k=v (no header)   -> [("k", "v")]
      [db]\\nhost=x     -> [("db.host", "x")]
    """
    out: List[ParsedKV] = []

    def _join(p: str, k: str) -> str:
        return k if p == DEFAULT_SECTION else f"{p}.{k}"

    for section in document.sections:
        for e in section.entries:
            key = normalize_key(_join(section.name, e.key), case_insensitive=case_insensitive)
            out.append(ParsedKV(key=key, value=e.value, line=e.line))

    return out


def normalize_key(key: str, *, case_insensitive: bool) -> str:
    k = (key or "").strip()
    return k.lower() if case_insensitive else k
