from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


# ================================
# Enums
# ================================


class TokenKind(str, Enum):
    ILLEGAL = "illegal"
    KEY = "key"
    ASSIGN = "assign"
    VALUE = "value"
    SECTION = "section"
    COMMENT = "comment"
    EOF = "eof"


class ErrorKind(str, Enum):
    EOF = "eof"  # success sentinel
    ILLEGAL_TOKEN = "illegal_token"
    KEY_WITHOUT_EQUALS = "key_without_equals"
    VALUE_WITHOUT_KEY = "value_without_key"
    UNEXPECTED_EQUALS = "unexpected_equals"


class DuplicateKeyPolicy(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


class CaseFolding(str, Enum):
    NONE = "none"
    LOWER = "lower"


class ValuePolicy(str, Enum):
    JOIN = "join"
    FIRST = "first"


# ================================
# Parser options (defaults only)
# ================================


class ParserOptions(BaseModel):
    """
    Policy knobs for one parse pass. Defaults live here.
    A .inidoc.toml [parser] table and CLI flags are layered on by core/config.py.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    duplicate_keys: DuplicateKeyPolicy = Field(
        default=DuplicateKeyPolicy.OVERWRITE,
        description="overwrite: last write wins in place. append: keep every entry in arrival order.",
    )
    case_folding: CaseFolding = Field(
        default=CaseFolding.NONE,
        description="Folding applied to section names before lookup/creation.",
    )
    value_policy: ValuePolicy = Field(
        default=ValuePolicy.JOIN,
        description="join: single-space join of every value token. first: keep only the first.",
    )


# ================================
# Positions + results
# ================================


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    line: int = Field(default=1, ge=1)
    column: int = Field(default=1, ge=1)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


_ERROR_MESSAGES = {
    ErrorKind.EOF: "end of input",
    ErrorKind.ILLEGAL_TOKEN: "illegal token",
    ErrorKind.KEY_WITHOUT_EQUALS: "key is not followed by '='",
    ErrorKind.VALUE_WITHOUT_KEY: "value without a key",
    ErrorKind.UNEXPECTED_EQUALS: "unexpected '=' without a key",
}


class ParseResult(BaseModel):
    """Terminal outcome of a parse pass: an error kind and where it happened."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    position: Position = Field(default_factory=Position)
    token_text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == ErrorKind.EOF

    def describe(self) -> str:
        msg = f"{self.position}: {_ERROR_MESSAGES[self.kind]}"
        if self.token_text and not self.ok:
            msg += f" ({self.token_text!r})"
        return msg


# ================================
# Document model
# ================================

DEFAULT_SECTION = ""


class Entry(BaseModel):
    key: str
    value: str = ""
    line: Optional[int] = None


class Section(BaseModel):
    """
    Named group of entries in arrival order.
    Entries are added through `put` and removed through `clear`, which keep the key index current.
    """

    name: str
    entries: List[Entry] = Field(default_factory=list)

    # key -> index of its first entry
    _index: Dict[str, int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._reindex()

    def _reindex(self) -> None:
        self._index = {}
        for i, e in enumerate(self.entries):
            self._index.setdefault(e.key, i)

    def _find(self, key: str) -> Optional[int]:
        i = self._index.get(key)
        if i is None:
            return None
        if i >= len(self.entries) or self.entries[i].key != key:
            self._reindex()
            return self._index.get(key)
        return i

    def get(self, key: str) -> Optional[str]:
        """First value stored under `key`, or None."""
        i = self._find(key)
        return None if i is None else self.entries[i].value

    def get_all(self, key: str) -> List[str]:
        return [e.value for e in self.entries if e.key == key]

    def keys(self) -> List[str]:
        return list(dict.fromkeys(e.key for e in self.entries))

    def put(self, entry: Entry, *, policy: DuplicateKeyPolicy) -> None:
        i = self._find(entry.key)
        if i is not None and policy == DuplicateKeyPolicy.OVERWRITE:
            self.entries[i] = entry
            return
        self.entries.append(entry)
        if i is None:
            self._index[entry.key] = len(self.entries) - 1

    def clear(self) -> None:
        self.entries.clear()
        self._index.clear()


class Document(BaseModel):
    """
    Section-keyed store of entries.
    The default section ("") is created with the document and always comes first.
    """

    sections: List[Section] = Field(
        default_factory=lambda: [Section(name=DEFAULT_SECTION)]
    )
    released: bool = False

    _by_name: Dict[str, Section] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        if not self.released:
            self._ensure_default_section()
        self._by_name = {s.name: s for s in self.sections}

    def _ensure_default_section(self) -> None:
        names = [s.name for s in self.sections]
        if len(set(names)) != len(names):
            raise ValueError("section names must be unique")
        if DEFAULT_SECTION not in names:
            self.sections.insert(0, Section(name=DEFAULT_SECTION))
        elif names[0] != DEFAULT_SECTION:
            idx = names.index(DEFAULT_SECTION)
            self.sections.insert(0, self.sections.pop(idx))

    def get_section(self, name: str) -> Optional[Section]:
        return self._by_name.get(name)

    def add_section(self, name: str) -> Section:
        section = Section(name=name)
        self.sections.append(section)
        self._by_name[name] = section
        return section

    def remove_section(self, name: str) -> Optional[Section]:
        """Detach a named section. The default section is emptied instead."""
        section = self._by_name.get(name)
        if section is None:
            return None
        section.clear()
        if name != DEFAULT_SECTION:
            del self._by_name[name]
            self.sections.remove(section)
        return section

    def release(self) -> None:
        for section in self.sections:
            section.clear()
        self.sections.clear()
        self._by_name.clear()
        self.released = True

    @property
    def default(self) -> Section:
        # invariant: created at construction, never removed
        return self.sections[0]

    def section_names(self) -> List[str]:
        return [s.name for s in self.sections]

    def to_dict(self) -> Dict[str, List[List[str]]]:
        return {s.name: [[e.key, e.value] for e in s.entries] for s in self.sections}
