from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    PARSE_ERROR = 1
    ERROR = 2
    NOT_FOUND = 3


class InidocError(Exception):
    """Base class for misuse errors. Parse errors are values, not exceptions."""


class DocumentReleasedError(InidocError):
    def __init__(self, action: str = "use") -> None:
        super().__init__(f"Cannot {action} a released document")


class ConfigError(InidocError):
    pass
