from __future__ import annotations

from inidoc.core.errors import InidocError
from inidoc.core.models import ParseResult


class IniParseError(InidocError, ValueError):
    """Raised by `load` when a pass halts on anything but EOF."""

    def __init__(self, result: ParseResult) -> None:
        self.result = result
        super().__init__(f"INI parse failed: {result.describe()}")
