from __future__ import annotations

import logging
from typing import Optional, Tuple

from inidoc.core.models import Document, Section

logger = logging.getLogger(__name__)


def get_section(document: Document, name: str) -> Tuple[Optional[Section], bool]:
    section = document.get_section(name)
    return section, section is not None


def get_value(section: Section, key: str) -> Tuple[str, bool]:
    """
    First value stored under `key`.
    Under the overwrite policy there is only ever one.
    """
    value = section.get(key)
    if value is None:
        return "", False
    return value, True


def delete_section(document: Document, name: str) -> bool:
    """
    Remove a section and everything in it.

    The default section is never removed, only emptied.
    """
    if document.remove_section(name) is None:
        return False
    logger.debug("deleted section %r", name)
    return True


def release_document(document: Document) -> None:
    if document.released:
        return
    document.release()
