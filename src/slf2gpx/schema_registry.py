"""Bundled XSD schemas, looked up by document kind."""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from importlib.resources import files

from lxml import etree

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    SLF = "slf"
    GPX = "gpx"


@lru_cache(maxsize=None)
def load_schema_source(kind: DocumentKind) -> bytes | None:
    """Return the raw XSD bundled for ``kind``, or None if it is not shipped."""
    resource = files(__package__) / "xsd" / f"{kind.value}.xsd"
    try:
        return resource.read_bytes()
    except FileNotFoundError:
        return None


@lru_cache(maxsize=None)
def get_schema(kind: DocumentKind) -> etree.XMLSchema | None:
    """Return the compiled schema for ``kind``, or None when none is bundled.

    A missing schema is not an error: callers parse without validation.
    """
    source = load_schema_source(kind)
    if source is None:
        logger.debug("No schema bundled for %s documents", kind.value)
        return None
    return etree.XMLSchema(etree.fromstring(source))
