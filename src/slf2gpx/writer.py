"""GPX serialization.

Documents are written without schema validation: everything handed to the
writer comes out of ``to_gpx``, which only builds schema-conformant trees.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from lxml import etree

from .config import GPX_NAMESPACE, GPX_SCHEMA_LOCATION, XSI_NAMESPACE
from .models import GpxDocument, Person, Track, Waypoint

logger = logging.getLogger(__name__)

NSMAP = {None: GPX_NAMESPACE, "xsi": XSI_NAMESPACE}


def write_document(document: GpxDocument, path: str | Path) -> bool:
    """Write ``document`` to ``path`` as indented GPX, creating or overwriting it.

    Returns False (after logging the cause) instead of raising on failure.
    """
    try:
        data = serialize_gpx(document)
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, ValueError) as exc:
        logger.error("Could not write %s: %s", path, exc)
        return False
    logger.debug("Wrote %s (%d bytes)", path, len(data))
    return True


def serialize_gpx(document: GpxDocument) -> bytes:
    """Return ``document`` as an indented UTF-8 GPX byte string."""
    root = etree.Element(_tag("gpx"), nsmap=NSMAP)
    root.set("version", document.version)
    root.set("creator", document.creator)
    root.set(f"{{{XSI_NAMESPACE}}}schemaLocation", GPX_SCHEMA_LOCATION)

    if document.metadata is not None:
        metadata = etree.SubElement(root, _tag("metadata"))
        _text_element(metadata, "name", document.metadata.name)
        if document.metadata.author is not None:
            _person_element(metadata, document.metadata.author)

    for track in document.trk:
        _track_element(root, track)

    return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")


def format_decimal(value: Decimal) -> str:
    """Fixed-point text for ``value``; xs:decimal does not allow exponents."""
    return format(value, "f")


def _tag(name: str) -> str:
    return f"{{{GPX_NAMESPACE}}}{name}"


def _text_element(parent: etree._Element, name: str, text: str | None) -> None:
    if text is not None:
        etree.SubElement(parent, _tag(name)).text = text


def _person_element(parent: etree._Element, person: Person) -> None:
    author = etree.SubElement(parent, _tag("author"))
    _text_element(author, "name", person.name)
    if person.email is not None:
        etree.SubElement(author, _tag("email"), id=person.email.id, domain=person.email.domain)


def _track_element(parent: etree._Element, track: Track) -> None:
    trk = etree.SubElement(parent, _tag("trk"))
    _text_element(trk, "name", track.name)
    for segment in track.trkseg:
        trkseg = etree.SubElement(trk, _tag("trkseg"))
        for point in segment.trkpt:
            _waypoint_element(trkseg, point)


def _waypoint_element(parent: etree._Element, point: Waypoint) -> None:
    trkpt = etree.SubElement(
        parent, _tag("trkpt"), lat=format_decimal(point.lat), lon=format_decimal(point.lon)
    )
    if point.ele is not None:
        etree.SubElement(trkpt, _tag("ele")).text = format_decimal(point.ele)
