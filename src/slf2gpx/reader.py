"""Schema-validated reader for SLF and GPX documents.

Documents are parsed with lxml, validated against the bundled XSD for their
kind (when one is available) and mapped onto the pydantic models. Failures are
never raised: ``load_document`` returns them as a ``ReadResult`` and
``read_document`` logs them and returns None.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree
from pydantic import BaseModel

from . import schema_registry
from .config import GPX_NAMESPACE
from .models import (
    Activity,
    ActivityEntry,
    Email,
    GeneralInformation,
    GpxDocument,
    Metadata,
    Person,
    Track,
    TrackSegment,
    Waypoint,
)
from .schema_registry import DocumentKind

logger = logging.getLogger(__name__)

GPX_NS = {"gpx": GPX_NAMESPACE}

Source = Union[str, Path, bytes, BinaryIO]


class FailureKind(str, Enum):
    IO = "io"
    SYNTAX = "syntax"
    SCHEMA = "schema"
    MODEL = "model"


class ReadFailure(BaseModel):
    kind: FailureKind
    message: str


class ReadResult(BaseModel):
    """Either a deserialized document or the reason it could not be read."""

    document: Activity | GpxDocument | None = None
    failure: ReadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def read_document(source: Source, kind: DocumentKind) -> Activity | GpxDocument | None:
    """Read a document of ``kind``, returning None (and logging why) on any failure."""
    result = load_document(source, kind)
    if result.failure is not None:
        logger.error(
            "Could not read %s document %s (%s): %s",
            kind.value, describe_source(source), result.failure.kind.value, result.failure.message,
        )
    return result.document


def load_document(source: Source, kind: DocumentKind) -> ReadResult:
    """Read, validate and deserialize a document of ``kind``."""
    try:
        data = _read_bytes(source)
    except OSError as exc:
        return _failed(FailureKind.IO, exc)

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        return _failed(FailureKind.SYNTAX, exc)

    schema = schema_registry.get_schema(kind)
    if schema is not None:
        try:
            schema.assertValid(root)
        except etree.DocumentInvalid as exc:
            return _failed(FailureKind.SCHEMA, exc)

    try:
        document = _BUILDERS[kind](root)
    except ValueError as exc:
        # includes pydantic.ValidationError
        return _failed(FailureKind.MODEL, exc)
    return ReadResult(document=document)


def describe_source(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return "<stream>"


def _failed(kind: FailureKind, exc: Exception) -> ReadResult:
    return ReadResult(failure=ReadFailure(kind=kind, message=str(exc) or type(exc).__name__))


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, Path)):
        with open(source, "rb") as f:
            return f.read()
    return source.read()


def _local_name(elem: etree._Element) -> str:
    return etree.QName(elem).localname


def _build_activity(root: etree._Element) -> Activity:
    if root.tag != "Activity":
        raise ValueError(f"Expected <Activity> root element, found <{root.tag}>")

    info = root.find("GeneralInformation")
    if info is None:
        raise ValueError("Missing <GeneralInformation>")
    entries_elem = root.find("Entries")
    if entries_elem is None:
        raise ValueError("Missing <Entries>")

    # Only leaf elements carry a value worth keeping; comments have no str tag
    fields = {
        _local_name(child): (child.text or "").strip()
        for child in info
        if isinstance(child.tag, str) and len(child) == 0
    }

    entries = [
        ActivityEntry(
            latitude=entry.get("latitude"),
            longitude=entry.get("longitude"),
            altitude=entry.get("altitude"),
        )
        for entry in entries_elem.iterfind("Entry")
    ]
    return Activity(general_information=GeneralInformation(fields=fields), entries=entries)


def _build_gpx(root: etree._Element) -> GpxDocument:
    if root.tag != f"{{{GPX_NAMESPACE}}}gpx":
        raise ValueError(f"Expected GPX 1.1 <gpx> root element, found <{root.tag}>")

    metadata = None
    metadata_elem = root.find("gpx:metadata", GPX_NS)
    if metadata_elem is not None:
        metadata = Metadata(
            name=_child_text(metadata_elem, "name"),
            author=_build_person(metadata_elem.find("gpx:author", GPX_NS)),
        )

    tracks = []
    for trk in root.iterfind("gpx:trk", GPX_NS):
        segments = [
            TrackSegment(trkpt=[_build_waypoint(pt) for pt in seg.iterfind("gpx:trkpt", GPX_NS)])
            for seg in trk.iterfind("gpx:trkseg", GPX_NS)
        ]
        tracks.append(Track(name=_child_text(trk, "name"), trkseg=segments))

    return GpxDocument(
        version=root.get("version", "1.1"),
        creator=root.get("creator", ""),
        metadata=metadata,
        trk=tracks,
    )


def _build_person(elem: etree._Element | None) -> Person | None:
    if elem is None:
        return None
    email = None
    email_elem = elem.find("gpx:email", GPX_NS)
    if email_elem is not None:
        email = Email(id=email_elem.get("id"), domain=email_elem.get("domain"))
    return Person(name=_child_text(elem, "name"), email=email)


def _build_waypoint(elem: etree._Element) -> Waypoint:
    ele = elem.find("gpx:ele", GPX_NS)
    return Waypoint(
        lat=elem.get("lat"),
        lon=elem.get("lon"),
        ele=ele.text.strip() if ele is not None and ele.text else None,
    )


def _child_text(elem: etree._Element, tag: str) -> str | None:
    child = elem.find(f"gpx:{tag}", GPX_NS)
    if child is None:
        return None
    return child.text or ""


_BUILDERS = {
    DocumentKind.SLF: _build_activity,
    DocumentKind.GPX: _build_gpx,
}
