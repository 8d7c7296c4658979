"""Pydantic document models for SLF input and GPX output."""

from decimal import Decimal

from pydantic import BaseModel, FiniteFloat


# --- SLF ---------------------------------------------------------------------


class ActivityEntry(BaseModel):
    """A single sampled position from an SLF ``<Entry>``."""

    latitude: FiniteFloat
    longitude: FiniteFloat
    altitude: FiniteFloat


class GeneralInformation(BaseModel):
    """Trip-level metadata of an SLF activity (simple child elements only)."""

    fields: dict[str, str] = {}


class Activity(BaseModel):
    """Root of an SLF document."""

    general_information: GeneralInformation
    entries: list[ActivityEntry] = []


# --- GPX ---------------------------------------------------------------------


class Email(BaseModel):
    id: str
    domain: str


class Person(BaseModel):
    name: str | None = None
    email: Email | None = None


class Metadata(BaseModel):
    name: str | None = None
    author: Person | None = None


class Waypoint(BaseModel):
    """A GPX ``<trkpt>``."""

    lat: Decimal
    lon: Decimal
    ele: Decimal | None = None


class TrackSegment(BaseModel):
    trkpt: list[Waypoint] = []


class Track(BaseModel):
    name: str | None = None
    trkseg: list[TrackSegment] = []


class GpxDocument(BaseModel):
    """Root of a GPX 1.1 document."""

    version: str = "1.1"
    creator: str
    metadata: Metadata | None = None
    trk: list[Track] = []
