"""Structural mapping from an SLF activity to a GPX document."""

from decimal import Decimal

from .config import AUTHOR_EMAIL_DOMAIN, AUTHOR_EMAIL_ID, AUTHOR_NAME, CREATOR, GPX_VERSION
from .models import Activity, ActivityEntry, Email, GpxDocument, Metadata, Person, Track, TrackSegment, Waypoint

DEFAULT_AUTHOR = Person(name=AUTHOR_NAME, email=Email(id=AUTHOR_EMAIL_ID, domain=AUTHOR_EMAIL_DOMAIN))


def to_gpx(activity: Activity, name: str, author: Person = DEFAULT_AUTHOR) -> GpxDocument:
    """Build a GPX document with one track and one segment holding every entry in order.

    ``name`` is used for both the metadata and the track name. Fields of the
    activity with no GPX counterpart are dropped.
    """
    segment = TrackSegment(trkpt=[to_waypoint(entry) for entry in activity.entries])
    return GpxDocument(
        version=GPX_VERSION,
        creator=CREATOR,
        metadata=Metadata(name=name, author=author.model_copy(deep=True)),
        trk=[Track(name=name, trkseg=[segment])],
    )


def to_waypoint(entry: ActivityEntry) -> Waypoint:
    return Waypoint(
        lat=widen(entry.latitude),
        lon=widen(entry.longitude),
        ele=widen(entry.altitude),
    )


def widen(value: float) -> Decimal:
    """Convert a float to the shortest Decimal that round-trips to the same float."""
    return Decimal(repr(value))
