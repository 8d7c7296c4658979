"""SLF activity log to GPX track converter."""

from .batch import BatchReport, convert_file, convert_path, resolve_jobs
from .mapper import to_gpx
from .models import Activity, ActivityEntry, GeneralInformation, GpxDocument, Track, TrackSegment, Waypoint
from .reader import FailureKind, ReadResult, load_document, read_document
from .schema_registry import DocumentKind, get_schema
from .writer import serialize_gpx, write_document

__all__ = [
    "Activity",
    "ActivityEntry",
    "BatchReport",
    "DocumentKind",
    "FailureKind",
    "GeneralInformation",
    "GpxDocument",
    "ReadResult",
    "Track",
    "TrackSegment",
    "Waypoint",
    "convert_file",
    "convert_path",
    "get_schema",
    "load_document",
    "read_document",
    "resolve_jobs",
    "serialize_gpx",
    "to_gpx",
    "write_document",
]
