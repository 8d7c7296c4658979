"""Resolve input/output paths and run the read -> map -> write pipeline per file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from .config import GPX_SUFFIX, SLF_SUFFIX
from .mapper import to_gpx
from .models import Activity
from .reader import read_document
from .schema_registry import DocumentKind
from .writer import write_document

logger = logging.getLogger(__name__)


class BatchReport(BaseModel):
    """Outcome of converting one input path (a file or a directory)."""

    converted: list[Path] = []
    failed: list[Path] = []

    @property
    def failure_count(self) -> int:
        return len(self.failed)


def resolve_jobs(input_path: str | Path | None, output_path: str | Path | None = None) -> list[tuple[Path, Path]]:
    """Return the (input, output) pairs to convert for a user-supplied input path.

    A directory yields every ``*.slf`` file directly inside it, written next to
    it (or into ``output_path``) with a ``.gpx`` suffix. Anything else is
    treated as a single input file. A blank input yields nothing. Raises
    OSError when the input directory cannot be listed.
    """
    if input_path is None or not str(input_path).strip():
        return []

    source = Path(input_path)
    if source.is_dir():
        target_dir = Path(output_path) if output_path else source
        inputs = sorted(
            p for p in source.iterdir() if p.is_file() and p.suffix.lower() == SLF_SUFFIX
        )
        return [(p, target_dir / f"{p.stem}{GPX_SUFFIX}") for p in inputs]

    target = Path(output_path) if output_path else source.with_suffix(GPX_SUFFIX)
    return [(source, target)]


def convert_file(input_path: Path, output_path: Path) -> bool:
    """Convert one SLF file; returns False if it was skipped or could not be written."""
    activity = read_document(input_path, DocumentKind.SLF)
    if not isinstance(activity, Activity):
        return False

    gpx = to_gpx(activity, input_path.stem)
    if not write_document(gpx, output_path):
        return False

    logger.info("Converted %s -> %s (%d trackpoints)", input_path, output_path, len(activity.entries))
    return True


def convert_path(input_path: str | Path | None, output_path: str | Path | None = None) -> BatchReport:
    """Convert every file resolved from ``input_path``; one bad file never stops the rest."""
    report = BatchReport()
    try:
        jobs = resolve_jobs(input_path, output_path)
    except OSError as exc:
        logger.error("Could not list %s: %s", input_path, exc)
        report.failed.append(Path(input_path))
        return report

    for source, target in jobs:
        if convert_file(source, target):
            report.converted.append(source)
        else:
            report.failed.append(source)

    if report.failed:
        logger.warning("%d of %d file(s) could not be converted", report.failure_count,
                       report.failure_count + len(report.converted))
    return report
