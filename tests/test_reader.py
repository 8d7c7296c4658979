"""Tests for the schema-validated SLF/GPX reader."""

import io
import logging

import pytest

from slf2gpx import DocumentKind, FailureKind, load_document, read_document, schema_registry
from slf2gpx.models import Activity


class TestSampleActivity:
    def test_reads_all_entries(self, ski_day_path):
        activity = read_document(ski_day_path, DocumentKind.SLF)
        assert isinstance(activity, Activity)
        assert len(activity.entries) == 5

    def test_preserves_entry_order_and_values(self, ski_day_path):
        activity = read_document(ski_day_path, DocumentKind.SLF)
        first, last = activity.entries[0], activity.entries[-1]
        assert (first.latitude, first.longitude, first.altitude) == (46.0167321, 7.7536417, 2288.4)
        assert (last.latitude, last.longitude, last.altitude) == (46.0159517, 7.7547368, 2239.0)
        altitudes = [e.altitude for e in activity.entries]
        assert altitudes == [2288.4, 2281.9, 2270.05, 2255.3, 2239.0]

    def test_captures_general_information(self, ski_day_path):
        activity = read_document(ski_day_path, DocumentKind.SLF)
        fields = activity.general_information.fields
        assert fields["name"] == "Zermatt Sunnegga"
        assert fields["sport"] == "skiing"

    def test_accepts_str_path(self, ski_day_path):
        assert read_document(str(ski_day_path), DocumentKind.SLF) is not None


class TestInlineSources:
    def test_bytes_source(self, make_slf):
        activity = read_document(make_slf((46.5, 7.25, 1500.0)).encode(), DocumentKind.SLF)
        assert len(activity.entries) == 1
        assert activity.entries[0].longitude == 7.25

    def test_file_object_source(self, make_slf):
        activity = read_document(io.BytesIO(make_slf((46.5, 7.25, 1500.0)).encode()), DocumentKind.SLF)
        assert activity.entries[0].latitude == 46.5

    def test_zero_entries_is_valid(self, make_slf):
        activity = read_document(make_slf().encode(), DocumentKind.SLF)
        assert isinstance(activity, Activity)
        assert activity.entries == []

    def test_extra_entry_attributes_are_ignored(self, make_slf):
        activity = read_document(make_slf((1.0, 2.0, 3.0)).encode(), DocumentKind.SLF)
        assert activity.entries[0].model_dump() == {"latitude": 1.0, "longitude": 2.0, "altitude": 3.0}


class TestFailures:
    MALFORMED = b"<Activity><GeneralInformation></Activity>"

    MISSING_ALTITUDE = b"""\
<Activity>
  <GeneralInformation/>
  <Entries><Entry latitude="46.0" longitude="7.0"/></Entries>
</Activity>"""

    OUT_OF_RANGE = b"""\
<Activity>
  <GeneralInformation/>
  <Entries><Entry latitude="91.5" longitude="7.0" altitude="100"/></Entries>
</Activity>"""

    NO_GENERAL_INFORMATION = b"""\
<Activity>
  <Entries><Entry latitude="46.0" longitude="7.0" altitude="100"/></Entries>
</Activity>"""

    def test_missing_file(self, tmp_path):
        result = load_document(tmp_path / "missing.slf", DocumentKind.SLF)
        assert result.document is None
        assert result.failure.kind == FailureKind.IO

    def test_malformed_xml(self):
        result = load_document(self.MALFORMED, DocumentKind.SLF)
        assert not result.ok
        assert result.failure.kind == FailureKind.SYNTAX

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.slf"
        path.write_bytes(b"")
        assert load_document(path, DocumentKind.SLF).failure.kind == FailureKind.SYNTAX

    @pytest.mark.parametrize("data", [MISSING_ALTITUDE, OUT_OF_RANGE, NO_GENERAL_INFORMATION])
    def test_schema_violation(self, data):
        result = load_document(data, DocumentKind.SLF)
        assert result.document is None
        assert result.failure.kind == FailureKind.SCHEMA

    def test_gpx_read_as_slf(self):
        gpx = b'<gpx xmlns="http://www.topografix.com/GPX/1/1" version="1.1" creator="x"/>'
        assert read_document(gpx, DocumentKind.SLF) is None

    def test_read_document_returns_none_and_logs(self, caplog):
        with caplog.at_level(logging.ERROR, logger="slf2gpx.reader"):
            assert read_document(self.MALFORMED, DocumentKind.SLF) is None
        assert len(caplog.records) == 1
        assert "syntax" in caplog.records[0].getMessage()

    def test_non_finite_value_rejected(self, make_slf):
        data = make_slf((46.0, 7.0, 100.0)).replace('altitude="100.0"', 'altitude="INF"').encode()
        assert read_document(data, DocumentKind.SLF) is None


class TestWithoutSchema:
    @pytest.fixture(autouse=True)
    def no_schema(self, monkeypatch):
        monkeypatch.setattr(schema_registry, "get_schema", lambda kind: None)

    def test_parses_unvalidated(self):
        activity = read_document(TestFailures.OUT_OF_RANGE, DocumentKind.SLF)
        assert activity.entries[0].latitude == 91.5

    def test_missing_values_fail_model_mapping(self):
        result = load_document(TestFailures.MISSING_ALTITUDE, DocumentKind.SLF)
        assert result.failure.kind == FailureKind.MODEL

    def test_missing_general_information_fails_model_mapping(self):
        result = load_document(TestFailures.NO_GENERAL_INFORMATION, DocumentKind.SLF)
        assert result.failure.kind == FailureKind.MODEL

    def test_non_finite_value_fails_model_mapping(self, make_slf):
        data = make_slf((46.0, 7.0, 100.0)).replace('altitude="100.0"', 'altitude="NaN"').encode()
        assert load_document(data, DocumentKind.SLF).failure.kind == FailureKind.MODEL

    def test_malformed_still_fails(self):
        assert load_document(TestFailures.MALFORMED, DocumentKind.SLF).failure.kind == FailureKind.SYNTAX
