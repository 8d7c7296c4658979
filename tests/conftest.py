from pathlib import Path

import pytest

SAMPLEDATA = Path(__file__).parent.parent / "sampledata"

SLF_TEMPLATE = """\
<?xml version="1.0" encoding="utf-8"?>
<Activity revision="400">
  <GeneralInformation>
    <sport><![CDATA[skiing]]></sport>
  </GeneralInformation>
  <Entries>
{entries}
  </Entries>
</Activity>
"""


def build_slf(*points: tuple[float, float, float]) -> str:
    """Build an SLF document with one Entry per (latitude, longitude, altitude)."""
    entries = "\n".join(
        f'    <Entry latitude="{lat!r}" longitude="{lon!r}" altitude="{alt!r}" speed="0"/>'
        for lat, lon, alt in points
    )
    return SLF_TEMPLATE.format(entries=entries)


@pytest.fixture
def ski_day_path():
    return SAMPLEDATA / "ski_day.slf"


@pytest.fixture
def slf_dir(tmp_path):
    """A directory holding two valid SLF files and an unrelated text file."""
    (tmp_path / "a.slf").write_text(build_slf((46.0, 7.5, 1800.0), (46.1, 7.6, 1750.5)))
    (tmp_path / "b.slf").write_text(build_slf((47.25, 11.4, 2100.0)))
    (tmp_path / "c.txt").write_text("not a track")
    return tmp_path


@pytest.fixture
def make_slf():
    return build_slf
