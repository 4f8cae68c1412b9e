"""Shared fixtures for the gazetteer test suite."""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import gazetteer_i18n
sys.path.insert(0, str(Path(__file__).parent.parent))

from gazetteer_i18n import AddressHierarchyBuilder
from gazetteer_i18n.types import GazetteerConfig, GazetteerRecord, Level

# Phnom Penh sample used throughout the suite
SAMPLE_ROWS = [
    ["Province", "P1", "Phnom Penh", "ភ្នំពេញ", ""],
    ["District", "D1", "Chamkarmon", "ចំការមន", "P1"],
    ["Commune", "C1", "Tonle Bassac", "ទន្លេបាសាក់", "D1"],
    ["Village", "V1", "Tonle Bassac", "ទន្លេបាសាក់", "C1"],
]


def make_record(level: str, entry_id: str, target: str, source: str, parent_id: str = "") -> GazetteerRecord:
    return GazetteerRecord(
        level=Level(level),
        id=entry_id,
        parent_id=parent_id,
        name_source=source,
        name_target=target,
    )


@pytest.fixture
def config():
    return GazetteerConfig.create_default()


@pytest.fixture
def builder(config):
    return AddressHierarchyBuilder(config)


@pytest.fixture
def sample_records():
    return [make_record(*row) for row in SAMPLE_ROWS]


@pytest.fixture
def write_gazetteer(tmp_path):
    """Write rows as a headerless UTF-8 CSV and return its path."""

    def _write(rows, name="gazetteer.csv"):
        path = tmp_path / name
        path.write_text("".join(",".join(row) + "\n" for row in rows), encoding="utf-8")
        return path

    return _write
