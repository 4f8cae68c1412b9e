"""
Gazetteer reader tests: column layout and malformed row handling.
"""

import pytest

from gazetteer_i18n.services import GazetteerReader
from gazetteer_i18n.types import GazetteerRecord, Level, LogSink, Severity


@pytest.fixture
def reader(config):
    return GazetteerReader(config)


def test_columns_are_read_in_fixed_order(reader, write_gazetteer):
    path = write_gazetteer([["District", "D1", "Chamkarmon", "ចំការមន", "P1"]])

    assert reader.read(path) == [
        GazetteerRecord(level=Level.DISTRICT, id="D1", parent_id="P1", name_source="ចំការមន", name_target="Chamkarmon"),
    ]


def test_province_without_parent_column(reader):
    records = reader.parse_rows([["Province", "P1", "Phnom Penh", "ភ្នំពេញ"]])
    assert records[0].parent_id == ""


def test_quoted_names_with_commas(reader, tmp_path):
    path = tmp_path / "quoted.csv"
    path.write_text('Village,V1,"Ta Phem, Lech",តាភេម,C1\n', encoding="utf-8")
    assert reader.read(path)[0].name_target == "Ta Phem, Lech"


def test_byte_order_mark_is_ignored(reader, tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("Province,P1,Phnom Penh,ភ្នំពេញ,\n".encode("utf-8-sig"))
    assert reader.read(path)[0].level is Level.PROVINCE


def test_every_row_is_data_so_a_header_is_reported(reader):
    log = LogSink()
    records = reader.parse_rows(
        [
            ["level", "id", "en", "kh", "parentId"],
            ["Province", "P1", "Phnom Penh", "ភ្នំពេញ", ""],
        ],
        log,
    )

    assert len(records) == 1
    assert [entry.render() for entry in log] == ["ERROR,Skipping malformed gazetteer row 1: unknown level 'level'"]


def test_short_rows_are_reported_and_blank_rows_skipped(reader):
    log = LogSink()
    records = reader.parse_rows([[], ["", "", ""], ["Village", "V1", "Phum"]], log)

    assert records == []
    assert log.count(Severity.ERROR) == 1
    assert log.entries[0].message == "Skipping malformed gazetteer row 3: expected at least 4 columns, got 3"


def test_missing_file_raises(reader, tmp_path):
    with pytest.raises(FileNotFoundError, match="gazetteer file not found"):
        reader.read(tmp_path / "missing.csv")


def test_custom_column_layout(config):
    reader = GazetteerReader(config.with_overrides(target_column=3, source_column=2))
    record = reader.parse_row(["Village", "V1", "ភូមិ", "Phum", "C1"])
    assert record.name_source == "ភូមិ"
    assert record.name_target == "Phum"
