"""
Configuration and command line tests.
"""

import pytest
from conftest import SAMPLE_ROWS

from gazetteer_i18n.cli import main
from gazetteer_i18n.types import GazetteerConfig


def test_default_file_names():
    config = GazetteerConfig.create_default()
    assert config.namespace_prefix == "addresshierarchy."
    assert config.country_identifier == "addresshierarchy.cambodia"
    assert config.hierarchy_file_name == "addresshierarchy.csv"
    assert config.source_properties_file_name == "addresshierarchy_km_KH.properties"
    assert config.target_properties_file_name == "addresshierarchy_en.properties"
    assert config.log_file_name == "log.txt"


@pytest.mark.parametrize(
    "overrides",
    [
        {"namespace": ""},
        {"country_token": ""},
        {"path_separator": ""},
        {"source_column": 0},
        {"parent_id_column": -1},
    ],
)
def test_invalid_config_values(overrides):
    with pytest.raises(ValueError):
        GazetteerConfig.create_default().with_overrides(**overrides)


def test_from_ini_overrides(tmp_path):
    path = tmp_path / "gazetteer.ini"
    path.write_text("[gazetteer]\ncountry_token = kh\nparent_id_column = 5\n", encoding="utf-8")

    config = GazetteerConfig.from_ini(path)

    assert config.country_token == "kh"
    assert config.parent_id_column == 5
    assert config.namespace == "addresshierarchy"


def test_from_ini_without_section_returns_defaults(tmp_path):
    path = tmp_path / "other.ini"
    path.write_text("[other]\nkey = value\n", encoding="utf-8")
    assert GazetteerConfig.from_ini(path) == GazetteerConfig.create_default()


def test_from_ini_rejects_unknown_keys(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[gazetteer]\nnamespce = typo\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown config key 'namespce'"):
        GazetteerConfig.from_ini(path)


def test_from_ini_rejects_non_integer_columns(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[gazetteer]\nid_column = one\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be an integer"):
        GazetteerConfig.from_ini(path)


def test_cli_writes_outputs(write_gazetteer, tmp_path, capsys):
    path = write_gazetteer(SAMPLE_ROWS)
    target = tmp_path / "target"

    assert main([str(path), "--target-dir", str(target)]) == 0

    assert sorted(p.name for p in target.iterdir()) == [
        "addresshierarchy.csv",
        "addresshierarchy_en.properties",
        "addresshierarchy_km_KH.properties",
        "log.txt",
    ]
    assert "Resolved 1 villages, dropped 0" in capsys.readouterr().out


def test_cli_country_token_override(write_gazetteer, tmp_path):
    path = write_gazetteer(SAMPLE_ROWS)
    target = tmp_path / "target"

    main([str(path), "--target-dir", str(target), "--country-token", "kh"])

    assert (target / "addresshierarchy.csv").read_text(encoding="utf-8").startswith("addresshierarchy.kh,")


def test_cli_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit, match="gazetteer file not found"):
        main([str(tmp_path / "missing.csv"), "--target-dir", str(tmp_path / "target")])


def test_cli_invalid_config_exits(write_gazetteer, tmp_path):
    path = write_gazetteer(SAMPLE_ROWS)
    config_path = tmp_path / "bad.ini"
    config_path.write_text("[gazetteer]\nnamespace =\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="invalid configuration"):
        main([str(path), "--config", str(config_path)])
