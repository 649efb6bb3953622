"""
Tests for the JSON-backed application configuration.
"""

import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dataio.configuration import Config


def test_defaults_for_missing_file(tmp_path):
    cfg = Config.load(tmp_path / "settings.json")
    assert cfg.delimiter == ","
    assert cfg.pad_fraction == 0.05
    assert cfg.zoom_in_factor == 0.85
    assert cfg.zoom_out_factor == 1.15
    assert cfg.config_path == tmp_path / "settings.json"


def test_save_and_reload(tmp_path):
    cfg = Config(config_folder=str(tmp_path), delimiter=";", pad_fraction=0.1,
                 default_load_folder=str(tmp_path / "data"))
    cfg.save()
    assert not (tmp_path / "settings.json.tmp").exists()

    loaded = Config.load(cfg.config_path)
    assert loaded.delimiter == ";"
    assert loaded.pad_fraction == 0.1
    assert loaded.default_load_folder == str(tmp_path / "data")


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    cfg = Config.load(path)
    assert cfg.delimiter == ","
    assert cfg.config_folder == str(tmp_path)


def test_invalid_values_fall_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "delimiter": ";;",
        "pad_fraction": "lots",
        "zoom_in_factor": -1,
        "zoom_out_factor": 2.0,
    }), encoding="utf-8")
    cfg = Config.load(path)
    assert cfg.delimiter == ","
    assert cfg.pad_fraction == 0.05
    assert cfg.zoom_in_factor == 0.85
    assert cfg.zoom_out_factor == 2.0


def test_parsed_data_is_not_persisted(tmp_path):
    cfg = Config(config_folder=str(tmp_path))
    cfg.save()
    data = json.loads(cfg.config_path.read_text(encoding="utf-8"))
    assert set(data) == {
        "default_load_folder", "default_save_folder", "config_folder", "config_filename",
        "delimiter", "pad_fraction", "zoom_in_factor", "zoom_out_factor",
    }
