import json

import pytest

from utils import app_config


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(app_config, "CONFIG_FILE", path)
    return path


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_config_is_empty():
    assert app_config.load_config() == {}
    assert app_config.get_db_folder() is None
    assert app_config.get_log_level() == "WARNING"


def test_corrupt_config_is_empty(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert app_config.load_config() == {}


def test_non_object_config_is_empty(config_file):
    _write(config_file, ["db_folder"])
    assert app_config.load_config() == {}


def test_db_folder(tmp_path, config_file):
    _write(config_file, {"db_folder": str(tmp_path / "data")})
    assert app_config.get_db_folder() == str(tmp_path / "data")
    _write(config_file, {"db_folder": ""})
    assert app_config.get_db_folder() is None


def test_log_level(config_file):
    _write(config_file, {"log_level": "debug"})
    assert app_config.get_log_level() == "DEBUG"
    _write(config_file, {"log_level": "chatty"})
    assert app_config.get_log_level() == "WARNING"
