import json
from pathlib import Path

import pytest

from slabcut.appconfig import default_app_config
from slabcut.config_io import (
    BackupData,
    BackupError,
    default_config_dir,
    default_config_path,
    export_all_data,
    import_all_data,
    load_app_config,
    save_app_config,
)


def test_default_config_path_layout():
    path = Path(default_config_path())
    assert path.name == "config.json"
    assert path.parent.name == ".slabcut"
    assert str(path.parent) == default_config_dir()


def test_save_and_load_app_config(tmp_path):
    path = tmp_path / "config.json"
    cfg = default_app_config()
    cfg.default_kerf_width = 4.0
    cfg.theme = "dark"
    cfg.auto_save_interval = 5
    cfg.recent_projects = ["/tmp/proj1.cnccalc", "/tmp/proj2.cnccalc"]
    save_app_config(path, cfg)

    loaded = load_app_config(path)
    assert loaded.default_kerf_width == 4.0
    assert loaded.theme == "dark"
    assert loaded.auto_save_interval == 5
    assert len(loaded.recent_projects) == 2
    assert loaded == cfg


def test_load_app_config_missing_file(tmp_path):
    cfg = load_app_config(tmp_path / "nonexistent" / "config.json")
    assert cfg.default_kerf_width == default_app_config().default_kerf_width
    assert cfg.theme == "system"


def test_load_app_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("not valid json{{{")
    with pytest.raises(ValueError):
        load_app_config(path)


def test_save_app_config_creates_directories(tmp_path):
    path = tmp_path / "sub" / "dir" / "config.json"
    save_app_config(path, default_app_config())
    assert path.exists()
    assert json.loads(path.read_text())["theme"] == "system"


def test_load_app_config_null_recent_projects(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"default_kerf_width":3.2,"theme":"light","recent_projects":null}')
    cfg = load_app_config(path)
    assert cfg.recent_projects == []
    assert cfg.theme == "light"


def test_export_and_import_all_data(tmp_path):
    path = tmp_path / "backup.json"
    cfg = default_app_config()
    cfg.default_feed_rate = 2000.0
    cfg.theme = "dark"
    export_all_data(path, cfg)

    backup = import_all_data(path)
    assert backup.version == "1.0.0"
    assert backup.created_at != ""
    assert backup.config.default_feed_rate == 2000.0
    assert backup.config.theme == "dark"


def test_import_all_data_missing_file(tmp_path):
    with pytest.raises(BackupError):
        import_all_data(tmp_path / "nope.json")


def test_import_all_data_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json}")
    with pytest.raises(BackupError):
        import_all_data(path)


def test_import_all_data_missing_version(tmp_path):
    path = tmp_path / "noversion.json"
    path.write_text('{"config":{"theme":"dark"}}')
    with pytest.raises(BackupError, match="missing version"):
        import_all_data(path)


def test_export_all_data_creates_directories(tmp_path):
    path = tmp_path / "deep" / "nested" / "backup.json"
    export_all_data(path, default_app_config())
    assert path.exists()
    assert json.loads(path.read_text())["version"] == "1.0.0"


def test_import_all_data_null_recent_projects(tmp_path):
    path = tmp_path / "backup.json"
    path.write_text(
        '{"version":"1.0.0","created_at":"2025-01-01T00:00:00Z","config":{"recent_projects":null}}'
    )
    backup = import_all_data(path)
    assert backup.config.recent_projects == []
    assert backup.created_at == "2025-01-01T00:00:00Z"


def test_backup_data_round_trip():
    backup = BackupData(version="1.0.0", created_at="2025-01-01T00:00:00Z",
                        config=default_app_config())
    assert BackupData.from_dict(backup.to_dict()) == backup