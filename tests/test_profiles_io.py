from pathlib import Path

import pytest

from slabcut.profiles import GCodeProfile
from slabcut.profiles_io import (
    ProfileFileError,
    default_profiles_path,
    export_profile,
    import_profile,
    load_custom_profiles,
    load_custom_profiles_from_default,
    save_custom_profiles,
    save_custom_profiles_to_default,
)


def _profile(name, **overrides):
    values = dict(
        name=name,
        description="Test profile",
        is_built_in=False,
        units="mm",
        start_code=["G90", "G21"],
        spindle_start="M3 S%d",
        spindle_stop="M5",
        home_all="$H",
        home_xy="$H",
        absolute_mode="G90",
        feed_mode="G94",
        rapid_move="G0",
        feed_move="G1",
        end_code=["M5", "M2"],
        comment_prefix=";",
        comment_suffix="",
        decimal_places=3,
        leading_zeros=False,
    )
    values.update(overrides)
    return GCodeProfile(**values)


@pytest.fixture
def fake_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path


def test_save_and_load_custom_profiles(tmp_path):
    path = tmp_path / "profiles.json"
    profiles = [
        _profile("TestProfile1"),
        _profile(
            "TestProfile2",
            units="inches",
            start_code=["G90", "G20"],
            end_code=["M5", "M30"],
            comment_prefix="(",
            comment_suffix=")",
            decimal_places=4,
            leading_zeros=True,
            is_built_in=True,
        ),
    ]
    save_custom_profiles(path, profiles)
    assert path.is_file()

    loaded = load_custom_profiles(path)
    assert [p.name for p in loaded] == ["TestProfile1", "TestProfile2"]
    assert not loaded[0].is_built_in
    assert not loaded[1].is_built_in
    assert loaded[1].comment_suffix == ")"
    assert loaded[1].decimal_places == 4
    assert loaded[1].leading_zeros is True


def test_load_custom_profiles_nonexistent(tmp_path):
    assert load_custom_profiles(tmp_path / "nonexistent.json") == []


def test_load_custom_profiles_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("not valid json")
    with pytest.raises(ValueError):
        load_custom_profiles(path)


def test_export_and_import_profile(tmp_path):
    path = tmp_path / "exported.json"
    original = _profile("ExportedProfile", is_built_in=True)
    export_profile(path, original)

    imported = import_profile(path)
    assert imported.name == "ExportedProfile"
    assert imported.is_built_in is False
    assert imported.start_code == ["G90", "G21"]
    assert original.is_built_in is True


def test_import_profile_no_name(tmp_path):
    path = tmp_path / "noname.json"
    path.write_text('{"description": "no name"}')
    with pytest.raises(ProfileFileError):
        import_profile(path)


def test_save_creates_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "profiles.json"
    save_custom_profiles(path, [])
    assert path.is_file()
    assert load_custom_profiles(path) == []


def test_default_profiles_path_shape(fake_config):
    path = Path(default_profiles_path())
    assert path.name == "profiles.json"
    assert path.parent.name == "slabcut"


def test_default_profiles_round_trip(fake_config):
    save_custom_profiles_to_default([_profile("Mine")])
    loaded = load_custom_profiles_from_default()
    assert [p.name for p in loaded] == ["Mine"]