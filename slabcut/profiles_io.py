"""Reading and writing user-defined GCode profiles."""

import json
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Union

from slabcut.profiles import GCodeProfile

PathLike = Union[str, "os.PathLike[str]"]


class ProfileFileError(ValueError):
    """Raised when a profile file does not hold a usable profile."""


def _user_config_dir() -> Path:
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise OSError("%AppData% is not defined")
        return Path(appdata)
    if sys.platform == "darwin":
        home = os.environ.get("HOME")
        if not home:
            raise OSError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        if not os.path.isabs(xdg):
            raise OSError("path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)
    home = os.environ.get("HOME")
    if not home:
        raise OSError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def default_profiles_dir() -> str:
    """The ``slabcut`` directory under the user's configuration directory."""
    return str(_user_config_dir() / "slabcut")


def default_profiles_path() -> str:
    return str(Path(default_profiles_dir()) / "profiles.json")


def save_custom_profiles(path: PathLike, profiles: List[GCodeProfile]) -> None:
    """Write the profiles as a JSON list, creating missing directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps([p.to_dict() for p in profiles], indent=2), encoding="utf-8")


def load_custom_profiles(path: PathLike) -> List[GCodeProfile]:
    """Read custom profiles; a missing file gives an empty list."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    data = json.loads(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ProfileFileError("profiles file does not hold a JSON list")
    profiles = []
    for item in data:
        if not isinstance(item, dict):
            raise ProfileFileError("profile entry is not a JSON object")
        profile = GCodeProfile.from_dict(item)
        profile.is_built_in = False
        profiles.append(profile)
    return profiles


def save_custom_profiles_to_default(profiles: List[GCodeProfile]) -> None:
    save_custom_profiles(default_profiles_path(), profiles)


def load_custom_profiles_from_default() -> List[GCodeProfile]:
    return load_custom_profiles(default_profiles_path())


def export_profile(path: PathLike, profile: GCodeProfile) -> None:
    """Write one profile for sharing; it is never marked built-in."""
    shared = replace(profile, is_built_in=False)
    Path(path).write_text(json.dumps(shared.to_dict(), indent=2), encoding="utf-8")


def import_profile(path: PathLike) -> GCodeProfile:
    """Read one shared profile; it must have a name."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ProfileFileError("profile file does not hold a JSON object")
    profile = GCodeProfile.from_dict(data)
    profile.is_built_in = False
    if not profile.name:
        raise ProfileFileError("imported profile has no name")
    return profile