"""Reading and writing the personal parts library file."""

import json
import os
from pathlib import Path
from typing import Union

from slabcut.library import DEFAULT_CATEGORY, PartsLibrary, new_parts_library

PathLike = Union[str, "os.PathLike[str]"]


def default_library_path() -> str:
    """``~/.slabcut/parts_library.json``; the directory is created if missing."""
    directory = Path.home() / ".slabcut"
    directory.mkdir(parents=True, exist_ok=True)
    return str(directory / "parts_library.json")


def save_library(path: PathLike, library: PartsLibrary) -> None:
    """Write the library as JSON."""
    Path(path).write_text(json.dumps(library.to_dict(), indent=2), encoding="utf-8")


def load_library(path: PathLike) -> PartsLibrary:
    """Read the library; a missing file gives a new, empty library."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return new_parts_library()
    data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("parts library file does not hold a JSON object")
    library = PartsLibrary.from_dict(data)
    if not library.categories:
        library.categories = [DEFAULT_CATEGORY]
    return library


def load_default_library() -> PartsLibrary:
    """Read the library from the default path."""
    return load_library(default_library_path())


def save_default_library(library: PartsLibrary) -> None:
    """Write the library to the default path."""
    save_library(default_library_path(), library)