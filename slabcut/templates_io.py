"""Reading and writing the project template store."""

import json
import os
from pathlib import Path
from typing import Union

from slabcut.template import TemplateStore

PathLike = Union[str, "os.PathLike[str]"]


def default_template_path() -> str:
    """``~/.slabcut/templates.json``; the directory is created if missing."""
    directory = Path.home() / ".slabcut"
    directory.mkdir(parents=True, exist_ok=True)
    return str(directory / "templates.json")


def save_templates(path: PathLike, store: TemplateStore) -> None:
    """Write the store as JSON, creating missing directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(store.to_dict(), indent=2), encoding="utf-8")


def load_templates(path: PathLike) -> TemplateStore:
    """Read the store; a missing file gives an empty store."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return TemplateStore()
    data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("templates file does not hold a JSON object")
    return TemplateStore.from_dict(data)


def load_default_templates() -> TemplateStore:
    return load_templates(default_template_path())


def save_default_templates(store: TemplateStore) -> None:
    save_templates(default_template_path(), store)