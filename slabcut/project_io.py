"""Saving, loading and sharing projects, and writing GCode files."""

import copy
import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Union

from slabcut.project import Project

PathLike = Union[str, "os.PathLike[str]"]

SHARE_FORMAT_VERSION = "1.0"


class SharingError(Exception):
    """Raised when a shared project cannot be written or read."""


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _project_from(data: Any) -> Project:
    if not isinstance(data, dict):
        raise ValueError("project file does not hold a JSON object")
    return Project.from_dict(data)


def save_project(path: PathLike, project: Project) -> None:
    """Write the project as JSON."""
    Path(path).write_text(json.dumps(project.to_dict(), indent=2), encoding="utf-8")


def load_project(path: PathLike) -> Project:
    """Read a project written by ``save_project``."""
    return _project_from(json.loads(Path(path).read_text(encoding="utf-8")))


def export_gcode(path: PathLike, code: str) -> None:
    Path(path).write_text(code, encoding="utf-8")


@dataclass
class SharedProject:
    """A project wrapped with the details of who shared it and when."""

    format_version: str = ""
    shared_at: str = ""
    shared_by: str = ""
    project: Project = field(default_factory=Project)

    def to_dict(self) -> dict:
        return {
            "format_version": self.format_version,
            "shared_at": self.shared_at,
            "shared_by": self.shared_by,
            "project": self.project.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SharedProject":
        data = data or {}
        project = data.get("project")
        return cls(
            format_version=str(data.get("format_version") or ""),
            shared_at=str(data.get("shared_at") or ""),
            shared_by=str(data.get("shared_by") or ""),
            project=Project() if project is None else _project_from(project),
        )


def export_shared(path: PathLike, project: Project, author: str, notes: str) -> None:
    """Write a shareable copy of the project with author and notes in its metadata."""
    now = _now()
    shared_copy = copy.deepcopy(project)
    meta = shared_copy.metadata
    meta.updated_at = now
    if not meta.created_at:
        meta.created_at = now
    meta.author = author
    meta.notes = notes
    meta.version = "1.0"

    shared = SharedProject(
        format_version=SHARE_FORMAT_VERSION,
        shared_at=now,
        shared_by=author,
        project=shared_copy,
    )
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SharingError(f"failed to create directory: {exc}") from exc
    try:
        target.write_text(json.dumps(shared.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        raise SharingError(f"failed to write shared project: {exc}") from exc


def import_shared(path: PathLike) -> Project:
    """Read a shared project file, or a plain project file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SharingError(f"failed to read shared file: {exc}") from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise SharingError(f"failed to parse project file: {exc}") from exc

    if isinstance(data, dict) and data.get("format_version"):
        try:
            shared = SharedProject.from_dict(data)
        except (ValueError, TypeError):
            shared = None
        if shared is not None:
            project = shared.project
            if not project.metadata.shared_from:
                project.metadata.shared_from = shared.shared_by
            return project

    try:
        return _project_from(data)
    except (ValueError, TypeError) as exc:
        raise SharingError(f"failed to parse project file: {exc}") from exc