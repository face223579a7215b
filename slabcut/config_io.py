"""Reading and writing the application configuration and full backups."""

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Union

from slabcut.appconfig import AppConfig, default_app_config

PathLike = Union[str, "os.PathLike[str]"]

BACKUP_VERSION = "1.0.0"


class BackupError(Exception):
    """Raised when a backup cannot be written or read."""


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


def _write_json(path: PathLike, data: Any) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _object(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def default_config_dir() -> str:
    """The configuration directory, ``~/.slabcut``."""
    return str(_home() / ".slabcut")


def default_config_path() -> str:
    return str(Path(default_config_dir()) / "config.json")


def save_app_config(path: PathLike, config: AppConfig) -> None:
    """Write the configuration as JSON, creating missing directories."""
    _write_json(path, config.to_dict())


def load_app_config(path: PathLike) -> AppConfig:
    """Read the configuration; a missing file gives the defaults."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return default_app_config()
    return AppConfig.from_dict(_object(json.loads(text)))


@dataclass
class BackupData:
    """Everything in an export of the application's data."""

    version: str = ""
    created_at: str = ""
    config: AppConfig = field(default_factory=AppConfig)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "created_at": self.created_at,
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BackupData":
        data = data or {}
        return cls(
            version=str(data.get("version") or ""),
            created_at=str(data.get("created_at") or ""),
            config=AppConfig.from_dict(_object(data.get("config"))),
        )


def export_all_data(export_path: PathLike, config: AppConfig) -> None:
    """Write a backup holding the configuration to ``export_path``."""
    backup = BackupData(
        version=BACKUP_VERSION,
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        config=config,
    )
    target = Path(export_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupError(f"failed to create export directory: {exc}") from exc
    try:
        target.write_text(json.dumps(backup.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        raise BackupError(f"failed to write backup file: {exc}") from exc


def import_all_data(import_path: PathLike) -> BackupData:
    """Read a backup file; the caller applies the configuration it holds."""
    try:
        text = Path(import_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise BackupError(f"failed to read backup file: {exc}") from exc
    try:
        backup = BackupData.from_dict(_object(json.loads(text)))
    except (ValueError, TypeError) as exc:
        raise BackupError(f"failed to parse backup file: {exc}") from exc
    if not backup.version:
        raise BackupError("invalid backup file: missing version field")
    return backup