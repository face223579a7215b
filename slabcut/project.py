"""A project: parts, stock sheets, settings and an optional result."""

from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping, Optional

from slabcut.parts import OptimizeResult, Part, StockSheet
from slabcut.settings import CutSettings, default_settings


@dataclass
class ProjectMetadata:
    """Sharing and collaboration details of a project."""

    author: str = ""
    email: str = ""
    created_at: str = ""
    updated_at: str = ""
    notes: str = ""
    version: str = ""
    shared_from: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        """Only the fields that are set."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectMetadata":
        data = data or {}
        return cls(**{f.name: str(data.get(f.name) or "") for f in fields(cls)})


@dataclass
class Project:
    """Everything that is saved and loaded together."""

    name: str = ""
    metadata: ProjectMetadata = field(default_factory=ProjectMetadata)
    parts: List[Part] = field(default_factory=list)
    stocks: List[StockSheet] = field(default_factory=list)
    settings: CutSettings = field(default_factory=CutSettings)
    result: Optional[OptimizeResult] = None

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "metadata": self.metadata.to_dict(),
            "parts": [p.to_dict() for p in self.parts],
            "stocks": [s.to_dict() for s in self.stocks],
            "settings": self.settings.to_dict(),
        }
        if self.result is not None:
            data["result"] = self.result.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        data = data or {}
        result = data.get("result")
        return cls(
            name=str(data.get("name") or ""),
            metadata=ProjectMetadata.from_dict(data.get("metadata") or {}),
            parts=[Part.from_dict(p) for p in data.get("parts") or []],
            stocks=[StockSheet.from_dict(s) for s in data.get("stocks") or []],
            settings=CutSettings.from_dict(data.get("settings") or {}),
            result=None if result is None else OptimizeResult.from_dict(result),
        )


def new_project() -> Project:
    """An empty, untitled project with default settings."""
    return Project(name="Untitled", settings=default_settings())