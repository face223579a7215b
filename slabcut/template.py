"""Reusable project templates and the store that holds them."""

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional

from slabcut.parts import Part, StockSheet, new_part, new_stock_sheet
from slabcut.project import Project
from slabcut.settings import CutSettings


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class ProjectTemplate:
    """Parts, stock sheets and settings of a project, without results."""

    id: str = ""
    name: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""
    parts: List[Part] = field(default_factory=list)
    stocks: List[StockSheet] = field(default_factory=list)
    settings: CutSettings = field(default_factory=CutSettings)

    def to_project(self, project_name: str) -> Project:
        """A new project whose parts and stock sheets have fresh IDs."""
        parts = []
        for p in self.parts:
            part = new_part(p.label, p.width, p.height, p.quantity)
            part.grain = p.grain
            part.outline = p.outline
            parts.append(part)

        stocks = []
        for s in self.stocks:
            stock = new_stock_sheet(s.label, s.width, s.height, s.quantity)
            stock.tabs = copy.deepcopy(s.tabs)
            stocks.append(stock)

        return Project(
            name=project_name,
            parts=parts,
            stocks=stocks,
            settings=copy.deepcopy(self.settings),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "parts": [p.to_dict() for p in self.parts],
            "stocks": [s.to_dict() for s in self.stocks],
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectTemplate":
        data = data or {}
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            created_at=str(data.get("created_at") or ""),
            updated_at=str(data.get("updated_at") or ""),
            parts=[Part.from_dict(p) for p in data.get("parts") or []],
            stocks=[StockSheet.from_dict(s) for s in data.get("stocks") or []],
            settings=CutSettings.from_dict(data.get("settings") or {}),
        )


def new_project_template(
    name: str,
    description: str,
    parts: Optional[Iterable[Part]],
    stocks: Optional[Iterable[StockSheet]],
    settings: CutSettings,
) -> ProjectTemplate:
    """A template holding copies of the given parts, stocks and settings."""
    now = _now()
    return ProjectTemplate(
        id=_short_id(),
        name=name,
        description=description,
        created_at=now,
        updated_at=now,
        parts=copy.deepcopy(list(parts or [])),
        stocks=copy.deepcopy(list(stocks or [])),
        settings=copy.deepcopy(settings),
    )


@dataclass
class TemplateStore:
    """A collection of project templates."""

    templates: List[ProjectTemplate] = field(default_factory=list)

    def add(self, template: ProjectTemplate) -> None:
        self.templates.append(template)

    def remove(self, template_id: str) -> bool:
        """Remove the template with this ID; return whether one was found."""
        for index, template in enumerate(self.templates):
            if template.id == template_id:
                del self.templates[index]
                return True
        return False

    def find_by_id(self, template_id: str) -> Optional[ProjectTemplate]:
        return next((t for t in self.templates if t.id == template_id), None)

    def names(self) -> List[str]:
        return [t.name for t in self.templates]

    def find_by_name(self, name: str) -> Optional[ProjectTemplate]:
        return next((t for t in self.templates if t.name == name), None)

    def to_dict(self) -> dict:
        return {"templates": [t.to_dict() for t in self.templates]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateStore":
        data = data or {}
        return cls(templates=[ProjectTemplate.from_dict(t) for t in data.get("templates") or []])