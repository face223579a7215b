"""The personal library of reusable parts."""

import string
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Mapping, Optional

from slabcut.parts import Grain, Part

DEFAULT_CATEGORY = "General"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


def _lower(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(_ASCII_LOWER)


def _grain(value: Any) -> Grain:
    try:
        return Grain(int(value or 0))
    except ValueError:
        return Grain.NONE


@dataclass
class LibraryPart:
    """A part kept in the library, with metadata for organising it."""

    id: str = ""
    label: str = ""
    width: float = 0.0
    height: float = 0.0
    grain: Grain = Grain.NONE
    category: str = ""
    material: str = ""
    thickness: float = 0.0
    notes: str = ""
    tags: List[str] = field(default_factory=list)

    def to_part(self, quantity: int) -> Part:
        """A project part with a fresh ID."""
        return Part(
            id=_short_id(),
            label=self.label,
            width=self.width,
            height=self.height,
            quantity=quantity,
            grain=self.grain,
        )

    def _matches(self, lowered_query: str) -> bool:
        return (
            lowered_query in _lower(self.label)
            or lowered_query in _lower(self.notes)
            or any(lowered_query in _lower(tag) for tag in self.tags)
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "width": self.width,
            "height": self.height,
            "grain": int(self.grain),
            "category": self.category,
            "material": self.material,
            "thickness": self.thickness,
            "notes": self.notes,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LibraryPart":
        data = data or {}
        return cls(
            id=str(data.get("id") or ""),
            label=str(data.get("label") or ""),
            width=float(data.get("width") or 0.0),
            height=float(data.get("height") or 0.0),
            grain=_grain(data.get("grain")),
            category=str(data.get("category") or ""),
            material=str(data.get("material") or ""),
            thickness=float(data.get("thickness") or 0.0),
            notes=str(data.get("notes") or ""),
            tags=[str(t) for t in data.get("tags") or []],
        )


def new_library_part(label: str, width: float, height: float, grain: Grain) -> LibraryPart:
    """A library part with a fresh ID and no tags."""
    return LibraryPart(id=_short_id(), label=label, width=width, height=height, grain=grain)


@dataclass
class PartsLibrary:
    """The user's parts and the categories they are filed under."""

    parts: List[LibraryPart] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)

    def add_part(self, part: LibraryPart) -> None:
        """Store a copy of ``part``, filing it under General when it has no category."""
        stored = replace(part, tags=list(part.tags), category=part.category or DEFAULT_CATEGORY)
        self.parts.append(stored)
        self.add_category(stored.category)

    def remove_part(self, part_id: str) -> None:
        for index, part in enumerate(self.parts):
            if part.id == part_id:
                del self.parts[index]
                return

    def update_part(self, updated: LibraryPart) -> None:
        """Replace the part with the same ID; nothing happens if there is none."""
        for index, part in enumerate(self.parts):
            if part.id == updated.id:
                self.parts[index] = replace(updated, tags=list(updated.tags))
                self.add_category(updated.category)
                return

    def find_by_id(self, part_id: str) -> Optional[LibraryPart]:
        return next((p for p in self.parts if p.id == part_id), None)

    @staticmethod
    def _search_in(parts: Iterable[LibraryPart], query: str) -> List[LibraryPart]:
        lowered = _lower(query)
        return [p for p in parts if p._matches(lowered)]

    def search(self, query: str) -> List[LibraryPart]:
        """Parts whose label, notes or tags contain the query, ignoring case."""
        if not query:
            return list(self.parts)
        return self._search_in(self.parts, query)

    def filter_by_category(self, category: str) -> List[LibraryPart]:
        """Parts in the category; an empty category or "All" gives every part."""
        if category in ("", "All"):
            return list(self.parts)
        return [p for p in self.parts if p.category == category]

    def search_and_filter(self, query: str, category: str) -> List[LibraryPart]:
        parts = self.filter_by_category(category)
        if not query:
            return parts
        return self._search_in(parts, query)

    def add_category(self, category: str) -> None:
        if category not in self.categories:
            self.categories.append(category)

    def to_dict(self) -> dict:
        return {
            "parts": [p.to_dict() for p in self.parts],
            "categories": list(self.categories),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartsLibrary":
        data = data or {}
        return cls(
            parts=[LibraryPart.from_dict(p) for p in data.get("parts") or []],
            categories=[str(c) for c in data.get("categories") or []],
        )


def new_parts_library() -> PartsLibrary:
    """An empty library holding only the default category."""
    return PartsLibrary(parts=[], categories=[DEFAULT_CATEGORY])