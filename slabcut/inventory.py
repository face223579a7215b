"""Saved tool profiles and stock sheet presets."""

import uuid
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from slabcut.parts import StockSheet, new_stock_sheet
from slabcut.settings import CutSettings


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


@dataclass
class ToolProfile:
    """A reusable cutting tool configuration."""

    id: str = ""
    name: str = ""
    slot_number: int = 0  # CNC tool slot (1-12), 0 = unassigned
    tool_diameter: float = 0.0
    feed_rate: float = 0.0
    plunge_rate: float = 0.0
    spindle_speed: int = 0
    safe_z: float = 0.0
    cut_depth: float = 0.0
    pass_depth: float = 0.0

    def apply_to_settings(self, settings: CutSettings) -> None:
        """Copy this tool's parameters into ``settings``; kerf follows the diameter."""
        settings.tool_diameter = self.tool_diameter
        settings.feed_rate = self.feed_rate
        settings.plunge_rate = self.plunge_rate
        settings.spindle_speed = self.spindle_speed
        settings.safe_z = self.safe_z
        settings.cut_depth = self.cut_depth
        settings.pass_depth = self.pass_depth
        settings.kerf_width = self.tool_diameter

    def display_name(self) -> str:
        """The name, prefixed with the slot number when one is assigned."""
        if self.slot_number > 0:
            return f"T{self.slot_number} - {self.name}"
        return self.name

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slot_number": self.slot_number,
            "tool_diameter": self.tool_diameter,
            "feed_rate": self.feed_rate,
            "plunge_rate": self.plunge_rate,
            "spindle_speed": self.spindle_speed,
            "safe_z": self.safe_z,
            "cut_depth": self.cut_depth,
            "pass_depth": self.pass_depth,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolProfile":
        data = data or {}

        def number(key: str) -> float:
            return float(data.get(key) or 0.0)

        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            slot_number=int(data.get("slot_number") or 0),
            tool_diameter=number("tool_diameter"),
            feed_rate=number("feed_rate"),
            plunge_rate=number("plunge_rate"),
            spindle_speed=int(data.get("spindle_speed") or 0),
            safe_z=number("safe_z"),
            cut_depth=number("cut_depth"),
            pass_depth=number("pass_depth"),
        )


def new_tool_profile(
    name: str,
    diameter: float,
    feed_rate: float,
    plunge_rate: float,
    spindle_speed: int,
    safe_z: float,
    cut_depth: float,
    pass_depth: float,
) -> ToolProfile:
    """A tool profile with a fresh ID and no slot assigned."""
    return ToolProfile(
        id=_short_id(),
        name=name,
        tool_diameter=diameter,
        feed_rate=feed_rate,
        plunge_rate=plunge_rate,
        spindle_speed=spindle_speed,
        safe_z=safe_z,
        cut_depth=cut_depth,
        pass_depth=pass_depth,
    )


@dataclass
class StockPreset:
    """A reusable stock sheet definition."""

    id: str = ""
    name: str = ""
    width: float = 0.0
    height: float = 0.0
    material: str = ""
    price_per_sheet: float = 0.0

    def to_stock_sheet(self, quantity: int) -> StockSheet:
        sheet = new_stock_sheet(self.name, self.width, self.height, quantity)
        sheet.price_per_sheet = self.price_per_sheet
        return sheet

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "material": self.material,
            "price_per_sheet": self.price_per_sheet,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StockPreset":
        data = data or {}
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            width=float(data.get("width") or 0.0),
            height=float(data.get("height") or 0.0),
            material=str(data.get("material") or ""),
            price_per_sheet=float(data.get("price_per_sheet") or 0.0),
        )


def new_stock_preset(
    name: str,
    width: float,
    height: float,
    material: str,
    price_per_sheet: float = 0.0,
) -> StockPreset:
    """A stock preset with a fresh ID."""
    return StockPreset(
        id=_short_id(),
        name=name,
        width=width,
        height=height,
        material=material,
        price_per_sheet=price_per_sheet,
    )


@dataclass
class Inventory:
    """The user's saved tool profiles and stock presets."""

    tools: List[ToolProfile] = field(default_factory=list)
    stocks: List[StockPreset] = field(default_factory=list)

    def find_tool_by_id(self, tool_id: str) -> Optional[ToolProfile]:
        return next((t for t in self.tools if t.id == tool_id), None)

    def find_stock_by_id(self, stock_id: str) -> Optional[StockPreset]:
        return next((s for s in self.stocks if s.id == stock_id), None)

    def tool_names(self) -> List[str]:
        """Display names of the tools, for selection lists."""
        return [t.display_name() for t in self.tools]

    def stock_names(self) -> List[str]:
        return [s.name for s in self.stocks]

    def find_tool_by_name(self, name: str) -> Optional[ToolProfile]:
        """The first tool whose name or display name matches."""
        return next(
            (t for t in self.tools if t.name == name or t.display_name() == name), None
        )

    def find_stock_by_name(self, name: str) -> Optional[StockPreset]:
        return next((s for s in self.stocks if s.name == name), None)

    def to_dict(self) -> dict:
        return {
            "tools": [t.to_dict() for t in self.tools],
            "stocks": [s.to_dict() for s in self.stocks],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Inventory":
        data = data or {}
        return cls(
            tools=[ToolProfile.from_dict(t) for t in data.get("tools") or []],
            stocks=[StockPreset.from_dict(s) for s in data.get("stocks") or []],
        )


def default_inventory() -> Inventory:
    """An inventory holding common tools and sheet sizes."""
    return Inventory(
        tools=[
            new_tool_profile("6mm End Mill", 6.0, 1500, 500, 18000, 5.0, 18.0, 6.0),
            new_tool_profile("3mm End Mill", 3.0, 1000, 300, 20000, 5.0, 12.0, 3.0),
            new_tool_profile(
                '1/4" End Mill (6.35mm)', 6.35, 1500, 500, 18000, 5.0, 18.0, 6.0
            ),
            new_tool_profile(
                '1/8" End Mill (3.175mm)', 3.175, 800, 250, 22000, 5.0, 12.0, 3.0
            ),
            new_tool_profile("V-Bit 60deg 6mm", 6.0, 800, 300, 18000, 5.0, 3.0, 1.0),
        ],
        stocks=[
            new_stock_preset("Plywood 2440x1220 (8'x4')", 2440, 1220, "Plywood"),
            new_stock_preset("MDF 2440x1220 (8'x4')", 2440, 1220, "MDF"),
            new_stock_preset("MDF 1220x610 (4'x2')", 1220, 610, "MDF"),
            new_stock_preset("Plywood 1220x610 (4'x2')", 1220, 610, "Plywood"),
            new_stock_preset("Acrylic 600x400", 600, 400, "Acrylic"),
            new_stock_preset("Aluminium 600x300", 600, 300, "Aluminium"),
        ],
    )