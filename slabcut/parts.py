"""Parts, stock sheets, placements and optimization results."""

import math
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Mapping, Tuple

from slabcut.geometry import Outline
from slabcut.settings import StockTabConfig


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


class Grain(IntEnum):
    """Grain direction constraint for a part or sheet."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2

    def __str__(self) -> str:
        return _GRAIN_DISPLAY[self]


_GRAIN_DISPLAY = {
    Grain.NONE: "None",
    Grain.HORIZONTAL: "Horizontal",
    Grain.VERTICAL: "Vertical",
}


def _grain(value: Any) -> Grain:
    try:
        return Grain(int(value or 0))
    except ValueError:
        return Grain.NONE


@dataclass
class EdgeBanding:
    """Which edges of a part need edge banding."""

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False

    def _flags(self) -> Tuple[Tuple[str, bool], ...]:
        return (("T", self.top), ("B", self.bottom), ("L", self.left), ("R", self.right))

    def has_any(self) -> bool:
        return self.top or self.bottom or self.left or self.right

    def edge_count(self) -> int:
        return sum(1 for _, on in self._flags() if on)

    def linear_length(self, width: float, height: float) -> float:
        """Banding length in mm for one piece of the given size."""
        total = 0.0
        if self.top:
            total += width
        if self.bottom:
            total += width
        if self.left:
            total += height
        if self.right:
            total += height
        return total

    def __str__(self) -> str:
        if not self.has_any():
            return "None"
        return "+".join(name for name, on in self._flags() if on)

    def to_dict(self) -> dict:
        return {"top": self.top, "bottom": self.bottom, "left": self.left, "right": self.right}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EdgeBanding":
        data = data or {}
        return cls(
            top=bool(data.get("top")),
            bottom=bool(data.get("bottom")),
            left=bool(data.get("left")),
            right=bool(data.get("right")),
        )


@dataclass
class CutoutRect:
    """Bounding rectangle of an interior cutout, relative to the part origin."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CutoutRect":
        data = data or {}
        return cls(
            float(data.get("x") or 0.0),
            float(data.get("y") or 0.0),
            float(data.get("width") or 0.0),
            float(data.get("height") or 0.0),
        )


@dataclass
class Part:
    """A required piece to be cut; sizes in mm."""

    id: str = ""
    label: str = ""
    width: float = 0.0
    height: float = 0.0
    quantity: int = 0
    grain: Grain = Grain.NONE
    material: str = ""
    outline: Outline = field(default_factory=Outline)
    cutouts: List[Outline] = field(default_factory=list)
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)

    def cutout_bounds(self) -> List[CutoutRect]:
        """Bounding rectangles of the valid, non-degenerate cutouts."""
        rects = []
        for cutout in self.cutouts:
            if len(cutout) < 3:
                continue
            low, high = Outline(cutout).bounding_box()
            w = high.x - low.x
            h = high.y - low.y
            if w > 0 and h > 0:
                rects.append(CutoutRect(low.x, low.y, w, h))
        return rects

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "label": self.label,
            "width": self.width,
            "height": self.height,
            "quantity": self.quantity,
            "grain": int(self.grain),
        }
        if self.material:
            result["material"] = self.material
        if self.outline:
            result["outline"] = Outline(self.outline).to_list()
        if self.cutouts:
            result["cutouts"] = [Outline(c).to_list() for c in self.cutouts]
        result["edge_banding"] = self.edge_banding.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Part":
        data = data or {}
        return cls(
            id=str(data.get("id") or ""),
            label=str(data.get("label") or ""),
            width=float(data.get("width") or 0.0),
            height=float(data.get("height") or 0.0),
            quantity=int(data.get("quantity") or 0),
            grain=_grain(data.get("grain")),
            material=str(data.get("material") or ""),
            outline=Outline.from_list(data.get("outline") or []),
            cutouts=[Outline.from_list(c) for c in data.get("cutouts") or []],
            edge_banding=EdgeBanding.from_dict(data.get("edge_banding") or {}),
        )


def new_part(label: str, width: float, height: float, quantity: int) -> Part:
    """A rectangular part with a fresh ID and no grain constraint."""
    return Part(
        id=_short_id(),
        label=label,
        width=width,
        height=height,
        quantity=quantity,
        grain=Grain.NONE,
    )


@dataclass
class StockSheet:
    """An available sheet of material to cut from."""

    id: str = ""
    label: str = ""
    width: float = 0.0
    height: float = 0.0
    thickness: float = 0.0
    quantity: int = 0
    grain: Grain = Grain.NONE
    material: str = ""
    tabs: StockTabConfig = field(default_factory=StockTabConfig)
    price_per_sheet: float = 0.0

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "label": self.label,
            "width": self.width,
            "height": self.height,
            "thickness": self.thickness,
            "quantity": self.quantity,
            "grain": int(self.grain),
        }
        if self.material:
            result["material"] = self.material
        result["tabs"] = self.tabs.to_dict()
        result["price_per_sheet"] = self.price_per_sheet
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StockSheet":
        data = data or {}
        return cls(
            id=str(data.get("id") or ""),
            label=str(data.get("label") or ""),
            width=float(data.get("width") or 0.0),
            height=float(data.get("height") or 0.0),
            thickness=float(data.get("thickness") or 0.0),
            quantity=int(data.get("quantity") or 0),
            grain=_grain(data.get("grain")),
            material=str(data.get("material") or ""),
            tabs=StockTabConfig.from_dict(data.get("tabs") or {}),
            price_per_sheet=float(data.get("price_per_sheet") or 0.0),
        )


def new_stock_sheet(label: str, width: float, height: float, quantity: int) -> StockSheet:
    """A stock sheet with a fresh ID and the default 18 mm thickness."""
    return StockSheet(
        id=_short_id(),
        label=label,
        width=width,
        height=height,
        thickness=18.0,
        quantity=quantity,
        grain=Grain.NONE,
        tabs=StockTabConfig(enabled=False),
    )


def can_place_with_grain(part_grain: Grain, stock_grain: Grain) -> Tuple[bool, bool]:
    """Return (can place normally, can place rotated 90 degrees)."""
    if part_grain == Grain.NONE:
        return True, True
    if stock_grain == Grain.NONE:
        return True, False
    if part_grain == stock_grain:
        return True, False
    return False, False


@dataclass
class Placement:
    """A part placed on a stock sheet, position in mm from the top-left."""

    part: Part = field(default_factory=Part)
    x: float = 0.0
    y: float = 0.0
    rotated: bool = False

    def placed_width(self) -> float:
        return self.part.height if self.rotated else self.part.width

    def placed_height(self) -> float:
        return self.part.width if self.rotated else self.part.height

    def to_dict(self) -> dict:
        return {"part": self.part.to_dict(), "x": self.x, "y": self.y, "rotated": self.rotated}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Placement":
        data = data or {}
        return cls(
            part=Part.from_dict(data.get("part") or {}),
            x=float(data.get("x") or 0.0),
            y=float(data.get("y") or 0.0),
            rotated=bool(data.get("rotated")),
        )


@dataclass
class SheetResult:
    """One stock sheet with the parts placed on it."""

    stock: StockSheet = field(default_factory=StockSheet)
    placements: List[Placement] = field(default_factory=list)

    def used_area(self) -> float:
        return sum(p.placed_width() * p.placed_height() for p in self.placements)

    def total_area(self) -> float:
        return self.stock.width * self.stock.height

    def efficiency(self) -> float:
        """Used area as a percentage of the sheet area."""
        total = self.total_area()
        if total == 0:
            return 0.0
        return self.used_area() / total * 100.0

    def to_dict(self) -> dict:
        return {
            "stock": self.stock.to_dict(),
            "placements": [p.to_dict() for p in self.placements],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SheetResult":
        data = data or {}
        return cls(
            stock=StockSheet.from_dict(data.get("stock") or {}),
            placements=[Placement.from_dict(p) for p in data.get("placements") or []],
        )


@dataclass
class OptimizeResult:
    """A full cutting solution."""

    sheets: List[SheetResult] = field(default_factory=list)
    unplaced_parts: List[Part] = field(default_factory=list)

    def total_efficiency(self) -> float:
        used = sum(s.used_area() for s in self.sheets)
        total = sum(s.total_area() for s in self.sheets)
        if total == 0:
            return 0.0
        return used / total * 100.0

    def total_cut_length(self) -> float:
        """Sum of part perimeters in mm, using the outline where a part has one."""
        total = 0.0
        for sheet in self.sheets:
            for p in sheet.placements:
                if p.part.outline:
                    total += Outline(p.part.outline).perimeter()
                else:
                    total += 2 * (p.placed_width() + p.placed_height())
        return total

    def estimated_job_time(
        self,
        feed_rate: float,
        pass_depth: float,
        cut_depth: float,
        setup_time_per_sheet: float,
    ) -> float:
        """Estimated machining time in minutes."""
        if feed_rate <= 0:
            return 0.0
        passes = 1.0
        if pass_depth > 0 and cut_depth > 0:
            passes = float(math.ceil(cut_depth / pass_depth))
        cutting = self.total_cut_length() * passes / feed_rate
        return cutting + len(self.sheets) * setup_time_per_sheet

    def total_cost(self) -> float:
        return sum(s.stock.price_per_sheet for s in self.sheets)

    def has_pricing(self) -> bool:
        return any(s.stock.price_per_sheet > 0 for s in self.sheets)

    def to_dict(self) -> dict:
        return {
            "sheets": [s.to_dict() for s in self.sheets],
            "unplaced_parts": [p.to_dict() for p in self.unplaced_parts],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptimizeResult":
        data = data or {}
        return cls(
            sheets=[SheetResult.from_dict(s) for s in data.get("sheets") or []],
            unplaced_parts=[Part.from_dict(p) for p in data.get("unplaced_parts") or []],
        )