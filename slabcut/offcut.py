"""Detection of reusable remnants left on cut sheets."""

import uuid
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from slabcut.parts import OptimizeResult, SheetResult, StockSheet, new_stock_sheet

MIN_OFFCUT_DIMENSION = 50.0
"""Smallest width or height in mm for a remnant to count as usable."""

MIN_OFFCUT_AREA = 10000.0
"""Smallest area in square mm for a remnant to count as usable."""


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


@dataclass
class Offcut:
    """A usable rectangular remnant; position in mm from the sheet's top-left."""

    id: str = ""
    sheet_label: str = ""
    sheet_index: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    price_per_sheet: float = 0.0

    def area(self) -> float:
        return self.width * self.height

    def to_stock_sheet(self) -> StockSheet:
        """A single stock sheet for reuse in later projects."""
        sheet = new_stock_sheet("Offcut " + self.sheet_label, self.width, self.height, 1)
        sheet.price_per_sheet = self.price_per_sheet
        return sheet

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sheet_label": self.sheet_label,
            "sheet_index": self.sheet_index,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "price_per_sheet": self.price_per_sheet,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Offcut":
        data = data or {}

        def number(key: str) -> float:
            return float(data.get(key) or 0.0)

        return cls(
            id=str(data.get("id") or ""),
            sheet_label=str(data.get("sheet_label") or ""),
            sheet_index=int(data.get("sheet_index") or 0),
            x=number("x"),
            y=number("y"),
            width=number("width"),
            height=number("height"),
            price_per_sheet=number("price_per_sheet"),
        )


def _usable(width: float, height: float) -> bool:
    return (
        width >= MIN_OFFCUT_DIMENSION
        and height >= MIN_OFFCUT_DIMENSION
        and width * height >= MIN_OFFCUT_AREA
    )


def detect_offcuts(sheet: SheetResult, sheet_index: int, kerf: float) -> List[Offcut]:
    """Usable strips to the right of and below the placed parts, largest first."""
    stock = sheet.stock
    sheet_w, sheet_h = stock.width, stock.height

    if not sheet.placements:
        return [
            Offcut(
                id=_short_id(),
                sheet_label=stock.label,
                sheet_index=sheet_index,
                width=sheet_w,
                height=sheet_h,
                price_per_sheet=stock.price_per_sheet,
            )
        ]

    max_right = max(0.0, *(p.x + p.placed_width() + kerf for p in sheet.placements))
    max_bottom = max(0.0, *(p.y + p.placed_height() + kerf for p in sheet.placements))

    offcuts: List[Offcut] = []

    right_w = sheet_w - max_right
    if _usable(right_w, sheet_h):
        offcuts.append(
            Offcut(
                id=_short_id(),
                sheet_label=stock.label,
                sheet_index=sheet_index,
                x=max_right,
                y=0.0,
                width=right_w,
                height=sheet_h,
            )
        )

    # The bottom strip stops at the parts' right edge so it does not overlap the right strip.
    bottom_h = sheet_h - max_bottom
    bottom_w = min(max_right, sheet_w)
    if _usable(bottom_w, bottom_h):
        offcuts.append(
            Offcut(
                id=_short_id(),
                sheet_label=stock.label,
                sheet_index=sheet_index,
                x=0.0,
                y=max_bottom,
                width=bottom_w,
                height=bottom_h,
            )
        )

    if stock.price_per_sheet > 0:
        sheet_area = sheet_w * sheet_h
        for offcut in offcuts:
            offcut.price_per_sheet = offcut.area() / sheet_area * stock.price_per_sheet

    return sorted(offcuts, key=Offcut.area, reverse=True)


def detect_all_offcuts(result: OptimizeResult, kerf: float) -> List[Offcut]:
    """Offcuts of every sheet in the result, sheet by sheet."""
    return [
        offcut
        for index, sheet in enumerate(result.sheets)
        for offcut in detect_offcuts(sheet, index, kerf)
    ]


def total_offcut_area(offcuts: Iterable[Offcut]) -> float:
    return sum(o.area() for o in offcuts or ())