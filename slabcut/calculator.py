"""How many sheets to buy for a cut list."""

import math
from dataclasses import asdict, dataclass
from typing import Iterable, Optional

from slabcut.parts import Part

SQMM_PER_BOARD_FOOT = 92903.04
"""Square millimetres in one board foot (144 square inches)."""


@dataclass
class PurchaseEstimate:
    """Result of a sheet purchasing calculation; areas in square mm."""

    total_part_area: float = 0.0
    total_board_feet: float = 0.0
    sheet_area: float = 0.0
    sheets_needed_exact: float = 0.0
    sheets_needed_min: int = 0
    sheets_with_waste: int = 0
    waste_percent: float = 0.0
    estimated_cost: float = 0.0
    price_per_sheet: float = 0.0
    kerf_width: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_purchase_estimate(
    parts: Optional[Iterable[Part]],
    sheet_width: float,
    sheet_height: float,
    kerf_width: float,
    waste_percent: float,
    price_per_sheet: float,
) -> PurchaseEstimate:
    """Estimate sheets to buy, allowing one kerf per part dimension plus a waste factor."""
    total_part_area = sum(
        (p.width + kerf_width) * (p.height + kerf_width) * p.quantity for p in parts or ()
    )
    board_feet = total_part_area / SQMM_PER_BOARD_FOOT

    sheet_area = sheet_width * sheet_height
    if sheet_area <= 0:
        return PurchaseEstimate(
            total_part_area=total_part_area,
            total_board_feet=board_feet,
            waste_percent=waste_percent,
        )

    exact = total_part_area / sheet_area
    minimum = math.ceil(exact)
    with_waste = max(math.ceil(exact * (1.0 + waste_percent / 100.0)), minimum)

    return PurchaseEstimate(
        total_part_area=total_part_area,
        total_board_feet=board_feet,
        sheet_area=sheet_area,
        sheets_needed_exact=exact,
        sheets_needed_min=minimum,
        sheets_with_waste=with_waste,
        waste_percent=waste_percent,
        estimated_cost=with_waste * price_per_sheet,
        price_per_sheet=price_per_sheet,
        kerf_width=kerf_width,
    )