"""Edge banding requirements for a cut list."""

import math
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional

from slabcut.parts import Part


@dataclass
class EdgeBandingSummary:
    """Total edge banding needed for a project."""

    total_linear_mm: float = 0.0
    total_linear_m: float = 0.0
    waste_percent: float = 0.0
    total_with_waste_mm: float = 0.0
    total_with_waste_m: float = 0.0
    part_count: int = 0
    edge_count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PerPartEdgeBanding:
    """Edge banding needed for one part type."""

    label: str = ""
    width: float = 0.0
    height: float = 0.0
    quantity: int = 0
    edges: str = ""
    length_per_unit: float = 0.0
    total_length: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def _banded(parts: Optional[Iterable[Part]]) -> Iterable[Part]:
    return (p for p in parts or () if p.edge_banding.has_any())


def calculate_edge_banding(
    parts: Optional[Iterable[Part]], waste_percent: float
) -> EdgeBandingSummary:
    """Sum banding over all parts; the with-waste total is rounded up to whole mm."""
    total_mm = 0.0
    part_count = 0
    edge_count = 0
    for p in _banded(parts):
        total_mm += p.edge_banding.linear_length(p.width, p.height) * p.quantity
        part_count += p.quantity
        edge_count += p.edge_banding.edge_count() * p.quantity

    with_waste = math.ceil(total_mm * (1.0 + waste_percent / 100.0))
    return EdgeBandingSummary(
        total_linear_mm=total_mm,
        total_linear_m=total_mm / 1000.0,
        waste_percent=waste_percent,
        total_with_waste_mm=float(with_waste),
        total_with_waste_m=with_waste / 1000.0,
        part_count=part_count,
        edge_count=edge_count,
    )


def calculate_per_part_edge_banding(
    parts: Optional[Iterable[Part]],
) -> List[PerPartEdgeBanding]:
    """Breakdown of banding per part type, skipping parts without banding."""
    results = []
    for p in _banded(parts):
        per_unit = p.edge_banding.linear_length(p.width, p.height)
        results.append(
            PerPartEdgeBanding(
                label=p.label,
                width=p.width,
                height=p.height,
                quantity=p.quantity,
                edges=str(p.edge_banding),
                length_per_unit=per_unit,
                total_length=per_unit * p.quantity,
            )
        )
    return results