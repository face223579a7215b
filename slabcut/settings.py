"""Optimizer and CNC cutting settings."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterable, List, Mapping, Type, TypeVar

E = TypeVar("E", bound=Enum)


class PlungeType(str, Enum):
    """Plunge entry strategy for CNC operations."""

    DIRECT = "direct"
    RAMP = "ramp"
    HELIX = "helix"

    @classmethod
    def options(cls) -> List[str]:
        return [str(member) for member in cls]

    @classmethod
    def from_display(cls, text: str) -> "PlungeType":
        for member in cls:
            if str(member) == text:
                return member
        return cls.DIRECT

    def __str__(self) -> str:
        return _PLUNGE_DISPLAY[self]


_PLUNGE_DISPLAY = {
    PlungeType.DIRECT: "Direct",
    PlungeType.RAMP: "Ramp",
    PlungeType.HELIX: "Helix",
}


class CornerOvercut(str, Enum):
    """Corner relief cut type for interior corners."""

    NONE = "none"
    DOGBONE = "dogbone"
    TBONE = "tbone"

    @classmethod
    def options(cls) -> List[str]:
        return [str(member) for member in cls]

    @classmethod
    def from_display(cls, text: str) -> "CornerOvercut":
        for member in cls:
            if str(member) == text:
                return member
        return cls.NONE

    def __str__(self) -> str:
        return _CORNER_DISPLAY[self]


_CORNER_DISPLAY = {
    CornerOvercut.NONE: "None",
    CornerOvercut.DOGBONE: "Dogbone",
    CornerOvercut.TBONE: "T-Bone",
}


class Algorithm(str, Enum):
    """Optimizer algorithm."""

    GUILLOTINE = "guillotine"
    GENETIC = "genetic"


def _enum_or(cls: Type[E], value: Any, default: E) -> E:
    try:
        return cls(value)
    except ValueError:
        return default


def _scalars_from(cls, data: Mapping[str, Any], exclude: Iterable[str] = ()) -> dict:
    """Read the plain scalar fields of a dataclass, zero-valued when absent."""
    skip = set(exclude)
    values = {}
    for f in fields(cls):
        if f.name in skip:
            continue
        raw = data.get(f.name)
        values[f.name] = f.default if raw is None else type(f.default)(raw)
    return values


def _scalars_to(obj, exclude: Iterable[str] = ()) -> dict:
    skip = set(exclude)
    return {f.name: getattr(obj, f.name) for f in fields(obj) if f.name not in skip}


@dataclass
class OptimizeWeights:
    """Relative priorities of the optimization objectives."""

    minimize_waste: float = 0.0
    minimize_sheets: float = 0.0
    minimize_cut_len: float = 0.0
    minimize_job_time: float = 0.0

    def normalize(self) -> "OptimizeWeights":
        """Return weights scaled to sum to 1; all-zero gives waste and sheets equal."""
        total = (
            self.minimize_waste
            + self.minimize_sheets
            + self.minimize_cut_len
            + self.minimize_job_time
        )
        if total <= 0:
            return OptimizeWeights(minimize_waste=0.5, minimize_sheets=0.5)
        return OptimizeWeights(
            self.minimize_waste / total,
            self.minimize_sheets / total,
            self.minimize_cut_len / total,
            self.minimize_job_time / total,
        )

    def to_dict(self) -> dict:
        return _scalars_to(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptimizeWeights":
        return cls(**_scalars_from(cls, data or {}))


def default_optimize_weights() -> OptimizeWeights:
    return OptimizeWeights(minimize_waste=1.0, minimize_sheets=0.5)


@dataclass
class TabZone:
    """A rectangular tab zone on the stock sheet, in mm from the sheet origin."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> dict:
        return _scalars_to(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TabZone":
        return cls(**_scalars_from(cls, data or {}))


@dataclass
class StockTabConfig:
    """Holding tabs that keep the stock sheet secured to the bed."""

    enabled: bool = False
    advanced_mode: bool = False
    top_padding: float = 0.0
    bottom_padding: float = 0.0
    left_padding: float = 0.0
    right_padding: float = 0.0
    custom_zones: List[TabZone] = field(default_factory=list)

    def to_dict(self) -> dict:
        result = _scalars_to(self, exclude=("custom_zones",))
        result["custom_zones"] = [z.to_dict() for z in self.custom_zones]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StockTabConfig":
        data = data or {}
        return cls(
            **_scalars_from(cls, data, exclude=("custom_zones",)),
            custom_zones=[TabZone.from_dict(z) for z in data.get("custom_zones") or []],
        )


@dataclass
class ClampZone:
    """A clamp or fixture area the optimizer must keep parts out of."""

    label: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    z_height: float = 0.0

    def overlaps(self, x: float, y: float, w: float, h: float) -> bool:
        """Whether this zone overlaps the rectangle; touching edges do not count."""
        return (
            self.x < x + w
            and self.x + self.width > x
            and self.y < y + h
            and self.y + self.height > y
        )

    def to_tab_zone(self) -> TabZone:
        return TabZone(self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict:
        return _scalars_to(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClampZone":
        return cls(**_scalars_from(cls, data or {}))


@dataclass
class DustShoeCollision:
    """A potential collision between the dust shoe and a clamp zone."""

    sheet_index: int = 0
    sheet_label: str = ""
    clamp_label: str = ""
    part_label: str = ""
    part_index: int = 0
    tool_x: float = 0.0
    tool_y: float = 0.0
    distance: float = 0.0
    is_during_cut: bool = False

    def to_dict(self) -> dict:
        return _scalars_to(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DustShoeCollision":
        return cls(**_scalars_from(cls, data or {}))


_CUT_SETTINGS_SPECIAL = (
    "algorithm",
    "stock_tabs",
    "plunge_type",
    "corner_overcut",
    "clamp_zones",
    "optimize_weights",
)


@dataclass
class CutSettings:
    """Optimizer and CNC configuration."""

    algorithm: Algorithm = Algorithm.GUILLOTINE
    kerf_width: float = 0.0
    edge_trim: float = 0.0
    guillotine_only: bool = False

    tool_diameter: float = 0.0
    feed_rate: float = 0.0
    plunge_rate: float = 0.0
    spindle_speed: int = 0
    safe_z: float = 0.0
    cut_depth: float = 0.0
    pass_depth: float = 0.0

    part_tab_width: float = 0.0
    part_tab_height: float = 0.0
    part_tabs_per_side: int = 0
    use_climb: bool = False

    lead_in_radius: float = 0.0
    lead_out_radius: float = 0.0
    lead_in_angle: float = 0.0

    stock_tabs: StockTabConfig = field(default_factory=StockTabConfig)

    gcode_profile: str = ""
    optimize_toolpath: bool = False

    plunge_type: PlungeType = PlungeType.DIRECT
    ramp_angle: float = 0.0
    helix_diameter: float = 0.0
    helix_rev_percent: float = 0.0

    corner_overcut: CornerOvercut = CornerOvercut.NONE

    onion_skin_enabled: bool = False
    onion_skin_depth: float = 0.0
    onion_skin_cleanup: bool = False

    structural_ordering: bool = False
    nesting_rotations: int = 0

    clamp_zones: List[ClampZone] = field(default_factory=list)

    dust_shoe_enabled: bool = False
    dust_shoe_width: float = 0.0
    dust_shoe_clearance: float = 0.0

    optimize_weights: OptimizeWeights = field(default_factory=OptimizeWeights)

    def to_dict(self) -> dict:
        result = _scalars_to(self, exclude=_CUT_SETTINGS_SPECIAL)
        result["algorithm"] = self.algorithm.value
        result["stock_tabs"] = self.stock_tabs.to_dict()
        result["plunge_type"] = self.plunge_type.value
        result["corner_overcut"] = self.corner_overcut.value
        result["optimize_weights"] = self.optimize_weights.to_dict()
        if self.clamp_zones:
            result["clamp_zones"] = [z.to_dict() for z in self.clamp_zones]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CutSettings":
        data = data or {}
        return cls(
            **_scalars_from(cls, data, exclude=_CUT_SETTINGS_SPECIAL),
            algorithm=_enum_or(Algorithm, data.get("algorithm"), Algorithm.GUILLOTINE),
            stock_tabs=StockTabConfig.from_dict(data.get("stock_tabs") or {}),
            plunge_type=_enum_or(PlungeType, data.get("plunge_type"), PlungeType.DIRECT),
            corner_overcut=_enum_or(
                CornerOvercut, data.get("corner_overcut"), CornerOvercut.NONE
            ),
            clamp_zones=[ClampZone.from_dict(z) for z in data.get("clamp_zones") or []],
            optimize_weights=OptimizeWeights.from_dict(data.get("optimize_weights") or {}),
        )


def default_settings() -> CutSettings:
    """Settings applied to a new project."""
    return CutSettings(
        algorithm=Algorithm.GUILLOTINE,
        kerf_width=3.2,
        edge_trim=10.0,
        guillotine_only=False,
        tool_diameter=6.0,
        feed_rate=1500.0,
        plunge_rate=500.0,
        spindle_speed=18000,
        safe_z=5.0,
        cut_depth=18.0,
        pass_depth=6.0,
        part_tab_width=8.0,
        part_tab_height=2.0,
        part_tabs_per_side=0,
        use_climb=True,
        lead_in_radius=0.0,
        lead_out_radius=0.0,
        lead_in_angle=90.0,
        stock_tabs=StockTabConfig(
            enabled=True,
            advanced_mode=False,
            top_padding=25.0,
            bottom_padding=25.0,
            left_padding=25.0,
            right_padding=25.0,
        ),
        gcode_profile="Generic",
        optimize_toolpath=False,
        plunge_type=PlungeType.DIRECT,
        ramp_angle=3.0,
        helix_diameter=5.0,
        helix_rev_percent=50.0,
        corner_overcut=CornerOvercut.NONE,
        onion_skin_enabled=False,
        onion_skin_depth=0.2,
        onion_skin_cleanup=False,
        dust_shoe_enabled=False,
        dust_shoe_width=80.0,
        dust_shoe_clearance=5.0,
        optimize_weights=default_optimize_weights(),
        nesting_rotations=2,
    )