"""GCode post-processor profiles: the built-in set and user-defined ones."""

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Mapping, Optional


class ProfileError(ValueError):
    """Raised when a profile cannot be added or removed."""


@dataclass
class GCodeProfile:
    """Post-processor configuration for one kind of CNC controller."""

    name: str = ""
    description: str = ""
    is_built_in: bool = False
    units: str = ""

    start_code: List[str] = field(default_factory=list)
    spindle_start: str = ""
    spindle_stop: str = ""
    home_all: str = ""
    home_xy: str = ""

    absolute_mode: str = ""
    feed_mode: str = ""
    rapid_move: str = ""
    feed_move: str = ""

    end_code: List[str] = field(default_factory=list)

    comment_prefix: str = ""
    comment_suffix: str = ""

    decimal_places: int = 0
    leading_zeros: bool = False

    def copy(self) -> "GCodeProfile":
        """An independent copy, including the code lists."""
        return replace(self, start_code=list(self.start_code), end_code=list(self.end_code))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "is_built_in": self.is_built_in,
            "units": self.units,
            "start_code": list(self.start_code),
            "spindle_start": self.spindle_start,
            "spindle_stop": self.spindle_stop,
            "home_all": self.home_all,
            "home_xy": self.home_xy,
            "absolute_mode": self.absolute_mode,
            "feed_mode": self.feed_mode,
            "rapid_move": self.rapid_move,
            "feed_move": self.feed_move,
            "end_code": list(self.end_code),
            "comment_prefix": self.comment_prefix,
            "comment_suffix": self.comment_suffix,
            "decimal_places": self.decimal_places,
            "leading_zeros": self.leading_zeros,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GCodeProfile":
        data = data or {}

        def text(key: str) -> str:
            return str(data.get(key) or "")

        return cls(
            name=text("name"),
            description=text("description"),
            is_built_in=bool(data.get("is_built_in")),
            units=text("units"),
            start_code=[str(c) for c in data.get("start_code") or []],
            spindle_start=text("spindle_start"),
            spindle_stop=text("spindle_stop"),
            home_all=text("home_all"),
            home_xy=text("home_xy"),
            absolute_mode=text("absolute_mode"),
            feed_mode=text("feed_mode"),
            rapid_move=text("rapid_move"),
            feed_move=text("feed_move"),
            end_code=[str(c) for c in data.get("end_code") or []],
            comment_prefix=text("comment_prefix"),
            comment_suffix=text("comment_suffix"),
            decimal_places=int(data.get("decimal_places") or 0),
            leading_zeros=bool(data.get("leading_zeros")),
        )


def builtin_profiles() -> List[GCodeProfile]:
    """Fresh copies of the built-in profiles; Generic is always last."""
    common = dict(
        is_built_in=True,
        units="mm",
        spindle_start="M3 S%d",
        spindle_stop="M5",
        absolute_mode="G90",
        feed_mode="G94",
        rapid_move="G0",
        feed_move="G1",
        comment_prefix=";",
        comment_suffix="",
        leading_zeros=False,
    )
    return [
        GCodeProfile(
            name="Grbl",
            description="Standard Grbl configuration (Arduino CNC shields)",
            start_code=["G90", "G21", "G17"],
            home_all="$H",
            home_xy="$H",
            end_code=["G0 Z[SafeZ]", "G0 X0 Y0", "M5", "M2"],
            decimal_places=3,
            **common,
        ),
        GCodeProfile(
            name="Mach3",
            description="Mach3 CNC control software",
            start_code=["G90", "G21", "G17", "G94"],
            home_all="G28 X0 Y0 Z0",
            home_xy="G28 X0 Y0",
            end_code=["G0 Z[SafeZ]", "G28 X0 Y0", "M5", "M30"],
            decimal_places=4,
            **common,
        ),
        GCodeProfile(
            name="LinuxCNC",
            description="LinuxCNC (formerly EMC2)",
            start_code=["G90", "G21", "G17", "G94"],
            home_all="G28 X0 Y0 Z0",
            home_xy="G28 X0 Y0",
            end_code=["G0 Z[SafeZ]", "G0 X0 Y0", "M5", "M2"],
            decimal_places=4,
            **common,
        ),
        GCodeProfile(
            name="Generic",
            description="Generic standard GCode",
            start_code=["G90", "G21"],
            home_all="G28 X0 Y0 Z0",
            home_xy="G28 X0 Y0",
            end_code=["G0 Z[SafeZ]", "G0 X0 Y0", "M5", "M2"],
            decimal_places=3,
            **common,
        ),
    ]


class ProfileRegistry:
    """Built-in profiles followed by user-defined custom profiles."""

    def __init__(self, custom: Optional[Iterable[GCodeProfile]] = None) -> None:
        self._builtin = tuple(builtin_profiles())
        self.custom: List[GCodeProfile] = list(custom or [])

    def _is_builtin_name(self, name: str) -> bool:
        return any(p.name == name for p in self._builtin)

    def all_profiles(self) -> List[GCodeProfile]:
        return [p.copy() for p in (*self._builtin, *self.custom)]

    def get(self, name: str) -> GCodeProfile:
        """The profile with this name, or the Generic profile if there is none."""
        for profile in (*self._builtin, *self.custom):
            if profile.name == name:
                return profile.copy()
        return self._builtin[-1].copy()

    def names(self) -> List[str]:
        return [p.name for p in (*self._builtin, *self.custom)]

    def add_custom(self, profile: GCodeProfile) -> None:
        """Add a custom profile, replacing a custom one of the same name."""
        if self._is_builtin_name(profile.name):
            raise ProfileError(
                f"cannot add custom profile: name {profile.name!r} "
                "conflicts with built-in profile"
            )
        for index, existing in enumerate(self.custom):
            if existing.name == profile.name:
                self.custom[index] = profile
                return
        self.custom.append(profile)

    def remove_custom(self, name: str) -> None:
        if self._is_builtin_name(name):
            raise ProfileError(f"cannot remove built-in profile {name!r}")
        for index, existing in enumerate(self.custom):
            if existing.name == name:
                del self.custom[index]
                return
        raise ProfileError(f"custom profile {name!r} not found")


_registry = ProfileRegistry()


def all_profiles() -> List[GCodeProfile]:
    return _registry.all_profiles()


def get_profile(name: str) -> GCodeProfile:
    return _registry.get(name)


def get_profile_names() -> List[str]:
    return _registry.names()


def add_custom_profile(profile: GCodeProfile) -> None:
    _registry.add_custom(profile)


def remove_custom_profile(name: str) -> None:
    _registry.remove_custom(name)


def new_custom_profile(name: str) -> GCodeProfile:
    """A non-built-in profile seeded from the Generic profile."""
    profile = get_profile("Generic")
    profile.name = name
    profile.description = "Custom profile"
    profile.is_built_in = False
    return profile