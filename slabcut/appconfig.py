"""Application-wide preferences and the defaults for new projects."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from slabcut.settings import CutSettings, default_settings


@dataclass
class AppConfig:
    """User preferences and default CNC settings."""

    default_kerf_width: float = 0.0
    default_edge_trim: float = 0.0
    default_tool_diameter: float = 0.0
    default_feed_rate: float = 0.0
    default_plunge_rate: float = 0.0
    default_spindle_speed: int = 0
    default_safe_z: float = 0.0
    default_cut_depth: float = 0.0
    default_pass_depth: float = 0.0
    default_gcode_profile: str = ""

    auto_save_interval: int = 0  # minutes, 0 = disabled
    recent_projects: List[str] = field(default_factory=list)
    theme: str = ""  # "light", "dark" or "system"

    def apply_to_settings(self, settings: CutSettings) -> None:
        """Copy the saved defaults into ``settings``."""
        settings.kerf_width = self.default_kerf_width
        settings.edge_trim = self.default_edge_trim
        settings.tool_diameter = self.default_tool_diameter
        settings.feed_rate = self.default_feed_rate
        settings.plunge_rate = self.default_plunge_rate
        settings.spindle_speed = self.default_spindle_speed
        settings.safe_z = self.default_safe_z
        settings.cut_depth = self.default_cut_depth
        settings.pass_depth = self.default_pass_depth
        settings.gcode_profile = self.default_gcode_profile

    def to_dict(self) -> dict:
        return {
            "default_kerf_width": self.default_kerf_width,
            "default_edge_trim": self.default_edge_trim,
            "default_tool_diameter": self.default_tool_diameter,
            "default_feed_rate": self.default_feed_rate,
            "default_plunge_rate": self.default_plunge_rate,
            "default_spindle_speed": self.default_spindle_speed,
            "default_safe_z": self.default_safe_z,
            "default_cut_depth": self.default_cut_depth,
            "default_pass_depth": self.default_pass_depth,
            "default_gcode_profile": self.default_gcode_profile,
            "auto_save_interval": self.auto_save_interval,
            "recent_projects": list(self.recent_projects),
            "theme": self.theme,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppConfig":
        data = data or {}

        def number(key: str) -> float:
            return float(data.get(key) or 0.0)

        return cls(
            default_kerf_width=number("default_kerf_width"),
            default_edge_trim=number("default_edge_trim"),
            default_tool_diameter=number("default_tool_diameter"),
            default_feed_rate=number("default_feed_rate"),
            default_plunge_rate=number("default_plunge_rate"),
            default_spindle_speed=int(data.get("default_spindle_speed") or 0),
            default_safe_z=number("default_safe_z"),
            default_cut_depth=number("default_cut_depth"),
            default_pass_depth=number("default_pass_depth"),
            default_gcode_profile=str(data.get("default_gcode_profile") or ""),
            auto_save_interval=int(data.get("auto_save_interval") or 0),
            recent_projects=[str(p) for p in data.get("recent_projects") or []],
            theme=str(data.get("theme") or ""),
        )


def default_app_config() -> AppConfig:
    """A configuration whose defaults match ``default_settings()``."""
    defaults = default_settings()
    return AppConfig(
        default_kerf_width=defaults.kerf_width,
        default_edge_trim=defaults.edge_trim,
        default_tool_diameter=defaults.tool_diameter,
        default_feed_rate=defaults.feed_rate,
        default_plunge_rate=defaults.plunge_rate,
        default_spindle_speed=defaults.spindle_speed,
        default_safe_z=defaults.safe_z,
        default_cut_depth=defaults.cut_depth,
        default_pass_depth=defaults.pass_depth,
        default_gcode_profile=defaults.gcode_profile,
        auto_save_interval=0,
        recent_projects=[],
        theme="system",
    )