"""Mariner-selectable display settings."""

from __future__ import annotations

import enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from s52engine.models.feature import DisplayCategory


class BoundaryStyle(str, enum.Enum):
    PLAIN = "plain"
    SYMBOLIZED = "symbolized"


class PointStyle(str, enum.Enum):
    SIMPLIFIED = "simplified"
    PAPER_CHART = "paper_chart"


class ColorScheme(str, enum.Enum):
    DAY_BRIGHT = "day_bright"
    DAY_BLACKBACK = "day_blackback"
    DAY_WHITEBACK = "day_whiteback"
    DUSK = "dusk"
    NIGHT = "night"


class MarinerSettings(BaseSettings):
    """Read-only mariner controls consumed by the CS procedures.

    Values can be supplied from the environment with the ``S52_MARINER_``
    prefix, e.g. ``S52_MARINER_SAFETY_CONTOUR=10``.
    """

    # Depth thresholds in metres
    shallow_contour: float = 3.0
    safety_contour: float = 8.0
    deep_contour: float = 10.0
    safety_depth: float = 8.0

    two_shades: bool = False
    shallow_pattern: bool = False
    contour_labels: bool = False
    low_accuracy_symbols: bool = False
    show_isolated_danger_in_shallow_water: bool = False
    soundings: bool = True
    show_important_text: bool = False
    show_other_text: bool = False

    area_style: BoundaryStyle = BoundaryStyle.PLAIN
    point_style: PointStyle = PointStyle.SIMPLIFIED
    color_scheme: ColorScheme = ColorScheme.DAY_BRIGHT
    display_category: DisplayCategory = DisplayCategory.OTHER

    model_config = SettingsConfigDict(env_prefix="S52_MARINER_", frozen=True)

    @property
    def symbolized_boundaries(self) -> bool:
        return self.area_style is BoundaryStyle.SYMBOLIZED

    def validate_contours(self) -> bool:
        """Check the contour ordering shallow <= safety <= deep.

        Raises:
            ValueError: If the contours are out of order.
        """
        if self.shallow_contour > self.safety_contour:
            raise ValueError("shallow_contour must not exceed safety_contour")
        if self.safety_contour > self.deep_contour:
            raise ValueError("safety_contour must not exceed deep_contour")
        return True
