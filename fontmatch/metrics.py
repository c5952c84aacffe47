"""Metrics that apply to a whole font."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Rect", "Metrics"]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def origin(self) -> tuple[float, float]:
        return (self.min_x, self.min_y)

    def lower_right(self) -> tuple[float, float]:
        return (self.max_x, self.max_y)


@dataclass
class Metrics:
    """Font-wide metrics in font units; descent is normally negative."""

    units_per_em: int
    ascent: float
    descent: float
    line_gap: float
    underline_position: float
    underline_thickness: float
    cap_height: float
    x_height: float
    bounding_box: Rect = field(default_factory=Rect)