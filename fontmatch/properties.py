"""Properties that pick a font within a family: style, weight and stretch."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import ClassVar

__all__ = ["Style", "Weight", "Stretch", "Properties"]


class Style(enum.Enum):
    """Allows italic or oblique faces to be selected."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Weight:
    """Stroke thickness of a font, from 100 to 900 with 400 as normal."""

    value: float = 400.0

    THIN: ClassVar[Weight]
    EXTRA_LIGHT: ClassVar[Weight]
    LIGHT: ClassVar[Weight]
    NORMAL: ClassVar[Weight]
    MEDIUM: ClassVar[Weight]
    SEMIBOLD: ClassVar[Weight]
    BOLD: ClassVar[Weight]
    EXTRA_BOLD: ClassVar[Weight]
    BLACK: ClassVar[Weight]


Weight.THIN = Weight(100.0)
Weight.EXTRA_LIGHT = Weight(200.0)
Weight.LIGHT = Weight(300.0)
Weight.NORMAL = Weight(400.0)
Weight.MEDIUM = Weight(500.0)
Weight.SEMIBOLD = Weight(600.0)
Weight.BOLD = Weight(700.0)
Weight.EXTRA_BOLD = Weight(800.0)
Weight.BLACK = Weight(900.0)


@dataclass(frozen=True, order=True)
class Stretch:
    """Width of a font as a fraction of normal, from 0.5 to 2.0."""

    value: float = 1.0

    ULTRA_CONDENSED: ClassVar[Stretch]
    EXTRA_CONDENSED: ClassVar[Stretch]
    CONDENSED: ClassVar[Stretch]
    SEMI_CONDENSED: ClassVar[Stretch]
    NORMAL: ClassVar[Stretch]
    SEMI_EXPANDED: ClassVar[Stretch]
    EXPANDED: ClassVar[Stretch]
    EXTRA_EXPANDED: ClassVar[Stretch]
    ULTRA_EXPANDED: ClassVar[Stretch]
    # Maps `usWidthClass` values (1-9) to CSS `font-stretch` values.
    MAPPING: ClassVar[tuple[float, ...]]


Stretch.ULTRA_CONDENSED = Stretch(0.5)
Stretch.EXTRA_CONDENSED = Stretch(0.625)
Stretch.CONDENSED = Stretch(0.75)
Stretch.SEMI_CONDENSED = Stretch(0.875)
Stretch.NORMAL = Stretch(1.0)
Stretch.SEMI_EXPANDED = Stretch(1.125)
Stretch.EXPANDED = Stretch(1.25)
Stretch.EXTRA_EXPANDED = Stretch(1.5)
Stretch.ULTRA_EXPANDED = Stretch(2.0)
Stretch.MAPPING = tuple(
    s.value
    for s in (
        Stretch.ULTRA_CONDENSED,
        Stretch.EXTRA_CONDENSED,
        Stretch.CONDENSED,
        Stretch.SEMI_CONDENSED,
        Stretch.NORMAL,
        Stretch.SEMI_EXPANDED,
        Stretch.EXPANDED,
        Stretch.EXTRA_EXPANDED,
        Stretch.ULTRA_EXPANDED,
    )
)


@dataclass(frozen=True)
class Properties:
    """Style, weight and stretch of a font; defaults are all normal."""

    style: Style = Style.NORMAL
    weight: Weight = field(default_factory=Weight)
    stretch: Stretch = field(default_factory=Stretch)

    def with_style(self, style: Style) -> Properties:
        """Return a copy with the given style."""
        return dataclasses.replace(self, style=style)

    def with_weight(self, weight: Weight) -> Properties:
        """Return a copy with the given weight."""
        return dataclasses.replace(self, weight=weight)

    def with_stretch(self, stretch: Stretch) -> Properties:
        """Return a copy with the given stretch."""
        return dataclasses.replace(self, stretch=stretch)