"""Bézier glyph outlines and a sink protocol for path commands."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field

__all__ = ["PointFlags", "OutlineSink", "Contour", "Outline", "OutlineBuilder"]

Point = tuple[float, float]


class PointFlags(enum.IntFlag):
    """What kind of point a contour position is; no flag means on-curve."""

    CONTROL_POINT_0 = 0x01
    CONTROL_POINT_1 = 0x02


_ON_CURVE = PointFlags(0)


class OutlineSink(abc.ABC):
    """Receives Bézier path rendering commands."""

    @abc.abstractmethod
    def move_to(self, to: Point) -> None:
        """Move the pen to a point."""

    @abc.abstractmethod
    def line_to(self, to: Point) -> None:
        """Draw a line to a point."""

    @abc.abstractmethod
    def quadratic_curve_to(self, ctrl: Point, to: Point) -> None:
        """Draw a quadratic curve to a point."""

    @abc.abstractmethod
    def cubic_curve_to(self, ctrl0: Point, ctrl1: Point, to: Point) -> None:
        """Draw a cubic curve to a point."""

    @abc.abstractmethod
    def close(self) -> None:
        """Close the current path."""


@dataclass
class Contour:
    """A single subpath: parallel lists of positions and point flags."""

    positions: list[Point] = field(default_factory=list)
    flags: list[PointFlags] = field(default_factory=list)

    def push(self, position: Point, flags: PointFlags) -> None:
        """Append a point with the given flags."""
        self.positions.append(position)
        self.flags.append(PointFlags(flags))

    def copy_to(self, sink: OutlineSink) -> None:
        """Replay this contour as commands on ``sink``."""
        if len(self.positions) != len(self.flags):
            raise ValueError("contour positions and flags differ in length")
        if not self.positions:
            return
        sink.move_to(self.positions[0])
        points = zip(self.positions[1:], self.flags[1:])
        for position0, flags0 in points:
            if flags0 == _ON_CURVE:
                sink.line_to(position0)
                continue
            position1, flags1 = next(points, (None, None))
            if position1 is None:
                raise ValueError("Invalid outline!")
            if flags1 == _ON_CURVE:
                sink.quadratic_curve_to(position0, position1)
                continue
            position2, flags2 = next(points, (None, None))
            if position2 is None or flags2 != _ON_CURVE:
                raise ValueError("Invalid outline!")
            sink.cubic_curve_to(position0, position1, position2)
        sink.close()


@dataclass
class Outline:
    """A glyph outline made of contours."""

    contours: list[Contour] = field(default_factory=list)

    def copy_to(self, sink: OutlineSink) -> None:
        """Replay every contour on ``sink``."""
        for contour in self.contours:
            contour.copy_to(sink)


class OutlineBuilder(OutlineSink):
    """Accumulates path commands into an :class:`Outline`."""

    def __init__(self) -> None:
        self._outline = Outline()
        self._current = Contour()

    def __repr__(self) -> str:
        return f"OutlineBuilder(outline={self._outline!r}, current={self._current!r})"

    def move_to(self, to: Point) -> None:
        self._current.push(to, _ON_CURVE)

    def line_to(self, to: Point) -> None:
        self._current.push(to, _ON_CURVE)

    def quadratic_curve_to(self, ctrl: Point, to: Point) -> None:
        self._current.push(ctrl, PointFlags.CONTROL_POINT_0)
        self._current.push(to, _ON_CURVE)

    def cubic_curve_to(self, ctrl0: Point, ctrl1: Point, to: Point) -> None:
        self._current.push(ctrl0, PointFlags.CONTROL_POINT_0)
        self._current.push(ctrl1, PointFlags.CONTROL_POINT_1)
        self._current.push(to, _ON_CURVE)

    def close(self) -> None:
        self._outline.contours.append(self._current)
        self._current = Contour()

    def into_outline(self) -> Outline:
        """Return the outline built so far."""
        return self._outline

    def take_outline(self) -> Outline:
        """Return the outline built so far and start a fresh one."""
        if self._current.positions:
            raise ValueError("cannot take outline while a contour is open")
        self._current = Contour()
        outline, self._outline = self._outline, Outline()
        return outline