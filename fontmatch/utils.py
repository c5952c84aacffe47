"""Small numeric and file helpers."""

from __future__ import annotations

from typing import BinaryIO

__all__ = ["SFNT_VERSIONS", "clamp", "lerp", "div_round_up", "slurp_file", "has_sfnt_version"]

SFNT_VERSIONS: tuple[bytes, ...] = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"typ1")


def clamp(x: float, minimum: float, maximum: float) -> float:
    """Limit ``x`` to the range ``[minimum, maximum]``."""
    if x < minimum:
        return minimum
    if x > maximum:
        return maximum
    return x


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b``."""
    return a + (b - a) * t


def div_round_up(a: int, b: int) -> int:
    """Integer division of ``a`` by ``b``, rounding up."""
    return (a + b - 1) // b


def slurp_file(file: BinaryIO) -> bytes:
    """Read the rest of a binary file."""
    return file.read()


def has_sfnt_version(data: bytes) -> bool:
    """Tell whether ``data`` starts with a known sfnt version tag."""
    return bytes(data[:4]) in SFNT_VERSIONS