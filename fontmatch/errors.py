"""Errors raised when a font cannot be selected."""

from __future__ import annotations

__all__ = ["SelectionError", "NotFoundError", "CannotAccessSourceError"]


class SelectionError(Exception):
    """Base class for font selection failures."""


class NotFoundError(SelectionError):
    """No font matching the query was found."""


class CannotAccessSourceError(SelectionError):
    """The font source could not be read."""