"""Pick the font that best fits a description, per CSS Fonts Level 3 section 5.2."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import NotFoundError
from .properties import Properties, Stretch, Style

__all__ = ["find_best_match"]

_STYLE_PREFERENCE: dict[Style, tuple[Style, ...]] = {
    Style.ITALIC: (Style.ITALIC, Style.OBLIQUE, Style.NORMAL),
    Style.OBLIQUE: (Style.OBLIQUE, Style.ITALIC, Style.NORMAL),
    Style.NORMAL: (Style.NORMAL, Style.OBLIQUE, Style.ITALIC),
}


def _closest(values: list[float], target: float, prefer_lower: bool, inclusive: bool) -> float:
    """Return the nearest value on the preferred side of ``target``, else the nearest overall."""
    if prefer_lower:
        side = [v for v in values if (v <= target if inclusive else v < target)]
        if side:
            return min(side, key=lambda v: target - v)
        return min(values, key=lambda v: v - target)
    side = [v for v in values if (v >= target if inclusive else v > target)]
    if side:
        return min(side, key=lambda v: v - target)
    return min(values, key=lambda v: target - v)


def _match_stretch(values: list[float], query: float) -> float:
    if query in values:
        return query
    return _closest(values, query, prefer_lower=query <= Stretch.NORMAL.value, inclusive=False)


def _match_style(styles: list[Style], query: Style) -> Style:
    return next(style for style in _STYLE_PREFERENCE[query] if style in styles)


def _match_weight(values: list[float], query: float) -> float:
    # The spec says nothing about weights strictly between 400 and 500, so 450 is the cutoff.
    if query in values:
        return query
    if 400.0 <= query < 450.0 and 500.0 in values:
        return 500.0
    if 450.0 <= query <= 500.0 and 400.0 in values:
        return 400.0
    return _closest(values, query, prefer_lower=query <= 500.0, inclusive=True)


def find_best_match(candidates: Sequence[Properties], query: Properties) -> int:
    """Return the index of the candidate that best matches ``query``.

    Raises :class:`NotFoundError` when there are no candidates.
    """
    matching = list(range(len(candidates)))
    if not matching:
        raise NotFoundError("no candidate fonts")

    stretch = _match_stretch([candidates[i].stretch.value for i in matching], query.stretch.value)
    matching = [i for i in matching if candidates[i].stretch.value == stretch]

    style = _match_style([candidates[i].style for i in matching], query.style)
    matching = [i for i in matching if candidates[i].style == style]

    weight = _match_weight([candidates[i].weight.value for i in matching], query.weight.value)
    matching = [i for i in matching if candidates[i].weight.value == weight]

    # Font size is not considered: the fonts here are unsized.
    if not matching:
        raise NotFoundError("no candidate matches")
    return matching[0]