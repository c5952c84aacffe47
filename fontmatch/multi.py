"""A source that queries several sources as a group."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

from .errors import NotFoundError
from .properties import Properties
from .source import FamilyName, Source

__all__ = ["MultiSource"]

_S = TypeVar("_S", bound=Source)


class MultiSource(Source):
    """Queries its sources in order, e.g. system fonts plus application fonts."""

    def __init__(self, subsources: Iterable[Source]) -> None:
        self._subsources: list[Source] = list(subsources)

    def __repr__(self) -> str:
        return f"MultiSource({self._subsources!r})"

    def all_fonts(self) -> list[Any]:
        """Return the fonts of every source, in source order."""
        return [handle for source in self._subsources for handle in source.all_fonts()]

    def all_families(self) -> list[str]:
        """Return the families of every source, in source order."""
        return [name for source in self._subsources for name in source.all_families()]

    def select_family_by_name(self, family_name: str) -> Sequence[Any]:
        """Return the family from the first source that has it."""
        for source in self._subsources:
            try:
                return source.select_family_by_name(family_name)
            except NotFoundError:
                continue
        raise NotFoundError(f"no family named {family_name!r}")

    def select_by_postscript_name(self, postscript_name: str) -> Any:
        """Return the font from the first source that has it."""
        for source in self._subsources:
            try:
                return source.select_by_postscript_name(postscript_name)
            except NotFoundError:
                continue
        raise NotFoundError(f"no font named {postscript_name!r}")

    def select_descriptions_in_family(self, family: Sequence[Any]) -> list[Properties]:
        """Return descriptions from the first source that knows the family."""
        for source in self._subsources:
            try:
                return source.select_descriptions_in_family(family)
            except NotFoundError:
                continue
        raise NotFoundError("no source describes this family")

    def select_best_match(
        self, family_names: Sequence[FamilyName], properties: Properties
    ) -> Any:
        """Return the best matching font across all sources."""
        return super().select_best_match(family_names, properties)

    def find_source(self, source_type: type[_S]) -> _S | None:
        """Return the first contained source of the given type, or None."""
        return next((s for s in self._subsources if isinstance(s, source_type)), None)

    def __iter__(self) -> Iterator[Source]:
        return iter(self._subsources)

    def __len__(self) -> int:
        return len(self._subsources)

    def __getitem__(self, index: int) -> Source:
        return self._subsources[index]