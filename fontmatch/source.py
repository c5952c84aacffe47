"""A queryable database of fonts."""

from __future__ import annotations

import abc
import enum
import sys
from collections.abc import Sequence
from typing import Any, Union

from .errors import NotFoundError, SelectionError
from .matching import find_best_match
from .properties import Properties

__all__ = ["GenericFamily", "FamilyName", "Source", "default_family_name"]


class GenericFamily(enum.Enum):
    """The CSS generic font families."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"


# A family name is either a title such as "Arial" or a generic family.
FamilyName = Union[str, GenericFamily]

_NATIVE_DEFAULTS = {
    GenericFamily.SERIF: "Times New Roman",
    GenericFamily.SANS_SERIF: "Arial",
    GenericFamily.MONOSPACE: "Courier New",
    GenericFamily.CURSIVE: "Comic Sans MS",
}


def default_family_name(generic: GenericFamily | str) -> str:
    """Return the concrete family name used for a generic family on this platform."""
    generic = GenericFamily(generic)
    platform = sys.platform
    if platform == "win32":
        return "Impact" if generic is GenericFamily.FANTASY else _NATIVE_DEFAULTS[generic]
    if platform in ("darwin", "ios"):
        return "Papyrus" if generic is GenericFamily.FANTASY else _NATIVE_DEFAULTS[generic]
    return generic.value


class Source(abc.ABC):
    """A database of fonts that can be queried.

    Fonts are represented by handles of any type chosen by the source; a
    family is a sequence of such handles.
    """

    @abc.abstractmethod
    def all_fonts(self) -> list[Any]:
        """Return the handles of all fonts in this source."""

    @abc.abstractmethod
    def all_families(self) -> list[str]:
        """Return the names of all families in this source."""

    @abc.abstractmethod
    def select_family_by_name(self, family_name: str) -> Sequence[Any]:
        """Return the handles of every font in the named family."""

    @abc.abstractmethod
    def select_by_postscript_name(self, postscript_name: str) -> Any:
        """Return the handle of the font with this PostScript name."""

    @abc.abstractmethod
    def select_descriptions_in_family(self, family: Sequence[Any]) -> list[Properties]:
        """Return the properties of each font in ``family``, in order."""

    def select_family_by_generic_name(self, family_name: FamilyName) -> Sequence[Any]:
        """Look up a family by title or by generic family."""
        if isinstance(family_name, GenericFamily):
            return self.select_family_by_name(default_family_name(family_name))
        if isinstance(family_name, str):
            return self.select_family_by_name(family_name)
        raise TypeError(f"not a family name: {family_name!r}")

    def select_best_match(
        self, family_names: Sequence[FamilyName], properties: Properties
    ) -> Any:
        """Return the handle of the best match, trying the families in order."""
        for family_name in family_names:
            try:
                family = self.select_family_by_generic_name(family_name)
            except SelectionError:
                continue
            candidates = self.select_descriptions_in_family(family)
            try:
                index = find_best_match(candidates, properties)
            except SelectionError:
                continue
            return family[index]
        raise NotFoundError("no family matched")