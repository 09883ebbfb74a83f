"""Lookup API over the embedded theme catalog."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from ._catalog import THEMES
from .models import Theme

_log = logging.getLogger("termthemes.registry")


class ThemeNotFound(LookupError):
    """Raised when no catalog theme matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"theme not found: {name!r}")
        self.name = name


_ALL_THEMES: Mapping[str, Theme] = MappingProxyType(THEMES)


def _build_index(themes: Mapping[str, Theme]) -> dict[str, Theme]:
    index: dict[str, Theme] = {}
    for key in sorted(themes):
        folded = key.lower()
        if folded in index:
            # First key in sorted order keeps the slot.
            _log.debug("case-insensitive collision for %r ignored", key)
            continue
        index[folded] = themes[key]
    return index


_BY_LOWER_NAME: dict[str, Theme] = _build_index(THEMES)


def get_theme(name: str) -> Theme:
    """Return the theme whose name matches ``name`` ignoring case.

    Raises :class:`ThemeNotFound` when there is no match.
    """
    theme = _BY_LOWER_NAME.get(name.lower())
    if theme is None:
        raise ThemeNotFound(name)
    return theme


def list_themes() -> list[str]:
    return sorted(_ALL_THEMES.keys())


def get_all_themes() -> Mapping[str, Theme]:
    """Return a read-only view of every theme keyed by name."""
    return _ALL_THEMES
