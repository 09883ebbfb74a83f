"""Projection of upstream schemes onto catalog themes."""

from __future__ import annotations

from typing import Iterable

from termthemes.models import Theme

from .colors import normalize_color
from .source import SourceScheme


def to_theme(scheme: SourceScheme, stem: str) -> Theme:
    """Map one upstream scheme to a :class:`Theme`.

    Upstream "purple" slots become magenta. ``stem`` names the theme when the
    scheme carries no name of its own.
    """
    return Theme(
        name=scheme.name or stem,
        foreground=normalize_color(scheme.foreground),
        background=normalize_color(scheme.background),
        cursor=normalize_color(scheme.cursor_color),
        black=normalize_color(scheme.black),
        red=normalize_color(scheme.red),
        green=normalize_color(scheme.green),
        yellow=normalize_color(scheme.yellow),
        blue=normalize_color(scheme.blue),
        magenta=normalize_color(scheme.purple),
        cyan=normalize_color(scheme.cyan),
        white=normalize_color(scheme.white),
        bright_black=normalize_color(scheme.bright_black),
        bright_red=normalize_color(scheme.bright_red),
        bright_green=normalize_color(scheme.bright_green),
        bright_yellow=normalize_color(scheme.bright_yellow),
        bright_blue=normalize_color(scheme.bright_blue),
        bright_magenta=normalize_color(scheme.bright_purple),
        bright_cyan=normalize_color(scheme.bright_cyan),
        bright_white=normalize_color(scheme.bright_white),
    )


def map_schemes(pairs: Iterable[tuple[str, SourceScheme]]) -> list[Theme]:
    return [to_theme(scheme, stem) for stem, scheme in pairs]
