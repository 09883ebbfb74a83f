"""Hex color normalization."""

from __future__ import annotations

import re

DEFAULT_COLOR = "#000000"

_CANONICAL_RE = re.compile(r"#[0-9a-f]{6}")


def normalize_color(value: str | None) -> str:
    """Return ``value`` as a lowercase ``#``-prefixed color.

    Empty input maps to black. The hex digits themselves are not checked.
    """
    if not value:
        return DEFAULT_COLOR
    color = value.lower()
    if not color.startswith("#"):
        color = "#" + color
    return color


def is_canonical_color(value: str) -> bool:
    return _CANONICAL_RE.fullmatch(value) is not None
