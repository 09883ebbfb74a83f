"""Consistency checks for a theme catalog."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Mapping

from termthemes.models import COLOR_FIELDS, Theme

from .colors import is_canonical_color


@dataclass
class ValidationReport:
    total: int = 0
    errors: list[str] = field(default_factory=list)
    # Sets of keys that differ only by case; lookups resolve them to the first sorted key.
    case_collisions: list[list[str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_theme(key: str, theme: Theme) -> list[str]:
    errors: list[str] = []
    if not theme.name:
        errors.append(f"{key!r}: empty name")
    elif theme.name != key:
        errors.append(f"{key!r}: stored under a different name {theme.name!r}")
    for color_field in COLOR_FIELDS:
        value = getattr(theme, color_field)
        if not is_canonical_color(value):
            errors.append(f"{key!r}: invalid {color_field} {value!r}")
    return errors


def validate_catalog(themes: Mapping[str, Theme]) -> ValidationReport:
    report = ValidationReport(total=len(themes))
    folded: dict[str, list[str]] = defaultdict(list)
    for key in sorted(themes):
        report.errors.extend(validate_theme(key, themes[key]))
        folded[key.lower()].append(key)
    report.case_collisions = [keys for keys in folded.values() if len(keys) > 1]
    return report
