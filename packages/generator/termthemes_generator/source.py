"""Reader for Windows Terminal color scheme JSON files."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from .errors import EnumerationError, PerFileError

_log = logging.getLogger("termthemes.generator.source")

SCHEME_SUFFIX = ".json"


@dataclass(frozen=True)
class SourceScheme:
    """One upstream scheme, restricted to the fields the catalog consumes."""

    name: str = ""
    foreground: str = ""
    background: str = ""
    cursor_color: str = ""
    black: str = ""
    red: str = ""
    green: str = ""
    yellow: str = ""
    blue: str = ""
    purple: str = ""
    cyan: str = ""
    white: str = ""
    bright_black: str = ""
    bright_red: str = ""
    bright_green: str = ""
    bright_yellow: str = ""
    bright_blue: str = ""
    bright_purple: str = ""
    bright_cyan: str = ""
    bright_white: str = ""

    @classmethod
    def from_json(cls, payload: Any) -> "SourceScheme":
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        values: dict[str, str] = {}
        for attr, key in SOURCE_KEYS.items():
            raw = payload.get(key)
            if raw is None:
                values[attr] = ""
            elif isinstance(raw, str):
                values[attr] = raw
            else:
                raise ValueError(f"field {key!r} must be a string, got {type(raw).__name__}")
        return cls(**values)


# Attribute name -> JSON key. Keys not listed here (selectionBackground, ...) are ignored.
SOURCE_KEYS: dict[str, str] = {
    "name": "name",
    "foreground": "foreground",
    "background": "background",
    "cursor_color": "cursorColor",
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "purple": "purple",
    "cyan": "cyan",
    "white": "white",
    "bright_black": "brightBlack",
    "bright_red": "brightRed",
    "bright_green": "brightGreen",
    "bright_yellow": "brightYellow",
    "bright_blue": "brightBlue",
    "bright_purple": "brightPurple",
    "bright_cyan": "brightCyan",
    "bright_white": "brightWhite",
}


def list_scheme_files(directory: Path) -> list[Path]:
    try:
        entries = os.listdir(directory)
    except OSError as exc:
        raise EnumerationError(f"cannot list source directory {directory}: {exc}") from exc
    return [directory / entry for entry in sorted(entries) if entry.endswith(SCHEME_SUFFIX)]


def read_scheme(path: Path) -> SourceScheme:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PerFileError(path, f"read failed: {exc}") from exc
    try:
        return SourceScheme.from_json(json.loads(text))
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass.
        raise PerFileError(path, f"parse failed: {exc}") from exc


def iter_source_schemes(directory: Path) -> Iterator[tuple[str, SourceScheme]]:
    """Yield ``(stem, scheme)`` for every parseable ``*.json`` file in ``directory``.

    Files that fail to read or parse are logged and skipped.
    """
    for path in list_scheme_files(Path(directory)):
        try:
            scheme = read_scheme(path)
        except PerFileError as exc:
            _log.warning(
                "skipping %s: %s",
                path.name,
                exc.reason,
                extra={"event": "scheme_skipped"},
            )
            continue
        yield path.name[: -len(SCHEME_SUFFIX)], scheme
