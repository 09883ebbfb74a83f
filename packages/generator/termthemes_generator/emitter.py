"""Deterministic rendering and atomic writing of the embedded catalog module."""

from __future__ import annotations

import ast
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from termthemes.models import THEME_FIELDS, Theme

from .errors import TemplateError

_log = logging.getLogger("termthemes.generator.emitter")

GENERATED_HEADER = "# Code generated by termthemes-generate; DO NOT EDIT."
_INDENT = "    "


def sort_themes(themes: Iterable[Theme]) -> list[Theme]:
    """Sort by raw name, keeping the first record for any repeated name."""
    ordered = sorted(themes, key=lambda t: t.name)
    unique: list[Theme] = []
    seen: set[str] = set()
    for theme in ordered:
        if theme.name in seen:
            _log.warning(
                "duplicate theme name %r dropped",
                theme.name,
                extra={"event": "duplicate_theme"},
            )
            continue
        seen.add(theme.name)
        unique.append(theme)
    return unique


def _literal(value: str) -> str:
    # JSON string escapes are a subset of Python's.
    return json.dumps(value, ensure_ascii=False)


def _render_entry(theme: Theme) -> list[str]:
    lines = [f"{_INDENT}{_literal(theme.name)}: Theme("]
    for field_name in THEME_FIELDS:
        value = getattr(theme, field_name)
        lines.append(f"{_INDENT * 2}{field_name}={_literal(value)},")
    lines.append(f"{_INDENT}),")
    return lines


def render_catalog(themes: Iterable[Theme]) -> str:
    """Render the catalog module source for ``themes``.

    Records are ordered by name, so input order only matters when two records
    share a name: the earlier one is kept. Ingestion yields files in file-name
    order, which makes the output reproducible.
    """
    ordered = sort_themes(themes)
    lines = [
        GENERATED_HEADER,
        '"""Terminal color schemes embedded at build time."""',
        "",
        "from __future__ import annotations",
        "",
        "from .models import Theme",
        "",
    ]
    if not ordered:
        lines.append("THEMES: dict[str, Theme] = {}")
    else:
        lines.append("THEMES: dict[str, Theme] = {")
        for theme in ordered:
            lines.extend(_render_entry(theme))
        lines.append("}")
    source = "\n".join(lines) + "\n"
    check_source(source)
    return source


def check_source(source: str, filename: str = "_catalog.py") -> None:
    try:
        tree = ast.parse(source, filename=filename)
        compile(tree, filename, "exec")
    except (SyntaxError, ValueError) as exc:
        raise TemplateError(f"rendered catalog is not valid Python: {exc}") from exc


def write_catalog(source: str, path: Path) -> Path:
    """Atomically replace ``path`` with ``source``.

    On failure the previous file is left untouched.
    """
    path = Path(path)
    try:
        data = source.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise TemplateError(f"catalog is not encodable as UTF-8: {exc}") from exc

    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise TemplateError(f"failed to write {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass

    _log.info(
        "wrote catalog to %s (%d bytes)",
        path,
        len(data),
        extra={"event": "catalog_written"},
    )
    return path


def emit_catalog(themes: Iterable[Theme], path: Path) -> list[Theme]:
    """Write the catalog for ``themes`` to ``path`` and return the records written."""
    ordered = sort_themes(themes)
    write_catalog(render_catalog(ordered), path)
    return ordered
