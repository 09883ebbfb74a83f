"""End-to-end catalog generation: ingest, map, emit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from termthemes.models import Theme

from .config import GeneratorConfig
from .emitter import emit_catalog
from .mapper import map_schemes
from .source import iter_source_schemes
from .upstream import upstream_checkout

_log = logging.getLogger("termthemes.generator.build")


@dataclass(frozen=True)
class GenerateResult:
    source: str
    output_path: Path
    theme_count: int


def collect_themes(source_dir: Path) -> list[Theme]:
    themes = map_schemes(iter_source_schemes(source_dir))
    _log.info("parsed %d themes from %s", len(themes), source_dir, extra={"event": "themes_parsed"})
    return themes


def generate_from_directory(source_dir: Path, output_path: Path) -> GenerateResult:
    written = emit_catalog(collect_themes(source_dir), output_path)
    return GenerateResult(source=str(source_dir), output_path=output_path, theme_count=len(written))


def generate_catalog(
    cfg: GeneratorConfig,
    source_dir: Path | None = None,
    output_path: Path | None = None,
) -> GenerateResult:
    """Regenerate the catalog module.

    Reads ``source_dir`` when given, otherwise clones the configured upstream
    repository into a scratch directory for the duration of the run.
    """
    output_path = output_path or cfg.catalog_path()
    if source_dir is not None:
        return generate_from_directory(source_dir, output_path)

    upstream = cfg.upstream
    with upstream_checkout(
        repo_url=upstream.repo_url,
        subdir=upstream.subdir,
        depth=upstream.clone_depth,
        git=upstream.git_executable,
    ) as schemes_dir:
        result = generate_from_directory(schemes_dir, output_path)
    return GenerateResult(source=upstream.repo_url, output_path=result.output_path, theme_count=result.theme_count)
