"""Generator settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import termthemes

from .upstream import SCHEMES_SUBDIR, UPSTREAM_REPO

_log = logging.getLogger("termthemes.generator.config")

CONFIG_VERSION = 1
DEFAULT_CONFIG_NAME = "termthemes-generator.json"


@dataclass
class UpstreamConfig:
    repo_url: str = UPSTREAM_REPO
    subdir: str = SCHEMES_SUBDIR
    clone_depth: int = 1
    git_executable: str = "git"


@dataclass
class OutputConfig:
    catalog_path: str | None = None


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: str | None = None
    keep_log_files: int = 7


@dataclass
class GeneratorConfig:
    config_version: int = CONFIG_VERSION
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def catalog_path(self) -> Path:
        if self.output.catalog_path:
            return Path(self.output.catalog_path).expanduser()
        return default_catalog_path()


def default_catalog_path() -> Path:
    return Path(termthemes.__file__).resolve().parent / "_catalog.py"


def config_path() -> Path:
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _require_str(value: Any, key: str, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")


def _normalize(cfg: GeneratorConfig) -> None:
    _require_str(cfg.upstream.repo_url, "upstream.repo_url")
    _require_str(cfg.upstream.subdir, "upstream.subdir")
    _require_str(cfg.upstream.git_executable, "upstream.git_executable")
    _require_str(cfg.output.catalog_path, "output.catalog_path", optional=True)
    _require_str(cfg.logging.log_file, "logging.log_file", optional=True)
    cfg.upstream.clone_depth = max(1, int(cfg.upstream.clone_depth))
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))
    cfg.logging.level = str(cfg.logging.level).upper()


def load_config(path: Path | None = None) -> GeneratorConfig:
    path = path or config_path()
    if not path.exists():
        return GeneratorConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        _log.warning("ignoring unreadable config %s: %s", path, exc, extra={"event": "config_invalid"})
        return GeneratorConfig()
    if not isinstance(raw, dict):
        _log.warning("ignoring config %s: top level is not an object", path, extra={"event": "config_invalid"})
        return GeneratorConfig()

    try:
        cfg = GeneratorConfig(
            config_version=int(raw.get("config_version", CONFIG_VERSION)),
            upstream=_merge(UpstreamConfig, raw.get("upstream", {})),
            output=_merge(OutputConfig, raw.get("output", {})),
            logging=_merge(LoggingConfig, raw.get("logging", {})),
        )
        _normalize(cfg)
    except (TypeError, ValueError) as exc:
        _log.warning("ignoring invalid config %s: %s", path, exc, extra={"event": "config_invalid"})
        return GeneratorConfig()
    return cfg


def save_config(cfg: GeneratorConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
