"""Build-time generator for the embedded termthemes catalog."""

from .build import GenerateResult, collect_themes, generate_catalog, generate_from_directory
from .colors import is_canonical_color, normalize_color
from .config import GeneratorConfig, load_config, save_config
from .emitter import emit_catalog, render_catalog, sort_themes, write_catalog
from .errors import EnumerationError, GeneratorError, PerFileError, SetupError, TemplateError
from .mapper import map_schemes, to_theme
from .source import SourceScheme, iter_source_schemes
from .upstream import clone_upstream, upstream_checkout
from .validate import ValidationReport, validate_catalog

__all__ = [
    "EnumerationError",
    "GenerateResult",
    "GeneratorConfig",
    "GeneratorError",
    "PerFileError",
    "SetupError",
    "SourceScheme",
    "TemplateError",
    "ValidationReport",
    "clone_upstream",
    "collect_themes",
    "emit_catalog",
    "generate_catalog",
    "generate_from_directory",
    "is_canonical_color",
    "iter_source_schemes",
    "load_config",
    "map_schemes",
    "normalize_color",
    "render_catalog",
    "save_config",
    "sort_themes",
    "to_theme",
    "upstream_checkout",
    "validate_catalog",
    "write_catalog",
]
