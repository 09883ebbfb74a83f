"""Generator failure taxonomy."""

from __future__ import annotations

from pathlib import Path


class GeneratorError(RuntimeError):
    """Base class for errors that abort catalog generation."""


class SetupError(GeneratorError):
    """Scratch directory creation or upstream acquisition failed."""


class EnumerationError(GeneratorError):
    """The source directory could not be listed."""


class TemplateError(GeneratorError):
    """Rendering, checking, or writing the catalog module failed."""


class PerFileError(GeneratorError):
    """A single source file could not be read or parsed.

    Ingestion logs and skips these; they never abort a run.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
