"""Acquisition of the upstream iTerm2-Color-Schemes corpus."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import SetupError

_log = logging.getLogger("termthemes.generator.upstream")

UPSTREAM_REPO = "https://github.com/mbadolato/iTerm2-Color-Schemes.git"
SCHEMES_SUBDIR = "windowsterminal"


def clone_upstream(
    repo_url: str,
    destination: Path,
    depth: int = 1,
    git: str = "git",
    timeout_s: int = 600,
) -> Path:
    cmd = [git, "clone", f"--depth={max(1, depth)}", repo_url, str(destination)]
    _log.info("cloning %s into %s", repo_url, destination, extra={"event": "clone_started"})
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout_s,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise SetupError(f"failed to run {git}: {exc}") from exc

    if result.returncode != 0:
        raise SetupError(f"git clone exited with {result.returncode}:\n{(result.stdout or '').strip()}")

    _log.info("clone finished", extra={"event": "clone_finished"})
    return destination


@contextmanager
def upstream_checkout(
    repo_url: str = UPSTREAM_REPO,
    subdir: str = SCHEMES_SUBDIR,
    depth: int = 1,
    git: str = "git",
) -> Iterator[Path]:
    """Clone ``repo_url`` into a scratch directory and yield its schemes dir.

    The scratch directory is removed when the block exits, however it exits.
    """
    try:
        scratch = tempfile.TemporaryDirectory(prefix="iterm2-color-schemes-")
    except OSError as exc:
        raise SetupError(f"failed to create scratch directory: {exc}") from exc

    with scratch as tmp:
        checkout = clone_upstream(repo_url, Path(tmp) / "repo", depth=depth, git=git)
        yield checkout / subdir
