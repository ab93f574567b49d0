"""
Package version lookup: an explicit value, or the latest git tag.
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jsr_manifest.errors import VersionNotFoundError

logger = logging.getLogger(__name__)

# Tags must be plain `MAJOR.MINOR.PATCH`, optionally prefixed with `v`.
_TAG_RE = re.compile(r"v?\d+\.\d+\.\d+", re.ASCII)

GIT_DESCRIBE = ["git", "describe", "--tags", "--abbrev=0"]

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


def is_version_tag(tag: str) -> bool:
    return _TAG_RE.fullmatch(tag) is not None


def get_latest_tag(root: Path, run: Runner = subprocess.run) -> str | None:
    """
    Return the nearest tag reachable from HEAD in `root`, or `None` if git
    reports no tag or the tag isn't a plain `v?X.Y.Z` version.

    A missing `git` executable is not handled here; the `OSError` propagates.
    """
    result = run(GIT_DESCRIBE, cwd=str(root), capture_output=True, check=False)
    if result.returncode != 0:
        logger.debug("git describe failed (%s): %s", result.returncode, result.stderr)
        return None
    tag = result.stdout.decode("utf-8", errors="replace").strip()
    if not tag:
        return None
    if not is_version_tag(tag):
        logger.debug("Ignoring tag %r: not a MAJOR.MINOR.PATCH version", tag)
        return None
    return tag


def normalize_version(version: str) -> str:
    """Drop a single leading `v`, so `v1.2.3` becomes `1.2.3`."""
    return version[1:] if version.startswith("v") else version


def resolve_version(
    explicit: str | None,
    root: Path,
    run: Runner = subprocess.run,
) -> str:
    """
    Use `explicit` if it is non-blank, otherwise the latest git tag.

    Explicit values are taken as given (apart from trimming and the `v`
    prefix), so pre-release versions can still be published by passing them
    on the command line.
    """
    candidate = (explicit or "").strip() or get_latest_tag(root, run=run)
    if not candidate:
        raise VersionNotFoundError("No version found", {"root": str(root)})
    version = normalize_version(candidate)
    logger.debug("Resolved version %s", version)
    return version
