"""
Assembling the JSR manifest fragment and merging it into the config file.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsr_manifest.errors import UserInputError
from jsr_manifest.exports import DEFAULT_PATTERNS, resolve_exports
from jsr_manifest.exports.resolver import GlobFunc, glob_paths
from jsr_manifest.manifest_file import load_config, merge_manifest, write_config
from jsr_manifest.version import Runner, resolve_version

logger = logging.getLogger(__name__)


@dataclass
class ManifestFragment:
    """The fields this tool owns in `deno.json` / `jsr.json`."""

    name: str
    version: str
    exports: str | dict[str, str]

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version, "exports": self.exports}


@dataclass
class ManifestOptions:
    """
    Inputs for one run. `exports=None` means use `DEFAULT_PATTERNS`;
    `ignored` adds gitignore-style exclusions.
    """

    name: str | None = None
    version: str | None = None
    exports: list[str] | None = None
    ignored: list[str] = field(default_factory=list)

    @property
    def effective_exports(self) -> list[str]:
        return self.exports if self.exports is not None else list(DEFAULT_PATTERNS)


def split_patterns(value: str | None) -> list[str] | None:
    """Split a comma-separated pattern list, as passed to `--exports`."""
    if value is None:
        return None
    return value.split(",")


def build_manifest(
    options: ManifestOptions,
    root: Path,
    run: Runner = subprocess.run,
    glob: GlobFunc = glob_paths,
) -> ManifestFragment:
    """
    Resolve the version and exports for the project at `root`.

    Raises `UserInputError` if no name is given, before touching git or the
    file tree.
    """
    name = (options.name or "").strip()
    if not name:
        raise UserInputError("Missing name")

    version = resolve_version(options.version, root, run=run)
    exports = resolve_exports(options.effective_exports, root, options.ignored, glob=glob)
    logger.debug("Found %d exports for %s@%s", len(exports), name, version)
    return ManifestFragment(name=name, version=version, exports=exports)


def update_manifest(
    options: ManifestOptions,
    root: Path,
    dry_run: bool = False,
    run: Runner = subprocess.run,
    glob: GlobFunc = glob_paths,
) -> tuple[Path, dict[str, Any]]:
    """
    Build the manifest, merge it into the config file under `root` and write
    the result back to the same file. Returns the file path and the merged
    document. Nothing is written if any step before the write fails, or if
    `dry_run` is set.
    """
    fragment = build_manifest(options, root, run=run, glob=glob)
    path, document = load_config(root)
    merge_manifest(document, fragment)
    if not dry_run:
        write_config(path, document)
    return path, document
