"""
ExportResolver: expands glob patterns into a JSR `exports` map.

Each accepted file is exported under its root-relative specifier, except a
top-level `mod.<ext>` file, which becomes the package's main entry `.`.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from jsr_manifest.exports.filters import ExportFilter
from jsr_manifest.exports.types import ExportResolverConfig

logger = logging.getLogger(__name__)

ROOT_EXPORT = "."

_MAIN_MODULE_RE = re.compile(r"\./mod\.\w+", re.ASCII)

GlobFunc = Callable[[Path, str], Iterable[Path]]


def glob_paths(root: Path, pattern: str) -> Iterable[Path]:
    """
    Expand `pattern` against `root` and return the matches in sorted order.
    `**` matches any number of directories, including none. Blank patterns
    (`""`, `./`, `.`) only name the root directory, so they match no files.
    """
    pattern = pattern.strip()
    while pattern.startswith("./"):
        pattern = pattern[2:]
    if pattern in ("", "."):
        return []
    return sorted(root.glob(pattern))


def is_main_module(specifier: str) -> bool:
    """True for a top-level `./mod.<ext>` specifier, the package's `.` export."""
    return _MAIN_MODULE_RE.fullmatch(specifier) is not None


def to_specifier(path: Path, root: Path) -> str:
    """Convert a matched path to a `./`-prefixed POSIX specifier."""
    rel = os.path.relpath(path, root)
    return "./" + Path(rel).as_posix()


class ExportResolver:
    """
    Builds the export map for a project root from configured glob patterns.

    The glob provider can be swapped out so that resolution can run against
    a virtual file tree.
    """

    def __init__(self, config: ExportResolverConfig, glob: GlobFunc = glob_paths) -> None:
        self._config: ExportResolverConfig = config
        self._filter: ExportFilter = ExportFilter(config.ignored)
        self._glob: GlobFunc = glob

    def resolve(self, root: Path) -> dict[str, str]:
        """
        Resolve the configured patterns under `root`, in order.

        Later matches overwrite earlier ones on the same key, so when several
        `mod.*` files match, the last one becomes the `.` export.
        """
        exports: dict[str, str] = {}

        for pattern in self._config.patterns:
            for path in self._glob(root, pattern):
                if path.is_dir():
                    continue
                specifier = to_specifier(path, root)
                if self._filter.rejects(specifier):
                    logger.debug("Skipping %s", specifier)
                    continue
                if is_main_module(specifier):
                    if ROOT_EXPORT in exports and exports[ROOT_EXPORT] != specifier:
                        logger.debug(
                            "Main export %s replaces %s", specifier, exports[ROOT_EXPORT]
                        )
                    exports[ROOT_EXPORT] = specifier
                else:
                    exports[specifier] = specifier

        return exports


def resolve_exports(
    patterns: Sequence[str],
    root: Path,
    ignored: Sequence[str] = (),
    glob: GlobFunc = glob_paths,
) -> dict[str, str]:
    """Resolve `patterns` under `root` into an exports map."""
    config = ExportResolverConfig(patterns=list(patterns), ignored=list(ignored))
    return ExportResolver(config, glob=glob).resolve(root)
