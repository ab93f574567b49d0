"""Predicates deciding which discovered files can be exported."""

from __future__ import annotations

from collections.abc import Sequence

import pathspec

from jsr_manifest.exports.defaults import (
    EXPORT_EXTENSIONS,
    IGNORED_SUBSTRINGS,
    IGNORED_SUFFIXES,
)


def is_ignored(path: str) -> bool:
    """
    Return True if a root-relative specifier like `./src/foo.ts` must not be
    exported.

    The extension is everything from the last `.` in the whole path, so a
    file without an extension yields a bogus extension and is always ignored.
    """
    extension = path[path.rfind(".") :]
    if extension not in EXPORT_EXTENSIONS:
        return True
    if any(path.endswith(suffix) for suffix in IGNORED_SUFFIXES):
        return True
    return any(marker in path for marker in IGNORED_SUBSTRINGS)


class ExportFilter:
    """
    The built-in `is_ignored` rules plus optional user exclusions in
    gitignore syntax (e.g. `internal/`, `*.generated.ts`).
    """

    def __init__(self, ignored: Sequence[str] = ()) -> None:
        patterns = [p.strip() for p in ignored if p.strip()]
        self._ignored_spec: pathspec.PathSpec | None = (
            pathspec.PathSpec.from_lines("gitignore", patterns) if patterns else None
        )

    def rejects(self, specifier: str) -> bool:
        if is_ignored(specifier):
            return True
        if self._ignored_spec is None:
            return False
        return self._ignored_spec.match_file(specifier.removeprefix("./"))
