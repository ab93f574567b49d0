"""Configuration types for export resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from jsr_manifest.exports.defaults import DEFAULT_PATTERNS


@dataclass
class ExportResolverConfig:
    """
    Configuration for export discovery.

    `patterns` are globs relative to the project root, expanded in order.
    `ignored` holds extra gitignore-style exclusions on top of the built-in
    rules in `is_ignored`.
    """

    patterns: list[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    ignored: list[str] = field(default_factory=list)
