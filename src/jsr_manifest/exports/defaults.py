"""
Default glob patterns and filtering rules for export discovery.
"""

from __future__ import annotations

DEFAULT_PATTERNS: list[str] = ["./*.ts", "./**/*.ts"]

# Only these extensions can be published as module exports.
EXPORT_EXTENSIONS: frozenset[str] = frozenset([".ts", ".js", ".tsx", ".jsx", ".mjs"])

# Substrings that mark a path as non-publishable (tests, docs, vendored deps,
# benchmarks, hidden or private files).
IGNORED_SUBSTRINGS: list[str] = [
    # Directories
    "/tests/",
    "/test/",
    "/docs/",
    "/deps.",
    "/deps/",
    "/node_modules/",
    # Test and benchmark naming conventions
    "/test.",
    ".test.",
    "_test.",
    "/bench.",
    ".bench.",
    "_bench.",
    # Hidden and private segments
    "/.",
    "/_",
]

IGNORED_SUFFIXES: list[str] = [".d.ts"]
