"""
Discovery of publishable modules for the JSR `exports` map.

Usage::

    from jsr_manifest.exports import resolve_exports

    exports = resolve_exports(["./*.ts", "./**/*.ts"], Path.cwd())
"""

from jsr_manifest.exports.defaults import DEFAULT_PATTERNS
from jsr_manifest.exports.filters import ExportFilter, is_ignored
from jsr_manifest.exports.resolver import ROOT_EXPORT, ExportResolver, resolve_exports
from jsr_manifest.exports.types import ExportResolverConfig

__all__ = [
    "DEFAULT_PATTERNS",
    "ROOT_EXPORT",
    "ExportFilter",
    "ExportResolver",
    "ExportResolverConfig",
    "is_ignored",
    "resolve_exports",
]
