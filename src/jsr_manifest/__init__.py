"""
jsr-manifest: generate the JSR `name`, `version` and `exports` fields of a
Deno project and merge them into its config file.
"""

from jsr_manifest.errors import ManifestError, UserInputError, VersionNotFoundError
from jsr_manifest.exports import is_ignored, resolve_exports
from jsr_manifest.manifest import (
    ManifestFragment,
    ManifestOptions,
    build_manifest,
    update_manifest,
)
from jsr_manifest.manifest_file import load_config, merge_manifest, write_config
from jsr_manifest.version import resolve_version

__all__ = [
    "ManifestError",
    "ManifestFragment",
    "ManifestOptions",
    "UserInputError",
    "VersionNotFoundError",
    "build_manifest",
    "is_ignored",
    "load_config",
    "merge_manifest",
    "resolve_exports",
    "resolve_version",
    "update_manifest",
    "write_config",
]
