#!/usr/bin/env python3
"""
jsr-manifest: Write the JSR name, version and exports into deno.json or jsr.json

Common usage:
  jsr-manifest --name @scope/pkg
  jsr-manifest --name @scope/pkg --version 1.2.3
  jsr-manifest --name @scope/pkg --exports "./mod.ts,./src/**/*.ts"

The version defaults to the latest `vX.Y.Z` git tag. The first of deno.json,
deno.jsonc, jsr.json, jsr.jsonc that exists is updated; otherwise jsr.json is
created.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from jsr_manifest.config import apply_settings, find_config_file, load_config
from jsr_manifest.errors import ManifestError
from jsr_manifest.manifest import ManifestOptions, split_patterns, update_manifest
from jsr_manifest.manifest_file import dump_document


@dataclass
class Options:
    """Command-line options for the jsr-manifest tool."""

    name: str | None
    version: str | None
    exports: list[str] | None
    ignored: list[str] | None
    root: str | None
    dry_run: bool
    verbose: bool
    tool_version: bool


# Options that can also come from a settings file
_MERGEABLE_FLAGS = ("name", "version", "exports", "ignored")


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns the options and the set of settings the user passed explicitly
    (for settings-file merge precedence).
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="jsr-manifest",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--name", type=str, default=None, help="Package name, e.g. @scope/pkg")
    parser.add_argument(
        "--version",
        type=str,
        default=None,
        help="Package version (default: latest git tag, with any leading 'v' removed)",
    )
    parser.add_argument(
        "--exports",
        type=str,
        default=None,
        metavar="GLOBS",
        help="Comma-separated glob patterns for exported modules (default: './*.ts,./**/*.ts')",
    )
    parser.add_argument(
        "--ignored",
        type=str,
        default=None,
        metavar="PATTERNS",
        help="Comma-separated gitignore-style patterns to exclude from exports",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        metavar="DIR",
        help="Project root to scan and update (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Print the merged config to stdout instead of writing it",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log discovery details to stderr"
    )
    parser.add_argument(
        "--tool-version",
        action="store_true",
        dest="tool_version",
        help="Show jsr-manifest version information and exit",
    )
    opts = parser.parse_args(args)

    options = Options(
        name=opts.name,
        version=opts.version,
        exports=split_patterns(opts.exports),
        ignored=split_patterns(opts.ignored),
        root=opts.root,
        dry_run=opts.dry_run,
        verbose=opts.verbose,
        tool_version=opts.tool_version,
    )
    explicit_flags = {flag for flag in _MERGEABLE_FLAGS if getattr(options, flag) is not None}
    return options, explicit_flags


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the jsr-manifest CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.tool_version:
        try:
            version = importlib.metadata.version("jsr-manifest")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = Path(options.root).resolve() if options.root else Path.cwd()

    config_path = find_config_file(root)
    if config_path:
        apply_settings(options, load_config(config_path), explicit_flags)

    manifest_options = ManifestOptions(
        name=options.name,
        version=options.version,
        exports=options.exports,
        ignored=options.ignored or [],
    )

    try:
        path, document = update_manifest(manifest_options, root, dry_run=options.dry_run)
    except ManifestError as e:
        # Missing name or no usable version.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # File system, git or glob errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if options.dry_run:
        print(dump_document(document))
    else:
        print(f"Updated {os.path.relpath(path)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
