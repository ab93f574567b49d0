"""Errors raised while building a manifest."""

from __future__ import annotations

from typing import Any


class ManifestError(Exception):
    """Base exception for manifest generation."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """
        Initialize with a message and optional context (file paths, tags, etc.).
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UserInputError(ManifestError):
    """A required option was not supplied."""


class VersionNotFoundError(ManifestError):
    """Neither an explicit version nor a usable git tag was found."""
