"""Tests for version resolution."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

import pytest

from jsr_manifest.errors import VersionNotFoundError
from jsr_manifest.version import (
    GIT_DESCRIBE,
    get_latest_tag,
    is_version_tag,
    normalize_version,
    resolve_version,
)


class FakeGit:
    """Stands in for `subprocess.run`, recording calls."""

    def __init__(self, stdout: str = "", returncode: int = 0):
        self.stdout = stdout
        self.returncode = returncode
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        self.calls.append((args, kwargs))
        return subprocess.CompletedProcess(
            args, self.returncode, stdout=self.stdout.encode("utf-8"), stderr=b""
        )


def _no_git(*args: Any, **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
    raise AssertionError("git should not be called")


def test_explicit_version_strips_v(tmp_path: Path):
    assert resolve_version("v1.2.3", tmp_path, run=_no_git) == "1.2.3"


def test_explicit_version_unchanged(tmp_path: Path):
    assert resolve_version("1.2.3", tmp_path, run=_no_git) == "1.2.3"


def test_explicit_version_is_trimmed(tmp_path: Path):
    assert resolve_version("  v0.4.0\n", tmp_path, run=_no_git) == "0.4.0"


def test_explicit_prerelease_is_accepted(tmp_path: Path):
    assert resolve_version("v2.0.0-rc.1", tmp_path, run=_no_git) == "2.0.0-rc.1"


def test_only_one_leading_v_removed():
    assert normalize_version("vv1.0.0") == "v1.0.0"
    assert normalize_version("1.0.0") == "1.0.0"


def test_falls_back_to_latest_tag(tmp_path: Path):
    git = FakeGit("v2.0.0\n")
    assert resolve_version(None, tmp_path, run=git) == "2.0.0"
    args, kwargs = git.calls[0]
    assert args == GIT_DESCRIBE == ["git", "describe", "--tags", "--abbrev=0"]
    assert kwargs["cwd"] == str(tmp_path)


def test_blank_explicit_version_falls_back_to_tag(tmp_path: Path):
    assert resolve_version("   ", tmp_path, run=FakeGit("3.1.4")) == "3.1.4"


def test_prerelease_tag_is_not_a_version(tmp_path: Path):
    with pytest.raises(VersionNotFoundError, match="No version found"):
        resolve_version(None, tmp_path, run=FakeGit("v2.0.0-rc\n"))


@pytest.mark.parametrize("tag", ["release-1", "v1.2", "1.2.3.4", "v1.2.3 extra", "x1.2.3"])
def test_get_latest_tag_rejects_non_versions(tmp_path: Path, tag: str):
    assert get_latest_tag(tmp_path, run=FakeGit(tag)) is None


def test_get_latest_tag_returns_tag_with_prefix(tmp_path: Path):
    assert get_latest_tag(tmp_path, run=FakeGit("v10.20.30\n")) == "v10.20.30"


def test_no_tags_raises(tmp_path: Path):
    git = FakeGit("", returncode=128)
    with pytest.raises(VersionNotFoundError):
        resolve_version(None, tmp_path, run=git)


def test_missing_git_propagates(tmp_path: Path):
    def missing(*args: Any, **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        raise FileNotFoundError("git")

    with pytest.raises(FileNotFoundError):
        resolve_version(None, tmp_path, run=missing)


def test_failed_describe_ignores_stdout(tmp_path: Path):
    git = FakeGit("v1.0.0\n", returncode=128)
    assert get_latest_tag(tmp_path, run=git) is None
    with pytest.raises(VersionNotFoundError, match="No version found"):
        resolve_version(None, tmp_path, run=git)


def test_is_version_tag_is_anchored_at_end():
    assert is_version_tag("v1.2.3")
    assert is_version_tag("1.2.3")
    assert not is_version_tag("v1.2.3\n")
    assert not is_version_tag("v1.2.3-rc")
