"""
Locating, reading and writing the Deno/JSR config file that receives the
manifest fields.

Candidates are probed in order: `deno.json`, `deno.jsonc`, `jsr.json`,
`jsr.jsonc`. The first one that exists and parses wins. If none does, a new
`jsr.json` is written.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from strif import atomic_output_file

if TYPE_CHECKING:
    from jsr_manifest.manifest import ManifestFragment

logger = logging.getLogger(__name__)

CANDIDATE_FILENAMES: tuple[str, ...] = ("deno.json", "deno.jsonc", "jsr.json", "jsr.jsonc")

DEFAULT_FILENAME = "jsr.json"

# Strings are matched first so that `//` or `/*` inside a string survive.
_JSONC_TOKEN_RE = re.compile(
    r'(?P<string>"(?:[^"\\]|\\.)*")|(?P<comment>//[^\n]*|/\*.*?\*/)',
    re.DOTALL,
)
_TRAILING_COMMA_RE = re.compile(r'(?P<string>"(?:[^"\\]|\\.)*")|,(?P<close>\s*[}\]])')

ConfigDocument = dict[str, Any]


@dataclass(frozen=True)
class Loaded:
    path: Path
    document: ConfigDocument


@dataclass(frozen=True)
class NotFound:
    path: Path


@dataclass(frozen=True)
class ParseError:
    path: Path
    error: str


ReadResult = Loaded | NotFound | ParseError


def strip_jsonc(text: str) -> str:
    """Remove `//` and `/* */` comments and trailing commas from JSONC text."""
    text = _JSONC_TOKEN_RE.sub(lambda m: m.group("string") or "", text)
    return _TRAILING_COMMA_RE.sub(lambda m: m.group("string") or m.group("close"), text)


def parse_document(text: str, comments: bool = False) -> ConfigDocument:
    """
    Parse config text into a document. Raises `ValueError` (including
    `json.JSONDecodeError`) if the text isn't a JSON object.
    """
    if comments:
        text = strip_jsonc(text)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def read_candidate(path: Path) -> ReadResult:
    """Read and parse one candidate file."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return NotFound(path)
    except (OSError, UnicodeDecodeError) as e:
        return ParseError(path, str(e))
    try:
        document = parse_document(text, comments=path.suffix == ".jsonc")
    except ValueError as e:
        return ParseError(path, str(e))
    return Loaded(path, document)


def load_config(root: Path) -> tuple[Path, ConfigDocument]:
    """
    Return the first candidate under `root` that loads, with its content, or
    the default `jsr.json` path with an empty document.

    Unreadable or malformed candidates are skipped like missing ones.
    """
    for filename in CANDIDATE_FILENAMES:
        result = read_candidate(root / filename)
        if isinstance(result, Loaded):
            logger.debug("Using %s", result.path)
            return result.path, result.document
        if isinstance(result, ParseError):
            logger.debug("Skipping %s: %s", result.path, result.error)

    return root / DEFAULT_FILENAME, {}


def merge_manifest(document: ConfigDocument, fragment: ManifestFragment) -> ConfigDocument:
    """
    Overwrite `name`, `version` and `exports` on `document` in place. Existing
    keys keep their position; other keys are left alone.
    """
    document.update(fragment.as_dict())
    return document


def dump_document(document: ConfigDocument) -> str:
    """Serialize as 2-space indented JSON."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def write_config(path: Path, document: ConfigDocument) -> None:
    """Replace the contents of `path` with `document`, atomically."""
    with atomic_output_file(path, make_parents=True) as temp_path:
        Path(temp_path).write_text(dump_document(document), encoding="utf-8")
