# src/hdrpack/core/ignore.py
from pathlib import Path
from typing import List, Optional

import pathspec

from hdrpack.config import DEFAULT_IGNORE_FILE
from hdrpack.errors import ConfigError


def find_ignore_file(root_dir: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    """
    An explicitly given ignore file must exist.
    Otherwise <root>/.bundleignore is used when present.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Ignore file not found: '{explicit}'")
        return explicit

    candidate = root_dir / DEFAULT_IGNORE_FILE
    return candidate if candidate.is_file() else None


def load_ignore_spec(ignore_file: Optional[Path]) -> pathspec.PathSpec:
    """Loads gitignore-style rules and creates a PathSpec object; no file means no rules."""
    lines: List[str] = []

    if ignore_file is not None:
        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read ignore file '{ignore_file}': {e}") from e

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Error parsing ignore rules: {e}") from e


def is_ignored(spec: Optional[pathspec.PathSpec], rel_path: Path, is_directory: bool = False) -> bool:
    if spec is None:
        return False
    target = rel_path.as_posix()
    if is_directory:
        # "build/" style patterns only match with the trailing slash
        target += "/"
    return spec.match_file(target)
