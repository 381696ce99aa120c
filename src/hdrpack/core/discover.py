# src/hdrpack/core/discover.py
import os
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from hdrpack.core.ignore import is_ignored
from hdrpack.errors import DiscoveryError


def _relative(path: Path, base: Optional[Path]) -> Optional[Path]:
    if base is None:
        return None
    try:
        return path.relative_to(base)
    except ValueError:
        return None


def walk_root(root: Path, base: Optional[Path] = None, ignore_spec: Optional[pathspec.PathSpec] = None) -> List[Path]:
    """
    Walks one folder depth-first with sorted entries and returns its regular files.
    Unreadable sub-directories are skipped; a root that cannot be listed raises OSError.
    """
    top = os.fspath(root)
    root_errors: List[OSError] = []

    def on_error(err: OSError) -> None:
        # Only a failure on the root itself is fatal; anything deeper is skipped
        if err.filename == top:
            root_errors.append(err)

    files: List[Path] = []
    for current, dirs, names in os.walk(top, onerror=on_error):
        current_path = Path(current)

        # Sorting in place fixes the order os.walk descends in
        dirs.sort()
        for d in list(dirs):
            rel = _relative(current_path / d, base)
            if rel is not None and is_ignored(ignore_spec, rel, is_directory=True):
                dirs.remove(d)

        for name in sorted(names):
            file_path = current_path / name
            rel = _relative(file_path, base)
            if rel is not None and is_ignored(ignore_spec, rel):
                continue
            # Broken links, sockets and entries we cannot stat are skipped
            if not os.path.isfile(file_path):
                continue
            files.append(file_path)

    if root_errors:
        raise root_errors[0]
    return files


def discover(roots: Iterable[Path], base: Optional[Path] = None, ignore_spec: Optional[pathspec.PathSpec] = None) -> List[Path]:
    """
    Returns every regular file under each root, roots in the given order.
    All roots are walked even if one fails; the first failing root is then
    raised as DiscoveryError, with the files found elsewhere attached.
    """
    found: List[Path] = []
    first_error: Optional[DiscoveryError] = None

    for root in roots:
        root = Path(root)
        try:
            found.extend(walk_root(root, base, ignore_spec))
        except OSError as e:
            if first_error is None:
                first_error = DiscoveryError(root, e.strerror or str(e))
                first_error.__cause__ = e

    if first_error is not None:
        first_error.found = found
        raise first_error
    return found
