# src/hdrpack/core/content.py
import re
from pathlib import Path
from typing import Optional

from hdrpack.errors import ReadError
from hdrpack.models import FileRecord, Kind

# Quoted includes point inside the project; <...> system includes are kept
PROJECT_INCLUDE_RE = re.compile(r'#include\s+".*".*$')


def read_text(path: Path) -> str:
    """Reads a whole file as UTF-8, keeping line endings as stored on disk."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ReadError(path, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e


def strip_project_includes(text: str) -> str:
    """
    Drops every line carrying a quoted #include.
    Kept lines are joined with '\\n'; the last one gets no terminator.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    kept = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        if PROJECT_INCLUDE_RE.search(line):
            continue
        kept.append(line)
    return "\n".join(kept)


def filter_content(path: Path, kind: Kind) -> Optional[str]:
    """Returns the text a file contributes to the bundle, or None if unsupported."""
    if kind is Kind.UNSUPPORTED:
        return None

    text = read_text(path)
    if kind is Kind.SOURCE:
        return strip_project_includes(text)
    return text


def load_record(path: Path, kind: Kind) -> Optional[FileRecord]:
    content = filter_content(path, kind)
    if content is None:
        return None
    return FileRecord(path=path, kind=kind, content=content)
