# src/hdrpack/core/classify.py
from pathlib import Path
from typing import Dict, Union

from hdrpack.config import DEFAULT_EXTENSIONS
from hdrpack.errors import ConfigError
from hdrpack.models import Kind


def classify(path: Union[str, Path], extensions: Dict[str, Kind] = DEFAULT_EXTENSIONS) -> Kind:
    """Maps a path to its Kind by exact, case-sensitive extension match."""
    return extensions.get(Path(path).suffix, Kind.UNSUPPORTED)


def parse_extensions(raw: str) -> Dict[str, Kind]:
    """
    Parses a table such as ".cpp=source,.hpp=header,.h=header".
    A leading dot is added when missing.
    """
    table: Dict[str, Kind] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        ext, sep, kind_name = entry.partition("=")
        ext, kind_name = ext.strip(), kind_name.strip().lower()
        if not sep or not ext or kind_name not in (Kind.HEADER.value, Kind.SOURCE.value):
            raise ConfigError(f"Invalid extension mapping '{entry}' (expected e.g. '.cpp=source')")
        if not ext.startswith("."):
            ext = "." + ext
        table[ext] = Kind(kind_name)

    if not table:
        raise ConfigError("Extension table is empty")
    return table
