# src/hdrpack/errors.py
from pathlib import Path
from typing import List, Optional


class HdrpackError(Exception):
    """Base class for every failure that aborts a bundling run."""


class ConfigError(HdrpackError):
    pass


class DiscoveryError(HdrpackError):
    """A root folder could not be walked at all."""

    def __init__(self, path: Path, reason: str, found: Optional[List[Path]] = None):
        self.path = path
        self.found = list(found or [])
        super().__init__(f"Cannot walk folder '{path}': {reason}")


class ReadError(HdrpackError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Couldn't read file '{path}': {reason}")


class WriteError(HdrpackError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot write destination file '{path}': {reason}")
