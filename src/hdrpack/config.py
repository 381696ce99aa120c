# src/hdrpack/config.py
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from hdrpack.errors import ConfigError
from hdrpack.models import Kind

DEFAULT_OUTPUT = "./example/include/tensor.hpp"
DEFAULT_IMPL_MACRO = "TENSOR_LIB_IMPL"

# Scanned in this order; the header and source buffers follow it
DEFAULT_FOLDERS: Tuple[str, ...] = ("src", "include")

DEFAULT_EXTENSIONS: Dict[str, Kind] = {
    ".cpp": Kind.SOURCE,
    ".hpp": Kind.HEADER,
}

DEFAULT_IGNORE_FILE = ".bundleignore"

MACRO_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class BundleConfig:
    """Everything one bundling run needs. Passed explicitly, never global."""
    root: Path = field(default_factory=Path.cwd)
    out: Path = Path(DEFAULT_OUTPUT)
    impl_macro: str = DEFAULT_IMPL_MACRO
    folders: Tuple[str, ...] = DEFAULT_FOLDERS
    extensions: Dict[str, Kind] = field(default_factory=lambda: dict(DEFAULT_EXTENSIONS))
    ignore_file: Optional[Path] = None

    def folder_paths(self) -> List[Path]:
        return [self.root / folder for folder in self.folders]

    def validate(self) -> None:
        if not MACRO_RE.match(self.impl_macro):
            raise ConfigError(f"Invalid implementation macro name '{self.impl_macro}'")
        if not self.folders:
            raise ConfigError("No folders to search")
        for ext, kind in self.extensions.items():
            if not ext.startswith(".") or len(ext) < 2:
                raise ConfigError(f"Invalid extension '{ext}' (expected e.g. '.cpp')")
            if kind is Kind.UNSUPPORTED:
                raise ConfigError(f"Extension '{ext}' cannot map to 'unsupported'")
