# src/hdrpack/models.py
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class Kind(Enum):
    HEADER = "header"
    SOURCE = "source"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FileRecord:
    """Immutable data class holding a classified, filtered file."""
    path: Path
    kind: Kind
    content: str


@dataclass
class Bundle:
    """Header and source text accumulated over one run."""
    header_text: str = ""
    source_text: str = ""
    records: List[FileRecord] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)

    def add(self, record: FileRecord) -> None:
        if record.kind is Kind.HEADER:
            # Keep each header's bytes intact, but never glue two files onto one line
            if self.header_text and not self.header_text.endswith("\n"):
                self.header_text += "\n"
            self.header_text += record.content
        elif record.kind is Kind.SOURCE:
            # A source reduced to nothing by include stripping adds no blank line
            if self.source_text and record.content:
                self.source_text += "\n"
            self.source_text += record.content
        else:
            raise ValueError(f"Cannot bundle unsupported file: {record.path}")
        self.records.append(record)

    def count(self, kind: Kind) -> int:
        return sum(1 for r in self.records if r.kind is kind)

    def render(self, impl_macro: str) -> str:
        return (
            f"{self.header_text}"
            f"\n#ifndef {impl_macro}\n"
            f"#define {impl_macro}\n"
            f"{self.source_text}"
            f"\n#endif\n"
        )
