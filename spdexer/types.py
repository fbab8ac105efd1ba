"""Data types for spdexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from spdexer.constants import PLACEHOLDERS


@dataclass(frozen=True)
class TemplateData:
    """Project metadata substituted into the license template."""

    name: str
    author: str
    year: str

    def as_mapping(self) -> dict[str, str]:
        return {key: getattr(self, key) for key in PLACEHOLDERS}


@dataclass(frozen=True)
class DetectorConfig:
    """What the boundary detector looks for.

    ``fragments`` is the full set of license text known to the registry;
    a line containing any one of them is treated as part of an old header.
    """

    declaration_prefix: str
    fragments: tuple[str, ...]


@dataclass
class FileResult:
    """Outcome for a single rewritten file."""

    path: Path
    boundary: int
    changed: bool
    has_declaration: bool = True


@dataclass
class RunResult:
    """Outcome of a whole run."""

    license: str
    root: Path
    files: list = field(default_factory=list)  # List[FileResult]
    dry_run: bool = False

    @property
    def total(self) -> int:
        return len(self.files)

    @property
    def changed(self) -> int:
        return sum(1 for f in self.files if f.changed)
