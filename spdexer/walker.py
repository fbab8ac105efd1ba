"""spdexer file enumerator."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from spdexer.constants import SOURCE_SUFFIX
from spdexer.exceptions import FilesystemError
from spdexer.utils import normalize_prefix, relative_posix

logger = logging.getLogger("spdexer.walker")


def is_excluded(rel_path: str, excludes: Iterable[str]) -> bool:
    """True when ``rel_path`` starts with any exclude prefix."""
    return any(rel_path.startswith(normalize_prefix(prefix)) for prefix in excludes)


def iter_source_files(
    root: str | Path = ".",
    excludes: Iterable[str] = (),
    suffix: str = SOURCE_SUFFIX,
) -> list[Path]:
    """
    Collect absolute paths of files under ``root`` ending in ``suffix``.

    Exclude prefixes are matched against the path relative to ``root``
    (``vendor/`` matches ``vendor/lib/a.go``). Directories and files are
    visited in sorted order so runs are reproducible.
    """
    base = Path(root).expanduser()
    if not base.is_dir():
        raise FilesystemError(base, "not a directory")
    base = base.resolve()
    excludes = [e for e in excludes if e]

    def _raise(exc: OSError) -> None:
        raise FilesystemError(exc.filename or base, exc.strerror or str(exc)) from exc

    paths: list[Path] = []
    for dirpath, dirs, files in os.walk(base, onerror=_raise):
        dirs.sort()
        for name in sorted(files):
            if not name.endswith(suffix):
                continue
            fp = Path(dirpath) / name
            rel = relative_posix(fp, base)
            if is_excluded(rel, excludes):
                logger.debug("Excluded %s", rel)
                continue
            paths.append(fp)

    logger.info("Found %d %s files under %s", len(paths), suffix, base)
    return paths
