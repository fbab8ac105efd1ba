"""spdexer header writer: assembles and persists rewritten files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from spdexer.config import FILE_MODE
from spdexer.exceptions import FilesystemError

logger = logging.getLogger("spdexer.writer")


def assemble_file(header: bytes, lines: Sequence[str], boundary: int) -> bytes:
    """
    Build new file content: ``header`` followed by every line whose
    1-indexed position is at or after ``boundary``, each ending in a
    newline. A boundary of 0 or 1 keeps every line.
    """
    kept = lines[max(boundary - 1, 0):]
    body = "".join(line + "\n" for line in kept)
    return header + body.encode("utf-8")


def read_source(path: str | Path) -> str:
    """Read a source file as UTF-8 text, dropping a leading byte-order mark."""
    try:
        return Path(path).read_bytes().decode("utf-8-sig")
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FilesystemError(path, f"not valid UTF-8 ({exc.reason})") from exc


def write_file(path: str | Path, content: bytes, mode: int = FILE_MODE) -> None:
    """Overwrite ``path`` with ``content`` and set its permission bits."""
    p = Path(path)
    try:
        p.write_bytes(content)
        os.chmod(p, mode)
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc
    logger.debug("Wrote %d bytes to %s (mode %o)", len(content), p, mode)
