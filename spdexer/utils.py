"""Line helpers shared by the detector and the writer."""

from __future__ import annotations

from pathlib import Path, PurePath


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``.

    A trailing newline terminates the last line instead of opening an
    empty one, so ``assemble_file`` does not grow the file on every run.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def relative_posix(path: str | Path, root: str | Path) -> str:
    """Path of ``path`` relative to ``root`` with forward slashes."""
    return PurePath(path).relative_to(root).as_posix()


def normalize_prefix(prefix: str) -> str:
    """Drop a leading ``./`` so ``./vendor`` and ``vendor`` match alike."""
    while prefix.startswith("./"):
        prefix = prefix[2:]
    return prefix
