"""
spdexer header boundary detector.

Finds the first line of real content in a Go source file so an old
license header can be cut away and a new one put in its place.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Sequence

from spdexer.constants import DECLARATION_PREFIX
from spdexer.licenses import license_fragments
from spdexer.types import DetectorConfig
from spdexer.utils import split_lines

logger = logging.getLogger("spdexer.detector")


@lru_cache(maxsize=1)
def default_config() -> DetectorConfig:
    """Detector settings built from the static license registry."""
    return DetectorConfig(
        declaration_prefix=DECLARATION_PREFIX,
        fragments=license_fragments(),
    )


def find_declaration_line(lines: Sequence[str], prefix: str = DECLARATION_PREFIX) -> int:
    """1-indexed number of the first line starting with ``prefix``, or 0."""
    for num, line in enumerate(lines, start=1):
        if line.startswith(prefix):
            return num
    return 0


def find_license_lines(
    lines: Sequence[str],
    decl_line: int,
    fragments: Iterable[str],
) -> list[int]:
    """
    Line numbers before ``decl_line`` that contain a known license fragment.

    Only lines 1 .. decl_line-1 are scanned. With ``decl_line`` of 0 the
    region is empty. The result is sorted ascending.
    """
    fragments = tuple(fragments)
    matches: list[int] = []
    for num, line in enumerate(lines[: max(decl_line - 1, 0)], start=1):
        if any(fragment in line for fragment in fragments):
            matches.append(num)
    matches.sort()
    return matches


def detect_boundary(text: str, config: DetectorConfig | None = None) -> int:
    """
    Return the 1-indexed line at which non-header content begins.

    Every line before the boundary belongs to the old header and is
    dropped; every line at or after it is kept.

    - Declaration on line 1: nothing precedes it, the boundary is 1.
    - License fragments found before the declaration: the boundary is
      the line after the *last* matching line. Unmatched lines between
      that line and the declaration are kept.
    - No fragments found: the boundary is the declaration line itself.
    - No declaration line at all: the boundary is 0, which keeps the
      whole file when assembled. Nothing is recognized as a header.
    """
    config = config or default_config()
    lines = split_lines(text)

    decl_line = find_declaration_line(lines, config.declaration_prefix)
    if decl_line == 1:
        return 1

    matches = find_license_lines(lines, decl_line, config.fragments)
    if matches:
        boundary = matches[-1] + 1
    else:
        boundary = decl_line

    logger.debug(
        "declaration=%d license_lines=%d boundary=%d", decl_line, len(matches), boundary
    )
    return boundary
