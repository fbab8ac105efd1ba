"""spdexer engine: render once, then rewrite every source file in turn."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from spdexer.config import FILE_MODE
from spdexer.detector import default_config, detect_boundary, find_declaration_line
from spdexer.licenses import render_license
from spdexer.types import DetectorConfig, FileResult, RunResult, TemplateData
from spdexer.utils import split_lines
from spdexer.walker import iter_source_files
from spdexer.writer import assemble_file, read_source, write_file

logger = logging.getLogger("spdexer.engine")


class HeaderEngine:
    """Applies one license header to every Go file under a root directory.

    Files are handled one at a time. The first error aborts the run;
    files already rewritten are not rolled back.
    """

    def __init__(
        self,
        license_id: str,
        data: TemplateData,
        excludes: Iterable[str] = (),
        root: str | Path = ".",
        config: Optional[DetectorConfig] = None,
        file_mode: int = FILE_MODE,
    ):
        self.license_id = license_id
        self.data = data
        self.excludes = list(excludes)
        self.root = Path(root)
        self.config = config or default_config()
        self.file_mode = file_mode

    def render(self) -> bytes:
        """Render the header for this run."""
        return render_license(self.license_id, self.data)

    def collect(self) -> list[Path]:
        """List the files this run will rewrite."""
        return iter_source_files(self.root, self.excludes)

    def process_file(self, path: Path, header: bytes, dry_run: bool = False) -> FileResult:
        text = read_source(path)
        lines = split_lines(text)
        boundary = detect_boundary(text, self.config)
        content = assemble_file(header, lines, boundary)
        changed = content != text.encode("utf-8")

        has_decl = find_declaration_line(lines, self.config.declaration_prefix) > 0
        if not has_decl:
            logger.warning("%s: no declaration line, header prepended to whole file", path)

        if changed and not dry_run:
            write_file(path, content, self.file_mode)
        logger.info("%s: boundary=%d %s", path, boundary, "updated" if changed else "unchanged")
        return FileResult(path=path, boundary=boundary, changed=changed, has_declaration=has_decl)

    def apply(self, dry_run: bool = False) -> RunResult:
        """Run the whole pipeline and report what happened."""
        header = self.render()
        paths = self.collect()
        result = RunResult(license=self.license_id, root=self.root.resolve(), dry_run=dry_run)
        for path in paths:
            result.files.append(self.process_file(path, header, dry_run=dry_run))
        logger.info(
            "Processed %d files, %d updated%s",
            result.total,
            result.changed,
            " (dry run)" if dry_run else "",
        )
        return result
