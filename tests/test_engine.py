"""
Tests for the spdexer engine.

End-to-end runs over temporary Go trees: header replacement, rerun
stability, license switching, exclusion and fail-fast behaviour.
"""

import logging
import os
import stat
from unittest.mock import patch

import pytest

from spdexer import writer
from spdexer.engine import HeaderEngine
from spdexer.exceptions import FilesystemError, TemplateRenderError, UnknownLicenseError
from spdexer.licenses import render_license
from spdexer.types import DetectorConfig


@pytest.fixture
def engine(go_tree, data):
    return HeaderEngine("GPL30ORLATER", data, excludes=["vendor"], root=go_tree)


class TestApply:
    def test_adds_header_when_missing(self, engine, go_tree, gpl_header):
        engine.apply()
        assert (go_tree / "main.go").read_bytes() == gpl_header + b"package main\n\nfunc main() {}\n"

    def test_replaces_existing_header(self, engine, go_tree, gpl_header):
        engine.apply()
        content = (go_tree / "pkg" / "util.go").read_bytes()
        assert content == gpl_header + b"\npackage pkg\n\nfunc Util() {}\n"
        assert b"SPDX-License-Identifier: MIT" not in content

    def test_result(self, engine, go_tree):
        result = engine.apply()
        assert result.total == 3
        assert result.changed == 3
        assert result.license == "GPL30ORLATER"
        assert result.root == go_tree.resolve()
        by_name = {f.path.name: f for f in result.files}
        assert by_name["main.go"].boundary == 1
        assert by_name["util.go"].boundary == 2

    def test_idempotent(self, engine, go_tree):
        engine.apply()
        first = {p: p.read_bytes() for p in engine.collect()}
        result = engine.apply()
        second = {p: p.read_bytes() for p in engine.collect()}
        assert first == second
        assert result.changed == 0

    def test_switch_license(self, go_tree, data):
        HeaderEngine("MIT", data, root=go_tree).apply()
        HeaderEngine("APACHE20", data, root=go_tree).apply()
        content = (go_tree / "main.go").read_bytes()
        assert content == render_license("APACHE20", data) + b"package main\n\nfunc main() {}\n"

    def test_file_mode(self, engine, go_tree):
        target = go_tree / "main.go"
        os.chmod(target, 0o600)
        engine.apply()
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o644

    def test_no_declaration_keeps_content(self, tmp_path, data, gpl_header, caplog):
        (tmp_path / "gen.go").write_text("// generated\nfunc x() {}\n")
        with caplog.at_level(logging.WARNING, logger="spdexer.engine"):
            result = HeaderEngine("GPL30ORLATER", data, root=tmp_path).apply()
        assert (tmp_path / "gen.go").read_bytes() == gpl_header + b"// generated\nfunc x() {}\n"
        assert result.files[0].boundary == 0
        assert result.files[0].has_declaration is False
        assert "no declaration line" in caplog.text

    def test_byte_order_mark_dropped(self, tmp_path, data, gpl_header):
        (tmp_path / "bom.go").write_bytes(b"\xef\xbb\xbfpackage a\n")
        result = HeaderEngine("GPL30ORLATER", data, root=tmp_path).apply()
        assert (tmp_path / "bom.go").read_bytes() == gpl_header + b"package a\n"
        assert result.files[0].boundary == 1
        assert result.files[0].has_declaration is True

    def test_custom_detector_config(self, tmp_path, data, gpl_header):
        (tmp_path / "a.go").write_text("// (c) ACME\npackage a\n")
        config = DetectorConfig(declaration_prefix="package ", fragments=("ACME",))
        HeaderEngine("GPL30ORLATER", data, root=tmp_path, config=config).apply()
        assert (tmp_path / "a.go").read_bytes() == gpl_header + b"package a\n"


class TestDryRun:
    def test_nothing_written(self, engine, go_tree):
        before = (go_tree / "main.go").read_bytes()
        result = engine.apply(dry_run=True)
        assert (go_tree / "main.go").read_bytes() == before
        assert result.dry_run is True
        assert result.changed == 3


class TestExclusion:
    def test_excluded_file_not_enumerated(self, engine, go_tree):
        assert go_tree.resolve() / "vendor" / "lib" / "x.go" not in engine.collect()

    def test_excluded_file_never_read_or_written(self, engine, go_tree):
        vendored = go_tree / "vendor" / "lib" / "x.go"
        before = vendored.read_bytes()
        with patch("spdexer.engine.read_source", wraps=writer.read_source) as reader:
            engine.apply()
        read_paths = {call.args[0] for call in reader.call_args_list}
        assert vendored.resolve() not in read_paths
        assert vendored.read_bytes() == before


class TestErrors:
    def test_unknown_license_touches_nothing(self, go_tree, data):
        before = (go_tree / "main.go").read_bytes()
        with pytest.raises(UnknownLicenseError):
            HeaderEngine("NOPE", data, root=go_tree).apply()
        assert (go_tree / "main.go").read_bytes() == before

    def test_template_error_touches_nothing(self, go_tree, data):
        before = (go_tree / "main.go").read_bytes()
        registry = {"BROKEN": "// ${name} ${email}\n"}
        with patch("spdexer.licenses.LICENSES", registry):
            with pytest.raises(TemplateRenderError):
                HeaderEngine("BROKEN", data, root=go_tree).apply()
        assert (go_tree / "main.go").read_bytes() == before

    def test_missing_root(self, tmp_path, data):
        with pytest.raises(FilesystemError):
            HeaderEngine("MIT", data, root=tmp_path / "nope").apply()

    def test_fail_fast(self, tmp_path, data, gpl_header):
        (tmp_path / "a.go").write_text("package a\n")
        (tmp_path / "b.go").write_bytes(b"package b\n\xff\n")
        (tmp_path / "c.go").write_text("package c\n")
        with pytest.raises(FilesystemError):
            HeaderEngine("GPL30ORLATER", data, root=tmp_path).apply()
        assert (tmp_path / "a.go").read_bytes() == gpl_header + b"package a\n"
        assert (tmp_path / "c.go").read_bytes() == b"package c\n"
