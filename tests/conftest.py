import pytest

from spdexer.licenses import render_license
from spdexer.types import TemplateData


@pytest.fixture
def data():
    """Project metadata used across tests."""
    return TemplateData(name="demo", author="Jane Doe", year="2024")


@pytest.fixture
def gpl_header(data):
    return render_license("GPL30ORLATER", data)


@pytest.fixture
def go_tree(tmp_path):
    """A small Go project with a vendored dependency and a non-Go file."""
    (tmp_path / "main.go").write_text("package main\n\nfunc main() {}\n")
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "util.go").write_text(
        "// SPDX-License-Identifier: MIT\n\npackage pkg\n\nfunc Util() {}\n"
    )
    (tmp_path / "pkg" / "util_test.go").write_text("package pkg\n")
    (tmp_path / "vendor" / "lib").mkdir(parents=True)
    (tmp_path / "vendor" / "lib" / "x.go").write_text("package lib\n")
    (tmp_path / "README.md").write_text("# demo\n")
    return tmp_path
