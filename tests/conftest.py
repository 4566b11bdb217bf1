"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def project_tree(tmp_path):
    """Create ``proj/{bin,obj,src}`` with a few files under *tmp_path*."""
    proj = tmp_path / "proj"
    (proj / "bin" / "Debug").mkdir(parents=True)
    (proj / "bin" / "Debug" / "app.dll").write_bytes(b"b" * 1000)
    (proj / "bin" / "app.pdb").write_bytes(b"p" * 500)
    (proj / "obj").mkdir()
    (proj / "obj" / "project.assets.json").write_bytes(b"o" * 300)
    (proj / "src").mkdir()
    (proj / "src" / "main.cs").write_bytes(b"s" * 200)
    return tmp_path
