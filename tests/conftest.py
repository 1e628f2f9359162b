from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    root = tmp_path / "template"
    (root / "docs" / "decisions").mkdir(parents=True)
    (root / "context").mkdir()
    (root / "scaffold" / "empty" / "deeper").mkdir(parents=True)

    (root / "README.md").write_text("# Project\n", encoding="utf-8")
    (root / "AGENTS.md").write_text("Read context/ first.\n", encoding="utf-8")
    (root / "docs" / "architecture.md").write_text("## Components\n", encoding="utf-8")
    (root / "docs" / "decisions" / "0001.md").write_text("# 0001\n", encoding="utf-8")
    (root / "context" / "logo.bin").write_bytes(bytes(range(256)) + b"\x00\r\n\xff")
    return root


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    target = tmp_path / "work"
    target.mkdir()
    monkeypatch.chdir(target)
    return target
