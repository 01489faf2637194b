# File: tests/conftest.py

import os
import sys
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


class RecordingSink:
    """Test-only diagnostic sink that keeps every report."""

    def __init__(self):
        self.reports = []

    def report(self, context, error):
        self.reports.append((context, error))

    @property
    def contexts(self):
        return [context for context, _ in self.reports]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def sample_tree(tmp_path):
    """
    Creates:
    root/
      a.txt, b.log, .secret.txt
      docs/notes.txt, docs/report1.csv
      docs/deep/inner.txt
      docs/deep/deeper/bottom.txt
      media/clip.txt
      .hidden/visible.txt
      .hidden/nested/buried.txt
    """
    root = tmp_path / "root"
    files = [
        "a.txt",
        "b.log",
        ".secret.txt",
        "docs/notes.txt",
        "docs/report1.csv",
        "docs/deep/inner.txt",
        "docs/deep/deeper/bottom.txt",
        "media/clip.txt",
        ".hidden/visible.txt",
        ".hidden/nested/buried.txt",
    ]
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {relative}")
    return root


@pytest.fixture
def deny_listing(monkeypatch):
    """
    Makes os.scandir raise PermissionError for chosen directories.
    Works as root too, where chmod would not block access.
    os.walk and LocalFileSystem both go through os.scandir.
    """
    real_scandir = os.scandir
    blocked = set()

    def fake_scandir(path="."):
        if os.fspath(path) in blocked:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def block(directory: Path):
        blocked.add(os.fspath(directory))

    return block


def relative_names(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]
