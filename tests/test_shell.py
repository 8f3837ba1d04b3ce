"""Tests for lightbox.shell module."""

import subprocess

import pytest

from lightbox import shell


@pytest.fixture
def posix(monkeypatch):
    monkeypatch.setattr(shell.sys, "platform", "linux")


class FakeRun:
    def __init__(self, returncode=0, error=None):
        self.returncode = returncode
        self.error = error
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(args, self.returncode)


class TestOpenPath:
    def test_missing_path(self, tmp_path):
        assert shell.open_path(tmp_path / "gone") is False

    def test_success(self, tmp_path, posix, monkeypatch):
        run = FakeRun()
        monkeypatch.setattr(shell, "find_opener", lambda: "/usr/bin/xdg-open")
        monkeypatch.setattr(shell.subprocess, "run", run)
        assert shell.open_path(tmp_path) is True
        assert run.calls == [["/usr/bin/xdg-open", str(tmp_path)]]

    def test_nonzero_exit(self, tmp_path, posix, monkeypatch):
        monkeypatch.setattr(shell, "find_opener", lambda: "/usr/bin/xdg-open")
        monkeypatch.setattr(shell.subprocess, "run", FakeRun(returncode=4))
        assert shell.open_path(tmp_path) is False

    def test_no_opener(self, tmp_path, posix, monkeypatch):
        monkeypatch.setattr(shell, "find_opener", lambda: None)
        assert shell.open_path(tmp_path) is False

    def test_opener_error(self, tmp_path, posix, monkeypatch):
        monkeypatch.setattr(shell, "find_opener", lambda: "/usr/bin/xdg-open")
        monkeypatch.setattr(shell.subprocess, "run", FakeRun(error=OSError("boom")))
        assert shell.open_path(tmp_path) is False


class TestFindOpener:
    def test_macos_uses_open(self, monkeypatch):
        monkeypatch.setattr(shell.sys, "platform", "darwin")
        monkeypatch.setattr(shell.shutil, "which", lambda name: f"/usr/bin/{name}")
        assert shell.find_opener() == "/usr/bin/open"

    def test_linux_uses_xdg_open(self, posix, monkeypatch):
        monkeypatch.setattr(shell.shutil, "which", lambda name: f"/usr/bin/{name}")
        assert shell.find_opener() == "/usr/bin/xdg-open"
