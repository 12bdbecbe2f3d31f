# File: tests/conftest.py

import os
import sys
import subprocess
import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


class FakeRun:
    """
    Stand-in for subprocess.run.
    Records every command and replays queued responses in order.
    """

    def __init__(self):
        self.calls = []
        self._responses = []

    def queue(self, stdout="", stderr="", returncode=0, exc=None):
        self._responses.append((stdout, stderr, returncode, exc))
        return self

    def __call__(self, cmd, check=False, **kwargs):
        self.calls.append(list(cmd))
        stdout, stderr, returncode, exc = self._responses.pop(0) if self._responses else ("", "", 0, None)

        if exc is not None:
            raise exc
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)


@pytest.fixture
def fake_run(monkeypatch):
    """
    Replaces subprocess.run so no ffprobe/ffmpeg process is ever spawned.
    """
    runner = FakeRun()
    monkeypatch.setattr(subprocess, "run", runner)
    return runner


@pytest.fixture
def source_video(tmp_path):
    """
    A placeholder input file. Content is irrelevant once subprocess.run is faked.
    """
    path = tmp_path / "holiday.mp4"
    path.write_bytes(b"FAKE_VIDEO")
    return path
