"""
Shared test fixtures: recording fake adapters and a patched subprocess.run.
"""
import subprocess
from typing import List, Optional, Tuple

import pytest

from unipac.managers import base_manager
from unipac.router import Backend


class FakeManager:
    """Stands in for a backend adapter and records every call."""

    def __init__(self, name: str, calls: List[Tuple], status: int = 0):
        self.name = name
        self.calls = calls
        self.status = status

    def _record(self, verb: str, arg: Optional[str] = None) -> int:
        self.calls.append((self.name, verb, arg))
        return self.status

    def search(self, query):
        return self._record('search', query)

    def list_updates(self):
        return self._record('list_updates')

    def upgrade(self):
        return self._record('upgrade')

    def install(self, package_name):
        return self._record('install', package_name)

    def remove(self, package_name):
        return self._record('remove', package_name)

    def find_installed(self, package_name):
        return self._record('find_installed', package_name)


@pytest.fixture
def calls() -> List[Tuple]:
    """Calls made on the fake managers, in order."""
    return []


@pytest.fixture
def managers(calls):
    return {backend: FakeManager(backend.value, calls) for backend in Backend}


class FakeRun:
    """Replacement for subprocess.run that records command lines."""

    def __init__(self):
        self.commands: List[List[str]] = []
        self.returncode = 0
        self.stdout = ''

    def __call__(self, cmd, **kwargs):
        self.commands.append(list(cmd))
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout)


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    """Patch subprocess.run and pretend every executable is on PATH."""
    runner = FakeRun()
    monkeypatch.setattr(base_manager.subprocess, 'run', runner)
    monkeypatch.setattr(base_manager.shutil, 'which', lambda cmd: f'/usr/bin/{cmd}')
    return runner
