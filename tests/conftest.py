"""
Pytest fixtures for LCU Bridge tests.

Nothing here talks to a real client: processes, HTTP sessions and
WebSockets are replaced with small fakes.
"""

import json
from pathlib import Path
from typing import Callable, List, Optional

import pytest
import requests

import lcu.core.lockfile as lockfile_module
import lcu.core.process_info as process_info_module


class FakeProcess:
    """Stand-in for psutil.Process as returned by process_iter(attrs=[...])"""

    def __init__(self, name: str, pid: int = 4242, cmdline: Optional[List[str]] = None,
                 exe: Optional[str] = None, cmdline_error: Optional[Exception] = None):
        self.info = {"name": name}
        self.pid = pid
        self._cmdline = cmdline or []
        self._exe = exe
        self._cmdline_error = cmdline_error

    def cmdline(self) -> List[str]:
        if self._cmdline_error is not None:
            raise self._cmdline_error
        return list(self._cmdline)

    def exe(self) -> Optional[str]:
        return self._exe


class FakeResponse:
    """Minimal requests.Response double"""

    def __init__(self, status_code: int = 200, payload=None, text: Optional[str] = None):
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Records requests and replays queued responses (or exceptions)"""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.headers = {}
        self.verify = None
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            return FakeResponse(200, {})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


class FakeConnection:
    """LCUConnection double for LCUAPI tests"""

    def __init__(self, session: FakeSession, ok: bool = True, base: str = "https://127.0.0.1:51234"):
        self.session = session
        self.ok = ok
        self.base = base if ok else None
        self.last_error = None
        self.generation = 0
        self.refreshes = []
        self.on_refresh: Optional[Callable[["FakeConnection", bool], None]] = None

    def refresh_if_needed(self, force: bool = False, since: Optional[int] = None):
        self.refreshes.append(force)
        if self.on_refresh is not None:
            self.on_refresh(self, force)


@pytest.fixture(autouse=True)
def isolated_discovery(monkeypatch):
    """No environment overrides and no real install locations"""
    monkeypatch.delenv("LCU_LOCKFILE", raising=False)
    monkeypatch.setattr(lockfile_module, "common_lockfile_paths", lambda: [])
    monkeypatch.setattr(process_info_module, "common_lockfile_paths", lambda: [])


@pytest.fixture
def write_lockfile(tmp_path) -> Callable[..., Path]:
    """Factory writing a lockfile into tmp_path"""

    def _write(content: str = "LeagueClient:1234:51234:s3cr3t:https", directory: Optional[Path] = None) -> Path:
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "lockfile"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_processes(monkeypatch) -> Callable[..., None]:
    """Install a fake process list for psutil.process_iter"""

    def _install(*procs: FakeProcess):
        monkeypatch.setattr(
            process_info_module.psutil,
            "process_iter",
            lambda attrs=None: iter(procs),
        )

    return _install


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def fake_connection(fake_session) -> FakeConnection:
    return FakeConnection(fake_session)
