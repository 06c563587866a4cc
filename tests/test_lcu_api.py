"""
Tests for LCU request handling and connection refresh.
"""

import pytest
import requests

import lcu.core.lcu_connection as connection_module
from lcu.core.errors import LCUNotConnectedError, LCURequestError, not_running
from lcu.core.lcu_api import LCUAPI
from lcu.core.lcu_connection import LCUConnection, build_ssl_context
from lcu.core.process_info import SOURCE_CMDLINE, SOURCE_LOCKFILE, ClientCredentials

from conftest import FakeResponse


class TestLCUAPIRequest:
    """Tests for request() and its single retry."""

    def test_builds_url_and_forwards_arguments(self, fake_connection, fake_session):
        api = LCUAPI(fake_connection, timeout=3.0)

        api.request("post", "/lol-lobby/v2/lobby", json_data={"queueId": 450}, params={"a": 1})

        call = fake_session.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == "https://127.0.0.1:51234/lol-lobby/v2/lobby"
        assert call["json"] == {"queueId": 450}
        assert call["params"] == {"a": 1}
        assert call["timeout"] == 3.0

    def test_not_connected_returns_none(self, fake_connection, fake_session):
        fake_connection.ok = False

        assert LCUAPI(fake_connection).request("GET", "/x") is None
        assert fake_connection.refreshes == [False]
        assert fake_session.calls == []

    def test_retries_once_after_forced_refresh(self, fake_connection, fake_session):
        fake_session.queue(requests.exceptions.ConnectionError("reset"), FakeResponse(200, {"ok": True}))

        resp = LCUAPI(fake_connection).request("GET", "/x")

        assert resp.status_code == 200
        assert fake_connection.refreshes == [True]
        assert len(fake_session.calls) == 2

    def test_gives_up_when_refresh_fails(self, fake_connection, fake_session):
        fake_session.queue(requests.exceptions.ConnectionError("reset"))

        def _lost(conn, force):
            conn.ok = False

        fake_connection.on_refresh = _lost

        assert LCUAPI(fake_connection).request("GET", "/x") is None
        assert len(fake_session.calls) == 1

    def test_retry_failure_returns_none(self, fake_connection, fake_session):
        fake_session.queue(requests.exceptions.Timeout("slow"), requests.exceptions.Timeout("slower"))
        assert LCUAPI(fake_connection).request("GET", "/x") is None


class TestLCUAPIGet:
    """Tests for get() decoding."""

    @pytest.mark.parametrize("status", [404, 405, 204, 500])
    def test_unavailable_statuses_return_none(self, fake_connection, fake_session, status):
        fake_session.queue(FakeResponse(status, {"message": "nope"}))
        assert LCUAPI(fake_connection).get("/x") is None

    def test_decodes_json(self, fake_connection, fake_session):
        fake_session.queue(FakeResponse(200, "ChampSelect"))
        assert LCUAPI(fake_connection).get("/lol-gameflow/v1/gameflow-phase") == "ChampSelect"

    def test_invalid_json_returns_none(self, fake_connection, fake_session):
        fake_session.queue(FakeResponse(200, text="<html>"))
        assert LCUAPI(fake_connection).get("/x") is None


class TestLCUAPIRequestJson:
    """Tests for the raising request_json()."""

    def test_not_connected_raises(self, fake_connection):
        fake_connection.ok = False
        fake_connection.last_error = not_running()

        with pytest.raises(LCUNotConnectedError) as exc:
            LCUAPI(fake_connection).request_json("GET", "/x")
        assert exc.value.reason == "neither the game or client process were running"

    def test_http_error_raises_with_status(self, fake_connection, fake_session):
        fake_session.queue(FakeResponse(404, {"message": "Not found"}))

        with pytest.raises(LCURequestError) as exc:
            LCUAPI(fake_connection).request_json("get", "/missing")
        assert exc.value.status_code == 404
        assert exc.value.method == "GET"
        assert "Not found" in exc.value.body

    def test_empty_body_is_none(self, fake_connection, fake_session):
        fake_session.queue(FakeResponse(204))
        assert LCUAPI(fake_connection).request_json("POST", "/x") is None

    def test_returns_json(self, fake_connection, fake_session):
        fake_session.queue(FakeResponse(200, {"gameName": "Teemo"}))
        assert LCUAPI(fake_connection).request_json("GET", "/x") == {"gameName": "Teemo"}


class TestLCUConnection:
    """Tests for discovery-backed connection state."""

    def test_successful_discovery_sets_auth(self, monkeypatch):
        creds = ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE)
        monkeypatch.setattr(connection_module, "discover_credentials", lambda **kw: creds)

        conn = LCUConnection()

        assert conn.ok
        assert conn.port == 51234
        assert conn.base == "https://127.0.0.1:51234"
        assert conn.session.headers["Authorization"] == creds.auth_header
        assert conn.session.verify is False

    def test_failed_discovery_keeps_error(self, monkeypatch):
        def _fail(**kw):
            raise not_running()

        monkeypatch.setattr(connection_module, "discover_credentials", _fail)

        conn = LCUConnection()

        assert not conn.ok
        assert conn.base is None
        assert conn.last_error.reason == "neither the game or client process were running"

    def test_refresh_picks_up_new_port(self, monkeypatch):
        found = [ClientCredentials(port=1000, password="a", source=SOURCE_CMDLINE)]
        monkeypatch.setattr(connection_module, "discover_credentials", lambda **kw: found[0])
        conn = LCUConnection()

        found[0] = ClientCredentials(port=2000, password="b", source=SOURCE_CMDLINE)
        conn.refresh_if_needed()
        assert conn.port == 1000

        conn.refresh_if_needed(force=True)
        assert conn.port == 2000
        assert conn.pw == "b"

    def test_lockfile_change_triggers_refresh(self, monkeypatch, write_lockfile):
        import os

        path = write_lockfile()
        calls = []

        def _discover(**kw):
            calls.append(kw)
            return ClientCredentials(port=51234, password="pw", source=SOURCE_LOCKFILE, lockfile_path=str(path))

        monkeypatch.setattr(connection_module, "discover_credentials", _discover)
        conn = LCUConnection()

        conn.refresh_if_needed()
        assert len(calls) == 1

        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))
        conn.refresh_if_needed()
        assert len(calls) == 2

    def test_verify_bundle_is_passed_to_session(self, monkeypatch, tmp_path):
        monkeypatch.setattr(connection_module, "discover_credentials",
                            lambda **kw: ClientCredentials(port=1, password="p", source=SOURCE_CMDLINE))
        conn = LCUConnection(verify=str(tmp_path / "riotgames.pem"))
        assert conn.session.verify == str(tmp_path / "riotgames.pem")


class TestBuildSslContext:
    """Tests for the WebSocket TLS context."""

    def test_no_verification_by_default(self):
        import ssl

        ctx = build_ssl_context(False)
        assert ctx.verify_mode == ssl.CERT_NONE
        assert ctx.check_hostname is False


class TestLCUFacade:
    """Tests for the LCU orchestrator wiring."""

    @pytest.fixture
    def lcu(self, monkeypatch, fake_session):
        from lcu.core.client import LCU

        monkeypatch.setattr(connection_module, "discover_credentials",
                            lambda **kw: ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE))
        client = LCU()
        client.connection.session = fake_session
        return client

    def test_typed_accessors_share_the_session(self, lcu, fake_session):
        fake_session.queue(
            FakeResponse(200, {"gameName": "Teemo", "tagLine": "EUW"}),
            FakeResponse(200, {"gameData": {"queue": {"id": 450, "gameMode": "ARAM", "mapId": 12}}}),
        )

        assert lcu.current_summoner["gameName"] == "Teemo"
        assert lcu.is_aram
        assert [c["url"] for c in fake_session.calls] == [
            "https://127.0.0.1:51234/lol-summoner/v1/current-summoner",
            "https://127.0.0.1:51234/lol-gameflow/v1/session",
        ]

    def test_from_settings(self, monkeypatch):
        from lcu.core.client import LCU
        from utils.core.settings import Settings

        seen = {}

        def _discover(**kw):
            seen.update(kw)
            return ClientCredentials(port=1, password="p", source=SOURCE_CMDLINE)

        monkeypatch.setattr(connection_module, "discover_credentials", _discover)

        client = LCU.from_settings(Settings(lockfile="/x/lockfile", force_lock_file=True, ca_bundle="ca.pem"))

        assert seen["lockfile_path"] == "/x/lockfile"
        assert seen["force_lock_file"] is True
        assert client.session.verify == "ca.pem"


class TestConcurrentRefresh:
    """Tests for re-discovery when many requests fail at once."""

    WORKERS = 8

    def test_dropped_connection_rediscovers_once(self, monkeypatch):
        import threading

        from lcu.core.client import LCU
        from lcu.features.lcu_batch import BatchRequest

        discoveries = []

        def _discover(**kw):
            discoveries.append(threading.current_thread().name)
            return ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE)

        monkeypatch.setattr(connection_module, "discover_credentials", _discover)
        client = LCU()
        assert len(discoveries) == 1

        # Every first attempt is in flight before any of them fails
        barrier = threading.Barrier(self.WORKERS, timeout=5)
        lock = threading.Lock()
        attempts = []

        class DroppedSession:
            headers = {}

            def request(self, method, url, **kwargs):
                with lock:
                    attempts.append(url)
                    first_round = len(attempts) <= TestConcurrentRefresh.WORKERS
                if first_round:
                    barrier.wait()
                raise requests.exceptions.ConnectionError("connection reset")

            def close(self):
                pass

        client.connection.session = DroppedSession()
        batch = [BatchRequest("GET", f"/x/{i}") for i in range(self.WORKERS)]

        results = client.batch(batch, max_workers=self.WORKERS)

        assert results == [None] * self.WORKERS
        assert len(discoveries) == 2
        assert len(attempts) == 2 * self.WORKERS

    def test_stale_generation_skips_refresh(self, monkeypatch):
        calls = []

        def _discover(**kw):
            calls.append(kw)
            return ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE)

        monkeypatch.setattr(connection_module, "discover_credentials", _discover)
        conn = LCUConnection()
        seen = conn.generation

        conn.refresh_if_needed(force=True, since=seen)
        conn.refresh_if_needed(force=True, since=seen)

        assert len(calls) == 2
        assert conn.generation == seen + 1

    def test_disable_keeps_session_usable(self, monkeypatch):
        creds = [ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE)]

        def _discover(**kw):
            if creds[0] is None:
                raise not_running()
            return creds[0]

        monkeypatch.setattr(connection_module, "discover_credentials", _discover)
        conn = LCUConnection()
        session = conn.session

        creds[0] = None
        conn.refresh_if_needed(force=True)

        assert not conn.ok
        assert conn.session is session
        assert "Authorization" not in session.headers
