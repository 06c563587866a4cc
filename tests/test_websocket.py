"""
Tests for WAMP framing, the subscription registry and the event thread.
"""

import json

import pytest

from threads.websocket.wamp import (
    LCUEvent,
    WampOpcode,
    json_api_event,
    parse_message,
    subscribe_message,
    unsubscribe_message,
)
from threads.websocket.websocket_event_handler import WebSocketEventHandler
from threads.websocket_thread import LCUWebSocket


class TestWamp:
    """Tests for frame encoding and decoding."""

    def test_json_api_event_topic(self):
        assert json_api_event("/lol-gameflow/v1/gameflow-phase") == "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"
        assert json_api_event("lol-lobby/v2/lobby") == "OnJsonApiEvent_lol-lobby_v2_lobby"

    def test_subscribe_frames(self):
        assert json.loads(subscribe_message("OnJsonApiEvent")) == [5, "OnJsonApiEvent"]
        assert json.loads(unsubscribe_message("OnJsonApiEvent")) == [6, "OnJsonApiEvent"]

    def test_parse_json_api_event(self):
        frame = json.dumps([8, "OnJsonApiEvent", {
            "data": "ChampSelect",
            "eventType": "Update",
            "uri": "/lol-gameflow/v1/gameflow-phase",
        }])

        event = parse_message(frame)

        assert event.topic == "OnJsonApiEvent"
        assert event.data == "ChampSelect"
        assert event.event_type == "Update"
        assert event.uri == "/lol-gameflow/v1/gameflow-phase"

    def test_event_positional_fields(self):
        event = LCUEvent("OnJsonApiEvent", "/lol-gameflow/v1/gameflow-phase", "Update", "Lobby")
        assert event.uri == "/lol-gameflow/v1/gameflow-phase"
        assert event.event_type == "Update"
        assert event.data == "Lobby"
        assert event.raw is None

    def test_parse_accepts_bytes(self):
        assert parse_message(b'[8, "OnLog", "line"]').data == "line"

    @pytest.mark.parametrize("msg", [
        "",
        "not json",
        '{"a": 1}',
        "[8, \"OnJsonApiEvent\"]",
        json.dumps([int(WampOpcode.WELCOME), "session", 1, "server"]),
        "[8, 5, {}]",
    ])
    def test_non_event_frames_are_ignored(self, msg):
        assert parse_message(msg) is None


class TestWebSocketEventHandler:
    """Tests for the topic registry and dispatch."""

    def test_dispatch_in_registration_order(self):
        handler = WebSocketEventHandler()
        seen = []
        handler.add("T", lambda e: seen.append(("first", e.data)))
        handler.add("T", lambda e: seen.append(("second", e.data)))
        handler.add("Other", lambda e: seen.append(("other", e.data)))

        handler.dispatch(LCUEvent(topic="T", data=1))

        assert seen == [("first", 1), ("second", 1)]

    def test_failing_callback_does_not_stop_dispatch(self):
        handler = WebSocketEventHandler()
        seen = []

        def _boom(event):
            raise RuntimeError("bad subscriber")

        handler.add("T", _boom)
        handler.add("T", lambda e: seen.append(e.data))

        handler.handle_message(None, '[8, "T", 42]')

        assert seen == [42]

    def test_remove_reports_when_topic_empties(self):
        handler = WebSocketEventHandler()
        h1 = handler.add("T", lambda e: None)
        h2 = handler.add("T", lambda e: None)

        assert handler.remove("T", h1) is False
        assert handler.has_topic("T")
        assert handler.remove("T", h2) is True
        assert not handler.has_topic("T")
        assert handler.remove("T", h2) is False

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            WebSocketEventHandler().add("T", "not callable")


class FakeWsConnection:
    """WebSocketConnection double capturing sent frames"""

    def __init__(self, connected=True):
        self.is_connected = connected
        self.sent = []
        self.stopped = False

    def send(self, text):
        self.sent.append(json.loads(text))
        return True

    def stop(self):
        self.stopped = True


class TestLCUWebSocket:
    """Tests for subscription frames sent by the event thread."""

    @pytest.fixture
    def ws(self):
        thread = LCUWebSocket(lcu=None)
        thread.connection = FakeWsConnection()
        return thread

    def test_first_subscriber_sends_subscribe(self, ws):
        ws.subscribe("OnJsonApiEvent", lambda e: None)
        ws.subscribe("OnJsonApiEvent", lambda e: None)

        assert ws.connection.sent == [[5, "OnJsonApiEvent"]]

    def test_last_unsubscribe_sends_unsubscribe(self, ws):
        path = "/lol-gameflow/v1/gameflow-phase"
        h1 = ws.subscribe_path(path, lambda e: None)
        h2 = ws.subscribe_path(path, lambda e: None)

        assert ws.unsubscribe_path(path, h1) is False
        assert ws.unsubscribe_path(path, h2) is True
        assert ws.connection.sent[-1] == [6, "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"]

    def test_no_frames_while_disconnected(self, ws):
        ws.connection.is_connected = False

        ws.subscribe("OnJsonApiEvent", lambda e: None)

        assert ws.connection.sent == []
        assert ws.event_handler.topics() == ["OnJsonApiEvent"]

    def test_stop_without_start(self, ws):
        ws.stop()
        assert ws.connection.stopped


class TestWebSocketConnectionCallbacks:
    """Tests for open/close handling without a real socket."""

    class _Socket:
        def __init__(self):
            self.sent = []

        def send(self, text):
            self.sent.append(json.loads(text))

    class _LCU:
        port = 51234

    def test_open_resubscribes_every_topic(self):
        from threads.websocket_connection import WebSocketConnection

        handler = WebSocketEventHandler()
        handler.add("OnJsonApiEvent", lambda e: None)
        handler.add("OnLog", lambda e: None)
        connected = []
        conn = WebSocketConnection(self._LCU(), handler, on_connect=lambda: connected.append(True))
        sock = self._Socket()

        conn._on_open(sock)

        assert conn.is_connected
        assert conn.connected_event.is_set()
        assert sock.sent == [[5, "OnJsonApiEvent"], [5, "OnLog"]]
        assert connected == [True]

    def test_close_fires_disconnect_once(self):
        from threads.websocket_connection import WebSocketConnection

        dropped = []
        conn = WebSocketConnection(self._LCU(), WebSocketEventHandler(), on_disconnect=lambda: dropped.append(True))
        conn._on_open(self._Socket())

        conn._on_close(None, 1000, "bye")
        conn._mark_disconnected()

        assert not conn.is_connected
        assert not conn.connected_event.is_set()
        assert dropped == [True]

    def test_messages_reach_subscribers(self):
        from threads.websocket_connection import WebSocketConnection

        handler = WebSocketEventHandler()
        seen = []
        handler.add("OnJsonApiEvent", seen.append)
        conn = WebSocketConnection(self._LCU(), handler)

        conn._on_message(None, json.dumps([8, "OnJsonApiEvent", {"uri": "/x", "eventType": "Delete", "data": None}]))

        assert len(seen) == 1
        assert seen[0].event_type == "Delete"


class TestWebSocketConnectionStop:
    """Tests for stop() racing the connect loop."""

    class _Socket:
        def __init__(self):
            self.sent = []
            self.closed = False

        def send(self, text):
            self.sent.append(text)

        def close(self):
            self.closed = True

    def test_stop_before_connect_skips_socket(self, monkeypatch):
        import threads.websocket_connection as connection_module
        from lcu.core.process_info import SOURCE_CMDLINE, ClientCredentials
        from threads.websocket_connection import WebSocketConnection

        created = []
        monkeypatch.setattr(connection_module.websocket, "WebSocketApp",
                            lambda *a, **kw: created.append(a) or self._Socket())

        class StoppingLCU:
            ok = True
            port = 51234
            credentials = ClientCredentials(port=51234, password="pw", source=SOURCE_CMDLINE)

            def refresh_if_needed(self, force=False):
                # stop() arrives while the loop is between refresh and connect
                conn.stop()

        conn = WebSocketConnection(StoppingLCU(), WebSocketEventHandler())

        conn.run()

        assert created == []
        assert conn.ws is None

    def test_open_after_stop_closes_socket(self):
        from threads.websocket_connection import WebSocketConnection

        class _LCU:
            port = 51234

        handler = WebSocketEventHandler()
        handler.add("OnJsonApiEvent", lambda e: None)
        conn = WebSocketConnection(_LCU(), handler)
        sock = self._Socket()
        conn.stop()

        conn._on_open(sock)

        assert sock.closed
        assert sock.sent == []
        assert not conn.is_connected
        assert not conn.connected_event.is_set()
