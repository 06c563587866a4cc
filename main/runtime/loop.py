#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Watch loop
Prints LCU WebSocket events until interrupted
"""

import argparse
import threading

from config import DEFAULT_WATCH_TOPIC, WS_PING_TIMEOUT_DEFAULT
from lcu import LCU
from threads import LCUEvent, LCUWebSocket
from utils.core.logging import get_logger, log_section
from utils.core.settings import Settings

from .commands import EXIT_OK, print_json

log = get_logger()

# Poll interval while waiting for the stop flag
_WAIT_STEP_S = 0.5


def _print_event(event: LCUEvent) -> None:
    print_json({
        "topic": event.topic,
        "uri": event.uri,
        "eventType": event.event_type,
        "data": event.data,
    })


def run_watch(settings: Settings, args: argparse.Namespace, stop_event: threading.Event) -> int:
    """Subscribe to the requested topics and print events until ``stop_event`` is set

    Args:
        settings: Loaded settings
        args: Parsed ``watch`` arguments (topics, paths, ws_ping)
        stop_event: Set by signal handlers to end the loop

    Returns:
        Exit code
    """
    topics = list(args.topics)
    if not topics and not args.paths:
        topics = [DEFAULT_WATCH_TOPIC]

    # websocket-client requires ping_timeout < ping_interval
    ping_interval = max(0, args.ws_ping)
    ping_timeout = WS_PING_TIMEOUT_DEFAULT if ping_interval > WS_PING_TIMEOUT_DEFAULT else None

    lcu = LCU.from_settings(settings)
    if not lcu.ok:
        log.warning(f"LCU not available yet ({lcu.last_error}), waiting for the client...")

    ws = LCUWebSocket(
        lcu,
        ping_interval=ping_interval,
        ping_timeout=ping_timeout,
        on_disconnect=lambda: log.warning("WebSocket disconnected, reconnecting..."),
    )
    for topic in topics:
        ws.subscribe(topic, _print_event)
    for path in args.paths:
        ws.subscribe_path(path, _print_event)

    log_section(log, "Watching", "👀", {"Topics": ", ".join(topics + args.paths)})
    ws.start()
    try:
        while not stop_event.is_set():
            stop_event.wait(_WAIT_STEP_S)
    except KeyboardInterrupt:
        log_section(log, "Shutting Down (Keyboard Interrupt)", "⚠️")
    finally:
        ws.stop()
        lcu.close()
    return EXIT_OK
