#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line argument parsing
"""

import argparse
from typing import Optional, Sequence

from config import (
    APP_VERSION,
    DEFAULT_LIVE_ENDPOINT,
    DEFAULT_VERBOSE,
    DEFAULT_WATCH_TOPIC,
    DEFAULT_WRITE_LOGS,
    WS_PING_INTERVAL_DEFAULT,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lcu-bridge",
        description="Query and watch the local League Client (LCU) and in-game APIs",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # General arguments
    ap.add_argument("--verbose", action="store_true", default=DEFAULT_VERBOSE,
                    help="Enable verbose logging (developer mode - shows all technical details)")
    ap.add_argument("--debug", action="store_true", default=False,
                    help="Enable ultra-detailed debug logging (includes request traces)")
    ap.add_argument("--no-log-file", action="store_false", dest="write_logs", default=DEFAULT_WRITE_LOGS,
                    help="Do not write a log file")
    ap.add_argument("--config", type=str, default=None,
                    help="Path to config.ini (defaults to the user data directory)")

    # Connection arguments
    ap.add_argument("--lockfile", type=str, default=None,
                    help="Explicit lockfile path (overrides discovery)")
    ap.add_argument("--force-lockfile", action="store_true", default=None,
                    help="Read the lockfile even when the client command line is available")
    ap.add_argument("--ca-bundle", type=str, default=None,
                    help="CA bundle used to verify the local certificate instead of skipping verification")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="Discover the client and print connection details")

    req = sub.add_parser("request", help="Send one request to the LCU and print the JSON response")
    req.add_argument("method", type=str.upper,
                     choices=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"])
    req.add_argument("path", type=str, help='Endpoint path, e.g. "/lol-summoner/v1/current-summoner"')
    req.add_argument("--data", type=str, default=None, help="JSON request body")

    watch = sub.add_parser("watch", help="Subscribe to LCU WebSocket events and print them")
    watch.add_argument("topics", nargs="*", default=[],
                       help=f"WAMP topics (default: {DEFAULT_WATCH_TOPIC})")
    watch.add_argument("--path", action="append", default=[], dest="paths",
                       help="Endpoint path to watch (repeatable)")
    watch.add_argument("--ws-ping", type=int, default=WS_PING_INTERVAL_DEFAULT)

    live = sub.add_parser("live", help="Print an in-game (Live Client Data) endpoint")
    live.add_argument("endpoint", nargs="?", default=DEFAULT_LIVE_ENDPOINT,
                      help=f"Endpoint under /liveclientdata (default: {DEFAULT_LIVE_ENDPOINT})")

    return ap


def setup_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and return command line arguments"""
    return build_parser().parse_args(argv)
