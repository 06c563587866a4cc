#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
One-shot commands
status, request and live
"""

import argparse
import json
import sys
from typing import Any

from config import INTERESTING_PHASES, LIVE_CLIENT_DATA_PATH
from lcu import LCU, LCUNotConnectedError, LCURequestError
from live_client import LiveClient
from utils.core.logging import get_logger, log_status
from utils.core.settings import Settings

log = get_logger()

EXIT_OK = 0
EXIT_UNAVAILABLE = 1


def print_json(data: Any) -> None:
    """Write a JSON document to stdout"""
    sys.stdout.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
    sys.stdout.flush()


def run_status(settings: Settings) -> int:
    """Discover the client and print how it was found"""
    with LCU.from_settings(settings) as lcu:
        if not lcu.ok:
            log.error(f"LCU unavailable: {lcu.last_error}")
            return EXIT_UNAVAILABLE

        creds = lcu.credentials
        summoner = lcu.current_summoner or {}
        phase = lcu.phase
        if phase in INTERESTING_PHASES:
            log_status(log, "Gameflow phase", phase, "🎯")
        else:
            log.debug(f"Gameflow phase: {phase}")

        with LiveClient.from_settings(settings) as live:
            in_game = live.is_game_active()

        print_json({
            "port": creds.port,
            "source": creds.source,
            "pid": creds.pid,
            "lockfile": creds.lockfile_path,
            "base": lcu.base,
            "phase": phase,
            "summoner": summoner.get("gameName") or summoner.get("displayName"),
            "inGame": in_game,
        })
    return EXIT_OK


def run_request(settings: Settings, args: argparse.Namespace) -> int:
    """Send one request and print the decoded response"""
    body = None
    if args.data is not None:
        try:
            body = json.loads(args.data)
        except json.JSONDecodeError as e:
            log.error(f"--data is not valid JSON: {e}")
            return EXIT_UNAVAILABLE

    with LCU.from_settings(settings) as lcu:
        try:
            data = lcu.request_json(args.method, args.path, json_data=body)
        except LCUNotConnectedError as e:
            log.error(f"LCU unavailable: {e.reason}")
            return EXIT_UNAVAILABLE
        except LCURequestError as e:
            log.error(f"{e.method} {e.path} failed with HTTP {e.status_code}")
            if e.body:
                sys.stdout.write(e.body + "\n")
            return EXIT_UNAVAILABLE

    if data is not None:
        print_json(data)
    return EXIT_OK


def run_live(settings: Settings, args: argparse.Namespace) -> int:
    """Print an in-game endpoint

    Bare names resolve under /liveclientdata; anything starting with "/"
    is used as-is (e.g. "/replay/playback").
    """
    endpoint = args.endpoint
    path = endpoint if endpoint.startswith("/") else f"{LIVE_CLIENT_DATA_PATH}/{endpoint}"

    with LiveClient.from_settings(settings) as live:
        data = live.get(path)

    if data is None:
        log.error(f"In-game API unavailable ({path})")
        return EXIT_UNAVAILABLE
    print_json(data)
    return EXIT_OK
