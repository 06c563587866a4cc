#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client API Request Handler
HTTP requests to the in-game API on https://127.0.0.1:2999.
Only available while a game is in progress. No authentication required.
"""

import time
from typing import Any, Optional, Union

import requests

from config import (
    APP_USER_AGENT,
    LIVE_CLIENT_DATA_PATH,
    LIVE_CLIENT_HOST,
    LIVE_CLIENT_PORT,
    LIVE_CLIENT_PROBE_TIMEOUT_S,
    LIVE_CLIENT_TIMEOUT_S,
)
from utils.core.logging import get_logger

log = get_logger()


class LiveAPI:
    """Handles HTTP requests to the in-game API"""

    def __init__(
        self,
        host: str = LIVE_CLIENT_HOST,
        port: int = LIVE_CLIENT_PORT,
        verify: Union[bool, str] = False,
        timeout: float = LIVE_CLIENT_TIMEOUT_S,
    ):
        """
        Args:
            host: In-game API host
            port: In-game API port
            verify: False to accept the game's self-signed certificate, or a CA bundle path
            timeout: Default request timeout in seconds
        """
        self.base = f"https://{host}:{port}"
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = verify
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": APP_USER_AGENT,
        })

    def request(self, method: str, path: str, json_data: Any = None, params: Optional[dict] = None,
                timeout: Optional[float] = None) -> Optional[requests.Response]:
        """Send a request; None when no game is running"""
        if timeout is None:
            timeout = self.timeout
        try:
            t0 = time.perf_counter()
            resp = self.session.request(method, self.base + path, json=json_data, params=params, timeout=timeout)
            dt_ms = (time.perf_counter() - t0) * 1000.0
            log.trace(f"[Live] {method} {path} -> {resp.status_code} in {dt_ms:.1f}ms")
            return resp
        except requests.exceptions.ConnectionError:
            # Game not running or API not available yet
            log.trace(f"[Live] {method} {path} - game not reachable")
            return None
        except requests.exceptions.RequestException as e:
            log.debug(f"[Live] {method} {path} failed ({type(e).__name__}): {e}")
            return None

    def _json(self, method: str, path: str, resp: Optional[requests.Response]):
        if resp is None:
            return None
        if resp.status_code != 200:
            log.debug(f"[Live] {method} {path} returned {resp.status_code}")
            return None
        try:
            return resp.json()
        except ValueError as e:
            log.debug(f"[Live] {method} {path} returned invalid JSON: {e}")
            return None

    def get(self, path: str, params: Optional[dict] = None, timeout: Optional[float] = None):
        """GET path and return parsed JSON, or None"""
        return self._json("GET", path, self.request("GET", path, params=params, timeout=timeout))

    def post(self, path: str, json_data: Any = None, timeout: Optional[float] = None):
        """POST path and return parsed JSON, or None"""
        return self._json("POST", path, self.request("POST", path, json_data=json_data, timeout=timeout))

    def is_available(self) -> bool:
        """True when the in-game API answers at all (even while still loading)"""
        resp = self.request("GET", f"{LIVE_CLIENT_DATA_PATH}/gamestats", timeout=LIVE_CLIENT_PROBE_TIMEOUT_S)
        return resp is not None

    def close(self):
        self.session.close()
