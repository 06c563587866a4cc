#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU API Request Handler
Handles HTTP requests to LCU API
"""

import time
from typing import Any, Optional

import requests

from config import LCU_API_TIMEOUT_S, LCU_NOT_AVAILABLE_STATUSES
from utils.core.logging import get_logger

from .errors import LCUNotConnectedError, LCURequestError

log = get_logger()


class LCUAPI:
    """Handles HTTP requests to LCU API"""

    def __init__(self, connection, timeout: float = LCU_API_TIMEOUT_S):
        """Initialize API handler

        Args:
            connection: LCUConnection instance
            timeout: Default request timeout in seconds
        """
        self.connection = connection
        self.timeout = timeout

    def _ensure_connected(self) -> bool:
        if not self.connection.ok:
            self.connection.refresh_if_needed(since=self.connection.generation)
        return self.connection.ok

    def _send(self, method: str, path: str, json_data, params, timeout, headers) -> requests.Response:
        t0 = time.perf_counter()
        resp = self.connection.session.request(
            method,
            (self.connection.base or "") + path,
            json=json_data,
            params=params,
            timeout=timeout,
            headers=headers,
        )
        dt_ms = (time.perf_counter() - t0) * 1000.0
        log.debug(f"[LCU] {method} {path} -> {resp.status_code} in {dt_ms:.1f}ms")
        return resp

    def request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        params: Optional[dict] = None,
        timeout: Optional[float] = None,
        headers: Optional[dict] = None,
    ) -> Optional[requests.Response]:
        """Make a request to the LCU API

        A dropped connection triggers one forced re-discovery (the client may
        have restarted on a new port) followed by a single retry.

        Args:
            method: HTTP method
            path: API endpoint path, e.g. "/lol-summoner/v1/current-summoner"
            json_data: JSON-serializable body
            params: Query string parameters
            timeout: Request timeout in seconds
            headers: Optional extra headers to merge into the request

        Returns:
            Response object, or None if the LCU is unreachable
        """
        method = method.upper()
        if timeout is None:
            timeout = self.timeout
        if not self._ensure_connected():
            log.debug(f"[LCU] {method} {path} skipped: not connected")
            return None

        generation = self.connection.generation
        try:
            return self._send(method, path, json_data, params, timeout, headers)
        except requests.exceptions.RequestException as exc:
            log.warning(f"[LCU] {method} {path} failed ({type(exc).__name__}): {exc}")

        # Concurrent failures share one re-discovery
        self.connection.refresh_if_needed(force=True, since=generation)
        if not self.connection.ok:
            log.warning(f"[LCU] {method} {path} - connection lost after refresh")
            return None
        try:
            return self._send(method, path, json_data, params, timeout, headers)
        except requests.exceptions.RequestException as exc:
            log.warning(f"[LCU] {method}(retry) {path} also failed ({type(exc).__name__}): {exc}")
            return None

    def get(self, path: str, timeout: Optional[float] = None, params: Optional[dict] = None):
        """Make GET request to LCU API

        Returns:
            Decoded JSON, or None if unreachable, unavailable (404/405),
            empty or not JSON
        """
        r = self.request("GET", path, params=params, timeout=timeout)
        if r is None or r.status_code in LCU_NOT_AVAILABLE_STATUSES or r.status_code == 204:
            return None
        try:
            r.raise_for_status()
        except requests.exceptions.HTTPError as e:
            log.debug(f"[LCU] GET {path} returned error: {e}")
            return None
        try:
            return r.json()
        except ValueError as e:
            log.debug(f"Failed to decode JSON response: {e}")
            return None

    def post(self, path: str, json_data: Any = None, timeout: Optional[float] = None,
             params: Optional[dict] = None) -> Optional[requests.Response]:
        return self.request("POST", path, json_data=json_data, params=params, timeout=timeout)

    def put(self, path: str, json_data: Any = None, timeout: Optional[float] = None,
            headers: Optional[dict] = None) -> Optional[requests.Response]:
        return self.request("PUT", path, json_data=json_data, timeout=timeout, headers=headers)

    def patch(self, path: str, json_data: Any = None, timeout: Optional[float] = None) -> Optional[requests.Response]:
        return self.request("PATCH", path, json_data=json_data, timeout=timeout)

    def delete(self, path: str, timeout: Optional[float] = None) -> Optional[requests.Response]:
        return self.request("DELETE", path, timeout=timeout)

    def head(self, path: str, timeout: Optional[float] = None) -> Optional[requests.Response]:
        return self.request("HEAD", path, timeout=timeout)

    def request_json(self, method: str, path: str, json_data: Any = None,
                     params: Optional[dict] = None, timeout: Optional[float] = None):
        """Like request(), but raising instead of returning None

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            LCUNotConnectedError: the LCU could not be reached
            LCURequestError: the LCU answered with a non-2xx status
        """
        r = self.request(method, path, json_data=json_data, params=params, timeout=timeout)
        if r is None:
            reason = self.connection.last_error.reason if self.connection.last_error else "LCU is not reachable"
            raise LCUNotConnectedError(reason)
        if not 200 <= r.status_code < 300:
            raise LCURequestError(r.status_code, method.upper(), path, r.text)
        if r.status_code == 204 or not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise LCURequestError(r.status_code, method.upper(), path, f"invalid JSON: {e}") from e
