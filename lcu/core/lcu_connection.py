#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Connection Management
Handles connection initialization, refresh, and lifecycle
"""

import ssl
import threading
import time
from pathlib import Path
from typing import Optional, Union

import requests

from config import APP_USER_AGENT, CLIENT_PROCESS_NAME, GAME_PROCESS_NAME
from utils.core.logging import get_logger, log_section, log_success

from .errors import ProcessInfoError
from .process_info import ClientCredentials, discover_credentials

log = get_logger()


def build_ssl_context(verify: Union[bool, str]) -> ssl.SSLContext:
    """TLS context matching a requests-style ``verify`` value

    The local certificate is issued for a fixed name rather than 127.0.0.1,
    so hostname checking stays off even when a CA bundle is pinned.
    """
    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    ctx.check_hostname = False
    if verify and isinstance(verify, str):
        ctx.load_verify_locations(cafile=verify)
        ctx.verify_mode = ssl.CERT_REQUIRED
    else:
        ctx.verify_mode = ssl.CERT_NONE
    return ctx


class LCUConnection:
    """Manages LCU connection lifecycle"""

    def __init__(
        self,
        lockfile_path: Optional[str] = None,
        force_lock_file: bool = False,
        verify: Union[bool, str] = False,
        client_process_name: str = CLIENT_PROCESS_NAME,
        game_process_name: str = GAME_PROCESS_NAME,
    ):
        """Initialize LCU connection

        Args:
            lockfile_path: Optional explicit path to lockfile
            force_lock_file: Read the lockfile even when the client command line is available
            verify: False to accept the self-signed certificate, or a CA bundle path
            client_process_name: Client process name to look for
            game_process_name: Game process name to look for
        """
        self.ok = False
        self.credentials: Optional[ClientCredentials] = None
        self.last_error: Optional[ProcessInfoError] = None
        self.verify = verify
        self.force_lock_file = force_lock_file
        self.client_process_name = client_process_name
        self.game_process_name = game_process_name
        self._explicit_lockfile = lockfile_path
        self.lf_mtime = 0.0
        # Bumped on every (re)discovery; lets concurrent callers skip a refresh
        # that another thread already did
        self.generation = 0
        self._lock = threading.RLock()
        self.session = self._new_session()
        self._init_from_discovery()

    # Connection details
    @property
    def port(self) -> Optional[int]:
        return self.credentials.port if self.credentials else None

    @property
    def pw(self) -> Optional[str]:
        return self.credentials.password if self.credentials else None

    @property
    def base(self) -> Optional[str]:
        return self.credentials.base_url if self.credentials else None

    @property
    def lf_path(self) -> Optional[str]:
        return self.credentials.lockfile_path if self.credentials else None

    def ssl_context(self) -> ssl.SSLContext:
        """TLS context for non-requests transports (the WebSocket)"""
        return build_ssl_context(self.verify)

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        session.verify = self.verify
        session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": APP_USER_AGENT,
        })
        return session

    def _discover(self) -> ClientCredentials:
        return discover_credentials(
            lockfile_path=self._explicit_lockfile,
            force_lock_file=self.force_lock_file,
            client_process_name=self.client_process_name,
            game_process_name=self.game_process_name,
        )

    def _init_from_discovery(self):
        """Initialize from the running client or its lockfile"""
        with self._lock:
            try:
                credentials = self._discover()
            except ProcessInfoError as e:
                self.last_error = e
                self._disable(f"LCU unavailable: {e.reason}")
                return

            self._apply(credentials)
        log_section(log, "LCU Connected", "🔗", {
            "Port": credentials.port,
            "Source": credentials.source,
            "Status": "Ready",
        })

    def _apply(self, credentials: ClientCredentials):
        self.credentials = credentials
        self.last_error = None
        self.session.headers["Authorization"] = credentials.auth_header
        self.ok = True
        self.lf_mtime = self._lockfile_mtime()
        self.generation += 1

    def _lockfile_mtime(self) -> float:
        if not self.lf_path:
            return 0.0
        try:
            return Path(self.lf_path).stat().st_mtime
        except OSError as e:
            log.debug(f"Failed to get lockfile mtime: {e}")
            return time.time()

    def _disable(self, reason: str):
        """Disable LCU connection"""
        if self.ok:
            log.info(f"LCU disconnected: {reason}")
        else:
            log.debug(f"LCU disabled: {reason}")
        self.ok = False
        self.credentials = None
        self.lf_mtime = 0.0
        # Other threads may still be mid-request on the session, so only drop the auth
        self.session.headers.pop("Authorization", None)
        self.generation += 1

    def refresh_if_needed(self, force: bool = False, since: Optional[int] = None):
        """Re-run discovery when forced, disconnected, or the lockfile changed

        Args:
            force: Re-discover even if the connection looks healthy
            since: Generation the caller last saw; the refresh is skipped when
                another thread has already refreshed after it
        """
        with self._lock:
            if since is not None and self.generation != since:
                return
            if not force and self.ok and not self._lockfile_changed():
                return

            old = (self.port, self.pw)
            try:
                credentials = self._discover()
            except ProcessInfoError as e:
                self.last_error = e
                self._disable(f"LCU unavailable: {e.reason}")
                return

            was_ok = self.ok
            self._apply(credentials)
        if not was_ok or old != (credentials.port, credentials.password):
            log_success(log, f"LCU reloaded (port={credentials.port})", "🔄")

    def _lockfile_changed(self) -> bool:
        if not self.lf_path:
            return False
        path = Path(self.lf_path)
        if not path.is_file():
            return True
        try:
            mtime = path.stat().st_mtime
        except OSError:
            return True
        return bool(mtime and mtime != self.lf_mtime)

    def close(self):
        """Close the underlying HTTP session"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
