#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Client Process Discovery
Locates the running client (or game) process and extracts the LCU port and
auth token, either from the client's command line or from the lockfile next
to the executable.
"""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

import psutil

from config import (
    CLIENT_PROCESS_NAME,
    GAME_PROCESS_NAME,
    LCU_APP_PORT_ARG,
    LCU_AUTH_TOKEN_ARG,
    LCU_HOST,
    LCU_LOCKFILE_NAME,
    LCU_USERNAME,
)
from utils.core.logging import get_logger

from .errors import (
    ErrorKind,
    ProcessInfoError,
    auth_not_found,
    lock_file_not_found,
    not_running,
    port_not_found,
)
from .lockfile import common_lockfile_paths, find_lockfile, parse_lockfile

log = get_logger()

SOURCE_CMDLINE = "cmdline"
SOURCE_LOCKFILE = "lockfile"


def build_auth_header(password: str) -> str:
    """Basic auth header value for the LCU (``riot:<password>``, base64)"""
    token = base64.b64encode(f"{LCU_USERNAME}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass(frozen=True)
class ClientCredentials:
    """Everything needed to talk to a running LCU"""
    port: int
    password: str
    source: str
    pid: Optional[int] = None
    lockfile_path: Optional[str] = None

    @property
    def auth_header(self) -> str:
        return build_auth_header(self.password)

    @property
    def address(self) -> str:
        return f"{LCU_HOST}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"https://{self.address}"

    @property
    def ws_url(self) -> str:
        return f"wss://{self.address}/"


def _find_process(client_process_name: str, game_process_name: str) -> Tuple[psutil.Process, bool]:
    """First process named like the client or the game, and whether it's the client"""
    for proc in psutil.process_iter(attrs=["name"]):
        name = proc.info.get("name") or ""
        if name == client_process_name:
            return proc, True
        if name == game_process_name:
            return proc, False
    raise not_running()


def parse_cmdline(args: Iterable[str]) -> Tuple[int, str]:
    """Extract (port, auth token) from the client's command-line arguments

    The first occurrence of each argument wins.

    Raises:
        ProcessInfoError: PORT_NOT_FOUND or AUTH_TOKEN_NOT_FOUND
    """
    port = None
    auth = None
    for arg in args:
        if auth is None and arg.startswith(LCU_AUTH_TOKEN_ARG):
            auth = arg[len(LCU_AUTH_TOKEN_ARG):]
        if port is None and arg.startswith(LCU_APP_PORT_ARG):
            port = arg[len(LCU_APP_PORT_ARG):]
        if auth is not None and port is not None:
            break

    if port is None:
        raise port_not_found()
    if auth is None:
        raise auth_not_found()
    return _parse_port(port), auth


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ProcessInfoError(ErrorKind.PORT_NOT_FOUND, str(e)) from e


def lockfile_for_executable(exe: Optional[str], is_client: bool) -> Path:
    """Lockfile location relative to the client or game executable

    The client keeps it in its own directory; the game executable lives one
    directory deeper (``Game/``).

    Raises:
        ProcessInfoError: LOCK_FILE_NOT_FOUND if the path can't be walked back
    """
    if not exe:
        raise lock_file_not_found()

    directory = Path(exe).parent
    if not is_client:
        if directory.parent == directory:
            raise lock_file_not_found()
        directory = directory.parent
    return directory / LCU_LOCKFILE_NAME


def get_running_client(
    client_process_name: str = CLIENT_PROCESS_NAME,
    game_process_name: str = GAME_PROCESS_NAME,
    force_lock_file: bool = False,
) -> ClientCredentials:
    """Gets the port and auth for the client via the running process

    The client's command line carries both values, which avoids touching the
    lockfile at all. The lockfile is used when ``force_lock_file`` is set or
    when only the game process is running.

    Raises:
        ProcessInfoError: NOT_RUNNING if neither process exists; PORT_NOT_FOUND,
            AUTH_TOKEN_NOT_FOUND, LOCK_FILE_NOT_FOUND or IO otherwise.
    """
    proc, is_client = _find_process(client_process_name, game_process_name)
    log.debug(f"[discovery] found {'client' if is_client else 'game'} process (pid={proc.pid})")

    if is_client and not force_lock_file:
        try:
            cmdline = proc.cmdline()
        except psutil.AccessDenied as e:
            raise ProcessInfoError(ErrorKind.IO, f"cannot read client command line: {e}") from e
        except psutil.NoSuchProcess as e:
            raise not_running() from e
        port, auth = parse_cmdline(cmdline)
        return ClientCredentials(port=port, password=auth, source=SOURCE_CMDLINE, pid=proc.pid)

    try:
        exe = proc.exe()
    except psutil.NoSuchProcess as e:
        raise not_running() from e
    except psutil.AccessDenied:
        exe = None

    lockfile_path = lockfile_for_executable(exe, is_client)
    lockfile = parse_lockfile(lockfile_path)
    return ClientCredentials(
        port=lockfile.port,
        password=lockfile.password,
        source=SOURCE_LOCKFILE,
        pid=lockfile.pid,
        lockfile_path=str(lockfile_path),
    )


def credentials_from_lockfile(lockfile_path) -> ClientCredentials:
    lockfile = parse_lockfile(lockfile_path)
    return ClientCredentials(
        port=lockfile.port,
        password=lockfile.password,
        source=SOURCE_LOCKFILE,
        pid=lockfile.pid,
        lockfile_path=str(lockfile_path),
    )


def discover_credentials(
    lockfile_path: Optional[str] = None,
    force_lock_file: bool = False,
    client_process_name: str = CLIENT_PROCESS_NAME,
    game_process_name: str = GAME_PROCESS_NAME,
) -> ClientCredentials:
    """Find the LCU credentials using every strategy in order

    1. explicit lockfile path, then the LCU_LOCKFILE environment variable
    2. the running client/game process
    3. lockfiles in the typical install locations (only when 2 failed on
       the lockfile path or found nothing running)

    Raises:
        ProcessInfoError: the error from step 2 if nothing worked
    """
    explicit = find_lockfile(lockfile_path, search_common=False)
    if explicit:
        return credentials_from_lockfile(explicit)

    try:
        return get_running_client(client_process_name, game_process_name, force_lock_file)
    except ProcessInfoError as e:
        if not (e.is_lockfile_error() or e.kind is ErrorKind.NOT_RUNNING):
            raise
        for candidate in common_lockfile_paths():
            if candidate.is_file():
                log.debug(f"[discovery] falling back to {candidate} ({e.reason})")
                return credentials_from_lockfile(candidate)
        raise
