#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Lockfile Detection and Parsing
Handles finding and parsing League Client lockfile
"""

import base64
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from config import (
    LCU_HOST,
    LCU_LOCKFILE_ENV,
    LCU_LOCKFILE_PATHS_LINUX,
    LCU_LOCKFILE_PATHS_MACOS,
    LCU_LOCKFILE_PATHS_WINDOWS,
    LCU_USERNAME,
)
from utils.core.logging import get_logger

from .errors import ProcessInfoError, ErrorKind, auth_not_found, port_not_found

log = get_logger()


@dataclass
class Lockfile:
    """Parsed lockfile data (``name:pid:port:password:protocol``)"""
    name: str
    pid: Optional[int]
    port: int
    password: str
    protocol: str

    @property
    def address(self) -> str:
        return f"{LCU_HOST}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"https://{self.address}"

    @property
    def auth_header(self) -> str:
        token = base64.b64encode(f"{LCU_USERNAME}:{self.password}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"


def parse_lockfile_text(content: str) -> Lockfile:
    """Parse lockfile contents

    The port is the 3rd field and the password the 4th; the other fields
    are informational and may be missing.

    Raises:
        ProcessInfoError: PORT_NOT_FOUND or AUTH_TOKEN_NOT_FOUND (lockfile errors)
    """
    fields = content.strip().split(":")
    if len(fields) < 3 or not fields[2]:
        raise port_not_found(lockfile_error=True)
    if len(fields) < 4:
        raise auth_not_found(lockfile_error=True)

    try:
        port = int(fields[2])
    except ValueError as e:
        raise ProcessInfoError(ErrorKind.PORT_NOT_FOUND, str(e)) from e

    try:
        pid = int(fields[1])
    except ValueError:
        pid = None

    return Lockfile(
        name=fields[0],
        pid=pid,
        port=port,
        password=fields[3],
        protocol=fields[4] if len(fields) > 4 else "https",
    )


def parse_lockfile(lockfile_path) -> Lockfile:
    """Read and parse a lockfile

    Args:
        lockfile_path: Path to lockfile

    Returns:
        Parsed Lockfile

    Raises:
        ProcessInfoError: IO kind if the file can't be read or isn't UTF-8,
            otherwise the parse errors of parse_lockfile_text
    """
    path = Path(lockfile_path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ProcessInfoError.from_os_error(e) from e

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProcessInfoError.from_decode_error(e) from e

    return parse_lockfile_text(content)


def common_lockfile_paths() -> List[Path]:
    """Typical install locations for the current platform"""
    if os.name == "nt":
        candidates = LCU_LOCKFILE_PATHS_WINDOWS
    else:
        candidates = LCU_LOCKFILE_PATHS_MACOS + LCU_LOCKFILE_PATHS_LINUX
    return [Path(p).expanduser() for p in candidates]


def find_lockfile(explicit: Optional[str] = None, search_common: bool = True) -> Optional[str]:
    """Find League Client lockfile using pathlib

    Args:
        explicit: Optional explicit path to lockfile
        search_common: Also look in the typical install locations

    Returns:
        Path to lockfile if found, None otherwise
    """
    if explicit:
        explicit_path = Path(explicit)
        if explicit_path.is_file():
            return str(explicit_path)
        log.debug(f"Explicit lockfile {explicit} does not exist")

    env = os.environ.get(LCU_LOCKFILE_ENV)
    if env:
        env_path = Path(env)
        if env_path.is_file():
            return str(env_path)
        log.debug(f"{LCU_LOCKFILE_ENV}={env} does not exist")

    if search_common:
        for p in common_lockfile_paths():
            if p.is_file():
                return str(p)

    return None
