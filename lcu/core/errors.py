#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Errors
Exceptions raised by client discovery and by raising request helpers
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """What caused a discovery error"""
    IO = "io"
    LOCK_FILE_NOT_FOUND = "lock_file_not_found"
    AUTH_TOKEN_NOT_FOUND = "auth_token_not_found"
    PORT_NOT_FOUND = "port_not_found"
    NOT_RUNNING = "not_running"


class LCUError(Exception):
    """Base class for all LCU Bridge errors"""


class ProcessInfoError(LCUError):
    """Failure while locating the client or reading its credentials

    Attributes:
        kind: ErrorKind describing the failure
        reason: Human readable message
        lockfile_error: True when the failure happened on the lockfile path
    """

    def __init__(self, kind: ErrorKind, reason: str, lockfile_error: bool = False):
        super().__init__(reason)
        self.kind = kind
        self.reason = reason
        self.lockfile_error = lockfile_error

    def is_lockfile_error(self) -> bool:
        return self.lockfile_error

    def is_io_error(self) -> bool:
        """Returns True if it's an IO error, False otherwise"""
        return self.kind is ErrorKind.IO

    def as_lockfile_error(self) -> "ProcessInfoError":
        """Copy of this error flagged as coming from the lockfile"""
        return ProcessInfoError(self.kind, self.reason, lockfile_error=True)

    @classmethod
    def from_os_error(cls, exc: OSError) -> "ProcessInfoError":
        return cls(ErrorKind.IO, str(exc), lockfile_error=True)

    @classmethod
    def from_decode_error(cls, exc: Optional[UnicodeDecodeError] = None) -> "ProcessInfoError":
        return cls(ErrorKind.IO, "stream did not contain valid UTF-8", lockfile_error=True)

    def __repr__(self) -> str:
        return f"ProcessInfoError(kind={self.kind.name}, reason={self.reason!r}, lockfile_error={self.lockfile_error})"


def not_running() -> ProcessInfoError:
    return ProcessInfoError(ErrorKind.NOT_RUNNING, "neither the game or client process were running")


def port_not_found(lockfile_error: bool = False) -> ProcessInfoError:
    return ProcessInfoError(ErrorKind.PORT_NOT_FOUND, "port was not found", lockfile_error)


def auth_not_found(lockfile_error: bool = False) -> ProcessInfoError:
    return ProcessInfoError(ErrorKind.AUTH_TOKEN_NOT_FOUND, "auth token was not found", lockfile_error)


def lock_file_not_found() -> ProcessInfoError:
    return ProcessInfoError(
        ErrorKind.LOCK_FILE_NOT_FOUND,
        "Did not follow the typical install structure",
        lockfile_error=True,
    )


class LCUNotConnectedError(LCUError):
    """The LCU could not be reached, even after re-discovering it"""

    def __init__(self, reason: str = "LCU is not connected"):
        super().__init__(reason)
        self.reason = reason


class LCURequestError(LCUError):
    """The LCU answered a request with a non-success status"""

    def __init__(self, status_code: int, method: str, path: str, body: str = ""):
        self.status_code = status_code
        self.method = method
        self.path = path
        self.body = body
        super().__init__(f"{method} {path} -> {status_code}: {body[:200]}")
