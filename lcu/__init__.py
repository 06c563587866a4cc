#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API package
Main entry point for LCU functionality
"""

from .core.client import LCU
from .core.errors import (
    ErrorKind,
    LCUError,
    LCUNotConnectedError,
    LCURequestError,
    ProcessInfoError,
)
from .core.lockfile import Lockfile, find_lockfile, parse_lockfile
from .core.process_info import ClientCredentials, discover_credentials, get_running_client
from .features.lcu_batch import BatchRequest

__all__ = [
    'LCU',
    'Lockfile',
    'find_lockfile',
    'parse_lockfile',
    'ClientCredentials',
    'discover_credentials',
    'get_running_client',
    'BatchRequest',
    'ErrorKind',
    'LCUError',
    'LCUNotConnectedError',
    'LCURequestError',
    'ProcessInfoError',
]
