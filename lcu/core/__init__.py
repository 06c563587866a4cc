#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Core Package
Contains discovery, connection, API, and lockfile functionality
"""

from .client import LCU
from .lcu_connection import LCUConnection, build_ssl_context
from .lcu_api import LCUAPI
from .lockfile import Lockfile, find_lockfile, parse_lockfile, parse_lockfile_text
from .process_info import (
    ClientCredentials,
    build_auth_header,
    discover_credentials,
    get_running_client,
)

__all__ = [
    'LCU',
    'LCUConnection',
    'LCUAPI',
    'Lockfile',
    'find_lockfile',
    'parse_lockfile',
    'parse_lockfile_text',
    'ClientCredentials',
    'build_auth_header',
    'build_ssl_context',
    'discover_credentials',
    'get_running_client',
]
