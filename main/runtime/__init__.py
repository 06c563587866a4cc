#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Runtime subpackage
"""

from .commands import EXIT_OK, EXIT_UNAVAILABLE, run_live, run_request, run_status
from .loop import run_watch

__all__ = [
    'EXIT_OK',
    'EXIT_UNAVAILABLE',
    'run_live',
    'run_request',
    'run_status',
    'run_watch',
]
