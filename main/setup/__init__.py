#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup subpackage
"""

from .arguments import build_parser, setup_arguments
from .initialization import load_settings, setup_logging_and_cleanup
from .signals import setup_signal_handlers

__all__ = [
    'build_parser',
    'setup_arguments',
    'load_settings',
    'setup_logging_and_cleanup',
    'setup_signal_handlers',
]
