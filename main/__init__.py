#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main entry point for the lcu-bridge command line
"""

import sys
from typing import Optional, Sequence

# Python version check
MIN_PYTHON = (3, 9)
if sys.version_info < MIN_PYTHON:
    raise RuntimeError(
        f"lcu-bridge requires Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]} or newer. "
        "Please upgrade your interpreter."
    )

from .setup.arguments import setup_arguments
from .setup.initialization import load_settings, setup_logging_and_cleanup
from .setup.signals import setup_signal_handlers
from .runtime.commands import run_live, run_request, run_status
from .runtime.loop import run_watch


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Program entry point

    Returns:
        0 on success, 1 when the client or game could not be reached
    """
    args = setup_arguments(argv)
    setup_logging_and_cleanup(args)
    settings = load_settings(args)

    if args.command == "status":
        return run_status(settings)
    if args.command == "request":
        return run_request(settings, args)
    if args.command == "live":
        return run_live(settings, args)
    if args.command == "watch":
        return run_watch(settings, args, setup_signal_handlers())
    raise ValueError(f"Unknown command {args.command!r}")
