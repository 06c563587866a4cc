#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Signal handlers for graceful shutdown
"""

import signal
import threading

from utils.core.logging import get_logger

log = get_logger()

# Set when a shutdown signal arrives; long-running commands poll it
stop_event = threading.Event()


def signal_handler(signum, frame):
    """Handle system signals for graceful shutdown"""
    if stop_event.is_set():
        return  # Prevent multiple shutdown attempts
    log.info(f"Received signal {signum}, shutting down...")
    stop_event.set()


def setup_signal_handlers() -> threading.Event:
    """Install SIGINT/SIGTERM handlers

    Returns:
        The shared stop event
    """
    stop_event.clear()
    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, signal_handler)
    return stop_event
