#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Initialization setup (logging and settings)
"""

import argparse
import sys

from utils.core.logging import cleanup_logs, get_logger, log_section, setup_logging
from utils.core.settings import Settings

log = get_logger()


def setup_logging_and_cleanup(args: argparse.Namespace) -> None:
    """Setup logging and clean up old logs"""
    if args.write_logs:
        cleanup_logs()

    if args.debug:
        log_mode = 'debug'
    elif args.verbose:
        log_mode = 'verbose'
    else:
        log_mode = 'customer'

    # stdout carries command output
    setup_logging(log_mode, write_logs=args.write_logs, stream=sys.stderr)

    if log_mode != 'customer':
        log_section(log, "LCU Bridge Starting", "🚀", {
            "Command": args.command,
            "Log Mode": log_mode,
        })


def load_settings(args: argparse.Namespace) -> Settings:
    """Settings from config.ini with command line overrides applied"""
    settings = Settings.load(args.config)
    if args.lockfile:
        settings.lockfile = args.lockfile
    if args.force_lockfile is not None:
        settings.force_lock_file = args.force_lockfile
    if args.ca_bundle:
        settings.ca_bundle = args.ca_bundle
        settings.live_ca_bundle = args.ca_bundle
    return settings
