#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client package
In-game (Live Client Data) and Replay API access
"""

from .core.client import LiveClient
from .core.live_api import LiveAPI

__all__ = ['LiveClient', 'LiveAPI']
