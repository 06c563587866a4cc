#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client Features Package
"""

from .game_data import LiveGameData
from .replay import LiveReplay

__all__ = ['LiveGameData', 'LiveReplay']
