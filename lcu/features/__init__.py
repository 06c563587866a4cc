#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Features Package
Typed endpoint accessors, game mode detection, and batched requests
"""

from .lcu_properties import LCUProperties
from .lcu_game_mode import LCUGameMode
from .lcu_batch import BatchRequest, LCUBatch

__all__ = [
    'LCUProperties',
    'LCUGameMode',
    'BatchRequest',
    'LCUBatch',
]
