#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client Core Package
"""

from .client import LiveClient
from .live_api import LiveAPI

__all__ = ['LiveClient', 'LiveAPI']
