#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Allow ``python -m main``
"""

import sys

from . import main

sys.exit(main())
