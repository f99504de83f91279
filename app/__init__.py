# -*- coding: utf-8 -*-
"""
Dynaform Application Core Module
"""

from .config import Config, Pages
from .styles import get_stylesheet

__all__ = ["Config", "Pages", "get_stylesheet"]
