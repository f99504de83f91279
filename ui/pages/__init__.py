# -*- coding: utf-8 -*-
"""
Dynaform UI Pages
"""

from .login_page import LoginPage

__all__ = [
    "LoginPage",
]
