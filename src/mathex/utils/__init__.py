"""
Utilities package for Mathex.

Provides configuration constants shared by the validation, matrix and device modules.
"""

from .config import *
