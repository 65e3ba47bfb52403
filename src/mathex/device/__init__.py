"""
Device management module for Mathex.

Provides device and dtype handling for tensor export.
"""

from .manager import DeviceManager

__all__ = ['DeviceManager']
