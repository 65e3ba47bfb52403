"""
Pytest configuration and fixtures for Mathex tests

Puts the src directory on the import path so the suite runs from a checkout
without installing the package.
"""

import sys
import os

import pytest

# Add the src directory to the path to allow imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from mathex import new


@pytest.fixture
def square():
    """2x2 matrix [[1, 2], [3, 4]]."""
    return new([[1, 2], [3, 4]])


@pytest.fixture
def rectangle():
    """2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return new([[1, 2, 3], [4, 5, 6]])
