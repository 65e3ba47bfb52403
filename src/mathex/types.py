"""
Centralized type definitions for Mathex.

This module consolidates all type aliases and type definitions used throughout the codebase.
All modules should import types from this module for consistency.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple, TypedDict, Union

import numpy as np
import torch

if TYPE_CHECKING:
    from .matrix import Matrix


# ============================================================================
# Core Matrix Types
# ============================================================================

# A scalar accepted by the arithmetic operations
Number = Union[int, float]

# Raw payload handed to the constructor: a sequence of row sequences
RAW_MATRIX = Sequence[Sequence[Number]]

# Immutable storage held by a constructed Matrix
MATRIX_DATA = Tuple[Tuple[Number, ...], ...]

# (row_count, column_count)
SHAPE = Tuple[int, int]

# Device specification
DeviceType = Union[torch.device, str]  # e.g., "cpu", "cuda", torch.device("cuda:0")

# Dtype specification
DtypeType = Union[torch.dtype, str]  # e.g., "float32", torch.float32


# ============================================================================
# Validation Types
# ============================================================================

class ValidationError(TypedDict):
    """Validation error information."""
    code: str
    message: str
    location: Optional[str]


class ValidationResult(TypedDict):
    """Result of validation operation."""
    valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class MatrixResult(TypedDict):
    """
    Tagged outcome of a fallible matrix operation.

    Exactly one of ``matrix`` and ``error`` is set, according to ``ok``.
    """
    ok: bool
    matrix: Optional["Matrix"]
    error: Optional[ValidationError]


# ============================================================================
# Type Guards
# ============================================================================

def is_sequence(obj: Any) -> bool:
    """Type guard for a row container (list or tuple, never str)."""
    return isinstance(obj, (list, tuple))


def is_number(obj: Any) -> bool:
    """
    Type guard for numeric scalars.

    Accepts Python ints and floats, numpy integer/floating scalars and
    zero-dimensional torch tensors. Booleans and complex values are rejected.
    """
    if isinstance(obj, (bool, np.bool_)):
        return False
    if isinstance(obj, (int, float, np.integer, np.floating)):
        return True
    if isinstance(obj, torch.Tensor):
        return obj.ndim == 0 and obj.dtype != torch.bool and not obj.is_complex()
    return False


def as_python_number(value: Any) -> Number:
    """Unwrap numpy and torch scalars into the equivalent Python number."""
    if isinstance(value, (torch.Tensor, np.generic)):
        return value.item()
    return value


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Core types
    'Number',
    'RAW_MATRIX',
    'MATRIX_DATA',
    'SHAPE',
    'DeviceType',
    'DtypeType',

    # Validation types
    'ValidationError',
    'ValidationResult',
    'MatrixResult',

    # Type guards
    'is_sequence',
    'is_number',
    'as_python_number',
]
