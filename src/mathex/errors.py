"""
Exception classes raised by the asserting matrix operations.

Fallible operations never raise these; they return the same diagnostic
inside a ``MatrixResult`` instead.
"""

from typing import Optional

from .utils.config import (
    CODE_ARITHMETIC_OVERFLOW,
    CODE_INVALID_MATRIX,
    CODE_INVALID_SCALAR,
    MSG_ARITHMETIC_OVERFLOW,
    MSG_INVALID_MATRIX,
    MSG_INVALID_SCALAR,
)


class MatrixError(Exception):
    """Base class for all Mathex errors."""

    default_message = ""
    default_code = ""

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.message = message if message is not None else self.default_message
        self.code = code if code is not None else self.default_code
        super().__init__(self.message)


class InvalidMatrixError(MatrixError, ValueError):
    """
    Raised when input cannot be (or is not) a valid matrix.

    Covers construction shape failures, dimension mismatches and arguments
    that were never built through the matrix constructor.
    """

    default_message = MSG_INVALID_MATRIX
    default_code = CODE_INVALID_MATRIX


class InvalidScalarError(MatrixError, ArithmeticError):
    """Raised when a scalar operand is not a number."""

    default_message = MSG_INVALID_SCALAR
    default_code = CODE_INVALID_SCALAR


class ArithmeticOverflowError(MatrixError, OverflowError):
    """Raised when an element-wise result cannot be represented by the host number type."""

    default_message = MSG_ARITHMETIC_OVERFLOW
    default_code = CODE_ARITHMETIC_OVERFLOW


__all__ = [
    'MatrixError',
    'InvalidMatrixError',
    'InvalidScalarError',
    'ArithmeticOverflowError',
]
