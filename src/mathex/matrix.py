"""
Core API for creating and working with matrices.

Every operation comes in two forms sharing one implementation:

- ``try_*`` functions never raise for bad input; they return a
  ``MatrixResult`` with either the new matrix or the first failing
  ``ValidationError``.
- The plain-named functions return the Matrix directly and raise
  ``InvalidMatrixError`` (``InvalidScalarError`` for a non-numeric
  scalar, ``ArithmeticOverflowError`` for an unrepresentable result)
  carrying the same message.

A Matrix is immutable. Operations always return a new Matrix.
"""

import logging
from typing import Any, Iterable, Optional

import numpy as np
import torch

from .device import DeviceManager
from .errors import ArithmeticOverflowError, InvalidMatrixError, InvalidScalarError
from .types import (
    MATRIX_DATA,
    RAW_MATRIX,
    SHAPE,
    DeviceType,
    DtypeType,
    MatrixResult,
    Number,
    ValidationError,
    as_python_number,
    is_number,
)
from .utils.config import (
    CODE_ARITHMETIC_OVERFLOW,
    CODE_INVALID_MATRIX,
    CODE_INVALID_SCALAR,
    DEFAULT_DEVICE,
    MSG_ARITHMETIC_OVERFLOW,
    MSG_INVALID_MATRIX,
    MSG_INVALID_SCALAR,
)
from .validation import validate_equal_dimensions, validate_matrix_data


class Matrix:
    """
    A validated, rectangular, non-empty two-dimensional matrix.

    ``Matrix(data)`` runs the full validation pipeline and raises
    ``InvalidMatrixError`` on the first failing check, so every instance
    satisfies the shape invariants. Rows are stored as a tuple of tuples.
    """

    __slots__ = ("_data",)

    def __init__(self, data: RAW_MATRIX):
        result = validate_matrix_data(data)
        if not result["valid"]:
            error = result["errors"][0]
            raise InvalidMatrixError(error["message"], error["code"])
        object.__setattr__(self, "_data", _freeze(data))

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[Number]]) -> "Matrix":
        # Rows already satisfy the invariants: skip re-validation.
        matrix = object.__new__(cls)
        object.__setattr__(matrix, "_data", _freeze(rows))
        return matrix

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through _from_rows, never through setattr
        return type(self)._from_rows, (self._data,)

    @property
    def data(self) -> MATRIX_DATA:
        return self._data

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        # Uniform by construction
        return len(self._data[0])

    @property
    def shape(self) -> SHAPE:
        return self.rows, self.columns

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return f"Matrix({to_list(self)!r})"


def _freeze(rows: Iterable[Iterable[Number]]) -> MATRIX_DATA:
    return tuple(tuple(row) for row in rows)


def _ok(matrix: Matrix) -> MatrixResult:
    return {"ok": True, "matrix": matrix, "error": None}


def _error(code: str, message: str, location: Optional[str] = None) -> MatrixResult:
    error: ValidationError = {"code": code, "message": message, "location": location}
    return {"ok": False, "matrix": None, "error": error}


def _invalid_matrix() -> MatrixResult:
    return _error(CODE_INVALID_MATRIX, MSG_INVALID_MATRIX)


def _unwrap(result: MatrixResult) -> Matrix:
    """Return the matrix from a successful result, or raise the matching error."""
    if result["ok"]:
        return result["matrix"]

    error = result["error"]
    if error["code"] == CODE_INVALID_SCALAR:
        raise InvalidScalarError(error["message"], error["code"])
    if error["code"] == CODE_ARITHMETIC_OVERFLOW:
        raise ArithmeticOverflowError(error["message"], error["code"])
    raise InvalidMatrixError(error["message"], error["code"])


def is_matrix(obj: Any) -> bool:
    """Type guard for constructed Matrix values."""
    return isinstance(obj, Matrix)


# ============================================================================
# Construction
# ============================================================================

def try_new(data: RAW_MATRIX) -> MatrixResult:
    """
    Create a new matrix from a sequence of rows without raising.

    Returns ``{"ok": True, "matrix": ...}`` if the input passes validation,
    or ``{"ok": False, "error": ...}`` carrying the first failing check.
    """
    result = validate_matrix_data(data)
    if not result["valid"]:
        return {"ok": False, "matrix": None, "error": result["errors"][0]}
    return _ok(Matrix._from_rows(data))


def new(data: RAW_MATRIX) -> Matrix:
    """
    Create a new matrix from a sequence of rows.

    Raises:
        InvalidMatrixError: If validation fails
    """
    return _unwrap(try_new(data))


def to_list(matrix: Any) -> Any:
    """
    Extract the raw rows of a matrix as a fresh list of lists.

    Values that are not a Matrix are returned unchanged.
    """
    if not is_matrix(matrix):
        return matrix
    return [list(row) for row in matrix.data]


# ============================================================================
# Transformation
# ============================================================================

def try_transpose(matrix: Matrix) -> MatrixResult:
    """Flip a matrix over its diagonal, turning rows into columns, without raising."""
    if not is_matrix(matrix):
        return _invalid_matrix()
    return _ok(Matrix._from_rows(zip(*matrix.data)))


def transpose(matrix: Matrix) -> Matrix:
    """
    Return the transpose of a matrix.

    Raises:
        InvalidMatrixError: If the input is not a Matrix
    """
    return _unwrap(try_transpose(matrix))


# ============================================================================
# Arithmetic
# ============================================================================

def try_scalar_multiply(matrix: Matrix, scalar: Number) -> MatrixResult:
    """
    Multiply every element of a matrix by a scalar without raising.

    The matrix argument is checked first, so an invalid matrix is reported
    even when the scalar is also invalid.

    A result too large for the host number type (for example a huge int
    times a float) is reported as an overflow failure.
    """
    if not is_matrix(matrix):
        return _invalid_matrix()
    if not is_number(scalar):
        return _error(CODE_INVALID_SCALAR, MSG_INVALID_SCALAR)

    value = as_python_number(scalar)
    try:
        product = Matrix._from_rows((element * value for element in row) for row in matrix.data)
    except OverflowError:
        return _error(CODE_ARITHMETIC_OVERFLOW, MSG_ARITHMETIC_OVERFLOW)
    return _ok(product)


def scalar_multiply(matrix: Matrix, scalar: Number) -> Matrix:
    """
    Multiply every element of a matrix by a scalar.

    Raises:
        InvalidMatrixError: If the first argument is not a Matrix
        InvalidScalarError: If the scalar is not a number
        ArithmeticOverflowError: If a product cannot be represented
    """
    return _unwrap(try_scalar_multiply(matrix, scalar))


def try_add(matrix_one: Matrix, matrix_two: Matrix) -> MatrixResult:
    """
    Add two matrices element-wise without raising.

    Both arguments must be Matrix values before dimensions are compared.
    """
    if not (is_matrix(matrix_one) and is_matrix(matrix_two)):
        return _invalid_matrix()

    dimensions = validate_equal_dimensions(matrix_one, matrix_two)
    if not dimensions["valid"]:
        return {"ok": False, "matrix": None, "error": dimensions["errors"][0]}

    try:
        total = Matrix._from_rows(
            (a + b for a, b in zip(row_one, row_two))
            for row_one, row_two in zip(matrix_one.data, matrix_two.data)
        )
    except OverflowError:
        return _error(CODE_ARITHMETIC_OVERFLOW, MSG_ARITHMETIC_OVERFLOW)
    return _ok(total)


def add(matrix_one: Matrix, matrix_two: Matrix) -> Matrix:
    """
    Add two matrices element-wise.

    Raises:
        InvalidMatrixError: If either argument is not a Matrix, or the
            dimensions differ
        ArithmeticOverflowError: If a sum cannot be represented
    """
    return _unwrap(try_add(matrix_one, matrix_two))


# ============================================================================
# Tensor Interop
# ============================================================================

def to_tensor(
    matrix: Matrix,
    dtype: Optional[DtypeType] = None,
    device: DeviceType = DEFAULT_DEVICE
) -> torch.Tensor:
    """
    Convert a matrix into a 2D torch tensor.

    Args:
        matrix: Matrix to convert
        dtype: Target dtype (optional, inferred from the elements if None)
        device: Target device, "auto" picks the best available one

    Raises:
        InvalidMatrixError: If the input is not a Matrix
        ValueError: If device or dtype string is invalid
        TypeError: If device or dtype has the wrong type
    """
    if not is_matrix(matrix):
        raise InvalidMatrixError()

    device_obj, dtype_obj = DeviceManager.parse(device, dtype)
    logging.debug(f"to_tensor: shape={matrix.shape}, dtype={dtype_obj}, device={device_obj}")
    return torch.tensor(to_list(matrix), dtype=dtype_obj, device=device_obj)


def try_from_tensor(tensor: Any) -> MatrixResult:
    """
    Create a matrix from a 2D torch tensor or numpy array without raising.

    Arrays with zero rows or columns are rejected by the usual shape checks.
    """
    if not isinstance(tensor, (torch.Tensor, np.ndarray)):
        return _invalid_matrix()
    if tensor.ndim != 2:
        return _error(CODE_INVALID_MATRIX, f"Tensor must be 2-dimensional, got shape {tuple(tensor.shape)}")

    return try_new(tensor.tolist())


def from_tensor(tensor: Any) -> Matrix:
    """
    Create a matrix from a 2D torch tensor or numpy array.

    Raises:
        InvalidMatrixError: If the input is not a 2D array or fails validation
    """
    return _unwrap(try_from_tensor(tensor))


__all__ = [
    'Matrix',
    'is_matrix',
    'try_new',
    'new',
    'to_list',
    'try_transpose',
    'transpose',
    'try_scalar_multiply',
    'scalar_multiply',
    'try_add',
    'add',
    'to_tensor',
    'try_from_tensor',
    'from_tensor',
]
