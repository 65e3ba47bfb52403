"""
Mathex: validated two-dimensional matrices.

Re-exports every public operation so callers can use ``mathex.<name>``.
"""

from .errors import ArithmeticOverflowError, InvalidMatrixError, InvalidScalarError, MatrixError
from .matrix import (
    Matrix,
    add,
    from_tensor,
    is_matrix,
    new,
    scalar_multiply,
    to_list,
    to_tensor,
    transpose,
    try_add,
    try_from_tensor,
    try_new,
    try_scalar_multiply,
    try_transpose,
)
from .types import MatrixResult, ValidationError, ValidationResult, is_number
from .validation import validate_equal_dimensions, validate_matrix_data

version_code = [0, 1, 0]
__version__ = ".".join(str(part) for part in version_code)

__all__ = [
    'Matrix',
    'MatrixError',
    'InvalidMatrixError',
    'InvalidScalarError',
    'ArithmeticOverflowError',
    'MatrixResult',
    'ValidationError',
    'ValidationResult',
    'is_matrix',
    'is_number',
    'new',
    'try_new',
    'to_list',
    'transpose',
    'try_transpose',
    'scalar_multiply',
    'try_scalar_multiply',
    'add',
    'try_add',
    'to_tensor',
    'from_tensor',
    'try_from_tensor',
    'validate_matrix_data',
    'validate_equal_dimensions',
]
