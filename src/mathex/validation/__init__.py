"""
Validation module for Mathex.

Provides structural input validation for matrices including:
- List-of-lists shape checks
- Row count and column uniformity checks
- Dimension equality between two matrices
"""

from .validators import (
    MatrixShapeValidator,
    MatrixDimensionValidator,
    validate_matrix_data,
    validate_equal_dimensions,
)

__all__ = [
    'MatrixShapeValidator',
    'MatrixDimensionValidator',
    'validate_matrix_data',
    'validate_equal_dimensions',
]
