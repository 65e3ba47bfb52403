"""
Validators for matrix construction and matrix operations.

Provides validation classes and functions for ensuring input data is a
well-formed matrix before a Matrix value is created or combined.
"""

import logging
from typing import Any, List, Optional

from ..types import (
    RAW_MATRIX,
    ValidationError,
    ValidationResult,
    is_number,
    is_sequence,
)
from ..utils.config import (
    CODE_DIMENSION_MISMATCH,
    CODE_EMPTY_COLUMNS,
    CODE_EMPTY_MATRIX,
    CODE_NON_UNIFORM_COLUMNS,
    CODE_NOT_LIST_OF_LISTS,
    MSG_DIMENSION_MISMATCH,
    MSG_EMPTY_COLUMNS,
    MSG_EMPTY_MATRIX,
    MSG_NON_UNIFORM_COLUMNS,
    MSG_NOT_LIST_OF_LISTS,
)


def _passed(warnings: Optional[List[str]] = None) -> ValidationResult:
    return {"valid": True, "errors": [], "warnings": warnings or []}


def _failed(code: str, message: str, location: Optional[str] = None) -> ValidationResult:
    error: ValidationError = {"code": code, "message": message, "location": location}
    return {"valid": False, "errors": [error], "warnings": []}


class MatrixShapeValidator:
    """
    Validator for raw matrix payloads.

    Each check inspects one structural property. The checks assume the
    ones before them in ``PIPELINE`` have passed.
    """

    @staticmethod
    def validate_is_list_of_lists(data: Any) -> ValidationResult:
        """
        Validate that the input is a sequence of sequences.

        An empty outer sequence passes; it is rejected by
        ``validate_non_empty`` instead.
        """
        if not is_sequence(data):
            return _failed(CODE_NOT_LIST_OF_LISTS, MSG_NOT_LIST_OF_LISTS)

        for idx, row in enumerate(data):
            if not is_sequence(row):
                return _failed(CODE_NOT_LIST_OF_LISTS, MSG_NOT_LIST_OF_LISTS, f"row[{idx}]")

        return _passed()

    @staticmethod
    def validate_non_empty(data: RAW_MATRIX) -> ValidationResult:
        """Validate that the matrix has at least one row."""
        if len(data) == 0:
            return _failed(CODE_EMPTY_MATRIX, MSG_EMPTY_MATRIX)
        return _passed()

    @staticmethod
    def validate_uniform_columns(data: RAW_MATRIX) -> ValidationResult:
        """
        Validate that all rows have the same number of columns as the first row.

        A single row passes trivially.
        """
        expected_columns = len(data[0])

        for idx, row in enumerate(data[1:], start=1):
            if len(row) != expected_columns:
                return _failed(CODE_NON_UNIFORM_COLUMNS, MSG_NON_UNIFORM_COLUMNS, f"row[{idx}]")

        return _passed()

    @staticmethod
    def validate_non_empty_columns(data: RAW_MATRIX) -> ValidationResult:
        """Validate that every row has at least one column."""
        for idx, row in enumerate(data):
            if len(row) == 0:
                return _failed(CODE_EMPTY_COLUMNS, MSG_EMPTY_COLUMNS, f"row[{idx}]")
        return _passed()

    @staticmethod
    def validate_numeric_elements(data: RAW_MATRIX) -> ValidationResult:
        """
        Check that every element is a number.

        Never fails: rows holding non-numeric elements are reported as
        warnings only, since element types are not part of the shape contract.
        """
        warnings = []

        for idx, row in enumerate(data):
            bad = [value for value in row if not is_number(value)]
            if bad:
                warnings.append(
                    f"row[{idx}] contains {len(bad)} non-numeric element(s), "
                    f"first is {type(bad[0]).__name__}"
                )

        return _passed(warnings)

    # Order matters: each check relies on the ones before it.
    PIPELINE = (
        validate_is_list_of_lists,
        validate_non_empty,
        validate_uniform_columns,
        validate_non_empty_columns,
    )


class MatrixDimensionValidator:
    """Validator comparing two constructed matrices."""

    @staticmethod
    def validate_equal_dimensions(matrix_one, matrix_two) -> ValidationResult:
        """
        Validate that two matrices have the same (rows, columns) dimensions.

        Both arguments must already be Matrix values.
        """
        data_one = matrix_one.data
        data_two = matrix_two.data
        dimension_one = (len(data_one), len(data_one[0]))
        dimension_two = (len(data_two), len(data_two[0]))

        if dimension_one != dimension_two:
            return _failed(
                CODE_DIMENSION_MISMATCH,
                MSG_DIMENSION_MISMATCH,
                f"{dimension_one[0]}x{dimension_one[1]} vs {dimension_two[0]}x{dimension_two[1]}",
            )

        return _passed()


# Convenience functions

def validate_matrix_data(data: Any) -> ValidationResult:
    """
    Run the ordered shape checks over a raw matrix payload.

    Stops at the first failing check and returns its result. When all checks
    pass, the numeric element check runs and its warnings are returned.

    Args:
        data: Candidate payload

    Returns:
        ValidationResult with at most one error
    """
    for check in MatrixShapeValidator.PIPELINE:
        result = check.__func__(data)
        if not result["valid"]:
            error = result["errors"][0]
            logging.debug(f"Matrix validation failed at {check.__func__.__name__}: {error['message']} ({error['location']})")
            return result

    result = MatrixShapeValidator.validate_numeric_elements(data)

    # Log warnings
    for warning in result["warnings"]:
        logging.warning(f"Validation warning: {warning}")

    return result


def validate_equal_dimensions(matrix_one, matrix_two) -> ValidationResult:
    """Module-level alias for ``MatrixDimensionValidator.validate_equal_dimensions``."""
    return MatrixDimensionValidator.validate_equal_dimensions(matrix_one, matrix_two)
