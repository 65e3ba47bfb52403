"""
Configuration constants for Mathex.

Centralizes all diagnostic strings, error codes and configuration values used throughout the codebase.
"""

# ============================================================================
# Validation Messages
# ============================================================================

# Shape diagnostics, in pipeline order
MSG_NOT_LIST_OF_LISTS = "Matrix must be a list of lists"
MSG_EMPTY_MATRIX = "Matrix must have at least one row"
MSG_NON_UNIFORM_COLUMNS = "All rows must have the same number of columns"
MSG_EMPTY_COLUMNS = "Rows should have at least one column"

# Operation diagnostics
MSG_DIMENSION_MISMATCH = "Matrices should have the same dimension"
MSG_INVALID_SCALAR = "Scalar must be a number"
MSG_INVALID_MATRIX = "Invalid matrix input. Use the matrix constructor."
MSG_ARITHMETIC_OVERFLOW = "Result is too large to represent"


# ============================================================================
# Error Codes
# ============================================================================

CODE_NOT_LIST_OF_LISTS = "NOT_LIST_OF_LISTS"
CODE_EMPTY_MATRIX = "EMPTY_MATRIX"
CODE_NON_UNIFORM_COLUMNS = "NON_UNIFORM_COLUMNS"
CODE_EMPTY_COLUMNS = "EMPTY_COLUMNS"
CODE_DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
CODE_INVALID_SCALAR = "INVALID_SCALAR"
CODE_INVALID_MATRIX = "INVALID_MATRIX"
CODE_ARITHMETIC_OVERFLOW = "ARITHMETIC_OVERFLOW"


# ============================================================================
# Device and Dtype Constants
# ============================================================================

# Supported device types
SUPPORTED_DEVICES = ["cpu", "cuda", "mps", "auto"]

# Supported dtype strings
SUPPORTED_DTYPES = [
    "float16", "float32", "float64",
    "bfloat16",
    "int8", "int16", "int32", "int64",
]

# Default device for tensor export
DEFAULT_DEVICE = "cpu"


# ============================================================================
# Logging Constants
# ============================================================================

# Default logging level
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ============================================================================
# Export All Constants
# ============================================================================

__all__ = [
    # Messages
    'MSG_NOT_LIST_OF_LISTS',
    'MSG_EMPTY_MATRIX',
    'MSG_NON_UNIFORM_COLUMNS',
    'MSG_EMPTY_COLUMNS',
    'MSG_DIMENSION_MISMATCH',
    'MSG_INVALID_SCALAR',
    'MSG_INVALID_MATRIX',
    'MSG_ARITHMETIC_OVERFLOW',

    # Codes
    'CODE_NOT_LIST_OF_LISTS',
    'CODE_EMPTY_MATRIX',
    'CODE_NON_UNIFORM_COLUMNS',
    'CODE_EMPTY_COLUMNS',
    'CODE_DIMENSION_MISMATCH',
    'CODE_INVALID_SCALAR',
    'CODE_INVALID_MATRIX',
    'CODE_ARITHMETIC_OVERFLOW',

    # Device and Dtype
    'SUPPORTED_DEVICES',
    'SUPPORTED_DTYPES',
    'DEFAULT_DEVICE',

    # Logging
    'DEFAULT_LOG_LEVEL',
    'LOG_FORMAT',
]
