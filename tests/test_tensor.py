"""
Unit tests for tensor interop and device/dtype parsing.
"""

import pytest
import numpy as np
import torch

from mathex import (
    InvalidMatrixError,
    from_tensor,
    new,
    scalar_multiply,
    to_list,
    to_tensor,
    try_from_tensor,
)
from mathex.device import DeviceManager


class TestDeviceManager:
    """Tests for device and dtype parsing."""

    def test_parse_strings(self):
        device, dtype = DeviceManager.parse("cpu", "float64")

        assert device == torch.device("cpu")
        assert dtype == torch.float64

    def test_parse_torch_objects(self):
        device, dtype = DeviceManager.parse(torch.device("cpu"), torch.int32)

        assert device.type == "cpu"
        assert dtype == torch.int32

    def test_dtype_optional(self):
        _, dtype = DeviceManager.parse("cpu")

        assert dtype is None

    def test_auto_device(self):
        device, _ = DeviceManager.parse("auto")

        assert device == DeviceManager.get_default_device()

    def test_invalid_dtype_string(self):
        with pytest.raises(ValueError, match="Invalid dtype string"):
            DeviceManager.parse("cpu", "float128")

    def test_invalid_device_string(self):
        with pytest.raises(ValueError, match="Invalid device string"):
            DeviceManager.parse("not_a_device")

    def test_unsupported_device_type(self):
        """Test that valid torch devices outside the supported list are rejected."""
        with pytest.raises(ValueError, match="Supported: cpu, cuda, mps, auto"):
            DeviceManager.parse("meta")

    def test_device_index_accepted(self):
        device, _ = DeviceManager.parse("cpu:0")

        assert device.type == "cpu"

    def test_wrong_types(self):
        with pytest.raises(TypeError):
            DeviceManager.parse(0)
        with pytest.raises(TypeError):
            DeviceManager.parse("cpu", 3)


class TestToTensor:
    """Tests for matrix to tensor export."""

    def test_default(self, rectangle):
        tensor = to_tensor(rectangle)

        assert tensor.shape == (2, 3)
        assert tensor.device.type == "cpu"
        assert tensor.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_dtype(self, square):
        tensor = to_tensor(square, dtype="float32")

        assert tensor.dtype == torch.float32

    def test_non_matrix(self):
        with pytest.raises(InvalidMatrixError, match="Invalid matrix input"):
            to_tensor([[1, 2], [3, 4]])


class TestFromTensor:
    """Tests for tensor and array import."""

    def test_torch(self):
        matrix = from_tensor(torch.tensor([[1, 2], [3, 4]]))

        assert to_list(matrix) == [[1, 2], [3, 4]]

    def test_numpy(self):
        matrix = from_tensor(np.array([[1.5, 2.5]]))

        assert matrix.shape == (1, 2)
        assert to_list(matrix) == [[1.5, 2.5]]

    def test_round_trip_through_operations(self, square):
        tensor = to_tensor(scalar_multiply(square, 2))

        assert from_tensor(tensor) == new([[2, 4], [6, 8]])

    def test_wrong_ndim(self):
        result = try_from_tensor(torch.zeros(3))

        assert result["ok"] is False
        assert result["error"]["code"] == "INVALID_MATRIX"
        assert result["error"]["message"] == "Tensor must be 2-dimensional, got shape (3,)"

    def test_zero_rows(self):
        result = try_from_tensor(torch.zeros(0, 3))

        assert result["error"]["message"] == "Matrix must have at least one row"

    def test_zero_columns(self):
        with pytest.raises(InvalidMatrixError, match="Rows should have at least one column"):
            from_tensor(np.zeros((2, 0)))

    def test_not_an_array(self):
        result = try_from_tensor([[1, 2]])

        assert result["error"]["message"] == "Invalid matrix input. Use the matrix constructor."
