"""
Device and dtype handling for tensor interop.

Converts the string forms accepted by ``to_tensor`` into torch objects.
"""

import torch
from typing import Optional, Tuple

from ..types import DeviceType, DtypeType
from ..utils.config import SUPPORTED_DEVICES, SUPPORTED_DTYPES


class DeviceManager:
    """
    Device and dtype resolution for matrix/tensor conversion.

    Provides methods for:
    - Converting string representations to torch objects
    - Selecting the best available device
    """

    SUPPORTED_DEVICES = SUPPORTED_DEVICES
    SUPPORTED_DTYPES = SUPPORTED_DTYPES

    @staticmethod
    def parse(
        device: DeviceType,
        dtype: Optional[DtypeType] = None
    ) -> Tuple[torch.device, Optional[torch.dtype]]:
        """
        Convert device and dtype from string representation to torch objects.

        Args:
            device: Device specification as string or torch.device
                   Supports: "cpu", "cuda", "cuda:0", "auto", or torch.device object
            dtype: Data type specification as string or torch.dtype, or None
                  to let torch infer it from the data

        Returns:
            Tuple of (torch.device, torch.dtype or None)

        Raises:
            ValueError: If device or dtype string is invalid
            TypeError: If device or dtype has the wrong type

        Examples:
            >>> DeviceManager.parse("cpu", "float64")
            (device(type='cpu'), torch.float64)
        """
        # Convert device
        if isinstance(device, str):
            if device.split(":", 1)[0] not in DeviceManager.SUPPORTED_DEVICES:
                raise ValueError(
                    f"Invalid device string: {device}. "
                    f"Supported: {', '.join(DeviceManager.SUPPORTED_DEVICES)}"
                )
            if device == "auto":
                device = DeviceManager.get_default_device()
            else:
                try:
                    device = torch.device(device)
                except RuntimeError as e:
                    raise ValueError(f"Invalid device string: {device}") from e
        elif not isinstance(device, torch.device):
            raise TypeError(f"Device must be str or torch.device, got {type(device)}")

        # Convert dtype
        if dtype is None:
            return device, None
        if isinstance(dtype, str):
            if dtype not in DeviceManager.SUPPORTED_DTYPES:
                raise ValueError(
                    f"Invalid dtype string: {dtype}. "
                    f"Supported: {', '.join(DeviceManager.SUPPORTED_DTYPES)}"
                )
            dtype = getattr(torch, dtype)
        elif not isinstance(dtype, torch.dtype):
            raise TypeError(f"Dtype must be str or torch.dtype, got {type(dtype)}")

        return device, dtype

    @staticmethod
    def get_default_device() -> torch.device:
        """
        Get the default device for operations.

        Checks availability in order: CUDA > MPS > CPU
        """
        if torch.cuda.is_available():
            return torch.device("cuda")
        elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
            return torch.device("mps")
        else:
            return torch.device("cpu")
