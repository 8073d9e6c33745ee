"""
Sampling Interfaces
===================

This module defines the sample container protocol and the array-backed
container returned by inverse transform sampling. Inverse CDF tables are
univariate, so every container holds one column of draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from pysatl_invcdf.types import FloatArray


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Draws as a column of shape ``(n, 1)``.
    shape : tuple[int, int]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, int]: ...
    def flatten(self) -> FloatArray: ...


class ArraySample:
    """
    Array-backed sample of univariate draws.

    Parameters
    ----------
    data : numpy.ndarray
        Draws as a 1D array of length ``n`` or a column of shape ``(n, 1)``.
        Stored as a ``float64`` column.

    Raises
    ------
    ValueError
        If ``data`` is neither 1D nor a single column.
    """

    data: FloatArray

    def __init__(self, data: FloatArray) -> None:
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        if data.ndim != 2 or data.shape[1] != 1:
            raise ValueError(f"ArraySample expects n univariate draws, got shape {data.shape}")
        self.data = np.asarray(data, dtype=np.float64)

    def __len__(self) -> int:
        return int(self.data.shape[0])

    @property
    def array(self) -> FloatArray:
        return self.data

    @property
    def shape(self) -> tuple[int, int]:
        return len(self), 1

    def flatten(self) -> FloatArray:
        """Return the draws as a 1D array."""
        return self.data.reshape(-1)
