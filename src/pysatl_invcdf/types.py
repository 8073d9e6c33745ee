"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL InvCDF.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class PriorKind(StrEnum):
    """
    Enumeration of analytic prior shapes.

    Values are matched case-insensitively, so ``PriorKind("gaussian")`` and
    ``PriorKind("GAUSSIAN")`` both resolve to :attr:`GAUSSIAN`.

    Attributes
    ----------
    FLAT : str
        Uniform prior on ``[min, max]``.
    GAUSSIAN : str
        Normal prior truncated at a fixed number of standard deviations.
    LOG : str
        Log-uniform prior on ``[|min|, |max|]``.
    SOLID_ANGLE : str
        Polar-angle prior with ``cos(theta)`` uniform on ``[-1, 1]``.
    """

    FLAT = "Flat"
    GAUSSIAN = "Gaussian"
    LOG = "Log"
    SOLID_ANGLE = "SolidAngle"

    @classmethod
    def _missing_(cls, value: object) -> "PriorKind | None":
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class DomainBounds:
    """
    Closed domain ``[xmin, xmax]`` of an inverse CDF.

    Reversed bounds are swapped on construction, so ``xmin <= xmax`` always
    holds afterwards.

    Parameters
    ----------
    xmin : float
        Value returned for ``u <= 0``.
    xmax : float
        Value returned for ``u >= 1``.
    """

    xmin: float
    xmax: float

    def __post_init__(self) -> None:
        """Normalize reversed bounds."""
        if self.xmax < self.xmin:
            lo, hi = self.xmax, self.xmin
            object.__setattr__(self, "xmin", lo)
            object.__setattr__(self, "xmax", hi)

    @property
    def width(self) -> float:
        """Length of the domain."""
        return self.xmax - self.xmin

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie within the closed domain.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within ``[xmin, xmax]``, False otherwise.
        """
        arr = np.asarray(x)
        result = (arr >= self.xmin) & (arr <= self.xmax)

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the domain."""
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "PriorKind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "DomainBounds",
]
