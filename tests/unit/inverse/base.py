"""
Common fixtures and utilities for inverse CDF tests.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pathlib import Path
from typing import Any

import numpy as np

from pysatl_invcdf.inverse.table import InverseCdf


class InverseCdfTestBase:
    """Base class for inverse CDF tests"""

    CALCULATION_PRECISION = 1e-12

    @staticmethod
    def identity_cdf(n: int) -> np.ndarray[Any, Any]:
        """CDF ``y = x`` on ``[0, 1]`` sampled at ``n`` grid points."""
        return np.arange(n, dtype=np.float64) / (n - 1)

    @staticmethod
    def write_cdf(path: Path, xs: Any, ys: Any) -> Path:
        """Write a two-column ``x y`` resource."""
        lines = [f"{float(x)!r} {float(y)!r}" for x, y in zip(xs, ys, strict=True)]
        path.write_text("\n".join(lines) + "\n")
        return path

    @staticmethod
    def assert_monotone(inverse: InverseCdf, n_queries: int = 2001) -> None:
        """Assert that ``g`` is non-decreasing on a dense grid covering [0, 1]."""
        u = np.linspace(-0.1, 1.1, n_queries)
        values = inverse.inverse_cdf(u)
        assert np.all(np.diff(values) >= 0.0)
