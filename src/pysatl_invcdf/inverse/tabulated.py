"""
Tabulated CDF Ingestion and Inversion
=====================================

This module turns numeric CDF samples into an inverse CDF table:

- :class:`TabulatedCdf` — validated CDF values on a uniform x-grid.
- :func:`read_tabulated_cdf` — loads a two-column ``x y`` text resource.
- :func:`invert_cdf` — solves ``cdf(x) = u`` for ``N`` uniformly spaced
  ``u`` in a single forward sweep.

Notes
-----
- Only uniform x spacing is supported. The x-values between the first and
  the last line are not inspected, so non-uniform spacing goes undetected.
- The inversion is an approximation: each ``x`` is interpolated linearly
  between the two bracketing grid points.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from pysatl_invcdf.types import FloatArray, Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class TabulatedCdf:
    """
    CDF values sampled on a uniform grid over ``[xmin, xmax]``.

    Parameters
    ----------
    xmin : float
        First grid point.
    xmax : float
        Last grid point.
    cdf : numpy.ndarray
        Non-decreasing CDF values, one per grid point.
    """

    xmin: float
    xmax: float
    cdf: FloatArray

    @classmethod
    def from_values(
        cls, cdf: Sequence[Number] | FloatArray, xmin: float, xmax: float
    ) -> TabulatedCdf:
        """
        Validate and wrap in-memory CDF values.

        Raises
        ------
        ValueError
            If values or bounds are not numeric, fewer than two values are
            given, values are not finite, values decrease, or ``xmax < xmin``.
        """
        try:
            values = np.array(cdf, dtype=np.float64).reshape(-1)
            xmin, xmax = float(xmin), float(xmax)
        except (TypeError, ValueError):
            raise ValueError("CDF samples and domain bounds must be numeric") from None

        if values.size < 2:
            raise ValueError(f"At least two CDF samples are required, got {values.size}")
        if not np.isfinite(values).all():
            raise ValueError("CDF samples must be finite")
        if not (np.isfinite(xmin) and np.isfinite(xmax)):
            raise ValueError("Domain bounds must be finite")
        if xmax < xmin:
            raise ValueError(f"x-values must increase, got first {xmin} and last {xmax}")

        drops = np.flatnonzero(np.diff(values) < 0)
        if drops.size:
            i = int(drops[0])
            raise ValueError(
                f"CDF must be non-decreasing: sample {i + 1} ({values[i + 1]}) "
                f"is below sample {i} ({values[i]})"
            )

        values.setflags(write=False)
        return cls(xmin=float(xmin), xmax=float(xmax), cdf=values)

    @property
    def n_points(self) -> int:
        return int(self.cdf.size)

    @property
    def dx(self) -> float:
        """Uniform grid spacing."""
        return (self.xmax - self.xmin) / (self.n_points - 1)


def read_tabulated_cdf(path: str | PathLike[str]) -> TabulatedCdf:
    """
    Read a two-column ``x y`` CDF resource.

    The first ``x`` becomes ``xmin``, the last ``x`` becomes ``xmax`` and the
    ``y`` column the CDF values. Blank lines and ``#`` comments are skipped;
    columns beyond the second are ignored.

    Parameters
    ----------
    path : str or os.PathLike
        Location of the text resource.

    Returns
    -------
    TabulatedCdf
        Validated CDF samples.

    Raises
    ------
    OSError
        If the resource cannot be opened.
    ValueError
        If the resource is empty, contains malformed lines, or does not
        describe a non-decreasing CDF.
    """
    with warnings.catch_warnings():
        # loadtxt warns instead of failing on empty input
        warnings.simplefilter("ignore", UserWarning)
        data = np.loadtxt(path, dtype=np.float64, comments="#", usecols=(0, 1), ndmin=2)

    if data.size == 0:
        raise ValueError(f"CDF resource {path!s} contains no samples")

    logger.debug("Read %d CDF samples from %s", data.shape[0], path)
    return TabulatedCdf.from_values(data[:, 1], xmin=data[0, 0], xmax=data[-1, 0])


def invert_cdf(tabulated: TabulatedCdf) -> FloatArray:
    """
    Tabulate the inverse of a monotone CDF.

    For ``u = i / (N - 1)``, ``i = 0..N-1``, the upper bracket index advances
    from the lower cursor until ``cdf[upper] > u`` (clamped to ``N - 1``);
    ``x`` is then interpolated between the bracketing grid points, weighted
    by the residuals ``a = u - cdf[lower]`` and ``b = cdf[upper] - u``.
    The cursor only moves forward with ``u``, so the sweep costs ``O(N)``.
    A degenerate bracket (``a + b == 0``) resolves to its lower grid point:
    ``xmin`` when ``u`` lies below ``cdf[0]``, the last-but-one grid point
    when the CDF ends on a plateau. The table stays non-decreasing.

    Parameters
    ----------
    tabulated : TabulatedCdf
        Source CDF samples.

    Returns
    -------
    numpy.ndarray
        ``N`` values of the inverse CDF, clamped into ``[xmin, xmax]``.
    """
    cdf = tabulated.cdf
    n = tabulated.n_points
    xmin, xmax, dx = tabulated.xmin, tabulated.xmax, tabulated.dx

    inverse = np.empty(n, dtype=np.float64)
    lower = 0
    for i in range(n):
        u = i / (n - 1)

        upper = lower
        while cdf[upper] <= u:
            upper += 1
            if upper >= n:
                upper = n - 1
                break
        if upper != 0:
            lower = upper - 1

        a = u - cdf[lower]
        b = cdf[upper] - u
        if a + b > 0:
            x = xmin + dx * (b * lower + a * upper) / (a + b)
        else:
            # degenerate bracket: u below cdf[0], or the CDF ends flat
            x = xmin + dx * lower

        inverse[i] = min(max(x, xmin), xmax)

    return inverse
