"""
Inverse CDF Table
=================

This module defines :class:`InverseCdf`, the immutable queryable artifact
produced by every construction mode.

An instance stores the domain bounds ``[xmin, xmax]`` and the tabulated
inverse ``g(i / (N - 1))`` for ``i = 0..N-1``. Queries interpolate linearly
between neighbouring table entries.

Notes
-----
- Queries are total: ``u <= 0`` maps to ``xmin`` and ``u >= 1`` maps to
  ``xmax``. Out-of-range variates are clamped on purpose, they are not
  reported as errors.
- An invalid instance (failed construction) keeps an empty table, carries a
  diagnostic, and answers every query with ``NaN``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_invcdf.types import DomainBounds, FloatArray, Number, NumericArray

from .strategies import InverseTransformSamplingStrategy

if TYPE_CHECKING:
    from pysatl_invcdf.inverse.sampling import Sample
    from pysatl_invcdf.inverse.strategies import SamplingStrategy


@dataclass(frozen=True, slots=True, eq=False)
class InverseCdf:
    """
    Tabulated inverse cumulative distribution function ``g(u)``.

    Parameters
    ----------
    xmin : float
        Value of ``g`` at ``u = 0``.
    xmax : float
        Value of ``g`` at ``u = 1``.
    table : numpy.ndarray
        Values of ``g`` at ``u = i / (N - 1)``. Stored as a read-only
        ``float64`` copy.
    diagnostic : str or None, default None
        Reason the construction failed; ``None`` for valid instances.

    Attributes
    ----------
    n_points : int
        Number of table entries ``N``.
    is_valid : bool
        Whether the construction succeeded.
    """

    xmin: float
    xmax: float
    table: FloatArray
    diagnostic: str | None = None

    def __post_init__(self) -> None:
        frozen = np.array(self.table, dtype=np.float64).reshape(-1)
        frozen.setflags(write=False)
        object.__setattr__(self, "table", frozen)
        object.__setattr__(self, "xmin", float(self.xmin))
        object.__setattr__(self, "xmax", float(self.xmax))

    @classmethod
    def invalid(cls, diagnostic: str) -> InverseCdf:
        """Build the degenerate instance returned by a failed construction."""
        return cls(xmin=math.nan, xmax=math.nan, table=np.empty(0), diagnostic=diagnostic)

    @property
    def n_points(self) -> int:
        return int(self.table.size)

    @property
    def is_valid(self) -> bool:
        return self.diagnostic is None and self.n_points > 0

    @property
    def bounds(self) -> DomainBounds:
        """Domain ``[xmin, xmax]`` of the inverse CDF."""
        return DomainBounds(self.xmin, self.xmax)

    @overload
    def inverse_cdf(self, u: Number) -> float: ...
    @overload
    def inverse_cdf(self, u: NumericArray) -> FloatArray: ...

    def inverse_cdf(self, u: Number | NumericArray) -> float | FloatArray:
        """
        Evaluate ``x = g(u)``.

        Parameters
        ----------
        u : Number or NumericArray
            Uniform variate(s). Values outside ``[0, 1]`` are clamped.

        Returns
        -------
        float or numpy.ndarray
            Interpolated inverse CDF value(s); an array input yields a
            ``float64`` array of the same shape.
        """
        if np.ndim(u) == 0:
            return self._scalar(float(cast(float, u)))
        return self._vector(np.asarray(u, dtype=np.float64))

    __call__ = inverse_cdf

    def _scalar(self, u: float) -> float:
        if not self.is_valid or math.isnan(u):
            return math.nan
        if u <= 0.0:
            return self.xmin
        if u >= 1.0:
            return self.xmax

        n = self.n_points
        diu = (n - 1) * u
        lower = math.floor(diu)
        upper = min(lower + 1, n - 1)
        delta = diu - lower
        return float(self.table[lower] * (1.0 - delta) + self.table[upper] * delta)

    def _vector(self, u: FloatArray) -> FloatArray:
        if not self.is_valid:
            return np.full(u.shape, np.nan)

        n = self.n_points
        inside = (u > 0.0) & (u < 1.0)
        diu = np.where(inside, u, 0.0) * (n - 1)
        lower = np.floor(diu).astype(np.intp)
        upper = np.minimum(lower + 1, n - 1)
        delta = diu - lower
        values = self.table[lower] * (1.0 - delta) + self.table[upper] * delta

        out = np.where(u <= 0.0, self.xmin, np.where(u >= 1.0, self.xmax, values))
        out = np.where(np.isnan(u), np.nan, out)
        return cast(FloatArray, out.astype(np.float64))

    def sample(
        self,
        n: int,
        rng: np.random.Generator | None = None,
        *,
        strategy: SamplingStrategy | None = None,
    ) -> Sample:
        """
        Draw ``n`` variates by inverse transform sampling.

        Parameters
        ----------
        n : int
            Number of observations to draw.
        rng : numpy.random.Generator, optional
            Source of uniform variates; a fresh default generator if omitted.
        strategy : SamplingStrategy, optional
            Sampler to draw with; :class:`InverseTransformSamplingStrategy`
            if omitted.

        Returns
        -------
        Sample
            Draws of shape ``(n, 1)``; an :class:`ArraySample` for the
            default strategy.
        """
        sampler = strategy if strategy is not None else InverseTransformSamplingStrategy()
        return sampler.sample(n, self, rng=rng)
