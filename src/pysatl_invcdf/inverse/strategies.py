"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy`: draws samples from an inverse CDF; pass one to
  :meth:`InverseCdf.sample <pysatl_invcdf.inverse.table.InverseCdf.sample>`
  to replace the default.
- :class:`InverseTransformSamplingStrategy`: the default, draws ``(n, 1)``
  samples by evaluating the inverse CDF at i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; the random generator is supplied per call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .table import InverseCdf


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self,
        n: int,
        inverse: InverseCdf,
        rng: np.random.Generator | None = None,
        **options: Any,
    ) -> Sample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy draws ``U ~ U(0, 1)`` and maps the variates through the
    tabulated inverse CDF in one vectorised query.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self,
        n: int,
        inverse: InverseCdf,
        rng: np.random.Generator | None = None,
        **options: Any,
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        if not inverse.is_valid:
            raise RuntimeError(f"Cannot sample from an invalid inverse CDF: {inverse.diagnostic}")

        generator = rng if rng is not None else np.random.default_rng()
        U = generator.random(n)
        vals = inverse.inverse_cdf(U).reshape(n, 1)
        return ArraySample(vals)
