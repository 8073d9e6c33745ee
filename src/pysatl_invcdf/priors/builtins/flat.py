"""
Flat prior implementation.

Uniform prior on ``[min, max]``, tabulated with two points so that the
interpolating query is exact.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_invcdf.inverse.table import InverseCdf
from pysatl_invcdf.priors.config import DEFAULT_GRID_CONFIG
from pysatl_invcdf.priors.registry import PriorGenerator, PriorGeneratorRegister
from pysatl_invcdf.types import DomainBounds, PriorKind

if TYPE_CHECKING:
    from pysatl_invcdf.priors.config import PriorGridConfig


def flat_prior(
    lower_bound: float, upper_bound: float, *, config: PriorGridConfig = DEFAULT_GRID_CONFIG
) -> InverseCdf:
    """
    Inverse CDF of the uniform prior.

    Parameters
    ----------
    lower_bound : float
        Value at ``u = 0``. Swapped with ``upper_bound`` if larger.
    upper_bound : float
        Value at ``u = 1``.
    config : PriorGridConfig, optional
        Unused; accepted for a uniform generator signature.

    Returns
    -------
    InverseCdf
        Two-point table ``[min, max]``.

    Raises
    ------
    ValueError
        If a bound is not finite.
    """
    if not (np.isfinite(lower_bound) and np.isfinite(upper_bound)):
        raise ValueError(f"Flat prior bounds must be finite, got {lower_bound}, {upper_bound}")

    bounds = DomainBounds(float(lower_bound), float(upper_bound))
    return InverseCdf(
        xmin=bounds.xmin, xmax=bounds.xmax, table=np.array([bounds.xmin, bounds.xmax])
    )


def configure_flat_prior() -> None:
    """
    Configure and register the flat prior.
    """
    if PriorGeneratorRegister.contains(PriorKind.FLAT):
        return

    PriorGeneratorRegister.register(
        PriorGenerator(
            kind=PriorKind.FLAT,
            parameter_names=("lower_bound", "upper_bound"),
            func=flat_prior,
        )
    )
