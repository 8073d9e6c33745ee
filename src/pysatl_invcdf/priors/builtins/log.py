"""
Log-uniform prior implementation.

Geometrically spaced table ``xmin·(xmax/xmin)^u`` on a positive domain.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_invcdf.inverse.table import InverseCdf
from pysatl_invcdf.priors.config import DEFAULT_GRID_CONFIG
from pysatl_invcdf.priors.registry import PriorGenerator, PriorGeneratorRegister
from pysatl_invcdf.types import DomainBounds, PriorKind

if TYPE_CHECKING:
    from pysatl_invcdf.priors.config import PriorGridConfig


def log_prior(
    lower_bound: float, upper_bound: float, *, config: PriorGridConfig = DEFAULT_GRID_CONFIG
) -> InverseCdf:
    """
    Inverse CDF of the log-uniform prior.

    Negative bounds are folded onto the positive axis by taking absolute
    values, then swapped if reversed.

    Parameters
    ----------
    lower_bound : float
        Value at ``u = 0`` (absolute value used).
    upper_bound : float
        Value at ``u = 1`` (absolute value used).
    config : PriorGridConfig, optional
        Supplies ``log_points`` (default 256).

    Returns
    -------
    InverseCdf
        Geometrically spaced table on ``[|min|, |max|]``.

    Raises
    ------
    ValueError
        If a bound is zero or not finite.
    """
    if not (math.isfinite(lower_bound) and math.isfinite(upper_bound)):
        raise ValueError(f"Log prior bounds must be finite, got {lower_bound}, {upper_bound}")
    if lower_bound == 0 or upper_bound == 0:
        raise ValueError(f"Log prior bounds must be non-zero, got {lower_bound}, {upper_bound}")

    bounds = DomainBounds(abs(float(lower_bound)), abs(float(upper_bound)))
    n = config.log_points

    u = np.arange(n, dtype=np.float64) / (n - 1)
    table = bounds.xmin * (bounds.xmax / bounds.xmin) ** u
    table[-1] = bounds.xmax

    return InverseCdf(xmin=bounds.xmin, xmax=bounds.xmax, table=table)


def configure_log_prior() -> None:
    """
    Configure and register the log-uniform prior.
    """
    if PriorGeneratorRegister.contains(PriorKind.LOG):
        return

    PriorGeneratorRegister.register(
        PriorGenerator(
            kind=PriorKind.LOG,
            parameter_names=("lower_bound", "upper_bound"),
            func=log_prior,
        )
    )
