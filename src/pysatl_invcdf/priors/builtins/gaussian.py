"""
Gaussian prior implementation.

Normal prior truncated at ``mean ± width·stddev``. Interior grid points use
the closed-form quantile ``mean + stddev·√2·erfinv(2u - 1)``; the endpoints
are pinned to the truncation bounds, so the tails beyond them are lost.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import erfinv

from pysatl_invcdf.inverse.table import InverseCdf
from pysatl_invcdf.priors.config import DEFAULT_GRID_CONFIG
from pysatl_invcdf.priors.registry import PriorGenerator, PriorGeneratorRegister
from pysatl_invcdf.types import PriorKind

if TYPE_CHECKING:
    from pysatl_invcdf.priors.config import PriorGridConfig


def gaussian_prior(
    mean: float, stddev: float, *, config: PriorGridConfig = DEFAULT_GRID_CONFIG
) -> InverseCdf:
    """
    Inverse CDF of the truncated Gaussian prior.

    Parameters
    ----------
    mean : float
        Mean of the prior.
    stddev : float
        Standard deviation; its absolute value is used.
    config : PriorGridConfig, optional
        Supplies ``gaussian_points`` (default 257) and ``gaussian_width``
        (default 4).

    Returns
    -------
    InverseCdf
        Table on ``[mean - width·|stddev|, mean + width·|stddev|]``.

    Raises
    ------
    ValueError
        If ``mean`` or ``stddev`` is not finite.
    """
    if not (math.isfinite(mean) and math.isfinite(stddev)):
        raise ValueError(f"Gaussian prior parameters must be finite, got {mean}, {stddev}")

    sigma = abs(stddev)
    n = config.gaussian_points
    xmin = mean - config.gaussian_width * sigma
    xmax = mean + config.gaussian_width * sigma

    u = np.arange(1, n - 1, dtype=np.float64) / (n - 1)
    table = np.empty(n, dtype=np.float64)
    table[0] = xmin
    table[1:-1] = mean + sigma * np.sqrt(2) * erfinv(2 * u - 1)
    table[-1] = xmax

    return InverseCdf(xmin=xmin, xmax=xmax, table=table)


def configure_gaussian_prior() -> None:
    """
    Configure and register the Gaussian prior.
    """
    if PriorGeneratorRegister.contains(PriorKind.GAUSSIAN):
        return

    PriorGeneratorRegister.register(
        PriorGenerator(
            kind=PriorKind.GAUSSIAN,
            parameter_names=("mean", "stddev"),
            func=gaussian_prior,
        )
    )
