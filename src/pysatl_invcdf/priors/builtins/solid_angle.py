"""
Solid-angle prior implementation.

Polar angle ``theta`` on ``[0, π]`` with ``cos(theta)`` uniform, i.e. a
``sin(theta)``-weighted density. The inverse CDF is ``acos(1 - 2u)``.
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
from pysatl_invcdf.types import PriorKind

if TYPE_CHECKING:
    from pysatl_invcdf.priors.config import PriorGridConfig


def solid_angle_prior(*, config: PriorGridConfig = DEFAULT_GRID_CONFIG) -> InverseCdf:
    """
    Inverse CDF of the solid-angle prior.

    Parameters
    ----------
    config : PriorGridConfig, optional
        Supplies ``solid_angle_points`` (default 128).

    Returns
    -------
    InverseCdf
        Table on ``[0, π]``.

    Notes
    -----
    The table holds ``acos(1 - 2u)`` for ``u = i/N``, ``i = 1..N``, while the
    query reads entry ``i`` as ``u = i/(N - 1)``. Queries are therefore
    shifted by at most one grid step (about ``0.01`` rad near the equator for
    ``N = 128``); the endpoints ``0`` and ``π`` are exact.
    """
    n = config.solid_angle_points
    u = np.arange(1, n + 1, dtype=np.float64) / n
    table = np.arccos(1 - 2 * u)

    return InverseCdf(xmin=0.0, xmax=math.pi, table=table)


def configure_solid_angle_prior() -> None:
    """
    Configure and register the solid-angle prior.
    """
    if PriorGeneratorRegister.contains(PriorKind.SOLID_ANGLE):
        return

    PriorGeneratorRegister.register(
        PriorGenerator(
            kind=PriorKind.SOLID_ANGLE,
            parameter_names=(),
            func=solid_angle_prior,
        )
    )
