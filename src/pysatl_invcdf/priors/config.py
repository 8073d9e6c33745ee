"""
Analytic Prior Grid Configuration
=================================

Grid sizes and truncation widths used by the builtin analytic priors.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PriorGridConfig:
    """
    Configuration for the tables built by analytic priors.

    Parameters
    ----------
    gaussian_points : int, default 257
        Table size of the Gaussian prior. Should be odd so that the mean falls
        on a grid point; this is not enforced.
    gaussian_width : float, default 4.0
        Truncation half-width of the Gaussian prior, in standard deviations.
    log_points : int, default 256
        Table size of the log-uniform prior.
    solid_angle_points : int, default 128
        Table size of the solid-angle prior.

    Notes
    -----
    - The flat prior always uses two points; it is exact.
    - Tails of the Gaussian prior beyond ``gaussian_width`` are lost.
    """

    gaussian_points: int = 257
    gaussian_width: float = 4.0
    log_points: int = 256
    solid_angle_points: int = 128

    def __post_init__(self) -> None:
        for name in ("gaussian_points", "log_points", "solid_angle_points"):
            if getattr(self, name) < 2:
                raise ValueError(f"{name} must be at least 2, got {getattr(self, name)}")
        if self.gaussian_width <= 0:
            raise ValueError(f"gaussian_width must be positive, got {self.gaussian_width}")


DEFAULT_GRID_CONFIG = PriorGridConfig()
"""Grid configuration used when none is supplied."""
