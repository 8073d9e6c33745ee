"""
Analytic priors subpackage

Closed-form inverse CDF tables selected by :class:`~pysatl_invcdf.types.PriorKind`:

- grid configuration (:mod:`.config`);
- generator register (:mod:`.registry`);
- builtin generators (:mod:`.builtins`);
- register setup (:mod:`.configuration`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .builtins import flat_prior, gaussian_prior, log_prior, solid_angle_prior
from .config import DEFAULT_GRID_CONFIG, PriorGridConfig
from .configuration import configure_priors_register, reset_priors_register
from .registry import PriorGenerator, PriorGeneratorRegister

__all__ = [
    # configuration
    "PriorGridConfig",
    "DEFAULT_GRID_CONFIG",
    "configure_priors_register",
    "reset_priors_register",
    # register
    "PriorGenerator",
    "PriorGeneratorRegister",
    # generators
    "flat_prior",
    "gaussian_prior",
    "log_prior",
    "solid_angle_prior",
]
