"""
Built-in analytic priors for PySATL InvCDF.

This package contains the analytic prior generators that are available by
default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_invcdf.priors.builtins.flat import configure_flat_prior, flat_prior
from pysatl_invcdf.priors.builtins.gaussian import configure_gaussian_prior, gaussian_prior
from pysatl_invcdf.priors.builtins.log import configure_log_prior, log_prior
from pysatl_invcdf.priors.builtins.solid_angle import (
    configure_solid_angle_prior,
    solid_angle_prior,
)

__all__ = [
    "configure_flat_prior",
    "configure_gaussian_prior",
    "configure_log_prior",
    "configure_solid_angle_prior",
    "flat_prior",
    "gaussian_prior",
    "log_prior",
    "solid_angle_prior",
]
