"""
Analytic Priors Configuration
=============================

This module registers the builtin analytic priors:

- :func:`~pysatl_invcdf.priors.builtins.flat_prior` — uniform on ``[min, max]``.
- :func:`~pysatl_invcdf.priors.builtins.gaussian_prior` — truncated normal.
- :func:`~pysatl_invcdf.priors.builtins.log_prior` — log-uniform.
- :func:`~pysatl_invcdf.priors.builtins.solid_angle_prior` — ``sin(theta)``
  weighted polar angle.

Notes
-----
- All priors are registered in the global PriorGeneratorRegister.
- Registration happens lazily on first use and is cached.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_invcdf.priors.builtins import (
    configure_flat_prior,
    configure_gaussian_prior,
    configure_log_prior,
    configure_solid_angle_prior,
)
from pysatl_invcdf.priors.registry import PriorGeneratorRegister


@lru_cache(maxsize=1)
def configure_priors_register() -> PriorGeneratorRegister:
    """
    Configure and register all builtin priors in the global registry.

    Returns
    -------
    PriorGeneratorRegister
        The global registry of prior generators.
    """
    configure_flat_prior()
    configure_gaussian_prior()
    configure_log_prior()
    configure_solid_angle_prior()
    return PriorGeneratorRegister()


def reset_priors_register() -> None:
    """
    Reset the cached priors registry.
    """
    configure_priors_register.cache_clear()
    PriorGeneratorRegister._reset()
