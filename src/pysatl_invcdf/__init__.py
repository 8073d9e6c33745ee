"""
PySATL InvCDF
=============

Inverse transform sampling support: tabulated and analytic inverse
cumulative distribution functions ``g(u)`` mapping a uniform variate
``u ∈ [0, 1]`` to a sample of the target distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

# priors build on inverse tables; keep inverse first
from .inverse import *
from .inverse import __all__ as _inverse_all
from .priors import *
from .priors import __all__ as _priors_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-invcdf")
__all__ = [
    "__version__",
    *_inverse_all,
    *_priors_all,
    *_types_all,
]

del _inverse_all
del _priors_all
del _types_all
