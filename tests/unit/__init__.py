"""
PySATL InvCDF
=============

Unit tests for inverse CDF tables, tabulated inversion, construction modes
and analytic priors.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
