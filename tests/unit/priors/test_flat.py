"""
Tests for the flat prior.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_invcdf.priors.builtins import flat_prior


class TestFlatPrior:
    """Test suite for the flat prior."""

    def test_table_is_two_bounds(self):
        inverse = flat_prior(3.0, 5.0)

        assert inverse.n_points == 2
        np.testing.assert_array_equal(inverse.table, [3.0, 5.0])

    def test_midpoint_is_exact(self):
        assert flat_prior(3.0, 5.0).inverse_cdf(0.5) == 4.0

    def test_linear_everywhere(self):
        inverse = flat_prior(-2.0, 6.0)
        u = np.linspace(0.0, 1.0, 11)

        np.testing.assert_allclose(inverse.inverse_cdf(u), -2.0 + 8.0 * u, atol=1e-12)

    def test_reversed_bounds_are_swapped(self):
        inverse = flat_prior(5.0, 3.0)

        assert inverse.xmin == 3.0
        assert inverse.xmax == 5.0
        assert inverse.inverse_cdf(0.25) == 3.5

    def test_degenerate_interval(self):
        inverse = flat_prior(2.0, 2.0)
        assert inverse.inverse_cdf(0.7) == 2.0

    @pytest.mark.parametrize("bounds", [(math.nan, 1.0), (0.0, math.inf)])
    def test_non_finite_bounds_raise(self, bounds):
        with pytest.raises(ValueError, match="finite"):
            flat_prior(*bounds)
