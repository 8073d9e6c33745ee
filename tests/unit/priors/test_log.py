"""
Tests for the log-uniform prior.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_invcdf.priors.builtins import log_prior


class TestLogPrior:
    """Test suite for the log-uniform prior."""

    def setup_method(self):
        """Setup before each test method."""
        self.example = log_prior(1.0, 100.0)

    def test_bounds(self):
        assert self.example.n_points == 256
        assert self.example.inverse_cdf(0.0) == 1.0
        assert self.example.inverse_cdf(1.0) == 100.0

    def test_geometric_growth(self):
        ratios = self.example.table[1:] / self.example.table[:-1]
        np.testing.assert_allclose(ratios, 100.0 ** (1.0 / 255.0), rtol=1e-9)

    def test_log_uniform_midpoint(self):
        # log10 of the median lies halfway between log10(1) and log10(100)
        assert self.example.inverse_cdf(0.5) == pytest.approx(10.0, rel=1e-4)

    def test_values_are_positive(self):
        values = self.example.inverse_cdf(np.linspace(0.0, 1.0, 101))
        assert (values > 0).all()

    @pytest.mark.parametrize(
        "bounds", [(-1.0, -100.0), (100.0, 1.0), (-100.0, 1.0)], ids=["negative", "reversed", "mixed"]
    )
    def test_bounds_are_folded_and_normalized(self, bounds):
        inverse = log_prior(*bounds)

        assert inverse.xmin == 1.0
        assert inverse.xmax == 100.0
        np.testing.assert_allclose(inverse.table, self.example.table)

    def test_zero_bound_raises(self):
        with pytest.raises(ValueError, match="non-zero"):
            log_prior(0.0, 10.0)
