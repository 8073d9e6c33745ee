"""
Tests for the solid-angle prior.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_invcdf.priors.builtins import solid_angle_prior
from pysatl_invcdf.priors.config import PriorGridConfig


class TestSolidAnglePrior:
    """Test suite for the solid-angle prior."""

    def setup_method(self):
        """Setup before each test method."""
        self.example = solid_angle_prior()

    def test_domain(self):
        assert self.example.n_points == 128
        assert self.example.xmin == 0.0
        assert self.example.xmax == math.pi
        assert self.example.inverse_cdf(0.0) == 0.0
        assert self.example.inverse_cdf(1.0) == math.pi

    def test_values_in_range(self):
        values = self.example.inverse_cdf(np.linspace(0.0, 1.0, 1001))
        assert ((values >= 0.0) & (values <= math.pi)).all()

    def test_equator_at_half(self):
        assert self.example.inverse_cdf(0.5) == pytest.approx(math.pi / 2, abs=1e-2)

    def test_table_follows_arccos(self):
        u = np.arange(1, 129) / 128
        np.testing.assert_allclose(self.example.table, np.arccos(1 - 2 * u))
        assert self.example.table[-1] == pytest.approx(math.pi)

    def test_cosine_of_samples_is_uniform(self):
        z = np.cos(self.example.sample(20000, rng=np.random.default_rng(7)).flatten())
        assert float(z.mean()) == pytest.approx(0.0, abs=0.03)
        assert float((z**2).mean()) == pytest.approx(1.0 / 3.0, abs=0.03)

    def test_custom_grid(self):
        inverse = solid_angle_prior(config=PriorGridConfig(solid_angle_points=16))
        assert inverse.n_points == 16
