from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

import pysatl_invcdf
from pysatl_invcdf import types
from pysatl_invcdf.types import DomainBounds, PriorKind


class TestPriorKind:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Flat", PriorKind.FLAT),
            ("flat", PriorKind.FLAT),
            ("GAUSSIAN", PriorKind.GAUSSIAN),
            ("log", PriorKind.LOG),
            ("solidangle", PriorKind.SOLID_ANGLE),
            (" SolidAngle ", PriorKind.SOLID_ANGLE),
        ],
    )
    def test_case_insensitive_lookup(self, name, expected):
        assert PriorKind(name) is expected

    @pytest.mark.parametrize("name", ["Cauchy", "", "solid angle", 3])
    def test_unknown_kind_raises(self, name):
        with pytest.raises(ValueError):
            PriorKind(name)


class TestDomainBounds:
    def test_reversed_bounds_are_swapped(self):
        bounds = DomainBounds(5.0, 3.0)
        assert bounds.xmin == 3.0
        assert bounds.xmax == 5.0
        assert bounds.width == 2.0

    def test_contains_scalar(self):
        bounds = DomainBounds(0.0, 1.0)
        assert 0.0 in bounds
        assert 1.0 in bounds
        assert 1.5 not in bounds

    def test_contains_array(self):
        result = DomainBounds(0.0, 1.0).contains(np.array([-0.1, 0.0, 0.5, 1.0, 1.1]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, True, False]


class TestPublicNames:
    def test_exported_names(self):
        assert set(types.__all__) == {
            "PriorKind",
            "NumPyNumber",
            "Number",
            "NumericArray",
            "FloatArray",
            "BoolArray",
            "DomainBounds",
        }

    def test_exported_names_are_reexported_by_package(self):
        for name in types.__all__:
            assert getattr(pysatl_invcdf, name) is getattr(types, name)
