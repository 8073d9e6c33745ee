"""
Inverse CDF subpackage

Interfaces and default implementations for building and querying tabulated
inverse CDFs:

- queryable inverse CDF table (:mod:`.table`);
- tabulated CDF ingestion and inversion (:mod:`.tabulated`);
- construction modes and the ``build`` entry point (:mod:`.construction`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .construction import (
    ConstructionMode,
    FromAnalytic,
    FromBounds,
    FromSamples,
    FromTable,
    build,
    from_analytic,
    from_bounds,
    from_samples,
    from_table,
)
from .sampling import ArraySample, Sample
from .strategies import InverseTransformSamplingStrategy, SamplingStrategy
from .table import InverseCdf
from .tabulated import TabulatedCdf, invert_cdf, read_tabulated_cdf

__all__ = [
    # table
    "InverseCdf",
    # tabulated input
    "TabulatedCdf",
    "read_tabulated_cdf",
    "invert_cdf",
    # construction
    "ConstructionMode",
    "FromTable",
    "FromSamples",
    "FromAnalytic",
    "FromBounds",
    "build",
    "from_table",
    "from_samples",
    "from_analytic",
    "from_bounds",
    # sampling
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
