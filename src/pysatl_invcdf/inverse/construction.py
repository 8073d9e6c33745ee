"""
Construction Modes
==================

This module defines the explicit construction modes of an inverse CDF and
the single entry point that builds them:

- :class:`FromTable` — tabulated CDF read from a two-column text resource.
- :class:`FromSamples` — tabulated CDF given as in-memory values.
- :class:`FromAnalytic` — analytic prior selected by
  :class:`~pysatl_invcdf.types.PriorKind`.
- :class:`FromBounds` — two-point flat table on ``[min, max]``.
- :func:`build` — dispatches a mode and reports failures through the
  returned instance.

Notes
-----
- :func:`build` never raises for bad input data (missing resource, malformed
  or non-monotonic CDF, unknown prior kind, invalid prior parameters). It
  returns an invalid :class:`InverseCdf` whose ``diagnostic`` explains the
  failure; callers must check ``is_valid``.
- Passing an object that is not a construction mode raises ``TypeError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_invcdf.priors.configuration import configure_priors_register
from pysatl_invcdf.types import PriorKind

from .table import InverseCdf
from .tabulated import TabulatedCdf, invert_cdf, read_tabulated_cdf

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from pysatl_invcdf.priors.config import PriorGridConfig
    from pysatl_invcdf.types import FloatArray, Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FromTable:
    """
    Build from a two-column ``x y`` CDF resource.

    Parameters
    ----------
    path : str or os.PathLike
        Location of the resource.
    """

    path: str | PathLike[str]


@dataclass(frozen=True, slots=True, eq=False)
class FromSamples:
    """
    Build from CDF values on a uniform grid over ``[xmin, xmax]``.

    Parameters
    ----------
    cdf : Sequence[Number] or numpy.ndarray
        Non-decreasing CDF values.
    xmin : float
        First grid point.
    xmax : float
        Last grid point.
    """

    cdf: Sequence[Number] | FloatArray
    xmin: float
    xmax: float


@dataclass(frozen=True, slots=True)
class FromAnalytic:
    """
    Build an analytic prior.

    Parameters
    ----------
    kind : PriorKind or str
        Prior shape; strings are matched case-insensitively.
    a : float, optional
        First parameter (``min`` or ``mean``).
    b : float, optional
        Second parameter (``max`` or ``stddev``).
    config : PriorGridConfig, optional
        Grid configuration; defaults to the builtin constants.
    """

    kind: PriorKind | str
    a: float | None = None
    b: float | None = None
    config: PriorGridConfig | None = None

    @property
    def params(self) -> tuple[float, ...]:
        return tuple(p for p in (self.a, self.b) if p is not None)


@dataclass(frozen=True, slots=True)
class FromBounds:
    """
    Build the legacy two-point flat table on ``[lower_bound, upper_bound]``.
    """

    lower_bound: float
    upper_bound: float


type ConstructionMode = FromTable | FromSamples | FromAnalytic | FromBounds
"""Tagged union of the supported construction modes."""


def _build_tabulated(tabulated: TabulatedCdf) -> InverseCdf:
    return InverseCdf(xmin=tabulated.xmin, xmax=tabulated.xmax, table=invert_cdf(tabulated))


def _dispatch(mode: ConstructionMode) -> InverseCdf:
    if isinstance(mode, FromTable):
        return _build_tabulated(read_tabulated_cdf(mode.path))
    if isinstance(mode, FromSamples):
        return _build_tabulated(TabulatedCdf.from_values(mode.cdf, mode.xmin, mode.xmax))
    if isinstance(mode, FromAnalytic):
        generator = configure_priors_register().get(mode.kind)
        return generator(*mode.params, config=mode.config)
    if isinstance(mode, FromBounds):
        flat = configure_priors_register().get(PriorKind.FLAT)
        return flat(mode.lower_bound, mode.upper_bound)
    raise TypeError(f"Unsupported construction mode: {type(mode).__name__}")


def build(mode: ConstructionMode) -> InverseCdf:
    """
    Build an inverse CDF for the given construction mode.

    Parameters
    ----------
    mode : ConstructionMode
        One of :class:`FromTable`, :class:`FromSamples`,
        :class:`FromAnalytic`, :class:`FromBounds`.

    Returns
    -------
    InverseCdf
        A valid instance, or an invalid one carrying a diagnostic.

    Raises
    ------
    TypeError
        If ``mode`` is not a construction mode.
    """
    try:
        inverse = _dispatch(mode)
    except (OSError, ValueError) as exc:
        diagnostic = f"{type(mode).__name__}: {exc}"
        logger.warning("Inverse CDF construction failed: %s", diagnostic)
        return InverseCdf.invalid(diagnostic)

    logger.debug("Built inverse CDF from %s with %d points", type(mode).__name__, inverse.n_points)
    return inverse


def from_table(path: str | PathLike[str]) -> InverseCdf:
    """Shortcut for ``build(FromTable(path))``."""
    return build(FromTable(path))


def from_samples(cdf: Sequence[Number] | FloatArray, xmin: float, xmax: float) -> InverseCdf:
    """Shortcut for ``build(FromSamples(cdf, xmin, xmax))``."""
    return build(FromSamples(cdf, xmin, xmax))


def from_analytic(
    kind: PriorKind | str,
    a: float | None = None,
    b: float | None = None,
    *,
    config: PriorGridConfig | None = None,
) -> InverseCdf:
    """Shortcut for ``build(FromAnalytic(kind, a, b, config))``."""
    return build(FromAnalytic(kind, a, b, config))


def from_bounds(lower_bound: float, upper_bound: float) -> InverseCdf:
    """Shortcut for ``build(FromBounds(lower_bound, upper_bound))``."""
    return build(FromBounds(lower_bound, upper_bound))
