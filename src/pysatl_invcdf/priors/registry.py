"""
Global registry for analytic prior generators using singleton pattern.

This module implements a centralized registry that maps each
:class:`~pysatl_invcdf.types.PriorKind` to the generator building its
inverse CDF table.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_invcdf.priors.config import DEFAULT_GRID_CONFIG
from pysatl_invcdf.types import PriorKind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ClassVar

    from pysatl_invcdf.inverse.table import InverseCdf
    from pysatl_invcdf.priors.config import PriorGridConfig


@dataclass(frozen=True, slots=True)
class PriorGenerator:
    """
    Analytic prior generator bound to a kind.

    Parameters
    ----------
    kind : PriorKind
        Prior shape this generator builds.
    parameter_names : tuple[str, ...]
        Names of the positional parameters, in order.
    func : Callable[..., InverseCdf]
        Builder called as ``func(*params, config=config)``.
    """

    kind: PriorKind
    parameter_names: tuple[str, ...]
    func: Callable[..., InverseCdf]

    def __call__(self, *params: float, config: PriorGridConfig | None = None) -> InverseCdf:
        """
        Build the inverse CDF table.

        Raises
        ------
        ValueError
            If the number of parameters does not match ``parameter_names``
            or a parameter is not numeric.
        """
        if len(params) != len(self.parameter_names):
            expected = ", ".join(self.parameter_names) or "no parameters"
            raise ValueError(
                f"{self.kind} prior expects {expected}, got {len(params)} parameter(s)"
            )
        try:
            values = tuple(float(p) for p in params)
        except (TypeError, ValueError):
            raise ValueError(
                f"{self.kind} prior parameters must be numeric, got {params!r}"
            ) from None
        return self.func(*values, config=config or DEFAULT_GRID_CONFIG)


class PriorGeneratorRegister:
    """
    Singleton registry for analytic prior generators.

    Maintains a global registry of generators, allowing them to be accessed
    by kind (or by a case-insensitive kind name).
    """

    _instance: ClassVar[PriorGeneratorRegister | None] = None
    _registered_generators: dict[PriorKind, PriorGenerator]

    def __new__(cls) -> PriorGeneratorRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_generators = {}
        return cls._instance

    @classmethod
    def get(cls, kind: PriorKind | str) -> PriorGenerator:
        """
        Retrieve a generator by kind.

        Parameters
        ----------
        kind : PriorKind or str
            Kind of the prior; strings are matched case-insensitively.

        Returns
        -------
        PriorGenerator
            The requested generator.

        Raises
        ------
        ValueError
            If the kind is unknown or has no registered generator.
        """
        self = cls()
        try:
            key = PriorKind(kind)
        except ValueError:
            raise ValueError(f"Unknown prior kind {kind!r}") from None
        if key not in self._registered_generators:
            raise ValueError(f"No prior {key} found in register")
        return self._registered_generators[key]

    @classmethod
    def register(cls, generator: PriorGenerator) -> None:
        """
        Register a new prior generator.

        Raises
        ------
        ValueError
            If a generator for the same kind is already registered.
        """
        self = cls()
        if generator.kind in self._registered_generators:
            raise ValueError(f"Prior {generator.kind} already found in register")
        self._registered_generators[generator.kind] = generator

    @classmethod
    def contains(cls, kind: PriorKind) -> bool:
        """Check whether a generator for ``kind`` is registered."""
        return kind in cls()._registered_generators

    @classmethod
    def kinds(cls) -> tuple[PriorKind, ...]:
        """Kinds with a registered generator, in registration order."""
        return tuple(cls()._registered_generators)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
