import typing

import numpy as np
from typing_extensions import TypeAlias

if typing.TYPE_CHECKING:
    from porefluids.toolbox import Evaluation


__all__ = [
    "Scalar",
    "LhsEval",
    "OneDimensionalGrid",
    "TwoDimensionalGrid",
    "UnknownComponentPolicy",
    "WaterModel",
    "FluidState",
]

Scalar: TypeAlias = typing.Union[float, "Evaluation"]
"""A value as seen by the mixing rules: a plain float or an `Evaluation`."""

LhsEval: TypeAlias = typing.Optional[typing.Type[typing.Any]]
"""
Requested evaluation type of a property call.

- `float`: strip derivatives from the result
- `Evaluation`: carry derivatives, promoting plain inputs to constants
- `None`: use the scalar type of the fluid state
"""

OneDimensionalGrid = np.ndarray[typing.Tuple[int], np.dtype[np.floating]]
"""1D grid, e.g. a vapour pressure table over temperature."""
TwoDimensionalGrid = np.ndarray[typing.Tuple[int, int], np.dtype[np.floating]]
"""2D grid over (temperature, pressure)."""

UnknownComponentPolicy = typing.Literal["sentinel", "raise"]
"""
What static component lookups do for an unrecognised component index.

- "sentinel": return `c.UNKNOWN_COMPONENT_SENTINEL`
- "raise": raise `ComponentIndexError`
"""

WaterModel = typing.Literal["simple", "iapws"]
"""Available water models: closed-form simple water, or IAPWS-95 via CoolProp."""


@typing.runtime_checkable
class FluidState(typing.Protocol):
    """
    Protocol for the thermodynamic state a fluid system evaluates properties for.

    All quantities are per phase and may be plain floats or `Evaluation`s.
    """

    def temperature(self, phase_idx: int, /) -> Scalar:
        """Temperature of the phase (K)."""
        ...

    def pressure(self, phase_idx: int, /) -> Scalar:
        """Pressure of the phase (Pa)."""
        ...

    def mole_fraction(self, phase_idx: int, comp_idx: int, /) -> Scalar:
        """Mole fraction of a component in the phase (fraction)."""
        ...

    def mass_fraction(self, phase_idx: int, comp_idx: int, /) -> Scalar:
        """Mass fraction of a component in the phase (fraction)."""
        ...

    def average_molar_mass(self, phase_idx: int, /) -> Scalar:
        """Mole-fraction weighted molar mass of the phase (kg/mol)."""
        ...
