"""Fluid-state container fluid systems evaluate their properties for."""

import math
import typing

from porefluids import toolbox
from porefluids.constants import c
from porefluids.errors import ComponentIndexError, PhaseIndexError, ValidationError
from porefluids.types import Scalar

__all__ = ["CompositionalFluidState"]


def _check_finite(name: str, value: Scalar) -> None:
    if not math.isfinite(toolbox.value_of(value)):
        raise ValidationError(f"{name} must be finite, got {value!r}")


class CompositionalFluidState:
    """
    Temperature, pressure and composition of every phase of a fluid.

    Stores temperature, pressure and mole fractions per phase; mass fractions
    and the average molar mass are derived from the mole fractions and the
    components' molar masses. Values may be floats or `Evaluation`s.

    Mole fractions are taken as given: they are neither clipped nor renormalised,
    so the (possibly slightly negative) iterates of a nonlinear solver are
    represented faithfully.

    Example:
    ```python
    state = CompositionalFluidState(2, molar_masses=(18e-3, 28.0134e-3))
    state.set_temperature(300.0)
    state.set_pressure(GAS_PHASE_IDX, 1e5)
    state.set_mole_fraction(GAS_PHASE_IDX, N2_IDX, 1.0)
    ```
    """

    def __init__(
        self, num_phases: int, molar_masses: typing.Sequence[float]
    ) -> None:
        """
        :param num_phases: Number of phases
        :param molar_masses: Molar mass of every component (kg/mol)
        """
        if num_phases < 1:
            raise ValidationError("A fluid state needs at least one phase")
        if not molar_masses:
            raise ValidationError("A fluid state needs at least one component")
        if any(molar_mass <= 0.0 for molar_mass in molar_masses):
            raise ValidationError("Molar masses must be positive")

        self.num_phases = num_phases
        self.num_components = len(molar_masses)
        self.molar_masses: typing.Tuple[float, ...] = tuple(
            float(molar_mass) for molar_mass in molar_masses
        )
        self._temperatures: typing.List[Scalar] = [0.0] * num_phases
        self._pressures: typing.List[Scalar] = [0.0] * num_phases
        self._mole_fractions: typing.List[typing.List[Scalar]] = [
            [0.0] * self.num_components for _ in range(num_phases)
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(temperatures={self._temperatures!r}, "
            f"pressures={self._pressures!r}, mole_fractions={self._mole_fractions!r})"
        )

    def _check_phase(self, phase_idx: int) -> None:
        if not 0 <= phase_idx < self.num_phases:
            raise PhaseIndexError(
                f"Phase index {phase_idx} out of range [0, {self.num_phases})"
            )

    def _check_component(self, comp_idx: int) -> None:
        if not 0 <= comp_idx < self.num_components:
            raise ComponentIndexError(
                f"Component index {comp_idx} out of range [0, {self.num_components})"
            )

    @property
    def scalar_type(self) -> type:
        """`Evaluation` if any stored quantity carries derivatives, else `float`."""
        return toolbox.scalar_type_of(
            *self._temperatures,
            *self._pressures,
            *(x for phase in self._mole_fractions for x in phase),
        )

    def set_temperature(self, *args: typing.Any) -> None:
        """
        Set the temperature (K).

        `set_temperature(value)` sets it for every phase,
        `set_temperature(phase_idx, value)` for one phase.
        """
        if len(args) == 1:
            (value,) = args
            _check_finite("Temperature", value)
            self._temperatures = [value] * self.num_phases
            return
        if len(args) == 2:
            phase_idx, value = args
            self._check_phase(phase_idx)
            _check_finite("Temperature", value)
            self._temperatures[phase_idx] = value
            return
        raise TypeError(
            f"set_temperature() takes 1 or 2 arguments ({len(args)} given)"
        )

    def set_pressure(self, phase_idx: int, value: Scalar) -> None:
        """Set the pressure of a phase (Pa)."""
        self._check_phase(phase_idx)
        _check_finite("Pressure", value)
        self._pressures[phase_idx] = value

    def set_mole_fraction(self, phase_idx: int, comp_idx: int, value: Scalar) -> None:
        """Set the mole fraction of a component in a phase."""
        self._check_phase(phase_idx)
        self._check_component(comp_idx)
        _check_finite("Mole fraction", value)
        self._mole_fractions[phase_idx][comp_idx] = value

    def temperature(self, phase_idx: int) -> Scalar:
        self._check_phase(phase_idx)
        return self._temperatures[phase_idx]

    def pressure(self, phase_idx: int) -> Scalar:
        self._check_phase(phase_idx)
        return self._pressures[phase_idx]

    def mole_fraction(self, phase_idx: int, comp_idx: int) -> Scalar:
        self._check_phase(phase_idx)
        self._check_component(comp_idx)
        return self._mole_fractions[phase_idx][comp_idx]

    def sum_mole_fractions(self, phase_idx: int) -> Scalar:
        self._check_phase(phase_idx)
        total: Scalar = 0.0
        for x in self._mole_fractions[phase_idx]:
            total = total + x
        return total

    def average_molar_mass(self, phase_idx: int) -> Scalar:
        """
        Mole-fraction weighted molar mass of a phase, Σ x_i M_i (kg/mol).

        The mole fractions are not normalised by their sum.
        """
        self._check_phase(phase_idx)
        total: Scalar = 0.0
        for x, molar_mass in zip(self._mole_fractions[phase_idx], self.molar_masses):
            total = total + x * molar_mass
        return total

    def mass_fraction(self, phase_idx: int, comp_idx: int) -> Scalar:
        """
        Mass fraction of a component in a phase.

        X_i = |Σx| x_i M_i / max(ε, |M̄|), which equals x_i M_i / M̄ for normalised
        compositions and stays finite for empty phases.
        """
        self._check_component(comp_idx)
        average_molar_mass = self.average_molar_mass(phase_idx)
        return (
            toolbox.abs_(self.sum_mole_fractions(phase_idx))
            * self._mole_fractions[phase_idx][comp_idx]
            * self.molar_masses[comp_idx]
            / toolbox.max_(c.AVERAGE_MOLAR_MASS_FLOOR, toolbox.abs_(average_molar_mass))
        )
