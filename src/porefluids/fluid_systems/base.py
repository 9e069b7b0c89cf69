"""Common interface of fluid systems."""

import typing

from porefluids.config import Config
from porefluids.constants import c
from porefluids.errors import ComponentIndexError, PhaseIndexError, ValidationError
from porefluids.parameter_cache import NullParameterCache, ParameterCache
from porefluids.types import FluidState, LhsEval, Scalar

__all__ = ["BaseFluidSystem"]


class BaseFluidSystem:
    """
    Base class of fluid systems.

    A fluid system knows the phases and components of a fluid and how to
    compute the properties of each phase from a fluid state. Concrete fluid
    systems declare `num_phases`, `num_components` and `phase_names`, carry a
    `config`, and override the property methods they support. Everything else
    raises `NotImplementedError` naming the fluid system and the method.

    Property methods take the fluid state, a parameter cache created by
    `create_parameter_cache()`, the phase index (and, where relevant, the
    component index) and an optional `lhs_eval`, the evaluation type of the
    result (`float`, `Evaluation`, or None for the scalar type of the fluid state).
    """

    num_phases: typing.ClassVar[int] = 0
    num_components: typing.ClassVar[int] = 0
    phase_names: typing.ClassVar[typing.Tuple[str, ...]] = ()
    parameter_cache_type: typing.ClassVar[typing.Type[ParameterCache]] = NullParameterCache
    """Type of the parameter cache property methods expect."""

    config: Config

    def _not_implemented(self, method: str) -> NotImplementedError:
        return NotImplementedError(
            f"{type(self).__name__}.{method} is not implemented"
        )

    def check_phase_index(self, phase_idx: int) -> None:
        """Raise `PhaseIndexError` for an out-of-range phase index, if checks are enabled."""
        if self.config.validate_indices and not 0 <= phase_idx < self.num_phases:
            raise PhaseIndexError(
                f"Phase index {phase_idx} out of range [0, {self.num_phases})"
            )

    def check_component_index(self, comp_idx: int) -> None:
        """Raise `ComponentIndexError` for an out-of-range component index, if checks are enabled."""
        if self.config.validate_indices and not 0 <= comp_idx < self.num_components:
            raise ComponentIndexError(
                f"Component index {comp_idx} out of range [0, {self.num_components})"
            )

    def unknown_component(self, comp_idx: int, quantity: str) -> float:
        """
        Result of a static component lookup for an unrecognised index.

        Returns `c.UNKNOWN_COMPONENT_SENTINEL` or raises `ComponentIndexError`,
        depending on `config.unknown_component_policy`.
        """
        if self.config.unknown_component_policy == "raise":
            raise ComponentIndexError(
                f"No {quantity} for unknown component index {comp_idx} "
                f"(valid range [0, {self.num_components}))"
            )
        return c.UNKNOWN_COMPONENT_SENTINEL

    @staticmethod
    def resolve_lhs(fluid_state: FluidState, lhs_eval: LhsEval) -> LhsEval:
        """Evaluation type of a property call; defaults to that of the fluid state."""
        if lhs_eval is not None:
            return lhs_eval
        return getattr(fluid_state, "scalar_type", None)

    def create_parameter_cache(self) -> ParameterCache:
        """Create a parameter cache suitable for this fluid system."""
        return self.parameter_cache_type(self.num_phases)

    # Phases and components

    def phase_name(self, phase_idx: int) -> str:
        self.check_phase_index(phase_idx)
        return self.phase_names[phase_idx]

    def phase_index(self, name: str) -> int:
        """Index of the phase called `name`."""
        try:
            return self.phase_names.index(name)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown phase {name!r}, expected one of {self.phase_names}"
            ) from exc

    def component_name(self, comp_idx: int) -> str:
        raise self._not_implemented("component_name")

    def component_index(self, name: str) -> int:
        """Index of the component called `name`."""
        names = tuple(self.component_name(idx) for idx in range(self.num_components))
        try:
            return names.index(name)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown component {name!r}, expected one of {names}"
            ) from exc

    def is_liquid(self, phase_idx: int) -> bool:
        raise self._not_implemented("is_liquid")

    def is_ideal_mixture(self, phase_idx: int) -> bool:
        raise self._not_implemented("is_ideal_mixture")

    def is_compressible(self, phase_idx: int) -> bool:
        raise self._not_implemented("is_compressible")

    def is_ideal_gas(self, phase_idx: int) -> bool:
        raise self._not_implemented("is_ideal_gas")

    def molar_mass(self, comp_idx: int) -> float:
        raise self._not_implemented("molar_mass")

    def init(self, *args: typing.Any, **kwargs: typing.Any) -> None:
        """Initialise the fluid system's static parameters. Nothing to do by default."""

    # Properties

    def density(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Density of a fluid phase (kg/m³)."""
        raise self._not_implemented("density")

    def fugacity_coefficient(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        comp_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Fugacity coefficient of a component in a phase (dimensionless)."""
        raise self._not_implemented("fugacity_coefficient")

    def viscosity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Dynamic viscosity of a fluid phase (Pa·s)."""
        raise self._not_implemented("viscosity")

    def diffusion_coefficient(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        comp_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Binary diffusion coefficient of a component in a phase (m²/s)."""
        raise self._not_implemented("diffusion_coefficient")

    def enthalpy(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Specific enthalpy of a fluid phase (J/kg)."""
        raise self._not_implemented("enthalpy")

    def thermal_conductivity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Thermal conductivity of a fluid phase (W/(m·K))."""
        raise self._not_implemented("thermal_conductivity")

    def heat_capacity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """Specific isobaric heat capacity of a fluid phase (J/(kg·K))."""
        raise self._not_implemented("heat_capacity")
