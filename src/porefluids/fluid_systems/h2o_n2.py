"""Two-phase fluid system of water and molecular nitrogen."""

import logging
import math
import typing

import attrs

from porefluids import toolbox
from porefluids.binary_coefficients import H2ON2Coefficients
from porefluids.components.base import Component
from porefluids.components.ideal_gas import IdealGas
from porefluids.components.n2 import N2
from porefluids.components.simple_h2o import SimpleH2O
from porefluids.components.tabulated import TabulatedComponent
from porefluids.config import Config
from porefluids.constants import c
from porefluids.fluid_systems.base import BaseFluidSystem
from porefluids.parameter_cache import ParameterCache
from porefluids.types import FluidState, LhsEval, Scalar

logger = logging.getLogger(__name__)

__all__ = [
    "H2ON2FluidSystem",
    "LIQUID_PHASE_IDX",
    "GAS_PHASE_IDX",
    "H2O_IDX",
    "N2_IDX",
]

LIQUID_PHASE_IDX = 0
GAS_PHASE_IDX = 1
H2O_IDX = 0
N2_IDX = 1


def _default_binary_coefficients(system: "H2ON2FluidSystem") -> H2ON2Coefficients:
    # Tables of a tabulated water model may not be built yet; use the wrapped model
    water = system.water
    if isinstance(water, TabulatedComponent):
        water = water.raw
    return H2ON2Coefficients(water=water, nitrogen=system.nitrogen)


@attrs.frozen
class H2ON2FluidSystem(BaseFluidSystem):
    """
    A two-phase fluid system of water and molecular nitrogen.

    Phases: liquid (index 0) and gas (index 1). Components: H2O (index 0) and
    N2 (index 1). Both phases are treated as ideal mixtures. Nitrogen dissolves
    in the liquid after Henry's law, water evaporates after Raoult's law.

    With `use_complex_relations=False` the liquid is pure water and the gas
    properties come from the ideal-gas law, dry nitrogen, or closed-form ideal
    heat capacities. With `use_complex_relations=True` (default) the liquid
    density accounts for dissolved nitrogen, gas properties are summed over the
    partial pressures of the components, and the gas viscosity follows Wilke's
    mixing rule.

    Every property method accepts an `lhs_eval` argument selecting the type of
    its result: `float`, `Evaluation`, or None (the scalar type of the fluid
    state). All fluid-state quantities are converted to that type first, so the
    derivatives of the result are consistent with the inputs.

    Example:
    ```python
    fluid_system = H2ON2FluidSystem(water=TabulatedComponent(IAPWSH2O()))
    fluid_system.init()
    cache = fluid_system.create_parameter_cache()
    rho = fluid_system.density(fluid_state, cache, GAS_PHASE_IDX)
    ```
    """

    num_phases: typing.ClassVar[int] = 2
    num_components: typing.ClassVar[int] = 2
    phase_names: typing.ClassVar[typing.Tuple[str, ...]] = ("liquid", "gas")

    LIQUID_PHASE_IDX: typing.ClassVar[int] = LIQUID_PHASE_IDX
    GAS_PHASE_IDX: typing.ClassVar[int] = GAS_PHASE_IDX
    H2O_IDX: typing.ClassVar[int] = H2O_IDX
    N2_IDX: typing.ClassVar[int] = N2_IDX

    water: Component = attrs.field(
        factory=SimpleH2O, validator=attrs.validators.instance_of(Component)
    )
    """Pure water model (simple, IAPWS or a tabulated wrapper of either)."""
    nitrogen: Component = attrs.field(
        factory=N2, validator=attrs.validators.instance_of(Component)
    )
    """Pure nitrogen model."""
    binary_coefficients: H2ON2Coefficients = attrs.field(
        default=attrs.Factory(_default_binary_coefficients, takes_self=True)
    )
    """Henry coefficient and diffusion coefficients of the H2O-N2 pair."""
    use_complex_relations: bool = True
    """Whether to use the physically more elaborate mixing rules."""
    config: Config = attrs.field(factory=Config)

    def __attrs_post_init__(self) -> None:
        # The wrapper is shared mutable state; the flag can only be switched on here
        if self.config.warn_on_extrapolation and isinstance(
            self.water, TabulatedComponent
        ):
            self.water.warn_on_extrapolation = True
        logger.debug(
            f"H2ON2FluidSystem configured: water={self.water!r}, nitrogen={self.nitrogen!r}, "
            f"complex relations={self.use_complex_relations}"
        )

    # Phases and components

    def is_liquid(self, phase_idx: int) -> bool:
        self.check_phase_index(phase_idx)
        return phase_idx != GAS_PHASE_IDX

    def is_compressible(self, phase_idx: int) -> bool:
        self.check_phase_index(phase_idx)
        if phase_idx == GAS_PHASE_IDX:
            # gases are always compressible
            return True
        return self.water.liquid_is_compressible()

    def is_ideal_gas(self, phase_idx: int) -> bool:
        self.check_phase_index(phase_idx)
        if phase_idx == GAS_PHASE_IDX:
            return self.water.gas_is_ideal() and self.nitrogen.gas_is_ideal()
        return False

    def is_ideal_mixture(self, phase_idx: int) -> bool:
        # Henry's and Raoult's law in the liquid, no interaction in the gas
        self.check_phase_index(phase_idx)
        return True

    def component_name(self, comp_idx: int) -> str:
        self.check_component_index(comp_idx)
        return (self.water.name(), self.nitrogen.name())[comp_idx]

    def _component(self, comp_idx: int) -> typing.Optional[Component]:
        if comp_idx == H2O_IDX:
            return self.water
        if comp_idx == N2_IDX:
            return self.nitrogen
        return None

    def molar_mass(self, comp_idx: int) -> float:
        """Molar mass of a component (kg/mol)."""
        component = self._component(comp_idx)
        if component is None:
            return self.unknown_component(comp_idx, "molar mass")
        return component.molar_mass()

    def critical_temperature(self, comp_idx: int) -> float:
        """Critical temperature of a component (K)."""
        component = self._component(comp_idx)
        if component is None:
            return self.unknown_component(comp_idx, "critical temperature")
        return component.critical_temperature()

    def critical_pressure(self, comp_idx: int) -> float:
        """Critical pressure of a component (Pa)."""
        component = self._component(comp_idx)
        if component is None:
            return self.unknown_component(comp_idx, "critical pressure")
        return component.critical_pressure()

    def acentric_factor(self, comp_idx: int) -> float:
        """Acentric factor of a component."""
        component = self._component(comp_idx)
        if component is None:
            return self.unknown_component(comp_idx, "acentric factor")
        return component.acentric_factor()

    def init(
        self,
        temperature_min: typing.Optional[float] = None,
        temperature_max: typing.Optional[float] = None,
        num_temperatures: typing.Optional[int] = None,
        pressure_min: typing.Optional[float] = None,
        pressure_max: typing.Optional[float] = None,
        num_pressures: typing.Optional[int] = None,
    ) -> None:
        """
        Initialise the fluid system's static parameters.

        Builds the tables of the water component if it is tabulated, and does
        nothing otherwise. Must be called before the first property evaluation
        when a tabulated water model is used, and must not run concurrently with
        property evaluations. Calling it again rebuilds the tables.

        Omitted arguments fall back to the defaults in `porefluids.constants`
        (273.15-623.15 K in 100 points, 0-20 MPa in 200 points).

        :param temperature_min: Lowest tabulated temperature (K)
        :param temperature_max: Highest tabulated temperature (K)
        :param num_temperatures: Number of temperature sampling points
        :param pressure_min: Lowest tabulated pressure (Pa)
        :param pressure_max: Highest tabulated pressure (Pa)
        :param num_pressures: Number of pressure sampling points
        """
        if temperature_min is None:
            temperature_min = c.DEFAULT_TABULATION_MIN_TEMPERATURE
        if temperature_max is None:
            temperature_max = c.DEFAULT_TABULATION_MAX_TEMPERATURE
        if num_temperatures is None:
            num_temperatures = int(c.DEFAULT_TABULATION_TEMPERATURE_POINTS)
        if pressure_min is None:
            pressure_min = c.DEFAULT_TABULATION_MIN_PRESSURE
        if pressure_max is None:
            pressure_max = c.DEFAULT_TABULATION_MAX_PRESSURE
        if num_pressures is None:
            num_pressures = int(c.DEFAULT_TABULATION_PRESSURE_POINTS)

        if not self.water.is_tabulated:
            logger.info(
                f"H2ON2FluidSystem initialized; water model {self.water!r} is not tabulated"
            )
            return

        logger.info(
            f"Initializing H2ON2FluidSystem: tabulating water over "
            f"T ∈ [{temperature_min:.2f}, {temperature_max:.2f}] K, "
            f"p ∈ [{pressure_min:.1f}, {pressure_max:.1f}] Pa"
        )
        self.water.init(  # type: ignore[attr-defined]
            temperature_min,
            temperature_max,
            num_temperatures,
            pressure_min,
            pressure_max,
            num_pressures,
        )

    # Fluid-state access

    @staticmethod
    def _temperature_and_pressure(
        fluid_state: FluidState, phase_idx: int, lhs: LhsEval
    ) -> typing.Tuple[Scalar, Scalar]:
        return (
            toolbox.to_lhs(fluid_state.temperature(phase_idx), lhs),
            toolbox.to_lhs(fluid_state.pressure(phase_idx), lhs),
        )

    @staticmethod
    def _mole_fractions(
        fluid_state: FluidState, phase_idx: int, lhs: LhsEval
    ) -> typing.Tuple[Scalar, Scalar]:
        return (
            toolbox.to_lhs(fluid_state.mole_fraction(phase_idx, H2O_IDX), lhs),
            toolbox.to_lhs(fluid_state.mole_fraction(phase_idx, N2_IDX), lhs),
        )

    @staticmethod
    def _mass_fractions(
        fluid_state: FluidState, phase_idx: int, lhs: LhsEval
    ) -> typing.Tuple[Scalar, Scalar]:
        return (
            toolbox.to_lhs(fluid_state.mass_fraction(phase_idx, H2O_IDX), lhs),
            toolbox.to_lhs(fluid_state.mass_fraction(phase_idx, N2_IDX), lhs),
        )

    # Properties

    def density(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Density of a fluid phase (kg/m³).

        Liquid: pure water, or (complex) the molar-volume weighted mixture where
        every dissolved nitrogen molecule displaces exactly one water molecule
        (Ochs, 2008). Gas: ideal gas of the phase's average molar mass, or
        (complex) the sum of the pure-component densities at their partial
        pressures. Mole-fraction sums are floored at
        `c.DENSITY_MOLE_FRACTION_FLOOR`.
        """
        self.check_phase_index(phase_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)
        x_h2o, x_n2 = self._mole_fractions(fluid_state, phase_idx, lhs)
        sum_mole_fractions = toolbox.max_(
            c.DENSITY_MOLE_FRACTION_FLOOR, x_h2o + x_n2
        )

        if phase_idx == LIQUID_PHASE_IDX:
            rho_h2o = self.water.liquid_density(T, p)
            if not self.use_complex_relations:
                return toolbox.to_lhs(rho_h2o, lhs)

            molar_mass_h2o = self.water.molar_mass()
            concentration_h2o = rho_h2o / molar_mass_h2o
            result = (
                concentration_h2o
                * (molar_mass_h2o * x_h2o + self.nitrogen.molar_mass() * x_n2)
                / sum_mole_fractions
            )
            return toolbox.to_lhs(result, lhs)

        if not self.use_complex_relations:
            average_molar_mass = toolbox.to_lhs(
                fluid_state.average_molar_mass(phase_idx), lhs
            )
            result = IdealGas.density(average_molar_mass, T, p) / sum_mole_fractions
            return toolbox.to_lhs(result, lhs)

        # steam and nitrogen don't "see" each other
        rho_h2o = self.water.gas_density(T, p * x_h2o)
        rho_n2 = self.nitrogen.gas_density(T, p * x_n2)
        return toolbox.to_lhs((rho_h2o + rho_n2) / sum_mole_fractions, lhs)

    def viscosity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Dynamic viscosity of a fluid phase (Pa·s).

        Liquid: pure water. Gas: pure nitrogen, or (complex) Wilke's mixing rule
        with the steam viscosity evaluated at the vapour pressure of water and
        the nitrogen viscosity at the phase pressure.

        Reference:
            Reid, R.C., Prausnitz, J.M., Poling, B.E. (1987). "The Properties of
            Gases and Liquids", 4th edition, McGraw-Hill, p. 407.
        """
        self.check_phase_index(phase_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)

        if phase_idx == LIQUID_PHASE_IDX:
            return toolbox.to_lhs(self.water.liquid_viscosity(T, p), lhs)
        if not self.use_complex_relations:
            return toolbox.to_lhs(self.nitrogen.gas_viscosity(T, p), lhs)

        mu = (
            self.water.gas_viscosity(T, self.water.vapor_pressure(T)),
            self.nitrogen.gas_viscosity(T, p),
        )
        molar_masses = (self.water.molar_mass(), self.nitrogen.molar_mass())
        x = self._mole_fractions(fluid_state, phase_idx, lhs)
        sum_x = toolbox.max_(c.VISCOSITY_MOLE_FRACTION_FLOOR, x[0] + x[1])

        result: Scalar = 0.0
        for i in range(self.num_components):
            divisor: Scalar = 0.0
            for j in range(self.num_components):
                phi_ij = 1.0 + toolbox.sqrt(mu[i] / mu[j]) * math.pow(
                    molar_masses[j] / molar_masses[i], 0.25
                )
                phi_ij = phi_ij * phi_ij
                phi_ij = phi_ij / math.sqrt(
                    8.0 * (1.0 + molar_masses[i] / molar_masses[j])
                )
                divisor = divisor + x[j] / sum_x * phi_ij
            # Only zero when the phase holds no component at all
            if divisor == 0.0:
                continue
            result = result + x[i] / sum_x * mu[i] / divisor
        return toolbox.to_lhs(result, lhs)

    def fugacity_coefficient(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        comp_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Fugacity coefficient of a component in a phase.

        Liquid water follows Raoult's law (p_vap / p), dissolved nitrogen Henry's
        law (H / p). The gas phase is an ideal gas, so every gas-phase component
        has a fugacity coefficient of exactly 1.
        """
        self.check_phase_index(phase_idx)
        self.check_component_index(comp_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)

        if phase_idx == GAS_PHASE_IDX:
            return toolbox.to_lhs(1.0, lhs)

        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)
        if comp_idx == H2O_IDX:
            return toolbox.to_lhs(self.water.vapor_pressure(T) / p, lhs)
        return toolbox.to_lhs(self.binary_coefficients.henry(T) / p, lhs)

    def diffusion_coefficient(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        comp_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Binary diffusion coefficient of the H2O-N2 pair in a phase (m²/s).

        With two components there is a single diffusing pair, so `comp_idx` is
        only validated; every component gets the same coefficient.
        """
        self.check_phase_index(phase_idx)
        self.check_component_index(comp_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)

        if phase_idx == LIQUID_PHASE_IDX:
            result = self.binary_coefficients.liquid_diffusion_coefficient(T, p)
        else:
            result = self.binary_coefficients.gas_diffusion_coefficient(T, p)
        return toolbox.to_lhs(result, lhs)

    def enthalpy(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Specific enthalpy of a fluid phase (J/kg).

        Liquid: pure water, dissolved nitrogen is not accounted for. Gas: mass
        fraction weighted sum of the pure-component enthalpies (no enthalpy of
        mixing).
        """
        self.check_phase_index(phase_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)

        if phase_idx == LIQUID_PHASE_IDX:
            return toolbox.to_lhs(self.water.liquid_enthalpy(T, p), lhs)

        X_h2o, X_n2 = self._mass_fractions(fluid_state, phase_idx, lhs)
        h_h2o = X_h2o * self.water.gas_enthalpy(T, p)
        h_n2 = X_n2 * self.nitrogen.gas_enthalpy(T, p)
        return toolbox.to_lhs(h_h2o + h_n2, lhs)

    def thermal_conductivity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Thermal conductivity of a fluid phase (W/(m·K)).

        Liquid: pure water. Gas: dry nitrogen, or (complex) the sum of the
        conductivities of steam and nitrogen at their partial pressures.
        """
        self.check_phase_index(phase_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)

        if phase_idx == LIQUID_PHASE_IDX:
            return toolbox.to_lhs(self.water.liquid_thermal_conductivity(T, p), lhs)
        if not self.use_complex_relations:
            return toolbox.to_lhs(self.nitrogen.gas_thermal_conductivity(T, p), lhs)

        x_h2o, x_n2 = self._mole_fractions(fluid_state, phase_idx, lhs)
        lambda_n2 = self.nitrogen.gas_thermal_conductivity(T, p * x_n2)
        lambda_h2o = self.water.gas_thermal_conductivity(T, p * x_h2o)
        return toolbox.to_lhs(lambda_n2 + lambda_h2o, lhs)

    def heat_capacity(
        self,
        fluid_state: FluidState,
        param_cache: ParameterCache,
        phase_idx: int,
        lhs_eval: LhsEval = None,
    ) -> Scalar:
        """
        Specific isobaric heat capacity of a fluid phase (J/(kg·K)).

        Liquid: pure water. Gas: mass fraction weighted sum of the component heat
        capacities, taken from the component models at the partial pressures
        (complex) or from the ideal-gas relation c_p = R + c_v with
        c_v = 2.39 R for nitrogen and c_v = 3.37 R for steam.
        """
        self.check_phase_index(phase_idx)
        lhs = self.resolve_lhs(fluid_state, lhs_eval)
        T, p = self._temperature_and_pressure(fluid_state, phase_idx, lhs)

        if phase_idx == LIQUID_PHASE_IDX:
            return toolbox.to_lhs(self.water.liquid_heat_capacity(T, p), lhs)

        X_h2o, X_n2 = self._mass_fractions(fluid_state, phase_idx, lhs)
        if self.use_complex_relations:
            x_h2o, x_n2 = self._mole_fractions(fluid_state, phase_idx, lhs)
            c_p_n2 = self.nitrogen.gas_heat_capacity(T, p * x_n2)
            c_p_h2o = self.water.gas_heat_capacity(T, p * x_h2o)
        else:
            R = c.GAS_CONSTANT
            c_p_n2 = (R + R * c.N2_IDEAL_CV_FACTOR) / self.nitrogen.molar_mass()
            c_p_h2o = (R + R * c.H2O_IDEAL_CV_FACTOR) / self.water.molar_mass()

        return toolbox.to_lhs(X_h2o * c_p_h2o + X_n2 * c_p_n2, lhs)
