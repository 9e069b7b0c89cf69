import logging
import math

import attrs
import pytest

from porefluids import (
    GAS_PHASE_IDX,
    H2O_IDX,
    LIQUID_PHASE_IDX,
    N2_IDX,
    BaseFluidSystem,
    Config,
    Constants,
    H2ON2Coefficients,
    H2ON2FluidSystem,
    IAPWSH2O,
    N2,
    ExceptQuantities,
    NullParameterCache,
    ParameterCache,
    SimpleH2O,
    TabulatedComponent,
    c,
)
from porefluids.errors import ComponentIndexError, PhaseIndexError, ValidationError
from porefluids.toolbox import Evaluation

T = 300.0
P = 1e5


@pytest.fixture
def cache(fluid_system):
    return fluid_system.create_parameter_cache()


class TestRegistry:
    def test_counts(self, fluid_system):
        assert fluid_system.num_phases == 2
        assert fluid_system.num_components == 2
        assert (LIQUID_PHASE_IDX, GAS_PHASE_IDX) == (0, 1)
        assert (H2O_IDX, N2_IDX) == (0, 1)

    def test_names(self, fluid_system):
        assert fluid_system.phase_name(LIQUID_PHASE_IDX) == "liquid"
        assert fluid_system.phase_name(GAS_PHASE_IDX) == "gas"
        assert fluid_system.component_name(H2O_IDX) == "H2O"
        assert fluid_system.component_name(N2_IDX) == "N2"

    @pytest.mark.parametrize("phase_idx", [-1, 2])
    def test_phase_index_out_of_range(self, fluid_system, phase_idx):
        with pytest.raises(PhaseIndexError):
            fluid_system.phase_name(phase_idx)
        with pytest.raises(IndexError):
            fluid_system.is_liquid(phase_idx)

    @pytest.mark.parametrize("comp_idx", [-1, 2])
    def test_component_index_out_of_range(self, fluid_system, comp_idx):
        with pytest.raises(ComponentIndexError):
            fluid_system.component_name(comp_idx)

    def test_reverse_lookups(self, fluid_system):
        assert fluid_system.phase_index("gas") == GAS_PHASE_IDX
        assert fluid_system.component_index("N2") == N2_IDX
        with pytest.raises(ValidationError):
            fluid_system.phase_index("oil")
        with pytest.raises(ValidationError):
            fluid_system.component_index("CO2")

    def test_phase_classification(self, fluid_system):
        assert fluid_system.is_liquid(LIQUID_PHASE_IDX)
        assert not fluid_system.is_liquid(GAS_PHASE_IDX)
        assert fluid_system.is_compressible(GAS_PHASE_IDX)
        assert not fluid_system.is_compressible(LIQUID_PHASE_IDX)
        assert fluid_system.is_ideal_gas(GAS_PHASE_IDX)
        assert not fluid_system.is_ideal_gas(LIQUID_PHASE_IDX)
        assert fluid_system.is_ideal_mixture(LIQUID_PHASE_IDX)
        assert fluid_system.is_ideal_mixture(GAS_PHASE_IDX)

    def test_classification_follows_water_model(self):
        fluid_system = H2ON2FluidSystem(water=IAPWSH2O())
        assert fluid_system.is_compressible(LIQUID_PHASE_IDX)
        assert not fluid_system.is_ideal_gas(GAS_PHASE_IDX)

    def test_component_constants(self, fluid_system):
        assert fluid_system.molar_mass(H2O_IDX) == 18e-3
        assert fluid_system.molar_mass(N2_IDX) == pytest.approx(28.0134e-3)
        assert fluid_system.critical_temperature(H2O_IDX) == pytest.approx(647.096)
        assert fluid_system.critical_pressure(N2_IDX) == pytest.approx(3.39858e6)
        assert fluid_system.acentric_factor(N2_IDX) == pytest.approx(0.039)

    def test_unknown_component_sentinel(self, fluid_system):
        assert fluid_system.molar_mass(2) == 1e100
        assert fluid_system.critical_temperature(2) == c.UNKNOWN_COMPONENT_SENTINEL
        assert fluid_system.critical_pressure(-1) == 1e100
        assert fluid_system.acentric_factor(7) == 1e100

    def test_overridden_constants(self, fluid_system, state_factory):
        constants = Constants()
        constants.UNKNOWN_COMPONENT_SENTINEL = -1.0
        constants.DENSITY_MOLE_FRACTION_FLOOR = 1.0
        state = state_factory(gas=(0.0, 0.5))
        cache = fluid_system.create_parameter_cache()
        with constants():
            assert fluid_system.molar_mass(5) == -1.0
            floored = fluid_system.density(state, cache, GAS_PHASE_IDX)
        assert fluid_system.molar_mass(5) == 1e100
        assert floored == pytest.approx(N2().gas_density(T, 0.5 * P))
        assert fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(
            2.0 * floored
        )

    def test_unknown_component_raises(self):
        fluid_system = H2ON2FluidSystem(config=Config(unknown_component_policy="raise"))
        with pytest.raises(ComponentIndexError):
            fluid_system.molar_mass(2)
        with pytest.raises(ComponentIndexError):
            fluid_system.acentric_factor(-1)

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            Config(unknown_component_policy="ignore")

    def test_disabled_index_checks(self, unchecked_fluid_system):
        assert unchecked_fluid_system.is_liquid(5)
        assert unchecked_fluid_system.is_ideal_mixture(-3)

    def test_configuration_is_frozen(self, fluid_system):
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            fluid_system.use_complex_relations = False

    def test_parameter_cache(self, fluid_system, state_factory):
        cache = fluid_system.create_parameter_cache()
        assert isinstance(cache, NullParameterCache)
        state = state_factory()
        cache.update_all(state)
        cache.update_single_mole_fraction(state, GAS_PHASE_IDX, N2_IDX)

    def test_parameter_cache_updates_fan_out_to_phases(self, state_factory):
        class CountingCache(ParameterCache):
            def __init__(self, num_phases):
                super().__init__(num_phases)
                self.calls = []

            def update_phase(self, fluid_state, phase_idx, except_quantities=ExceptQuantities.NONE):
                self.calls.append((phase_idx, except_quantities))

        state = state_factory()
        cache = CountingCache(2)

        cache.update_all(state)
        assert cache.calls == [(0, ExceptQuantities.NONE), (1, ExceptQuantities.NONE)]

        cache.calls.clear()
        cache.update_all_pressures(state)
        assert [phase_idx for phase_idx, _ in cache.calls] == [0, 1]

        cache.calls.clear()
        cache.update_all_temperatures(state)
        assert [phase_idx for phase_idx, _ in cache.calls] == [0, 1]

        cache.calls.clear()
        cache.update_single_mole_fraction(state, GAS_PHASE_IDX, N2_IDX)
        assert cache.calls == [
            (GAS_PHASE_IDX, ExceptQuantities.TEMPERATURE | ExceptQuantities.PRESSURE)
        ]

    def test_default_binary_coefficients_use_raw_water(self):
        water = SimpleH2O()
        fluid_system = H2ON2FluidSystem(water=TabulatedComponent(water))
        assert fluid_system.binary_coefficients.water is water


class TestInit:
    def test_noop_without_tabulated_water(self, fluid_system, caplog):
        with caplog.at_level(logging.INFO, logger="porefluids.fluid_systems.h2o_n2"):
            fluid_system.init()
        assert "not tabulated" in caplog.text

    def test_builds_tables_of_tabulated_water(self, state_factory):
        fluid_system = H2ON2FluidSystem(water=TabulatedComponent(SimpleH2O()))
        assert not fluid_system.water.is_initialized
        fluid_system.init(280.0, 380.0, 5, 1e4, 1e6, 5)
        assert fluid_system.water.is_initialized

        state = state_factory(gas=(0.3, 0.7))
        cache = fluid_system.create_parameter_cache()
        reference = H2ON2FluidSystem(water=SimpleH2O())
        # properties linear in temperature and pressure are reproduced exactly
        assert fluid_system.density(state, cache, LIQUID_PHASE_IDX) == pytest.approx(
            reference.density(state, cache, LIQUID_PHASE_IDX), rel=1e-10
        )
        for phase_idx in (LIQUID_PHASE_IDX, GAS_PHASE_IDX):
            assert fluid_system.enthalpy(state, cache, phase_idx) == pytest.approx(
                reference.enthalpy(state, cache, phase_idx), rel=1e-10
            )
        # ideal steam density goes with 1/T between the nodes
        assert fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(
            reference.density(state, cache, GAS_PHASE_IDX), rel=5e-3
        )

    def test_config_enables_extrapolation_warnings(self, state_factory, caplog):
        fluid_system = H2ON2FluidSystem(
            water=TabulatedComponent(SimpleH2O()),
            config=Config(warn_on_extrapolation=True),
        )
        assert fluid_system.water.warn_on_extrapolation
        fluid_system.init(280.0, 320.0, 3, 1e4, 1e6, 3)

        state = state_factory(temperature=500.0)
        cache = fluid_system.create_parameter_cache()
        with caplog.at_level(logging.WARNING, logger="porefluids.components.tabulated"):
            viscosity = fluid_system.viscosity(state, cache, LIQUID_PHASE_IDX)
        assert viscosity == SimpleH2O().liquid_viscosity(500.0, 1e5)
        assert "outside the tabulated range" in caplog.text

    def test_extrapolation_warnings_off_by_default(self, state_factory, caplog):
        fluid_system = H2ON2FluidSystem(water=TabulatedComponent(SimpleH2O()))
        assert not fluid_system.water.warn_on_extrapolation
        fluid_system.init(280.0, 320.0, 3, 1e4, 1e6, 3)

        state = state_factory(temperature=500.0)
        cache = fluid_system.create_parameter_cache()
        with caplog.at_level(logging.WARNING, logger="porefluids.components.tabulated"):
            fluid_system.viscosity(state, cache, LIQUID_PHASE_IDX)
        assert "outside the tabulated range" not in caplog.text

    def test_default_bounds(self):
        water = TabulatedComponent(SimpleH2O())
        H2ON2FluidSystem(water=water).init()
        tables = water._tables
        assert (tables.temperature_min, tables.temperature_max) == (273.15, 623.15)
        assert (tables.pressure_min, tables.pressure_max) == (0.0, 20e6)
        assert tables.properties["liquid_density"].shape == (100, 200)


class TestDensity:
    def test_pure_water_liquid_density_in_complex_mode(self, fluid_system, cache, state_factory):
        state = state_factory(liquid=(1.0, 0.0))
        expected = fluid_system.water.liquid_density(T, P)
        assert fluid_system.density(state, cache, LIQUID_PHASE_IDX) == pytest.approx(
            expected, rel=1e-9
        )

    def test_pure_water_liquid_density_with_iapws_water(self, state_factory):
        water = IAPWSH2O()
        fluid_system = H2ON2FluidSystem(water=water)
        state = state_factory(liquid=(1.0, 0.0))
        cache = fluid_system.create_parameter_cache()
        assert fluid_system.density(state, cache, LIQUID_PHASE_IDX) == pytest.approx(
            water.liquid_density(T, P), rel=1e-9
        )

    def test_dissolved_nitrogen_displaces_water(self, fluid_system, cache, state_factory):
        state = state_factory(liquid=(0.9, 0.1))
        expected = 1000.0 / 18e-3 * (18e-3 * 0.9 + 28.0134e-3 * 0.1)
        assert fluid_system.density(state, cache, LIQUID_PHASE_IDX) == pytest.approx(
            expected
        )

    def test_simple_liquid_density_ignores_composition(
        self, simple_fluid_system, state_factory
    ):
        cache = simple_fluid_system.create_parameter_cache()
        state = state_factory(liquid=(0.9, 0.1))
        assert simple_fluid_system.density(state, cache, LIQUID_PHASE_IDX) == 1000.0

    def test_pure_nitrogen_gas_agrees_in_both_modes(
        self, fluid_system, simple_fluid_system, state_factory
    ):
        state = state_factory(temperature=350.0, pressure=3e6, gas=(0.0, 1.0))
        cache = fluid_system.create_parameter_cache()
        expected = N2().gas_density(350.0, 3e6)
        assert simple_fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(
            expected, rel=1e-12
        )
        assert fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(
            expected, rel=1e-12
        )

    def test_gas_density_is_sum_of_partial_densities(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        expected = SimpleH2O().gas_density(T, 0.5 * P) + N2().gas_density(T, 0.5 * P)
        assert fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(expected)

    def test_simple_gas_density_uses_average_molar_mass(
        self, simple_fluid_system, state_factory
    ):
        state = state_factory(gas=(0.5, 0.5))
        cache = simple_fluid_system.create_parameter_cache()
        average_molar_mass = 0.5 * 18e-3 + 0.5 * 28.0134e-3
        expected = P * average_molar_mass / (c.GAS_CONSTANT * T)
        assert simple_fluid_system.density(state, cache, GAS_PHASE_IDX) == pytest.approx(
            expected
        )


class TestViscosity:
    def test_liquid(self, fluid_system, cache, state_factory):
        assert fluid_system.viscosity(state_factory(), cache, LIQUID_PHASE_IDX) == 1e-3

    def test_simple_gas_is_pure_nitrogen(self, simple_fluid_system, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        cache = simple_fluid_system.create_parameter_cache()
        assert simple_fluid_system.viscosity(state, cache, GAS_PHASE_IDX) == pytest.approx(
            N2().gas_viscosity(T, P)
        )

    def test_wilke_reduces_to_pure_nitrogen(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.0, 1.0))
        assert fluid_system.viscosity(state, cache, GAS_PHASE_IDX) == pytest.approx(
            N2().gas_viscosity(T, P), rel=1e-12
        )

    def test_wilke_mixture(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.3, 0.7))
        water, nitrogen = SimpleH2O(), N2()
        mu = (
            water.gas_viscosity(T, water.vapor_pressure(T)),
            nitrogen.gas_viscosity(T, P),
        )
        M = (water.molar_mass(), nitrogen.molar_mass())
        x = (0.3, 0.7)

        expected = 0.0
        for i in range(2):
            divisor = 0.0
            for j in range(2):
                phi = (1.0 + math.sqrt(mu[i] / mu[j]) * (M[j] / M[i]) ** 0.25) ** 2
                phi /= math.sqrt(8.0 * (1.0 + M[i] / M[j]))
                divisor += x[j] * phi
            expected += x[i] * mu[i] / divisor

        result = fluid_system.viscosity(state, cache, GAS_PHASE_IDX)
        assert result == pytest.approx(expected, rel=1e-12)
        assert min(mu) < result < max(mu)


class TestFugacityCoefficient:
    @pytest.mark.parametrize("comp_idx", [H2O_IDX, N2_IDX])
    def test_gas_is_exactly_one(self, fluid_system, cache, state_factory, comp_idx):
        state = state_factory(gas=(0.5, 0.5))
        result = fluid_system.fugacity_coefficient(state, cache, GAS_PHASE_IDX, comp_idx)
        assert result == 1.0
        assert type(result) is float

    def test_raoult_for_liquid_water(self, fluid_system, cache, state_factory):
        result = fluid_system.fugacity_coefficient(
            state_factory(), cache, LIQUID_PHASE_IDX, H2O_IDX
        )
        assert result == pytest.approx(SimpleH2O().vapor_pressure(T) / P)

    def test_henry_for_dissolved_nitrogen(self, fluid_system, cache, state_factory):
        result = fluid_system.fugacity_coefficient(
            state_factory(), cache, LIQUID_PHASE_IDX, N2_IDX
        )
        assert result == pytest.approx(H2ON2Coefficients().henry(T) / P)
        # nitrogen is sparingly soluble
        assert result > 1e4

    def test_component_index_is_checked(self, fluid_system, cache, state_factory):
        with pytest.raises(ComponentIndexError):
            fluid_system.fugacity_coefficient(state_factory(), cache, GAS_PHASE_IDX, 2)


class TestDiffusionCoefficient:
    def test_gas(self, fluid_system, cache, state_factory):
        state = state_factory()
        expected = H2ON2Coefficients().gas_diffusion_coefficient(T, P)
        for comp_idx in (H2O_IDX, N2_IDX):
            assert fluid_system.diffusion_coefficient(
                state, cache, GAS_PHASE_IDX, comp_idx
            ) == pytest.approx(expected)

    def test_liquid(self, fluid_system, cache, state_factory):
        state = state_factory()
        for comp_idx in (H2O_IDX, N2_IDX):
            assert fluid_system.diffusion_coefficient(
                state, cache, LIQUID_PHASE_IDX, comp_idx
            ) == pytest.approx(2.01e-9 * T / 298.15)

    def test_component_index_is_checked(self, fluid_system, cache, state_factory):
        with pytest.raises(ComponentIndexError):
            fluid_system.diffusion_coefficient(state_factory(), cache, GAS_PHASE_IDX, -1)


class TestEnthalpy:
    def test_liquid_is_pure_water(self, fluid_system, cache, state_factory):
        state = state_factory(liquid=(0.9, 0.1))
        assert fluid_system.enthalpy(state, cache, LIQUID_PHASE_IDX) == pytest.approx(
            SimpleH2O().liquid_enthalpy(T, P)
        )

    def test_gas_is_mass_weighted(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.4, 0.6))
        X_h2o = state.mass_fraction(GAS_PHASE_IDX, H2O_IDX)
        X_n2 = state.mass_fraction(GAS_PHASE_IDX, N2_IDX)
        expected = X_h2o * SimpleH2O().gas_enthalpy(T, P) + X_n2 * N2().gas_enthalpy(T, P)
        assert fluid_system.enthalpy(state, cache, GAS_PHASE_IDX) == pytest.approx(expected)


class TestThermalConductivity:
    def test_liquid(self, fluid_system, cache, state_factory):
        assert fluid_system.thermal_conductivity(
            state_factory(), cache, LIQUID_PHASE_IDX
        ) == pytest.approx(SimpleH2O().liquid_thermal_conductivity(T, P))

    def test_simple_gas_is_dry_nitrogen(self, simple_fluid_system, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        cache = simple_fluid_system.create_parameter_cache()
        assert simple_fluid_system.thermal_conductivity(
            state, cache, GAS_PHASE_IDX
        ) == pytest.approx(N2().gas_thermal_conductivity(T, P))

    def test_complex_gas_sums_partial_conductivities(
        self, fluid_system, cache, state_factory
    ):
        state = state_factory(gas=(0.5, 0.5))
        expected = N2().gas_thermal_conductivity(
            T, 0.5 * P
        ) + SimpleH2O().gas_thermal_conductivity(T, 0.5 * P)
        assert fluid_system.thermal_conductivity(
            state, cache, GAS_PHASE_IDX
        ) == pytest.approx(expected)


class TestHeatCapacity:
    @pytest.mark.parametrize("temperature, pressure", [(300.0, 1e5), (450.0, 5e6)])
    def test_simple_gas_pure_nitrogen(
        self, simple_fluid_system, state_factory, temperature, pressure
    ):
        state = state_factory(temperature=temperature, pressure=pressure, gas=(0.0, 1.0))
        cache = simple_fluid_system.create_parameter_cache()
        expected = c.GAS_CONSTANT * (2.39 + 1.0) / N2().molar_mass()
        assert simple_fluid_system.heat_capacity(
            state, cache, GAS_PHASE_IDX
        ) == pytest.approx(expected, rel=1e-12)

    def test_simple_gas_mixture(self, simple_fluid_system, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        cache = simple_fluid_system.create_parameter_cache()
        R = c.GAS_CONSTANT
        expected = state.mass_fraction(GAS_PHASE_IDX, H2O_IDX) * R * 4.37 / 18e-3 + (
            state.mass_fraction(GAS_PHASE_IDX, N2_IDX) * R * 3.39 / 28.0134e-3
        )
        assert simple_fluid_system.heat_capacity(
            state, cache, GAS_PHASE_IDX
        ) == pytest.approx(expected, rel=1e-12)

    def test_complex_gas_uses_component_models(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        expected = state.mass_fraction(
            GAS_PHASE_IDX, H2O_IDX
        ) * SimpleH2O().gas_heat_capacity(T, 0.5 * P) + state.mass_fraction(
            GAS_PHASE_IDX, N2_IDX
        ) * N2().gas_heat_capacity(T, 0.5 * P)
        assert fluid_system.heat_capacity(state, cache, GAS_PHASE_IDX) == pytest.approx(
            expected
        )

    def test_liquid(self, fluid_system, cache, state_factory):
        assert fluid_system.heat_capacity(state_factory(), cache, LIQUID_PHASE_IDX) == 4180.0


@pytest.mark.parametrize("use_complex_relations", [True, False])
@pytest.mark.parametrize("total", [1e-8, 1e-10, 1e-12, 1e-16, 1e-30, 0.0])
def test_vanishing_phase_stays_finite(state_factory, use_complex_relations, total):
    fluid_system = H2ON2FluidSystem(use_complex_relations=use_complex_relations)
    cache = fluid_system.create_parameter_cache()
    composition = (0.4 * total, 0.6 * total)
    state = state_factory(liquid=composition, gas=composition)
    for phase_idx in (LIQUID_PHASE_IDX, GAS_PHASE_IDX):
        for prop in (
            fluid_system.density,
            fluid_system.viscosity,
            fluid_system.enthalpy,
            fluid_system.thermal_conductivity,
            fluid_system.heat_capacity,
        ):
            assert math.isfinite(prop(state, cache, phase_idx))
    # quotient rules stay bounded by the pure-component limits
    assert fluid_system.density(state, cache, GAS_PHASE_IDX) <= N2().gas_density(T, P)


class TestEvaluationTypes:
    def test_derivatives_flow_through(self, simple_fluid_system, state_factory):
        temperature = Evaluation.variable(T, 0, 2)
        pressure = Evaluation.variable(P, 1, 2)
        state = state_factory(temperature=temperature, pressure=pressure, gas=(0.0, 1.0))
        cache = simple_fluid_system.create_parameter_cache()
        rho = simple_fluid_system.density(state, cache, GAS_PHASE_IDX)
        assert isinstance(rho, Evaluation)
        M = N2().molar_mass()
        assert rho.value == pytest.approx(P * M / (c.GAS_CONSTANT * T))
        assert rho.derivative(0) == pytest.approx(-P * M / (c.GAS_CONSTANT * T * T))
        assert rho.derivative(1) == pytest.approx(M / (c.GAS_CONSTANT * T))

    def test_float_lhs_strips_derivatives(self, fluid_system, state_factory):
        state = state_factory(temperature=Evaluation.variable(T, 0, 1), gas=(0.5, 0.5))
        cache = fluid_system.create_parameter_cache()
        result = fluid_system.viscosity(state, cache, GAS_PHASE_IDX, lhs_eval=float)
        assert type(result) is float
        assert result == pytest.approx(
            fluid_system.viscosity(state_factory(gas=(0.5, 0.5)), cache, GAS_PHASE_IDX)
        )

    def test_evaluation_lhs_promotes_floats(self, fluid_system, cache, state_factory):
        state = state_factory(gas=(0.5, 0.5))
        for phase_idx in (LIQUID_PHASE_IDX, GAS_PHASE_IDX):
            result = fluid_system.density(state, cache, phase_idx, lhs_eval=Evaluation)
            assert isinstance(result, Evaluation)
            assert result.value == pytest.approx(fluid_system.density(state, cache, phase_idx))
        one = fluid_system.fugacity_coefficient(
            state, cache, GAS_PHASE_IDX, N2_IDX, lhs_eval=Evaluation
        )
        assert isinstance(one, Evaluation)
        assert one.value == 1.0

    def test_wilke_derivative_matches_finite_difference(
        self, fluid_system, cache, state_factory
    ):
        x_h2o = Evaluation.variable(0.3, 0, 1)
        state = state_factory(gas=(x_h2o, 0.7))
        result = fluid_system.viscosity(state, cache, GAS_PHASE_IDX)
        step = 1e-6
        upper = fluid_system.viscosity(state_factory(gas=(0.3 + step, 0.7)), cache, GAS_PHASE_IDX)
        lower = fluid_system.viscosity(state_factory(gas=(0.3 - step, 0.7)), cache, GAS_PHASE_IDX)
        assert result.derivative(0) == pytest.approx((upper - lower) / (2 * step), rel=1e-5)


def test_base_fluid_system_defaults():
    @attrs.frozen
    class EmptyFluidSystem(BaseFluidSystem):
        config: Config = attrs.field(factory=Config)

    fluid_system = EmptyFluidSystem()
    with pytest.raises(NotImplementedError, match="EmptyFluidSystem.density"):
        fluid_system.density(None, None, 0)
    with pytest.raises(NotImplementedError, match="EmptyFluidSystem.component_name"):
        fluid_system.component_name(0)
    fluid_system.init()
