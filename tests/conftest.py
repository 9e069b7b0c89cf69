import typing

import pytest

from porefluids import (
    GAS_PHASE_IDX,
    LIQUID_PHASE_IDX,
    CompositionalFluidState,
    Config,
    H2ON2FluidSystem,
    N2,
    SimpleH2O,
)


def make_state(
    temperature: typing.Any = 300.0,
    pressure: typing.Any = 1e5,
    liquid: typing.Tuple[typing.Any, typing.Any] = (1.0, 0.0),
    gas: typing.Tuple[typing.Any, typing.Any] = (0.0, 1.0),
) -> CompositionalFluidState:
    """Build a water-nitrogen fluid state with the same temperature and pressure in both phases."""
    state = CompositionalFluidState(
        2, molar_masses=(SimpleH2O().molar_mass(), N2().molar_mass())
    )
    state.set_temperature(temperature)
    for phase_idx, mole_fractions in ((LIQUID_PHASE_IDX, liquid), (GAS_PHASE_IDX, gas)):
        state.set_pressure(phase_idx, pressure)
        for comp_idx, value in enumerate(mole_fractions):
            state.set_mole_fraction(phase_idx, comp_idx, value)
    return state


@pytest.fixture
def fluid_system() -> H2ON2FluidSystem:
    """Water-nitrogen system with simple water and the complex mixing rules."""
    return H2ON2FluidSystem(water=SimpleH2O(), nitrogen=N2())


@pytest.fixture
def simple_fluid_system() -> H2ON2FluidSystem:
    """Water-nitrogen system with simple water and the simple mixing rules."""
    return H2ON2FluidSystem(
        water=SimpleH2O(), nitrogen=N2(), use_complex_relations=False
    )


@pytest.fixture
def unchecked_fluid_system() -> H2ON2FluidSystem:
    return H2ON2FluidSystem(config=Config(validate_indices=False))


@pytest.fixture
def state_factory() -> typing.Callable[..., CompositionalFluidState]:
    return make_state
