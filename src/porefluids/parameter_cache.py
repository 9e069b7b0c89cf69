"""Per-evaluation scratch objects threaded through fluid-system property calls."""

import enum

from porefluids.types import FluidState

__all__ = ["ExceptQuantities", "ParameterCache", "NullParameterCache"]


class ExceptQuantities(enum.IntFlag):
    """Quantities known to be unchanged since the last update of a phase."""

    NONE = 0
    TEMPERATURE = 1
    PRESSURE = 2
    COMPOSITION = 4


class ParameterCache:
    """
    Base class of parameter caches.

    A parameter cache holds auxiliary quantities a fluid system derives from a
    fluid state, so that several property calls for the same state can share
    them. Its lifetime is scoped to one fluid-state evaluation. Subclasses only
    need to override `update_phase`; the other update methods fan out to it.
    """

    def __init__(self, num_phases: int) -> None:
        self.num_phases = num_phases

    def update_all(
        self,
        fluid_state: FluidState,
        except_quantities: ExceptQuantities = ExceptQuantities.NONE,
    ) -> None:
        """Update the cached quantities of every phase."""
        for phase_idx in range(self.num_phases):
            self.update_phase(fluid_state, phase_idx, except_quantities)

    def update_phase(
        self,
        fluid_state: FluidState,
        phase_idx: int,
        except_quantities: ExceptQuantities = ExceptQuantities.NONE,
    ) -> None:
        """
        Update the cached quantities of a single phase.

        :param fluid_state: The fluid state the cache belongs to
        :param phase_idx: Index of the phase
        :param except_quantities: Quantities that did not change since the last update
        """

    def update_all_pressures(self, fluid_state: FluidState) -> None:
        for phase_idx in range(self.num_phases):
            self.update_pressure(fluid_state, phase_idx)

    def update_all_temperatures(self, fluid_state: FluidState) -> None:
        for phase_idx in range(self.num_phases):
            self.update_temperature(fluid_state, phase_idx)

    def update_temperature(self, fluid_state: FluidState, phase_idx: int) -> None:
        self.update_phase(fluid_state, phase_idx)

    def update_pressure(self, fluid_state: FluidState, phase_idx: int) -> None:
        self.update_phase(fluid_state, phase_idx)

    def update_composition(self, fluid_state: FluidState, phase_idx: int) -> None:
        self.update_phase(
            fluid_state,
            phase_idx,
            ExceptQuantities.TEMPERATURE | ExceptQuantities.PRESSURE,
        )

    def update_single_mole_fraction(
        self, fluid_state: FluidState, phase_idx: int, comp_idx: int
    ) -> None:
        """Update the cache after the mole fraction of one component changed."""
        self.update_composition(fluid_state, phase_idx)


class NullParameterCache(ParameterCache):
    """A parameter cache that does not cache anything."""
