"""Lookup-table wrapper around an expensive pure-component model."""

import logging
import math
import typing

import attrs
import numba
import numpy as np

from porefluids import toolbox
from porefluids._precision import get_dtype
from porefluids.components.base import Component
from porefluids.errors import ComputationError, TabulationError, ValidationError
from porefluids.types import OneDimensionalGrid, Scalar, TwoDimensionalGrid

logger = logging.getLogger(__name__)

__all__ = ["TabulatedComponent", "TABULATED_PROPERTIES"]


TABULATED_PROPERTIES = (
    "gas_density",
    "liquid_density",
    "gas_enthalpy",
    "liquid_enthalpy",
    "gas_internal_energy",
    "liquid_internal_energy",
    "gas_heat_capacity",
    "liquid_heat_capacity",
    "gas_viscosity",
    "liquid_viscosity",
    "gas_thermal_conductivity",
    "liquid_thermal_conductivity",
)
"""Correlations of (temperature, pressure) served from tables."""


@numba.njit(cache=True)
def _interpolate_linear(
    table: OneDimensionalGrid, x_min: float, x_max: float, x: float
) -> typing.Tuple[float, float]:
    """
    Linear interpolation on a uniform 1-D grid.

    Callers guarantee `x_min <= x <= x_max`.

    :return: (value, d(value)/dx)
    """
    n = table.shape[0]
    spacing = (x_max - x_min) / (n - 1)
    alpha = (x - x_min) / spacing
    i = min(int(alpha), n - 2)
    alpha -= i

    v0 = table[i]
    v1 = table[i + 1]
    return v0 + alpha * (v1 - v0), (v1 - v0) / spacing


@numba.njit(cache=True)
def _interpolate_bilinear(
    table: TwoDimensionalGrid,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    x: float,
    y: float,
) -> typing.Tuple[float, float, float]:
    """
    Bilinear interpolation on a uniform 2-D grid.

    Callers guarantee the query point lies inside the closed rectangle.
    A NaN node anywhere in the enclosing cell yields a NaN value.

    :return: (value, d(value)/dx, d(value)/dy)
    """
    nx, ny = table.shape
    x_spacing = (x_max - x_min) / (nx - 1)
    y_spacing = (y_max - y_min) / (ny - 1)

    alpha = (x - x_min) / x_spacing
    i = min(int(alpha), nx - 2)
    alpha -= i
    beta = (y - y_min) / y_spacing
    j = min(int(beta), ny - 2)
    beta -= j

    v00 = table[i, j]
    v10 = table[i + 1, j]
    v01 = table[i, j + 1]
    v11 = table[i + 1, j + 1]

    value = (
        (1.0 - alpha) * (1.0 - beta) * v00
        + alpha * (1.0 - beta) * v10
        + (1.0 - alpha) * beta * v01
        + alpha * beta * v11
    )
    dx = ((1.0 - beta) * (v10 - v00) + beta * (v11 - v01)) / x_spacing
    dy = ((1.0 - alpha) * (v01 - v00) + alpha * (v11 - v10)) / y_spacing
    return value, dx, dy


@attrs.frozen
class _Tables:
    """One complete, immutable set of tables over a (temperature, pressure) grid."""

    temperature_min: float
    temperature_max: float
    pressure_min: float
    pressure_max: float
    vapor_pressure: typing.Optional[OneDimensionalGrid]
    properties: typing.Dict[str, TwoDimensionalGrid]

    def covers_temperature(self, temperature: float) -> bool:
        return self.temperature_min <= temperature <= self.temperature_max

    def covers(self, temperature: float, pressure: float) -> bool:
        return (
            self.temperature_min <= temperature <= self.temperature_max
            and self.pressure_min <= pressure <= self.pressure_max
        )


def _build_table(
    func: typing.Callable[[float, float], Scalar],
    temperatures: OneDimensionalGrid,
    pressures: OneDimensionalGrid,
) -> typing.Optional[TwoDimensionalGrid]:
    """
    Sample `func` on every grid node.

    Nodes where the correlation fails hold NaN. Returns None if the wrapped
    component does not provide the correlation at all.
    """
    table = np.empty((temperatures.size, pressures.size), dtype=get_dtype())
    for i, temperature in enumerate(temperatures):
        for j, pressure in enumerate(pressures):
            try:
                table[i, j] = toolbox.value_of(func(float(temperature), float(pressure)))
            except NotImplementedError:
                return None
            except ComputationError:
                table[i, j] = np.nan
    return table


class TabulatedComponent(Component):
    """
    Serves the properties of a wrapped component from precomputed tables.

    Tables are built by an explicit `init(...)` call and replaced as a whole on
    re-initialisation. Inside the tabulated rectangle (boundary included) values
    are interpolated bilinearly over (temperature, pressure), or linearly over
    temperature for the vapour pressure. Outside the rectangle, and in cells
    touching a node where the wrapped correlation failed, the wrapped
    correlation is evaluated directly. Inputs are never clamped to the grid.

    The static data and the capability flags are those of the wrapped component.

    Example:
    ```python
    water = TabulatedComponent(IAPWSH2O())
    water.init(273.15, 623.15, 100, 0.0, 20e6, 200)
    rho = water.liquid_density(300.0, 1e5)
    ```
    """

    is_tabulated: typing.ClassVar[bool] = True

    def __init__(self, raw: Component, warn_on_extrapolation: bool = False) -> None:
        """
        :param raw: The component whose correlations are tabulated
        :param warn_on_extrapolation: Log a warning whenever a query falls
            outside the tabulated range and the wrapped correlation is used
        """
        self.raw = raw
        self.warn_on_extrapolation = warn_on_extrapolation
        self._tables: typing.Optional[_Tables] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    @property
    def is_initialized(self) -> bool:
        return self._tables is not None

    def init(
        self,
        temperature_min: float,
        temperature_max: float,
        num_temperatures: int,
        pressure_min: float,
        pressure_max: float,
        num_pressures: int,
    ) -> None:
        """
        Build all tables of the component.

        :param temperature_min: Lowest tabulated temperature (K)
        :param temperature_max: Highest tabulated temperature (K)
        :param num_temperatures: Number of temperature sampling points (>= 2)
        :param pressure_min: Lowest tabulated pressure (Pa)
        :param pressure_max: Highest tabulated pressure (Pa)
        :param num_pressures: Number of pressure sampling points (>= 2)
        """
        if num_temperatures < 2 or num_pressures < 2:
            raise ValidationError(
                f"Tabulation needs at least two sampling points per axis, got "
                f"{num_temperatures} temperatures and {num_pressures} pressures"
            )
        if not temperature_min < temperature_max:
            raise ValidationError(
                f"Invalid temperature range [{temperature_min}, {temperature_max}] K"
            )
        if not pressure_min < pressure_max:
            raise ValidationError(
                f"Invalid pressure range [{pressure_min}, {pressure_max}] Pa"
            )

        temperatures = np.linspace(temperature_min, temperature_max, num_temperatures)
        pressures = np.linspace(pressure_min, pressure_max, num_pressures)
        name = self.raw.name()

        logger.debug(
            f"Building vapour pressure table of {name} with {num_temperatures} points..."
        )
        vapor_pressure: typing.Optional[OneDimensionalGrid] = np.empty(
            num_temperatures, dtype=get_dtype()
        )
        for i, temperature in enumerate(temperatures):
            try:
                vapor_pressure[i] = toolbox.value_of(  # type: ignore[index]
                    self.raw.vapor_pressure(float(temperature))
                )
            except NotImplementedError:
                vapor_pressure = None
                break
            except ComputationError:
                vapor_pressure[i] = np.nan  # type: ignore[index]

        properties: typing.Dict[str, TwoDimensionalGrid] = {}
        for key in TABULATED_PROPERTIES:
            logger.debug(
                f"Building {key} table of {name} on a {num_temperatures}x{num_pressures} grid..."
            )
            table = _build_table(getattr(self.raw, key), temperatures, pressures)
            if table is None:
                logger.debug(f"{name} does not provide {key}; it will not be tabulated")
                continue
            invalid = int(np.count_nonzero(np.isnan(table)))
            if invalid:
                logger.debug(
                    f"{invalid} node(s) of the {key} table of {name} could not be evaluated"
                )
            properties[key] = table

        # Swap the complete set in at once so readers never see a mix of grids
        self._tables = _Tables(
            temperature_min=float(temperature_min),
            temperature_max=float(temperature_max),
            pressure_min=float(pressure_min),
            pressure_max=float(pressure_max),
            vapor_pressure=vapor_pressure,
            properties=properties,
        )
        logger.info(
            f"Tabulated {name} initialized: T ∈ [{temperature_min:.2f}, {temperature_max:.2f}] K "
            f"({num_temperatures} points), p ∈ [{pressure_min:.1f}, {pressure_max:.1f}] Pa "
            f"({num_pressures} points), {len(properties)} properties"
        )

    def _require_tables(self) -> _Tables:
        tables = self._tables
        if tables is None:
            raise TabulationError(
                f"Tabulated {self.raw.name()} used before `init` was called"
            )
        return tables

    def _warn_extrapolation(self, key: str, temperature: float, pressure: float) -> None:
        if self.warn_on_extrapolation:
            logger.warning(
                f"{key} of {self.raw.name()} queried outside the tabulated range "
                f"at T={temperature:.2f} K, p={pressure:.1f} Pa; using the raw correlation"
            )

    def _lookup(self, key: str, temperature: Scalar, pressure: Scalar) -> Scalar:
        tables = self._require_tables()
        table = tables.properties.get(key)
        if table is None:
            return getattr(self.raw, key)(temperature, pressure)

        T = toolbox.value_of(temperature)
        p = toolbox.value_of(pressure)
        if tables.covers(T, p):
            value, dvalue_dT, dvalue_dp = _interpolate_bilinear(
                table,
                tables.temperature_min,
                tables.temperature_max,
                tables.pressure_min,
                tables.pressure_max,
                T,
                p,
            )
            if not math.isnan(value):
                return toolbox.chain(
                    value, (dvalue_dT, temperature), (dvalue_dp, pressure)
                )
        else:
            self._warn_extrapolation(key, T, p)
        return getattr(self.raw, key)(temperature, pressure)

    # Static data

    def name(self) -> str:
        return self.raw.name()

    def molar_mass(self) -> float:
        return self.raw.molar_mass()

    def critical_temperature(self) -> float:
        return self.raw.critical_temperature()

    def critical_pressure(self) -> float:
        return self.raw.critical_pressure()

    def acentric_factor(self) -> float:
        return self.raw.acentric_factor()

    def triple_temperature(self) -> float:
        return self.raw.triple_temperature()

    def triple_pressure(self) -> float:
        return self.raw.triple_pressure()

    def gas_is_ideal(self) -> bool:
        return self.raw.gas_is_ideal()

    def gas_is_compressible(self) -> bool:
        return self.raw.gas_is_compressible()

    def liquid_is_compressible(self) -> bool:
        return self.raw.liquid_is_compressible()

    # Correlations

    def vapor_pressure(self, temperature: Scalar) -> Scalar:
        tables = self._require_tables()
        table = tables.vapor_pressure
        T = toolbox.value_of(temperature)
        if table is not None and tables.covers_temperature(T):
            value, slope = _interpolate_linear(
                table, tables.temperature_min, tables.temperature_max, T
            )
            if not math.isnan(value):
                return toolbox.chain(value, (slope, temperature))
        elif table is not None and self.warn_on_extrapolation:
            logger.warning(
                f"Vapour pressure of {self.raw.name()} queried outside the tabulated "
                f"range at T={T:.2f} K; using the raw correlation"
            )
        return self.raw.vapor_pressure(temperature)

    def gas_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_density", temperature, pressure)

    def liquid_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("liquid_density", temperature, pressure)

    def gas_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_enthalpy", temperature, pressure)

    def liquid_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("liquid_enthalpy", temperature, pressure)

    def gas_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_internal_energy", temperature, pressure)

    def liquid_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("liquid_internal_energy", temperature, pressure)

    def gas_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_heat_capacity", temperature, pressure)

    def liquid_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("liquid_heat_capacity", temperature, pressure)

    def gas_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_viscosity", temperature, pressure)

    def liquid_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("liquid_viscosity", temperature, pressure)

    def gas_thermal_conductivity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self._lookup("gas_thermal_conductivity", temperature, pressure)

    def liquid_thermal_conductivity(
        self, temperature: Scalar, pressure: Scalar
    ) -> Scalar:
        return self._lookup("liquid_thermal_conductivity", temperature, pressure)
