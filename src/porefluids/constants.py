"""Physical constants, numerical floors and default tabulation ranges."""

from contextvars import ContextVar
import typing

import attrs


__all__ = ["Constant", "Constants", "c", "ConstantsContext", "get_constant"]


@attrs.frozen(slots=True)
class Constant:
    """
    A constant value with optional description and metadata.

    This class wraps a constant value and provides additional context about
    what the constant represents, its units, and any other relevant information.
    """

    value: typing.Any
    """The actual value of the constant."""

    description: typing.Optional[str] = None
    """Optional description of what this constant represents."""

    unit: typing.Optional[str] = None
    """Optional unit of measurement for this constant."""

    def __str__(self) -> str:
        """Return a human-readable string representation of the `Constant`."""
        return f"{self.value}{self.unit or ''}"

    def __repr__(self) -> str:
        """Return a string representation of the `Constant`."""
        parts = [f"value={self.value}"]
        if self.description:
            parts.append(f"description='{self.description}'")
        if self.unit:
            parts.append(f"unit='{self.unit}'")
        return f"Constant({', '.join(parts)})"


# Default constants dictionary
DEFAULT_CONSTANTS: typing.Dict[str, typing.Union[typing.Any, Constant]] = {
    # Universal constants
    "GAS_CONSTANT": Constant(
        value=8.314472, description="Universal gas constant", unit="J/(mol·K)"
    ),
    "CELSIUS_TO_KELVIN_OFFSET": Constant(
        value=273.15, description="Offset between the Celsius and Kelvin scales", unit="K"
    ),
    # Ideal gas heat capacities (c_v = factor * R)
    "N2_IDEAL_CV_FACTOR": Constant(
        value=2.39,
        description="Molar isochoric heat capacity of nitrogen in units of R (diatomic)",
        unit="R",
    ),
    "H2O_IDEAL_CV_FACTOR": Constant(
        value=3.37,
        description="Molar isochoric heat capacity of steam in units of R (triatomic)",
        unit="R",
    ),
    # Default tabulation ranges for the water component
    "DEFAULT_TABULATION_MIN_TEMPERATURE": Constant(
        value=273.15, description="Lower temperature bound of default water tables", unit="K"
    ),
    "DEFAULT_TABULATION_MAX_TEMPERATURE": Constant(
        value=623.15, description="Upper temperature bound of default water tables", unit="K"
    ),
    "DEFAULT_TABULATION_TEMPERATURE_POINTS": Constant(
        value=100, description="Temperature ticks of default water tables", unit="points"
    ),
    "DEFAULT_TABULATION_MIN_PRESSURE": Constant(
        value=0.0, description="Lower pressure bound of default water tables", unit="Pa"
    ),
    "DEFAULT_TABULATION_MAX_PRESSURE": Constant(
        value=20e6, description="Upper pressure bound of default water tables", unit="Pa"
    ),
    "DEFAULT_TABULATION_PRESSURE_POINTS": Constant(
        value=200, description="Pressure ticks of default water tables", unit="points"
    ),
    # Numerical floors
    "DENSITY_MOLE_FRACTION_FLOOR": Constant(
        value=1e-5,
        description="Floor for mole fraction sums dividing mixture densities",
        unit="fraction",
    ),
    "VISCOSITY_MOLE_FRACTION_FLOOR": Constant(
        value=1e-10,
        description="Floor for mole fraction sums in Wilke's viscosity mixing rule",
        unit="fraction",
    ),
    "AVERAGE_MOLAR_MASS_FLOOR": Constant(
        value=1e-40,
        description="Floor for the average molar mass when converting mole to mass fractions",
        unit="kg/mol",
    ),
    "UNKNOWN_COMPONENT_SENTINEL": Constant(
        value=1e100,
        description="Value returned by static component lookups for unrecognised indices",
        unit=None,
    ),
    # Derivatives of black-box correlations
    "FINITE_DIFFERENCE_RELATIVE_STEP": Constant(
        value=1e-6,
        description="Relative step for central differences of black-box correlations",
        unit="fraction",
    ),
    "SATURATION_PRESSURE_MARGIN": Constant(
        value=1e-6,
        description="Relative distance kept from the saturation curve when regularising single-phase properties",
        unit="fraction",
    ),
}


class Constants:
    """
    Mutable store of named `Constant`s, seeded from `DEFAULT_CONSTANTS`.

    `constants.NAME` gives the value, `constants["NAME"]` the `Constant` with its
    metadata. Assigning a raw value wraps it in a `Constant`.
    """

    __slots__ = ("_store",)

    def __init__(self) -> None:
        object.__setattr__(
            self,
            "_store",
            {
                name: value if isinstance(value, Constant) else Constant(value=value)
                for name, value in DEFAULT_CONSTANTS.items()
            },
        )

    def __getattr__(self, name: str) -> typing.Any:
        try:
            return self._store[name].value
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from None

    def __getitem__(self, name: str) -> Constant:
        return self._store[name]

    def __setattr__(self, name: str, value: typing.Union[typing.Any, Constant]) -> None:
        self._store[name] = value if isinstance(value, Constant) else Constant(value=value)

    def __contains__(self, name: str) -> bool:
        return name in self._store

    def get_constant(
        self, name: str, default: typing.Optional[Constant] = None
    ) -> typing.Optional[Constant]:
        """Get a `Constant` object with a default fallback."""
        return self._store.get(name, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(constants={len(self._store)})"

    def __call__(self) -> "ConstantsContext":
        """
        Context manager making this instance the one behind `porefluids.c`
        until the context exits.

        Example:
        ```python
        constants = Constants()
        constants.DENSITY_MOLE_FRACTION_FLOOR = 1e-8
        with constants():
            rho = fluid_system.density(state, cache, GAS_PHASE_IDX)
        ```
        """
        return ConstantsContext(self)


_constants_context: ContextVar[Constants] = ContextVar(
    "constants_context", default=Constants()
)


class ConstantsContext:
    """Temporarily overrides the `Constants` behind `porefluids.c`."""

    def __init__(self, constants: Constants) -> None:
        self._constants = constants
        self._token = None

    def __enter__(self) -> Constants:
        self._token = _constants_context.set(self._constants)
        return self._constants

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self._token is not None:
            _constants_context.reset(self._token)
            self._token = None


class _ConstantsProxy:
    """Resolves attribute access against the `Constants` of the current context."""

    def __getattr__(self, name: str) -> typing.Any:
        return getattr(_constants_context.get(), name)

    def __getitem__(self, name: str) -> Constant:
        return _constants_context.get()[name]


c = _ConstantsProxy()
"""Global proxy to access physical constants and numerical floors."""


def get_constant(name: str) -> typing.Optional[Constant]:
    """
    Get a `Constant` object by name from the current constants.

    :param name: Name of the constant
    :return: `Constant` object or None if not found
    """
    return _constants_context.get().get_constant(name)
