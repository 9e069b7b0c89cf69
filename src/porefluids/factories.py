import typing

from porefluids.binary_coefficients import H2ON2Coefficients
from porefluids.components.base import Component
from porefluids.components.iapws_h2o import IAPWSH2O
from porefluids.components.n2 import N2
from porefluids.components.simple_h2o import SimpleH2O
from porefluids.components.tabulated import TabulatedComponent
from porefluids.config import Config
from porefluids.errors import ValidationError
from porefluids.fluid_systems.h2o_n2 import H2ON2FluidSystem
from porefluids.types import WaterModel

__all__ = ["water_component", "build_h2o_n2_fluid_system"]


def water_component(
    model: WaterModel = "iapws",
    tabulate: bool = True,
    warn_on_extrapolation: bool = False,
) -> Component:
    """
    Constructs a water component.

    :param model: "simple" for the closed-form water model, "iapws" for IAPWS-95 via CoolProp
    :param tabulate: Whether to wrap the model in a `TabulatedComponent`.
        The tables are built by the fluid system's `init`.
    :param warn_on_extrapolation: Log a warning whenever a tabulated lookup falls outside the tables
    :return: The water component
    """
    raw: Component
    if model == "simple":
        raw = SimpleH2O()
    elif model == "iapws":
        raw = IAPWSH2O()
    else:
        raise ValidationError(
            f"Unknown water model {model!r}. Expected one of {typing.get_args(WaterModel)}"
        )
    if not tabulate:
        return raw
    return TabulatedComponent(raw, warn_on_extrapolation=warn_on_extrapolation)


def build_h2o_n2_fluid_system(
    water: typing.Union[WaterModel, Component] = "iapws",
    tabulate: bool = True,
    use_complex_relations: bool = True,
    config: typing.Optional[Config] = None,
    initialize: bool = False,
    **init_kwargs: typing.Any,
) -> H2ON2FluidSystem:
    """
    Constructs a water-nitrogen fluid system.

    :param water: Water model name ("simple" or "iapws") or a ready component instance.
        Component instances are used as given and `tabulate` is ignored.
    :param tabulate: Whether to tabulate the named water model
    :param use_complex_relations: Whether to use the elaborate mixing rules
    :param config: Fluid system configuration. Defaults to `Config()`.
    :param initialize: Whether to call `init` on the fluid system before returning it
    :param init_kwargs: Tabulation bounds passed to `H2ON2FluidSystem.init` when `initialize` is True
    :return: `H2ON2FluidSystem` instance
    """
    config = config or Config()
    if isinstance(water, Component):
        water_model = water
    else:
        water_model = water_component(
            water,
            tabulate=tabulate,
            warn_on_extrapolation=config.warn_on_extrapolation,
        )
    if init_kwargs and not initialize:
        raise ValidationError(
            "Tabulation bounds were given but `initialize` is False"
        )

    nitrogen = N2()
    raw_water = water_model.raw if isinstance(water_model, TabulatedComponent) else water_model
    fluid_system = H2ON2FluidSystem(
        water=water_model,
        nitrogen=nitrogen,
        binary_coefficients=H2ON2Coefficients(water=raw_water, nitrogen=nitrogen),
        use_complex_relations=use_complex_relations,
        config=config,
    )
    if initialize:
        fluid_system.init(**init_kwargs)
    return fluid_system
