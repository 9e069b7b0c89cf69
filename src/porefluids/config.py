import typing

import attrs

from porefluids.types import UnknownComponentPolicy

__all__ = ["Config"]


@attrs.frozen
class Config:
    """Fluid system configuration."""

    validate_indices: bool = True
    """
    Whether property calls check phase and component indices.

    Out-of-range indices raise `PhaseIndexError`/`ComponentIndexError` when enabled.
    Disabling the checks trades safety for speed in hot loops; out-of-range
    indices then give undefined results.
    """
    unknown_component_policy: UnknownComponentPolicy = attrs.field(
        default="sentinel",
        validator=attrs.validators.in_(typing.get_args(UnknownComponentPolicy)),
    )
    """
    Behaviour of static component lookups (molar mass, critical data, acentric factor)
    for an unrecognised component index.

    "sentinel" returns `c.UNKNOWN_COMPONENT_SENTINEL`, a value far outside any physical range.
    "raise" raises `ComponentIndexError`.
    """
    warn_on_extrapolation: bool = False
    """
    If True, tabulated water components of a fluid system built with this config log a
    warning whenever a lookup falls outside the tables and the raw correlation is used.
    """
