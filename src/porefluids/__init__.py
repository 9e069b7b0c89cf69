"""
*porefluids*

Thermodynamic and transport properties of two-phase, multi-component fluids
for porous-media flow simulators.
"""

from ._precision import *  # noqa
from .constants import *  # noqa
from .errors import *  # noqa
from .config import *  # noqa
from .types import *  # noqa
from .toolbox import *  # noqa
from .states import *  # noqa
from .parameter_cache import *  # noqa
from .components import *  # noqa
from .binary_coefficients import *  # noqa
from .fluid_systems import *  # noqa
from .factories import *  # noqa
