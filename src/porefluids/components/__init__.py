"""Pure-component models."""

from .base import *  # noqa
from .ideal_gas import *  # noqa
from .simple_h2o import *  # noqa
from .iapws_h2o import *  # noqa
from .n2 import *  # noqa
from .tabulated import *  # noqa
