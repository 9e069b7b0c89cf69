"""Fluid systems: phase and component registries with mixture property rules."""

from .base import *  # noqa
from .h2o_n2 import *  # noqa
