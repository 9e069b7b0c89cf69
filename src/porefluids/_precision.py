from contextlib import contextmanager
from contextvars import ContextVar

import numpy as np


__all__ = ["get_dtype", "set_dtype", "with_precision"]

_table_dtype: ContextVar[np.typing.DTypeLike] = ContextVar(
    "_table_dtype", default=np.float64
)


def get_dtype() -> np.typing.DTypeLike:
    """
    Get the data type new tabulation grids are stored in.

    Property evaluation itself always runs in Python floats (or `Evaluation`s);
    the dtype only decides how precomputed tables are stored.
    """
    return _table_dtype.get()


def set_dtype(dtype: np.typing.DTypeLike) -> None:
    """
    Set the data type of tabulation grids built from now on.

    `np.float32` halves table memory at the cost of roughly seven significant digits.

    :param dtype: The data type to use.
    """
    _table_dtype.set(dtype)


@contextmanager
def with_precision(dtype: np.typing.DTypeLike):
    """
    Context manager to temporarily set the data type of tabulation grids.

    Tables keep the dtype they were built with after the context exits.

    :param dtype: The data type to set within the context.
    """
    token = _table_dtype.set(dtype)
    try:
        yield
    finally:
        _table_dtype.reset(token)
