"""
Forward-mode dual numbers and the math toolbox mixing rules are written against.

Every correlation and mixing rule in porefluids is written once using the
functions in this module. They accept plain floats or `Evaluation`s and
dispatch to the matching arithmetic, so the same formula serves plain
evaluation and derivative-carrying evaluation for the Newton solver of the
host simulator.
"""

import math
import typing

import numpy as np

from porefluids.errors import ValidationError

__all__ = [
    "Evaluation",
    "is_evaluation",
    "value_of",
    "decay",
    "scalar_type_of",
    "to_lhs",
    "create_constant",
    "create_variable",
    "max_",
    "min_",
    "abs_",
    "sqrt",
    "exp",
    "log",
    "pow_",
    "chain",
]


Derivatives = typing.Optional[np.ndarray]


def _scaled(derivatives: Derivatives, factor: float) -> Derivatives:
    if derivatives is None:
        return None
    return derivatives * factor


def _linear_combination(
    a: Derivatives, factor_a: float, b: Derivatives, factor_b: float
) -> Derivatives:
    """Return `factor_a * a + factor_b * b`, treating `None` as a zero vector."""
    if a is None:
        return _scaled(b, factor_b)
    if b is None:
        return a * factor_a
    if a.shape != b.shape:
        raise ValidationError(
            f"Cannot combine evaluations with {a.shape[0]} and {b.shape[0]} derivatives"
        )
    return a * factor_a + b * factor_b


class Evaluation:
    """
    A value together with its partial derivatives with respect to a fixed set
    of primary variables.

    Derivative vectors are treated as immutable; every operation returns a new
    `Evaluation`. `derivatives=None` stands for an all-zero vector, so constants
    carry no array at all.
    """

    __slots__ = ("value", "derivatives")

    # Keep numpy scalars from hijacking mixed arithmetic.
    __array_ufunc__ = None

    def __init__(self, value: typing.Any, derivatives: typing.Any = None) -> None:
        self.value = float(value)
        if derivatives is not None:
            derivatives = np.asarray(derivatives, dtype=np.float64)
            if derivatives.ndim != 1:
                raise ValidationError("Evaluation derivatives must be one-dimensional")
        self.derivatives: Derivatives = derivatives

    @classmethod
    def variable(cls, value: float, index: int, size: int) -> "Evaluation":
        """
        Create a primary variable.

        :param value: Value of the variable
        :param index: Position of the variable in the derivative vector
        :param size: Number of primary variables
        :return: Evaluation with a unit seed at `index`
        """
        if not 0 <= index < size:
            raise ValidationError(
                f"Variable index {index} outside derivative vector of size {size}"
            )
        derivatives = np.zeros(size, dtype=np.float64)
        derivatives[index] = 1.0
        return cls(value, derivatives)

    @classmethod
    def constant(cls, value: float, size: typing.Optional[int] = None) -> "Evaluation":
        """
        Create a constant, i.e. an evaluation with vanishing derivatives.

        :param value: Value of the constant
        :param size: Optional explicit size of the (zero) derivative vector
        """
        if size is None:
            return cls(value)
        return cls(value, np.zeros(size, dtype=np.float64))

    @property
    def num_derivatives(self) -> int:
        return 0 if self.derivatives is None else int(self.derivatives.shape[0])

    def derivative(self, index: int) -> float:
        """Partial derivative with respect to primary variable `index`."""
        if self.derivatives is None:
            return 0.0
        return float(self.derivatives[index])

    def __add__(self, other: typing.Any) -> "Evaluation":
        if isinstance(other, Evaluation):
            return Evaluation(
                self.value + other.value,
                _linear_combination(self.derivatives, 1.0, other.derivatives, 1.0),
            )
        return Evaluation(self.value + float(other), self.derivatives)

    __radd__ = __add__

    def __sub__(self, other: typing.Any) -> "Evaluation":
        if isinstance(other, Evaluation):
            return Evaluation(
                self.value - other.value,
                _linear_combination(self.derivatives, 1.0, other.derivatives, -1.0),
            )
        return Evaluation(self.value - float(other), self.derivatives)

    def __rsub__(self, other: typing.Any) -> "Evaluation":
        return Evaluation(float(other) - self.value, _scaled(self.derivatives, -1.0))

    def __mul__(self, other: typing.Any) -> "Evaluation":
        if isinstance(other, Evaluation):
            return Evaluation(
                self.value * other.value,
                _linear_combination(
                    self.derivatives, other.value, other.derivatives, self.value
                ),
            )
        other = float(other)
        return Evaluation(self.value * other, _scaled(self.derivatives, other))

    __rmul__ = __mul__

    def __truediv__(self, other: typing.Any) -> "Evaluation":
        if isinstance(other, Evaluation):
            inverse = 1.0 / other.value
            return Evaluation(
                self.value * inverse,
                _linear_combination(
                    self.derivatives,
                    inverse,
                    other.derivatives,
                    -self.value * inverse * inverse,
                ),
            )
        inverse = 1.0 / float(other)
        return Evaluation(self.value * inverse, _scaled(self.derivatives, inverse))

    def __rtruediv__(self, other: typing.Any) -> "Evaluation":
        other = float(other)
        inverse = 1.0 / self.value
        return Evaluation(
            other * inverse, _scaled(self.derivatives, -other * inverse * inverse)
        )

    def __pow__(self, exponent: typing.Any) -> "Evaluation":
        return pow_(self, exponent)  # type: ignore[return-value]

    def __rpow__(self, base: typing.Any) -> "Evaluation":
        return pow_(base, self)  # type: ignore[return-value]

    def __neg__(self) -> "Evaluation":
        return Evaluation(-self.value, _scaled(self.derivatives, -1.0))

    def __pos__(self) -> "Evaluation":
        return self

    def __abs__(self) -> "Evaluation":
        return abs_(self)  # type: ignore[return-value]

    def __lt__(self, other: typing.Any) -> bool:
        return self.value < value_of(other)

    def __le__(self, other: typing.Any) -> bool:
        return self.value <= value_of(other)

    def __gt__(self, other: typing.Any) -> bool:
        return self.value > value_of(other)

    def __ge__(self, other: typing.Any) -> bool:
        return self.value >= value_of(other)

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, Evaluation):
            if self.value != other.value:
                return False
            if self.derivatives is None and other.derivatives is None:
                return True
            mine = (
                self.derivatives
                if self.derivatives is not None
                else np.zeros_like(other.derivatives)
            )
            theirs = (
                other.derivatives
                if other.derivatives is not None
                else np.zeros_like(self.derivatives)
            )
            return bool(np.array_equal(mine, theirs))
        try:
            return self.value == float(other)
        except (TypeError, ValueError):
            return NotImplemented

    def __ne__(self, other: typing.Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        if self.derivatives is None:
            return f"Evaluation(value={self.value!r})"
        return f"Evaluation(value={self.value!r}, derivatives={self.derivatives.tolist()!r})"


def is_evaluation(value: typing.Any) -> bool:
    """Return True if `value` carries derivatives, i.e. is an `Evaluation`."""
    return isinstance(value, Evaluation)


def value_of(value: typing.Any) -> float:
    """Return the plain value of a float or an `Evaluation`."""
    if isinstance(value, Evaluation):
        return value.value
    return float(value)


decay = value_of
"""Alias of `value_of`; drops derivative information."""


def scalar_type_of(*values: typing.Any) -> type:
    """Return `Evaluation` if any of the values is one, else `float`."""
    for value in values:
        if isinstance(value, Evaluation):
            return Evaluation
    return float


def to_lhs(value: typing.Any, lhs_eval: typing.Optional[type] = None) -> typing.Any:
    """
    Convert a value to the evaluation type requested by the caller.

    :param value: Float or `Evaluation`
    :param lhs_eval: `float` (derivatives are dropped), `Evaluation` (floats are
        promoted to constants) or None (value returned unchanged)
    :return: The converted value
    """
    if lhs_eval is None:
        return value
    if isinstance(lhs_eval, type) and issubclass(lhs_eval, Evaluation):
        if isinstance(value, Evaluation):
            return value
        return Evaluation.constant(value)
    return lhs_eval(value_of(value))


def create_constant(value: float, lhs_eval: typing.Optional[type] = None) -> typing.Any:
    """Create a constant of the requested evaluation type."""
    return to_lhs(float(value), lhs_eval or float)


def create_variable(value: float, index: int, size: int) -> Evaluation:
    """Create a primary variable seeded at `index`."""
    return Evaluation.variable(value, index, size)


def max_(a: typing.Any, b: typing.Any) -> typing.Any:
    """Larger of two values; the derivatives follow the selected argument."""
    return a if value_of(a) >= value_of(b) else b


def min_(a: typing.Any, b: typing.Any) -> typing.Any:
    """Smaller of two values; the derivatives follow the selected argument."""
    return a if value_of(a) <= value_of(b) else b


def abs_(x: typing.Any) -> typing.Any:
    if isinstance(x, Evaluation):
        return -x if x.value < 0.0 else x
    return abs(float(x))


def sqrt(x: typing.Any) -> typing.Any:
    """Square root; d(sqrt(x)) = dx / (2 sqrt(x))."""
    if isinstance(x, Evaluation):
        root = math.sqrt(x.value)
        factor = 0.5 / root if root > 0.0 else math.inf
        return Evaluation(root, _scaled(x.derivatives, factor))
    return math.sqrt(x)


def exp(x: typing.Any) -> typing.Any:
    if isinstance(x, Evaluation):
        result = math.exp(x.value)
        return Evaluation(result, _scaled(x.derivatives, result))
    return math.exp(x)


def log(x: typing.Any) -> typing.Any:
    if isinstance(x, Evaluation):
        return Evaluation(math.log(x.value), _scaled(x.derivatives, 1.0 / x.value))
    return math.log(x)


def _power_slope(base: float, exponent: float) -> float:
    """d(base**exponent)/d(base), with the limits at base == 0 spelled out."""
    if base == 0.0:
        if exponent > 1.0:
            return 0.0
        if exponent == 1.0:
            return 1.0
        if exponent == 0.0:
            return 0.0
        return math.inf
    return exponent * math.pow(base, exponent - 1.0)


def pow_(base: typing.Any, exponent: typing.Any) -> typing.Any:
    """
    `base ** exponent` for any combination of floats and `Evaluation`s.

    d(b^e) = e b^(e-1) db + ln(b) b^e de
    """
    base_is_eval = isinstance(base, Evaluation)
    exponent_is_eval = isinstance(exponent, Evaluation)
    if not base_is_eval and not exponent_is_eval:
        return math.pow(base, exponent)

    if base_is_eval and not exponent_is_eval:
        exponent = float(exponent)
        result = math.pow(base.value, exponent)
        return Evaluation(
            result, _scaled(base.derivatives, _power_slope(base.value, exponent))
        )

    base_value = value_of(base)
    result = math.pow(base_value, exponent.value)
    log_base = math.log(base_value) if base_value > 0.0 else 0.0
    if not base_is_eval:
        return Evaluation(result, _scaled(exponent.derivatives, log_base * result))

    return Evaluation(
        result,
        _linear_combination(
            base.derivatives,
            _power_slope(base_value, exponent.value),
            exponent.derivatives,
            log_base * result,
        ),
    )


def chain(value: float, *partials: typing.Tuple[float, typing.Any]) -> typing.Any:
    """
    Assemble the result of a black-box function from its value and its partial
    derivatives with respect to each argument.

    Used for tabulated and externally computed correlations whose internals do
    not go through the toolbox.

    :param value: f(x_1, ..., x_n)
    :param partials: Pairs `(df/dx_i, x_i)`
    :return: A float if none of the `x_i` is an `Evaluation`, else an `Evaluation`
        whose derivatives are `sum_i df/dx_i * dx_i`
    """
    derivatives: Derivatives = None
    carries_derivatives = False
    for slope, argument in partials:
        if not isinstance(argument, Evaluation):
            continue
        carries_derivatives = True
        if argument.derivatives is None:
            continue
        if derivatives is None:
            derivatives = argument.derivatives * float(slope)
        else:
            derivatives = _linear_combination(
                derivatives, 1.0, argument.derivatives, float(slope)
            )
    if not carries_derivatives:
        return float(value)
    return Evaluation(value, derivatives)
