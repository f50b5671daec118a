"""
decimal conversions for precise aggregation.

floats are converted from their shortest repr so 0.1 + 0.2 sums to exactly 0.3.
nan and infinities map to their Decimal counterparts.
"""
import logging
import numbers
from decimal import Decimal, Context, MAX_PREC, DivisionByZero, Overflow
from fractions import Fraction

import numpy as np

from .errors import TypeMismatchError
from .types import *

logger = logging.getLogger(__name__)


def is_numeric(value: Any) -> bool:
    """true for python and numpy numbers, decimals and bools; false for complex"""
    if isinstance(value, (bool, np.bool_)):
        return True
    return isinstance(value, (numbers.Real, Decimal))


def is_integral(value: Any) -> bool:
    return isinstance(value, (numbers.Integral, np.bool_))


def to_decimal(value: Any) -> Decimal:
    """convert a numeric value to Decimal without binary round-off"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, np.bool_)):
        return Decimal(int(value))
    if isinstance(value, numbers.Integral):
        # covers numpy integer scalars as well
        return Decimal(int(value))
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    if isinstance(value, numbers.Real):
        return Decimal(repr(float(value)))
    logger.debug(f"refusing to aggregate value of type {type(value).__name__}")
    raise TypeMismatchError(f"value {value!r} of type {type(value).__name__} is not numeric")


def exact_context() -> Context:
    """context for accumulating without rounding; the caller rounds once at the end"""
    return Context(prec=MAX_PREC, traps=[DivisionByZero, Overflow])


def to_native(result: Decimal, values: Iterable[Any]) -> Union[float, Decimal]:
    """Decimal when any input was a Decimal, so caller-supplied precision survives; float otherwise"""
    if any(isinstance(value, Decimal) for value in values):
        return result
    return float(result)
