from __future__ import annotations
import builtins
import logging
import typing
from decimal import Decimal, localcontext
from ..config import get_config
from ..errors import TypeMismatchError, DivisionByZeroError, EmptySequenceError
from ..numeric import is_numeric, is_integral, to_decimal, to_native, exact_context
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList

logger = logging.getLogger(__name__)


class _StatsOperations(Generic[T]):
    """
    numeric aggregation. sums accumulate exactly in Decimal (or int) and are
    rounded once to the configured precision, so float round-off does not build up.
    """

    @staticmethod
    def _check_numeric(values: 'QueryList[Any]', selected: bool) -> 'QueryList[Any]':
        for value in values:
            if not is_numeric(value):
                if not selected:
                    logger.debug(f"non-numeric element {value!r} reached an aggregation without a selector")
                    raise TypeMismatchError("sequence contains non-numeric elements; pass a selector")
                logger.debug(f"selector produced non-numeric value {value!r}")
                raise TypeMismatchError(f"selector produced non-numeric value {value!r}")
        return values

    def _get_values(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[Any]':
        """helper to extract numeric values for aggregation."""
        return self._check_numeric(self.select(selector), selector is not None)

    def _exact_total(self: 'QueryList[T]', values: Iterable[Any]) -> Decimal:
        # no rounding while accumulating; callers round once in the configured context
        with localcontext(exact_context()):
            total = Decimal(0)
            for value in values:
                total += to_decimal(value)
            return total

    def sum(self: 'QueryList[T]', selector: Optional[Selector] = None) -> Union[int, float, Decimal]:
        """
        precise sum of the (selected) values. empty sums to 0.
        integral values add as python ints and stay exact at any magnitude.
        """
        values = self._get_values(selector)
        if all(is_integral(value) for value in values):
            return builtins.sum(int(value) for value in values)
        total = self._exact_total(values)
        logger.debug(f"summed {len(values)} values at precision {get_config().decimal_precision}")
        with localcontext(get_config().decimal_context()):
            # unary plus rounds the result to the context precision
            return to_native(+total, values)

    def average(self: 'QueryList[T]',
                selector: Optional[Selector] = None,
                where: Optional[Predicate] = None) -> Union[float, Decimal]:
        """restrict with where, project with selector, then precise sum / count"""
        values = self.where(where)._get_values(selector)
        if not values:
            logger.debug("average requested over an empty sequence")
            raise DivisionByZeroError("cannot calculate average of empty sequence")
        total = self._exact_total(values)
        with localcontext(get_config().decimal_context()):
            return to_native(total / Decimal(len(values)), values)

    def _extremum(self: 'QueryList[T]', values: 'QueryList[Any]', pick: Callable) -> Optional[Decimal]:
        """the extremal value as Decimal; a nan anywhere makes the extremum nan"""
        if not values: return None
        decimals = [to_decimal(value) for value in values]
        if any(value.is_nan() for value in decimals):
            logger.debug("nan among compared values, extremum is nan")
            return Decimal('NaN')
        return pick(decimals)

    def max(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[T]':
        """all elements whose (selected) value equals the maximum. nan matches nothing."""
        return self.where_in_select_with_accum(
            selector,
            lambda projected: self._extremum(self._check_numeric(projected, selector is not None), max),
            lambda value, index, projected, accum: to_decimal(value) == accum)

    def min(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[T]':
        """all elements whose (selected) value equals the minimum. nan matches nothing."""
        return self.where_in_select_with_accum(
            selector,
            lambda projected: self._extremum(self._check_numeric(projected, selector is not None), min),
            lambda value, index, projected, accum: to_decimal(value) == accum)

    def _extremum_value(self: 'QueryList[T]', selector: Optional[Selector], pick: Callable, name: str) -> Any:
        values = self._get_values(selector)
        if not values:
            logger.debug(f"{name} requested over an empty sequence")
            raise EmptySequenceError(f"cannot find {name} of empty sequence")
        best = self._extremum(values, pick)
        if best.is_nan():
            return next(value for value in values if to_decimal(value).is_nan())
        return next(value for value in values if to_decimal(value) == best)

    def max_value(self: 'QueryList[T]', selector: Optional[Selector] = None) -> Any:
        """the largest (selected) value itself, or the first nan if there is one"""
        return self._extremum_value(selector, max, 'maximum')

    def min_value(self: 'QueryList[T]', selector: Optional[Selector] = None) -> Any:
        """the smallest (selected) value itself, or the first nan if there is one"""
        return self._extremum_value(selector, min, 'minimum')
