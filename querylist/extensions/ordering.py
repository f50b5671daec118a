from __future__ import annotations
import typing
from functools import cmp_to_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList


def _ascending(a: Any, b: Any) -> int:
    """strict three-way compare: less, greater, otherwise equal"""
    if a < b: return -1
    if a > b: return 1
    return 0


def _descending(a: Any, b: Any) -> int:
    if a > b: return -1
    if a < b: return 1
    return 0


class _OrderingOperations(Generic[T]):
    """
    ordering sorts the receiver in place and returns it, like the native list.
    python's sort is stable, so ties keep their current relative order.
    """

    def _order(self: 'QueryList[T]', selector: Optional[KeySelector[T, K]], compare: Comparer) -> 'QueryList[T]':
        wrap = cmp_to_key(compare)
        # the selector runs once per element; comparisons go through the wrapper
        if selector is None:
            list.sort(self, key=wrap)
        else:
            list.sort(self, key=lambda item: wrap(selector(item)))
        return self

    def order_by_ascending(self: 'QueryList[T]', selector: Optional[KeySelector[T, K]] = None) -> 'QueryList[T]':
        """sort ascending by selector(item) (or the item itself), in place"""
        return self._order(selector, _ascending)

    def order_by_descending(self: 'QueryList[T]', selector: Optional[KeySelector[T, K]] = None) -> 'QueryList[T]':
        """sort descending by selector(item) (or the item itself), in place"""
        return self._order(selector, _descending)

    def sort(self: 'QueryList[T]', *, key: Optional[KeySelector[T, K]] = None, reverse: bool = False) -> 'QueryList[T]':
        """native in-place sort that also returns self"""
        list.sort(self, key=key, reverse=reverse)
        return self

    def reverse(self: 'QueryList[T]') -> 'QueryList[T]':
        """native in-place reverse that also returns self"""
        list.reverse(self)
        return self
