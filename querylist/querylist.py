from __future__ import annotations

import logging
from .types import *
from .errors import ConstructionError

# --- operation families ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.ordering import _OrderingOperations
from .extensions.stats import _StatsOperations
from .extensions.grouping import _GroupingOperations
from .extensions.array import _ArrayOperations
from .extensions.terminal import _TerminalOperations

logger = logging.getLogger(__name__)

_NO_ITEMS = object()


class QueryList(
    _CoreOperations[T],
    _SetOperations[T],
    _OrderingOperations[T],
    _StatsOperations[T],
    _GroupingOperations[T],
    _ArrayOperations[T],
    _TerminalOperations[T],
    List[T]
):
    """
    a list with linq-inspired query methods. every query returns a new query
    list of the receiver's type; order_by_*, sort, reverse and splice work in
    place like their native counterparts.

    example:
    ```
    ages = QueryList.from_(people).where(lambda p: p['active']).select(lambda p: p['age'])
    ages.order_by_descending().first()
    ```
    """

    def __init__(self, items: Iterable[T] = _NO_ITEMS):
        if items is None:
            logger.debug("refusing to build a query list from None")
            raise ConstructionError("items must not be null.")
        super().__init__(() if items is _NO_ITEMS else items)

    @classmethod
    def from_(cls, items: Optional[Iterable[T]] = None) -> 'QueryList[T]':
        """wrap items; a query list is returned unchanged, None gives an empty one"""
        if isinstance(items, cls): return items
        if items is None: return cls()
        return cls(items)
