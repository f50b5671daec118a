from __future__ import annotations
import logging
import typing
from itertools import chain
from ..callbacks import adapt, identity
from ..errors import NotFoundError
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList

logger = logging.getLogger(__name__)

_MISSING = object()


class _CoreOperations(Generic[T]):
    def _new(self: 'QueryList[T]', items: Iterable[Any] = ()) -> 'QueryList[Any]':
        """build a new instance of the receiver's own type"""
        return type(self)(items)

    # --- filtering ---

    def where(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> 'QueryList[T]':
        """keep elements for which predicate(item, index, seq) holds. no predicate returns self."""
        if predicate is None: return self
        test = adapt(predicate)
        return self._new(item for index, item in enumerate(self) if test(item, index, self))

    def where_in_select(self: 'QueryList[T]', selector: Optional[Selector], predicate: Optional[Predicate]) -> 'QueryList[T]':
        """
        filter on a projection of the elements rather than the elements themselves.
        the projection is computed once; element i is kept when
        predicate(projected[i], i, projected) holds.
        """
        if selector is None or predicate is None: return self
        projected = self.select(selector)
        test = adapt(predicate)
        return self._new(item for index, item in enumerate(self) if test(projected[index], index, projected))

    def where_in_select_with_accum(self: 'QueryList[T]',
                                   selector: Optional[Selector],
                                   accumulate: Optional[Accumulate],
                                   predicate: Optional[AccumPredicate]) -> 'QueryList[T]':
        """
        like where_in_select, but first reduces the whole projection to one
        accumulator value with accumulate(projected, seq). the predicate then
        receives (projected[i], i, projected, accum).
        """
        if predicate is None: return self
        projected = self.select(selector)
        accum = adapt(accumulate)(projected, self) if accumulate is not None else projected
        test = adapt(predicate)
        return self._new(item for index, item in enumerate(self) if test(projected[index], index, projected, accum))

    def not_null(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[T]':
        """drop elements whose (selected) value is None"""
        probe = adapt(selector) if selector is not None else identity
        return self._new(item for index, item in enumerate(self) if probe(item, index, self) is not None)

    def not_empty(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[T]':
        """drop elements whose (selected) value is falsy"""
        probe = adapt(selector) if selector is not None else identity
        return self._new(item for index, item in enumerate(self) if probe(item, index, self))

    def index_where(self: 'QueryList[T]', predicate: Predicate) -> 'QueryList[int]':
        """indices of the elements matching predicate, ascending"""
        test = adapt(predicate)
        return self._new(index for index, item in enumerate(self) if test(item, index, self))

    def elements_at_index(self: 'QueryList[T]', indices: Iterable[int]) -> 'QueryList[T]':
        """elements at the given indices, in the given order"""
        return self._new(list.__getitem__(self, index) for index in indices)

    # --- projection ---

    def select(self: 'QueryList[T]', selector: Optional[Selector[U]] = None) -> 'QueryList[U]':
        """project each element with selector(item, index, seq). no selector returns self."""
        if selector is None: return self
        project = adapt(selector)
        return self._new(project(item, index, self) for index, item in enumerate(self))

    def select_many(self: 'QueryList[T]', selector: Optional[Selector[Iterable[U]]] = None) -> 'QueryList[U]':
        """project each element to a sequence and flatten one level"""
        return self._new(chain.from_iterable(self.select(selector)))

    def take(self: 'QueryList[T]', count: int) -> 'QueryList[T]':
        """the first 'count' elements"""
        return self._new(list.__getitem__(self, slice(None, count)))

    def skip(self: 'QueryList[T]', count: int) -> 'QueryList[T]':
        """everything after the first 'count' elements"""
        return self._new(list.__getitem__(self, slice(count, None)))

    # --- counting and quantifiers ---

    def count(self: 'QueryList[T]', predicate: Any = _MISSING) -> int:
        """
        number of elements, or of elements matching predicate.
        a non-callable argument keeps list.count(value) behaviour.
        """
        if predicate is _MISSING or predicate is None: return len(self)
        if not callable(predicate): return list.count(self, predicate)
        return len(self.where(predicate))

    def any(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> bool:
        if predicate is None: return len(self) > 0
        test = adapt(predicate)
        return any(test(item, index, self) for index, item in enumerate(self))

    def all(self: 'QueryList[T]', predicate: Predicate) -> bool:
        test = adapt(predicate)
        return all(test(item, index, self) for index, item in enumerate(self))

    def for_each(self: 'QueryList[T]', action: Callable[..., Any]) -> 'QueryList[T]':
        """call action(item, index, seq) for each element and return self"""
        run = adapt(action)
        for index, item in enumerate(self):
            run(item, index, self)
        return self

    # --- single element access ---

    def first(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> Optional[T]:
        """first element (or first match), None when there is none"""
        if predicate is None:
            return list.__getitem__(self, 0) if len(self) else None
        test = adapt(predicate)
        for index, item in enumerate(self):
            if test(item, index, self): return item
        return None

    def last(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> Optional[T]:
        """last element (or last match), None when there is none"""
        if predicate is None:
            return list.__getitem__(self, -1) if len(self) else None
        test = adapt(predicate)
        for index in range(len(self) - 1, -1, -1):
            item = list.__getitem__(self, index)
            if test(item, index, self): return item
        return None

    def single_or_none(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> Optional[T]:
        """the only element (or only match), None for zero or several"""
        matches = self.where(predicate)
        return list.__getitem__(matches, 0) if len(matches) == 1 else None

    def single(self: 'QueryList[T]', predicate: Optional[Predicate] = None) -> T:
        """the only element (or only match); raises NotFoundError otherwise"""
        matches = self.where(predicate)
        if len(matches) == 0:
            logger.debug("single() found no matching element")
            raise NotFoundError("sequence contains no matching elements")
        if len(matches) > 1:
            logger.debug(f"single() found {len(matches)} matching elements")
            raise NotFoundError("sequence contains more than one matching element")
        return list.__getitem__(matches, 0)

    def element_at_or_none(self: 'QueryList[T]', index: int) -> Optional[T]:
        if -len(self) <= index < len(self):
            return list.__getitem__(self, index)
        return None

    def element_at(self: 'QueryList[T]', index: int) -> T:
        """element at index; raises NotFoundError when out of range"""
        if not -len(self) <= index < len(self):
            logger.debug(f"element_at({index}) out of range for length {len(self)}")
            raise NotFoundError(f"index {index} not found")
        return list.__getitem__(self, index)
