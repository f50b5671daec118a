from __future__ import annotations
import typing
from ..callbacks import adapt
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList


class _ArrayOperations(Generic[T]):
    """
    native list operations re-exposed so they return a query list instead of a
    bare list, keeping chains going.
    """

    def __getitem__(self: 'QueryList[T]', index):
        result = list.__getitem__(self, index)
        return self._new(result) if isinstance(index, slice) else result

    def __add__(self: 'QueryList[T]', other: Iterable[T]) -> 'QueryList[T]':
        return self._new(list.__add__(self, list(other)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def copy(self: 'QueryList[T]') -> 'QueryList[T]':
        return self._new(self)

    def concat(self: 'QueryList[T]', *items: Any) -> 'QueryList[T]':
        """new query list with items appended; list-like arguments are flattened one level"""
        result = list(self)
        for item in items:
            if isinstance(item, (list, tuple)):
                result.extend(item)
            else:
                result.append(item)
        return self._new(result)

    def slice(self: 'QueryList[T]', start: Optional[int] = None, end: Optional[int] = None) -> 'QueryList[T]':
        return self._new(list.__getitem__(self, slice(start, end)))

    def splice(self: 'QueryList[T]', start: int, delete_count: Optional[int] = None, *items: T) -> 'QueryList[T]':
        """
        remove delete_count elements from start in place, insert items there,
        and return the removed elements. a negative start counts from the end.
        """
        length = len(self)
        if start < 0:
            start = max(length + start, 0)
        else:
            start = min(start, length)
        if delete_count is None:
            delete_count = length - start
        end = start + min(max(delete_count, 0), length - start)
        removed = list.__getitem__(self, slice(start, end))
        list.__setitem__(self, slice(start, end), items)
        return self._new(removed)

    def map(self: 'QueryList[T]', callback: Callable[..., U]) -> 'QueryList[U]':
        """callback(value, index, seq) for every element"""
        call = adapt(callback)
        return self._new(call(item, index, self) for index, item in enumerate(self))

    def filter(self: 'QueryList[T]', callback: Callable[..., Any]) -> 'QueryList[T]':
        """elements for which callback(value, index, seq) is truthy"""
        call = adapt(callback)
        return self._new(item for index, item in enumerate(self) if call(item, index, self))
