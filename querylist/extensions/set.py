from __future__ import annotations
import numbers
import typing
import numpy as np
from ..callbacks import adapt
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList


class _Membership:
    """
    equality-based membership over arbitrary values.
    hashable values get o(1) lookups, unhashable ones fall back to a linear scan.
    """
    def __init__(self, values: Iterable[Any] = ()):
        self._hashed = set()
        self._unhashed = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        try:
            self._hashed.add(value)
        except TypeError:
            self._unhashed.append(value)

    def __contains__(self, value: Any) -> bool:
        try:
            if value in self._hashed: return True
        except TypeError:
            pass
        return any(value == other for other in self._unhashed)


def _as_items(items: Any) -> List[Any]:
    """treat lists, tuples, sets, numpy arrays and query lists as collections, anything else as one element"""
    if isinstance(items, (list, tuple, set, frozenset)):
        return list(items)
    if isinstance(items, np.ndarray):
        return items.tolist()
    return [items]


_TYPE_TAGS: Dict[str, Callable[[Any], bool]] = {
    'string': lambda v: isinstance(v, str),
    'number': lambda v: isinstance(v, numbers.Number) and not isinstance(v, (bool, np.bool_)),
    'int': lambda v: isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_)),
    'float': lambda v: isinstance(v, (float, np.floating)),
    'boolean': lambda v: isinstance(v, (bool, np.bool_)),
    'null': lambda v: v is None,
    'array': lambda v: isinstance(v, list),
    'tuple': lambda v: isinstance(v, tuple),
    'object': lambda v: isinstance(v, dict),
    'set': lambda v: isinstance(v, (set, frozenset)),
    'function': callable,
}
_TYPE_TAGS.update({
    'str': _TYPE_TAGS['string'],
    'bool': _TYPE_TAGS['boolean'],
    'none': _TYPE_TAGS['null'],
    'undefined': _TYPE_TAGS['null'],
    'list': _TYPE_TAGS['array'],
    'dict': _TYPE_TAGS['object'],
    'callable': _TYPE_TAGS['function'],
})


def _type_matcher(type_or_types: Any) -> Callable[[Any], bool]:
    tags = list(type_or_types) if isinstance(type_or_types, (list, tuple, set, frozenset)) else [type_or_types]
    checks = []
    for tag in tags:
        if isinstance(tag, str):
            if tag.lower() not in _TYPE_TAGS:
                raise ValueError(f"unknown type tag: '{tag}'")
            checks.append(_TYPE_TAGS[tag.lower()])
        elif isinstance(tag, type):
            checks.append(lambda v, cls=tag: isinstance(v, cls))
        else:
            raise ValueError(f"type filter must be a class or a type tag string, got {tag!r}")
    return lambda value: any(check(value) for check in checks)


class _SetOperations(Generic[T]):
    def distinct(self: 'QueryList[T]', selector: Optional[Selector] = None) -> 'QueryList[T]':
        """first occurrence of each value (or selected key), in encounter order"""
        keys = self.select(selector)
        seen = _Membership()
        keep = []
        for item, key in zip(self, keys):
            if key in seen: continue
            seen.add(key)
            keep.append(item)
        return self._new(keep)

    def except_(self: 'QueryList[T]', items: ItemsLike, selector: Optional[Selector] = None) -> 'QueryList[T]':
        """elements whose (selected) value does not occur among items' (selected) values"""
        others = _Membership(self._new(_as_items(items)).select(selector))
        return self.where_in_select(selector or (lambda item: item), lambda key: key not in others)

    def intersect(self: 'QueryList[T]', items: ItemsLike, selector: Optional[Selector] = None) -> 'QueryList[T]':
        """elements whose (selected) value occurs among items' (selected) values"""
        others = _Membership(self._new(_as_items(items)).select(selector))
        return self.where_in_select(selector or (lambda item: item), lambda key: key in others)

    def contains(self: 'QueryList[T]', value: T, selector: Optional[KeySelector[T, K]] = None) -> bool:
        """membership test; with a selector, compares selector(value) against selected keys"""
        if selector is None:
            return value in _Membership(self)
        return selector(value) in _Membership(selector(item) for item in self)

    def contains_all(self: 'QueryList[T]', values: Iterable[T], selector: Optional[Selector] = None) -> bool:
        """true when every value is contained, honoring selector-based equivalence"""
        values = self._new(_as_items(values))
        keys = _Membership(self.select(selector))
        return all(key in keys for key in values.select(selector))

    def of_type(self: 'QueryList[T]', type_or_types: Any, selector: Optional[Selector] = None) -> 'QueryList[T]':
        """
        keep elements whose (selected) value matches one of the given classes or
        type tags ('string', 'number', 'boolean', 'null', 'array', 'object', ...)
        """
        matches = _type_matcher(type_or_types)
        return self.where_in_select_with_accum(selector, None, lambda value: matches(value))
