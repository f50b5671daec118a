from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks may declare any prefix of (item, index, seq)
Predicate = Callable[..., bool]
Selector = Callable[..., U]
KeySelector = Callable[[T], K]
KeyCompare = Callable[[K, K], bool]
Comparer = Callable[[T, T], int]
Accumulate = Callable[..., Any]
AccumPredicate = Callable[..., bool]

# single element, plain collection, or another query list
ItemsLike = Union[T, List[T], Tuple[T, ...], Set[T], 'QueryList[T]']


class Grouping(NamedTuple):
    """a (key, members) pair produced by group_by"""
    key: Any
    members: 'QueryList'

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, members={len(self.members)})"
