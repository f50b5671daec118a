from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..callbacks import adapt, identity
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList


class _TerminalOperations(Generic[T]):
    def to_list(self: 'QueryList[T]') -> List[T]:
        """plain list copy, decoupled from this query list"""
        return list(self)

    def clone(self: 'QueryList[T]') -> 'QueryList[T]':
        """query list copy; element values are shared, not deep-copied"""
        return self._new(self)

    def to_set(self: 'QueryList[T]') -> Set[T]:
        return set(self)

    def to_dict(self: 'QueryList[T]', key_selector: KeySelector[T, K],
                value_selector: Optional[Selector] = None) -> Dict[K, Any]:
        """convert to dictionary; later elements win on duplicate keys"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self}

    def to_numpy(self: 'QueryList[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self))

    def to_series(self: 'QueryList[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self))

    def to_dataframe(self: 'QueryList[T]') -> pd.DataFrame:
        """convert to pandas dataframe (elements are rows)"""
        return pd.DataFrame(list(self))

    def equals(self: 'QueryList[T]', other: Any) -> bool:
        """identity comparison, not value equality"""
        return self is other

    def equals_values(self: 'QueryList[T]', other: Iterable[T], selector: Optional[Selector] = None) -> bool:
        """same length and pairwise-equal (selected) values, in order"""
        if self.equals(other): return True
        if other is None: return False
        other = self._new(other)
        if len(self) != len(other): return False
        project = adapt(selector) if selector is not None else identity
        return all(project(mine, index, self) == project(theirs, index, other)
                   for index, (mine, theirs) in enumerate(zip(self, other)))
