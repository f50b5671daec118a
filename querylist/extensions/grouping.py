from __future__ import annotations
import logging
import operator
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..querylist import QueryList

logger = logging.getLogger(__name__)


class _GroupingOperations(Generic[T]):
    def group_by(self: 'QueryList[T]',
                 selector: Selector,
                 key_compare: Optional[KeyCompare] = None) -> 'QueryList[Grouping]':
        """
        partition elements into (key, members) groups, in order of each key's
        first occurrence. key_compare(a, b) decides key identity (default ==),
        so structurally equal keys such as dicts can share a group.
        """
        same = key_compare or operator.eq
        keys = self.select(selector)
        seen: List[Any] = []
        groups = []
        for key in keys:
            if any(same(known, key) for known in seen): continue
            seen.append(key)
            # each distinct key's members are materialized exactly once
            members = self.where_in_select(lambda _item, index: keys[index], lambda candidate: same(candidate, key))
            groups.append(Grouping(key, members))
        logger.debug(f"grouped {len(self)} elements into {len(groups)} groups")
        return self._new(groups)
