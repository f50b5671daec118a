import logging
import typing
from .callbacks import adapt
from .errors import ConstructionError
from .types import *

if typing.TYPE_CHECKING:
    from .querylist import QueryList

logger = logging.getLogger(__name__)


def _check_count(count: int, factory: str) -> None:
    if count < 0:
        logger.debug(f"{factory} called with negative count {count}")
        raise ConstructionError(f"{factory} count must not be negative, got {count}")

def from_iterable(data: Optional[Iterable[T]] = None) -> 'QueryList[T]':
    """create query list from iterable (a query list is returned as is)"""
    from .querylist import QueryList
    return QueryList.from_(data)

def from_range(start: int, count: int) -> 'QueryList[int]':
    """'count' consecutive integers starting at 'start'"""
    from .querylist import QueryList
    _check_count(count, 'from_range')
    return QueryList(range(start, start + count))

def repeat(item: T, count: int) -> 'QueryList[T]':
    """the same item 'count' times (not copied)"""
    from .querylist import QueryList
    _check_count(count, 'repeat')
    return QueryList([item] * count)

def empty() -> 'QueryList[Any]':
    from .querylist import QueryList
    return QueryList()

def generate(generator_func: Callable[..., T], count: int) -> 'QueryList[T]':
    """
    call generator_func 'count' times. a function declaring a parameter
    receives the position being generated.
    """
    from .querylist import QueryList
    _check_count(count, 'generate')
    produce = adapt(generator_func)
    return QueryList(produce(index) for index in range(count))

# --- aliases ---
P = from_iterable
