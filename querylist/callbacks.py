"""
adapts user callbacks to the (item, index, seq[, accum]) calling convention.

a callback gets as many leading positional arguments as it has required
positional parameters, so `lambda x: ...` and `lambda x, i, seq: ...` both work.
"""
import inspect
from .types import *

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
VARIADIC = -1


def arity(func: Callable) -> int:
    """number of leading arguments to pass, or VARIADIC for *args callables"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins like str/int and itemgetter objects have no signature
        return 1
    required = positional = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            # only python-level *args are trusted; C callables report generic (*args, **kwargs)
            return VARIADIC if inspect.isfunction(func) or inspect.ismethod(func) else 1
        if param.kind in _POSITIONAL:
            positional += 1
            if param.default is inspect.Parameter.empty:
                required += 1
    # callables whose positional parameters are all optional still get the item
    if required == 0 and positional > 0:
        return 1
    return required


def adapt(func: Callable) -> Callable:
    """wrap func so it can always be called with the full argument list"""
    count = arity(func)
    if count == VARIADIC:
        return func
    return lambda *args: func(*args[:count])


def identity(item: T, *_: Any) -> T:
    return item
