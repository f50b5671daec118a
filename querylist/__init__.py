r"""
'    ________                           .____    .__          __
'    \_____  \  __ __   ___________ ___.|    |   |__| _______/  |_
'     /  / \  \|  |  \_/ __ \_  __ <   ||    |   |  |/  ___/\   __\
'    /   \_/.  \  |  /\  ___/|  | \/\___  |    |___|  |\___ \  |  |
'    \_____\ \_/____/  \___  >__|   / ____|_______ \__/____  > |__|
'           \__>           \/       \/            \/       \/
"""
import logging

# expose the main class
from .querylist import QueryList

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    P,
)

# expose supporting types, errors and configuration
from .types import Grouping
from .errors import (
    QueryListError,
    ConstructionError,
    NotFoundError,
    TypeMismatchError,
    DivisionByZeroError,
    EmptySequenceError,
)
from .config import QueryListConfig, get_config, configure, reset_config

# library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "QueryList",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "P",
    "Grouping",
    "QueryListError",
    "ConstructionError",
    "NotFoundError",
    "TypeMismatchError",
    "DivisionByZeroError",
    "EmptySequenceError",
    "QueryListConfig",
    "get_config",
    "configure",
    "reset_config",
]
