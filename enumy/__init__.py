"""
'    ___  ____  __  __  __  __  _  _
'   | __||  _ \|  ||  ||  \/  || || |
'   | _| | | | |  \/  || |\/| | \_  /
'   |___||_| |_|\____/ |_|  |_|  |_|
'
lazy, cursor driven sequence queries
"""
import logging

# expose the main classes
from .enumerable import (
    IEnumerable,
    Enumerable,
    ArrayEnumerable,
    IteratorEnumerable,
    WrappedEnumerable,
    OrderedEnumerable,
    Grouping,
    Lookup
)

# expose the collections
from .containers import Collection, List, HashSet

# expose cursor and context
from .cursor import Cursor, IteratorCursor, ArrayCursor
from .context import ItemContext

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    enumy,
    E
)

# expose errors and settings
from .errors import (
    EnumyError,
    EmptySequenceError,
    MultipleMatchesError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
    ReadOnlyCollectionError,
    InvalidExpressionError
)
from .config import EnumyConfig, get_config, configure, reset_config, configure_logging
from .lambdas import compile_lambda

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IEnumerable",
    "Enumerable",
    "ArrayEnumerable",
    "IteratorEnumerable",
    "WrappedEnumerable",
    "OrderedEnumerable",
    "Grouping",
    "Lookup",
    "Collection",
    "List",
    "HashSet",
    "Cursor",
    "IteratorCursor",
    "ArrayCursor",
    "ItemContext",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "enumy",
    "E",
    "EnumyError",
    "EmptySequenceError",
    "MultipleMatchesError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
    "ReadOnlyCollectionError",
    "InvalidExpressionError",
    "EnumyConfig",
    "get_config",
    "configure",
    "reset_config",
    "configure_logging",
    "compile_lambda"
]
