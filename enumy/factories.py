import typing
from collections.abc import Iterator as _IteratorABC, Sequence as _SequenceABC
from itertools import repeat as _repeat
import numpy as np
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(source: SequenceSource[T] = None) -> 'Enumerable[T]':
    """
    create enumerable from a source:
    random access (list, tuple, range, str, ndarray, ...) -> restartable
    iterator / generator -> single pass
    any other iterable (set, dict, enumerable, ...) -> restartable via a fresh iter()
    """
    from .enumerable import ArrayEnumerable, IteratorEnumerable, WrappedEnumerable, IEnumerable
    if source is None:
        return ArrayEnumerable([])
    if isinstance(source, IEnumerable):
        return WrappedEnumerable(source)
    if isinstance(source, (_SequenceABC, np.ndarray)):
        return ArrayEnumerable(source)
    if isinstance(source, _IteratorABC):
        return IteratorEnumerable(source)
    if isinstance(source, Iterable):
        return WrappedEnumerable(source)
    raise TypeError(f"cannot create a sequence from {type(source).__name__}")

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import ArrayEnumerable
    return ArrayEnumerable(range(start, start + max(count, 0)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _repeat(item, max(count, 0)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import ArrayEnumerable
    return ArrayEnumerable([])

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function, called again on every traversal"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (generator_func() for _ in range(count)))

# --- aliases ---
enumy = from_iterable
E = from_iterable
