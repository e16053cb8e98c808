from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (item, ctx); callables declaring fewer parameters are called with fewer
Predicate = Callable[..., bool]
Selector = Callable[..., U]
ManySelector = Callable[..., Iterable[U]]
Action = Callable[..., Any]
Aggregator = Callable[..., U]
Zipper = Callable[..., V]
KeySelector = Callable[[int, T, Any], int]
Comparer = Callable[[Any, Any], int]
EqualityComparer = Callable[[Any, Any], bool]

# a callable, or a textual lambda such as "(x, ctx) => x * 2"
Func = Union[Callable[..., Any], str]
# an equality comparer, a textual lambda, or True for strict comparison
EqualityArg = Union[EqualityComparer, str, bool, None]

SequenceSource = Union[Sequence[T], Iterator[T], Iterable[T], None]
