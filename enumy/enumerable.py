from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from .types import *
from .cursor import Cursor, IteratorCursor, ArrayCursor
from .context import StageState
from .callables import to_selector, to_comparer, to_equality_comparer, reversed_comparer

# --- operator mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.join import _JoinOperations
from .extensions.element import _ElementOperations
from .extensions.aggregate import _AggregateOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def get_cursor(self) -> Cursor[T]:
        """get a cursor over the items"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source_func: Optional[Callable[[], Iterator[T]]] = None):
        """init with a function that returns a fresh iterator when called"""
        self._source_func = source_func if source_func is not None else (lambda: iter(()))

    def get_cursor(self) -> Cursor[T]:
        return IteratorCursor(self._source_func())

    get_enumerator = get_cursor

    def __iter__(self) -> Iterator[T]:
        return self.get_cursor()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _JoinOperations[T],
    _ElementOperations[T],
    _AggregateOperations[T],
    _TerminalOperations[T]
):
    """a lazy, linq-inspired sequence. every operator pulls from its upstream on demand."""
    def __init__(self, source_func: Optional[Callable[[], Iterator[T]]] = None):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

# --- source variants ---

class ArrayEnumerable(Enumerable[T]):
    """random access source, every cursor is fresh and resettable"""

    def __init__(self, array: Optional[Sequence[T]] = None):
        super().__init__()
        self._array = array if array is not None else []

    def get_cursor(self) -> Cursor[T]:
        return ArrayCursor(self._array)


class IteratorEnumerable(Enumerable[T]):
    """single-shot source, owns exactly one cursor"""

    def __init__(self, iterator: Optional[Iterator[T]] = None):
        super().__init__()
        self._cursor = IteratorCursor(iterator)

    def get_cursor(self) -> Cursor[T]:
        return self._cursor


class WrappedEnumerable(Enumerable[T]):
    """wraps another sequence or a restartable iterable"""

    def __init__(self, sequence: Optional[Iterable[T]] = None):
        super().__init__()
        self._sequence = sequence if sequence is not None else ArrayEnumerable()

    @property
    def sequence(self) -> Iterable[T]:
        return self._sequence

    def get_cursor(self) -> Cursor[T]:
        if isinstance(self._sequence, IEnumerable):
            return self._sequence.get_cursor()
        return IteratorCursor(iter(self._sequence))

# --- grouping ---

class Grouping(WrappedEnumerable[T], Generic[T, K]):
    """a key paired with the items sharing it"""

    def __init__(self, key: K, sequence: IEnumerable[T]):
        super().__init__(sequence)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r})"


class Lookup(WrappedEnumerable[Any], Generic[T, K]):
    """groupings addressable by key, keys matched with the key equality comparer"""

    def __init__(self, groupings: Optional[Iterable['Grouping[T, K]']] = None,
                 key_comparer: EqualityArg = None):
        self._groupings: List[Grouping[T, K]] = list(groupings) if groupings is not None else []
        super().__init__(ArrayEnumerable(self._groupings))
        self._key_comparer = to_equality_comparer(key_comparer, self)

    def _find(self, key: K) -> Optional['Grouping[T, K]']:
        for grouping in self._groupings:
            if self._key_comparer(key, grouping.key):
                return grouping
        return None

    def __getitem__(self, key: K) -> 'Grouping[T, K]':
        grouping = self._find(key)
        if grouping is None:
            raise KeyError(key)
        return grouping

    def __contains__(self, key: K) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return len(self._groupings)

    def get(self, key: K, default: Any = None) -> Any:
        grouping = self._find(key)
        return default if grouping is None else grouping

    def keys(self) -> List[K]:
        return [g.key for g in self._groupings]

    def __repr__(self) -> str:
        return f"Lookup(groups={len(self._groupings)})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T], Generic[T, K]):
    """
    a stably sorted sequence, allowing for subsequent orderings.
    sort keys are evaluated once per item (with the item context protocol)
    the first time the sequence is traversed; the result is cached.
    """

    def __init__(self, source: IEnumerable[T], selector: Func = None,
                 comparer: Union[Func, None] = None, descending: bool = False):
        super().__init__()
        self._source = source
        self._raw_selector = selector
        self._raw_comparer = comparer
        self._descending = descending
        self._order_selector: Optional[Callable] = None
        self._order_comparer: Optional[Comparer] = None
        self._original_items: Optional[List[T]] = None
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    @property
    def selector(self) -> Callable[[T, Any], K]:
        if self._order_selector is None:
            self._order_selector = to_selector(self._raw_selector, self)
        return self._order_selector

    @property
    def comparer(self) -> Comparer:
        if self._order_comparer is None:
            comparer = to_comparer(self._raw_comparer, self)
            # descending swaps operands so ties keep their original order
            self._order_comparer = reversed_comparer(comparer) if self._descending else comparer
        return self._order_comparer

    def _get_original_items(self) -> List[T]:
        if self._original_items is None:
            self._original_items = self._source.to_array()
        return self._original_items

    def _get_data(self) -> List[T]:
        """sort once, then serve the cached order"""
        if not self._is_cached:
            items = self._get_original_items()
            selector = self.selector
            cursor = ArrayCursor(items)
            state = StageState()
            keyed = []
            while cursor.advance():
                ctx = state.next_context(cursor)
                keyed.append((selector(ctx.item, ctx), ctx.item))
                state.commit(ctx)

            comparer = self.comparer
            keyed.sort(key=cmp_to_key(lambda a, b: comparer(a[0], b[0])))
            self._cached_result = [item for _, item in keyed]
            self._is_cached = True
            logger.debug(f"sorted {len(self._cached_result)} items")
        return self._cached_result

    def get_cursor(self) -> Cursor[T]:
        return ArrayCursor(self._get_data())

    def then_by(self, selector: Func, comparer: Union[Func, None] = None) -> 'OrderedEnumerable[T, Any]':
        """secondary sort ascending, ties on every previous key fall through to this one"""
        primary = self

        def composite_key(item, ctx):
            return primary.selector(item, ctx), secondary_selector(item, ctx)

        def composite_compare(x, y):
            result = primary.comparer(x[0], y[0])
            if result != 0: return result
            return secondary_comparer(x[1], y[1])

        secondary_selector = to_selector(selector, self)
        secondary_comparer = to_comparer(comparer, self)
        originals = Enumerable(lambda: iter(primary._get_original_items()))
        return OrderedEnumerable(originals, composite_key, composite_compare)

    def then_by_descending(self, selector: Func, comparer: Union[Func, None] = None) -> 'OrderedEnumerable[T, Any]':
        """secondary sort descending"""
        return self.then_by(selector, reversed_comparer(to_comparer(comparer, self)))

    def then(self, comparer: Union[Func, None] = None) -> 'OrderedEnumerable[T, Any]':
        """secondary sort ascending by the items themselves"""
        return self.then_by(lambda item: item, comparer)

    def then_descending(self, comparer: Union[Func, None] = None) -> 'OrderedEnumerable[T, Any]':
        """secondary sort descending by the items themselves"""
        return self.then_by_descending(lambda item: item, comparer)
