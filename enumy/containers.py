"""
mutable, list backed collections that also expose the full sequence surface.
a collection holds an ArrayEnumerable view over its backing list and serves
cursors from it; read-only mode is a flag, not a subclass.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, List as _List, Optional, TypeVar
from .types import T, Func, EqualityArg, SequenceSource
from .cursor import ArrayCursor, Cursor
from .context import StageState
from .callables import to_equality_comparer, to_predicate
from .enumerable import Enumerable, ArrayEnumerable
from .errors import ReadOnlyCollectionError

logger = logging.getLogger(__name__)

C = TypeVar('C', bound='Collection')


class Collection(Enumerable[T]):
    """array backed collection with change tracking"""

    def __init__(self, sequence: SequenceSource[T] = None, comparer: EqualityArg = None,
                 read_only: bool = False):
        from .factories import from_iterable
        super().__init__()
        self._items: _List[T] = from_iterable(sequence).to_array()
        self._view = ArrayEnumerable(self._items)
        self._comparer = to_equality_comparer(comparer, self)
        self._read_only = read_only
        self._has_changed = False

    # --- state ---

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    @property
    def has_changed(self) -> bool:
        """whether the collection was mutated since the last cursor was handed out"""
        return self._has_changed

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: Any) -> bool:
        return self.contains_item(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, read_only={self._read_only})"

    def get_cursor(self) -> Cursor[T]:
        self._has_changed = False
        return self._view.get_cursor()

    # --- helpers ---

    def _throw_if_read_only(self, operation: str) -> None:
        if self._read_only:
            logger.warning(f"rejected '{operation}' on a read-only {type(self).__name__}")
            raise ReadOnlyCollectionError(operation)

    def _mark_as_changed(self, func: Optional[Callable[[], Any]] = None) -> Any:
        result = func() if func is not None else None
        self._has_changed = True
        return result

    # --- queries ---

    def contains_item(self, item: T) -> bool:
        return any(self._comparer(existing, item) for existing in self._items)

    def get_item(self, index: int) -> T:
        return self._items[index]

    # --- mutation ---

    def add(self, item: T) -> Any:
        self._throw_if_read_only('add')
        self._mark_as_changed(lambda: self._items.append(item))

    def add_range(self, *items: T) -> None:
        for item in items:
            self.add(item)

    def push(self, *items: T) -> int:
        """alias of add_range(), returns the new length"""
        self._throw_if_read_only('push')
        self.add_range(*items)
        return len(self._items)

    def clear(self) -> None:
        self._throw_if_read_only('clear')
        # in place, the view keeps pointing at the same list
        self._mark_as_changed(self._items.clear)

    def set_item(self: C, index: int, item: T) -> C:
        self._throw_if_read_only('set_item')
        def assign():
            self._items[index] = item
        self._mark_as_changed(assign)
        return self

    def remove(self, item: T) -> bool:
        """removes the first occurrence of item"""
        removed = False
        def first_match(existing, ctx):
            nonlocal removed
            if removed:
                ctx.cancel = True
                return False
            removed = self._comparer(existing, item)
            return removed
        return self.remove_all(first_match) > 0

    def remove_all(self, predicate: Func) -> int:
        """removes every item matching predicate(item, ctx), returns how many were removed"""
        self._throw_if_read_only('remove_all')
        predicate = to_predicate(predicate, self)

        snapshot = list(self._items)
        kept: _List[T] = []
        cursor = ArrayCursor(snapshot)
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                kept.extend(snapshot[ctx.index:])
                break
            if not matched:
                kept.append(ctx.item)
            state.commit(ctx)

        removed = len(snapshot) - len(kept)
        if removed > 0:
            def replace():
                self._items[:] = kept
            self._mark_as_changed(replace)
            logger.debug(f"removed {removed} item(s) from {type(self).__name__}")
        return removed


class List(Collection[T]):
    """collection with positional access"""

    def index_of(self, item: T) -> int:
        """zero based index of the first occurrence, -1 if not found"""
        for i, existing in enumerate(self._items):
            if self._comparer(existing, item):
                return i
        return -1

    def insert(self, index: int, item: T) -> None:
        self._throw_if_read_only('insert')
        self._mark_as_changed(lambda: self._items.insert(index, item))

    def remove_at(self, index: int) -> bool:
        self._throw_if_read_only('remove_at')
        if 0 <= index < len(self._items):
            def delete():
                del self._items[index]
            self._mark_as_changed(delete)
            return True
        return False

    def __getitem__(self, index: int) -> T:
        return self.get_item(index)

    def __setitem__(self, index: int, item: T) -> None:
        self.set_item(index, item)


class HashSet(Collection[T]):
    """collection of items unique under the equality comparer (linear scan, no hashing)"""

    def __init__(self, sequence: SequenceSource[T] = None, comparer: EqualityArg = None,
                 read_only: bool = False):
        super().__init__(sequence, comparer, read_only)
        self._items[:] = ArrayEnumerable(list(self._items)).distinct(self._comparer).to_array()
        self._has_changed = False

    def _other_set(self, other: SequenceSource[T]) -> 'HashSet[T]':
        from .factories import from_iterable
        return HashSet(from_iterable(other), self._comparer)

    def _add_if_not_present(self, item: T) -> bool:
        if self.contains_item(item):
            return False
        super().add(item)
        return True

    def add(self, item: T) -> bool:
        """adds item unless an equal one is present, returns whether it was added"""
        self._throw_if_read_only('add')
        return self._add_if_not_present(item)

    # --- in-place set algebra ---

    def intersect_with(self, other: SequenceSource[T]) -> 'HashSet[T]':
        """keep only items also present in other"""
        self._throw_if_read_only('intersect_with')
        def intersect():
            self._items[:] = ArrayEnumerable(list(self._items)).intersect(other, self._comparer).to_array()
        self._mark_as_changed(intersect)
        return self

    def union_with(self, other: SequenceSource[T]) -> 'HashSet[T]':
        """add every item of other that is not present yet"""
        self._throw_if_read_only('union_with')
        def union():
            self._items[:] = ArrayEnumerable(list(self._items)).union(other, self._comparer).to_array()
        self._mark_as_changed(union)
        return self

    def symmetric_except_with(self, other: SequenceSource[T]) -> 'HashSet[T]':
        """keep items present in exactly one of this set and other"""
        self._throw_if_read_only('symmetric_except_with')
        def symmetric_except():
            if not self._items:
                self.union_with(other)
                return
            for item in self._other_set(other).to_array():
                if not self.remove(item):
                    self._add_if_not_present(item)
        self._mark_as_changed(symmetric_except)
        return self

    # --- comparisons ---

    def is_subset_of(self, other: SequenceSource[T]) -> bool:
        if not self._items:
            return True
        other_set = self._other_set(other)
        return all(other_set.contains_item(item) for item in self._items)

    def is_proper_subset_of(self, other: SequenceSource[T]) -> bool:
        other_set = self._other_set(other)
        if len(self._items) >= other_set.length:
            return False
        return all(other_set.contains_item(item) for item in self._items)

    def is_superset_of(self, other: SequenceSource[T]) -> bool:
        other_set = self._other_set(other)
        return all(self.contains_item(item) for item in other_set.to_array())

    def is_proper_superset_of(self, other: SequenceSource[T]) -> bool:
        other_set = self._other_set(other)
        if len(self._items) <= other_set.length:
            return False
        return all(self.contains_item(item) for item in other_set.to_array())

    def overlaps(self, other: SequenceSource[T]) -> bool:
        return ArrayEnumerable(list(self._items)).intersect(other, self._comparer).any()

    def set_equals(self, other: SequenceSource[T]) -> bool:
        other_set = self._other_set(other)
        if len(self._items) != other_set.length:
            return False
        return all(other_set.contains_item(item) for item in self._items)
