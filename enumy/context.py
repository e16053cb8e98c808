from __future__ import annotations
from .types import *
from .cursor import Cursor


class ItemContext(Generic[T]):
    """
    execution context handed to a callback for one item of one stage.

    - previous_value: whatever the previous call of the same stage put into next_value
    - value: sticky, once set it is seen by every later call of the stage
    - cancel: stop the stage after this callback returns
    """

    __slots__ = ('_cursor', '_index', '_previous_value', 'cancel', 'next_value', 'value')

    def __init__(self, cursor: Cursor[T], index: int, previous_value: Any = None, value: Any = None):
        self._cursor = cursor
        self._index = index
        self._previous_value = previous_value
        self.cancel = False
        self.next_value: Any = None
        self.value: Any = value

    @property
    def cursor(self) -> Cursor[T]:
        return self._cursor

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def item(self) -> T:
        return self._cursor.current

    @property
    def previous_value(self) -> Any:
        return self._previous_value

    def __repr__(self) -> str:
        return f"ItemContext(index={self._index}, item={self.item!r}, cancel={self.cancel})"


class StageState:
    """
    carried state of one stage traversal.
    threads `previous` (call to next call) and `value` (call to all later calls)
    from one context into the next.
    """

    __slots__ = ('index', 'previous', 'value')

    def __init__(self):
        self.index = -1
        self.previous: Any = None
        self.value: Any = None

    def next_context(self, cursor: Cursor[T]) -> ItemContext[T]:
        """context for the item the cursor currently points at"""
        self.index += 1
        return ItemContext(cursor, self.index, self.previous, self.value)

    def context_at(self, cursor: Cursor[T], index: int) -> ItemContext[T]:
        """context with an explicit index, for stages that count differently than they pull"""
        return ItemContext(cursor, index, self.previous, self.value)

    def commit(self, ctx: ItemContext) -> None:
        self.previous = ctx.next_value
        self.value = ctx.value
