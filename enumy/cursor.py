from __future__ import annotations
from abc import ABC, abstractmethod
from .types import *
from .errors import UnsupportedOperationError

_DONE = object()


class Cursor(ABC, Generic[T]):
    """
    step-wise position holder over a source.
    `key` starts at -1 (before first); `current` is only meaningful
    after a successful advance() and before exhaustion.
    """

    def __init__(self):
        self._index = -1
        self._current: Any = None
        self._done = False

    @property
    @abstractmethod
    def can_reset(self) -> bool:
        pass

    @property
    def current(self) -> Optional[T]:
        return None if self._done else self._current

    @property
    def is_valid(self) -> bool:
        """whether advance() may still produce elements"""
        return not self._done

    @property
    def key(self) -> int:
        return self._index

    @abstractmethod
    def _step(self) -> Any:
        """return the next raw element or _DONE"""
        pass

    def advance(self) -> bool:
        """move to the next element, returns whether one is available"""
        if self._done:
            return False
        self._index += 1
        element = self._step()
        if element is _DONE:
            self._done = True
            self._current = None
            return False
        self._current = element
        return True

    move_next = advance

    @abstractmethod
    def reset(self) -> 'Cursor[T]':
        pass

    # --- python iterator protocol ---

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        if not self.advance():
            raise StopIteration
        return self._current


class IteratorCursor(Cursor[T]):
    """drives an arbitrary one-shot iterator, cannot be reset"""

    def __init__(self, iterator: Optional[Iterator[T]] = None):
        super().__init__()
        self._iterator = iterator if iterator is not None else iter(())

    @property
    def can_reset(self) -> bool:
        return False

    def _step(self) -> Any:
        return next(self._iterator, _DONE)

    def reset(self) -> 'Cursor[T]':
        raise UnsupportedOperationError("reset is not supported by an iterator based cursor")


class ArrayCursor(Cursor[T]):
    """drives a random access source, reset() starts over from the first element"""

    def __init__(self, array: Optional[Sequence[T]] = None):
        super().__init__()
        self._array = array if array is not None else []
        self._position = 0

    @property
    def can_reset(self) -> bool:
        return True

    def _step(self) -> Any:
        # length is re-read on every step, the backing list may be mutated
        if self._position >= len(self._array):
            return _DONE
        element = self._array[self._position]
        self._position += 1
        return element

    def reset(self) -> 'Cursor[T]':
        self._index = -1
        self._current = None
        self._done = False
        self._position = 0
        return self
