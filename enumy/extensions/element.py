from __future__ import annotations
import typing
from ..types import *
from ..context import StageState
from ..callables import to_predicate, or_default_args
from ..errors import EmptySequenceError, MultipleMatchesError, IndexOutOfRangeError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_FIRST, _LAST, _SINGLE = 'first', 'last', 'single'


class _ElementOperations(Generic[T]):
    def _scan(self: 'Enumerable[T]', predicate: Callable[[T, Any], bool], mode: str) -> Tuple[bool, Any]:
        """drive the predicate over the sequence, returns (found, item)"""
        found, result = False, None
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                break
            if matched:
                if mode == _SINGLE and found:
                    raise MultipleMatchesError()
                found, result = True, ctx.item
                if mode == _FIRST:
                    break
            state.commit(ctx)
        return found, result

    def _required(self: 'Enumerable[T]', predicate: Func, mode: str) -> T:
        found, result = self._scan(to_predicate(predicate, self), mode)
        if not found:
            raise EmptySequenceError("sequence contains no elements" if predicate is None else "no matching element found")
        return result

    def _or_default(self: 'Enumerable[T]', args: Tuple[Any, ...], default: Any, mode: str) -> Any:
        if default is not None:
            args = args + (default,) if args else (None, default)
        predicate, default_value = or_default_args(args, self)
        found, result = self._scan(predicate, mode)
        return result if found else default_value

    # --- first ---

    def first(self: 'Enumerable[T]', predicate: Func = None) -> T:
        """first (matching) element, raises EmptySequenceError if there is none"""
        return self._required(predicate, _FIRST)

    def first_or_default(self: 'Enumerable[T]', *args: Any, default: Any = None) -> Any:
        """
        first_or_default() / first_or_default(predicate) / first_or_default(default_value)
        / first_or_default(predicate, default_value).
        a single argument that is neither callable nor a lambda text is the default value.
        """
        return self._or_default(args, default, _FIRST)

    # --- last ---

    def last(self: 'Enumerable[T]', predicate: Func = None) -> T:
        """last (matching) element"""
        return self._required(predicate, _LAST)

    def last_or_default(self: 'Enumerable[T]', *args: Any, default: Any = None) -> Any:
        """last (matching) element or a default, same overloads as first_or_default()"""
        return self._or_default(args, default, _LAST)

    # --- single ---

    def single(self: 'Enumerable[T]', predicate: Func = None) -> T:
        """the only (matching) element, raises MultipleMatchesError if there are more"""
        return self._required(predicate, _SINGLE)

    def single_or_default(self: 'Enumerable[T]', *args: Any, default: Any = None) -> Any:
        """the only (matching) element or a default. more than one match still raises."""
        return self._or_default(args, default, _SINGLE)

    # --- element at ---

    def element_at(self: 'Enumerable[T]', index: int) -> T:
        index = int(index)
        if index < 0: raise IndexOutOfRangeError(index)
        found, result = self._scan(lambda item, ctx: ctx.index == index, _FIRST)
        if not found:
            raise EmptySequenceError(f"sequence has no element at index {index}")
        return result

    def element_at_or_default(self: 'Enumerable[T]', index: int, default: Any = None) -> Any:
        index = int(index)
        if index < 0: raise IndexOutOfRangeError(index)
        found, result = self._scan(lambda item, ctx: ctx.index == index, _FIRST)
        return result if found else default
