from __future__ import annotations
import typing
from ..types import *
from ..context import StageState
from ..callables import to_aggregator, to_predicate, to_action, to_number

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_NOTHING = object()


class _AggregateOperations(Generic[T]):
    def aggregate(self: 'Enumerable[T]', aggregator: Func = None, default: Any = None) -> Any:
        """
        folds the sequence. the first item seeds the result, from the second item on
        aggregator(result, item, ctx) produces the new result.
        returns default for an empty sequence or when cancelled before a first result.
        without an aggregator the coerced values are added.
        """
        aggregate_step = to_aggregator(aggregator, self)
        result = default
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            if ctx.index != 0:
                step_result = aggregate_step(result, ctx.item, ctx)
            else:
                step_result = ctx.item
            if ctx.cancel:
                break
            result = step_result
            state.commit(ctx)
        return result

    def sum(self: 'Enumerable[T]', default: Any = None) -> Any:
        """sum of the coerced values, default for an empty sequence"""
        total = self.aggregate(lambda result, item: to_number(result) + to_number(item), _NOTHING)
        return default if total is _NOTHING else to_number(total)

    def average(self: 'Enumerable[T]', default: Any = None) -> Any:
        """mean of the coerced values, default for an empty sequence"""
        count = 1
        def add(result, item, ctx):
            nonlocal count
            count = ctx.index + 1
            return to_number(result) + to_number(item)

        total = self.aggregate(add, _NOTHING)
        if total is _NOTHING: return default
        return to_number(total) / count

    def max(self: 'Enumerable[T]', default: Any = None) -> Any:
        """largest item, default for an empty sequence"""
        return self.aggregate(lambda result, item: item if item > result else result, default)

    def min(self: 'Enumerable[T]', default: Any = None) -> Any:
        """smallest item, default for an empty sequence"""
        return self.aggregate(lambda result, item: item if item < result else result, default)

    # --- quantifiers ---

    def count(self: 'Enumerable[T]', predicate: Func = None) -> int:
        """count (matching) elements"""
        predicate = to_predicate(predicate, self)
        counted = 0
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                break
            if matched:
                counted += 1
            state.commit(ctx)
        return counted

    def all(self: 'Enumerable[T]', predicate: Func = None) -> bool:
        """check if all elements satisfy condition"""
        predicate = to_predicate(predicate, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                break
            if not matched:
                return False
            state.commit(ctx)
        return True

    def any(self: 'Enumerable[T]', predicate: Func = None) -> bool:
        """check if any element satisfies condition"""
        predicate = to_predicate(predicate, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                break
            if matched:
                return True
            state.commit(ctx)
        return False

    # --- side effects ---

    def each(self: 'Enumerable[T]', action: Func = None) -> 'Enumerable[T]':
        """
        performs the action on each element for side-effects.
        this is an EAGER operation; returns the original sequence to allow chaining.
        """
        action = to_action(action, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            action(ctx.item, ctx)
            if ctx.cancel:
                break
            state.commit(ctx)
        return self

    for_each = each

    # --- strings ---

    def join_to_string(self: 'Enumerable[T]', separator: str, default: str = '') -> str:
        """string form of every item joined by separator, default for an empty sequence"""
        parts = [str(item) for item in self.get_cursor()]
        return separator.join(parts) if parts else default

    def concat_to_string(self: 'Enumerable[T]', default: str = '') -> str:
        return self.join_to_string('', default)
