from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..context import StageState
from ..callables import to_key_selector, to_selector

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..containers import List as ListCollection, HashSet


class _TerminalOperations(Generic[T]):
    def to_array(self: 'Enumerable[T]', key_selector: Union[Func, bool, None] = None) -> List[T]:
        """
        materialize into a python list in iteration order. with a key_selector
        (key, item, ctx) -> index every item is placed at the returned index instead;
        gaps are filled with None. True places items at their cursor position.
        """
        place = to_key_selector(key_selector, self)
        result: List[T] = []
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            target = place(cursor.key, ctx.item, ctx) if place is not None else None
            if ctx.cancel:
                break
            if place is None:
                result.append(ctx.item)
            else:
                target = int(target)
                if target >= len(result):
                    result.extend([None] * (target + 1 - len(result)))
                result[target] = ctx.item
            state.commit(ctx)
        return result

    def push_to_array(self: 'Enumerable[T]', target: Optional[List[T]]) -> 'Enumerable[T]':
        """append every item to an existing list, returns the sequence for chaining"""
        for item in self.get_cursor():
            if target is not None:
                target.append(item)
        return self

    def to_list(self: 'Enumerable[T]', read_only: bool = False,
                comparer: EqualityArg = None) -> 'ListCollection[T]':
        """materialize into a mutable (or read-only) list collection"""
        from ..containers import List as ListCollection
        return ListCollection(self, comparer, read_only=read_only)

    def to_set(self: 'Enumerable[T]', comparer: EqualityArg = None) -> 'HashSet[T]':
        """materialize into a set collection unique under comparer"""
        from ..containers import HashSet
        return HashSet(self, comparer)


class TerminalAccessor(Generic[T]):
    """conversions to python, numpy and pandas containers, reached through `seq.to`"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable.to_array()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable.to_array())

    def set(self) -> Set[T]:
        """convert to a builtin set (items must be hashable)"""
        return set(self._enumerable.to_array())

    def dict(self, key_selector: Func, value_selector: Func = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        select_key = to_selector(key_selector, self._enumerable)
        select_value = to_selector(value_selector, self._enumerable)
        result = {}
        cursor = self._enumerable.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            result[select_key(ctx.item, ctx)] = select_value(ctx.item, ctx)
            state.commit(ctx)
        return result

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_array())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable.to_array())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable.to_array())
