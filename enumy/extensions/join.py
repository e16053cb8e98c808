from __future__ import annotations
import logging
import typing
from ..types import *
from ..cursor import ArrayCursor
from ..context import StageState
from ..callables import to_zipper, to_equality_comparer

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

logger = logging.getLogger(__name__)

class _JoinOperations(Generic[T]):
    """
    joins pair key groups instead of hashing keys: both sides are grouped
    with group_by and every outer group is matched against every inner group
    whose key compares equal.
    """

    def join(self: 'Enumerable[T]', inner: SequenceSource[U], outer_key_selector: Func,
             inner_key_selector: Func, result_selector: Func,
             key_comparer: EqualityArg = None) -> 'Enumerable[V]':
        """inner join, result_selector(outer, inner, outer_ctx, inner_ctx)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._join_inner(inner, outer_key_selector, inner_key_selector,
                                                   result_selector, key_comparer))

    def _join_inner(self: 'Enumerable[T]', inner, outer_key_selector, inner_key_selector,
                    result_selector, key_comparer) -> Iterator[V]:
        from ..factories import from_iterable
        select_result = to_zipper(result_selector, self)
        keys_equal = to_equality_comparer(key_comparer, self)

        outer_groups = self._build_groups(outer_key_selector, key_comparer)
        inner_groups = from_iterable(inner)._build_groups(inner_key_selector, key_comparer)
        logger.debug(f"join: {len(outer_groups)} outer groups, {len(inner_groups)} inner groups")

        index = -1
        outer_state, inner_state = StageState(), StageState()
        for outer_group in outer_groups:
            outer_items = outer_group.to_array()
            for inner_group in inner_groups:
                if not keys_equal(outer_group.key, inner_group.key):
                    continue
                inner_items = inner_group.to_array()

                outer_cursor = ArrayCursor(outer_items)
                while outer_cursor.advance():
                    inner_cursor = ArrayCursor(inner_items)
                    while inner_cursor.advance():
                        index += 1
                        outer_ctx = outer_state.context_at(outer_cursor, index)
                        inner_ctx = inner_state.context_at(inner_cursor, index)

                        joined = select_result(outer_ctx.item, inner_ctx.item, outer_ctx, inner_ctx)
                        if outer_ctx.cancel or inner_ctx.cancel:
                            return
                        yield joined

                        outer_state.commit(outer_ctx)
                        inner_state.commit(inner_ctx)

    def group_join(self: 'Enumerable[T]', inner: SequenceSource[U], outer_key_selector: Func,
                   inner_key_selector: Func, result_selector: Func,
                   key_comparer: EqualityArg = None) -> 'Enumerable[V]':
        """
        pairs every outer item with each matching inner grouping,
        result_selector(outer, grouping, outer_ctx, grouping_ctx).
        outer items without a matching key produce nothing.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._group_join_inner(inner, outer_key_selector, inner_key_selector,
                                                         result_selector, key_comparer))

    def _group_join_inner(self: 'Enumerable[T]', inner, outer_key_selector, inner_key_selector,
                          result_selector, key_comparer) -> Iterator[V]:
        from ..factories import from_iterable
        select_result = to_zipper(result_selector, self)
        keys_equal = to_equality_comparer(key_comparer, self)

        outer_groups = self._build_groups(outer_key_selector, key_comparer)
        inner_groups = from_iterable(inner)._build_groups(inner_key_selector, key_comparer)
        logger.debug(f"group join: {len(outer_groups)} outer groups, {len(inner_groups)} inner groups")

        outer_index = -1
        outer_state, group_state = StageState(), StageState()
        for outer_group in outer_groups:
            matching: List['Grouping[U, K]'] = [g for g in inner_groups if keys_equal(outer_group.key, g.key)]
            if not matching:
                continue

            outer_cursor = outer_group.get_cursor()
            while outer_cursor.advance():
                outer_index += 1
                group_cursor = ArrayCursor(matching)
                group_index = -1
                while group_cursor.advance():
                    group_index += 1
                    outer_ctx = outer_state.context_at(outer_cursor, outer_index)
                    group_ctx = group_state.context_at(group_cursor, group_index)

                    joined = select_result(outer_ctx.item, group_ctx.item, outer_ctx, group_ctx)
                    if outer_ctx.cancel or group_ctx.cancel:
                        return
                    yield joined

                    outer_state.commit(outer_ctx)
                    group_state.commit(group_ctx)
