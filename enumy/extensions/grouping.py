from __future__ import annotations
import logging
import typing
from ..types import *
from ..context import StageState
from ..callables import to_selector, to_equality_comparer

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping, Lookup

logger = logging.getLogger(__name__)

class _GroupingOperations(Generic[T]):
    def _build_groups(self: 'Enumerable[T]', key_selector: Func,
                      key_comparer: EqualityArg = None) -> List['Grouping[T, K]']:
        """single pass: find each item's group by a linear key scan, groups keep first-seen order"""
        from ..enumerable import Grouping, ArrayEnumerable
        select_key = to_selector(key_selector, self)
        keys_equal = to_equality_comparer(key_comparer, self)

        groups: List[Tuple[Any, List[T]]] = []
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            key = select_key(ctx.item, ctx)
            if ctx.cancel:
                break

            bucket = None
            for existing_key, items in groups:
                if keys_equal(key, existing_key):
                    bucket = items
                    break
            if bucket is None:
                bucket = []
                groups.append((key, bucket))
            bucket.append(ctx.item)

            state.commit(ctx)

        logger.debug(f"grouped {state.index + 1} items into {len(groups)} groups")
        return [Grouping(key, ArrayEnumerable(items)) for key, items in groups]

    def group_by(self: 'Enumerable[T]', key_selector: Func,
                 key_comparer: EqualityArg = None) -> 'Enumerable[Grouping[T, K]]':
        """group elements by a key, one grouping per distinct key in first-seen order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: iter(self._build_groups(key_selector, key_comparer)))

    def to_lookup(self: 'Enumerable[T]', key_selector: Func,
                  key_comparer: EqualityArg = None) -> 'Lookup[T, K]':
        """materialize the groups into a lookup addressable by key"""
        from ..enumerable import Lookup
        return Lookup(self._build_groups(key_selector, key_comparer), key_comparer)
