from __future__ import annotations
import logging
import typing
from ..types import *
from ..callables import to_equality_comparer

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

class _SetOperations(Generic[T]):
    """
    set-theoretic operations driven by an arbitrary equality comparer.
    the comparer may not map to a hashable key, so membership is a linear scan.
    """

    def distinct(self: 'Enumerable[T]', comparer: EqualityArg = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        def distinct_data():
            equals = to_equality_comparer(comparer, self)
            accepted: List[T] = []
            for item in self.get_cursor():
                if any(equals(item, existing) for existing in accepted):
                    continue
                accepted.append(item)
                yield item
        return Enumerable(distinct_data)

    def except_(self: 'Enumerable[T]', other: SequenceSource[T], comparer: EqualityArg = None) -> 'Enumerable[T]':
        """elements of this sequence that do not appear in other (duplicates of this sequence are kept)"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def except_data():
            equals = to_equality_comparer(comparer, self)
            excluded = from_iterable(other).distinct(equals).to_array()
            logger.debug(f"except: {len(excluded)} distinct items to exclude")
            for item in self.get_cursor():
                if not any(equals(item, candidate) for candidate in excluded):
                    yield item
        return Enumerable(except_data)

    def intersect(self: 'Enumerable[T]', other: SequenceSource[T], comparer: EqualityArg = None) -> 'Enumerable[T]':
        """order-preserving intersection, every matching value is produced once"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def intersect_data():
            equals = to_equality_comparer(comparer, self)
            remaining = from_iterable(other).distinct(equals).to_array()
            logger.debug(f"intersect: {len(remaining)} distinct candidates")
            for item in self.get_cursor():
                for i, candidate in enumerate(remaining):
                    if equals(item, candidate):
                        # a matched candidate is consumed
                        del remaining[i]
                        yield item
                        break
        return Enumerable(intersect_data)

    def union(self: 'Enumerable[T]', other: SequenceSource[T], comparer: EqualityArg = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self.concat(other).distinct(comparer)

    # --- membership and equality checks ---

    def contains(self: 'Enumerable[T]', item: Any, comparer: EqualityArg = None) -> bool:
        """whether any element equals item"""
        equals = to_equality_comparer(comparer, self)
        return self.any(lambda x: equals(x, item))

    def sequence_equal(self: 'Enumerable[T]', other: SequenceSource[T],
                       comparer: EqualityArg = None, key_comparer: EqualityArg = None) -> bool:
        """walks both sequences in lockstep comparing items and cursor positions"""
        from ..factories import from_iterable
        equals = to_equality_comparer(comparer, self)
        keys_equal = to_equality_comparer(key_comparer, self)

        cursor = self.get_cursor()
        other_cursor = from_iterable(other).get_cursor()
        while cursor.advance():
            if not other_cursor.advance():
                return False
            if not equals(cursor.current, other_cursor.current):
                return False
            if not keys_equal(cursor.key, other_cursor.key):
                return False
        return not other_cursor.advance()
