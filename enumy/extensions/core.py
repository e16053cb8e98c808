from __future__ import annotations
import typing
from ..types import *
from ..context import StageState
from ..callables import to_predicate, to_selector, to_many_selector, to_zipper

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    # --- filtering and projection ---

    def where(self: 'Enumerable[T]', predicate: Func) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._where_inner(predicate))

    def _where_inner(self: 'Enumerable[T]', predicate: Func) -> Iterator[T]:
        predicate = to_predicate(predicate, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel:
                break
            if matched:
                yield ctx.item
            state.commit(ctx)

    def select(self: 'Enumerable[T]', selector: Func) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._select_inner(selector))

    def _select_inner(self: 'Enumerable[T]', selector: Func) -> Iterator[U]:
        selector = to_selector(selector, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            projected = selector(ctx.item, ctx)
            if ctx.cancel:
                break
            yield projected
            state.commit(ctx)

    def select_many(self: 'Enumerable[T]', selector: Func = None) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._select_many_inner(selector))

    def _select_many_inner(self: 'Enumerable[T]', selector: Func) -> Iterator[U]:
        selector = to_many_selector(selector, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            projected = selector(ctx.item, ctx)
            if ctx.cancel:
                break
            if projected is not None:
                yield from projected
            state.commit(ctx)

    def cast(self: 'Enumerable[T]', type_: Optional[Callable[[Any], U]] = None) -> 'Enumerable[U]':
        """passes items through, or converts each one with type_"""
        if type_ is None:
            return self.select(lambda item: item)
        return self.select(lambda item: type_(item))

    def not_empty(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """removes falsy items"""
        return self.where(lambda item: bool(item))

    def of_type(self: 'Enumerable[T]', type_filter: Union[Type[U], Tuple[type, ...], str, None]) -> 'Enumerable[U]':
        """
        filters the elements of a sequence based on a specified type.
        a class or tuple of classes is checked with isinstance, a string is
        compared with the class names in the item's mro. unknown names match nothing.
        """
        if type_filter is None or (isinstance(type_filter, str) and not type_filter.strip()):
            return self.where(lambda item: True)
        if isinstance(type_filter, str):
            name = type_filter.strip()
            return self.where(lambda item: any(cls.__name__ == name for cls in type(item).__mro__))
        return self.where(lambda item: isinstance(item, type_filter))

    # --- partitioning ---

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements, never pulls more than that"""
        from ..enumerable import Enumerable
        def take_data():
            if count <= 0: return
            cursor = self.get_cursor()
            taken = 0
            while taken < count and cursor.advance():
                taken += 1
                yield cursor.current
        return Enumerable(take_data)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        return self.skip_while(lambda item, ctx: ctx.index < count)

    def take_while(self: 'Enumerable[T]', predicate: Func) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._take_while_inner(predicate))

    def _take_while_inner(self: 'Enumerable[T]', predicate: Func) -> Iterator[T]:
        predicate = to_predicate(predicate, self)
        cursor = self.get_cursor()
        state = StageState()
        while cursor.advance():
            ctx = state.next_context(cursor)
            matched = predicate(ctx.item, ctx)
            if ctx.cancel or not matched:
                break
            yield ctx.item
            state.commit(ctx)

    def skip_while(self: 'Enumerable[T]', predicate: Func) -> 'Enumerable[T]':
        """skip elements while predicate is true. cancelling ends the skipping."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._skip_while_inner(predicate))

    def _skip_while_inner(self: 'Enumerable[T]', predicate: Func) -> Iterator[T]:
        predicate = to_predicate(predicate, self)
        cursor = self.get_cursor()
        state = StageState()
        skipping = True
        while cursor.advance():
            ctx = state.next_context(cursor)
            if skipping:
                skipping = predicate(ctx.item, ctx) and not ctx.cancel
            if not skipping:
                yield ctx.item
            state.commit(ctx)

    def skip_last(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """all elements but the last one"""
        from ..enumerable import Enumerable
        def skip_last_data():
            cursor = self.get_cursor()
            if not cursor.advance(): return
            held = cursor.current
            while cursor.advance():
                yield held
                held = cursor.current
        return Enumerable(skip_last_data)

    # --- combining ---

    def default_if_empty(self: 'Enumerable[T]', *defaults: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or the default values if the sequence is empty"""
        from ..enumerable import Enumerable
        def default_data():
            cursor = self.get_cursor()
            if not cursor.advance():
                yield from defaults
                return
            yield cursor.current
            while cursor.advance():
                yield cursor.current
        return Enumerable(default_data)

    def concat(self: 'Enumerable[T]', other: SequenceSource[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def concat_data():
            yield from self.get_cursor()
            yield from from_iterable(other).get_cursor()
        return Enumerable(concat_data)

    def zip(self: 'Enumerable[T]', other: SequenceSource[U], zipper: Func = None) -> 'Enumerable[V]':
        """
        combine items pairwise with zipper(item1, item2, ctx1, ctx2), stops at the shorter sequence.
        without a zipper the items are added.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._zip_inner(other, zipper))

    def _zip_inner(self: 'Enumerable[T]', other: SequenceSource[U], zipper: Func) -> Iterator[V]:
        from ..factories import from_iterable
        zipper = to_zipper(zipper, self)
        cursor = self.get_cursor()
        other_cursor = from_iterable(other).get_cursor()
        first_state, second_state = StageState(), StageState()
        while cursor.advance() and other_cursor.advance():
            ctx1 = first_state.next_context(cursor)
            ctx2 = second_state.next_context(other_cursor)
            zipped = zipper(ctx1.item, ctx2.item, ctx1, ctx2)
            if ctx1.cancel or ctx2.cancel:
                break
            yield zipped
            first_state.commit(ctx1)
            second_state.commit(ctx2)

    # --- ordering ---

    def order(self: 'Enumerable[T]', comparer: Func = None) -> 'OrderedEnumerable[T]':
        """sort the elements themselves"""
        return self.order_by(lambda item: item, comparer)

    def order_descending(self: 'Enumerable[T]', comparer: Func = None) -> 'OrderedEnumerable[T]':
        """sort the elements themselves in descending order"""
        return self.order_by_descending(lambda item: item, comparer)

    def order_by(self: 'Enumerable[T]', key_selector: Func, comparer: Func = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, key_selector, comparer)

    def order_by_descending(self: 'Enumerable[T]', key_selector: Func, comparer: Func = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, key_selector, comparer, descending=True)

    def reverse(self: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        """inverts the order of the elements in a sequence"""
        # ordered by descending position, so then_by() can still follow
        return self.order_by_descending(lambda item, ctx: ctx.index)
