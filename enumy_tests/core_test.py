import suite
from fixtures import people, numbers, Person
from enumy import E, from_iterable, from_range, repeat, empty, generate, Enumerable

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- factories ---

@test("factories build the expected sequences")
def test_factories():
    assert_that(from_range(3, 4).to_array() == [3, 4, 5, 6], "from_range")
    assert_that(from_range(3, 0).to_array() == [], "from_range with zero count")
    assert_that(repeat('x', 3).to_array() == ['x', 'x', 'x'], "repeat")
    assert_that(empty().to_array() == [], "empty")
    assert_that(from_iterable(None).to_array() == [], "None source is empty")

    counter = iter(range(100))
    generated = generate(lambda: next(counter), 3)
    assert_that(generated.to_array() == [0, 1, 2], "generate")
    assert_that(generated.to_array() == [3, 4, 5], "generate calls the function again per traversal")


@test("restartable sources can be traversed twice")
def test_restartable_sources():
    for source in ([1, 2, 3], (1, 2, 3), range(1, 4), {1, 2, 3}):
        seq = E(source).where(lambda x: x > 0)
        assert_that(sorted(seq.to_array()) == [1, 2, 3], f"first pass over {type(source).__name__}")
        assert_that(sorted(seq.to_array()) == [1, 2, 3], f"second pass over {type(source).__name__}")


@test("a generator source is single pass")
def test_generator_source():
    seq = E(x for x in range(3))
    assert_that(seq.to_array() == [0, 1, 2], "first pass")
    assert_that(seq.to_array() == [], "second pass is empty")


@test("unsupported sources are rejected")
def test_bad_source():
    assert_raises(TypeError, lambda: E(42))


@test("sequences are python iterables")
def test_python_iteration():
    assert_that(list(E(numbers).where(lambda x: x > 8)) == [9, 10], "list()")
    assert_that([x * 2 for x in E([1, 2])] == [2, 4], "comprehension")


# --- laziness ---

@test("operators do not pull until materialized")
def test_laziness():
    pulled = []

    def source():
        for i in range(5):
            pulled.append(i)
            yield i

    seq = Enumerable(source).where(lambda x: x % 2 == 0).select(lambda x: x * 10)
    assert_that(pulled == [], "building the pipeline pulls nothing")
    assert_that(seq.first() == 0, "first")
    assert_that(pulled == [0], f"first() should pull one item, pulled {pulled}")


@test("take never pulls beyond its count")
def test_take_pull_count():
    pulled = []

    def source():
        for i in range(100):
            pulled.append(i)
            yield i

    assert_that(Enumerable(source).take(3).to_array() == [0, 1, 2], "take values")
    assert_that(pulled == [0, 1, 2], f"take pulled {pulled}")


# --- filtering and projection ---

@test("where filters with item and context")
def test_where():
    assert_that(E(numbers).where(lambda x: x % 3 == 0).to_array() == [3, 6, 9], "by item")
    assert_that(E(numbers).where(lambda x, ctx: ctx.index % 4 == 0).to_array() == [1, 5, 9], "by index")
    assert_that(E(numbers).where(None).count() == 10, "no predicate keeps everything")


@test("cancelling a where excludes the current item and stops")
def test_where_cancel():
    def stop_at_two(item, ctx):
        if ctx.index == 2:
            ctx.cancel = True
        return True

    assert_that(E([1, 2, 3, 4]).where(stop_at_two).to_array() == [1, 2], "cancel at index 2")
    assert_that(E([1, 2, 3, 4]).select(lambda x, ctx: setattr(ctx, 'cancel', x == 3) or x).to_array() == [1, 2],
                "cancel in select")


@test("select projects with item and context")
def test_select():
    names = E(people).select(lambda p: p.name).to_array()
    assert_that(names == [p.name for p in people], "names")
    assert_that(E(['a', 'b']).select(lambda x, ctx: f"{ctx.index}:{x}").to_array() == ['0:a', '1:b'], "indexed")


@test("select_many flattens and skips None")
def test_select_many():
    nested = E([[1, 2], [], None, [3]])
    assert_that(nested.select_many(lambda x: x).to_array() == [1, 2, 3], "flatten")
    assert_that(E([1, 2]).select_many().to_array() == [1, 2], "default wraps items")
    assert_that(E(['ab', 'c']).select_many(lambda s: list(s)).to_array() == ['a', 'b', 'c'], "strings")


@test("cast, not_empty and of_type")
def test_cast_not_empty_of_type():
    assert_that(E(['1', '2']).cast(int).to_array() == [1, 2], "cast with a converter")
    assert_that(E([1, 'a']).cast().to_array() == [1, 'a'], "cast without converter passes through")
    assert_that(E([0, 1, '', 'x', None, [], [0]]).not_empty().to_array() == [1, 'x', [0]], "not_empty")

    mixed = E([1, 'a', 2.5, True, None, Person(0, 'z', 1, 'oslo', 1)])
    assert_that(mixed.of_type(str).to_array() == ['a'], "class")
    assert_that(mixed.of_type((int, float)).count() == 3, "tuple of classes, bool is an int")
    assert_that(mixed.of_type('float').to_array() == [2.5], "class name")
    assert_that(mixed.of_type('tuple').count() == 1, "name of a base class")
    assert_that(mixed.of_type('nosuchtype').to_array() == [], "unknown name matches nothing")
    assert_that(mixed.of_type(None).count() == 6, "no filter keeps everything")


# --- partitioning ---

@test("take and skip")
def test_take_skip():
    assert_that(E(numbers).take(3).to_array() == [1, 2, 3], "take")
    assert_that(E(numbers).take(0).to_array() == [], "take zero")
    assert_that(E(numbers).take(-2).to_array() == [], "take negative")
    assert_that(E(numbers).take(50).count() == 10, "take more than available")
    assert_that(E(numbers).skip(7).to_array() == [8, 9, 10], "skip")
    assert_that(E(numbers).skip(0).count() == 10, "skip zero")
    assert_that(E(numbers).skip(50).to_array() == [], "skip everything")


@test("take_while and skip_while")
def test_take_skip_while():
    data = [1, 2, 5, 1, 7]
    assert_that(E(data).take_while(lambda x: x < 3).to_array() == [1, 2], "take_while")
    assert_that(E(data).skip_while(lambda x: x < 3).to_array() == [5, 1, 7], "skip_while keeps later matches")
    assert_that(E(data).take_while(lambda x: x < 100).to_array() == data, "take_while all")
    assert_that(E(data).skip_while(lambda x: x < 100).to_array() == [], "skip_while all")


@test("cancelling skip_while ends the skipping")
def test_skip_while_cancel():
    def skip_until_index_one(item, ctx):
        ctx.cancel = ctx.index == 1
        return True

    assert_that(E([1, 2, 3]).skip_while(skip_until_index_one).to_array() == [2, 3], "cancel yields the rest")


@test("skip_last drops the final item")
def test_skip_last():
    assert_that(E(numbers).skip_last().to_array() == numbers[:-1], "drop last")
    assert_that(E([1]).skip_last().to_array() == [], "single item")
    assert_that(empty().skip_last().to_array() == [], "empty")


# --- combining ---

@test("default_if_empty")
def test_default_if_empty():
    assert_that(empty().default_if_empty(0).to_array() == [0], "single default")
    assert_that(empty().default_if_empty(1, 2).to_array() == [1, 2], "several defaults")
    assert_that(E([5]).default_if_empty(0).to_array() == [5], "non empty is untouched")


@test("concat keeps every item of both sides")
def test_concat():
    a, b = [1, 2, 2], [2, 3]
    result = E(a).concat(b)
    assert_that(result.to_array() == [1, 2, 2, 2, 3], "order and duplicates")
    assert_that(result.count() == len(a) + len(b), "count adds up")
    assert_that(E(a).concat(E(b).where(lambda x: x > 2)).to_array() == [1, 2, 2, 3], "other sequence")
    assert_that(E(a).concat(None).to_array() == a, "None is empty")


@test("zip pairs items up to the shorter side")
def test_zip():
    assert_that(E([1, 2, 3]).zip([10, 20, 30], lambda a, b: a + b).to_array() == [11, 22, 33], "zipper")
    assert_that(E([1, 2, 3]).zip([10, 20]).to_array() == [11, 22], "default adds, shorter wins")
    indexed = E(['a', 'b']).zip(['x', 'y'], lambda a, b, c1, c2: (a, b, c1.index, c2.index)).to_array()
    assert_that(indexed == [('a', 'x', 0, 0), ('b', 'y', 1, 1)], f"contexts {indexed}")


if __name__ == "__main__":
    suite.main(title="core operators")
