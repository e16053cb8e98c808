import suite
from fixtures import people
from enumy import E, empty

test = suite.test
assert_that = suite.assert_that


@test("distinct keeps first occurrences in order")
def test_distinct():
    data = [3, 1, 3, 2, 1]
    assert_that(E(data).distinct().to_array() == [3, 1, 2], "distinct")
    once = E(data).distinct()
    assert_that(once.distinct().to_array() == once.to_array(), "distinct is idempotent")
    assert_that(empty().distinct().to_array() == [], "empty")


@test("distinct with a custom comparer")
def test_distinct_comparer():
    words = ['Apple', 'apple', 'Pear', 'APPLE', 'pear']
    result = E(words).distinct(lambda a, b: a.lower() == b.lower()).to_array()
    assert_that(result == ['Apple', 'Pear'], f"case insensitive distinct gave {result}")

    by_city = E(people).distinct(lambda a, b: a.city == b.city).select(lambda p: p.city).to_array()
    assert_that(len(by_city) == len(set(p.city for p in people)), "one person per city")


@test("default equality is loose, True demands the same type")
def test_distinct_strictness():
    assert_that(E([1, 1.0, True]).distinct().to_array() == [1], "1 == 1.0 == True")
    assert_that(E([1, 1.0, True]).distinct(True).to_array() == [1, 1.0, True], "strict keeps all three")


@test("except_ removes items found in the other sequence")
def test_except():
    assert_that(E([1, 2, 2, 3, 4]).except_([2, 4]).to_array() == [1, 3], "except")
    assert_that(E([1, 1, 3]).except_([2]).to_array() == [1, 1, 3], "duplicates of the left side are kept")
    assert_that(E([1, 2]).except_([]).to_array() == [1, 2], "nothing to remove")
    result = E(['a', 'B']).except_(['b'], lambda x, y: x.lower() == y.lower()).to_array()
    assert_that(result == ['a'], f"comparer {result}")


@test("intersect produces each common value once, in left order")
def test_intersect():
    assert_that(E([4, 1, 2, 1, 3]).intersect([1, 3, 3, 5]).to_array() == [1, 3], "intersect")
    assert_that(E([1, 2]).intersect([]).to_array() == [], "empty right side")
    assert_that(empty().intersect([1]).to_array() == [], "empty left side")


@test("intersect reads the other side lazily")
def test_intersect_lazy():
    other = []
    seq = E([1, 2, 3]).intersect(other)
    other.extend([2, 3])
    assert_that(seq.to_array() == [2, 3], "items added before traversal are seen")


@test("union is concat plus distinct")
def test_union():
    a, b = [1, 2, 2, 3], [3, 4, 1, 5]
    assert_that(E(a).union(b).to_array() == [1, 2, 3, 4, 5], "union")
    assert_that(E(a).union(b).to_array() == E(a).concat(b).distinct().to_array(), "same as concat + distinct")


@test("contains uses equality, optionally custom")
def test_contains():
    assert_that(E([1, 2, 3]).contains(2), "present")
    assert_that(not E([1, 2, 3]).contains(9), "absent")
    assert_that(E([1, 2]).contains(2.0), "loose equality")
    assert_that(not E([1, 2]).contains(2.0, True), "strict equality")
    assert_that(E(['A']).contains('a', lambda x, y: x.lower() == y.lower()), "custom comparer")
    assert_that(not empty().contains(None), "empty contains nothing")


@test("sequence_equal compares items and positions")
def test_sequence_equal():
    assert_that(E([1, 2, 3]).sequence_equal([1, 2, 3]), "equal")
    assert_that(not E([1, 2, 3]).sequence_equal([1, 2]), "shorter other")
    assert_that(not E([1, 2]).sequence_equal([1, 2, 3]), "longer other")
    assert_that(not E([1, 2, 3]).sequence_equal([1, 3, 2]), "different order")
    assert_that(empty().sequence_equal([]), "both empty")
    assert_that(E(['a']).sequence_equal(['A'], lambda x, y: x.upper() == y.upper()), "custom comparer")


if __name__ == "__main__":
    suite.main(title="set operations")
