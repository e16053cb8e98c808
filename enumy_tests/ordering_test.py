import suite
from fixtures import people
from enumy import E, empty, OrderedEnumerable

test = suite.test
assert_that = suite.assert_that


@test("order and order_descending")
def test_order():
    data = [3, 1, 2]
    assert_that(E(data).order().to_array() == [1, 2, 3], "ascending")
    assert_that(E(data).order_descending().to_array() == [3, 2, 1], "descending")
    assert_that(E(data).order(lambda a, b: b - a).to_array() == [3, 2, 1], "custom comparer")
    assert_that(isinstance(E(data).order(), OrderedEnumerable), "ordered sequence")
    assert_that(empty().order().to_array() == [], "empty")


@test("order_by is stable")
def test_order_by_stable():
    pairs = [(2, 'a'), (1, 'b'), (2, 'c')]
    result = E(pairs).order_by(lambda p: p[0]).to_array()
    assert_that(result == [(1, 'b'), (2, 'a'), (2, 'c')], f"stable ascending gave {result}")
    result = E(pairs).order_by_descending(lambda p: p[0]).to_array()
    assert_that(result == [(2, 'a'), (2, 'c'), (1, 'b')], f"stable descending gave {result}")


@test("then_by breaks ties of the primary key")
def test_then_by():
    pairs = [(2, 'z'), (1, 'b'), (2, 'a')]
    result = E(pairs).order_by(lambda p: p[0]).then_by(lambda p: p[1]).to_array()
    assert_that(result == [(1, 'b'), (2, 'a'), (2, 'z')], f"then_by gave {result}")
    result = E(pairs).order_by(lambda p: p[0]).then_by_descending(lambda p: p[1]).to_array()
    assert_that(result == [(1, 'b'), (2, 'z'), (2, 'a')], f"then_by_descending gave {result}")


@test("then and then_descending sort by the items")
def test_then():
    words = ['bb', 'a', 'ab', 'b']
    assert_that(E(words).order_by(len).then().to_array() == ['a', 'b', 'ab', 'bb'], "then")
    assert_that(E(words).order_by(len).then_descending().to_array() == ['b', 'a', 'bb', 'ab'], "then_descending")


@test("three level ordering over the fixtures")
def test_multi_level():
    result = (E(people)
              .order_by(lambda p: p.city)
              .then_by_descending(lambda p: p.age)
              .then_by(lambda p: p.name)
              .to_array())
    expected = sorted(people, key=lambda p: (p.city, -p.age, p.name))
    assert_that(result == expected, "city asc, age desc, name asc")


@test("ordering is computed once and cached")
def test_order_cached():
    calls = []
    ordered = E([3, 1, 2]).order_by(lambda x: calls.append(x) or x)
    assert_that(calls == [], "nothing sorted before traversal")
    first = ordered.to_array()
    second = ordered.to_array()
    assert_that(first == second == [1, 2, 3], "same order twice")
    assert_that(len(calls) == 3, f"keys evaluated once per item, got {len(calls)}")


@test("order keys may use the context")
def test_order_by_context():
    result = E(['a', 'b', 'c']).order_by_descending(lambda item, ctx: ctx.index).to_array()
    assert_that(result == ['c', 'b', 'a'], f"ordering by position gave {result}")


@test("reverse inverts and can be refined")
def test_reverse():
    assert_that(E([1, 2, 3]).reverse().to_array() == [3, 2, 1], "reverse")
    assert_that(empty().reverse().to_array() == [], "empty")
    assert_that(isinstance(E([1]).reverse(), OrderedEnumerable), "reverse is ordered")


@test("operators compose after ordering")
def test_order_compose():
    top = E(people).order_by_descending(lambda p: p.salary).take(3).select(lambda p: p.salary).to_array()
    expected = sorted((p.salary for p in people), reverse=True)[:3]
    assert_that(top == expected, f"top salaries {top}")


if __name__ == "__main__":
    suite.main(title="ordering")
