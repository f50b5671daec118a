import suite
from cards import cards, card_provider, TypeA, TypeB
from querylist import P, QueryList, empty

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    result = P([1, 2, 1, 3, 2, 4]).distinct()
    assert_that(result == [1, 2, 3, 4], "distinct should preserve first occurrence order")


@test("distinct size matches the set of values")
def test_distinct_size():
    ages = cards(100).select(lambda m: m['age'])
    assert_that(len(ages.distinct()) == len(set(ages)), "one entry per distinct age")


@test("distinct with selector keeps the first element per key")
def test_distinct_with_selector():
    data = cards(100)
    added = []

    def first_time(m):
        if m['age'] in added: return False
        added.append(m['age'])
        return True

    assert_that(data.distinct(lambda m: m['age']) == data.where(first_time), "should keep first card per age")


@test("distinct handles unhashable values")
def test_distinct_unhashable():
    data = P([[1, 2], [1, 2], [3], {'a': 1}, {'a': 1}])
    assert_that(data.distinct() == [[1, 2], [3], {'a': 1}], "lists and dicts compare by value")


@test("distinct is idempotent")
def test_distinct_idempotent():
    data = cards(60).select(lambda m: m['age'] % 7)
    assert_that(data.distinct().distinct() == data.distinct(), "distinct twice equals distinct once")


# --- except_ ---

@test("except_ removes values found in the other sequence")
def test_except_basic():
    first = P([4, 2, 1, 5, 8, -1])
    second = P([4, -100, 7, 5, 8, -1])
    assert_that(first.except_(second) == [2, 1], "should keep only 2 and 1")


@test("except_ accepts a single element, a list and a tuple")
def test_except_item_shapes():
    data = P([1, 2, 3, 2])
    assert_that(data.except_(2) == [1, 3], "a single element removes all its occurrences")
    assert_that(data.except_([1, 3]) == [2, 2], "a list is treated as a collection")
    assert_that(data.except_((1, 2)) == [3], "a tuple is treated as a collection")


@test("except_ of unrelated cards keeps everything")
def test_except_unrelated():
    first, second = cards(100, seed=1), cards(100, seed=2)
    assert_that(first.except_(second) == first, "no card is shared")


@test("except_ with selector compares selected values")
def test_except_selector():
    first, second = cards(100, seed=1), cards(100, seed=2)
    result = first.except_(second, lambda m: m['age'])
    assert_that(result == first.where(lambda m: not second.contains(m, lambda k: k['age'])),
                "should drop cards whose age occurs in the other sequence")


# --- intersect ---

@test("intersect keeps values found in the other sequence")
def test_intersect_basic():
    first = P([4, 2, 1, 5, 8, -1])
    second = P([4, -100, 7, 5, 8, -1])
    assert_that(first.intersect(second) == [4, 5, 8, -1], "should keep the shared values in source order")


@test("intersect of unrelated cards is empty")
def test_intersect_unrelated():
    assert_that(cards(100, seed=1).intersect(cards(100, seed=2)) == [], "no card is shared")


@test("intersect with selector compares selected values")
def test_intersect_selector():
    first, second = cards(100, seed=1), cards(100, seed=2)
    result = first.intersect(second, lambda m: m['age'])
    assert_that(result == first.where(lambda m: second.contains(m, lambda k: k['age'])),
                "should keep cards whose age occurs in the other sequence")


@test("except_ and intersect partition the source")
def test_except_intersect_partition():
    first, second = P([4, 2, 1, 5, 8, -1]), [4, -100, 7, 5, 8, -1]
    both = first.except_(second).count() + first.intersect(second).count()
    assert_that(both == first.count(), "every element lands in exactly one side")


# --- contains / contains_all ---

@test("contains checks membership")
def test_contains_basic():
    words = P(['hey', 'bro'])
    assert_that(words.contains('hey'), "should contain 'hey'")
    assert_that(not words.contains('hello'), "should not contain 'hello'")


@test("contains with selector uses selected equivalence")
def test_contains_selector():
    data = cards(100)
    assert_that(data.contains(data[0]), "should contain its own element")
    provider = card_provider()
    card = provider.until(lambda c: data.first(lambda m: m['age'] == c['age']) is not None)
    assert_that(not data.contains(card), "a fresh card is not an element")
    assert_that(data.contains(card, lambda m: m['age']), "but its age is present")


@test("contains_all checks every value")
def test_contains_all_basic():
    words = P(['hey', 'bro'])
    assert_that(words.contains_all(['hey', 'bro']), "should contain both")
    assert_that(not words.contains_all(['hey', 'hello']), "should miss 'hello'")
    assert_that(words.contains_all([]), "vacuously true for no values")


@test("contains_all with selector uses selected equivalence")
def test_contains_all_selector():
    data = cards(100)
    assert_that(data.contains_all([data.first(), data.last()]), "should contain its first and last")
    provider = card_provider(seed=11)
    present_age = lambda c: data.first(lambda m: m['age'] == c['age']) is not None
    fresh = [provider.until(present_age), provider.until(present_age)]
    assert_that(not data.contains_all(fresh), "fresh cards are not elements")
    assert_that(data.contains_all(fresh, lambda m: m['age']), "but their ages are present")


# --- of_type ---

@test("of_type filters by class")
def test_of_type_class():
    data = cards()
    assert_that(data.of_type(object) == data, "everything is an object")
    assert_that(data.of_type(TypeA, lambda m: m['types']) == data.where(lambda m: isinstance(m['types'], TypeA)),
                "selector picks the probed value")
    assert_that(data.of_type([TypeA, TypeB], lambda m: m['types']) == data, "any listed class matches")


@test("of_type filters by kind tag")
def test_of_type_tags():
    mixed = P([1, 'hello', 2.5, True, None, [1, 2], {'key': 'value'}, len])
    assert_that(mixed.of_type('string') == ['hello'], "string tag")
    assert_that(mixed.of_type('number') == [1, 2.5], "number excludes booleans")
    assert_that(mixed.of_type('boolean') == [True], "boolean tag")
    assert_that(mixed.of_type(['null', 'array']) == [None, [1, 2]], "several tags")
    assert_that(mixed.of_type('object') == [{'key': 'value'}], "object tag means dict")
    assert_that(mixed.of_type('function') == [len], "function tag means callable")


@test("of_type mixes classes and tags")
def test_of_type_mixed():
    mixed = P([1, 'a', 2.0, None])
    assert_that(mixed.of_type([float, 'string']) == ['a', 2.0], "class and tag together")


@test("of_type rejects unknown tags")
def test_of_type_unknown():
    assert_raises(ValueError, lambda: P([1]).of_type('integerish'), "unknown tags should raise")


if __name__ == "__main__":
    suite.main(title="querylist set operations test suite")
