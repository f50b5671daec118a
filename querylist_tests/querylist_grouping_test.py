import suite
from cards import cards
from querylist import P, QueryList, Grouping, empty

test = suite.test
assert_that = suite.assert_that


@test("group_by returns key/members tuples in first-occurrence order")
def test_group_by_basic():
    people = P([{'age': 20, 'n': 'a'}, {'age': 30, 'n': 'b'}, {'age': 20, 'n': 'c'}])
    groups = people.group_by(lambda p: p['age'])
    assert_that(groups.select(lambda g: g.key) == [20, 30], "keys in order of first occurrence")
    assert_that(groups[0].members == [people[0], people[2]], "first group holds both twenties")
    assert_that(groups[1].members == [people[1]], "second group holds the thirty")


@test("group tuples unpack and stay query lists")
def test_group_tuple_shape():
    groups = P([{'age': 20}, {'age': 20}, {'age': 30}]).group_by(lambda p: p['age'])
    assert_that(isinstance(groups, QueryList), "groups come back as a query list")
    key, members = groups.first()
    assert_that(key == 20 and len(members) == 2, "tuples unpack into key and members")
    assert_that(isinstance(groups.first(), Grouping) and isinstance(members, QueryList), "members are query lists")
    assert_that([(g.key, len(g.members)) for g in groups] == [(20, 2), (30, 1)], "two groups with sizes 2 and 1")


@test("group_by agrees with where per distinct key")
def test_group_by_cards():
    data = cards(60)
    groups = data.group_by(lambda m: m['age'])
    ages = data.select(lambda m: m['age']).distinct()
    assert_that(groups.select(lambda g: g.key) == ages, "one group per distinct age")
    for key, members in groups:
        assert_that(members == data.where(lambda m: m['age'] == key), f"members of age {key}")
    assert_that(groups.sum(lambda g: len(g.members)) == len(data), "every card lands in one group")


@test("group_by with a custom key comparison")
def test_group_by_key_compare():
    words = P(['Apple', 'avocado', 'Banana', 'blueberry', 'cherry'])
    groups = words.group_by(lambda w: w[0], lambda a, b: a.lower() == b.lower())
    assert_that(groups.select(lambda g: g.key) == ['A', 'B', 'c'], "first spelling of each key wins")
    assert_that(groups.select(lambda g: g.members.count()) == [2, 2, 1], "case-insensitive members")


@test("group_by with structural keys")
def test_group_by_structural_keys():
    points = P([{'x': 1, 'y': 2, 'id': 'a'}, {'x': 1, 'y': 2, 'id': 'b'}, {'x': 0, 'y': 0, 'id': 'c'}])
    groups = points.group_by(lambda p: {'x': p['x'], 'y': p['y']})
    assert_that(groups.count() == 2, "equal dict keys share a group")
    assert_that(groups.first().members.select(lambda p: p['id']) == ['a', 'b'], "members of the shared key")


@test("group_by selector can use the index")
def test_group_by_index():
    groups = P(['a', 'b', 'c', 'd', 'e']).group_by(lambda item, i: i % 2)
    assert_that(groups.select(lambda g: (g.key, g.members.to_list())) == [(0, ['a', 'c', 'e']), (1, ['b', 'd'])],
                "even and odd positions")


@test("group_by of an empty sequence is empty")
def test_group_by_empty():
    assert_that(empty().group_by(lambda x: x) == [], "no groups")


if __name__ == "__main__":
    suite.main(title="querylist grouping test suite")
