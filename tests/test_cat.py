from transducers import \
    cat,           \
    compose,       \
    dedupe,        \
    filter,        \
    map,           \
    mapcat,        \
    partition_all, \
    take,          \
    take_while,    \
    transduce


def into_list(xform, coll):
    return transduce(xform, 'append', [], coll)

def counted(coll, pulled):
    for x in coll:
        pulled.append(x)
        yield x


class RangeBuilder:
    def process(self, n):
        return range(n)


def test_cat():
    assert into_list(cat, [[1, 2], [3, 4]]) == [1, 2, 3, 4]
    assert into_list(cat, [[], [1], []]) == [1]
    assert into_list(cat, ["ab", "c"]) == ['a', 'b', 'c']

def test_mapcat():
    assert into_list(mapcat(RangeBuilder()), [1, 2, 3]) == [0, 0, 1, 0, 1, 2]
    assert into_list(mapcat(lambda n: range(n)), [1, 2, 3]) == [0, 0, 1, 0, 1, 2]

def test_cat_composed():
    sums = compose(map(lambda a: [sum(a)]), cat)
    assert into_list(sums, [[1, 2], [3, 4]]) == [3, 7]

def test_take_after_cat_stops_outer():
    pulled = []
    xform = compose(map(lambda n: range(n)), cat, take(3))
    assert into_list(xform, counted([5, 5, 5], pulled)) == [0, 1, 2]
    assert pulled == [5]

def test_take_after_cat_spanning_inputs():
    pulled = []
    xform = compose(mapcat(lambda n: range(n)), take(4))
    assert into_list(xform, counted([2, 3, 10, 10], pulled)) == [0, 1, 0, 1]
    assert pulled == [2, 3]

def test_take_while_after_cat():
    pulled = []
    xform = compose(cat, take_while(lambda n: n < 3))
    assert into_list(xform, counted([[1, 2], [3, 1], [1]], pulled)) == [1, 2]
    assert pulled == [[1, 2], [3, 1]]

def test_take_before_cat():
    assert into_list(compose(take(2), cat), [[1, 2], [3], [4]]) == [1, 2, 3]

def test_nested_cat():
    nested = [[[1, 2], [3]], [[4]], [[5, 6]]]
    assert into_list(compose(cat, cat), nested) == [1, 2, 3, 4, 5, 6]
    pulled = []
    assert into_list(compose(cat, cat, take(3)), counted(nested, pulled)) == [1, 2, 3]
    assert pulled == [[[1, 2], [3]]]

def test_cat_with_stateful_downstream():
    xform = compose(cat, dedupe, partition_all(2))
    assert into_list(xform, [[1, 1], [2], [2, 3]]) == [[1, 2], [3]]

def test_cat_sum():
    assert transduce(compose(cat, filter('odd')), 'add', [[1, 2, 3], [4, 5]]) == 9

def test_cat_reuse():
    xform = compose(mapcat(lambda n: [n, n]), take(3))
    assert into_list(xform, [1, 2, 3]) == [1, 1, 2]
    assert into_list(xform, [1, 2, 3]) == [1, 1, 2]
