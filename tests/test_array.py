import math

import pytest
from fekit.functional import array


@pytest.fixture
def numbers():
    return [5, 12, 8, 130, 44]


def test_at_negative_index():
    items = [1, 2, 3, 4, 5]
    assert array.at(items, 0) == 1
    assert array.at(items, 4) == 5
    assert array.at(items, 5) is None
    assert array.at(items, -1) == 5
    assert array.at(items, -5) == 1
    assert array.at(items, -6) is None


def test_at_resolves_every_negative_index():
    items = list(range(10))
    n = len(items)
    for k in range(1, n + 1):
        assert array.at(items, -k) == items[n - k]
    assert array.at(items, -(n + 1)) is None
    assert array.at([], -1) is None


def test_first():
    assert array.first([3, 4]) == 3
    assert array.first([]) is None


def test_concat_does_not_modify():
    a, b, c = [1, 2, 3], [4, 5, 6], [7, 8, 9]
    assert array.concat(a, b) == [1, 2, 3, 4, 5, 6]
    assert array.concat(a, b, c) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert array.concat(a) == [1, 2, 3]
    assert array.concat(a, 4, [5, [6]]) == [1, 2, 3, 4, 5, [6]]
    assert a == [1, 2, 3]


def test_entries_keys_values():
    items = ["a", "b", "c"]
    assert array.entries(items) == [(0, "a"), (1, "b"), (2, "c")]
    assert array.keys(items) == [0, 1, 2]
    assert array.values(items) == items
    assert array.values(items) is not items


def test_every_and_some():
    assert array.every([2, 4, 6, 8, 10], lambda x: x % 2 == 0)
    assert not array.every([2, 4, 5, 8, 10], lambda x: x % 2 == 0)
    assert array.every([], lambda x: x > 0)

    assert array.some([1, 2, 3, 4, 5], lambda x: x % 2 == 0)
    assert not array.some([1, 3, 5, 7, 9], lambda x: x % 2 == 0)
    assert not array.some([], lambda x: x > 0)


def test_find_family(numbers):
    assert array.find(numbers, lambda x: x > 10) == 12
    assert array.find(numbers, lambda x: x > 200) is None
    assert array.find_index(numbers, lambda x: x > 10) == 1
    assert array.find_index(numbers, lambda x: x > 200) is None
    assert array.find_last(numbers, lambda x: x > 10) == 44
    assert array.find_last(numbers, lambda x: x > 200) is None
    assert array.find_last_index(numbers, lambda x: x > 10) == 4
    assert array.find_last_index(numbers, lambda x: x > 200) is None


def test_filter_map_for_each():
    assert array.filter([1, 2, 3, 4], lambda x: x % 2) == [1, 3]
    assert array.map([1, 4, 9, 16], math.sqrt) == [1.0, 2.0, 3.0, 4.0]

    seen = []
    assert array.for_each(["x", "y"], seen.append) is None
    assert seen == ["x", "y"]


def test_flat_and_flat_map():
    assert array.flat([[1, 2], [3, 4], [5, 6]]) == [1, 2, 3, 4, 5, 6]
    assert array.flat([1, [2, [3, [4]]]]) == [1, 2, [3, [4]]]
    assert array.flat([1, [2, [3, [4]]]], 2) == [1, 2, 3, [4]]
    assert array.flat([1, [2, [3, [4]]]], 0) == [1, [2, [3, [4]]]]
    assert array.flat_map([1, 2, 3, 4], lambda x: [x, x * 2]) == [
        1, 2, 2, 4, 3, 6, 4, 8
    ]


def test_index_of_and_last_index_of():
    fruits = ["apple", "banana", "orange", "banana"]
    assert array.index_of(fruits, "banana") == 1
    assert array.index_of(fruits, "banana", 2) == 3
    assert array.index_of(fruits, "banana", -1) == 3
    assert array.index_of(fruits, "grape") is None
    assert array.last_index_of(fruits, "banana") == 3
    assert array.last_index_of(fruits, "banana", 2) == 1
    assert array.last_index_of(fruits, "banana", -2) == 1
    assert array.last_index_of(fruits, "grape") is None
    assert array.last_index_of(fruits, "apple", -10) is None


def test_includes_treats_nan_as_equal():
    assert array.includes([1, 2, 3], 1)
    assert not array.includes([1, 2, 3], 4)
    assert not array.includes([1, 2, 3], 1, 1)
    assert array.includes([float("nan")], float("nan"))


def test_join():
    assert array.join(["Wind", "Rain", "Fire"]) == "Wind,Rain,Fire"
    assert array.join(["Wind", "Rain", "Fire"], "-") == "Wind-Rain-Fire"
    assert array.join([1, 2, 3], "; ") == "1; 2; 3"
    assert array.join([1, None, [2, 3]], "|") == "1||2,3"
    assert array.join([]) == ""
    assert array.join([[1, None, [2]], 3], "-") == "1,,2-3"


def test_reduce_and_reduce_right():
    assert array.reduce([1, 2, 3, 4], lambda acc, x: acc + x, 0) == 10
    assert array.reduce([1, 2, 3, 4], lambda acc, x: acc + x) == 10
    assert array.reduce_right(["a", "b", "c"], lambda acc, x: acc + x, "") == "cba"
    assert array.reduce([], lambda acc, x: acc + x, 7) == 7
    with pytest.raises(TypeError):
        array.reduce([], lambda acc, x: acc + x)


def test_shift_and_pop():
    items = [1, 2, 3]
    assert array.shift(items) == 1
    assert items == [2, 3]
    assert array.pop(items) == 3
    assert items == [2]

    empty = []
    assert array.shift(empty) is None
    assert array.pop(empty) is None
    assert empty == []


def test_push_and_unshift_return_length():
    items = [3, 4, 5]
    assert array.unshift(items, 1, 2) == 5
    assert items == [1, 2, 3, 4, 5]
    assert array.push(items, 6, 7) == 7
    assert items == [1, 2, 3, 4, 5, 6, 7]


def test_slice():
    items = [1, 2, 3, 4, 5]
    assert array.slice(items) == [1, 2, 3, 4, 5]
    assert array.slice(items, 2) == [3, 4, 5]
    assert array.slice(items, 2, 4) == [3, 4]
    assert array.slice(items, -2) == [4, 5]
    assert array.slice(items, 2, -1) == [3, 4]
    assert array.slice(items, -3, -1) == [3, 4]


def test_slice_clamps_out_of_range_bounds():
    items = [1, 2, 3, 4, 5]
    assert array.slice(items, -100) == items
    assert array.slice(items, 3, 100) == [4, 5]
    assert array.slice(items, 100) == []
    assert array.slice(items, 4, 2) == []


def test_fill():
    items = [1, 2, 3, 4, 5]
    assert array.fill(items, 0) is items
    assert items == [0, 0, 0, 0, 0]

    items = [1, 2, 3, 4, 5]
    array.fill(items, 0, 2)
    assert items == [1, 2, 0, 0, 0]

    items = [1, 2, 3, 4, 5]
    array.fill(items, 0, 1, 4)
    assert items == [1, 0, 0, 0, 5]

    items = [1, 2, 3, 4, 5]
    array.fill(items, 0, 3, 2)
    assert items == [1, 2, 3, 4, 5]

    items = [1, 2, 3, 4, 5]
    array.fill(items, 0, -2, 99)
    assert items == [1, 2, 3, 0, 0]


def test_splice():
    items = [1, 2, 3, 4, 5]
    assert array.splice(items, 1, 2) == [2, 3]
    assert items == [1, 4, 5]

    items = [1, 2, 3, 4, 5]
    assert array.splice(items, 1, 2, 10, 20) == [2, 3]
    assert items == [1, 10, 20, 4, 5]

    items = [1, 2, 3, 4, 5]
    assert array.splice(items, -2, 1) == [4]
    assert items == [1, 2, 3, 5]

    items = [1, 2, 3, 4, 5]
    assert array.splice(items, 2) == [3, 4, 5]
    assert items == [1, 2]


def test_splice_clamps_out_of_range_arguments():
    items = [1, 2, 3]
    assert array.splice(items, 10, 5, "x") == []
    assert items == [1, 2, 3, "x"]

    items = [1, 2, 3]
    assert array.splice(items, -10, 1) == [1]
    assert items == [2, 3]

    items = [1, 2, 3]
    assert array.splice(items, 1, 100) == [2, 3]
    assert items == [1]

    items = [1, 2, 3]
    assert array.splice(items, 1, -4, "y") == []
    assert items == [1, "y", 2, 3]


def test_sort_in_place():
    items = [3, 1, 4, 1, 5]
    result = array.sort(items, lambda a, b: a - b)
    assert result == [1, 1, 3, 4, 5]
    assert items == [1, 1, 3, 4, 5]

    array.sort(items, key=lambda x: -x)
    assert items == [5, 4, 3, 1, 1]


def test_sort_is_stable():
    pairs = [("b", 1), ("a", 2), ("b", 0), ("a", 1)]
    result = array.to_sorted(pairs, lambda x, y: (x[0] > y[0]) - (x[0] < y[0]))
    assert result == [("a", 2), ("a", 1), ("b", 1), ("b", 0)]


def test_copying_variants_leave_input_alone():
    items = [3, 1, 4, 1, 5]
    assert array.to_sorted(items) == [1, 1, 3, 4, 5]
    assert array.to_reversed(items) == [5, 1, 4, 1, 3]
    assert array.to_spliced(items, 1, 2, 10, 20) == [3, 10, 20, 1, 5]
    assert array.with_(items, 2, 10) == [3, 1, 10, 1, 5]
    assert array.with_(items, -1, 0) == [3, 1, 4, 1, 0]
    assert items == [3, 1, 4, 1, 5]


def test_with_out_of_range_raises():
    with pytest.raises(IndexError):
        array.with_([1, 2, 3], 3, 0)
    with pytest.raises(IndexError):
        array.with_([1, 2, 3], -4, 0)


def test_reverse_in_place():
    items = [1, 2, 3, 4, 5]
    assert array.reverse(items) is items
    assert items == [5, 4, 3, 2, 1]
