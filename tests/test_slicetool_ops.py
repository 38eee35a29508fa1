from dataclasses import dataclass

import pytest

from cmmcore import slicetool_ops as ops


@dataclass
class Person:
    name: str
    age: int
    active: bool = False


def test_replace_first_n():
    assert ops.replace([1, 2, 1, 3, 1], 1, 9, 2) == [9, 2, 9, 3, 1]


def test_replace_all_and_original_untouched():
    data = ["a", "b", "a"]
    assert ops.replace_all(data, "a", "z") == ["z", "b", "z"]
    assert data == ["a", "b", "a"]


def test_repeat():
    assert ops.repeat("x", 3) == ["x", "x", "x"]
    assert ops.repeat(1, 0) == []
    with pytest.raises(ValueError):
        ops.repeat(1, -1)


def test_string_and_int_slice():
    assert ops.string_slice(("a", "b")) == ["a", "b"]
    assert ops.int_slice((1, 2)) == [1, 2]
    with pytest.raises(TypeError):
        ops.string_slice(["a", 1])
    with pytest.raises(TypeError):
        ops.int_slice([1, "2"])
    with pytest.raises(TypeError):
        ops.int_slice("12")


def test_delete_at():
    assert ops.delete_at(["a", "b", "c"], 1) == ["a", "c"]
    assert ops.delete_at(["a", "b", "c"], 10) == ["a", "b"]
    with pytest.raises(IndexError):
        ops.delete_at([], 0)


def test_delete_range():
    assert ops.delete_range([1, 2, 3, 4, 5], 1, 3) == [1, 4, 5]
    with pytest.raises(IndexError):
        ops.delete_range([1, 2], 5, 6)


def test_drop_and_drop_right():
    assert ops.drop([1, 2, 3], 1) == [2, 3]
    assert ops.drop([1, 2, 3], 5) == []
    assert ops.drop([1, 2, 3], -1) == [1, 2, 3]
    assert ops.drop_right([1, 2, 3], 1) == [1, 2]
    assert ops.drop_right([1, 2, 3], 3) == []


def test_drop_while():
    assert ops.drop_while([1, 2, 3, 1], lambda x: x < 3) == [3, 1]
    assert ops.drop_right_while([1, 2, 3, 4], lambda x: x > 2) == [1, 2]
    assert ops.drop_while([1, 2], lambda x: True) == []


def test_insert_at():
    assert ops.insert_at(["a", "b"], 1, "x") == ["a", "x", "b"]
    assert ops.insert_at(["a", "b"], 2, ["x", "y"]) == ["a", "b", "x", "y"]
    assert ops.insert_at(["a", "b"], 5, "x") == ["a", "b"]


def test_update_at():
    assert ops.update_at([1, 2, 3], 0, 7) == [7, 2, 3]
    assert ops.update_at([1, 2, 3], 3, 7) == [1, 2, 3]


def test_unique_and_unique_by():
    assert ops.unique([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert ops.unique_by([1, 2, 3, 4], lambda x: x % 2) == [1, 0]


def test_union_and_union_by():
    assert ops.union([1, 3, 4], [1, 2], [4, 5]) == [1, 3, 4, 2, 5]
    assert ops.union_by(lambda x: x % 3, [1, 2, 3], [4, 5, 6]) == [1, 2, 3]


def test_merge():
    assert ops.merge([1, 2], [2, 3]) == [1, 2, 2, 3]


def test_intersection():
    assert ops.intersection([1, 2, 3], [3, 2, 5], [2, 3, 9]) == [3, 2]
    assert ops.intersection([1, 1, 2]) == [1, 2]
    assert ops.intersection() == []


def test_symmetric_difference():
    assert ops.symmetric_difference([1, 2, 3], [1, 2, 4], [1, 2, 5]) == [3, 4, 5]
    assert ops.symmetric_difference() == []


def test_reverse_in_place():
    data = [1, 2, 3]
    ops.reverse(data)
    assert data == [3, 2, 1]


def test_shuffle_keeps_elements():
    data = list(range(20))
    out = ops.shuffle(data)
    assert out is data
    assert sorted(out) == list(range(20))


def test_order_checks():
    assert ops.is_ascending([1, 2, 2, 3])
    assert not ops.is_ascending([2, 1])
    assert ops.is_descending([3, 2, 2])
    assert ops.is_sorted([3, 1])
    assert not ops.is_sorted([1, 3, 2])
    assert ops.is_sorted_by_key(["a", "bb", "ccc"], len)


def test_sort_items():
    data = [3, 1, 2]
    ops.sort_items(data)
    assert ops.is_ascending(data)
    ops.sort_items(data, "desc")
    assert data == [3, 2, 1]


def test_sort_by():
    data = ["ccc", "a", "bb"]
    ops.sort_by(data, lambda a, b: len(a) < len(b))
    assert data == ["a", "bb", "ccc"]


def test_sort_by_field():
    people = [Person("b", 30), Person("a", 20), Person("c", 25)]
    ops.sort_by_field(people, "age")
    assert [p.name for p in people] == ["a", "c", "b"]
    ops.sort_by_field(people, "name", "desc")
    assert [p.name for p in people] == ["c", "b", "a"]


def test_sort_by_field_errors():
    with pytest.raises(ValueError):
        ops.sort_by_field([Person("a", 1)], "missing")
    with pytest.raises(TypeError):
        ops.sort_by_field([1, 2], "age")


def test_without():
    assert ops.without([1, 2, 3, 4], 1, 3) == [2, 4]
    assert ops.without([1, 2]) == [1, 2]


def test_index_of_and_last_index_of():
    data = ["a", "b", "a"]
    assert ops.index_of(data, "a") == 0
    assert ops.last_index_of(data, "a") == 2
    assert ops.index_of(data, "z") == -1
    assert ops.last_index_of(data, "z") == -1


def test_append_if_absent():
    assert ops.append_if_absent([1, 2], 2) == [1, 2]
    assert ops.append_if_absent([1, 2], 3) == [1, 2, 3]


def test_set_to_default_if():
    data = ["a", "b", "a"]
    out, changed = ops.set_to_default_if(data, lambda s: s == "a", "")
    assert out == ["", "b", ""]
    assert changed == 2


def test_key_by():
    assert ops.key_by(["a", "ab"], len) == {1: "a", 2: "ab"}


def test_join():
    assert ops.join([1, 2, 3], ", ") == "1, 2, 3"
    assert ops.join([True, False], "|") == "true|false"


def test_partition():
    result = ops.partition([1, 2, 3, 4, 5], lambda x: x < 2, lambda x: x % 2 == 0)
    assert result == [[1], [2, 4], [3, 5]]
    with pytest.raises(ValueError):
        ops.partition([1], None)


def test_random_item():
    data = ["a", "b", "c"]
    val, idx = ops.random_item(data)
    assert data[idx] == val
    assert ops.random_item([]) == (None, -1)