import operator
import random

import pytest

from calgokit.linked_list import LinkedList, ListEntry


def int_compare(a, b):
    return (a > b) - (a < b)


def check_links(lst):
    values = []
    prev = None
    entry = lst.head
    while entry is not None:
        assert entry.prev is prev
        values.append(entry.data)
        prev = entry
        entry = entry.next
    assert len(values) == len(lst)
    return values


@pytest.fixture
def four():
    return LinkedList([1, 2, 4, 8])


def test_append_and_prepend_order():
    lst = LinkedList()
    lst.append(2)
    lst.append(3)
    lst.prepend(1)
    lst.prepend(0)
    assert check_links(lst) == [0, 1, 2, 3]
    assert len(lst) == 4


def test_append_returns_entry_with_data():
    lst = LinkedList()
    entry = lst.append("x")
    assert isinstance(entry, ListEntry)
    assert entry.data == "x"
    assert lst.head is entry


def test_nth_entry_and_data(four):
    assert four.nth_data(0) == 1
    assert four.nth_data(3) == 8
    assert four.nth_entry(2).data == 4
    assert four.nth_entry(1).next is four.nth_entry(2)


@pytest.mark.parametrize("index", [-1, 4, 400])
def test_nth_out_of_range(four, index):
    with pytest.raises(IndexError):
        four.nth_entry(index)
    with pytest.raises(IndexError):
        four.nth_data(index)


def test_length_of_empty():
    assert len(LinkedList()) == 0
    assert LinkedList().to_list() == []


def test_to_list_round_trip():
    values = list(range(50))
    assert LinkedList(values).to_list() == values


def test_remove_entry(four):
    entry = four.nth_entry(1)
    four.remove_entry(entry)
    assert check_links(four) == [1, 4, 8]
    four.remove_entry(four.head)
    assert check_links(four) == [4, 8]
    four.remove_entry(four.nth_entry(1))
    assert check_links(four) == [4]


def test_remove_entry_twice_raises(four):
    entry = four.nth_entry(2)
    four.remove_entry(entry)
    with pytest.raises(ValueError):
        four.remove_entry(entry)
    assert len(four) == 3


def test_remove_entry_from_other_list_raises(four):
    other = LinkedList([1])
    with pytest.raises(ValueError):
        four.remove_entry(other.head)
    with pytest.raises(ValueError):
        LinkedList().remove_entry(None)


def test_remove_data():
    values = [4, 3, 4, 3, 4, 1, 4]
    lst = LinkedList(values)
    removed = lst.remove_data(operator.eq, 4)
    assert removed == values.count(4)
    assert check_links(lst) == [v for v in values if v != 4]
    assert lst.remove_data(operator.eq, 99) == 0


def test_remove_data_all_then_append():
    lst = LinkedList([7, 7, 7])
    assert lst.remove_data(operator.eq, 7) == 3
    assert lst.head is None
    lst.append(5)
    assert check_links(lst) == [5]


def test_sort_matches_sorted():
    values = [89, 23, 42, 4, 16, 15, 8, 99, 50, 30, 4, 16]
    lst = LinkedList(values)
    lst.sort(int_compare)
    assert check_links(lst) == sorted(values)


def test_sort_random_and_preserves_entries():
    rng = random.Random(1234)
    values = [rng.randrange(100) for _ in range(300)]
    lst = LinkedList(values)
    entries = {id(lst.nth_entry(i)) for i in range(len(lst))}
    lst.sort(int_compare)
    assert check_links(lst) == sorted(values)
    assert {id(lst.nth_entry(i)) for i in range(len(lst))} == entries


def test_sort_large_presorted_input():
    values = list(range(5000))
    lst = LinkedList(values)
    lst.sort(int_compare)
    assert lst.to_list() == values
    lst.append(-1)
    assert lst.to_list()[-1] == -1


def test_sort_empty_and_single():
    empty = LinkedList()
    empty.sort(int_compare)
    assert empty.to_list() == []
    single = LinkedList([3])
    single.sort(int_compare)
    assert check_links(single) == [3]


def test_find_data(four):
    entry = four.find_data(operator.eq, 4)
    assert entry is four.nth_entry(2)
    assert four.find_data(operator.eq, 5) is None


def test_iteration_yields_values(four):
    assert list(four) == [1, 2, 4, 8]


def test_iterator_has_more_and_stop():
    lst = LinkedList(range(10))
    it = lst.iterator()
    seen = []
    while it.has_more():
        seen.append(next(it))
    assert seen == list(range(10))
    assert it.has_more() is False
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_empty():
    it = LinkedList().iterator()
    assert it.has_more() is False
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_remove_while_iterating():
    values = list(range(100))
    lst = LinkedList(values)
    it = lst.iterator()
    seen = []
    for value in it:
        seen.append(value)
        if value % 3 == 0:
            it.remove()
    assert seen == values
    assert check_links(lst) == [v for v in values if v % 3 != 0]


def test_iterator_remove_all():
    lst = LinkedList(range(20))
    it = lst.iterator()
    for _ in it:
        it.remove()
    assert len(lst) == 0
    assert lst.head is None


def test_iterator_remove_without_current_does_nothing(four):
    it = four.iterator()
    it.remove()
    assert len(four) == 4
    assert next(it) == 1
    it.remove()
    it.remove()
    assert check_links(four) == [2, 4, 8]
    assert next(it) == 2


def test_iterator_sees_appended_values():
    lst = LinkedList([1])
    it = lst.iterator()
    assert next(it) == 1
    assert it.has_more() is False
    lst.append(2)
    assert it.has_more() is True
    assert next(it) == 2


def test_clear(four):
    entry = four.head
    four.clear()
    assert len(four) == 0
    assert four.to_list() == []
    with pytest.raises(ValueError):
        four.remove_entry(entry)
    four.append(1)
    assert check_links(four) == [1]