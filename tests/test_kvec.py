import pytest

from klite.kvec import Vector


def test_header_example():
    v = Vector()
    v.push(10)
    v.set(20, 5)
    assert len(v) == 21
    assert v[20] == 5
    v[20] = 4
    assert v[20] == 4
    assert v[0] == 10


def test_push_doubles_capacity():
    v = Vector()
    capacities = []
    for i in range(9):
        v.push(i)
        capacities.append(v.capacity())
    assert capacities == [2, 2, 4, 4, 8, 8, 8, 8, 16]
    assert list(v) == list(range(9))


def test_push_many():
    n = 20000
    v = Vector()
    for j in range(n):
        v.push(j)
    assert list(v) == list(range(n))
    assert v.capacity() == 32768


def test_resize_then_set_fills_vector():
    n = 20000
    v = Vector()
    v.resize(n)
    for j in range(n):
        v.set(j, j)
    assert list(v) == list(range(n))
    assert v.capacity() == n


def test_at_grows_to_power_of_two():
    v = Vector()
    assert v.at(20) is None
    assert len(v) == 21
    assert v.capacity() == 32


def test_at_within_capacity_extends_size_only():
    v = Vector([1, 2, 3])
    v.resize(10)
    v.at(5)
    assert len(v) == 6
    assert v.capacity() == 10
    assert list(v) == [1, 2, 3, None, None, None]


def test_at_negative_index():
    with pytest.raises(IndexError):
        Vector([1]).at(-1)


def test_pop_returns_last():
    v = Vector([1, 2, 3])
    assert v.pop() == 3
    assert list(v) == [1, 2]


def test_pop_empty():
    with pytest.raises(IndexError):
        Vector().pop()


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        Vector([1, 2])[2]


def test_copy_from_grows_capacity():
    source = Vector([4, 5, 6, 7])
    target = Vector([1])
    target.copy_from(source)
    assert list(target) == [4, 5, 6, 7]
    assert target.capacity() == 4
    source.push(8)
    assert list(target) == [4, 5, 6, 7]


def test_copy_from_keeps_larger_capacity():
    target = Vector()
    target.resize(50)
    target.copy_from([1, 2])
    assert target.capacity() == 50
    assert list(target) == [1, 2]


@pytest.mark.parametrize("items", [[], [1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5]])
def test_reverse(items):
    v = Vector(items)
    v.reverse()
    assert list(v) == items[::-1]


def test_resize_shrinks_contents():
    v = Vector(range(10))
    v.resize(4)
    assert list(v) == [0, 1, 2, 3]
    assert v.capacity() == 4


def test_resize_negative():
    with pytest.raises(ValueError):
        Vector().resize(-1)