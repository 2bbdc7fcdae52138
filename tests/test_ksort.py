import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klite import ksort

N = 20000


def _data(n=N, seed=11):
    rng = random.Random(seed)
    return [rng.getrandbits(31) for _ in range(n)]


def _is_sorted(items):
    return all(a <= b for a, b in zip(items, items[1:]))


def test_ksmall_matches_sorted_position():
    data = _data()
    expected = sorted(data)[10500]
    assert ksort.ksmall(data, 10500) == expected


def test_introsort_random_and_already_sorted():
    data = _data()
    expected = sorted(data)
    ksort.introsort(data)
    assert data == expected
    ksort.introsort(data)
    assert data == expected


def test_combsort_random():
    data = _data()
    ksort.combsort(data)
    assert _is_sorted(data)
    assert sorted(_data()) == data


def test_mergesort_random_and_already_sorted():
    data = _data()
    expected = sorted(data)
    ksort.mergesort(data)
    assert data == expected
    ksort.mergesort(data)
    assert data == expected


def test_heapmake_then_heapsort():
    data = _data()
    ksort.heapmake(data)
    ksort.heapsort(data)
    assert data == sorted(_data())


def test_heapmake_gives_heap_property():
    data = _data(500)
    ksort.heapmake(data)
    n = len(data)
    for parent in range(n):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < n:
                assert data[child] <= data[parent]


def test_heapadjust_sifts_down_root():
    heap = [1, 9, 8, 7, 6]
    ksort.heapadjust(heap, 0, len(heap))
    assert heap[0] == 9
    assert heap == [9, 7, 8, 1, 6]


def test_mergesort_is_stable():
    pairs = [(3, "a"), (1, "b"), (3, "c"), (2, "d"), (1, "e"), (3, "f")]
    ksort.mergesort(pairs, lambda x, y: x[0] < y[0])
    assert pairs == [(1, "b"), (1, "e"), (2, "d"), (3, "a"), (3, "c"), (3, "f")]


def test_custom_less_sorts_descending():
    data = _data(1000)
    ksort.introsort(data, lambda a, b: a > b)
    assert data == sorted(_data(1000), reverse=True)


def test_strings_sort():
    words = ["pear", "apple", "fig", "banana", "cherry", "date"]
    ksort.introsort(words)
    assert words == ["apple", "banana", "cherry", "date", "fig", "pear"]


@pytest.mark.parametrize(
    "data",
    [
        list(range(1000)),
        list(range(1000, 0, -1)),
        [5] * 1000,
        [i % 3 for i in range(1000)],
    ],
)
def test_introsort_structured_inputs(data):
    expected = sorted(data)
    ksort.introsort(data)
    assert data == expected


@given(st.lists(st.integers()))
def test_introsort_property(data):
    expected = sorted(data)
    ksort.introsort(data)
    assert data == expected


@given(st.lists(st.integers()))
def test_combsort_property(data):
    expected = sorted(data)
    ksort.combsort(data)
    assert data == expected


@given(st.lists(st.integers()))
def test_mergesort_property(data):
    expected = sorted(data)
    ksort.mergesort(data)
    assert data == expected


@given(st.lists(st.integers()))
def test_heapsort_property(data):
    expected = sorted(data)
    ksort.heapmake(data)
    ksort.heapsort(data)
    assert data == expected


@given(st.lists(st.integers(), min_size=1), st.data())
def test_ksmall_property(data, draw):
    k = draw.draw(st.integers(min_value=0, max_value=len(data) - 1))
    expected = sorted(data)[k]
    assert ksort.ksmall(list(data), k) == expected


def test_ksmall_out_of_range():
    with pytest.raises(IndexError):
        ksort.ksmall([1, 2, 3], 3)
    with pytest.raises(IndexError):
        ksort.ksmall([], 0)


def test_shuffle_is_permutation_and_reproducible():
    first = list(range(100))
    second = list(range(100))
    ksort.shuffle(first, random.Random(11))
    ksort.shuffle(second, random.Random(11))
    assert first == second
    assert sorted(first) == list(range(100))
    assert first != list(range(100))


def test_sample_moves_ordered_subset_to_front():
    items = list(range(20))
    ksort.sample(items, 5, random.Random(1))
    front = items[:5]
    assert front == sorted(front)
    assert sorted(items) == list(range(20))
    assert len(set(front)) == 5


def test_sample_full_and_empty():
    items = list(range(10))
    ksort.sample(items, 10, random.Random(3))
    assert items == list(range(10))
    ksort.sample(items, 0, random.Random(3))
    assert items == list(range(10))


def test_sample_too_many():
    with pytest.raises(ValueError):
        ksort.sample([1, 2], 3)


def test_radix_sort_random_uint32():
    rng = random.Random(11)
    data = [rng.getrandbits(32) for _ in range(5000)]
    expected = sorted(data)
    ksort.radix_sort(data)
    assert data == expected
    ksort.radix_sort(data)
    assert data == expected


def test_radix_sort_small_input_uses_insertion():
    data = [9, 3, 7, 1, 0, 5]
    ksort.radix_sort(data)
    assert data == [0, 1, 3, 5, 7, 9]


def test_radix_sort_with_key_and_one_byte():
    rng = random.Random(5)
    records = [(rng.randrange(256), i) for i in range(1000)]
    ksort.radix_sort(records, key=lambda rec: rec[0], key_bytes=1)
    keys = [rec[0] for rec in records]
    assert keys == sorted(keys)
    assert sorted(rec[1] for rec in records) == list(range(1000))


def test_radix_sort_ignores_bytes_beyond_key_width():
    data = [0x100 + 5, 3, 0x200 + 1] * 30
    ksort.radix_sort(data, key_bytes=1)
    assert [v & 0xFF for v in data] == sorted(v & 0xFF for v in data)


def test_radix_sort_rejects_zero_key_bytes():
    with pytest.raises(ValueError):
        ksort.radix_sort([1, 2], key_bytes=0)


@given(st.lists(st.integers(min_value=0, max_value=2**32 - 1), max_size=400))
def test_radix_sort_property(data):
    expected = sorted(data)
    ksort.radix_sort(data)
    assert data == expected