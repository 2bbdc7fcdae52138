"""Comparison sorts, selection, shuffling and radix sort on mutable sequences.

Every comparison-based routine takes a ``less`` callable that returns true
when its first argument orders strictly before its second; it defaults to
the ``<`` operator. All sorts work in place.
"""

from __future__ import annotations

import operator
import random
from typing import Any, Callable, MutableSequence, Optional

Less = Callable[[Any, Any], bool]

_SHRINK_FACTOR = 1.2473309501039786540366528676643
_INTRO_CUTOFF = 16
_RADIX_MIN_SIZE = 64
_RADIX_BITS = 8
_RADIX_MASK = (1 << _RADIX_BITS) - 1


def _resolve(less: Optional[Less]) -> Less:
    return operator.lt if less is None else less


def _swap(items: MutableSequence, i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _insertsort(items: MutableSequence, lo: int, hi: int, less: Less) -> None:
    for i in range(lo + 1, hi):
        j = i
        while j > lo and less(items[j], items[j - 1]):
            _swap(items, j, j - 1)
            j -= 1


def _merge(left: list, right: list, less: Less) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if less(right[j], left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def mergesort(items: MutableSequence, less: Optional[Less] = None) -> None:
    """Stable bottom-up merge sort."""
    less = _resolve(less)
    n = len(items)
    current = list(items)
    width = 1
    while width < n:
        merged: list = []
        for lo in range(0, n, width * 2):
            mid = min(lo + width, n)
            hi = min(lo + width * 2, n)
            merged.extend(_merge(current[lo:mid], current[mid:hi], less))
        current = merged
        width *= 2
    items[:] = current


def heapadjust(items: MutableSequence, i: int, n: int, less: Optional[Less] = None) -> None:
    """Sift ``items[i]`` down within the max-heap formed by the first ``n`` items."""
    less = _resolve(less)
    tmp = items[i]
    k = i
    while (k := 2 * k + 1) < n:
        if k != n - 1 and less(items[k], items[k + 1]):
            k += 1
        if less(items[k], tmp):
            break
        items[i] = items[k]
        i = k
    items[i] = tmp


def heapmake(items: MutableSequence, less: Optional[Less] = None) -> None:
    """Arrange items into a max-heap with respect to ``less``."""
    less = _resolve(less)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapadjust(items, i, n, less)


def heapsort(items: MutableSequence, less: Optional[Less] = None) -> None:
    """Sort items that :func:`heapmake` has already arranged into a heap."""
    less = _resolve(less)
    for i in range(len(items) - 1, 0, -1):
        _swap(items, 0, i)
        heapadjust(items, 0, i, less)


def _combsort(items: MutableSequence, lo: int, hi: int, less: Less) -> None:
    n = hi - lo
    gap = n
    while True:
        if gap > 2:
            gap = int(gap / _SHRINK_FACTOR)
            if gap in (9, 10):
                gap = 11
        swapped = False
        for i in range(lo, hi - gap):
            j = i + gap
            if less(items[j], items[i]):
                _swap(items, i, j)
                swapped = True
        if not (swapped or gap > 2):
            break
    if gap != 1:
        _insertsort(items, lo, hi, less)


def combsort(items: MutableSequence, less: Optional[Less] = None) -> None:
    """Comb sort, finished by insertion sort when needed."""
    _combsort(items, 0, len(items), _resolve(less))


def introsort(items: MutableSequence, less: Optional[Less] = None) -> None:
    """Quicksort with median-of-three pivots, falling back to comb sort when too deep."""
    less = _resolve(less)
    a = items
    n = len(a)
    if n < 1:
        return
    if n == 2:
        if less(a[1], a[0]):
            _swap(a, 0, 1)
        return
    d = 2
    while (1 << d) < n:
        d += 1
    d <<= 1
    stack: list[tuple[int, int, int]] = []
    s, t = 0, n - 1
    while True:
        if s < t:
            d -= 1
            if d == 0:
                _combsort(a, s, t + 1, less)
                t = s
                continue
            i, j = s, t
            k = i + ((j - i) >> 1) + 1
            if less(a[k], a[i]):
                if less(a[k], a[j]):
                    k = j
            else:
                k = i if less(a[j], a[i]) else j
            pivot = a[k]
            if k != t:
                _swap(a, k, t)
            while True:
                i += 1
                while less(a[i], pivot):
                    i += 1
                j -= 1
                while i <= j and less(pivot, a[j]):
                    j -= 1
                if j <= i:
                    break
                _swap(a, i, j)
            _swap(a, i, t)
            if i - s > t - i:
                if i - s > _INTRO_CUTOFF:
                    stack.append((s, i - 1, d))
                s = i + 1 if t - i > _INTRO_CUTOFF else t
            else:
                if t - i > _INTRO_CUTOFF:
                    stack.append((i + 1, t, d))
                t = i - 1 if i - s > _INTRO_CUTOFF else s
        elif stack:
            s, t, d = stack.pop()
        else:
            _insertsort(a, 0, n, less)
            return


def ksmall(items: MutableSequence, k: int, less: Optional[Less] = None) -> Any:
    """Return the ``k``-th smallest item (0-based), partially reordering items."""
    less = _resolve(less)
    a = items
    n = len(a)
    if not 0 <= k < n:
        raise IndexError(f"k={k} out of range for {n} items")
    low, high = 0, n - 1
    while True:
        if high <= low:
            return a[k]
        if high == low + 1:
            if less(a[high], a[low]):
                _swap(a, low, high)
            return a[k]
        mid = low + (high - low) // 2
        if less(a[high], a[mid]):
            _swap(a, mid, high)
        if less(a[high], a[low]):
            _swap(a, low, high)
        if less(a[low], a[mid]):
            _swap(a, mid, low)
        _swap(a, mid, low + 1)
        ll, hh = low + 1, high
        while True:
            ll += 1
            while less(a[ll], a[low]):
                ll += 1
            hh -= 1
            while less(a[low], a[hh]):
                hh -= 1
            if hh < ll:
                break
            _swap(a, ll, hh)
        _swap(a, low, hh)
        if hh <= k:
            low = ll
        if hh >= k:
            high = hh - 1


def shuffle(items: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Fisher-Yates shuffle in place."""
    rng = rng or random.Random()
    for i in range(len(items), 1, -1):
        j = int(rng.random() * i)
        _swap(items, j, i - 1)


def sample(items: MutableSequence, r: int, rng: Optional[random.Random] = None) -> None:
    """Move ``r`` randomly chosen items to the front, keeping their relative order."""
    n = len(items)
    if not 0 <= r <= n:
        raise ValueError(f"cannot sample {r} items from {n}")
    rng = rng or random.Random()
    chosen = 0
    for t in range(n):
        needed = r - chosen
        if needed == 0:
            break
        if rng.random() * (n - t) < needed:
            _swap(items, chosen, t)
            chosen += 1


def _radix_insertsort(items: MutableSequence, lo: int, hi: int, key: Callable) -> None:
    for i in range(lo + 1, hi):
        value = items[i]
        value_key = key(value)
        j = i
        while j > lo and value_key < key(items[j - 1]):
            items[j] = items[j - 1]
            j -= 1
        items[j] = value


def _radix_pass(items: MutableSequence, lo: int, hi: int, key: Callable, shift: int) -> None:
    buckets: list[list] = [[] for _ in range(1 << _RADIX_BITS)]
    for value in items[lo:hi]:
        buckets[(key(value) >> shift) & _RADIX_MASK].append(value)
    start = lo
    bounds = []
    for bucket in buckets:
        end = start + len(bucket)
        items[start:end] = bucket
        bounds.append((start, end))
        start = end
    if shift:
        shift = shift - _RADIX_BITS if shift > _RADIX_BITS else 0
        for b_lo, b_hi in bounds:
            size = b_hi - b_lo
            if size > _RADIX_MIN_SIZE:
                _radix_pass(items, b_lo, b_hi, key, shift)
            elif size > 1:
                _radix_insertsort(items, b_lo, b_hi, key)


def radix_sort(
    items: MutableSequence,
    key: Optional[Callable[[Any], int]] = None,
    key_bytes: int = 4,
) -> None:
    """Most-significant-byte radix sort on the lowest ``key_bytes`` bytes of an integer key."""
    if key_bytes < 1:
        raise ValueError("key_bytes must be at least 1")
    key = key or (lambda value: value)
    n = len(items)
    if n <= _RADIX_MIN_SIZE:
        _radix_insertsort(items, 0, n, key)
    else:
        _radix_pass(items, 0, n, key, (key_bytes - 1) * _RADIX_BITS)