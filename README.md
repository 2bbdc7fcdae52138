# klite

klite is a small library of building blocks with no dependencies.

- `klite.ksort` sorts and selects in place on mutable sequences. Ordering comes from a
  `less(a, b)` callable, and `<` is used when you pass none. It provides:
  - `mergesort`, a stable bottom-up merge sort.
  - `introsort`, a quicksort that falls back to comb sort when the recursion gets too deep.
  - `combsort`.
  - `heapmake`, `heapsort` and `heapadjust`. `heapsort` expects items that `heapmake` has
    already arranged.
  - `ksmall`, which finds the k-th smallest item. It reorders items as it works and raises
    `IndexError` when k is out of range.
  - `shuffle` and `sample`, which take an optional `random.Random`. `sample` moves `r` chosen
    items to the front and keeps their relative order.
  - `radix_sort`, an in-place most-significant-byte radix sort on the lowest `key_bytes`
    bytes of an integer key. `key_bytes` defaults to 4.
- `klite.kvec` provides `Vector`, a list-backed growable array that keeps track of its
  capacity. `push` doubles the capacity when the vector is full. `at` and `set` grow the
  vector so that the index exists, filling new slots with `None`. It also has `pop`,
  `resize`, `copy_from`, `reverse` and `capacity`.
- `klite.kstring` provides:
  - `KString`, an appendable text buffer with `append`, `putc`, `putw`, `putuw`, `putl`,
    `printf`, `getline`, `clear` and `release`. The integer writers raise `OverflowError`
    for values outside the 32-bit signed, 32-bit unsigned or 64-bit signed range.
  - `split` and `split_offsets`, which return the non-empty fields of a text. Fields are
    separated by whitespace, or by a single delimiter character when you give one.
  - `tokenize`, which yields the pieces between any of the separator characters.
  - `read_lines`, which yields the lines of a stream without their terminators.
  - Boyer-Moore search on `str` or `bytes`: the `BoyerMoore` class and the `memmem` and
    `find` functions.

klite is a library only and does not install a command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sort a list in place with a custom order:

```python
from operator import lt
from klite.ksort import introsort, mergesort, ksmall

data = [5, 3, 9, 1, 7]
introsort(data, lt)          # data == [1, 3, 5, 7, 9]

pairs = [(2, "a"), (1, "b"), (2, "c")]
mergesort(pairs, lambda x, y: x[0] < y[0])   # stable: (2, "a") stays before (2, "c")

third = ksmall([8, 2, 6, 4], 2, lt)          # 6
```

Heap sort takes two steps:

```python
from klite.ksort import heapmake, heapsort

values = [4, 1, 3, 2]
heapmake(values)
heapsort(values)             # values == [1, 2, 3, 4]
```

Grow a vector by index:

```python
from klite.kvec import Vector

v = Vector()
v.push(10)
v.set(20, 5)     # grows the vector so that index 20 exists
len(v)           # 21
```

Build strings and search them:

```python
import io
from klite.kstring import KString, split, tokenize, BoyerMoore, find

s = KString()
s.putw(-12345)
s.append(" items")
str(s)                                   # "-12345 items"

split(" abcdefg:    100 ")               # ["abcdefg:", "100"]
list(tokenize("ab:cde:fg/hij::k", ":/"))  # ["ab", "cde", "fg", "hij", "", "k"]

line = KString()
line.getline(io.StringIO("carrot\r\n"))
str(line)                                # "carrot"

bm = BoyerMoore("cd")
list(bm.finditer("abcdefgcdgcagtcakcdcd"))   # [2, 7, 17, 19]
find("hello world", "world")                 # 6
```