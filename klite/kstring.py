"""A growable string buffer, field splitting, tokenizing and Boyer-Moore search."""

from __future__ import annotations

import itertools
from typing import IO, Iterator, Optional, Sequence, Union

_C_SPACE = " \t\n\v\f\r"

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_UINT32_MAX = 2**32 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

Text = Union[str, bytes, bytearray]


def _check_range(value: int, low: int, high: int, what: str) -> None:
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {what}")


class KString:
    """A mutable text buffer that is appended to piece by piece."""

    def __init__(self, text: str = "") -> None:
        self._text = str(text)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"KString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def clear(self) -> None:
        """Empty the buffer."""
        self._text = ""

    def append(self, text: str) -> int:
        """Append ``text`` and return the number of characters added."""
        self._text += text
        return len(text)

    def putc(self, char: str) -> None:
        """Append a single character."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._text += char

    def putw(self, value: int) -> None:
        """Append a 32-bit signed integer in decimal."""
        _check_range(value, _INT32_MIN, _INT32_MAX, "a 32-bit signed integer")
        self._text += str(value)

    def putuw(self, value: int) -> None:
        """Append a 32-bit unsigned integer in decimal."""
        _check_range(value, 0, _UINT32_MAX, "a 32-bit unsigned integer")
        self._text += str(value)

    def putl(self, value: int) -> None:
        """Append a 64-bit signed integer in decimal."""
        _check_range(value, _INT64_MIN, _INT64_MAX, "a 64-bit signed integer")
        self._text += str(value)

    def printf(self, fmt: str, *args: object) -> int:
        """Append ``fmt % args`` and return the number of characters added."""
        formatted = fmt % args if args else fmt % ()
        self._text += formatted
        return len(formatted)

    def release(self) -> str:
        """Return the contents and leave the buffer empty."""
        text, self._text = self._text, ""
        return text

    def getline(self, stream: IO[str]) -> bool:
        """Append one line from ``stream`` without its ``\\n`` or ``\\r\\n``.

        Returns False, appending nothing, at end of input.
        """
        line = stream.readline()
        if not line:
            return False
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        self._text += line
        return True


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` with their terminators removed."""
    buffer = KString()
    while buffer.getline(stream):
        yield buffer.release()


def _isgraph(ch: str) -> bool:
    return ch not in _C_SPACE and ch.isprintable()


def split_offsets(text: str, delimiter: Optional[str] = None) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of the non-empty fields of ``text``.

    With no delimiter, fields are separated by runs of whitespace; otherwise
    by the single character ``delimiter``. Empty fields are skipped.
    """
    if delimiter is not None and (not isinstance(delimiter, str) or len(delimiter) != 1):
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    spans: list[tuple[int, int]] = []
    last: Optional[str] = None
    start = 0
    for i, ch in enumerate(itertools.chain(text, [None])):
        if delimiter is None:
            if ch is None or ch in _C_SPACE:
                if last is not None and _isgraph(last):
                    spans.append((start, i))
            elif last is None or last in _C_SPACE:
                start = i
        else:
            if ch is None or ch == delimiter:
                if last is not None and last != delimiter:
                    spans.append((start, i))
            elif last is None or last == delimiter:
                start = i
        last = ch
    return spans


def split(text: str, delimiter: Optional[str] = None) -> list[str]:
    """Return the non-empty fields of ``text``; see :func:`split_offsets`."""
    return [text[start:end] for start, end in split_offsets(text, delimiter)]


def tokenize(text: str, separators: str) -> Iterator[str]:
    """Yield the pieces of ``text`` between any of the ``separators`` characters.

    Adjacent separators yield empty tokens; an empty text yields one empty token.
    """
    seps = frozenset(separators)
    pos = 0
    length = len(text)
    while True:
        end = next((i for i in range(pos, length) if text[i] in seps), length)
        yield text[pos:end]
        if end == length:
            return
        pos = end + 1


class BoyerMoore:
    """A pattern prepared for repeated Boyer-Moore searches."""

    def __init__(self, pattern: Text) -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        m = len(pattern)
        self._bad_char = {ch: m - i - 1 for i, ch in enumerate(pattern[: m - 1])}
        self._good_suffix = self._good_suffix_table(pattern)

    @staticmethod
    def _suffixes(pat: Sequence) -> list[int]:
        m = len(pat)
        suff = [0] * m
        suff[m - 1] = m
        g = m - 1
        f = 0
        for i in range(m - 2, -1, -1):
            if i > g and suff[i + m - 1 - f] < i - g:
                suff[i] = suff[i + m - 1 - f]
            else:
                if i < g:
                    g = i
                f = i
                while g >= 0 and pat[g] == pat[g + m - 1 - f]:
                    g -= 1
                suff[i] = f - g
        return suff

    @classmethod
    def _good_suffix_table(cls, pat: Sequence) -> list[int]:
        m = len(pat)
        suff = cls._suffixes(pat)
        table = [m] * m
        j = 0
        for i in range(m - 1, -1, -1):
            if suff[i] == i + 1:
                while j < m - 1 - i:
                    if table[j] == m:
                        table[j] = m - 1 - i
                    j += 1
        for i in range(m - 1):
            table[m - 1 - suff[i]] = m - 1 - i
        return table

    @property
    def period(self) -> int:
        """The shift applied after a full match."""
        return self._good_suffix[0]

    def _check_type(self, text: Text) -> None:
        if isinstance(text, str) != isinstance(self.pattern, str):
            raise TypeError("text and pattern must both be str or both be bytes")

    def search(self, text: Text, start: int = 0, end: Optional[int] = None) -> int:
        """Return the index of the first match in ``text[start:end]``, or -1."""
        self._check_type(text)
        pat = self.pattern
        m = len(pat)
        n = len(text) if end is None else min(end, len(text))
        j = max(start, 0)
        bad_char = self._bad_char
        good_suffix = self._good_suffix
        while j <= n - m:
            i = m - 1
            while i >= 0 and pat[i] == text[i + j]:
                i -= 1
            if i < 0:
                return j
            j += max(bad_char.get(text[i + j], m) - m + 1 + i, good_suffix[i])
        return -1

    def finditer(self, text: Text) -> Iterator[int]:
        """Yield match positions, resuming each search one period past the last match."""
        pos = 0
        while (found := self.search(text, pos)) >= 0:
            yield found
            pos = found + self.period


def memmem(haystack: Text, pattern: Text) -> int:
    """Return the index of the first occurrence of ``pattern``, or -1."""
    return BoyerMoore(pattern).search(haystack)


def find(text: Text, pattern: Text, n: Optional[int] = None) -> int:
    """Return the index of ``pattern`` within the first ``n`` items of ``text``, or -1."""
    return BoyerMoore(pattern).search(text, 0, n)