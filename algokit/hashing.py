"""Polynomial string hashing with two moduli."""

from __future__ import annotations

BASE = 1777771
MODULI = (999727999, 1070777777)
INVERSES = (325255434, 10018302)
"""Inverses of ``BASE`` under each modulus, used to align substrings."""


class PolyHash:
    """Prefix hashes of a string that give any substring's hash at once."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._prefix: list[list[int]] = []
        self._shift: list[list[int]] = []
        for modulus, inverse in zip(MODULI, INVERSES):
            prefix = [0]
            shift = [1]
            power = 1
            for ch in text:
                prefix.append((prefix[-1] + power * ord(ch)) % modulus)
                shift.append(shift[-1] * inverse % modulus)
                power = power * BASE % modulus
            self._prefix.append(prefix)
            self._shift.append(shift)

    def __len__(self) -> int:
        return self._length

    def get(self, start: int, end: int) -> int:
        """Return the hash of the substring ``text[start:end]``."""
        if not 0 <= start <= end <= self._length:
            raise IndexError(
                f"range [{start}, {end}) is outside a string of length {self._length}"
            )
        parts = []
        for modulus, prefix, shift in zip(MODULI, self._prefix, self._shift):
            value = (prefix[end] - prefix[start]) % modulus
            parts.append(value * shift[start] % modulus)
        return (parts[0] << 32) | parts[1]


def string_borders(s: str) -> list[int]:
    """Return, in increasing order, the lengths of proper prefixes that are suffixes."""
    hashes = PolyHash(s)
    size = len(s)
    return [
        length
        for length in range(1, size)
        if hashes.get(0, length) == hashes.get(size - length, size)
    ]


def count_occurrences(text: str, pattern: str) -> int:
    """Count the possibly overlapping places where ``pattern`` occurs in ``text``."""
    if len(pattern) > len(text):
        return 0
    target = PolyHash(pattern).get(0, len(pattern))
    hashes = PolyHash(text)
    width = len(pattern)
    return sum(
        hashes.get(start, start + width) == target
        for start in range(len(text) - width + 1)
    )