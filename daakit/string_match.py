"""Exact string matching: naive, Knuth-Morris-Pratt and Rabin-Karp."""

from __future__ import annotations

_RADIX = 256


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def naive_search(text: str, pattern: str) -> list[int]:
    """Return every shift at which the pattern occurs, by direct comparison."""
    _check_pattern(pattern)
    m = len(pattern)
    return [
        shift for shift in range(len(text) - m + 1) if text[shift:shift + m] == pattern
    ]


def compute_lps(pattern: str) -> list[int]:
    """Length of the longest proper prefix that is also a suffix, for each prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every shift at which the pattern occurs, using the KMP algorithm."""
    _check_pattern(pattern)
    lps = compute_lps(pattern)
    m = len(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = lps[j - 1]
    return matches


def rabin_karp_search(text: str, pattern: str, prime: int) -> list[int]:
    """Return every shift at which the pattern occurs, using rolling hashes mod prime."""
    _check_pattern(pattern)
    if prime <= 0:
        raise ValueError("prime must be a positive integer")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(_RADIX, m - 1, prime)
    p_hash = t_hash = 0
    for pc, tc in zip(pattern, text):
        p_hash = (_RADIX * p_hash + ord(pc)) % prime
        t_hash = (_RADIX * t_hash + ord(tc)) % prime
    matches = []
    for shift in range(n - m + 1):
        if p_hash == t_hash and text[shift:shift + m] == pattern:
            matches.append(shift)
        if shift < n - m:
            t_hash = (
                _RADIX * (t_hash - ord(text[shift]) * high) + ord(text[shift + m])
            ) % prime
    return matches