"""
Hash functions for strings.

All functions return non-negative integers wrapped to 64 bits so that bucket
selection behaves the same as with a native unsigned machine word.
"""

from typing import Callable, List, Tuple

MASK_64 = (1 << 64) - 1


def modded_sum_hash(s: str) -> int:
    """Sum the character values, then fold the sum through several moduli."""
    total = sum(ord(c) for c in s)
    return (total % 39) + (total % 25) + (total % 5)


def rs_hash(s: str) -> int:
    """Robert Sedgwick's hash (http://www.partow.net/programming/hashfunctions/)."""
    b = 378551
    a = 63689
    h = 0
    for c in s:
        h = (h * a + ord(c)) & MASK_64
        a = (a * b) & MASK_64
    return h


def thirty_three_hash(s: str) -> int:
    """Bernstein's djb2: h = h * 33 + c (http://www.cse.yorku.ca/~oz/hash.html)."""
    h = 5381
    for c in s:
        h = ((h << 5) + h + ord(c)) & MASK_64
    return h


def myhash(s: str) -> int:
    """The string hash used by default for hash sets of strings."""
    return rs_hash(s)


HASH_INFO: List[Tuple[str, Callable[[str], int]]] = [
    ("Modded Sum", modded_sum_hash),
    ("RS", rs_hash),
    ("Thirty-Three", thirty_three_hash),
]
