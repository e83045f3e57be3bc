"""
Jaro-Winkler similarity for byte sequences.

Scores two inputs in [0, 1] using the Jaro match/transposition measure with
the Winkler common-prefix boost. Comparison is byte-wise; text callers go
through ``jaro_winkler`` which compares UTF-8 encodings.
"""

import math

from .match_tracker import MatchTracker, build_tracker
from ..normalize.input_normalizer import BytesLike, as_bytes, as_text_bytes, order_pair

MAX_PREFIX_LENGTH = 4
PREFIX_SCALE = 0.1


def matching_distance(s1_len: int, s2_len: int) -> int:
    """
    Maximum offset between positions that may still count as a match.

    Signed: inputs of length 1 give -1, which yields an empty scan window.
    """
    return max(s1_len, s2_len) // 2 - 1


def _scan_matches(left: bytes, right: bytes, left_marks: MatchTracker,
                  right_marks: MatchTracker, match_range: int) -> None:
    """Greedily pair each byte of ``right`` with the leftmost free equal byte of ``left``."""
    s1_len = len(left)

    for i, byte in enumerate(right):
        start = max(0, i - match_range)
        end = min(i + match_range + 1, s1_len)
        for j in range(start, end):
            if left[j] == byte and not left_marks.get(j):
                left_marks.set_true(j)
                right_marks.set_true(i)
                break


def _count_transpositions(left: bytes, right: bytes, left_marks: MatchTracker,
                          right_marks: MatchTracker) -> int:
    """
    Count matched pairs that appear in a different order, halved and rounded up.

    The last position of ``right`` is never visited.
    """
    s1_len = len(left)
    cursor = 0
    transpositions = 0

    for i in range(len(right) - 1):
        if not right_marks.get(i):
            continue

        j = cursor
        while j < s1_len and not left_marks.get(j):
            j += 1
        cursor = j + 1

        if right[i] != left[j]:
            transpositions += 1

    return math.ceil(transpositions / 2)


def _common_prefix_length(left: bytes, right: bytes) -> int:
    prefix = 0
    for l_byte, r_byte in zip(left[:MAX_PREFIX_LENGTH], right[:MAX_PREFIX_LENGTH]):
        if l_byte != r_byte:
            break
        prefix += 1
    return prefix


def similarity(a: BytesLike, b: BytesLike) -> float:
    """
    Compute the Jaro-Winkler similarity of two byte sequences.

    Args:
        a: First byte sequence (bytes, bytearray or memoryview)
        b: Second byte sequence

    Returns:
        Similarity in [0.0, 1.0]; 1.0 for identical inputs (including two
        empty ones) and 0.0 when exactly one input is empty

    Raises:
        TypeError: If either argument is not a byte sequence
    """
    left, right = order_pair(as_bytes(a, "a"), as_bytes(b, "b"))
    s1_len = len(left)
    s2_len = len(right)

    if s1_len == 0:
        return 1.0
    if s2_len == 0:
        return 0.0
    if left == right:
        return 1.0

    match_range = matching_distance(s1_len, s2_len)
    left_marks = build_tracker(s1_len)
    right_marks = build_tracker(s2_len)

    _scan_matches(left, right, left_marks, right_marks, match_range)
    matching = right_marks.count()
    if matching == 0:
        return 0.0

    transpositions = _count_transpositions(left, right, left_marks, right_marks)

    jaro = (matching / s1_len
            + matching / s2_len
            + (matching - transpositions) / matching) / 3.0

    prefix_length = _common_prefix_length(left, right)

    return jaro + prefix_length * PREFIX_SCALE * (1.0 - jaro)


def jaro_winkler(left: str, right: str) -> float:
    """
    Jaro-Winkler similarity of two strings, compared as UTF-8 bytes.

    Args:
        left: First string
        right: Second string

    Returns:
        Similarity in [0.0, 1.0]
    """
    return similarity(as_text_bytes(left, "left"), as_text_bytes(right, "right"))
