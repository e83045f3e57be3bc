"""
Input normalization for similarity scoring.

Coerces caller arguments to immutable byte strings and orders a pair so the
longer input comes first.
"""

from typing import Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]


def as_bytes(value: BytesLike, name: str = "value") -> bytes:
    """
    Coerce a byte-like value to ``bytes``.

    Mutable buffers are copied so later changes by the caller are not seen.

    Args:
        value: bytes, bytearray or memoryview
        name: Argument name used in the error message

    Returns:
        Immutable bytes with the same content

    Raises:
        TypeError: If ``value`` is text or not byte-like
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        raise TypeError(
            f"{name} must be a byte sequence, got str; "
            "encode it first or call jaro_winkler() for text"
        )
    raise TypeError(f"{name} must be a byte sequence, got {type(value).__name__}")


def as_text_bytes(value: str, name: str = "value") -> bytes:
    """Encode text as UTF-8, rejecting anything that is not ``str``."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value.encode("utf-8")


def order_pair(a: bytes, b: bytes) -> Tuple[bytes, bytes]:
    """
    Order two inputs as ``(longer, shorter)``.

    Equal lengths are ordered by byte value, smaller first, so the pair is
    the same whichever way round the caller passed it.

    Args:
        a: First input
        b: Second input

    Returns:
        Tuple of (left, right) with len(left) >= len(right)
    """
    if len(a) < len(b):
        return b, a
    if len(a) == len(b) and b < a:
        return b, a
    return a, b
