from __future__ import annotations

from typing import Any

import numpy as np

from .errors import UsageError


def xor_bytes(a: bytes | memoryview, b: bytes | memoryview) -> bytes:
    """XOR two byte sequences.

    Only the common prefix is combined, so the result is as long as the
    shorter input.

    Args:
        a: First byte sequence.
        b: Second byte sequence.

    Returns:
        The XOR result as a new byte sequence.
    """
    return bytes(x ^ y for x, y in zip(a, b, strict=False))


def as_readable(buf: Any) -> memoryview:
    """Return a flat unsigned-byte view of ``buf``.

    Raises:
        UsageError: If ``buf`` is not C-contiguous.
    """
    view = memoryview(buf)
    if not view.c_contiguous:
        raise UsageError("Buffer must be contiguous")
    return view.cast("B")


def as_writable(buf: Any) -> memoryview:
    """Return a flat unsigned-byte view of a buffer the mode may write to.

    Raises:
        UsageError: If ``buf`` is read-only or not C-contiguous.
    """
    view = as_readable(buf)
    if view.readonly:
        raise UsageError("Output buffer is read-only")
    return view


def _address_range(view: memoryview) -> tuple[int, int]:
    """Return the half-open ``[start, end)`` address range of a byte view."""
    arr = np.frombuffer(view, dtype=np.uint8)
    start = arr.__array_interface__["data"][0]
    return start, start + arr.nbytes


def any_overlap(x: memoryview, y: memoryview) -> bool:
    """Report whether ``x`` and ``y`` share memory at any index."""
    if not len(x) or not len(y):
        return False
    x0, x1 = _address_range(x)
    y0, y1 = _address_range(y)
    return x0 < y1 and y0 < x1


def inexact_overlap(x: memoryview, y: memoryview) -> bool:
    """Report whether ``x`` and ``y`` share memory at a non-corresponding index.

    Two views that start at the same address are an exact alias and are
    allowed, even when their lengths differ.
    """
    if not len(x) or not len(y):
        return False
    if _address_range(x)[0] == _address_range(y)[0]:
        return False
    return any_overlap(x, y)
