#!/usr/bin/env python3
"""
Rotation primitive - circular bit shifts over fixed-width unsigned integers.

Works on:
- Python ints, with an explicit ``width`` in bits
- numpy unsigned scalars and arrays, width taken from the dtype

The in-place variants only accept numpy arrays (Python ints are immutable).

Usage:
    from drbgs.rotation import rotated_left, rotate_right

    rotated_left(0xABCD, 16, width=32)          # 0xABCD0000
    rotated_left(np.uint32(0xABCD), 3)          # np.uint32(0x55E68)

    words = np.array([1, 2, 3], dtype=np.uint64)
    rotate_right(words, 1)                      # mutates words

Version: 1.0.0
"""

from typing import Optional, Union

import numpy as np

from drbgs.errors import RotationError

MASK64 = 0xFFFFFFFFFFFFFFFF

UnsignedValue = Union[int, np.unsignedinteger, np.ndarray]


def rotl64(x: int, k: int) -> int:
    """Unchecked 64-bit left rotation for generator hot paths (0 < k < 64)."""
    return ((x << k) & MASK64) | (x >> (64 - k))


def _is_numpy(value) -> bool:
    return isinstance(value, (np.ndarray, np.generic))


def _bit_width(value: UnsignedValue, width: Optional[int]) -> int:
    if _is_numpy(value):
        dtype = value.dtype
        if dtype.kind != 'u':
            raise RotationError(f"Rotation requires an unsigned integer dtype, got {dtype}")
        dtype_width = dtype.itemsize * 8
        if width is not None and width != dtype_width:
            raise RotationError(f"width={width} disagrees with dtype {dtype} ({dtype_width} bits)")
        return dtype_width

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot rotate {type(value).__name__}; expected int or numpy unsigned integer")
    if width is None:
        raise RotationError("width is required when rotating a Python int")
    if width <= 0:
        raise RotationError(f"width must be positive, got {width}")
    if not 0 <= value < (1 << width):
        raise RotationError(f"Value {value:#x} does not fit in {width} unsigned bits")
    return width


def _check_shift(shift: int, width: int) -> None:
    if not 0 < shift < width:
        raise RotationError(f"Rotation shift must satisfy 0 < shift < {width}, got {shift}")


def rotated_left(value: UnsignedValue, shift: int, width: Optional[int] = None) -> UnsignedValue:
    """
    Left bitwise rotation of ``value`` by ``shift``.

    Precondition: 0 < shift < width.

    Returns a value of the same kind (Python int, numpy scalar or array).
    """
    width = _bit_width(value, width)
    _check_shift(shift, width)

    if _is_numpy(value):
        kind = value.dtype.type
        return (value << kind(shift)) | (value >> kind(width - shift))

    mask = (1 << width) - 1
    return ((value << shift) & mask) | (value >> (width - shift))


def rotated_right(value: UnsignedValue, shift: int, width: Optional[int] = None) -> UnsignedValue:
    """
    Right bitwise rotation of ``value`` by ``shift``.

    Precondition: 0 < shift < width.
    """
    width = _bit_width(value, width)
    _check_shift(shift, width)

    if _is_numpy(value):
        kind = value.dtype.type
        return (value >> kind(shift)) | (value << kind(width - shift))

    mask = (1 << width) - 1
    return (value >> shift) | ((value << (width - shift)) & mask)


def _require_array(array) -> None:
    if not isinstance(array, np.ndarray):
        raise TypeError(
            f"In-place rotation needs a numpy array, got {type(array).__name__}; "
            "use rotated_left()/rotated_right() for immutable values"
        )


def rotate_left(array: np.ndarray, shift: int) -> None:
    """Rotate every element of ``array`` left by ``shift``, in place."""
    _require_array(array)
    array[...] = rotated_left(array, shift)


def rotate_right(array: np.ndarray, shift: int) -> None:
    """Rotate every element of ``array`` right by ``shift``, in place."""
    _require_array(array)
    array[...] = rotated_right(array, shift)
