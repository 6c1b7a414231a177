"""Single-precision helpers.

Reputation lives at IEEE-754 binary32 precision so that reward compounding
(truncating float multiplies) lands on the same integers as the deployed
platform. Python floats are binary64; every arithmetic result is rounded back
through a 4-byte pack. Binary64 carries enough bits that one add or multiply
of two binary32 values followed by this rounding equals the binary32 result.
"""

import struct

_F32 = struct.Struct("<f")


def to_f32(value: float) -> float:
    """Round a float to the nearest binary32 value."""
    return _F32.unpack(_F32.pack(value))[0]


def f32_add(a: float, b: float) -> float:
    return to_f32(to_f32(a) + to_f32(b))


def f32_mul(a: float, b: float) -> float:
    return to_f32(to_f32(a) * to_f32(b))
