"""Sample formats that audio hosts exchange with stream callbacks."""

from __future__ import annotations

import enum
from functools import total_ordering


@total_ordering
class SampleFormat(enum.Enum):
    """Encoding of a single sample.

    Integer formats are centred on zero. Unsigned formats are centred on half
    their range. Float formats span ``-1.0..1.0``. Members are ordered as
    declared.
    """

    I8 = "i8"
    I16 = "i16"
    I24 = "i24"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    def sample_size(self) -> int:
        """Size in bytes of one sample in memory (i24 is stored in 4 bytes)."""
        return _SIZES[self]

    def is_int(self) -> bool:
        """True for signed integer formats."""
        return self in _SIGNED

    def is_uint(self) -> bool:
        """True for unsigned integer formats."""
        return self in _UNSIGNED

    def is_float(self) -> bool:
        """True for floating point formats."""
        return self in _FLOAT

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SampleFormat):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]


_ORDER = {member: position for position, member in enumerate(SampleFormat)}

_SIZES = {
    SampleFormat.I8: 1,
    SampleFormat.U8: 1,
    SampleFormat.I16: 2,
    SampleFormat.U16: 2,
    SampleFormat.I24: 4,
    SampleFormat.I32: 4,
    SampleFormat.U32: 4,
    SampleFormat.I64: 8,
    SampleFormat.U64: 8,
    SampleFormat.F32: 4,
    SampleFormat.F64: 8,
}

_SIGNED = frozenset(
    {SampleFormat.I8, SampleFormat.I16, SampleFormat.I24, SampleFormat.I32, SampleFormat.I64}
)
_UNSIGNED = frozenset({SampleFormat.U8, SampleFormat.U16, SampleFormat.U32, SampleFormat.U64})
_FLOAT = frozenset({SampleFormat.F32, SampleFormat.F64})