from enum import Enum
from typing import Union

import numpy as np

from .errors import TypeMismatchError

Number = Union[int, float]

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1
U32_MAX = (1 << 32) - 1


class ValueKind(Enum):
    F32 = "f32"
    I32 = "i32"
    U32 = "u32"

    def is_integer(self):
        return self in {ValueKind.I32, ValueKind.U32}

    def is_unsigned(self):
        return self == ValueKind.U32

    def __str__(self):
        return self.value


class Value:
    """
    A constant stored in an input slot.

    Floats are kept at single precision, matching what the editor stores;
    integers are range checked for their 32-bit kind.
    """

    __slots__ = ("kind", "raw")

    def __init__(self, kind: ValueKind, raw: Number):
        self.kind = kind
        self.raw = raw

    @classmethod
    def f32(cls, value: Number) -> 'Value':
        return cls(ValueKind.F32, float(np.float32(value)))

    @classmethod
    def i32(cls, value: int) -> 'Value':
        value = int(value)
        if not I32_MIN <= value <= I32_MAX:
            raise ValueError(f"{value} does not fit in i32")
        return cls(ValueKind.I32, value)

    @classmethod
    def u32(cls, value: int) -> 'Value':
        value = int(value)
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"{value} does not fit in u32")
        return cls(ValueKind.U32, value)

    @classmethod
    def of(cls, kind: ValueKind, value: Number) -> 'Value':
        """Build a Value of ``kind`` from a plain Python number."""
        if kind == ValueKind.F32:
            return cls.f32(value)
        if isinstance(value, float) and not value.is_integer():
            raise TypeMismatchError(kind, ValueKind.F32)
        if kind == ValueKind.I32:
            return cls.i32(value)
        return cls.u32(value)

    def as_float(self) -> float:
        """Widen any numeric kind to float."""
        return float(self.raw)

    def expect(self, kind: ValueKind) -> Number:
        """Return the raw number, or raise if the stored kind differs."""
        if self.kind != kind:
            raise TypeMismatchError(kind, self.kind)
        return self.raw

    def coerce(self, kind: ValueKind) -> Number:
        """
        Read this value for a slot of ``kind``.

        Float slots accept every kind by widening. Integer slots only accept
        their own kind.
        """
        if kind == ValueKind.F32:
            return self.as_float()
        return self.expect(kind)

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind == other.kind and self.raw == other.raw

    def __hash__(self):
        return hash((self.kind, self.raw))

    def __repr__(self):
        return f"Value.{self.kind.value}({self.raw!r})"


def wrap_i32(value: int) -> int:
    """Two's complement wrap to a signed 32-bit integer."""
    return ((value + (1 << 31)) & 0xFFFFFFFF) - (1 << 31)
