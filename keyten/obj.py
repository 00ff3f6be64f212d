"""Values handled by the kernels: atoms and vectors of a single kind."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Any, Iterable, Tuple

from keyten.kind import Kind

NULL_I64 = -(1 << 63)
NULL_F64 = math.nan
NULL_SYM = ""

_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table})
_INT_BITS = {
    Kind.I16: 16,
    Kind.I32: 32,
    Kind.Date: 32,
    Kind.TimeS: 32,
    Kind.TimeMs: 32,
    Kind.I64: 64,
    Kind.TimeUs: 64,
    Kind.TimeNs: 64,
    Kind.DtS: 64,
    Kind.DtMs: 64,
    Kind.DtUs: 64,
    Kind.DtNs: 64,
}


class KernelError(Exception):
    """A kernel could not produce a result."""


class ShapeError(KernelError):
    """Operand lengths or shapes do not fit together."""


class KindError(KernelError):
    """An operand has a kind the operation does not accept."""


def _wrap_signed(value: int, bits: int) -> int:
    v = int(value) & ((1 << bits) - 1)
    return v - (1 << bits) if v >> (bits - 1) else v


def wrap_i64(value: int) -> int:
    """Wrap an integer to the signed 64-bit range (two's complement)."""
    return _wrap_signed(value, 64)


def _to_f32(value: Any) -> float:
    v = float(value)
    if math.isnan(v) or math.isinf(v):
        return v
    try:
        return struct.unpack("<f", struct.pack("<f", v))[0]
    except OverflowError:
        return math.copysign(math.inf, v)


def _normalize(kind: Kind, value: Any) -> Any:
    if kind is Kind.Bool:
        return 1 if value else 0
    if kind is Kind.U8:
        return int(value) & 0xFF
    bits = _INT_BITS.get(kind)
    if bits is not None:
        return _wrap_signed(value, bits)
    if kind is Kind.F32:
        return _to_f32(value)
    if kind is Kind.F64:
        return float(value)
    if kind is Kind.Char:
        if isinstance(value, int):
            return chr(value & 0xFF)
        if not isinstance(value, str) or len(value) != 1 or ord(value) > 0xFF:
            raise ValueError(f"not a single byte character: {value!r}")
        return value
    if kind is Kind.Sym:
        if not isinstance(value, str):
            raise TypeError(f"symbol must be a string, got {type(value).__name__}")
        if len(value) > 8 or not value.isascii() or "\0" in value:
            raise ValueError(f"symbol must be at most 8 ASCII characters: {value!r}")
        return value
    if kind in _COMPOSITE:
        if not isinstance(value, KObj):
            raise TypeError(f"{kind.name} items must be KObj values")
        return value
    return value


@dataclass(frozen=True)
class KObj:
    """An atom (single value) or a vector of values of one kind."""

    kind: Kind
    payload: Any
    atomic: bool
    has_nulls: bool = False

    def is_atom(self) -> bool:
        return self.atomic

    def is_vec(self) -> bool:
        return not self.atomic

    def kind_raw(self) -> int:
        """Signed kind code: negative for atoms, positive for vectors."""
        return self.kind.atom_code() if self.atomic else self.kind.vec_code()

    def length(self) -> int:
        """Number of stored elements; an atom counts as one."""
        return 1 if self.atomic else len(self.payload)

    def items(self) -> Tuple[Any, ...]:
        """Elements as a tuple; an atom yields a one-element tuple."""
        return (self.payload,) if self.atomic else self.payload

    @property
    def value(self) -> Any:
        """The value of an atom."""
        if not self.atomic:
            raise KindError("vector has no single value")
        return self.payload

    def __len__(self) -> int:
        return self.length()


def atom(kind: Kind, value: Any) -> KObj:
    """Build an atom of ``kind`` holding ``value``, normalised to the kind."""
    kind = Kind(kind)
    if kind in _COMPOSITE:
        raise KindError(f"{kind.name} has no atom form")
    return KObj(kind, _normalize(kind, value), True)


def vector(kind: Kind, values: Iterable[Any], has_nulls: bool = False) -> KObj:
    """Build a vector of ``kind`` from ``values``, normalised to the kind."""
    kind = Kind(kind)
    if kind is Kind.Lambda:
        raise KindError("Lambda has no vector form")
    items = tuple(_normalize(kind, v) for v in values)
    return KObj(kind, items, False, bool(has_nulls))