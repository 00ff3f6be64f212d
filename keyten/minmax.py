"""Minimum (``&``) and maximum (``|``) kernels.

The result has the operands' kind. Atom-atom gives an atom; anything
involving a vector gives a vector. An operand of length one, atom or
vector, is broadcast over the other. For floats, a NaN operand yields the
other operand.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Tuple

from keyten.kind import Kind
from keyten.obj import KindError, KObj, ShapeError, atom, vector

__all__ = ["MinMax", "minmax_i64", "minmax_f64"]


class MinMax(Enum):
    """Which of the two values to keep."""

    Min = "&"
    Max = "|"

    def apply_i64(self, a: int, b: int) -> int:
        return min(a, b) if self is MinMax.Min else max(a, b)

    def apply_f64(self, a: float, b: float) -> float:
        if math.isnan(a):
            return b
        if math.isnan(b):
            return a
        return min(a, b) if self is MinMax.Min else max(a, b)


def _require(obj: KObj, kind: Kind) -> None:
    if obj.kind is not kind:
        raise KindError(f"expected {kind.name} operand, got {obj.kind.name}")


def _broadcast(xs: Tuple[Any, ...], ys: Tuple[Any, ...]) -> Tuple[Tuple, Tuple]:
    """Stretch a one-element side to the other side's length."""
    if len(xs) == len(ys):
        return xs, ys
    if len(xs) == 1:
        return xs * len(ys), ys
    if len(ys) == 1:
        return xs, ys * len(xs)
    raise ShapeError(f"length mismatch: {len(xs)} vs {len(ys)}")


def minmax_i64(op: MinMax, x: KObj, y: KObj) -> KObj:
    """``x & y`` or ``x | y`` for I64 atoms or vectors."""
    _require(x, Kind.I64)
    _require(y, Kind.I64)
    if x.is_atom() and y.is_atom():
        return atom(Kind.I64, op.apply_i64(x.value, y.value))
    xs, ys = _broadcast(x.items(), y.items())
    return vector(Kind.I64, (op.apply_i64(a, b) for a, b in zip(xs, ys)))


def minmax_f64(op: MinMax, x: KObj, y: KObj) -> KObj:
    """``x & y`` or ``x | y`` for F64 atoms or vectors."""
    _require(x, Kind.F64)
    _require(y, Kind.F64)
    if x.is_atom() and y.is_atom():
        return atom(Kind.F64, op.apply_f64(x.value, y.value))
    xs, ys = _broadcast(x.items(), y.items())
    return vector(Kind.F64, (op.apply_f64(a, b) for a, b in zip(xs, ys)))