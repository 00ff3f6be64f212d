"""Multiplication and division kernels.

Multiplication takes 64-bit integer or float operands. Division is
float-only; integer operands are expected to be promoted by the caller.

Atom-atom gives an atom, anything involving a vector gives a vector, and
an atom operand is broadcast over a vector operand. Two vectors must have
the same length. Integer products wrap around in two's complement, and
integer nulls stay null when the operand is flagged as holding nulls.
Float division follows IEEE 754: a zero divisor gives an infinity or NaN
rather than an error.
"""

from __future__ import annotations

import math
import operator
from typing import Callable, Sequence

from keyten.kind import Kind
from keyten.obj import NULL_I64, KindError, KObj, ShapeError, atom, vector, wrap_i64

__all__ = ["times_i64", "times_f64", "divide_f64"]


def _require(obj: KObj, kind: Kind) -> None:
    if obj.kind is not kind:
        raise KindError(f"expected {kind.name} operand, got {obj.kind.name}")


def _require_same_length(xs: Sequence, ys: Sequence) -> None:
    if len(xs) != len(ys):
        raise ShapeError(f"length mismatch: {len(xs)} vs {len(ys)}")


def _stamp_nulls(result: Sequence[int], *sources: Sequence[int]) -> list:
    """Put the null sentinel back wherever any source element is null."""
    return [
        NULL_I64 if any(src[i] == NULL_I64 for src in sources) else value
        for i, value in enumerate(result)
    ]


def _ieee_div(a: float, b: float) -> float:
    """Float division with IEEE 754 results for a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        sign = math.copysign(1.0, a) * math.copysign(1.0, b)
        return math.copysign(math.inf, sign)
    return a / b


def times_i64(x: KObj, y: KObj) -> KObj:
    """``x * y`` for I64 operands, wrapping on overflow."""
    _require(x, Kind.I64)
    _require(y, Kind.I64)

    if x.is_atom() and y.is_atom():
        return atom(Kind.I64, wrap_i64(x.value * y.value))

    if x.is_atom() or y.is_atom():
        scalar, vec = (x, y) if x.is_atom() else (y, x)
        s = scalar.value
        vs = vec.items()
        out = [wrap_i64(s * v) for v in vs]
        if vec.has_nulls:
            return vector(Kind.I64, _stamp_nulls(out, vs), has_nulls=True)
        return vector(Kind.I64, out)

    xs = x.items()
    ys = y.items()
    _require_same_length(xs, ys)
    out = [wrap_i64(a * b) for a, b in zip(xs, ys)]
    has_nulls = x.has_nulls or y.has_nulls
    if has_nulls:
        out = _stamp_nulls(out, xs, ys)
    return vector(Kind.I64, out, has_nulls=has_nulls)


def _float_kernel(
    op: Callable[[float, float], float],
    x: KObj,
    y: KObj,
    *,
    left_flag: Callable[[float], bool],
    right_flag: Callable[[float], bool],
    vec_vec_always_flag: bool,
) -> KObj:
    _require(x, Kind.F64)
    _require(y, Kind.F64)

    if x.is_atom() and y.is_atom():
        return atom(Kind.F64, op(x.value, y.value))

    if x.is_atom():
        s = x.value
        out = [op(s, b) for b in y.items()]
        return vector(Kind.F64, out, has_nulls=y.has_nulls or left_flag(s))

    if y.is_atom():
        s = y.value
        out = [op(a, s) for a in x.items()]
        return vector(Kind.F64, out, has_nulls=x.has_nulls or right_flag(s))

    xs = x.items()
    ys = y.items()
    _require_same_length(xs, ys)
    out = [op(a, b) for a, b in zip(xs, ys)]
    flagged = vec_vec_always_flag or x.has_nulls or y.has_nulls
    return vector(Kind.F64, out, has_nulls=flagged)


def times_f64(x: KObj, y: KObj) -> KObj:
    """``x * y`` for F64 operands."""
    return _float_kernel(
        operator.mul,
        x,
        y,
        left_flag=math.isnan,
        right_flag=math.isnan,
        vec_vec_always_flag=False,
    )


def divide_f64(x: KObj, y: KObj) -> KObj:
    """``x % y`` (float division) for F64 operands.

    A vector result is flagged as possibly holding nulls whenever a null
    could arise: a flagged operand, a NaN scalar, a zero scalar divisor, or
    any vector-by-vector division.
    """
    return _float_kernel(
        _ieee_div,
        x,
        y,
        left_flag=math.isnan,
        right_flag=lambda s: s == 0.0 or math.isnan(s),
        vec_vec_always_flag=True,
    )