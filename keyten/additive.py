"""Addition and subtraction kernels for 64-bit integer and float operands.

Each kernel accepts atoms or vectors of its kind. Atom-atom gives an atom,
anything involving a vector gives a vector, and an atom operand is
broadcast over a vector operand. Two vectors must have the same length.

Integer arithmetic wraps around in two's complement. When an integer
vector operand is flagged as holding nulls, positions holding the null
sentinel stay null in the result. Float nulls are NaN and propagate
through the arithmetic by themselves; the result is flagged when either
operand is flagged or a scalar operand is NaN.
"""

from __future__ import annotations

import math
import operator
from typing import Callable, Sequence

from keyten.kind import Kind
from keyten.obj import NULL_I64, KindError, KObj, ShapeError, atom, vector, wrap_i64

__all__ = ["plus_i64", "plus_f64", "minus_i64", "minus_f64"]


def _require(obj: KObj, kind: Kind) -> None:
    if obj.kind is not kind:
        raise KindError(f"expected {kind.name} operand, got {obj.kind.name}")


def _stamp_nulls(
    result: Sequence[int], *sources: Sequence[int]
) -> list:
    """Put the null sentinel back wherever any source element is null."""
    return [
        NULL_I64 if any(src[i] == NULL_I64 for src in sources) else value
        for i, value in enumerate(result)
    ]


def _int_kernel(op: Callable[[int, int], int], x: KObj, y: KObj) -> KObj:
    _require(x, Kind.I64)
    _require(y, Kind.I64)

    if x.is_atom() and y.is_atom():
        return atom(Kind.I64, wrap_i64(op(x.value, y.value)))

    if x.is_atom():
        s = x.value
        ys = y.items()
        out = [wrap_i64(op(s, b)) for b in ys]
        if y.has_nulls:
            return vector(Kind.I64, _stamp_nulls(out, ys), has_nulls=True)
        return vector(Kind.I64, out)

    if y.is_atom():
        s = y.value
        xs = x.items()
        out = [wrap_i64(op(a, s)) for a in xs]
        if x.has_nulls:
            return vector(Kind.I64, _stamp_nulls(out, xs), has_nulls=True)
        return vector(Kind.I64, out)

    xs = x.items()
    ys = y.items()
    if len(xs) != len(ys):
        raise ShapeError(f"length mismatch: {len(xs)} vs {len(ys)}")
    out = [wrap_i64(op(a, b)) for a, b in zip(xs, ys)]
    has_nulls = x.has_nulls or y.has_nulls
    if has_nulls:
        out = _stamp_nulls(out, xs, ys)
    return vector(Kind.I64, out, has_nulls=has_nulls)


def _float_kernel(op: Callable[[float, float], float], x: KObj, y: KObj) -> KObj:
    _require(x, Kind.F64)
    _require(y, Kind.F64)

    if x.is_atom() and y.is_atom():
        return atom(Kind.F64, op(x.value, y.value))

    if x.is_atom():
        s = x.value
        out = [op(s, b) for b in y.items()]
        return vector(Kind.F64, out, has_nulls=y.has_nulls or math.isnan(s))

    if y.is_atom():
        s = y.value
        out = [op(a, s) for a in x.items()]
        return vector(Kind.F64, out, has_nulls=x.has_nulls or math.isnan(s))

    xs = x.items()
    ys = y.items()
    if len(xs) != len(ys):
        raise ShapeError(f"length mismatch: {len(xs)} vs {len(ys)}")
    out = [op(a, b) for a, b in zip(xs, ys)]
    return vector(Kind.F64, out, has_nulls=x.has_nulls or y.has_nulls)


def plus_i64(x: KObj, y: KObj) -> KObj:
    """``x + y`` for I64 operands, wrapping on overflow."""
    return _int_kernel(operator.add, x, y)


def plus_f64(x: KObj, y: KObj) -> KObj:
    """``x + y`` for F64 operands."""
    return _float_kernel(operator.add, x, y)


def minus_i64(x: KObj, y: KObj) -> KObj:
    """``x - y`` for I64 operands, wrapping on overflow."""
    return _int_kernel(operator.sub, x, y)


def minus_f64(x: KObj, y: KObj) -> KObj:
    """``x - y`` for F64 operands."""
    return _float_kernel(operator.sub, x, y)