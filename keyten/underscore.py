"""The ``_`` verb: monadic floor and dyadic drop."""

from __future__ import annotations

import math

from keyten.kind import Kind
from keyten.obj import NULL_I64, KindError, KObj, atom, vector

__all__ = ["floor", "drop"]

_I64_MAX = (1 << 63) - 1
_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table})


def _floor_to_i64(v: float) -> int:
    """Floor, saturating to the I64 range; NaN becomes zero."""
    if math.isnan(v):
        return 0
    if v >= 2.0**63:
        return _I64_MAX
    if v < -(2.0**63):
        return NULL_I64
    return math.floor(v)


def floor(x: KObj) -> KObj:
    """``_x``: F64 atoms or vectors floored to I64; I64 is returned as it is."""
    if x.kind is Kind.I64:
        return x
    if x.kind is not Kind.F64:
        raise KindError(f"cannot floor {x.kind.name}")
    if x.is_atom():
        return atom(Kind.I64, _floor_to_i64(x.value))
    return vector(Kind.I64, (_floor_to_i64(v) for v in x.items()))


def drop(n: int, y: KObj) -> KObj:
    """``n _ y``: ``y`` without its first ``n`` elements, or its last ``-n``.

    The result has ``y``'s kind and length ``max(0, len(y) - |n|)``.
    """
    if y.kind in _COMPOSITE:
        raise KindError(f"cannot drop from {y.kind.name}")
    src = y.items()
    kept = max(0, len(src) - abs(n))
    if kept == 0:
        return vector(y.kind, ())
    part = src[len(src) - kept:] if n >= 0 else src[:kept]
    return vector(y.kind, part)