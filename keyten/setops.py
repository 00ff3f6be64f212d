"""Monadic verbs over whole vectors: sort, unique, sqrt, reverse and where."""

from __future__ import annotations

import math
import struct

from keyten.kind import Kind
from keyten.monad import enlist
from keyten.obj import KindError, KObj, vector

__all__ = ["sort_asc", "unique", "sqrt", "reverse", "where_indices"]

_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table})


def _f64_bits(v: float) -> int:
    return struct.unpack("<q", struct.pack("<d", v))[0]


def _total_order_key(v: float) -> int:
    """IEEE 754 total order: -NaN < -inf < ... < -0 < +0 < ... < inf < NaN."""
    bits = _f64_bits(v)
    return bits ^ 0x7FFFFFFFFFFFFFFF if bits < 0 else bits


def sort_asc(x: KObj) -> KObj:
    """``^x``: ascending sort. An atom is returned as it is.

    Floats sort by total order, so NaN goes last.
    """
    if x.is_atom():
        return x
    if x.kind is Kind.I64:
        return vector(Kind.I64, sorted(x.items()))
    if x.kind is Kind.F64:
        return vector(Kind.F64, sorted(x.items(), key=_total_order_key))
    raise KindError(f"cannot sort {x.kind.name}")


def unique(x: KObj) -> KObj:
    """``?x``: distinct values in first-seen order.

    An atom gives a one-element vector. Floats are told apart by bit
    pattern.
    """
    if x.is_atom():
        return enlist(x)
    if x.kind is Kind.I64:
        key = int
    elif x.kind is Kind.F64:
        key = _f64_bits
    else:
        raise KindError(f"cannot take distinct values of {x.kind.name}")
    seen = set()
    out = []
    for v in x.items():
        k = key(v)
        if k not in seen:
            seen.add(k)
            out.append(v)
    return vector(x.kind, out)


def _sqrt(v: float) -> float:
    return math.nan if v < 0 else math.sqrt(v)


def sqrt(x: KObj) -> KObj:
    """``%x``: square root as F64; integers are promoted, negatives give NaN."""
    if x.kind not in (Kind.F64, Kind.I64):
        raise KindError(f"cannot take the square root of {x.kind.name}")
    if x.is_atom():
        return KObj(Kind.F64, _sqrt(float(x.value)), True)
    return vector(Kind.F64, (_sqrt(float(v)) for v in x.items()))


def reverse(x: KObj) -> KObj:
    """``|x``: the elements in reverse order. An atom is returned as it is."""
    if x.is_atom():
        return x
    if x.kind in _COMPOSITE:
        raise KindError(f"cannot reverse {x.kind.name}")
    return vector(x.kind, reversed(x.items()))


def where_indices(x: KObj) -> KObj:
    """``&x``: I64 indices of the non-zero entries of a Bool or I64 vector."""
    if x.is_atom():
        raise KindError("where needs a vector")
    if x.kind not in (Kind.Bool, Kind.I64):
        raise KindError(f"cannot apply where to {x.kind.name}")
    return vector(Kind.I64, (i for i, v in enumerate(x.items()) if v != 0))