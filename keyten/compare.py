"""Comparison kernels: ``=``, ``<``, ``>`` and ``~`` (match).

``=``, ``<`` and ``>`` compare element by element and produce booleans.
Atom-atom gives a Bool atom; anything involving a vector gives a Bool
vector. An operand of length one, atom or vector, is broadcast over the
other. ``~`` compares two whole values and always gives a Bool atom.
"""

from __future__ import annotations

import struct
from enum import Enum
from typing import Any, Callable, Tuple

from keyten.kind import Kind
from keyten.obj import KindError, KObj, ShapeError, atom, vector

__all__ = ["Cmp", "compare_i64", "compare_f64", "match_objs"]


class Cmp(Enum):
    """Pairwise comparison operator."""

    Eq = "="
    Lt = "<"
    Gt = ">"

    def apply(self, a: Any, b: Any) -> bool:
        """Compare two scalars; any comparison involving NaN is false except ``!=``."""
        if self is Cmp.Eq:
            return a == b
        if self is Cmp.Lt:
            return a < b
        return a > b


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


def _compare(cmp: Cmp, x: KObj, y: KObj, kind: Kind) -> KObj:
    _require(x, kind)
    _require(y, kind)
    if x.is_atom() and y.is_atom():
        return atom(Kind.Bool, cmp.apply(x.value, y.value))
    xs, ys = _broadcast(x.items(), y.items())
    return vector(Kind.Bool, (cmp.apply(a, b) for a, b in zip(xs, ys)))


def compare_i64(cmp: Cmp, x: KObj, y: KObj) -> KObj:
    """``x cmp y`` for I64 atoms or vectors."""
    return _compare(cmp, x, y, Kind.I64)


def compare_f64(cmp: Cmp, x: KObj, y: KObj) -> KObj:
    """``x cmp y`` for F64 atoms or vectors."""
    return _compare(cmp, x, y, Kind.F64)


_FLOAT_FORMATS = {Kind.F64: "<d", Kind.F32: "<f"}
_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table, Kind.Lambda})


def _element_key(kind: Kind) -> Callable[[Any], Any]:
    """Key under which two stored elements are identical."""
    fmt = _FLOAT_FORMATS.get(kind)
    if fmt is not None:
        return lambda v: struct.pack(fmt, v)
    if kind in _COMPOSITE:
        return id
    return lambda v: v


def match_objs(x: KObj, y: KObj) -> KObj:
    """``x ~ y``: 1b when both have the same kind, shape, length and stored content.

    Floats compare by bit pattern, so NaN matches NaN and ``0.0`` does not
    match ``-0.0``. Nested values match only when they are the same object.
    """
    if x.kind_raw() != y.kind_raw() or x.length() != y.length():
        return atom(Kind.Bool, False)
    key = _element_key(x.kind)
    same = all(key(a) == key(b) for a, b in zip(x.items(), y.items()))
    return atom(Kind.Bool, same)