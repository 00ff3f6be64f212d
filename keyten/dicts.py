"""Dictionaries and element access.

A dictionary holds two vectors of equal length, its keys and its values.
A table currently has the same layout, tagged with the table kind.
"""

from __future__ import annotations

import struct

from keyten.kind import Kind
from keyten.obj import (
    NULL_F64,
    NULL_I64,
    NULL_SYM,
    KindError,
    KObj,
    ShapeError,
    atom,
    vector,
)

__all__ = [
    "make_dict",
    "dict_keys",
    "dict_values",
    "vec_index",
    "dict_lookup",
    "flip_dict_to_table",
]

_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table})
_NULLS = {Kind.I64: NULL_I64, Kind.F64: NULL_F64, Kind.Sym: NULL_SYM}


def _null_of(kind: Kind) -> KObj:
    try:
        return atom(kind, _NULLS[kind])
    except KeyError:
        raise ShapeError(f"{kind.name} has no null value") from None


def make_dict(keys: KObj, values: KObj) -> KObj:
    """``keys ! values``: build a dictionary from two vectors of equal length."""
    if keys.is_atom() or values.is_atom():
        raise ShapeError("dictionary keys and values must be vectors")
    if keys.length() != values.length():
        raise ShapeError(
            f"length mismatch: {keys.length()} keys vs {values.length()} values"
        )
    return vector(Kind.Dict, (keys, values))


def _parts(d: KObj) -> tuple:
    if d.kind is not Kind.Dict:
        raise KindError(f"expected a dictionary, got {d.kind.name}")
    return d.items()


def dict_keys(d: KObj) -> KObj:
    """The keys vector of a dictionary."""
    return _parts(d)[0]


def dict_values(d: KObj) -> KObj:
    """The values vector of a dictionary."""
    return _parts(d)[1]


def vec_index(v: KObj, idx: int) -> KObj:
    """``v @ idx``: the element at ``idx`` as an atom.

    An out-of-range index gives the kind's null, or raises
    :class:`ShapeError` for kinds without one.
    """
    if not v.is_vec():
        raise KindError("indexing needs a vector")
    if not 0 <= idx < v.length():
        return _null_of(v.kind)
    if v.kind in _COMPOSITE:
        raise KindError(f"cannot index {v.kind.name} into an atom")
    return atom(v.kind, v.items()[idx])


def _f64_bits(value: float) -> bytes:
    return struct.pack("<d", value)


def dict_lookup(d: KObj, key: KObj) -> KObj:
    """``d @ key``: the value stored under ``key``, or the values' null."""
    keys = dict_keys(d)
    values = dict_values(d)
    if not key.is_atom():
        raise KindError("lookup key must be an atom")
    if key.kind is not keys.kind:
        raise KindError(
            f"key kind {key.kind.name} does not match dictionary keys {keys.kind.name}"
        )
    if key.kind in (Kind.I64, Kind.Sym):
        wanted = key.value
        matches = (i for i, k in enumerate(keys.items()) if k == wanted)
    elif key.kind is Kind.F64:
        # Bit-pattern comparison keeps NaN keys findable.
        wanted_bits = _f64_bits(key.value)
        matches = (
            i for i, k in enumerate(keys.items()) if _f64_bits(k) == wanted_bits
        )
    else:
        raise KindError(f"cannot look up keys of kind {key.kind.name}")

    index = next(matches, None)
    if index is None:
        return _null_of(values.kind)
    return vec_index(values, index)


def flip_dict_to_table(d: KObj) -> KObj:
    """``+d``: turn a dictionary into a table with the same keys and values."""
    keys, values = _parts(d)
    return vector(Kind.Table, (keys, values))