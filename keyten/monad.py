"""Monadic verbs that read an object's shape or make a small result.

``@x`` type, ``#x`` count, ``,x`` enlist, ``~x`` not and ``$x`` string.
"""

from __future__ import annotations

import math
from decimal import Decimal

from keyten.dicts import dict_values
from keyten.kind import Kind
from keyten.obj import NULL_I64, KindError, KObj, atom, vector

__all__ = ["type_of", "count", "enlist", "logical_not", "string_of"]


def type_of(x: KObj) -> KObj:
    """``@x``: the kind of ``x`` as a one-letter symbol atom.

    Atoms get their atom letter and vectors their vector letter.
    """
    raw = x.kind_raw()
    kind = Kind.from_raw(raw)
    letter = kind.letter_atom() if raw < 0 else kind.letter_vec()
    return atom(Kind.Sym, letter)


def count(x: KObj) -> KObj:
    """``#x``: the number of elements of ``x``.

    An atom counts as one; a dictionary counts its entries.
    """
    if x.is_atom():
        n = 1
    elif x.kind is Kind.Dict:
        n = dict_values(x).length()
    else:
        n = x.length()
    return atom(Kind.I64, n)


def enlist(x: KObj) -> KObj:
    """``,x``: a one-element list holding ``x``.

    An atom becomes a one-element vector of its own kind; a vector becomes
    a mixed list whose single entry is that vector.
    """
    if not x.is_atom():
        return vector(Kind.List, (x,))
    return vector(x.kind, (x.value,))


def _is_zero(value) -> bool:
    return value == 0


def logical_not(x: KObj) -> KObj:
    """``~x``: 1b where ``x`` is zero, 0b elsewhere, for Bool, I64 or F64."""
    if x.kind not in (Kind.Bool, Kind.I64, Kind.F64):
        raise KindError(f"cannot negate {x.kind.name}")
    if x.is_atom():
        return atom(Kind.Bool, _is_zero(x.value))
    return vector(Kind.Bool, (_is_zero(v) for v in x.items()))


def _format_float(v: float) -> str:
    """Shortest round-trip decimal, written without an exponent."""
    text = format(Decimal(repr(v)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def string_of(x: KObj) -> KObj:
    """``$x``: the text of an atom as a Char vector.

    Supports Bool, I64, F64, Sym and Char atoms.
    """
    if not x.is_atom():
        raise KindError("string of a vector is not supported")
    kind = x.kind
    v = x.value
    if kind is Kind.Bool:
        text = "1b" if v else "0b"
    elif kind is Kind.I64:
        text = "0N" if v == NULL_I64 else str(v)
    elif kind is Kind.F64:
        if math.isnan(v):
            text = "0n"
        elif math.isinf(v):
            text = "0w" if v > 0 else "-0w"
        else:
            text = _format_float(v)
    elif kind in (Kind.Sym, Kind.Char):
        text = v
    else:
        raise KindError(f"cannot format {kind.name}")
    return vector(Kind.Char, text)