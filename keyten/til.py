"""``!n`` (til): the I64 vector ``0 1 ... n-1``."""

from __future__ import annotations

from keyten.kind import Kind
from keyten.obj import KindError, KObj, ShapeError, vector

__all__ = ["til"]


def til(n: KObj) -> KObj:
    """``!n`` for a non-negative I64 atom ``n``."""
    if not n.is_atom() or n.kind is not Kind.I64:
        raise KindError("til needs an I64 atom")
    count = n.value
    if count < 0:
        raise ShapeError("til needs a non-negative count")
    return vector(Kind.I64, range(count))