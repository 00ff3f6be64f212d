"""Dyadic copying verbs: ``,`` (concatenate) and ``#`` (take).

Both build a fresh vector from the elements of their operands. An atom
operand counts as a one-element vector of its kind.
"""

from __future__ import annotations

from itertools import cycle, islice

from keyten.kind import Kind
from keyten.obj import KindError, KObj, ShapeError, vector

__all__ = ["concat", "take"]

_COMPOSITE = frozenset({Kind.List, Kind.Dict, Kind.Table, Kind.Lambda})


def _require_simple(obj: KObj) -> None:
    if obj.kind in _COMPOSITE:
        raise KindError(f"cannot copy elements of {obj.kind.name}")


def concat(x: KObj, y: KObj) -> KObj:
    """``x , y``: the elements of ``x`` followed by those of ``y``.

    Both operands must have the same, non-composite kind.
    """
    _require_simple(x)
    _require_simple(y)
    if x.kind is not y.kind:
        raise KindError(
            f"cannot join {x.kind.name} with {y.kind.name}"
        )
    return vector(x.kind, x.items() + y.items(), has_nulls=x.has_nulls or y.has_nulls)


def take(n: int, y: KObj) -> KObj:
    """``n # y``: the first ``n`` elements of ``y``, cycling when ``n`` is longer.

    ``n`` must not be negative. Taking a positive count from an empty
    vector is a shape error.
    """
    if n < 0:
        raise KindError("take from the end is not supported")
    _require_simple(y)
    if n == 0:
        return vector(y.kind, ())
    src = y.items()
    if not src:
        raise ShapeError("cannot take from an empty vector")
    return vector(y.kind, islice(cycle(src), n), has_nulls=y.has_nulls)