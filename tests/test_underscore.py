import math

import pytest

from keyten.kind import Kind
from keyten.obj import KindError, atom, vector
from keyten.underscore import drop, floor


def test_floor_atom():
    r = floor(atom(Kind.F64, 3.7))
    assert r.kind is Kind.I64
    assert r.is_atom()
    assert r.value == 3


def test_floor_vec():
    r = floor(vector(Kind.F64, [1.5, -1.5, 3.0, -0.1]))
    assert r.kind is Kind.I64
    assert r.items() == (1, -2, 3, -1)


def test_floor_i64_passes_through():
    v = vector(Kind.I64, [4, 5])
    assert floor(v) is v


def test_floor_nan_is_zero():
    assert floor(atom(Kind.F64, math.nan)).value == 0


def test_floor_rejects_other_kinds():
    with pytest.raises(KindError):
        floor(vector(Kind.Bool, [1, 0]))


def test_drop_first_n():
    r = drop(2, vector(Kind.I64, [1, 2, 3, 4, 5]))
    assert r.items() == (3, 4, 5)


def test_drop_negative_drops_from_end():
    r = drop(-2, vector(Kind.I64, [1, 2, 3, 4, 5]))
    assert r.items() == (1, 2, 3)


def test_drop_more_than_len_is_empty():
    r = drop(10, vector(Kind.I64, [1, 2, 3]))
    assert r.length() == 0
    assert r.kind is Kind.I64


def test_drop_zero_from_atom_gives_unit_vector():
    r = drop(0, atom(Kind.I64, 7))
    assert r.is_vec()
    assert r.items() == (7,)


def test_drop_rejects_composite():
    with pytest.raises(KindError):
        drop(1, vector(Kind.List, [vector(Kind.I64, [1])]))