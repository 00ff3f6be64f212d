import math

import pytest

from keyten.compare import Cmp, compare_f64, compare_i64, match_objs
from keyten.kind import Kind
from keyten.obj import KindError, ShapeError, atom, vector


def i64v(*values):
    return vector(Kind.I64, values)


def f64v(*values):
    return vector(Kind.F64, values)


def test_eq_atoms():
    r = compare_i64(Cmp.Eq, atom(Kind.I64, 5), atom(Kind.I64, 5))
    assert r.kind is Kind.Bool
    assert r.is_atom()
    assert r.value == 1


def test_lt_vec_vec():
    r = compare_i64(Cmp.Lt, i64v(1, 5, 3), i64v(2, 5, 1))
    assert r.kind is Kind.Bool
    assert r.length() == 3
    assert r.items() == (1, 0, 0)


def test_gt_vec_atom_broadcast():
    r = compare_i64(Cmp.Gt, i64v(1, 5, 3, 10), atom(Kind.I64, 3))
    assert r.items() == (0, 1, 0, 1)


def test_atom_vec_broadcast_on_left():
    r = compare_i64(Cmp.Lt, atom(Kind.I64, 3), i64v(1, 5, 3, 10))
    assert r.items() == (0, 1, 0, 1)


def test_one_element_vector_broadcasts():
    r = compare_i64(Cmp.Eq, i64v(2), i64v(1, 2, 3))
    assert r.is_vec()
    assert r.items() == (0, 1, 0)


def test_length_mismatch_raises_shape_error():
    with pytest.raises(ShapeError):
        compare_i64(Cmp.Eq, i64v(1, 2), i64v(1, 2, 3))


def test_wrong_kind_raises():
    with pytest.raises(KindError):
        compare_i64(Cmp.Eq, atom(Kind.F64, 1.0), atom(Kind.I64, 1))


def test_f64_compare_vectors():
    r = compare_f64(Cmp.Lt, f64v(1.0, 2.5, -1.0), f64v(1.5, 2.5, -2.0))
    assert r.items() == (1, 0, 0)


def test_f64_nan_compares_false():
    nan = atom(Kind.F64, math.nan)
    assert compare_f64(Cmp.Eq, nan, nan).value == 0
    assert compare_f64(Cmp.Lt, nan, atom(Kind.F64, 1.0)).value == 0
    assert compare_f64(Cmp.Gt, nan, atom(Kind.F64, 1.0)).value == 0


def test_match_objs_equal_atoms():
    r = match_objs(atom(Kind.I64, 42), atom(Kind.I64, 42))
    assert r.kind is Kind.Bool
    assert r.value == 1


def test_match_objs_different_kind_is_zero():
    r = match_objs(atom(Kind.I64, 1), atom(Kind.F64, 1.0))
    assert r.value == 0


def test_match_objs_vectors():
    assert match_objs(i64v(1, 2, 3), i64v(1, 2, 3)).value == 1


def test_match_objs_different_length():
    assert match_objs(i64v(1, 2, 3), i64v(1, 2)).value == 0


def test_match_objs_atom_against_vector_is_zero():
    assert match_objs(atom(Kind.I64, 1), i64v(1)).value == 0


def test_match_objs_different_content():
    assert match_objs(i64v(1, 2, 3), i64v(1, 2, 4)).value == 0


def test_match_objs_nan_matches_nan_bitwise():
    assert match_objs(f64v(math.nan, 1.0), f64v(math.nan, 1.0)).value == 1


def test_match_objs_signed_zero_differs():
    assert match_objs(atom(Kind.F64, 0.0), atom(Kind.F64, -0.0)).value == 0