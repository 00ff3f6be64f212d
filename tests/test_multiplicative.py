import math

import pytest

from keyten.additive import plus_f64, plus_i64
from keyten.kind import Kind
from keyten.multiplicative import divide_f64, times_f64, times_i64
from keyten.obj import NULL_I64, KindError, ShapeError, atom, vector


def i64v(values, has_nulls=False):
    return vector(Kind.I64, values, has_nulls=has_nulls)


def f64v(values, has_nulls=False):
    return vector(Kind.F64, values, has_nulls=has_nulls)


def test_times_i64_doubling_matches_self_addition():
    x = i64v([1, -7, 30, 0, 12345])
    doubled = times_i64(x, atom(Kind.I64, 2))
    assert doubled.items() == plus_i64(x, x).items()


def test_times_i64_atom_atom_is_atom():
    r = times_i64(atom(Kind.I64, 6), atom(Kind.I64, 7))
    assert r.is_atom()
    assert r.kind is Kind.I64
    assert r.value == 6 * 7


def test_times_i64_is_commutative_with_broadcast():
    x = i64v([3, 4, 5])
    s = atom(Kind.I64, 9)
    assert times_i64(x, s).items() == times_i64(s, x).items()


def test_times_i64_vec_vec_elementwise():
    x = i64v([2, 3, 4])
    y = i64v([5, 6, 7])
    r = times_i64(x, y)
    assert r.items() == (10, 18, 28)


def test_times_i64_wraps_on_overflow():
    r = times_i64(atom(Kind.I64, 1 << 62), atom(Kind.I64, 4))
    assert r.value == 0


def test_times_i64_preserves_nulls_with_scalar():
    x = i64v([NULL_I64, 2, NULL_I64], has_nulls=True)
    r = times_i64(x, atom(Kind.I64, 3))
    assert r.has_nulls
    assert r.items()[0] == NULL_I64
    assert r.items()[2] == NULL_I64
    assert r.items()[1] == 2 * 3


def test_times_i64_preserves_nulls_vec_vec():
    x = i64v([NULL_I64, 2, 5], has_nulls=True)
    y = i64v([4, NULL_I64, 1])
    r = times_i64(x, y)
    assert r.has_nulls
    assert r.items()[:2] == (NULL_I64, NULL_I64)
    assert r.items()[2] == 5


def test_times_i64_length_mismatch():
    with pytest.raises(ShapeError):
        times_i64(i64v([1, 2]), i64v([1, 2, 3]))


def test_times_i64_rejects_float_operand():
    with pytest.raises(KindError):
        times_i64(atom(Kind.F64, 1.0), atom(Kind.I64, 1))


def test_times_f64_doubling_matches_self_addition():
    x = f64v([1.5, -2.25, 0.0, 8.0])
    assert times_f64(x, atom(Kind.F64, 2.0)).items() == plus_f64(x, x).items()


def test_times_f64_nan_scalar_flags_nulls():
    r = times_f64(atom(Kind.F64, math.nan), f64v([1.0, 2.0]))
    assert r.has_nulls
    assert all(math.isnan(v) for v in r.items())


def test_times_f64_plain_vectors_not_flagged():
    r = times_f64(f64v([1.0, 2.0]), f64v([3.0, 4.0]))
    assert not r.has_nulls
    assert r.length() == 2


def test_divide_then_multiply_round_trips():
    x = f64v([1.0, 2.5, -8.0, 100.0])
    d = atom(Kind.F64, 4.0)
    back = times_f64(divide_f64(x, d), d)
    assert back.items() == x.items()


def test_divide_atom_by_zero_gives_infinity():
    r = divide_f64(atom(Kind.F64, 1.0), atom(Kind.F64, 0.0))
    assert r.value == math.inf
    neg = divide_f64(atom(Kind.F64, -1.0), atom(Kind.F64, 0.0))
    assert neg.value == -math.inf


def test_divide_zero_by_zero_is_nan():
    r = divide_f64(atom(Kind.F64, 0.0), atom(Kind.F64, 0.0))
    assert r.is_atom()
    assert r.kind is Kind.F64
    assert math.isnan(r.value) is True


def test_divide_vec_by_zero_scalar_flags_nulls():
    r = divide_f64(f64v([1.0, 0.0]), atom(Kind.F64, 0.0))
    assert r.has_nulls
    assert math.isinf(r.items()[0])
    assert math.isnan(r.items()[1])


def test_divide_vec_by_nonzero_scalar_not_flagged():
    r = divide_f64(f64v([1.0, 2.0]), atom(Kind.F64, 2.0))
    assert not r.has_nulls


def test_divide_scalar_by_vec_flag_follows_operand():
    r = divide_f64(atom(Kind.F64, 1.0), f64v([1.0, 0.0]))
    assert not r.has_nulls
    assert math.isinf(r.items()[1])


def test_divide_vec_vec_always_flagged():
    x = f64v([6.0, 9.0])
    r = divide_f64(x, x)
    assert r.has_nulls
    assert r.items() == (1.0, 1.0)


def test_divide_length_mismatch():
    with pytest.raises(ShapeError):
        divide_f64(f64v([1.0]), f64v([1.0, 2.0]))


def test_divide_rejects_integer_operands():
    with pytest.raises(KindError):
        divide_f64(atom(Kind.I64, 1), atom(Kind.I64, 2))