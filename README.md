# keyten

Typed values and verb kernels for a K9-style array language.

A value is a `KObj`. It is either an **atom**, which holds one element, or a
**vector**, which holds a run of elements of one `Kind`. `KObj.kind_raw()`
gives the negative kind code for an atom and the positive one for a vector.
The kinds are:

- booleans;
- bytes;
- 16-, 32- and 64-bit integers;
- 32- and 64-bit floats;
- characters;
- symbols of up to 8 ASCII characters;
- dates, times of day and datetimes;
- mixed lists, dicts, tables and lambdas.

Build values with `atom(kind, value)` and `vector(kind, values, has_nulls)`
from `keyten.obj`. Each element is normalised to its kind. Integers wrap to
the kind's width, and booleans become `0` or `1`. `KObj.items()` returns the
elements as a tuple, and an atom gives a one-element tuple. `KObj.value` is
the value of an atom.

The kernels take `KObj` values and return new ones. When an operand has a kind
the kernel does not accept, they raise `KindError`. When lengths do not fit
together, they raise `ShapeError`. Both are subclasses of `KernelError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from keyten.kind import Kind
from keyten.obj import atom, vector
from keyten.additive import plus_i64
from keyten.compare import Cmp, compare_i64
from keyten.dyad import take
from keyten.setops import sort_asc, unique
from keyten.til import til
from keyten.dicts import make_dict, dict_lookup

x = vector(Kind.I64, [1, 5, 3, 10])
plus_i64(x, atom(Kind.I64, 1)).items()             # (2, 6, 4, 11)
compare_i64(Cmp.Gt, x, atom(Kind.I64, 3)).items()  # (0, 1, 0, 1)

take(7, vector(Kind.I64, [1, 2, 3])).items()       # (1, 2, 3, 1, 2, 3, 1)
sort_asc(vector(Kind.I64, [5, 2, 8])).items()      # (2, 5, 8)
unique(vector(Kind.I64, [3, 1, 3, 2])).items()     # (3, 1, 2)
til(atom(Kind.I64, 4)).items()                     # (0, 1, 2, 3)

d = make_dict(vector(Kind.I64, [1, 2, 3]), vector(Kind.I64, [10, 20, 30]))
dict_lookup(d, atom(Kind.I64, 2)).value            # 20
```

## Modules

| Module | Contents |
|---|---|
| `keyten.kind` | `Kind`: codes, type letters, element sizes, null support; `is_atom_code`, `is_vec_code` |
| `keyten.obj` | `KObj`, `atom`, `vector`, `wrap_i64`, `KernelError`, `ShapeError`, `KindError` |
| `keyten.additive` | `plus_i64`, `plus_f64`, `minus_i64`, `minus_f64` |
| `keyten.multiplicative` | `times_i64`, `times_f64`, `divide_f64` |
| `keyten.compare` | `Cmp` (`Eq`, `Lt`, `Gt`), `compare_i64`, `compare_f64`, `match_objs` |
| `keyten.minmax` | `MinMax` (`Min`, `Max`), `minmax_i64`, `minmax_f64` |
| `keyten.monad` | `type_of`, `count`, `enlist`, `logical_not`, `string_of` |
| `keyten.setops` | `sort_asc`, `unique`, `sqrt`, `reverse`, `where_indices` |
| `keyten.dyad` | `concat`, `take` |
| `keyten.underscore` | `floor`, `drop` |
| `keyten.til` | `til` |
| `keyten.dicts` | `make_dict`, `dict_keys`, `dict_values`, `vec_index`, `dict_lookup`, `flip_dict_to_table` |

## Behaviour worth knowing

- **Broadcasting.** In the arithmetic kernels, an atom operand is applied
  against every element of a vector operand, and two vectors must have equal
  length. `compare_*` and `minmax_*` also broadcast a one-element vector over
  the other operand.
- **Integer arithmetic.** Results wrap around at 64 bits. When an I64 vector
  is flagged with `has_nulls`, positions that hold the null sentinel stay null
  in the result.
- **Float arithmetic.** Division by zero follows IEEE 754 and gives an
  infinity or NaN rather than an error. `divide_f64` flags a vector result as
  possibly holding nulls in these cases:
  - a zero or NaN scalar divisor;
  - a flagged operand;
  - any vector-by-vector division.
- **Min and max of floats.** If one operand is NaN, the result is the other
  operand.
- **Match.** `match_objs` compares kind, shape, length and stored content.
  Floats are compared by bit pattern.
- **Sorting and distinct values.** `sort_asc` orders floats by IEEE total
  order, so NaN comes last. `unique` keeps the order in which values are first
  seen.
- **Dictionaries.**
  - A lookup that finds no key returns the null of the values' kind.
  - `vec_index` out of range returns the kind's null, for kinds that have one.
  - `flip_dict_to_table` keeps the same keys and values under the table kind.
- **Limits.**
  - `take` rejects a negative count.
  - `string_of` accepts atoms only: Bool, I64, F64, Sym and Char.

## What this package does not do

This package is a library of kernels only. It has no parser for K source text
and no evaluator that picks a kernel for an expression. It has no command-line
program or interactive prompt. It does not apply lambdas. Each kernel takes
operands of the kinds it names, and the caller chooses the kernel.