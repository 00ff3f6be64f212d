"""Element kind taxonomy.

A :class:`Kind` is the positive base code of an element type. An object's
raw kind code carries the shape in its sign: vectors use ``+code`` and atoms
use ``-code``, with the same modulus.

Temporal kinds count from the epoch 2001-01-01T00:00:00Z (dates and
datetimes) or from midnight (time-of-day kinds).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

K9_EPOCH_YEAR = 2001
K9_EPOCH_MONTH = 1
K9_EPOCH_DAY = 1


class Kind(IntEnum):
    """Base code of an element type."""

    List = 0
    Bool = 1
    U8 = 4
    I16 = 5
    I32 = 6
    I64 = 7
    F32 = 8
    F64 = 9
    Char = 10
    Sym = 11
    Date = 14
    TimeS = 19
    TimeMs = 20
    TimeUs = 21
    TimeNs = 22
    DtS = 23
    DtMs = 24
    DtUs = 25
    DtNs = 26
    Lambda = 30
    Table = 98
    Dict = 99

    def atom_code(self) -> int:
        """Raw code of this kind in atom form: ``-code``."""
        return -int(self)

    def vec_code(self) -> int:
        """Raw code of this kind in vector form: ``+code``."""
        return int(self)

    @staticmethod
    def from_raw(raw: int) -> "Kind":
        """Recover the kind from an atom or vector raw code."""
        return Kind(abs(raw))

    def elem_size(self) -> int:
        """Element size in bytes; composite kinds report a reference size."""
        return _ELEM_SIZES[self]

    def has_null(self) -> bool:
        """Whether this kind has a designated null sentinel."""
        return self not in _NO_NULL

    def letter_atom(self) -> str:
        """Type letter for the atom form of this kind."""
        return _ATOM_LETTERS[self]

    def letter_vec(self) -> str:
        """Type letter for the vector form of this kind.

        Time-of-day kinds keep their lowercase letter, since the uppercase
        letters belong to the datetime kinds.
        """
        return _VEC_LETTERS[self]

    @staticmethod
    def from_letter_atom(c: str) -> Optional["Kind"]:
        """Kind for an atom letter, or ``None`` if the letter maps to none."""
        return _FROM_ATOM_LETTER.get(c)


_ELEM_SIZES = {
    Kind.Bool: 1,
    Kind.U8: 1,
    Kind.Char: 1,
    Kind.I16: 2,
    Kind.I32: 4,
    Kind.F32: 4,
    Kind.Date: 4,
    Kind.TimeS: 4,
    Kind.TimeMs: 4,
    Kind.I64: 8,
    Kind.F64: 8,
    Kind.Sym: 8,
    Kind.TimeUs: 8,
    Kind.TimeNs: 8,
    Kind.DtS: 8,
    Kind.DtMs: 8,
    Kind.DtUs: 8,
    Kind.DtNs: 8,
    Kind.List: 8,
    Kind.Dict: 8,
    Kind.Table: 8,
    Kind.Lambda: 8,
}

_NO_NULL = frozenset(
    {Kind.Bool, Kind.U8, Kind.Char, Kind.List, Kind.Dict, Kind.Table, Kind.Lambda}
)

_ATOM_LETTERS = {
    Kind.Bool: "b",
    Kind.Char: "c",
    Kind.U8: "g",
    Kind.I16: "h",
    Kind.I32: "i",
    Kind.I64: "j",
    Kind.F32: "e",
    Kind.F64: "f",
    Kind.Sym: "n",
    Kind.Date: "d",
    Kind.TimeS: "s",
    Kind.TimeMs: "t",
    Kind.TimeUs: "u",
    Kind.TimeNs: "v",
    Kind.DtS: "S",
    Kind.DtMs: "T",
    Kind.DtUs: "U",
    Kind.DtNs: "V",
    Kind.List: "L",
    Kind.Dict: "!",
    Kind.Table: "+",
    Kind.Lambda: "F",
}

_VEC_LETTERS = {
    Kind.Bool: "B",
    Kind.Char: "C",
    Kind.U8: "G",
    Kind.I16: "H",
    Kind.I32: "I",
    Kind.I64: "J",
    Kind.F32: "E",
    Kind.F64: "F",
    Kind.Sym: "N",
    Kind.Date: "D",
    Kind.TimeS: "s",
    Kind.TimeMs: "t",
    Kind.TimeUs: "u",
    Kind.TimeNs: "v",
    Kind.DtS: "S",
    Kind.DtMs: "T",
    Kind.DtUs: "U",
    Kind.DtNs: "V",
    Kind.List: "L",
    Kind.Dict: "!",
    Kind.Table: "+",
    Kind.Lambda: "F",
}

_FROM_ATOM_LETTER = {
    "b": Kind.Bool,
    "c": Kind.Char,
    "g": Kind.U8,
    "h": Kind.I16,
    "i": Kind.I32,
    "j": Kind.I64,
    "e": Kind.F32,
    "f": Kind.F64,
    "n": Kind.Sym,
    "d": Kind.Date,
    "s": Kind.TimeS,
    "t": Kind.TimeMs,
    "u": Kind.TimeUs,
    "v": Kind.TimeNs,
    "S": Kind.DtS,
    "T": Kind.DtMs,
    "U": Kind.DtUs,
    "V": Kind.DtNs,
    "L": Kind.List,
}


def is_atom_code(raw: int) -> bool:
    """Whether a raw kind code denotes an atom."""
    return -90 < raw < 0


def is_vec_code(raw: int) -> bool:
    """Whether a raw kind code denotes a uniform vector."""
    return 0 < raw < 90