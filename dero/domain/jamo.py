from __future__ import annotations

"""Hangul jamo symbol tables (domain layer).

This module holds the three phonemic slots of a syllable block:
  - Initial (choseong): 19 leading consonants
  - Vowel (jungseong): 21 vowel nuclei
  - Final (jongseong): 28 trailing values, index 0 meaning "no final"

Each member carries two numbers that must never be mixed up:
  - `offset`: its index in the Unicode syllable algebra (U+AC00 block)
  - `letter_offset`: its distance from U+3130 in the compatibility jamo
    block, used when a jamo is rendered on its own

The member *value* is the compatibility jamo glyph, so tables and tests can be
read without a Unicode chart.
"""

import typing
from enum import Enum
from types import MappingProxyType
from typing import Mapping


COMPAT_JAMO_BASE: typing.Final[int] = 0x3130
COMPAT_VOWEL_BASE: typing.Final[int] = 0x314F


# -----------------------------------------------------------------------------
# Initials
# -----------------------------------------------------------------------------

class Initial(Enum):
    G = "ㄱ"
    GG = "ㄲ"
    N = "ㄴ"
    D = "ㄷ"
    DD = "ㄸ"
    R = "ㄹ"
    M = "ㅁ"
    B = "ㅂ"
    BB = "ㅃ"
    S = "ㅅ"
    SS = "ㅆ"
    IEUNG = "ㅇ"
    J = "ㅈ"
    JJ = "ㅉ"
    CH = "ㅊ"
    K = "ㅋ"
    T = "ㅌ"
    P = "ㅍ"
    H = "ㅎ"

    @property
    def offset(self) -> int:
        return _INITIAL_OFFSETS[self]

    @property
    def letter_offset(self) -> int:
        return _INITIAL_LETTER_OFFSETS[self]

    def as_char(self) -> str:
        """Render as a standalone compatibility jamo (e.g. "ㅋ")."""
        return chr(COMPAT_JAMO_BASE + self.letter_offset)


_INITIAL_OFFSETS: typing.Final[Mapping[Initial, int]] = MappingProxyType(
    {initial: i for i, initial in enumerate(Initial)}
)

# Tense consonants and the compound finals interleave the compatibility block,
# so these do not follow the choseong order.
_INITIAL_LETTER_OFFSETS: typing.Final[Mapping[Initial, int]] = MappingProxyType({
    Initial.G: 1,
    Initial.GG: 2,
    Initial.N: 4,
    Initial.D: 7,
    Initial.DD: 8,
    Initial.R: 9,
    Initial.M: 17,
    Initial.B: 18,
    Initial.BB: 19,
    Initial.S: 21,
    Initial.SS: 22,
    Initial.IEUNG: 23,
    Initial.J: 24,
    Initial.JJ: 25,
    Initial.CH: 26,
    Initial.K: 27,
    Initial.T: 28,
    Initial.P: 29,
    Initial.H: 30,
})


# -----------------------------------------------------------------------------
# Vowels
# -----------------------------------------------------------------------------

class Vowel(Enum):
    A = "ㅏ"
    AE = "ㅐ"
    YA = "ㅑ"
    YAE = "ㅒ"
    EO = "ㅓ"
    E = "ㅔ"
    YEO = "ㅕ"
    YE = "ㅖ"
    O = "ㅗ"
    WA = "ㅘ"
    WAE = "ㅙ"
    OE = "ㅚ"
    YO = "ㅛ"
    U = "ㅜ"
    WO = "ㅝ"
    WE = "ㅞ"
    WI = "ㅟ"
    YU = "ㅠ"
    EU = "ㅡ"
    UI = "ㅢ"
    I = "ㅣ"

    @property
    def offset(self) -> int:
        return _VOWEL_OFFSETS[self]

    def as_char(self) -> str:
        # Vowels keep their syllable order in the compatibility block.
        return chr(COMPAT_VOWEL_BASE + self.offset)


_VOWEL_OFFSETS: typing.Final[Mapping[Vowel, int]] = MappingProxyType(
    {vowel: i for i, vowel in enumerate(Vowel)}
)


# -----------------------------------------------------------------------------
# Finals
# -----------------------------------------------------------------------------

class Final(Enum):
    EMPTY = ""
    G = "ㄱ"
    GG = "ㄲ"
    GS = "ㄳ"
    N = "ㄴ"
    NJ = "ㄵ"
    NH = "ㄶ"
    D = "ㄷ"
    L = "ㄹ"
    LG = "ㄺ"
    LM = "ㄻ"
    LB = "ㄼ"
    LS = "ㄽ"
    LT = "ㄾ"
    LP = "ㄿ"
    LH = "ㅀ"
    M = "ㅁ"
    B = "ㅂ"
    BS = "ㅄ"
    S = "ㅅ"
    SS = "ㅆ"
    IEUNG = "ㅇ"
    J = "ㅈ"
    CH = "ㅊ"
    K = "ㅋ"
    T = "ㅌ"
    P = "ㅍ"
    H = "ㅎ"

    @property
    def offset(self) -> int:
        return _FINAL_OFFSETS[self]

    @property
    def letter_offset(self) -> int:
        return _FINAL_LETTER_OFFSETS[self]

    @property
    def is_compound(self) -> bool:
        return self in FINAL_DECOMPOSITION

    def as_char(self) -> str:
        if self is Final.EMPTY:
            return ""
        return chr(COMPAT_JAMO_BASE + self.letter_offset)


_FINAL_OFFSETS: typing.Final[Mapping[Final, int]] = MappingProxyType(
    {final: i for i, final in enumerate(Final)}
)

_FINAL_LETTER_OFFSETS: typing.Final[Mapping[Final, int]] = MappingProxyType({
    Final.EMPTY: 0,
    Final.G: 1,
    Final.GG: 2,
    Final.GS: 3,
    Final.N: 4,
    Final.NJ: 5,
    Final.NH: 6,
    Final.D: 7,
    Final.L: 9,
    Final.LG: 10,
    Final.LM: 11,
    Final.LB: 12,
    Final.LS: 13,
    Final.LT: 14,
    Final.LP: 15,
    Final.LH: 16,
    Final.M: 17,
    Final.B: 18,
    Final.BS: 20,
    Final.S: 21,
    Final.SS: 22,
    Final.IEUNG: 23,
    Final.J: 24,
    Final.CH: 26,
    Final.K: 27,
    Final.T: 28,
    Final.P: 29,
    Final.H: 30,
})


# -----------------------------------------------------------------------------
# Consonant <-> final mapping
# -----------------------------------------------------------------------------

# ㄸ, ㅃ and ㅉ have no final form.
FINAL_FOR_INITIAL: typing.Final[Mapping[Initial, Final]] = MappingProxyType({
    Initial.G: Final.G,
    Initial.GG: Final.GG,
    Initial.N: Final.N,
    Initial.D: Final.D,
    Initial.R: Final.L,
    Initial.M: Final.M,
    Initial.B: Final.B,
    Initial.S: Final.S,
    Initial.SS: Final.SS,
    Initial.IEUNG: Final.IEUNG,
    Initial.J: Final.J,
    Initial.CH: Final.CH,
    Initial.K: Final.K,
    Initial.T: Final.T,
    Initial.P: Final.P,
    Initial.H: Final.H,
})

INITIAL_FOR_FINAL: typing.Final[Mapping[Final, Initial]] = MappingProxyType(
    {final: initial for initial, final in FINAL_FOR_INITIAL.items()}
)


# -----------------------------------------------------------------------------
# Compound finals
# -----------------------------------------------------------------------------
#
# Both tables are keyed by the mapped Final member (never by an Initial
# offset), so FINAL_DECOMPOSITION[FINAL_COMBINATION[(f, i)]] == (f, i).

FINAL_COMBINATION: typing.Final[Mapping[tuple[Final, Initial], Final]] = MappingProxyType({
    (Final.G, Initial.S): Final.GS,
    (Final.N, Initial.J): Final.NJ,
    (Final.N, Initial.H): Final.NH,
    (Final.L, Initial.G): Final.LG,
    (Final.L, Initial.M): Final.LM,
    (Final.L, Initial.B): Final.LB,
    (Final.L, Initial.S): Final.LS,
    (Final.L, Initial.T): Final.LT,
    (Final.L, Initial.P): Final.LP,
    (Final.L, Initial.H): Final.LH,
    (Final.B, Initial.S): Final.BS,
})

FINAL_DECOMPOSITION: typing.Final[Mapping[Final, tuple[Final, Initial]]] = MappingProxyType(
    {compound: pair for pair, compound in FINAL_COMBINATION.items()}
)


def split_final(final: Final) -> tuple[Final, Initial]:
    """Split a final for resyllabification.

    Returns (residual final kept by the current block, consonant promoted to
    the next block's initial). A simple final leaves nothing behind.
    """
    pair = FINAL_DECOMPOSITION.get(final)
    if pair is not None:
        return pair
    initial = INITIAL_FOR_FINAL.get(final)
    if initial is None:
        raise ValueError("Final %r has no initial form" % (final,))
    return Final.EMPTY, initial
