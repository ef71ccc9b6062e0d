from __future__ import annotations

"""Hangul composition helpers (domain layer).

It centralises:
- The Unicode Hangul Syllables algebra (SBase + (L * VCount + V) * TCount + T)
- `Block`, the transient (initial, vowel, final) aggregate
- The inverse mapping from a precomposed syllable back to its jamo

Primary API:
- combine(initial, vowel, final)
- decompose(syllable)
"""

from dataclasses import dataclass
from typing import Final as Const

from dero.domain.errors import InternalInvariantError
from dero.domain.jamo import Final, Initial, Vowel


S_BASE: Const[int] = 0xAC00
L_COUNT: Const[int] = 19
V_COUNT: Const[int] = 21
T_COUNT: Const[int] = 28
N_COUNT: Const[int] = V_COUNT * T_COUNT  # 588 syllables per initial
S_LAST: Const[int] = S_BASE + L_COUNT * N_COUNT - 1  # U+D7A3

_INITIALS: Const[tuple[Initial, ...]] = tuple(Initial)
_VOWELS: Const[tuple[Vowel, ...]] = tuple(Vowel)
_FINALS: Const[tuple[Final, ...]] = tuple(Final)


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def syllable_from_offsets(li: int, vi: int, ti: int) -> str:
    """Compose a syllable from raw slot offsets.

    Offsets outside 0..18 / 0..20 / 0..27 can only come from a broken table,
    so they raise InternalInvariantError rather than a user-facing error.
    """
    if not (0 <= li < L_COUNT and 0 <= vi < V_COUNT and 0 <= ti < T_COUNT):
        raise InternalInvariantError(
            "Hangul offsets out of range: initial=%d vowel=%d final=%d" % (li, vi, ti)
        )
    return chr(S_BASE + li * N_COUNT + vi * T_COUNT + ti)


def combine(initial: Initial, vowel: Vowel, final: Final = Final.EMPTY) -> str:
    return syllable_from_offsets(initial.offset, vowel.offset, final.offset)


@dataclass(frozen=True)
class Block:
    initial: Initial
    vowel: Vowel
    final: Final = Final.EMPTY

    def combine(self) -> str:
        return combine(self.initial, self.vowel, self.final)


def is_hangul_syllable(ch: str) -> bool:
    return len(ch) == 1 and S_BASE <= ord(ch) <= S_LAST


def decompose(syllable: str) -> Block:
    """Split a precomposed Hangul syllable into its Block.

    Raises:
        ValueError: if `syllable` is not a single character in U+AC00..U+D7A3.
    """
    if not is_hangul_syllable(syllable):
        raise ValueError("Not a precomposed Hangul syllable: %r" % (syllable,))
    idx = ord(syllable) - S_BASE
    return Block(
        initial=_INITIALS[idx // N_COUNT],
        vowel=_VOWELS[(idx % N_COUNT) // T_COUNT],
        final=_FINALS[idx % T_COUNT],
    )
