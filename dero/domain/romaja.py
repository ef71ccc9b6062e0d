from __future__ import annotations

"""Romaja lexical scanners (domain layer).

Each scanner looks at `text` from `start` and either returns
`(symbol, consumed)` for the longest token found there, or None. Scanners never
move a cursor themselves; the caller commits `consumed` characters on success.

Alphabet notes:
- Consonants are a single ASCII letter, except "ch" (ㅊ).
- Case separates plain from tense: g/G, d/D, b/B, s/S, j/J.
- "r" and "l" are the same liquid (ㄹ); "x" is ㅇ.
- Vowels are one to three letters and the longest token always wins.
"""

import typing
from types import MappingProxyType
from typing import Mapping, Optional

from dero.domain.jamo import FINAL_COMBINATION, FINAL_FOR_INITIAL, Final, Initial, Vowel


# -----------------------------------------------------------------------------
# Alphabet tables
# -----------------------------------------------------------------------------

CONSONANT_LETTERS: typing.Final[Mapping[str, Initial]] = MappingProxyType({
    "g": Initial.G,
    "G": Initial.GG,
    "n": Initial.N,
    "d": Initial.D,
    "D": Initial.DD,
    "r": Initial.R,
    "l": Initial.R,
    "m": Initial.M,
    "b": Initial.B,
    "B": Initial.BB,
    "s": Initial.S,
    "S": Initial.SS,
    "x": Initial.IEUNG,
    "j": Initial.J,
    "J": Initial.JJ,
    "k": Initial.K,
    "t": Initial.T,
    "p": Initial.P,
    "h": Initial.H,
})

# "c" only exists as the first half of "ch".
_ASPIRATE: typing.Final[str] = "ch"

VOWEL_TOKENS: typing.Final[Mapping[str, Vowel]] = MappingProxyType({
    "a": Vowel.A,
    "ae": Vowel.AE,
    "ya": Vowel.YA,
    "yae": Vowel.YAE,
    "eo": Vowel.EO,
    "e": Vowel.E,
    "yeo": Vowel.YEO,
    "ye": Vowel.YE,
    "o": Vowel.O,
    "wa": Vowel.WA,
    "wae": Vowel.WAE,
    "oe": Vowel.OE,
    "yo": Vowel.YO,
    "u": Vowel.U,
    "wo": Vowel.WO,
    "weo": Vowel.WO,
    "we": Vowel.WE,
    "wi": Vowel.WI,
    "yu": Vowel.YU,
    "eu": Vowel.EU,
    "ui": Vowel.UI,
    "i": Vowel.I,
})


def _build_vowel_transitions(tokens: Mapping[str, Vowel]) -> Mapping[tuple[str, str], str]:
    """(prefix read so far, next char) -> longer prefix, for every token prefix."""
    transitions: dict[tuple[str, str], str] = {}
    for token in tokens:
        for i, ch in enumerate(token):
            transitions[(token[:i], ch)] = token[: i + 1]
    return MappingProxyType(transitions)


_VOWEL_TRANSITIONS: typing.Final[Mapping[tuple[str, str], str]] = _build_vowel_transitions(VOWEL_TOKENS)


# -----------------------------------------------------------------------------
# Scanners
# -----------------------------------------------------------------------------

def read_initial(text: str, start: int = 0) -> Optional[tuple[Initial, int]]:
    if start >= len(text):
        return None
    ch = text[start]
    if ch == _ASPIRATE[0]:
        if text.startswith(_ASPIRATE, start):
            return Initial.CH, len(_ASPIRATE)
        return None
    initial = CONSONANT_LETTERS.get(ch)
    if initial is None:
        return None
    return initial, 1


def read_vowel(text: str, start: int = 0) -> Optional[tuple[Vowel, int]]:
    """Longest vowel token at `start`.

    Walks the transition table while a longer prefix exists and remembers the
    last complete token seen; "y" or "w" alone never match.
    """
    prefix = ""
    best: Optional[tuple[Vowel, int]] = None
    i = start
    while i < len(text):
        extended = _VOWEL_TRANSITIONS.get((prefix, text[i]))
        if extended is None:
            break
        prefix = extended
        i += 1
        vowel = VOWEL_TOKENS.get(prefix)
        if vowel is not None:
            best = (vowel, len(prefix))
    return best


def read_final(text: str, start: int = 0) -> Optional[tuple[Final, int]]:
    scanned = read_initial(text, start)
    if scanned is None:
        return None
    initial, consumed = scanned
    final = FINAL_FOR_INITIAL.get(initial)
    if final is None:
        return None

    follower = CONSONANT_LETTERS.get(text[start + consumed: start + consumed + 1])
    if follower is not None:
        compound = FINAL_COMBINATION.get((final, follower))
        if compound is not None:
            return compound, consumed + 1
    return final, consumed


# -----------------------------------------------------------------------------
# Diagnostics
# -----------------------------------------------------------------------------

def starts_partial_consonant(text: str, start: int = 0) -> bool:
    """True if `text[start]` opens a consonant token that is not completed."""
    return text.startswith(_ASPIRATE[0], start) and read_initial(text, start) is None


def starts_partial_vowel(text: str, start: int = 0) -> bool:
    """True if `text[start]` opens a vowel token that is not completed ("y", "w")."""
    if start >= len(text):
        return False
    return ("", text[start]) in _VOWEL_TRANSITIONS and read_vowel(text, start) is None
