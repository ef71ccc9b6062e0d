from __future__ import annotations

"""Syllable assembler: the romaja -> Hangul state machine.

States (tagged variants):
  Empty                          nothing pending
  AfterInitial(initial, start)   a consonant waiting for its vowel
  AfterVowel(initial, vowel)     an open syllable
  AfterFinal(initial, vowel, final)
                                 a closed syllable whose final may still move
                                 to the next syllable if a vowel follows

A trailing consonant is only confirmed as a final once the next token is known
not to be a vowel ("gas" -> 갓, "gasa" -> 가사, "ilgo" -> 일고).

Strict mode raises DeromanizeError on the first problem. Lenient mode never
raises: a consonant without a vowel becomes a standalone jamo and anything
else it cannot read is copied through.
"""

import logging
from dataclasses import dataclass
from typing import Union

from dero.domain.errors import DeromanizeError, ErrorKind
from dero.domain.hangul_compose import combine
from dero.domain.jamo import Final, Initial, Vowel, split_final
from dero.domain.romaja import (
    read_final,
    read_initial,
    read_vowel,
    starts_partial_consonant,
    starts_partial_vowel,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# States
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class AfterInitial:
    initial: Initial
    start: int


@dataclass(frozen=True)
class AfterVowel:
    initial: Initial
    vowel: Vowel


@dataclass(frozen=True)
class AfterFinal:
    initial: Initial
    vowel: Vowel
    final: Final


State = Union[Empty, AfterInitial, AfterVowel, AfterFinal]

EMPTY = Empty()


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


# -----------------------------------------------------------------------------
# Assembler
# -----------------------------------------------------------------------------

class SyllableAssembler:
    """One left-to-right pass over `text`.

    The cursor only advances when a scanner result is committed; a state that
    cannot use the next character hands it back to Empty untouched.
    """

    def __init__(self, text: str, *, strict: bool = True) -> None:
        self._text = text
        self._strict = strict
        self._pos = 0
        self._out: list[str] = []

    def run(self) -> str:
        state: State = EMPTY
        while self._pos < len(self._text):
            state = self._step(state)
        self._finish(state)
        return "".join(self._out)

    # ---------------------------
    # Transitions
    # ---------------------------

    def _step(self, state: State) -> State:
        if isinstance(state, Empty):
            return self._from_empty()
        if isinstance(state, AfterInitial):
            return self._from_initial(state)
        if isinstance(state, AfterVowel):
            return self._from_vowel(state)
        return self._from_final(state)

    def _from_empty(self) -> State:
        start = self._pos
        scanned_initial = read_initial(self._text, start)
        if scanned_initial is not None:
            initial, consumed = scanned_initial
            self._pos += consumed
            return AfterInitial(initial, start)

        scanned_vowel = read_vowel(self._text, start)
        if scanned_vowel is not None:
            vowel, consumed = scanned_vowel
            self._pos += consumed
            return AfterVowel(Initial.IEUNG, vowel)

        ch = self._text[start]
        if self._strict and _is_ascii_letter(ch):
            raise DeromanizeError(self._classify(start), start, ch)
        self._out.append(ch)
        self._pos += 1
        return EMPTY

    def _from_initial(self, state: AfterInitial) -> State:
        scanned = read_vowel(self._text, self._pos)
        if scanned is not None:
            vowel, consumed = scanned
            self._pos += consumed
            return AfterVowel(state.initial, vowel)

        if self._strict:
            if starts_partial_vowel(self._text, self._pos):
                raise DeromanizeError(ErrorKind.INVALID_VOWEL, self._pos, self._text[self._pos])
            raise DeromanizeError(ErrorKind.MISSING_FINAL_VOWEL, state.start)
        self._emit_standalone(state)
        return EMPTY

    def _from_vowel(self, state: AfterVowel) -> State:
        scanned_final = read_final(self._text, self._pos)
        if scanned_final is not None:
            final, consumed = scanned_final
            self._pos += consumed
            return AfterFinal(state.initial, state.vowel, final)

        scanned_vowel = read_vowel(self._text, self._pos)
        if scanned_vowel is not None:
            vowel, consumed = scanned_vowel
            self._flush(state.initial, state.vowel)
            self._pos += consumed
            return AfterVowel(Initial.IEUNG, vowel)

        start = self._pos
        scanned_initial = read_initial(self._text, start)
        if scanned_initial is not None:
            initial, consumed = scanned_initial
            self._flush(state.initial, state.vowel)
            self._pos += consumed
            return AfterInitial(initial, start)

        self._flush(state.initial, state.vowel)
        return EMPTY

    def _from_final(self, state: AfterFinal) -> State:
        scanned = read_vowel(self._text, self._pos)
        if scanned is None:
            self._flush(state.initial, state.vowel, state.final)
            return EMPTY

        vowel, consumed = scanned
        residual, promoted = split_final(state.final)
        self._flush(state.initial, state.vowel, residual)
        self._pos += consumed
        return AfterVowel(promoted, vowel)

    def _finish(self, state: State) -> None:
        if isinstance(state, AfterInitial):
            if self._strict:
                raise DeromanizeError(ErrorKind.MISSING_FINAL_VOWEL, state.start)
            self._emit_standalone(state)
        elif isinstance(state, AfterVowel):
            self._flush(state.initial, state.vowel)
        elif isinstance(state, AfterFinal):
            self._flush(state.initial, state.vowel, state.final)

    # ---------------------------
    # Output
    # ---------------------------

    def _flush(self, initial: Initial, vowel: Vowel, final: Final = Final.EMPTY) -> None:
        self._out.append(combine(initial, vowel, final))

    def _emit_standalone(self, state: AfterInitial) -> None:
        logger.debug("No vowel after %s at %d; emitting standalone jamo", state.initial.name, state.start)
        self._out.append(state.initial.as_char())

    def _classify(self, position: int) -> ErrorKind:
        if starts_partial_consonant(self._text, position):
            return ErrorKind.INVALID_CONSONANT
        if starts_partial_vowel(self._text, position):
            return ErrorKind.INVALID_VOWEL
        return ErrorKind.INVALID_LETTER


def assemble(text: str, *, strict: bool = True) -> str:
    return SyllableAssembler(text, strict=strict).run()
