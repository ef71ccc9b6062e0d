from __future__ import annotations

"""Deromanization errors and their positions.

Positions are character indices into the caller's original string (plain
Python `str` indices), never byte offsets. `byte_position()` converts for
callers that work with encoded text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_CONSONANT = "invalid_consonant"
    INVALID_VOWEL = "invalid_vowel"
    INVALID_LETTER = "invalid_letter"
    MISSING_FINAL_VOWEL = "missing_final_vowel"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CONSONANT: "Expected a valid consonant at position {pos}, found {letter!r}",
    ErrorKind.INVALID_VOWEL: "Expected a valid vowel at position {pos}, found {letter!r}",
    ErrorKind.INVALID_LETTER: "Expected a valid consonant or vowel at position {pos}, found {letter!r}",
    ErrorKind.MISSING_FINAL_VOWEL: "Expected a vowel at position {pos}",
}


class DeromanizeError(ValueError):
    """Romaja input could not be converted.

    Attributes:
        kind: what the scanner expected and did not find
        position: 0-based character index of the offending character
        letter: the offending character (None for MISSING_FINAL_VOWEL)

    The message reports the position 1-based, as a user would count.
    """

    def __init__(self, kind: ErrorKind, position: int, letter: Optional[str] = None) -> None:
        self.kind = kind
        self.position = position
        self.letter = letter
        super().__init__(_MESSAGES[kind].format(pos=position + 1, letter=letter))

    def offset(self, delta: int) -> DeromanizeError:
        """Return a copy moved by `delta` characters (segment -> original coordinates)."""
        return DeromanizeError(self.kind, self.position + delta, self.letter)

    def byte_position(self, text: str, encoding: str = "utf-8") -> int:
        return len(text[: self.position].encode(encoding))

    def __repr__(self) -> str:
        return "DeromanizeError(kind=%s, position=%d, letter=%r)" % (
            self.kind.name, self.position, self.letter
        )


class InternalInvariantError(RuntimeError):
    """A symbol table or the block algebra produced an impossible value.

    This is a defect in the engine, never a problem with the input.
    """
