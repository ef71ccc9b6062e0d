from __future__ import annotations

"""Entry points: whole-string, per-word and escaped conversion.

- deromanize: strict, raises DeromanizeError on the first problem
- deromanize_lossy: lenient, never raises
- deromanize_words: splits at boundary characters and converts each run on its
  own, reporting errors in original-string positions
- deromanize_escaped: copies [bracketed] text untouched, never raises
"""

import logging
from typing import Callable, Iterable, Optional

from dero.domain.assembler import assemble
from dero.domain.errors import DeromanizeError
from dero.domain.hangul_compose import is_hangul_syllable
from dero.domain.options import DEFAULT_PUNCTUATION, DeroSettings

logger = logging.getLogger(__name__)

BoundaryPredicate = Callable[[str], bool]


# -----------------------------------------------------------------------------
# Boundary predicates
# -----------------------------------------------------------------------------

def is_punctuation(ch: str) -> bool:
    return ch in DEFAULT_PUNCTUATION


def is_boundary(ch: str) -> bool:
    return ch.isspace() or is_punctuation(ch) or is_hangul_syllable(ch)


def boundary_predicate(punctuation: Iterable[str]) -> BoundaryPredicate:
    """Build an is_boundary variant for a custom punctuation set."""
    marks = frozenset(punctuation)

    def _is_boundary(ch: str) -> bool:
        return ch.isspace() or ch in marks or is_hangul_syllable(ch)

    return _is_boundary


# -----------------------------------------------------------------------------
# Conversion
# -----------------------------------------------------------------------------

def deromanize(text: str) -> str:
    return assemble(text, strict=True)


def deromanize_lossy(text: str) -> str:
    return assemble(text, strict=False)


def _convert_run(text: str, start: int, end: int, lossy: bool) -> str:
    run = text[start:end]
    try:
        return deromanize(run)
    except DeromanizeError as e:
        if not lossy:
            raise e.offset(start) from None
        logger.debug("Copying unconvertible run %r at %d: %s", run, start, e)
        return run


def deromanize_words(
    text: str,
    is_boundary: BoundaryPredicate = is_boundary,
    lossy: bool = False,
) -> str:
    """Convert each maximal run between boundary characters independently.

    Boundary characters are copied through. A failing run raises with its
    position shifted to `text` coordinates, or is copied verbatim when `lossy`.
    """
    output: list[str] = []
    start: Optional[int] = None

    for i, ch in enumerate(text):
        if is_boundary(ch):
            if start is not None:
                output.append(_convert_run(text, start, i, lossy))
                start = None
            output.append(ch)
        elif start is None:
            start = i

    if start is not None:
        output.append(_convert_run(text, start, len(text), lossy))
    return "".join(output)


def deromanize_escaped(text: str, settings: Optional[DeroSettings] = None) -> str:
    """Convert everything outside escape delimiters; never raises.

    The delimiters themselves are dropped. An opening delimiter with no
    matching close copies the rest of the text verbatim.
    """
    if settings is None:
        settings = DeroSettings()
    open_mark, close_mark = settings.escape_start, settings.escape_end

    output: list[str] = []
    pos = 0
    while pos < len(text):
        opened = text.find(open_mark, pos)
        if opened < 0:
            output.append(deromanize_lossy(text[pos:]))
            break
        output.append(deromanize_lossy(text[pos:opened]))

        body = opened + len(open_mark)
        closed = text.find(close_mark, body)
        if closed < 0:
            output.append(text[body:])
            break
        output.append(text[body:closed])
        pos = closed + len(close_mark)
    return "".join(output)
