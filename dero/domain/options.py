from __future__ import annotations

"""Conversion options (domain layer).

Plain values only; reading them from settings.yaml is the job of
`dero.services.settings_store`.
"""

from dataclasses import dataclass
from typing import Final


DEFAULT_ESCAPE_START: Final[str] = "["
DEFAULT_ESCAPE_END: Final[str] = "]"

DEFAULT_PUNCTUATION: Final[frozenset[str]] = frozenset(".,'\"/\\?!#%-+()[]{}@*&:;_^`~$|")


@dataclass(frozen=True)
class DeroSettings:
    """Escape delimiters and boundary punctuation.

    Raises:
        ValueError: if a delimiter is empty or both delimiters are the same;
            neither could ever close an escaped span.
    """

    escape_start: str = DEFAULT_ESCAPE_START
    escape_end: str = DEFAULT_ESCAPE_END
    punctuation: frozenset[str] = DEFAULT_PUNCTUATION

    def __post_init__(self) -> None:
        if not self.escape_start or not self.escape_end:
            raise ValueError(
                "Escape delimiters must be non-empty: start=%r end=%r" % (self.escape_start, self.escape_end)
            )
        if self.escape_start == self.escape_end:
            raise ValueError("Escape delimiters must differ: %r" % (self.escape_start,))
