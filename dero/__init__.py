"""
dero: convert romaja (ASCII Korean transliteration) to Hangul.

This file provides a stable import surface for front ends (CLI, TUI, editor
plugins). `deromanize_words` and `deromanize_escaped` are the settings-aware
variants from `dero.services.conversion`; the pure ones live in
`dero.domain.segmentation`.
"""

from .domain.errors import DeromanizeError, ErrorKind, InternalInvariantError  # noqa: F401
from .domain.hangul_compose import Block, combine, decompose  # noqa: F401
from .domain.jamo import Final, Initial, Vowel  # noqa: F401
from .domain.options import DeroSettings  # noqa: F401
from .domain.segmentation import (  # noqa: F401
    boundary_predicate,
    deromanize,
    deromanize_lossy,
    is_boundary,
)
from .services.conversion import deromanize_escaped, deromanize_words  # noqa: F401
from .services.settings_store import SettingsStore  # noqa: F401

__all__ = [
    "Block",
    "DeroSettings",
    "DeromanizeError",
    "ErrorKind",
    "Final",
    "Initial",
    "InternalInvariantError",
    "SettingsStore",
    "Vowel",
    "boundary_predicate",
    "combine",
    "decompose",
    "deromanize",
    "deromanize_escaped",
    "deromanize_lossy",
    "deromanize_words",
    "is_boundary",
]
