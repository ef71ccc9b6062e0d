from __future__ import annotations

"""Settings-aware entry points.

Same contracts as `dero.domain.segmentation`, except that anything the caller
leaves out (boundary predicate, escape delimiters) comes from settings.yaml.
"""

from typing import Optional

from dero.domain import segmentation
from dero.domain.options import DeroSettings
from dero.domain.segmentation import BoundaryPredicate, boundary_predicate
from dero.services.settings_store import get_settings


def deromanize_words(
    text: str,
    is_boundary: Optional[BoundaryPredicate] = None,
    lossy: bool = False,
) -> str:
    if is_boundary is None:
        is_boundary = boundary_predicate(get_settings().punctuation)
    return segmentation.deromanize_words(text, is_boundary, lossy=lossy)


def deromanize_escaped(text: str, settings: Optional[DeroSettings] = None) -> str:
    if settings is None:
        settings = get_settings()
    return segmentation.deromanize_escaped(text, settings)
