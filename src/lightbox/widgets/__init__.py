"""Lightbox widgets."""

from .banner import Banner
from .entry_list import EntryList
from .viewer import ViewerScreen

__all__ = [
    "Banner",
    "EntryList",
    "ViewerScreen",
]
