"""Action handler mixins for LightboxApp."""

from .entry_actions import EntryActionsMixin
from .navigation_actions import NavigationActionsMixin

__all__ = [
    "EntryActionsMixin",
    "NavigationActionsMixin",
]
