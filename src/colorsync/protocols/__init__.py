"""Protocol definitions for color model notifications.

- Events: ColorEvent (property changed / externally changed)
- Observers: Protocols for components that react to those events
"""

from .events import ColorEvent
from .observers import ChangeObserver, PropertyObserver

__all__ = [
    "ChangeObserver",
    "ColorEvent",
    "PropertyObserver",
]
