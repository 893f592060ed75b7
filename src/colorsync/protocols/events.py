"""Notification events raised by the color models.

Every unit model has two independent channels:
- PROPERTY_CHANGED: UI refresh, carries the changed field's name, fired on
  every actual change whatever its origin
- CHANGED: no payload, fired only for writes made from outside the hub
"""

from enum import Enum


class ColorEvent(Enum):
    """Events raised by color models and the view-model."""

    PROPERTY_CHANGED = "property_changed"  # A field's value changed (any origin)
    CHANGED = "changed"                    # An external write changed the model
