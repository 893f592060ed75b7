"""Observable base classes for the color models and the view-model."""

import logging

from colorsync.protocols import ChangeObserver, ColorEvent, PropertyObserver
from colorsync.utils.observer import ObserverManager

logger = logging.getLogger(__name__)

# Writes closer than this to the current value are ignored
UNIT_EPSILON = 1e-7
HUE_EPSILON = 1e-5


class ObservableObject:
    """Object that notifies registered observers when one of its fields changes."""

    def __init__(self) -> None:
        self._property_observers = ObserverManager[PropertyObserver](observer_type_name="property")

    def register_property_observer(self, observer: PropertyObserver) -> None:
        """Register an observer for per-field change notifications."""
        self._property_observers.register(observer)

    def unregister_property_observer(self, observer: PropertyObserver) -> None:
        """Unregister a per-field observer."""
        self._property_observers.unregister(observer)

    def _notify_property_changed(self, name: str) -> None:
        logger.debug(f"{type(self).__name__} {ColorEvent.PROPERTY_CHANGED.value}: {name}")
        self._property_observers.notify("on_property_changed", self, name)


class ColorModule(ObservableObject):
    """
    Base class of the unit color models.

    Adds the external-change channel on top of per-field notifications.
    Public setters call ``_notify_and_raise_changed``; the hub writes through
    each model's ``set_from_hub``, which turns the external channel off for
    the duration of the write so the hub never re-triggers itself.
    """

    def __init__(self) -> None:
        super().__init__()
        self._change_observers = ObserverManager[ChangeObserver](observer_type_name="change")
        self._suppress_changed = False

    def register_change_observer(self, observer: ChangeObserver) -> None:
        """Register an observer for external changes of this model."""
        self._change_observers.register(observer)

    def unregister_change_observer(self, observer: ChangeObserver) -> None:
        """Unregister an external-change observer."""
        self._change_observers.unregister(observer)

    @property
    def is_suppressed(self) -> bool:
        """True while the hub is writing into this model."""
        return self._suppress_changed

    def _set_suppress_changed(self, suppress: bool) -> None:
        self._suppress_changed = suppress

    def _notify_and_raise_changed(self, name: str) -> None:
        self._notify_property_changed(name)
        if not self._suppress_changed:
            logger.debug(f"{type(self).__name__} {ColorEvent.CHANGED.value}")
            self._change_observers.notify("on_changed", self)
