"""Observer protocols for color model notifications.

- PropertyObserver: UI-facing refresh, one call per changed field
- ChangeObserver: External-change signal, used by the synchronization hub
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PropertyObserver(Protocol):
    """
    Observer that receives per-field change notifications.

    Fired for every actual change to a field, whether the write came from
    user input or from the synchronization hub.
    """

    def on_property_changed(self, sender: object, name: str) -> None:
        """
        Handle a field change.

        Args:
            sender: The model or view-model whose field changed
            name: Name of the changed field (e.g., "red", "hue", "enable_hsl")

        Threading:
            Called synchronously on the thread that made the write, while any
            synchronization pass that caused it is still in progress.
        """
        ...


@runtime_checkable
class ChangeObserver(Protocol):
    """
    Observer that receives the external-change signal of a color model.

    Only writes made through a model's public setters raise this signal;
    values pushed by the hub never do.
    """

    def on_changed(self, sender: object) -> None:
        """
        Handle an external change.

        Args:
            sender: The model that was changed
        """
        ...
