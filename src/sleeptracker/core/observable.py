"""Observable state containers for view models.

View models publish their state through ``ObservableValue`` slots and their
one-time triggers (navigation, notifications) through ``OneShotEvent``.
Both are QObjects so widgets can connect to their signals directly.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class ObservableValue(QObject):
    """A named slot holding a value and notifying subscribers on every change.

    Signals:
        changed: Emitted with the new value after each ``set_value`` call
    """

    changed = Signal(object)

    def __init__(self, name: str, initial: Any = None, parent: Optional[QObject] = None):
        """Initialize the observable.

        Args:
            name: Name used in log messages
            initial: Initial value
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._name = name
        self._value = initial

    @property
    def name(self) -> str:
        """Get the slot name."""
        return self._name

    @property
    def value(self) -> Any:
        """Get the current value."""
        return self._value

    def set_value(self, value: Any) -> None:
        """Replace the value and notify subscribers synchronously.

        Subscribers are notified even when the new value equals the old one.

        Args:
            value: New value
        """
        self._value = value
        logger.debug(f"{self._name} -> {value!r}")
        self.changed.emit(value)

    def observe(self, callback: Callable[[Any], Any]) -> None:
        """Deliver the current value to ``callback`` and subscribe it to changes.

        Args:
            callback: Called with the current value now and every new value later
        """
        callback(self._value)
        self.changed.connect(callback)

    def remove_observer(self, callback: Callable[[Any], Any]) -> None:
        """Unsubscribe a callback registered with ``observe``."""
        self.changed.disconnect(callback)


def map_observable(
    source: ObservableValue,
    transform: Callable[[Any], Any],
    name: Optional[str] = None,
) -> ObservableValue:
    """Create an observable derived from ``source``.

    The derived value is ``transform(source.value)``, recomputed whenever the
    source changes. The result is parented to ``source`` so it shares its
    lifetime.

    Args:
        source: Observable to derive from
        transform: Pure function of the source value
        name: Optional name for log messages

    Returns:
        Derived observable
    """
    derived: ObservableValue = ObservableValue(
        name or f"{source.name}*", transform(source.value), parent=source
    )
    source.changed.connect(lambda value: derived.set_value(transform(value)))
    return derived


class OneShotEvent(QObject):
    """Observable trigger meant to be handled exactly once.

    ``fire`` sets the event and marks it unhandled. ``consume`` hands the
    content out once and marks it handled, so late or repeated subscribers
    never re-trigger. ``acknowledge`` resets the event to its default value.

    Signals:
        triggered: Emitted with the content each time the event fires
    """

    triggered = Signal(object)

    def __init__(self, name: str, default: Any = None, parent: Optional[QObject] = None):
        """Initialize the event.

        Args:
            name: Name used in log messages
            default: Value reported while no event is pending (None or False)
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._name = name
        self._default = default
        self._content: Any = default
        self._pending = False
        self._handled = False

    @property
    def name(self) -> str:
        """Get the event name."""
        return self._name

    @property
    def value(self) -> Any:
        """Get the pending content, or the default when nothing is pending."""
        return self._content if self._pending else self._default

    @property
    def is_pending(self) -> bool:
        """Check if the event fired and has not been acknowledged yet."""
        return self._pending

    @property
    def is_handled(self) -> bool:
        """Check if the pending content was already consumed."""
        return self._handled

    def fire(self, content: Any) -> None:
        """Set the event and notify subscribers.

        Args:
            content: Event payload
        """
        self._content = content
        self._pending = True
        self._handled = False
        logger.debug(f"{self._name} fired: {content!r}")
        self.triggered.emit(content)

    def consume(self) -> Any:
        """Return the content if it has not been handled yet, else None."""
        if not self._pending or self._handled:
            return None
        self._handled = True
        return self._content

    def acknowledge(self) -> None:
        """Reset the event to its default value. Safe to call repeatedly."""
        if self._pending:
            logger.debug(f"{self._name} acknowledged")
        self._content = self._default
        self._pending = False
        self._handled = False

    def observe(self, callback: Callable[[Any], Any]) -> None:
        """Subscribe to the event, replaying pending content not yet handled.

        Args:
            callback: Called with the content of each event
        """
        if self._pending and not self._handled:
            callback(self._content)
        self.triggered.connect(callback)

    def remove_observer(self, callback: Callable[[Any], Any]) -> None:
        """Unsubscribe a callback registered with ``observe``."""
        self.triggered.disconnect(callback)
