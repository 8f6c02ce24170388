"""Observer pattern implementation for translation events.

Provides event types, observer protocol, and mixin for adding observer
support to translator classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "TranslationEventType",
    "TranslationEvent",
    "TranslationObserver",
    "ObservableMixin",
]


class TranslationEventType(Enum):
    """Types of translation events that can be observed."""

    TRANSLATION_STARTED = auto()
    """Emitted when an error map starts being translated."""

    FIELD_TRANSLATED = auto()
    """Emitted when a field resolved to a message."""

    FIELD_UNRESOLVED = auto()
    """Emitted when no translation was found for a field."""

    TRANSLATION_COMPLETED = auto()
    """Emitted when every field of the error map has been processed."""


@dataclass
class TranslationEvent:
    """A translation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The translator that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = TranslationEvent(
            event_type=TranslationEventType.FIELD_UNRESOLVED,
            source=translator,
            data={"field": "email", "errors": ["missing"]},
        )
    """

    event_type: TranslationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class TranslationObserver(Protocol):
    """Protocol for translation event observers.

    Example:
        class MissingTranslationLogger:
            def on_event(self, event: TranslationEvent) -> None:
                if event.event_type == TranslationEventType.FIELD_UNRESOLVED:
                    print(f"no message for {event.data['field']}")
    """

    def on_event(self, event: TranslationEvent) -> None:
        """Handle a translation event.

        Args:
            event: The translation event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class.

    Provides methods to add, remove, and notify observers of translation
    events.
    """

    _observers: list[TranslationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: TranslationObserver) -> None:
        """Add an observer to receive translation events.

        Args:
            observer: An object implementing the TranslationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: TranslationObserver) -> None:
        """Remove an observer from receiving translation events."""
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: TranslationEvent) -> None:
        """Notify all observers of a translation event.

        Args:
            event: The event to broadcast to observers.
        """
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def has_observers(self) -> bool:
        """Check if any observer is registered."""
        self._ensure_observers()
        return bool(self._observers)

    @property
    def observers(self) -> list[TranslationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()
