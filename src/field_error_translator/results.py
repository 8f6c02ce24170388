"""Translation result container."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TranslationResult:
    """Messages per field for one translated error map.

    Unpacks as ``(messages, all_resolved)``:

        messages, ok = translator.translate(errors)

    Attributes:
        messages: Display message per field. Fields without a translation
            have no entry.
        all_resolved: True if every input field got a message.
        unresolved: Input fields that got no message, in input order.
    """

    messages: dict[str, str] = field(default_factory=dict)
    all_resolved: bool = True
    unresolved: list[str] = field(default_factory=list)

    def add_message(self, field: str, message: str) -> None:
        """Store the message for a field."""
        self.messages[field] = message

    def mark_unresolved(self, field: str) -> None:
        """Record that a field could not be translated."""
        self.unresolved.append(field)
        self.all_resolved = False

    def __iter__(self) -> Iterator[Any]:
        yield self.messages
        yield self.all_resolved
