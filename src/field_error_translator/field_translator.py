"""Per-field error translation.

FieldTranslator holds one ErrorTranslator per field name plus a global
fallback table stored under the empty field name, and translates whole
error maps produced by a validation pass.
"""

from __future__ import annotations

import time
from collections.abc import Iterator, Mapping, Sequence
from typing import Literal

from field_error_translator.events import (
    ObservableMixin,
    TranslationEvent,
    TranslationEventType,
)
from field_error_translator.identifiers import (
    DEFAULT,
    FALLBACK_SCOPE,
    ErrorMap,
    TranslationKey,
)
from field_error_translator.results import TranslationResult
from field_error_translator.translator import ErrorTranslator

__all__ = ["FieldTranslator"]

TranslationMode = Literal["all", "first"]


class FieldTranslator(ObservableMixin, Mapping[str, ErrorTranslator]):
    """Translates validation error maps into one message per field.

    Resolution order for each identifier of a field:

    1. the field's own table (exact match, then its default)
    2. the fallback tables passed to translate(), in order
    3. the global fallback table registered under ``""``

    Fields without a table of their own start directly at step 2.

    Supports the Observer pattern - add observers to receive
    TRANSLATION_STARTED, FIELD_TRANSLATED, FIELD_UNRESOLVED and
    TRANSLATION_COMPLETED events.

    Example:
        from field_error_translator import FieldTranslator

        translator = (
            FieldTranslator()
            .add_translation("email", "missing", "Email is required")
            .set_field_default_translation("email", "Email is invalid")
            .set_fallback_translation("missing", "This field is required")
            .set_fallback_default_translation("Invalid value")
        )

        messages, ok = translator.translate(
            {"email": ["value_error"], "name": ["missing"]}
        )
        # messages == {"email": "Email is invalid", "name": "This field is required"}
    """

    def __init__(self, tables: Mapping[str, ErrorTranslator] | None = None) -> None:
        """Initialize the translator.

        Args:
            tables: Optional initial field name to table entries.
        """
        self._tables: dict[str, ErrorTranslator] = dict(tables or {})

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Mapping[TranslationKey, str]]
    ) -> FieldTranslator:
        """Build a translator from a nested ``{field: {identifier: message}}`` mapping.

        Identifiers may include DEFAULT, and the field ``""`` is the global
        fallback scope.
        """
        translator = cls()
        for field, translations in mapping.items():
            for identifier, message in translations.items():
                translator.add_translation(field, identifier, message)
        return translator

    # -------------------------------------------------------------------------
    # Mapping protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, field: str) -> ErrorTranslator:
        return self._tables[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"FieldTranslator({self._tables!r})"

    @property
    def fields(self) -> list[str]:
        """Names of the fields with their own table, excluding the fallback scope."""
        return [name for name in self._tables if name != FALLBACK_SCOPE]

    @property
    def fallback(self) -> ErrorTranslator | None:
        """The global fallback table, or None if nothing was registered."""
        return self._tables.get(FALLBACK_SCOPE)

    def copy(self) -> FieldTranslator:
        """Return a copy with independent tables. Observers are not copied."""
        return FieldTranslator({name: table.copy() for name, table in self._tables.items()})

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def add_translation(
        self, field: str, identifier: TranslationKey, message: str
    ) -> FieldTranslator:
        """Add a translation for an error on a field.

        An existing translation for the same field and identifier is replaced.

        Args:
            field: Field name, or ``""`` for the global fallback scope.
            identifier: Error identifier, or DEFAULT.
            message: Message to display.

        Returns:
            Self for method chaining.
        """
        table = self._tables.get(field)
        if table is None:
            table = self._tables[field] = ErrorTranslator()
        table.add_translation(identifier, message)
        return self

    def set_field_default_translation(self, field: str, message: str) -> FieldTranslator:
        """Set the message for any error on a field without an exact match."""
        return self.add_translation(field, DEFAULT, message)

    def set_fallback_translation(
        self, identifier: TranslationKey, message: str
    ) -> FieldTranslator:
        """Set the message for an error on any field that has no own match."""
        return self.add_translation(FALLBACK_SCOPE, identifier, message)

    def set_fallback_default_translation(self, message: str) -> FieldTranslator:
        """Set the last resort message, used when nothing else matches."""
        return self.add_translation(FALLBACK_SCOPE, DEFAULT, message)

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------

    def translate(
        self,
        error_map: ErrorMap,
        fallback: Sequence[ErrorTranslator] = (),
    ) -> TranslationResult:
        """Translate all errors of every field.

        Messages of a field are joined with ``", "`` in error order.

        Args:
            error_map: Field name to ordered error identifiers.
            fallback: Tables checked after a field's own table and before
                the global fallback table.

        Returns:
            TranslationResult with one message per translated field.
            ``all_resolved`` is False if any field got no message.
        """
        return self._translate_error_map(error_map, fallback, "all")

    def translate_first(
        self,
        error_map: ErrorMap,
        fallback: Sequence[ErrorTranslator] = (),
    ) -> TranslationResult:
        """Translate only the first translatable error of every field.

        Args:
            error_map: Field name to ordered error identifiers.
            fallback: See translate().

        Returns:
            TranslationResult with one message per translated field.
        """
        return self._translate_error_map(error_map, fallback, "first")

    def _fallback_chain(self, fallback: Sequence[ErrorTranslator]) -> tuple[ErrorTranslator, ...]:
        """Caller supplied tables first, the global fallback table last."""
        chain = tuple(fallback)
        if FALLBACK_SCOPE in self._tables:
            chain += (self._tables[FALLBACK_SCOPE],)
        return chain

    def _translate_error_map(
        self,
        error_map: ErrorMap,
        fallback: Sequence[ErrorTranslator],
        mode: TranslationMode,
    ) -> TranslationResult:
        start_time = time.perf_counter()
        chain = self._fallback_chain(fallback)
        result = TranslationResult()

        self.notify(
            TranslationEvent(
                event_type=TranslationEventType.TRANSLATION_STARTED,
                source=self,
                data={"field_count": len(error_map), "mode": mode},
            )
        )

        for field, field_errors in error_map.items():
            errors = list(field_errors)
            table = self._tables.get(field)
            field_chain = chain
            if table is None and chain:
                table, field_chain = chain[0], chain[1:]

            if table is None:
                message, found = "", False
            elif mode == "first":
                message, found = table.resolve_first(errors, field_chain)
            else:
                message, found = table.resolve_all(errors, field_chain)

            if found:
                result.add_message(field, message)
                self.notify(
                    TranslationEvent(
                        event_type=TranslationEventType.FIELD_TRANSLATED,
                        source=self,
                        data={"field": field, "message": message},
                    )
                )
            else:
                result.mark_unresolved(field)
                self.notify(
                    TranslationEvent(
                        event_type=TranslationEventType.FIELD_UNRESOLVED,
                        source=self,
                        data={"field": field, "errors": errors},
                    )
                )

        duration_ms = (time.perf_counter() - start_time) * 1000

        self.notify(
            TranslationEvent(
                event_type=TranslationEventType.TRANSLATION_COMPLETED,
                source=self,
                data={
                    "mode": mode,
                    "translated": len(result.messages),
                    "unresolved": list(result.unresolved),
                    "all_resolved": result.all_resolved,
                    "duration_ms": duration_ms,
                },
            )
        )

        return result
