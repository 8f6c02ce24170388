"""Single-scope error translation table.

ErrorTranslator maps error identifiers to display messages and resolves them
with a layered lookup: exact match, then the table's own default, then an
ordered chain of fallback tables.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import NamedTuple

from field_error_translator.identifiers import (
    DEFAULT,
    ErrorIdentifier,
    TranslationKey,
)

__all__ = ["ErrorTranslator", "Resolution", "MESSAGE_SEPARATOR"]

MESSAGE_SEPARATOR = ", "


class Resolution(NamedTuple):
    """Outcome of resolving one or more identifiers.

    ``found`` is authoritative; an empty ``message`` can be a valid translation.
    """

    message: str
    found: bool


_NOT_FOUND = Resolution("", False)


class ErrorTranslator(Mapping[TranslationKey, str]):
    """Lookup table from error identifier to human readable message.

    Builder methods mutate the table and return it, so tables are usually
    built with chained calls and then only read.

    Example:
        from field_error_translator import ErrorTranslator

        translator = (
            ErrorTranslator()
            .add_translation("missing", "This field is required")
            .add_translation("string_too_short", "Too short")
            .set_default_translation("Invalid value")
        )

        translator.resolve_one("missing")
        # Resolution(message='This field is required', found=True)
        translator.resolve_all(["string_too_short", "unknown"])
        # Resolution(message='Too short, Invalid value', found=True)
    """

    def __init__(self, translations: Mapping[TranslationKey, str] | None = None) -> None:
        """Initialize the table.

        Args:
            translations: Optional initial identifier to message entries.
        """
        self._translations: dict[TranslationKey, str] = dict(translations or {})

    # -------------------------------------------------------------------------
    # Mapping protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, key: TranslationKey) -> str:
        return self._translations[key]

    def __iter__(self) -> Iterator[TranslationKey]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self) -> str:
        return f"ErrorTranslator({self._translations!r})"

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def add_translation(self, identifier: TranslationKey, message: str) -> ErrorTranslator:
        """Add a translation, replacing any existing one for the identifier.

        Args:
            identifier: Error identifier, or DEFAULT for the default message.
            message: Message to display for the identifier.

        Returns:
            Self for method chaining.
        """
        self._translations[identifier] = message
        return self

    def set_default_translation(self, message: str) -> ErrorTranslator:
        """Set the message used when no exact identifier match exists.

        Args:
            message: Default message for this table.

        Returns:
            Self for method chaining.
        """
        return self.add_translation(DEFAULT, message)

    @property
    def default(self) -> str | None:
        """The default message, or None if not set."""
        return self._translations.get(DEFAULT)

    @property
    def has_default(self) -> bool:
        """Check if a default message is set."""
        return DEFAULT in self._translations

    def copy(self) -> ErrorTranslator:
        """Return an independent copy of this table."""
        return ErrorTranslator(self._translations)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve_one(
        self,
        identifier: ErrorIdentifier,
        fallback: Sequence[ErrorTranslator] = (),
    ) -> Resolution:
        """Resolve a single identifier to a message.

        The table's own default is used before any fallback table is
        consulted, even if a fallback has an exact match.

        Args:
            identifier: Error identifier to translate.
            fallback: Tables consulted in order when this table has neither
                an exact match nor a default.

        Returns:
            Resolution with the message, or ``("", False)`` if nothing matched.
        """
        if identifier in self._translations:
            return Resolution(self._translations[identifier], True)
        if DEFAULT in self._translations:
            return Resolution(self._translations[DEFAULT], True)
        if fallback:
            return fallback[0].resolve_one(identifier, fallback[1:])
        return _NOT_FOUND

    def resolve_all(
        self,
        errors: Iterable[ErrorIdentifier],
        fallback: Sequence[ErrorTranslator] = (),
    ) -> Resolution:
        """Resolve every identifier and join the messages.

        Identifiers without a translation are skipped. Messages are joined
        with ``", "`` in the order the identifiers were given.

        Args:
            errors: Ordered error identifiers for one field.
            fallback: Fallback tables, see resolve_one().

        Returns:
            Resolution that is found if at least one identifier resolved.
        """
        return self._resolve_errors(errors, fallback, first_only=False)

    def resolve_first(
        self,
        errors: Iterable[ErrorIdentifier],
        fallback: Sequence[ErrorTranslator] = (),
    ) -> Resolution:
        """Resolve only the first identifier that has a translation.

        Args:
            errors: Ordered error identifiers for one field.
            fallback: Fallback tables, see resolve_one().

        Returns:
            Resolution for the first translatable identifier.
        """
        return self._resolve_errors(errors, fallback, first_only=True)

    def _resolve_errors(
        self,
        errors: Iterable[ErrorIdentifier],
        fallback: Sequence[ErrorTranslator],
        first_only: bool,
    ) -> Resolution:
        chain = tuple(fallback)
        messages: list[str] = []
        for identifier in errors:
            message, found = self.resolve_one(identifier, chain)
            if not found:
                continue
            if first_only:
                return Resolution(message, True)
            messages.append(message)

        if not messages:
            return _NOT_FOUND
        return Resolution(MESSAGE_SEPARATOR.join(messages), True)
