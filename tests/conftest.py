"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import pytest
from hypothesis import strategies as st

from field_error_translator import DEFAULT, ErrorTranslator, FieldTranslator
from field_error_translator.events import TranslationEvent, TranslationEventType

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for error identifiers (short codes like validators produce)
identifiers = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(categories=("Ll", "Nd")),
)

# Strategy for real field names (never the fallback scope)
field_names = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(categories=("L", "N")),
)

# Strategy for messages
messages = st.text(min_size=1, max_size=100)

# Strategy for translation tables without a default
tables = st.dictionaries(keys=identifiers, values=messages, max_size=8)

# Strategy for error maps
error_maps = st.dictionaries(
    keys=field_names,
    values=st.lists(identifiers, max_size=5),
    max_size=6,
)


# -----------------------------------------------------------------------------
# Error identifiers used by the scenario tests
# -----------------------------------------------------------------------------

REQUIRED = "required"
MIN = "min"
MAX = "max"


# -----------------------------------------------------------------------------
# Test Observers
# -----------------------------------------------------------------------------


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[TranslationEvent] = []

    def on_event(self, event: TranslationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[TranslationEventType]:
        return [e.event_type for e in self.events]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def error_translator() -> ErrorTranslator:
    """Table with two translations and no default."""
    return ErrorTranslator().add_translation(REQUIRED, "required").add_translation(MAX, "max")


@pytest.fixture
def field_translator() -> FieldTranslator:
    """Table with field A defaulting and field B fully populated."""
    return FieldTranslator.from_mapping(
        {
            "A": {DEFAULT: "A Nil"},
            "B": {REQUIRED: "B Required", MAX: "B Max", DEFAULT: "B Nil"},
        }
    )


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a fresh RecordingObserver."""
    return RecordingObserver()
