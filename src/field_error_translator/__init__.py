"""Human readable messages for field validation errors."""

from field_error_translator.catalog import (
    ScopeCatalog,
    TranslationCatalog,
    TranslationCatalogError,
    load_catalog,
    load_catalog_json,
)
from field_error_translator.events import (
    ObservableMixin,
    TranslationEvent,
    TranslationEventType,
    TranslationObserver,
)
from field_error_translator.field_translator import FieldTranslator
from field_error_translator.identifiers import (
    DEFAULT,
    FALLBACK_SCOPE,
    ErrorIdentifier,
    ErrorList,
    ErrorMap,
)
from field_error_translator.pydantic_support import ROOT_FIELD, error_map_from_pydantic
from field_error_translator.results import TranslationResult
from field_error_translator.rich_observers import TranslationReportObserver
from field_error_translator.translator import MESSAGE_SEPARATOR, ErrorTranslator, Resolution

__all__ = [
    # Identifiers
    "DEFAULT",
    "FALLBACK_SCOPE",
    "ErrorIdentifier",
    "ErrorList",
    "ErrorMap",
    # Translators
    "ErrorTranslator",
    "FieldTranslator",
    "MESSAGE_SEPARATOR",
    "Resolution",
    "TranslationResult",
    # Configuration
    "ScopeCatalog",
    "TranslationCatalog",
    "TranslationCatalogError",
    "load_catalog",
    "load_catalog_json",
    # Pydantic integration
    "ROOT_FIELD",
    "error_map_from_pydantic",
    # Observer pattern
    "ObservableMixin",
    "TranslationEvent",
    "TranslationEventType",
    "TranslationObserver",
    # Rich observers
    "TranslationReportObserver",
]

__version__ = "0.1.0"
