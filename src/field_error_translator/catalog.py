"""Translation catalogs loaded from configuration.

Provides Pydantic models describing a translation catalog, so tables can be
defined in JSON or any other mapping source and built once at startup.

Example catalog:

    {
        "fields": {
            "email": {
                "default": "Email is invalid",
                "errors": {"missing": "Email is required"}
            }
        },
        "fallback": {
            "default": "Invalid value",
            "errors": {"missing": "This field is required"}
        }
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from field_error_translator.field_translator import FieldTranslator
from field_error_translator.identifiers import FALLBACK_SCOPE

__all__ = [
    "ScopeCatalog",
    "TranslationCatalog",
    "TranslationCatalogError",
    "load_catalog",
    "load_catalog_json",
]


class TranslationCatalogError(ValueError):
    """Raised when a translation catalog cannot be parsed."""


class ScopeCatalog(BaseModel):
    """Translations for one field, or for the fallback scope.

    Attributes:
        default: Message used when no identifier matches (optional).
        errors: Error identifier to message.
    """

    model_config = ConfigDict(extra="forbid")

    default: str | None = None
    errors: dict[str, str] = Field(default_factory=dict)

    def apply(self, translator: FieldTranslator, field: str) -> None:
        """Register this scope's translations for a field of the translator."""
        for identifier, message in self.errors.items():
            translator.add_translation(field, identifier, message)
        if self.default is not None:
            translator.set_field_default_translation(field, self.default)


class TranslationCatalog(BaseModel):
    """A complete set of field translations.

    Attributes:
        fields: Field name to its translations.
        fallback: Translations used for fields without a match (optional).
    """

    model_config = ConfigDict(extra="forbid")

    fields: dict[str, ScopeCatalog] = Field(default_factory=dict)
    fallback: ScopeCatalog | None = None

    @field_validator("fields")
    @classmethod
    def _reject_fallback_scope(cls, value: dict[str, ScopeCatalog]) -> dict[str, ScopeCatalog]:
        if FALLBACK_SCOPE in value:
            raise ValueError("empty field name is reserved, use 'fallback' instead")
        return value

    def build(self) -> FieldTranslator:
        """Build a FieldTranslator holding this catalog's translations."""
        translator = FieldTranslator()
        for name, scope in self.fields.items():
            scope.apply(translator, name)
        if self.fallback is not None:
            self.fallback.apply(translator, FALLBACK_SCOPE)
        return translator


def load_catalog(data: Mapping[str, Any]) -> FieldTranslator:
    """Build a FieldTranslator from a catalog mapping.

    Args:
        data: Catalog document, e.g. parsed from a config file.

    Returns:
        The populated FieldTranslator.

    Raises:
        TranslationCatalogError: If the document does not match the catalog schema.
    """
    try:
        catalog = TranslationCatalog.model_validate(data)
    except ValidationError as e:
        raise TranslationCatalogError(f"Invalid translation catalog: {e}") from e
    return catalog.build()


def load_catalog_json(text: str | bytes) -> FieldTranslator:
    """Build a FieldTranslator from a JSON catalog document.

    Raises:
        TranslationCatalogError: If the text is not valid JSON or not a valid catalog.
    """
    try:
        catalog = TranslationCatalog.model_validate_json(text)
    except ValidationError as e:
        raise TranslationCatalogError(f"Invalid translation catalog: {e}") from e
    return catalog.build()
