"""Error map extraction from Pydantic validation errors.

Pydantic reports each failure with a location tuple and a machine readable
error type such as ``"missing"`` or ``"string_too_short"``. The error type is
used as the error identifier, the joined location as the field name.
"""

from __future__ import annotations

from pydantic import ValidationError

from field_error_translator.identifiers import ErrorIdentifier

__all__ = ["ROOT_FIELD", "error_map_from_pydantic"]

ROOT_FIELD = "__root__"
"""Field name used for model level errors, which have an empty location."""


def error_map_from_pydantic(
    exc: ValidationError,
    separator: str = ".",
) -> dict[str, list[ErrorIdentifier]]:
    """Convert a Pydantic ValidationError into an error map.

    Args:
        exc: The validation error raised by a Pydantic model.
        separator: Joins nested location parts, e.g. ``address.city``.

    Returns:
        Field name to error types, in the order Pydantic reported them.

    Example:
        try:
            User.model_validate({"name": ""})
        except ValidationError as e:
            error_map = error_map_from_pydantic(e)
            # {"name": ["string_too_short"], "email": ["missing"]}
    """
    error_map: dict[str, list[ErrorIdentifier]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = separator.join(str(part) for part in loc) if loc else ROOT_FIELD
        error_map.setdefault(field, []).append(error["type"])
    return error_map
