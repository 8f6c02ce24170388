"""Error identifier types and reserved keys.

Error identifiers are owned by the validation layer that produces them; this
package only compares and looks them up, so any hashable value works.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from enum import Enum
from typing import Final, Union

__all__ = [
    "DEFAULT",
    "FALLBACK_SCOPE",
    "DefaultKey",
    "ErrorIdentifier",
    "ErrorList",
    "ErrorMap",
    "TranslationKey",
]


class DefaultKey(Enum):
    """Reserved key for default translations.

    Never equal to any identifier produced by a validator.
    """

    DEFAULT = "default"

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT: Final = DefaultKey.DEFAULT
"""Key under which a table stores its default message."""

FALLBACK_SCOPE: Final = ""
"""Field name reserved for the global fallback table."""

ErrorIdentifier = Hashable
ErrorList = Sequence[ErrorIdentifier]
ErrorMap = Mapping[str, Sequence[ErrorIdentifier]]

TranslationKey = Union[ErrorIdentifier, DefaultKey]
