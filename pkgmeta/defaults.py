"""Language-keyed default filling.

Configuration documents key per-language values by lowercase language name
and may carry a "default" entry that applies to every language not listed
explicitly. These helpers turn such a mapping into one keyed by
TargetLanguage with every language present.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from .models import TargetLanguage

V = TypeVar("V")

DEFAULT_KEY = "default"


def fill_defaults(
    per_language: Mapping[TargetLanguage, V | None], default: V | None
) -> dict[TargetLanguage, V | None]:
    """Give every TargetLanguage an entry, using default for the gaps.

    Languages that are configured keep their value, even an explicit None,
    so a config can opt a language out of a default.

    Args:
        per_language: Values for explicitly configured languages.
        default: Value for every other language. May be None.

    Returns:
        New map with one entry per TargetLanguage, in enum order.
    """
    return {
        language: per_language[language] if language in per_language else default
        for language in TargetLanguage
    }


def build_map_with_default(
    config: Mapping[str, V | None] | None,
) -> dict[TargetLanguage, V | None]:
    """Convert a string-keyed config mapping to a full per-language map.

    Examples:
        {"python": a, "default": d} → {PYTHON: a, JAVA: d, GO: d, ...}
        {"python": a} → {PYTHON: a, JAVA: None, GO: None, ...}
        None → {}

    Raises:
        ValueError: If a key is neither "default" nor a known language.
    """
    if config is None:
        return {}

    default: V | None = None
    per_language: dict[TargetLanguage, V | None] = {}
    for key, value in config.items():
        if key == DEFAULT_KEY:
            default = value
        else:
            per_language[TargetLanguage.from_string(key)] = value
    return fill_defaults(per_language, default)
