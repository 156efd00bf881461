from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

AUTO_DETECT: Final[str] = "auto"

# Keys are matched exactly; values are provider tags and keep their casing.
LANGUAGE_CODE_OVERRIDES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "EN-US": "en",
        "EN-GB": "en",
        "PT-BR": "pt",
        "PT-PT": "pt",
        "ZH": "zh-Hans",
    }
)
_CANONICAL_PROVIDER_TAGS: Final[frozenset[str]] = frozenset(LANGUAGE_CODE_OVERRIDES.values())


def normalize_language_code(code: str | None) -> str:
    """Map a client-facing language code to the tag Azure Translator expects.

    An empty result means "let the provider detect the language".
    """
    if not code or code == AUTO_DETECT:
        return ""
    override = LANGUAGE_CODE_OVERRIDES.get(code)
    if override is not None:
        return override
    # Mixed-case provider tags such as zh-Hans pass through untouched.
    if code in _CANONICAL_PROVIDER_TAGS:
        return code
    return code.lower()
