from __future__ import annotations

import json
import logging
from typing import Any

from app.integrations.translator import AzureTranslatorClient, UpstreamError
from app.schemas.translation import LanguageDescriptor, TranslationResponse
from app.services.language_codes import AUTO_DETECT, normalize_language_code

logger = logging.getLogger(__name__)

AUTO_DETECT_DESCRIPTOR = LanguageDescriptor(language=AUTO_DETECT, name="Detect language")
_PREVIEW_LENGTH = 30


class TranslationValidationError(ValueError):
    """Raised when a translation request is missing a required field."""


class TranslationGateway:
    """Bridge between the public translation API and Azure Translator."""

    def __init__(self, client: AzureTranslatorClient) -> None:
        self._client = client

    async def translate(
        self,
        text: str | None,
        source_lang: str | None,
        target_lang: str | None,
    ) -> TranslationResponse:
        if not text:
            raise TranslationValidationError("Text is required")
        if not target_lang:
            raise TranslationValidationError("Target language is required")

        source_code = normalize_language_code(source_lang)
        target_code = normalize_language_code(target_lang)
        logger.info(
            "Translating text from %s (%s) to %s (%s): %s",
            source_lang,
            source_code,
            target_lang,
            target_code,
            _preview(text),
        )

        send_source = source_lang != AUTO_DETECT and bool(source_code)
        payload = await self._client.translate(
            [text],
            to=target_code,
            source=source_code if send_source else None,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Azure Translator response: %s", json.dumps(payload, ensure_ascii=False, indent=2))

        translated, detected = _extract_translation(payload)
        return TranslationResponse(
            translation=translated,
            detected_language=detected,
            changed=text.lower().strip() != translated.lower().strip(),
        )

    async def list_languages(self) -> list[LanguageDescriptor]:
        languages = await self._fetch_catalog()
        logger.info("Retrieved %d languages", len(languages))
        return languages

    async def list_source_languages(self) -> list[LanguageDescriptor]:
        languages = await self._fetch_catalog()
        logger.info("Retrieved %d source languages (plus auto-detect)", len(languages))
        return [AUTO_DETECT_DESCRIPTOR.model_copy(), *languages]

    async def list_target_languages(self) -> list[LanguageDescriptor]:
        languages = await self._fetch_catalog()
        logger.info("Retrieved %d target languages", len(languages))
        return languages

    async def _fetch_catalog(self) -> list[LanguageDescriptor]:
        payload = await self._client.get_languages(scope="translation")
        directory = payload.get("translation") if isinstance(payload, dict) else None
        if not isinstance(directory, dict):
            raise UpstreamError("Invalid response from Azure Languages API")

        languages: list[LanguageDescriptor] = []
        for code, entry in directory.items():
            name = entry.get("name") if isinstance(entry, dict) else None
            if not isinstance(name, str):
                raise UpstreamError(f"Language entry {code!r} is missing a display name")
            languages.append(LanguageDescriptor(language=code, name=name))
        return languages


def _extract_translation(payload: Any) -> tuple[str, str]:
    """Return the first translated text and the detected source language, if any."""
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        raise UpstreamError("No translation received from Azure Translator API")

    first = payload[0]
    translations = first.get("translations")
    if not isinstance(translations, list) or not translations or not isinstance(translations[0], dict):
        raise UpstreamError("No translation received from Azure Translator API")

    translated = translations[0].get("text")
    if not isinstance(translated, str):
        raise UpstreamError("No translation received from Azure Translator API")

    detected = ""
    detected_info = first.get("detectedLanguage")
    if isinstance(detected_info, dict) and isinstance(detected_info.get("language"), str):
        detected = detected_info["language"]
    return translated, detected


def _preview(text: str) -> str:
    if len(text) > _PREVIEW_LENGTH:
        return f"{text[:_PREVIEW_LENGTH]}..."
    return text
