from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TranslationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, description="Text to translate.")
    source_lang: str | None = Field(
        default=None,
        alias="sourceLang",
        description="Client language code of the text, or 'auto' to let the provider detect it.",
    )
    target_lang: str | None = Field(
        default=None,
        alias="targetLang",
        description="Client language code to translate into.",
    )

    @model_validator(mode="before")
    @classmethod
    def _discard_fields_without_text(cls, data: Any) -> Any:
        # A blank text is rejected as missing whatever the language fields hold.
        if isinstance(data, dict) and _is_blank(data.get("text")):
            return {"text": None}
        return data


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translation: str = Field(..., description="Translated text.")
    detected_language: str = Field(
        default="",
        alias="detectedLanguage",
        description="Provider language code detected for the input, empty when the source was explicit.",
    )
    changed: bool = Field(
        ...,
        description="Whether the translation differs from the input ignoring case and surrounding whitespace.",
    )


class LanguageDescriptor(BaseModel):
    language: str = Field(..., description="Provider language code.")
    name: str = Field(..., description="Human-readable language name.")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Short summary of the failure.")
    details: Any = Field(default=None, description="Provider error payload or diagnostic message.")


def _is_blank(value: Any) -> bool:
    # JSON arrays and objects count as present, even when empty.
    return not isinstance(value, (list, dict)) and not value
