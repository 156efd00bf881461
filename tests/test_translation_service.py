from __future__ import annotations

from typing import Any

import pytest

from app.integrations.translator import UpstreamError
from app.services.translation import TranslationGateway, TranslationValidationError


LANGUAGE_DIRECTORY = {
    "translation": {
        "af": {"name": "Afrikaans", "nativeName": "Afrikaans", "dir": "ltr"},
        "zh-Hans": {"name": "Chinese Simplified", "nativeName": "中文 (简体)", "dir": "ltr"},
        "de": {"name": "German", "nativeName": "Deutsch", "dir": "ltr"},
        "ar": {"name": "Arabic", "nativeName": "العربية", "dir": "rtl"},
    }
}


class StubTranslatorClient:
    """Records gateway calls and replays canned provider payloads."""

    def __init__(self, *, translation: Any = None, languages: Any = None) -> None:
        self.translation = translation
        self.languages = languages
        self.translate_calls: list[dict[str, Any]] = []
        self.language_calls: list[str] = []

    async def translate(self, texts, *, to: str, source: str | None = None) -> Any:
        self.translate_calls.append({"texts": list(texts), "to": to, "source": source})
        if isinstance(self.translation, Exception):
            raise self.translation
        return self.translation

    async def get_languages(self, *, scope: str = "translation") -> Any:
        self.language_calls.append(scope)
        if isinstance(self.languages, Exception):
            raise self.languages
        return self.languages


def _reply(text: str, detected: str | None = None) -> list[dict[str, Any]]:
    item: dict[str, Any] = {"translations": [{"text": text, "to": "xx"}]}
    if detected is not None:
        item["detectedLanguage"] = {"language": detected, "score": 1.0}
    return [item]


@pytest.mark.asyncio
async def test_translate_auto_detect_omits_source() -> None:
    client = StubTranslatorClient(translation=_reply("Hola", detected="en"))
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    result = await gateway.translate("Hello", "auto", "ES")

    assert client.translate_calls == [{"texts": ["Hello"], "to": "es", "source": None}]
    assert result.translation == "Hola"
    assert result.detected_language == "en"
    assert result.changed is True


@pytest.mark.asyncio
async def test_translate_missing_source_behaves_like_auto() -> None:
    client = StubTranslatorClient(translation=_reply("Hola", detected="en"))
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    await gateway.translate("Hello", None, "es")

    assert client.translate_calls[-1]["source"] is None


@pytest.mark.asyncio
async def test_translate_normalizes_explicit_source_and_target() -> None:
    client = StubTranslatorClient(translation=_reply("你好"))
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    result = await gateway.translate("Hello", "EN-US", "ZH")

    assert client.translate_calls[-1] == {"texts": ["Hello"], "to": "zh-Hans", "source": "en"}
    assert result.detected_language == ""


@pytest.mark.parametrize(
    ("text", "translated", "changed"),
    [
        ("Hello ", "hello", False),
        ("  HELLO", "Hello\n", False),
        ("Hello", "Bonjour", True),
        ("Hello, world", "Hello world", True),
    ],
)
@pytest.mark.asyncio
async def test_changed_ignores_case_and_surrounding_whitespace(
    text: str, translated: str, changed: bool
) -> None:
    gateway = TranslationGateway(StubTranslatorClient(translation=_reply(translated)))  # type: ignore[arg-type]

    result = await gateway.translate(text, "en", "fr")

    assert result.changed is changed


@pytest.mark.parametrize("text", ["", None])
@pytest.mark.parametrize(("source", "target"), [("auto", "es"), ("EN-US", None), (None, "")])
@pytest.mark.asyncio
async def test_translate_requires_text_before_calling_provider(
    text: str | None, source: str | None, target: str | None
) -> None:
    client = StubTranslatorClient(translation=_reply("unused"))
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    with pytest.raises(TranslationValidationError, match="Text is required"):
        await gateway.translate(text, source, target)
    assert client.translate_calls == []


@pytest.mark.asyncio
async def test_translate_requires_target_language() -> None:
    client = StubTranslatorClient(translation=_reply("unused"))
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    with pytest.raises(TranslationValidationError, match="Target language is required"):
        await gateway.translate("Hello", "auto", "")
    assert client.translate_calls == []


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {},
        [{}],
        ["not-a-dict"],
        [{"translations": []}],
        [{"translations": [{}]}],
        [{"translations": [{"text": None}]}],
        [{"detectedLanguage": {"language": "en"}}],
    ],
)
@pytest.mark.asyncio
async def test_translate_rejects_malformed_replies(payload: Any) -> None:
    gateway = TranslationGateway(StubTranslatorClient(translation=payload))  # type: ignore[arg-type]

    with pytest.raises(UpstreamError):
        await gateway.translate("Hello", "auto", "es")


@pytest.mark.asyncio
async def test_translate_takes_first_variant_and_ignores_bad_detection() -> None:
    payload = [
        {
            "detectedLanguage": "en",
            "translations": [{"text": "Hola"}, {"text": "Buenas"}],
        }
    ]
    gateway = TranslationGateway(StubTranslatorClient(translation=payload))  # type: ignore[arg-type]

    result = await gateway.translate("Hello", "auto", "es")

    assert result.translation == "Hola"
    assert result.detected_language == ""


@pytest.mark.asyncio
async def test_translate_propagates_upstream_errors() -> None:
    error = UpstreamError("boom", details={"error": {"code": 429001}})
    gateway = TranslationGateway(StubTranslatorClient(translation=error))  # type: ignore[arg-type]

    with pytest.raises(UpstreamError) as excinfo:
        await gateway.translate("Hello", "auto", "es")
    assert excinfo.value.details == {"error": {"code": 429001}}


@pytest.mark.asyncio
async def test_catalog_preserves_provider_order() -> None:
    client = StubTranslatorClient(languages=LANGUAGE_DIRECTORY)
    gateway = TranslationGateway(client)  # type: ignore[arg-type]

    languages = await gateway.list_languages()
    targets = await gateway.list_target_languages()

    assert [item.language for item in languages] == ["af", "zh-Hans", "de", "ar"]
    assert [item.name for item in languages] == [
        "Afrikaans",
        "Chinese Simplified",
        "German",
        "Arabic",
    ]
    assert targets == languages
    assert client.language_calls == ["translation", "translation"]


@pytest.mark.asyncio
async def test_source_catalog_prepends_auto_detect() -> None:
    gateway = TranslationGateway(StubTranslatorClient(languages=LANGUAGE_DIRECTORY))  # type: ignore[arg-type]

    languages = await gateway.list_languages()
    sources = await gateway.list_source_languages()

    assert len(sources) == len(languages) + 1
    assert sources[0].model_dump() == {"language": "auto", "name": "Detect language"}
    assert sources[1:] == languages


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {},
        {"dictionary": {}},
        {"translation": ["de"]},
        {"translation": {"de": {"nativeName": "Deutsch"}}},
        {"translation": {"de": "German"}},
    ],
)
@pytest.mark.asyncio
async def test_catalog_rejects_malformed_directory(payload: Any) -> None:
    gateway = TranslationGateway(StubTranslatorClient(languages=payload))  # type: ignore[arg-type]

    for operation in (
        gateway.list_languages,
        gateway.list_source_languages,
        gateway.list_target_languages,
    ):
        with pytest.raises(UpstreamError):
            await operation()
