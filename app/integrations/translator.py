from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Sequence

import httpx

from app.core.config import AppSettings


logger = logging.getLogger(__name__)

API_VERSION = "3.0"


class UpstreamError(RuntimeError):
    """Raised when Azure Translator is unreachable or replies with an unusable payload."""

    def __init__(
        self,
        message: str,
        *,
        details: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details if details is not None else message
        self.status_code = status_code


class AzureTranslatorClient:
    """Thin wrapper around the Azure Translator v3 REST API."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._subscription_key = (
            settings.azure_translator_key.get_secret_value()
            if settings.azure_translator_key
            else None
        )
        self._region = settings.azure_region
        self._endpoint = settings.azure_endpoint.rstrip("/")
        self._display_locale = settings.languages_display_locale
        self._deadline = settings.translator_timeout_seconds
        timeout = httpx.Timeout(settings.translator_timeout_seconds)
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=timeout))

    @property
    def is_configured(self) -> bool:
        return bool(self._subscription_key)

    async def translate(
        self,
        texts: Sequence[str],
        *,
        to: str,
        source: str | None = None,
    ) -> Any:
        """Translate a batch of texts and return the decoded provider reply."""
        if not self._subscription_key:
            raise UpstreamError("Azure Translator credentials are not configured.")

        params = {"api-version": API_VERSION, "to": to}
        if source:
            params["from"] = source
        headers = {
            "Ocp-Apim-Subscription-Key": self._subscription_key,
            "Ocp-Apim-Subscription-Region": self._region,
            "Content-Type": "application/json",
        }
        body = [{"text": text} for text in texts]

        try:
            response = await asyncio.wait_for(
                self._post("/translate", params=params, headers=headers, json=body),
                timeout=self._deadline,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise UpstreamError("Azure Translator request timed out.") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Azure Translator request failed: {exc}") from exc

        return _decode_response(response)

    async def get_languages(self, *, scope: str = "translation") -> Any:
        """Fetch the provider's language directory for the given scope."""
        params = {"api-version": API_VERSION, "scope": scope}
        headers = {"Accept-Language": self._display_locale}

        try:
            response = await asyncio.wait_for(
                self._get("/languages", params=params, headers=headers),
                timeout=self._deadline,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise UpstreamError("Azure Translator languages request timed out.") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Azure Translator languages request failed: {exc}") from exc

        return _decode_response(response)

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        async with self._client_factory() as client:
            return await client.post(f"{self._endpoint}{path}", **kwargs)

    async def _get(self, path: str, **kwargs: Any) -> httpx.Response:
        async with self._client_factory() as client:
            return await client.get(f"{self._endpoint}{path}", **kwargs)


def _decode_response(response: httpx.Response) -> Any:
    if response.status_code < 200 or response.status_code >= 300:
        details = _extract_error_payload(response)
        logger.warning(
            "Azure Translator replied with status %s: %s",
            response.status_code,
            details,
        )
        raise UpstreamError(
            f"Azure Translator request failed with status {response.status_code}.",
            details=details,
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError("Azure Translator returned a non-JSON response.") from exc


def _extract_error_payload(response: httpx.Response) -> Any:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if payload:
        return payload
    return response.text or f"Azure Translator request failed with status {response.status_code}."
