import logging
from typing import Awaitable

from fastapi import APIRouter, Depends, status

from app.api.deps import get_translation_gateway
from app.api.errors import ApiError
from app.integrations.translator import UpstreamError
from app.schemas.translation import ErrorResponse, LanguageDescriptor
from app.services.translation import TranslationGateway

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


async def _catalog_or_error(
    pending: Awaitable[list[LanguageDescriptor]],
    error: str,
) -> list[LanguageDescriptor]:
    try:
        return await pending
    except UpstreamError as exc:
        logger.warning("%s: %s", error, exc.details)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error,
            details=exc.details,
        ) from exc


@router.get(
    "/languages",
    response_model=list[LanguageDescriptor],
    summary="Get all supported languages.",
    responses=_ERROR_RESPONSES,
)
async def list_languages(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> list[LanguageDescriptor]:
    return await _catalog_or_error(gateway.list_languages(), "Failed to fetch languages")


@router.get(
    "/source-languages",
    response_model=list[LanguageDescriptor],
    summary="Get source languages including auto-detect.",
    responses=_ERROR_RESPONSES,
)
async def list_source_languages(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> list[LanguageDescriptor]:
    return await _catalog_or_error(
        gateway.list_source_languages(), "Failed to fetch source languages"
    )


@router.get(
    "/target-languages",
    response_model=list[LanguageDescriptor],
    summary="Get target languages.",
    responses=_ERROR_RESPONSES,
)
async def list_target_languages(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> list[LanguageDescriptor]:
    return await _catalog_or_error(
        gateway.list_target_languages(), "Failed to fetch target languages"
    )
