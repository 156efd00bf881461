import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_translation_gateway
from app.api.errors import ApiError
from app.integrations.translator import UpstreamError
from app.schemas.translation import ErrorResponse, TranslationRequest, TranslationResponse
from app.services.translation import TranslationGateway, TranslationValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/translate",
    response_model=TranslationResponse,
    status_code=status.HTTP_200_OK,
    summary="Translate text between languages.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate_text(
    payload: TranslationRequest,
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> TranslationResponse:
    try:
        return await gateway.translate(
            payload.text,
            payload.source_lang,
            payload.target_lang,
        )
    except TranslationValidationError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, str(exc)) from exc
    except UpstreamError as exc:
        logger.warning("Translation error: %s", exc.details)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Translation failed",
            details=exc.details,
        ) from exc
