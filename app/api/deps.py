from app.core.config import get_settings
from app.integrations.translator import AzureTranslatorClient
from app.services.translation import TranslationGateway

_translator_client: AzureTranslatorClient | None = None
_translation_gateway: TranslationGateway | None = None


async def get_translator_client() -> AzureTranslatorClient:
    """Provide the AzureTranslatorClient singleton."""
    global _translator_client
    if _translator_client is None:
        _translator_client = AzureTranslatorClient(get_settings())
    return _translator_client


async def get_translation_gateway() -> TranslationGateway:
    """Provide singleton TranslationGateway instance."""
    global _translation_gateway
    if _translation_gateway is None:
        _translation_gateway = TranslationGateway(await get_translator_client())
    return _translation_gateway
