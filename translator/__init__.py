"""
LocaleFill Translation Engines

Supported engines:
- LibreTranslate (self-hosted or public server, optional API key)
"""
from .base import (
    BaseTranslator,
    BatchFailure,
    BatchResult,
    LanguageDescriptor,
    TranslationResult,
)
from .errors import (
    InvalidInput,
    ProviderError,
    RequestBuildFailed,
    ResponseParseFailed,
    TranslationError,
    TranslationFailed,
    TransportFailed,
)
from .libretranslate import LibreTranslateTranslator
from .factory import build_translator, get_available_engines, AVAILABLE_ENGINES
from .autofill import (
    AutoFillLanguageRequest,
    AutoFillLanguageResponse,
    AutoFillOutcome,
    AutoFillService,
)

__all__ = [
    "BaseTranslator",
    "BatchFailure",
    "BatchResult",
    "LanguageDescriptor",
    "TranslationResult",
    "InvalidInput",
    "ProviderError",
    "RequestBuildFailed",
    "ResponseParseFailed",
    "TranslationError",
    "TranslationFailed",
    "TransportFailed",
    "LibreTranslateTranslator",
    "build_translator",
    "get_available_engines",
    "AVAILABLE_ENGINES",
    "AutoFillLanguageRequest",
    "AutoFillLanguageResponse",
    "AutoFillOutcome",
    "AutoFillService",
]
