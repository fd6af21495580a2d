"""
Translator Factory

Factory for creating translator instances from settings.
Supports: LibreTranslate
"""
from __future__ import annotations

from typing import Optional

from config import SETTINGS, AppSettings
from .base import BaseTranslator, SleepFunc
from .libretranslate import LibreTranslateTranslator


# Available translation engines
AVAILABLE_ENGINES = {
    "libretranslate": "LibreTranslate",
}


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_translator(
    engine_name: str = "libretranslate",
    *,
    url: Optional[str] = None,
    api_key: Optional[str] = None,
    settings: Optional[AppSettings] = None,
    sleep: Optional[SleepFunc] = None,
) -> BaseTranslator:
    """Build a translator instance.

    Args:
        engine_name: Name of the engine (libretranslate)
        url: Override for the provider base URL
        api_key: Override for the provider API key
        settings: Settings to read defaults from (module settings if omitted)
        sleep: Coroutine used for the pause between batch chunks

    Returns:
        BaseTranslator instance

    Raises:
        ValueError: If engine is not supported or no base URL is configured
    """
    engine = engine_name.lower()
    settings = settings or SETTINGS

    if engine == "libretranslate":
        base_url = url or settings.provider.url
        if not base_url:
            raise ValueError("LibreTranslate URL is required. Set LIBRETRANSLATE_URL or pass --url.")
        return LibreTranslateTranslator(
            base_url=base_url,
            api_key=api_key or settings.provider.api_key,
            translate_timeout=settings.timeouts.translate,
            languages_timeout=settings.timeouts.languages,
            health_timeout=settings.timeouts.health,
            chunk_size=settings.batch.chunk_size,
            chunk_pause=settings.batch.chunk_pause,
            sleep=sleep,
        )

    raise ValueError(f"Unsupported translator engine: {engine_name}")
