"""
LibreTranslate Translator

Client for a self-hosted or public LibreTranslate server.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, List, Optional, Tuple

import aiohttp

from .base import BaseTranslator, LanguageDescriptor, SleepFunc, TranslationResult
from .errors import (
    InvalidInput,
    ProviderError,
    RequestBuildFailed,
    ResponseParseFailed,
    TransportFailed,
)


class LibreTranslateTranslator(BaseTranslator):
    """LibreTranslate API translator.

    Features:
    - Single and chunked batch translation
    - Optional API key for servers that require one
    - Language discovery and a health check on ``/languages``
    - Typed errors carrying the HTTP status and body
    """

    name = "libretranslate"

    TRANSLATE_TIMEOUT = 30.0
    LANGUAGES_TIMEOUT = 10.0
    HEALTH_TIMEOUT = 5.0

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        translate_timeout: float | None = None,
        languages_timeout: float | None = None,
        health_timeout: float | None = None,
        chunk_size: int | None = None,
        chunk_pause: float | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("LibreTranslate base URL is required")

        super().__init__(chunk_size=chunk_size, chunk_pause=chunk_pause, sleep=sleep)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or None
        self.translate_timeout = self.TRANSLATE_TIMEOUT if translate_timeout is None else translate_timeout
        self.languages_timeout = self.LANGUAGES_TIMEOUT if languages_timeout is None else languages_timeout
        self.health_timeout = self.HEALTH_TIMEOUT if health_timeout is None else health_timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def translate_url(self) -> str:
        return f"{self.base_url}/translate"

    @property
    def languages_url(self) -> str:
        return f"{self.base_url}/languages"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
            self._session = aiohttp.ClientSession(headers=headers)
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session:
            await self._session.close()
            self._session = None

    def _build_payload(self, text: str, source_lang: str, target_lang: str) -> bytes:
        payload = {
            "q": text,
            "source": source_lang,
            "target": target_lang,
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key
        try:
            return json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestBuildFailed(f"Failed to build translation request: {e}", e) from e

    @staticmethod
    def _decode(body: str) -> Any:
        try:
            return json.loads(body)
        except ValueError as e:
            raise ResponseParseFailed(f"Failed to parse response: {e}", e) from e

    async def _request(
        self, method: str, url: str, *, timeout: float, data: bytes | None = None
    ) -> Tuple[int, str]:
        session = await self._get_session()
        try:
            async with session.request(
                method,
                url,
                data=data,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                return resp.status, await resp.text()
        except UnicodeDecodeError as e:
            raise ResponseParseFailed(f"Response from {url} is not valid text: {e}", e) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportFailed(f"Failed to call {url}: {e!r}", e) from e

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Translate a single text using LibreTranslate."""
        if not text:
            raise InvalidInput("Text cannot be empty")

        # "auto" is forwarded as-is, the server detects the language
        data = self._build_payload(text, source_lang, target_lang)
        status, body = await self._request("POST", self.translate_url, timeout=self.translate_timeout, data=data)

        if status != 200:
            raise ProviderError(
                f"Translation API returned status {status}: {body[:200]}",
                status=status,
                body=body,
            )

        payload = self._decode(body)
        if not isinstance(payload, dict) or not isinstance(payload.get("translatedText"), str):
            raise ResponseParseFailed(f"Unexpected translation response: {body[:200]}")
        if not payload["translatedText"]:
            raise ResponseParseFailed("Translation API returned an empty translation")

        return TranslationResult(
            translated_text=payload["translatedText"],
            detected_source_lang=self._detected_language(payload),
        )

    @staticmethod
    def _detected_language(payload: dict) -> Optional[str]:
        detected = payload.get("detectedLanguageSource")
        if isinstance(detected, str) and detected:
            return detected
        # LibreTranslate reports {"language": "en", "confidence": 90} for source="auto"
        detected = payload.get("detectedLanguage")
        if isinstance(detected, dict) and isinstance(detected.get("language"), str):
            return detected["language"]
        return None

    async def get_supported_languages(self) -> List[LanguageDescriptor]:
        """Fetch the language list from ``/languages``."""
        status, body = await self._request("GET", self.languages_url, timeout=self.languages_timeout)

        if status != 200:
            raise ProviderError(f"Languages API returned status {status}", status=status, body=body)

        payload = self._decode(body)
        if not isinstance(payload, list):
            raise ResponseParseFailed(f"Expected a list of languages, got: {body[:200]}")

        languages = []
        for item in payload:
            if not isinstance(item, dict) or not isinstance(item.get("code"), str):
                raise ResponseParseFailed(f"Malformed language entry: {item!r}")
            targets = item.get("targets")
            if not isinstance(targets, list):
                targets = []
            languages.append(
                LanguageDescriptor(
                    code=item["code"],
                    name=str(item.get("name") or ""),
                    targets=tuple(str(target) for target in targets),
                )
            )
        return languages

    async def is_available(self) -> bool:
        """Check ``/languages``; any failure is logged and reported as ``False``."""
        try:
            session = await self._get_session()
            async with session.get(
                self.languages_url,
                timeout=aiohttp.ClientTimeout(total=self.health_timeout),
            ) as resp:
                if resp.status != 200:
                    self.logger.warning(f"LibreTranslate health check failed: HTTP {resp.status}")
                    return False
                return True
        except Exception as e:  # noqa: BLE001
            self.logger.warning(f"LibreTranslate health check failed: {e!r}")
            return False

    def __del__(self) -> None:
        """Cleanup on deletion."""
        session = getattr(self, "_session", None)
        if session and not session.closed:
            try:
                loop = asyncio.get_running_loop()
                loop.create_task(self.close())
            except RuntimeError:
                pass
