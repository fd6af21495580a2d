"""
In-memory test doubles for translators and the batch pause.
"""

from typing import Callable, List

from translator.base import BaseTranslator, LanguageDescriptor, TranslationResult
from translator.errors import InvalidInput, ProviderError


class RecordingSleep:
    """Fake clock for the inter-chunk pause.

    Records each requested delay together with an optional snapshot
    (e.g. how many requests the provider had seen at that moment).
    """

    def __init__(self, snapshot: Callable[[], int] | None = None):
        self.delays: List[float] = []
        self.snapshots: List[int] = []
        self._snapshot = snapshot

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self._snapshot is not None:
            self.snapshots.append(self._snapshot())


class FakeTranslator(BaseTranslator):
    """Translator that prefixes texts with the target code.

    Texts listed in ``failing`` raise ``ProviderError``.
    """

    name = "fake"

    def __init__(self, *, failing: set[str] | None = None, **kwargs):
        super().__init__(**kwargs)
        self.failing = failing or set()
        self.calls: List[tuple[str, str, str]] = []
        self.available = True
        self.languages = [LanguageDescriptor(code="en", name="English"), LanguageDescriptor(code="zh", name="Chinese")]
        self.closed = False

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        if not text:
            raise InvalidInput("Text cannot be empty")
        self.calls.append((text, source_lang, target_lang))
        if text in self.failing:
            raise ProviderError("Translation API returned status 500: boom", status=500, body="boom")
        detected = "en" if source_lang == "auto" else None
        return TranslationResult(translated_text=f"[{target_lang}] {text}", detected_source_lang=detected)

    async def get_supported_languages(self) -> List[LanguageDescriptor]:
        return list(self.languages)

    async def is_available(self) -> bool:
        return self.available

    async def close(self) -> None:
        self.closed = True
