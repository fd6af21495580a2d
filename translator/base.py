from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from utils.batching import chunk_by_size

from .errors import TranslationError

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class TranslationResult:
    translated_text: str
    detected_source_lang: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    code: str
    name: str
    targets: Tuple[str, ...] = ()


@dataclass(slots=True)
class BatchFailure:
    index: int
    text: str
    error: TranslationError


@dataclass(slots=True)
class BatchResult:
    results: List[Optional[TranslationResult]] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.results if item is not None)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def __len__(self) -> int:
        return len(self.results)


class BaseTranslator(ABC):
    name: str = "base"
    chunk_size: int = 10
    chunk_pause: float = 0.1

    def __init__(
        self,
        *,
        chunk_size: int | None = None,
        chunk_pause: float | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        if chunk_size is not None:
            self.chunk_size = chunk_size
        if chunk_pause is not None:
            self.chunk_pause = chunk_pause
        self._sleep: SleepFunc = sleep or asyncio.sleep
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Translate a single text; ``source_lang`` may be ``"auto"``."""

    @abstractmethod
    async def get_supported_languages(self) -> List[LanguageDescriptor]:
        """Return the languages the provider can translate."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Health check. Must never raise."""

    async def close(self) -> None:
        """Release network resources held by the translator."""

    async def __aenter__(self) -> "BaseTranslator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def translate_batch(
        self, texts: Sequence[str], source_lang: str, target_lang: str
    ) -> BatchResult:
        """Translate texts one by one in chunks, pausing after every chunk.

        A failing text leaves ``None`` in its slot and a ``BatchFailure``
        entry; the rest of the batch still runs.
        """
        batch = BatchResult()
        if not texts:
            return batch

        offset = 0
        for chunk in chunk_by_size(texts, size=self.chunk_size):
            for text in chunk:
                try:
                    result = await self.translate(text, source_lang, target_lang)
                except TranslationError as exc:
                    self.logger.warning(f"Failed to translate item {offset}: {exc}")
                    batch.failures.append(BatchFailure(index=offset, text=text, error=exc))
                    result = None
                batch.results.append(result)
                offset += 1
            await self._sleep(self.chunk_pause)

        self.logger.debug(f"Batch translation: {batch.success_count}/{len(texts)} successful")
        return batch
