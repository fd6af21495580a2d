from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping

from utils.locale_codes import AUTO, is_auto, to_provider_code

from .base import BaseTranslator
from .errors import InvalidInput, TranslationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AutoFillLanguageRequest:
    target_lang: str
    source_lang: str | None = None

    def __post_init__(self) -> None:
        if not self.target_lang or not self.target_lang.strip():
            raise InvalidInput("target_lang is required")


@dataclass(slots=True)
class AutoFillLanguageResponse:
    total: int
    success_count: int
    failed_count: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(slots=True)
class AutoFillOutcome:
    response: AutoFillLanguageResponse
    filled: Dict[str, str] = field(default_factory=dict)
    failures: Dict[str, TranslationError] = field(default_factory=dict)


def find_missing_keys(source_entries: Mapping[str, str], target_entries: Mapping[str, str]) -> List[str]:
    """Keys with source text whose target value is absent or blank, in source order."""
    missing: List[str] = []
    for key, text in source_entries.items():
        if not text or not text.strip():
            continue
        existing = target_entries.get(key)
        if existing is None or not existing.strip():
            missing.append(key)
    return missing


class AutoFillService:
    """Fill the untranslated keys of one language from a source language."""

    def __init__(self, translator: BaseTranslator, *, default_source_lang: str = "en") -> None:
        self.translator = translator
        self.default_source_lang = default_source_lang

    def resolve_source_lang(self, request: AutoFillLanguageRequest) -> str:
        return (request.source_lang or "").strip() or self.default_source_lang

    async def fill(
        self,
        request: AutoFillLanguageRequest,
        source_entries: Mapping[str, str],
        target_entries: Mapping[str, str],
    ) -> AutoFillOutcome:
        source_lang = self.resolve_source_lang(request)
        target_lang = request.target_lang.strip()
        if source_lang == target_lang:
            raise InvalidInput(f"Source and target language are both {target_lang}")

        missing = find_missing_keys(source_entries, target_entries)
        if not missing:
            return AutoFillOutcome(
                response=AutoFillLanguageResponse(
                    total=0,
                    success_count=0,
                    failed_count=0,
                    message=f"No missing translations for {target_lang}",
                )
            )

        provider_source = AUTO if is_auto(source_lang) else to_provider_code(source_lang)
        provider_target = to_provider_code(target_lang)
        logger.info(
            f"Auto-filling {len(missing)} keys {source_lang} -> {target_lang} "
            f"({provider_source} -> {provider_target})"
        )

        batch = await self.translator.translate_batch(
            [source_entries[key] for key in missing],
            provider_source,
            provider_target,
        )

        filled = {
            key: result.translated_text
            for key, result in zip(missing, batch.results)
            if result is not None
        }
        failures = {missing[failure.index]: failure.error for failure in batch.failures}

        message = f"Auto-filled {len(filled)}/{len(missing)} translations for {target_lang}"
        if failures:
            message += f", {len(failures)} failed"
        response = AutoFillLanguageResponse(
            total=len(missing),
            success_count=len(filled),
            failed_count=len(failures),
            message=message,
        )
        return AutoFillOutcome(response=response, filled=filled, failures=failures)
