"""
Locale code mapping between the host application and LibreTranslate.

Host codes are underscore-separated (``zh_TW``, ``en_US``); provider codes are
hyphen-separated (``zh-TW``, ``en``). The two tables are maintained by hand:
the reverse table is not the inverse of the forward one. Plain ``zh`` maps
back to ``zh_CN``, and the provider's script variants (``zh-Hans``,
``zh-Hant``) have no forward counterpart.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

AUTO = "auto"

HOST_TO_PROVIDER: Mapping[str, str] = MappingProxyType({
    # Chinese
    "zh": "zh",
    "zh_CN": "zh",
    "zh_TW": "zh-TW",
    "zh_HK": "zh-TW",
    "zh_SG": "zh",
    "zh_MO": "zh-TW",
    # English
    "en": "en",
    "en_US": "en",
    "en_GB": "en",
    "en_CA": "en",
    "en_AU": "en",
    # Spanish
    "es": "es",
    "es_ES": "es",
    "es_MX": "es",
    # French
    "fr": "fr",
    "fr_FR": "fr",
    "fr_CA": "fr",
    # Portuguese
    "pt": "pt",
    "pt_PT": "pt",
    "pt_BR": "pt",
    # German
    "de": "de",
    "de_DE": "de",
    "de_AT": "de",
    "de_CH": "de",
    # Japanese
    "ja": "ja",
    "ja_JP": "ja",
    # Korean
    "ko": "ko",
    "ko_KR": "ko",
    # No regional variants
    "ar": "ar",
    "ru": "ru",
    "it": "it",
    "nl": "nl",
    "pl": "pl",
    "tr": "tr",
    "vi": "vi",
    "th": "th",
    "hi": "hi",
    "id": "id",
    "ms": "ms",
    "uk": "uk",
    "cs": "cs",
    "el": "el",
    "he": "he",
    "ro": "ro",
    "hu": "hu",
    "sv": "sv",
    "da": "da",
    "fi": "fi",
    "no": "no",
    "sk": "sk",
    "bg": "bg",
    "hr": "hr",
    "lt": "lt",
    "lv": "lv",
    "sl": "sl",
    "et": "et",
    "ca": "ca",
    "tl": "tl",
    "bn": "bn",
    "sr": "sr",
    "fa": "fa",
    "ur": "ur",
})

PROVIDER_TO_HOST: Mapping[str, str] = MappingProxyType({
    # Chinese, including the script variants some servers report
    "zh": "zh_CN",
    "zh-Hans": "zh_CN",
    "zh-Hant": "zh_TW",
    "zh-TW": "zh_TW",
    "zh-HK": "zh_HK",
    "zh-SG": "zh_SG",
    "zh-MO": "zh_MO",
    # English
    "en": "en",
    "en-US": "en_US",
    "en-GB": "en_GB",
    "en-CA": "en_CA",
    "en-AU": "en_AU",
    # Spanish
    "es": "es",
    "es-ES": "es_ES",
    "es-MX": "es_MX",
    # French
    "fr": "fr",
    "fr-FR": "fr_FR",
    "fr-CA": "fr_CA",
    # Portuguese
    "pt": "pt",
    "pt-PT": "pt_PT",
    "pt-BR": "pt_BR",
    # German
    "de": "de",
    "de-DE": "de_DE",
    "de-AT": "de_AT",
    "de-CH": "de_CH",
    # Japanese
    "ja": "ja",
    "ja-JP": "ja_JP",
    # Korean
    "ko": "ko",
    "ko-KR": "ko_KR",
    # No regional variants
    "ar": "ar",
    "ru": "ru",
    "it": "it",
    "nl": "nl",
    "pl": "pl",
    "tr": "tr",
    "vi": "vi",
    "th": "th",
    "hi": "hi",
    "id": "id",
    "ms": "ms",
    "uk": "uk",
    "cs": "cs",
    "el": "el",
    "he": "he",
    "ro": "ro",
    "hu": "hu",
    "sv": "sv",
    "da": "da",
    "fi": "fi",
    "no": "no",
    "sk": "sk",
    "bg": "bg",
    "hr": "hr",
    "lt": "lt",
    "lv": "lv",
    "sl": "sl",
    "et": "et",
    "ca": "ca",
    "tl": "tl",
    "bn": "bn",
    "sr": "sr",
    "fa": "fa",
    "ur": "ur",
})


def is_auto(code: str | None) -> bool:
    return bool(code) and code.lower() == AUTO


def to_provider_code(host_code: str) -> str:
    """Map a host locale code to the provider's code.

    Unknown codes are returned unchanged since they may already be valid
    provider codes.
    """
    return HOST_TO_PROVIDER.get(host_code, host_code)


def from_provider_code(provider_code: str) -> str:
    """Map a provider locale code back to a host locale code.

    Unknown codes fall back to their two-letter base language, with any
    Chinese variant resolving to ``zh_CN``.
    """
    mapped = PROVIDER_TO_HOST.get(provider_code)
    if mapped is not None:
        return mapped
    if len(provider_code) < 2:
        return provider_code
    base = provider_code[:2]
    if base == "zh":
        return "zh_CN"
    return base
