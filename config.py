from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(slots=True)
class ProviderSettings:
    url: str = field(default_factory=lambda: os.getenv("LIBRETRANSLATE_URL", "http://localhost:5000"))
    api_key: str | None = field(default_factory=lambda: os.getenv("LIBRETRANSLATE_API_KEY") or None)


@dataclass(slots=True)
class TimeoutSettings:
    translate: float = 30.0
    languages: float = 10.0
    health: float = 5.0


@dataclass(slots=True)
class BatchSettings:
    chunk_size: int = 10
    chunk_pause: float = 0.1


@dataclass(slots=True)
class AppSettings:
    provider: ProviderSettings = field(default_factory=ProviderSettings)
    timeouts: TimeoutSettings = field(default_factory=TimeoutSettings)
    batch: BatchSettings = field(default_factory=BatchSettings)
    default_source_lang: str = field(default_factory=lambda: os.getenv("LOCALEFILL_SOURCE", "en"))
    log_file: Path | None = field(default_factory=lambda: _optional_path("LOCALEFILL_LOG_FILE"))


SETTINGS = AppSettings()
