from .batching import chunk_by_size
from .locale_codes import from_provider_code, is_auto, to_provider_code

__all__ = [
    "chunk_by_size",
    "from_provider_code",
    "is_auto",
    "to_provider_code",
]
