from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def chunk_by_size(items: Sequence[T], *, size: int) -> List[List[T]]:
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    return [list(items[start:start + size]) for start in range(0, len(items), size)]
