from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

KEY_SEPARATOR = "."
ESCAPE = "\\"


def escape_segment(segment: str, *, dots: bool = True) -> str:
    escaped = segment.replace(ESCAPE, ESCAPE * 2)
    return escaped.replace(KEY_SEPARATOR, ESCAPE + KEY_SEPARATOR) if dots else escaped


def split_key(key: str) -> List[str]:
    """Split a dotted key into its path; ``\\.`` is a literal dot."""
    parts: List[str] = []
    current: List[str] = []
    chars = iter(key)
    for char in chars:
        if char == ESCAPE:
            current.append(next(chars, ESCAPE))
        elif char == KEY_SEPARATOR:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _flatten(data: Mapping[str, Any], prefix: str = "", *, escape_dots: bool = True) -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in data.items():
        segment = escape_segment(str(key), dots=escape_dots)
        full_key = f"{prefix}{KEY_SEPARATOR}{segment}" if prefix else segment
        if isinstance(value, Mapping):
            flat.update(_flatten(value, full_key))
        elif isinstance(value, str):
            flat[full_key] = value
        elif value is None:
            flat[full_key] = ""
        else:
            raise ValueError(f"Catalog value for {full_key!r} is not a string")
    return flat


def _unflatten(entries: Mapping[str, str]) -> Dict[str, Any]:
    tree: Dict[str, Any] = {}
    for key, value in entries.items():
        node = tree
        *parents, leaf = split_key(key)
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise ValueError(f"Catalog key {key!r} conflicts with a string value")
        if isinstance(node.get(leaf), dict):
            raise ValueError(f"Catalog key {key!r} conflicts with a nested group")
        node[leaf] = value
    return tree


class LocaleCatalog:
    """A JSON translation catalog for one language.

    Nested objects are exposed as dotted keys, with dots inside a key
    escaped as ``\\.``, and written back in the shape they were read in.
    Keys of a flat catalog are kept as they are, so a flat ``"menu.file"``
    matches the nested path ``menu`` / ``file``.
    """

    def __init__(self, entries: Dict[str, str], source_path: Path | None = None, *, nested: bool = False):
        self.entries = entries
        self.source_path = source_path
        self.nested = nested

    @classmethod
    def from_file(cls, file_path: str | Path) -> "LocaleCatalog":
        path = Path(file_path)
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return cls.from_data(data, source_path=path)

    @classmethod
    def from_data(cls, data: Any, source_path: Path | None = None) -> "LocaleCatalog":
        if not isinstance(data, dict):
            raise ValueError("Catalog must be a JSON object")
        nested = any(isinstance(value, Mapping) for value in data.values())
        return cls(_flatten(data, escape_dots=nested), source_path=source_path, nested=nested)

    @classmethod
    def empty(cls, source_path: Path | None = None) -> "LocaleCatalog":
        return cls({}, source_path=source_path)

    def apply_translations(self, translations: Mapping[str, str]) -> None:
        self.entries.update(translations)

    def to_data(self) -> Dict[str, Any]:
        if self.nested:
            return _unflatten(self.entries)
        return {KEY_SEPARATOR.join(split_key(key)): value for key, value in self.entries.items()}

    def write(self, output_path: str | Path) -> Path:
        data = self.to_data()
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
            handle.write("\n")
        return path

    def backup_original(self, suffix: str = ".bak") -> Path:
        if not self.source_path or not self.source_path.exists():
            raise ValueError("Cannot backup because source_path is missing")
        backup_path = self.source_path.with_suffix(self.source_path.suffix + suffix)
        backup_path.write_bytes(self.source_path.read_bytes())
        return backup_path
