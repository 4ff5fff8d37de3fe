"""Shared TOML directory loading."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Callable, Hashable, TypeVar
import tomllib

T = TypeVar("T")


def load_toml_directory(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    identity: Callable[[T], Hashable],
    duplicate_label: str,
) -> list[T]:
    """Parse every TOML file in a directory, rejecting duplicate identities."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    documents: list[T] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            raw = tomllib.load(file)
        documents.append(parser(raw, file_path))

    counts = Counter(identity(document) for document in documents)
    duplicates = sorted(str(key) for key, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate {duplicate_label} found in {config_dir}: {duplicates}")

    return documents


def read_str_list(raw: dict[str, Any], key: str, *, file_path: Path, section: str) -> list[str]:
    value = raw.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{file_path}: [{section}].{key} must be a list of strings")
    return value


__all__ = ["load_toml_directory", "read_str_list"]
