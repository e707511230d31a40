"""Shared helpers for reading contact exports from disk."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from contactor.core.errors import ContactSourceError


def read_text(path: Path) -> str:
    """Read UTF-8 text from disk."""

    return path.read_text(encoding="utf-8")


def read_contact_entries(path: Path) -> List[Any]:
    """Return the raw contact entries stored in a JSON export.

    The export is either a list of contacts or an object holding that list
    under ``"contacts"``.
    """

    try:
        payload = json.loads(read_text(path))
    except OSError as exc:
        raise ContactSourceError(f"Cannot read contacts export {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContactSourceError(f"{path} is not valid JSON: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("contacts", [])
    if not isinstance(payload, list):
        raise ContactSourceError(f"{path} does not contain a list of contacts")
    return payload


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def require_object(item: Any, what: str) -> Dict[str, Any]:
    """Return ``item`` when it is a JSON object, else raise ``ContactSourceError``."""

    if not isinstance(item, dict):
        raise ContactSourceError(f"Expected {what} to be an object, got {type(item).__name__}")
    return item


def require_list(items: Any, what: str) -> List[Any]:
    """Return ``items`` as a list; ``None`` is an empty list."""

    if items is None:
        return []
    if not isinstance(items, list):
        raise ContactSourceError(f"Expected {what} to be a list, got {type(items).__name__}")
    return items


def get_text(entry: Dict[str, Any], key: str) -> str:
    return as_text(entry.get(key))
