"""Sinks that write rendered contacts to files."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_text(document: str, output_path: Path) -> None:
    """Write a rendered text or CSV document as UTF-8."""

    ensure_output_dir(output_path)
    output_path.write_text(document, encoding="utf-8")


def write_excel(
    rows: Iterable[Dict[str, str]],
    output_path: Path,
    headers: Optional[List[str]] = None,
) -> None:
    """Write rows to an Excel workbook using openpyxl.

    ``headers`` fixes the column order; without it the keys of the first row
    are used. Nothing is written when there are no rows and no headers.
    """

    rows = list(rows)
    if headers is None:
        if not rows:
            return
        headers = list(rows[0].keys())

    try:
        from openpyxl import Workbook
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("openpyxl is required for Excel sinks") from exc

    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "contacts"
    sheet.append(headers)
    for row in rows:
        sheet.append([row.get(header, "") for header in headers])
    workbook.save(output_path)
