"""Collection-level helpers and the load, filter, render, export pipeline."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from contactor.core.enumeration import CONTACT_SCHEMA, all_properties
from contactor.core.models import ContactRecord
from contactor.core.rendering import (
    clean_value,
    contact_to_csv,
    contact_to_text,
    csv_header,
    some_property_contains,
)
from contactor.export.sinks import write_excel, write_text
from contactor.ingestion.loader import load_contacts

logger = logging.getLogger(__name__)

CONTACT_HEADERS: List[str] = CONTACT_SCHEMA.labels
TEXT_SEPARATOR = "---\n"
OUTPUT_FORMATS = ("text", "csv")


def filter_contacts(records: Iterable[ContactRecord], search: Optional[str]) -> List[ContactRecord]:
    """Keep the records matching ``search``; an empty search keeps everything."""

    records = list(records)
    if not search:
        return records
    return [record for record in records if some_property_contains(record, search)]


def contact_to_row(record: ContactRecord) -> Dict[str, str]:
    """Convert a record into a header-keyed dictionary of cleaned values."""

    return {label: clean_value(value).strip() for label, value in all_properties(record)}


def contacts_to_rows(records: Iterable[ContactRecord]) -> List[Dict[str, str]]:
    return [contact_to_row(record) for record in records]


def contacts_to_csv(records: Iterable[ContactRecord]) -> str:
    """Render a header line followed by one CSV row per record."""

    lines = [csv_header()]
    lines.extend(contact_to_csv(record) for record in records)
    return "\n".join(lines) + "\n"


def contacts_to_text(records: Iterable[ContactRecord]) -> str:
    """Render each record as a text block, separated by ``---`` lines."""

    return TEXT_SEPARATOR.join(contact_to_text(record) for record in records)


def render_contacts(records: Iterable[ContactRecord], output_format: str = "text") -> str:
    if output_format == "csv":
        return contacts_to_csv(records)
    if output_format == "text":
        return contacts_to_text(records)
    raise ValueError(f"Unsupported output format {output_format!r}; expected one of {OUTPUT_FORMATS}")


def run_export(
    source_path: Path,
    output_format: str = "text",
    search: Optional[str] = None,
    output_path: Optional[Path] = None,
    excel_path: Optional[Path] = None,
) -> str:
    """Load contacts, filter them, and render or export the survivors.

    Returns the rendered document. When ``output_path`` is given the document
    is also written there; ``excel_path`` adds an Excel workbook of the same
    records.
    """

    logger.info("Export starting for %s", source_path)
    records = load_contacts(source_path)
    if not records:
        message = f"No contacts found in {source_path}. Verify the export file is not empty."
        logger.error(message)
        raise ValueError(message)
    logger.info("Loaded %d contacts", len(records))

    records = filter_contacts(records, search)
    if search:
        logger.info("%d contacts match %r", len(records), search)

    document = render_contacts(records, output_format)
    if output_path is not None:
        write_text(document, output_path)
        logger.info("Wrote %s output to %s", output_format, output_path)

    if excel_path is not None:
        write_excel(contacts_to_rows(records), excel_path, headers=CONTACT_HEADERS)
        logger.info("Wrote Excel output to %s", excel_path)

    return document
