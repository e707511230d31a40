"""Load every contact from a JSON export into contact records."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from contactor.core.errors import ContactSourceError
from contactor.core.models import ContactRecord
from contactor.ingestion.common import read_contact_entries
from contactor.ingestion.contacts import record_from_contact

logger = logging.getLogger(__name__)

_INGESTION_ALERTS: list[str] = []


def load_contacts(source_path: Path) -> List[ContactRecord]:
    """Map all contacts in an export file, skipping entries that fail.

    Failed entries are logged and recorded as ingestion alerts. A missing or
    malformed export file raises ``ContactSourceError``.
    """

    global _INGESTION_ALERTS
    _INGESTION_ALERTS = []

    logger.info("Loading contacts from %s", source_path)
    entries = read_contact_entries(source_path)

    records: List[ContactRecord] = []
    for index, entry in enumerate(entries):
        try:
            records.append(record_from_contact(entry))
        except ContactSourceError:
            logger.exception("Failed to map contact #%d in %s", index, source_path)
            _INGESTION_ALERTS.append(f"Failed to map contact #{index} in {source_path.name}")

    logger.info("Loaded %d contacts", len(records))

    return records


def get_ingestion_alerts() -> List[str]:
    """Return a copy of the ingestion alerts recorded during ``load_contacts``."""

    return list(_INGESTION_ALERTS)
