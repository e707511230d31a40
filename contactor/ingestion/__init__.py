"""Data ingestion package for reading contact exports."""
from contactor.ingestion.contacts import record_from_contact
from contactor.ingestion.loader import get_ingestion_alerts, load_contacts

__all__ = [
    "get_ingestion_alerts",
    "load_contacts",
    "record_from_contact",
]
