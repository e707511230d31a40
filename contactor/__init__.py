"""Render address book contacts as text and CSV for the command line."""
from contactor.core import (
    CONTACT_SCHEMA,
    ContactRecord,
    ContactSourceError,
    ContactorError,
    NotEnumerable,
    PropertySchema,
    all_properties,
    clean_value,
    configure_logging,
    contact_to_csv,
    contact_to_text,
    csv_header,
    some_property_contains,
)
from contactor.ingestion import get_ingestion_alerts, load_contacts, record_from_contact
from contactor.pipeline import (
    CONTACT_HEADERS,
    contact_to_row,
    contacts_to_csv,
    contacts_to_rows,
    contacts_to_text,
    filter_contacts,
    render_contacts,
    run_export,
)

__all__ = [
    "CONTACT_HEADERS",
    "CONTACT_SCHEMA",
    "ContactRecord",
    "ContactSourceError",
    "ContactorError",
    "NotEnumerable",
    "PropertySchema",
    "all_properties",
    "clean_value",
    "configure_logging",
    "contact_to_csv",
    "contact_to_row",
    "contact_to_text",
    "contacts_to_csv",
    "contacts_to_rows",
    "contacts_to_text",
    "csv_header",
    "filter_contacts",
    "get_ingestion_alerts",
    "load_contacts",
    "record_from_contact",
    "render_contacts",
    "run_export",
    "some_property_contains",
]
