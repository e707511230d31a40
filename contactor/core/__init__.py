"""Core building blocks: the contact record, its enumeration, and renderers."""
from contactor.core.errors import ContactorError, ContactSourceError, NotEnumerable
from contactor.core.models import ContactRecord
from contactor.core.enumeration import CONTACT_SCHEMA, PropertySchema, all_properties
from contactor.core.rendering import (
    clean_value,
    contact_to_csv,
    contact_to_text,
    csv_header,
    some_property_contains,
)
from contactor.core.logging import configure_logging

__all__ = [
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
    "contact_to_text",
    "csv_header",
    "some_property_contains",
]
