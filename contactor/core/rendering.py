"""Render contact records as text, CSV rows, and CSV headers.

Every renderer is best-effort: when a value cannot be enumerated the renderer
logs a warning and returns an empty result (``""`` or ``False``) instead of
raising, so one malformed record only costs a blank line of output.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from contactor.core.enumeration import all_properties
from contactor.core.errors import NotEnumerable
from contactor.core.models import ContactRecord

logger = logging.getLogger(__name__)

# Markers the address book wraps around its built-in labels, e.g. "_$!<Mobile>!$_".
LABEL_SENTINELS = ("_$!<", ">!$_")

_BLANK_LINES = re.compile(r"\n{2,}")


def clean_value(value: str) -> str:
    """Strip the address book's label markers from a field value."""

    for sentinel in LABEL_SENTINELS:
        value = value.replace(sentinel, "")
    return value


def quote_row(values) -> str:
    """Join values as ``"v1","v2",...``; embedded quotes are not escaped."""

    return '"' + '","'.join(values) + '"'


def contact_to_text(record: Any) -> str:
    """Render one ``label: value`` line per field with blank lines collapsed."""

    try:
        props = all_properties(record)
    except NotEnumerable as exc:
        logger.warning("Rendering empty text for unenumerable record: %s", exc)
        return ""

    output = "".join(f"{label}: {clean_value(value)}\n" for label, value in props)
    return _BLANK_LINES.sub("\n", output)


def contact_to_csv(record: Any) -> str:
    """Render a record as one quoted CSV row in schema order."""

    try:
        props = all_properties(record)
    except NotEnumerable as exc:
        logger.warning("Rendering empty CSV row for unenumerable record: %s", exc)
        return ""

    return quote_row(clean_value(value).strip() for _, value in props)


def csv_header() -> str:
    """Return the quoted CSV header row matching :func:`contact_to_csv`."""

    try:
        props = all_properties(ContactRecord())
    except NotEnumerable as exc:  # pragma: no cover - the template is always enumerable
        logger.warning("Rendering empty CSV header: %s", exc)
        return ""

    return quote_row(label for label, _ in props)


def some_property_contains(record: Any, search: str) -> bool:
    """Return True when ``search`` occurs in any raw field value, ignoring case.

    Values are searched as stored, label markers included.
    """

    try:
        props = all_properties(record)
    except NotEnumerable as exc:
        logger.warning("Treating unenumerable record as a non-match: %s", exc)
        return False

    needle = search.casefold()
    return any(needle in value.casefold() for _, value in props)
