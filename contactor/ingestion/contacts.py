"""Map address book contacts, as exported to JSON, into contact records."""
from __future__ import annotations

import base64
import binascii
import calendar
import re
from typing import Any, List, Optional

from contactor.core.errors import ContactSourceError
from contactor.core.models import ContactRecord
from contactor.ingestion.common import as_text, get_text, require_list, require_object

BUSINESS_CONTACT_TYPE = 1

_ISO_BIRTHDAY = re.compile(r"^(?:\d{4}|-)-(\d{1,2})-(\d{1,2})")


def format_postal_address(addresses: Any) -> str:
    """Format the last complete postal address, or return ``""``.

    An address is complete when street, city, state and postal code are all
    present. The result starts with a newline so it reads as its own block.
    """

    formatted = ""
    for item in require_list(addresses, "postalAddresses"):
        address = require_object(item, "a postal address")
        street = get_text(address, "street")
        city = get_text(address, "city")
        state = get_text(address, "state")
        postal_code = get_text(address, "postalCode")
        if street and city and state and postal_code:
            country = get_text(address, "country")
            formatted = f"\n{street}\n{city}, {state} {postal_code} {country}"
    return formatted


def format_birthday(raw: Any) -> str:
    """Format a birthday as ``"<Month> <day>"``, e.g. ``"April 19"``."""

    if raw in (None, ""):
        return ""

    if isinstance(raw, dict):
        month, day = raw.get("month"), raw.get("day")
    else:
        match = _ISO_BIRTHDAY.match(str(raw))
        if not match:
            raise ContactSourceError(f"Unrecognized birthday {raw!r}")
        month, day = match.groups()

    try:
        month, day = int(month), int(day)
    except (TypeError, ValueError) as exc:
        raise ContactSourceError(f"Unrecognized birthday {raw!r}") from exc
    # 2000 is a leap year, so February 29 stays valid.
    if not 1 <= month <= 12 or not 1 <= day <= calendar.monthrange(2000, month)[1]:
        raise ContactSourceError(f"Birthday out of range: {raw!r}")
    return f"{calendar.month_name[month]} {day}"


def format_labeled_values(items: Any, what: str = "labelled values") -> str:
    """Flatten labelled values into ``"<label>: <value>"`` lines."""

    lines = []
    for item in require_list(items, what):
        labelled = require_object(item, f"an entry of {what}")
        lines.append(f"{get_text(labelled, 'label')}: {get_text(labelled, 'value')}")
    return "\n".join(lines)


def format_instant_messages(items: Any) -> str:
    """Flatten instant message addresses into one username per line."""

    usernames: List[str] = []
    for item in require_list(items, "instantMessageAddresses"):
        value = item.get("value") if isinstance(item, dict) else item
        if isinstance(value, dict):
            value = value.get("username")
        usernames.append(as_text(value))
    return "\n".join(usernames)


def _decode_image(raw: Any) -> Optional[bytes]:
    if not raw:
        return None
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, TypeError, ValueError) as exc:
        raise ContactSourceError("Image data is not valid base64") from exc


def record_from_contact(entry: Any) -> ContactRecord:
    """Build a :class:`ContactRecord` from one exported contact object."""

    if not isinstance(entry, dict):
        raise ContactSourceError(f"Expected a contact object, got {type(entry).__name__}")

    has_image_data = entry.get("imageDataAvailable", False)
    if has_image_data is None:
        has_image_data = False
    if not isinstance(has_image_data, bool):
        raise ContactSourceError(
            f"imageDataAvailable must be true or false, got {has_image_data!r}"
        )
    image_data = thumbnail_image_data = None
    if has_image_data:
        image_data = _decode_image(entry.get("imageData"))
        thumbnail_image_data = _decode_image(entry.get("thumbnailImageData"))

    return ContactRecord(
        id=get_text(entry, "identifier"),
        type="Business" if entry.get("contactType") == BUSINESS_CONTACT_TYPE else "Individual",
        name_prefix=get_text(entry, "namePrefix"),
        given_name=get_text(entry, "givenName"),
        middle_name=get_text(entry, "middleName"),
        family_name=get_text(entry, "familyName"),
        previous_family_name=get_text(entry, "previousFamilyName"),
        name_suffix=get_text(entry, "nameSuffix"),
        nickname=get_text(entry, "nickname"),
        postal_address=format_postal_address(entry.get("postalAddresses")),
        organization=get_text(entry, "organizationName"),
        department=get_text(entry, "departmentName"),
        job_title=get_text(entry, "jobTitle"),
        birthday=format_birthday(entry.get("birthday")),
        notes=get_text(entry, "note"),
        image_data=image_data,
        thumbnail_image_data=thumbnail_image_data,
        has_image_data=has_image_data,
        phone_numbers=format_labeled_values(entry.get("phoneNumbers"), "phoneNumbers"),
        email_addresses=format_labeled_values(entry.get("emailAddresses"), "emailAddresses"),
        url_addresses=format_labeled_values(entry.get("urlAddresses"), "urlAddresses"),
        social_profiles=format_labeled_values(entry.get("socialProfiles"), "socialProfiles"),
        instant_message_addresses=format_instant_messages(entry.get("instantMessageAddresses")),
    )
