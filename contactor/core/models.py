"""Data model for a single contact exported from the address book."""
from dataclasses import dataclass, field, fields
from typing import Any, Optional

# Field metadata key holding the output label of an enumerable text field.
LABEL = "label"


def _text(label: str) -> Any:
    """Declare an enumerable text field that defaults to an empty string."""

    return field(default="", metadata={LABEL: label})


@dataclass(frozen=True)
class ContactRecord:
    """Represents one contact with every field normalized to display text.

    Text fields carry their output label in the field metadata; declaration
    order is the column order of CSV output and the line order of text output.
    Image payloads and the image flag are not labelled and never rendered.
    A record built with no arguments is the header template.
    """

    id: str = _text("id")
    type: str = _text("type")
    name_prefix: str = _text("namePrefix")
    given_name: str = _text("givenName")
    middle_name: str = _text("middleName")
    family_name: str = _text("familyName")
    previous_family_name: str = _text("previousFamilyName")
    name_suffix: str = _text("nameSuffix")
    nickname: str = _text("nickname")
    postal_address: str = _text("postalAddress")
    organization: str = _text("organization")
    department: str = _text("department")
    job_title: str = _text("jobTitle")
    birthday: str = _text("birthday")
    notes: str = _text("notes")
    image_data: Optional[bytes] = field(default=None, repr=False)
    thumbnail_image_data: Optional[bytes] = field(default=None, repr=False)
    has_image_data: bool = False
    phone_numbers: str = _text("phoneNumbers")
    email_addresses: str = _text("emailAddresses")
    url_addresses: str = _text("urlAddresses")
    social_profiles: str = _text("socialProfiles")
    instant_message_addresses: str = _text("instantMessageAddresses")

    def __post_init__(self) -> None:
        # Text fields are always str: None becomes "", anything else is rejected.
        for record_field in fields(self):
            if LABEL not in record_field.metadata:
                continue
            value = getattr(self, record_field.name)
            if value is None:
                object.__setattr__(self, record_field.name, "")
            elif not isinstance(value, str):
                raise TypeError(
                    f"{record_field.name} must be a str, got {type(value).__name__}"
                )
