"""Ordered enumeration of a record's labelled text fields."""
from __future__ import annotations

import dataclasses
from operator import attrgetter
from typing import Any, Callable, List, Tuple

from contactor.core.errors import NotEnumerable
from contactor.core.models import LABEL, ContactRecord

Accessor = Callable[[Any], Any]


class PropertySchema:
    """Static table of ``(label, accessor)`` pairs for one dataclass.

    The table is built once from the dataclass declaration: every field that
    carries a label in its metadata becomes an entry, in declaration order.
    Renderers only ever see the table, so a new labelled field shows up in
    every output format without touching them.
    """

    def __init__(self, record_type: type, entries: List[Tuple[str, Accessor]]):
        self.record_type = record_type
        self.entries = tuple(entries)

    @classmethod
    def for_dataclass(cls, record_type: type) -> "PropertySchema":
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass")
        entries = [
            (record_field.metadata[LABEL], attrgetter(record_field.name))
            for record_field in dataclasses.fields(record_type)
            if LABEL in record_field.metadata
        ]
        return cls(record_type, entries)

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def enumerate(self, record: Any) -> List[Tuple[str, str]]:
        """Return the ``(label, value)`` pairs of ``record`` in schema order.

        One pair per schema entry, always. Raises ``NotEnumerable`` when
        ``record`` is not an instance of the schema's record type or a
        labelled value is not a string.
        """

        if not isinstance(record, self.record_type):
            raise NotEnumerable(
                f"{type(record).__name__} is not a {self.record_type.__name__}"
            )

        pairs: List[Tuple[str, str]] = []
        for label, accessor in self.entries:
            value = accessor(record)
            if not isinstance(value, str):
                raise NotEnumerable(f"{label} holds a {type(value).__name__}, not a str")
            pairs.append((label, value))
        return pairs


CONTACT_SCHEMA = PropertySchema.for_dataclass(ContactRecord)


def all_properties(record: Any) -> List[Tuple[str, str]]:
    """Enumerate a contact record against the contact schema."""

    return CONTACT_SCHEMA.enumerate(record)
