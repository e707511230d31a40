"""Exception types raised by the contactor package."""


class ContactorError(Exception):
    """Base class for all contactor errors."""


class NotEnumerable(ContactorError):
    """Raised when a value is not a record the property schema can enumerate.

    Only the schema's own record type is enumerable. Renderers catch this and
    degrade to an empty result, so it never reaches their callers.
    """


class ContactSourceError(ContactorError):
    """Raised when a source contact cannot be mapped into a record."""
