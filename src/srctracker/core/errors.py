# src/srctracker/core/errors.py


class TrackerError(Exception):
    """Base application error for the code source tracker.

    Use this for predictable, user-facing error messages that should be
    caught by the CLI and displayed nicely.
    """

    pass


class DocumentError(TrackerError):
    """The document to classify could not be read."""


class SelectionError(TrackerError):
    """A line selection was malformed or inverted."""


class UnknownCategoryError(TrackerError):
    """A typed classification did not match any known category."""
