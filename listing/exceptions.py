"""
Listing errors.

Every failure to enumerate a namespace surfaces as a ListingError subclass
before any comparison or analysis runs; callers never see a partial listing.
"""


class ListingError(Exception):
    """Base class for failures to produce a namespace listing."""


class NamespaceError(ListingError):
    """
    Namespace URL could not be parsed.

    Expected form is ``alias/bucket[/path]``.
    """


class ListingUnavailable(ListingError):
    """
    Listing source could not be read.

    Covers unknown buckets, unreadable export files, and error entries
    reported by the storage client (access denied, backend unreachable).
    """


class ListingParseError(ListingError):
    """
    A listing entry is not valid JSON or does not match the entry schema.
    """

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.line_number = line_number
