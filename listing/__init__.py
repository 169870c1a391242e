"""
listing: namespace enumeration for reconciliation and analysis.

Public API:
    Namespace, parse_namespace      -- alias/bucket[/path] addressing
    ListingProvider                 -- provider protocol
    InMemoryListingProvider         -- provider over pre-built records
    JsonListingProvider             -- provider over mc ls --json exports
    parse_listing_lines             -- JSON Lines export parser
    ListingError                    -- base listing failure
    NamespaceError                  -- malformed namespace URL
    ListingUnavailable              -- listing source missing or failed
    ListingParseError               -- malformed export entry
"""

from listing.exceptions import (
    ListingError,
    ListingParseError,
    ListingUnavailable,
    NamespaceError,
)
from listing.mc_json import JsonListingProvider, parse_listing_lines
from listing.provider import (
    InMemoryListingProvider,
    ListingProvider,
    Namespace,
    parse_namespace,
)

__all__ = [
    "Namespace",
    "parse_namespace",
    "ListingProvider",
    "InMemoryListingProvider",
    "JsonListingProvider",
    "parse_listing_lines",
    "ListingError",
    "NamespaceError",
    "ListingUnavailable",
    "ListingParseError",
]
