"""
Namespace addressing and listing provider contract.

A namespace URL names a bucket on a configured storage alias plus an optional
key prefix::

    from listing.provider import parse_namespace
    ns = parse_namespace("site-a/photos/2024/")
    # -> Namespace(alias="site-a", bucket="photos", prefix="2024/")

Providers return every version of every object under the prefix, delete
markers included, with ``is_current`` set as the backend reports it.
"""
from __future__ import annotations

from typing import Iterable, Protocol

from pydantic import BaseModel

from listing.exceptions import ListingUnavailable, NamespaceError
from reconciliation.models import VersionedRecord


class Namespace(BaseModel):
    """A bucket on a storage alias, narrowed to a key prefix."""

    alias: str
    bucket: str
    prefix: str = ""

    @property
    def bucket_path(self) -> str:
        """``alias/bucket`` without the prefix."""
        return f"{self.alias}/{self.bucket}"

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.bucket_path}/{self.prefix}"
        return self.bucket_path


def parse_namespace(url: str) -> Namespace:
    """
    Split ``alias/bucket[/path]`` into a Namespace.

    Everything after the second ``/`` is the prefix, kept verbatim.

    Raises:
        NamespaceError: If alias or bucket is missing.
    """
    parts = url.split("/", 2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise NamespaceError(f"invalid URL format: {url} (expected alias/bucket[/path])")
    prefix = parts[2] if len(parts) > 2 else ""
    return Namespace(alias=parts[0], bucket=parts[1], prefix=prefix)


def filter_prefix(records: Iterable[VersionedRecord], prefix: str) -> list[VersionedRecord]:
    """Keep records whose key starts with prefix, in listing order."""
    return [record for record in records if record.key.startswith(prefix)]


class ListingProvider(Protocol):
    """Anything that can enumerate a namespace."""

    def list_records(self, namespace: Namespace) -> list[VersionedRecord]:
        ...


class InMemoryListingProvider:
    """
    Listing provider over records registered per ``alias/bucket``.

    Used for fixtures and for callers that already hold a materialized listing.
    """

    def __init__(self, buckets: dict[str, list[VersionedRecord]] | None = None):
        self._buckets: dict[str, list[VersionedRecord]] = dict(buckets or {})

    def add_bucket(self, bucket_path: str, records: Iterable[VersionedRecord]) -> None:
        self._buckets[bucket_path] = list(records)

    def list_records(self, namespace: Namespace) -> list[VersionedRecord]:
        records = self._buckets.get(namespace.bucket_path)
        if records is None:
            raise ListingUnavailable(f"bucket {namespace.bucket_path} does not exist")
        return filter_prefix(records, namespace.prefix)
