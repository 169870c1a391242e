"""
Parser and provider for ``mc ls --recursive --versions --json`` exports.

The MinIO client writes one JSON object per line. Object versions look like::

    {"status":"success","type":"file","lastModified":"2024-05-01T10:00:00Z",
     "size":1024,"key":"docs/a.txt","etag":"9b2cf535f27731c974343645a3985328",
     "versionId":"3f1c...","isLatest":true,"isDeleteMarker":false,
     "storageClass":"STANDARD"}

Failures are reported in-band as ``{"status":"error","error":{"message":...}}``.
An error entry anywhere in the export aborts the whole listing.
"""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from listing.exceptions import ListingParseError, ListingUnavailable
from listing.provider import Namespace, filter_prefix
from reconciliation.models import VersionedRecord
from shared.log import create_logger

_, log_debug, log_info, _, _ = create_logger("Listing")


class McListingEntry(BaseModel):
    """One line of ``mc ls --json`` output."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    type: str = "file"
    key: str
    etag: str = ""
    size: int = 0
    last_modified: Optional[datetime] = Field(default=None, alias="lastModified")
    version_id: str = Field(default="", alias="versionId")
    is_latest: bool = Field(default=False, alias="isLatest")
    is_delete_marker: bool = Field(default=False, alias="isDeleteMarker")
    storage_class: str = Field(default="", alias="storageClass")

    def to_record(self) -> VersionedRecord:
        return VersionedRecord(
            key=self.key,
            fingerprint_id=self.etag.strip('"'),
            size_bytes=self.size,
            modified_at=self.last_modified,
            version_id=self.version_id,
            is_current=self.is_latest,
            is_tombstone=self.is_delete_marker,
            storage_class=self.storage_class,
        )


def parse_listing_lines(lines: Iterable[str]) -> list[VersionedRecord]:
    """
    Convert JSON Lines listing output into records, in listing order.

    Blank lines and folder entries are skipped.

    Raises:
        ListingUnavailable: If any entry has status "error".
        ListingParseError: If a line is not JSON or does not fit the entry schema.
    """
    records = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        try:
            payload = json.loads(line)
        except json.JSONDecodeError as e:
            raise ListingParseError(f"line {line_number}: invalid JSON: {e}", line_number) from e

        # Error entries carry no object fields, so check them before schema validation.
        if isinstance(payload, dict) and payload.get("status") == "error":
            error = payload.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            message = message or "unknown error"
            raise ListingUnavailable(f"listing failed at line {line_number}: {message}")

        try:
            entry = McListingEntry.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"]) or "entry"
            raise ListingParseError(f"line {line_number}: {field}: {first['msg']}", line_number) from e

        if entry.type == "folder":
            continue

        records.append(entry.to_record())

    return records


class JsonListingProvider:
    """
    Listing provider backed by exported ``mc ls --json`` files.

    Args:
        listing_files: Mapping of ``alias/bucket`` -> path of the export for that bucket
    """

    def __init__(self, listing_files: dict[str, str]):
        self.listing_files = dict(listing_files)

    def list_records(self, namespace: Namespace) -> list[VersionedRecord]:
        path = self.listing_files.get(namespace.bucket_path)
        if path is None:
            raise ListingUnavailable(f"no listing export configured for {namespace.bucket_path}")

        try:
            with Path(path).open(encoding="utf-8") as f:
                records = parse_listing_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ListingUnavailable(f"cannot read listing export {path}: {e}") from e

        log_debug(f"Read {len(records)} records from {path}")
        selected = filter_prefix(records, namespace.prefix)
        log_info(f"Listed {len(selected)} records under {namespace}")
        return selected
