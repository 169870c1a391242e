"""
Shared pytest fixtures for versiondiff tests.

Provides reusable fixtures for:
- VersionedRecord construction
- Listing providers over in-memory buckets
- Configuration dictionaries
- mc ls --json export lines
"""

import json
from datetime import datetime, timezone

import pytest

from listing.provider import InMemoryListingProvider
from reconciliation.models import VersionedRecord


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def make_record():
    """
    Factory for VersionedRecord with current, live defaults.

    Usage:
        def test_x(make_record):
            rec = make_record("a", fingerprint="x", size=10)
    """
    def _make(
        key,
        fingerprint="etag-1",
        size=10,
        version_id="v1",
        current=True,
        tombstone=False,
        modified_at=None,
        storage_class="STANDARD",
    ):
        return VersionedRecord(
            key=key,
            fingerprint_id=fingerprint,
            size_bytes=size,
            modified_at=modified_at or datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
            version_id=version_id,
            is_current=current,
            is_tombstone=tombstone,
            storage_class=storage_class,
        )
    return _make


@pytest.fixture
def source_bucket(make_record):
    """Source bucket: one object with history, one deleted object, one plain object."""
    return [
        make_record("docs/a.txt", fingerprint="a2", size=20, version_id="a-v2", current=True),
        make_record("docs/a.txt", fingerprint="a1", size=10, version_id="a-v1", current=False),
        make_record("docs/b.txt", fingerprint="", size=0, version_id="b-v2", current=True, tombstone=True),
        make_record("docs/b.txt", fingerprint="b1", size=5, version_id="b-v1", current=False),
        make_record("img/c.png", fingerprint="c1", size=100, version_id="c-v1", current=True),
    ]


@pytest.fixture
def target_bucket(make_record):
    """Target bucket: a.txt lags one version behind, c.png missing, d.txt extra."""
    return [
        make_record("docs/a.txt", fingerprint="a1", size=10, version_id="a-v1", current=True),
        make_record("docs/b.txt", fingerprint="b1", size=5, version_id="b-v1", current=True),
        make_record("docs/d.txt", fingerprint="d1", size=7, version_id="d-v1", current=True),
    ]


@pytest.fixture
def provider(source_bucket, target_bucket):
    """InMemoryListingProvider with site-a/data (source) and site-b/data (target)."""
    return InMemoryListingProvider({
        "site-a/data": source_bucket,
        "site-b/data": target_bucket,
    })


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def valid_config_dict():
    """Minimal valid configuration for a comparison run."""
    return {
        "source": "site-a/data",
        "target": "site-b/data",
    }


# =============================================================================
# Listing Export Fixtures
# =============================================================================

@pytest.fixture
def mc_listing_lines():
    """Lines as written by mc ls --recursive --versions --json."""
    entries = [
        {
            "status": "success", "type": "file", "lastModified": "2024-05-02T09:00:00Z",
            "size": 20, "key": "docs/a.txt", "etag": "a2", "versionId": "a-v2",
            "isLatest": True, "isDeleteMarker": False, "storageClass": "STANDARD",
        },
        {
            "status": "success", "type": "file", "lastModified": "2024-05-01T09:00:00Z",
            "size": 10, "key": "docs/a.txt", "etag": "a1", "versionId": "a-v1",
            "isLatest": False, "isDeleteMarker": False, "storageClass": "STANDARD",
        },
        {
            "status": "success", "type": "file", "lastModified": "2024-05-03T09:00:00Z",
            "size": 0, "key": "docs/b.txt", "etag": "", "versionId": "b-v2",
            "isLatest": True, "isDeleteMarker": True,
        },
        {
            "status": "success", "type": "file", "lastModified": "2024-05-01T12:00:00Z",
            "size": 100, "key": "img/c.png", "etag": "\"c1\"", "versionId": "null",
            "isLatest": True, "isDeleteMarker": False, "storageClass": "STANDARD",
        },
    ]
    return [json.dumps(entry) for entry in entries]
