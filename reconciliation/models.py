"""Record and result types shared by the reconciliation and analysis code."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Optional


class ComparisonStatus(str, Enum):
    """Classification of one compared object (or object version)."""
    IDENTICAL = "identical"
    DIFFERENT = "different"
    MISSING_IN_SOURCE = "missing_source"
    MISSING_IN_TARGET = "missing_target"


class CompareMode(str, Enum):
    """Which records take part in a comparison.

    CURRENT_ONLY compares the live version of each key.
    ALL_VERSIONS compares every (key, version_id) pair, delete markers included.
    """
    CURRENT_ONLY = "current"
    ALL_VERSIONS = "versions"


class RecordState(str, Enum):
    """Distribution bucket a single record falls into."""
    CURRENT = "current"
    SUPERSEDED = "superseded"
    TOMBSTONE = "tombstone"


@dataclass(frozen=True)
class VersionedRecord:
    """One version of one object in a namespace.

    Attributes:
        key: Object path. Shared by every version of the object.
        fingerprint_id: Content fingerprint (ETag). Meaningless for tombstones.
        size_bytes: Payload size. Meaningless for tombstones.
        modified_at: Last-modified time (informational only)
        version_id: Version identifier, unique per key within a namespace
        is_current: True for the latest, non-superseded version of the key
        is_tombstone: True for delete markers
        storage_class: Storage class tag (informational only)
    """
    key: str
    fingerprint_id: str = ""
    size_bytes: int = 0
    modified_at: Optional[datetime] = None
    version_id: str = ""
    is_current: bool = False
    is_tombstone: bool = False
    storage_class: str = ""


@dataclass
class ComparisonOutcome:
    """Result of comparing the source and target representatives of one identifier.

    Attributes:
        identifier: Object key, or "<key> (version: <version_id>)" when comparing all versions
        status: ComparisonStatus classification
        source_record: Source representative, None when missing in source
        target_record: Target representative, None when missing in target
        difference_reasons: Why the records differ; empty unless status is DIFFERENT
    """
    identifier: str
    status: ComparisonStatus
    source_record: Optional[VersionedRecord] = None
    target_record: Optional[VersionedRecord] = None
    difference_reasons: list[str] = field(default_factory=list)


@dataclass
class DistributionSummary:
    """Aggregate statistics over one namespace enumeration.

    The current, superseded and tombstone counts partition total_records.
    current_bytes excludes tombstones and superseded versions.
    """
    total_records: int = 0
    current_record_count: int = 0
    superseded_record_count: int = 0
    tombstone_count: int = 0
    total_bytes: int = 0
    current_bytes: int = 0
    unique_key_count: int = 0
    per_key_version_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics under their report field names."""
        return {
            'total_objects': self.total_records,
            'current_versions': self.current_record_count,
            'old_versions': self.superseded_record_count,
            'delete_markers': self.tombstone_count,
            'total_size': self.total_bytes,
            'current_size': self.current_bytes,
            'unique_keys': self.unique_key_count,
            'version_distribution': dict(self.per_key_version_counts),
        }


def group_by_key(records: Iterable[VersionedRecord]) -> dict[str, list[VersionedRecord]]:
    """Group records by key, keeping listing order within each key.

    Args:
        records: Records from one namespace enumeration

    Returns:
        Dict mapping key -> records with that key, in input order
    """
    grouped: dict[str, list[VersionedRecord]] = {}
    for record in records:
        grouped.setdefault(record.key, []).append(record)
    return grouped
