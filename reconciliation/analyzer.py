"""Distribution statistics over a single namespace listing."""
from typing import Iterable

from reconciliation.models import DistributionSummary, RecordState, VersionedRecord
from shared.log import create_logger

_, log_debug, _, _, _ = create_logger("Analyzer")


def classify_record(record: VersionedRecord) -> RecordState:
    """Place a record in exactly one distribution bucket.

    Tombstone takes priority, so a delete marker that is also the current
    version counts as a tombstone.
    """
    if record.is_tombstone:
        return RecordState.TOMBSTONE
    if record.is_current:
        return RecordState.CURRENT
    return RecordState.SUPERSEDED


def analyze_distribution(records: Iterable[VersionedRecord]) -> DistributionSummary:
    """Summarize one listing in a single pass.

    Args:
        records: All records of a namespace, including superseded versions
                 and delete markers

    Returns:
        DistributionSummary; all zeros with an empty mapping for empty input
    """
    summary = DistributionSummary()

    for record in records:
        summary.total_records += 1
        summary.total_bytes += record.size_bytes
        summary.per_key_version_counts[record.key] = summary.per_key_version_counts.get(record.key, 0) + 1

        state = classify_record(record)
        if state is RecordState.TOMBSTONE:
            summary.tombstone_count += 1
        elif state is RecordState.CURRENT:
            summary.current_record_count += 1
            summary.current_bytes += record.size_bytes
        else:
            summary.superseded_record_count += 1

    summary.unique_key_count = len(summary.per_key_version_counts)

    log_debug(
        f"Analyzed {summary.total_records} records: {summary.current_record_count} current, "
        f"{summary.superseded_record_count} superseded, {summary.tombstone_count} tombstones"
    )
    return summary
