"""Reconciliation of two versioned record listings into classified outcomes."""
from typing import Iterable, Optional, Union

from reconciliation.models import (
    ComparisonOutcome,
    ComparisonStatus,
    CompareMode,
    VersionedRecord,
    group_by_key,
)
from shared.log import create_logger

_, log_debug, _, _, _ = create_logger("Detector")

FINGERPRINT_DIFFERS = "Fingerprint differs"
SIZE_DIFFERS = "Size differs"


def version_identifier(key: str, version_id: str) -> str:
    """Build the outcome identifier used when comparing all versions."""
    return f"{key} (version: {version_id})"


def compare_records(
    identifier: str,
    source: Optional[VersionedRecord],
    target: Optional[VersionedRecord]
) -> ComparisonOutcome:
    """Classify one pair of representatives.

    A missing source wins over a missing target. Two present records are
    identical when both fingerprint and size match; modification time and
    version ID are never compared.

    Args:
        identifier: Identifier to stamp on the outcome
        source: Source representative, or None
        target: Target representative, or None

    Returns:
        ComparisonOutcome with status and, for DIFFERENT, the reasons in fixed order
    """
    if source is None:
        return ComparisonOutcome(identifier, ComparisonStatus.MISSING_IN_SOURCE, None, target)
    if target is None:
        return ComparisonOutcome(identifier, ComparisonStatus.MISSING_IN_TARGET, source, None)

    reasons = []
    if source.fingerprint_id != target.fingerprint_id:
        reasons.append(FINGERPRINT_DIFFERS)
    if source.size_bytes != target.size_bytes:
        reasons.append(SIZE_DIFFERS)

    status = ComparisonStatus.DIFFERENT if reasons else ComparisonStatus.IDENTICAL
    return ComparisonOutcome(identifier, status, source, target, reasons)


def _current_representative(records: list[VersionedRecord]) -> Optional[VersionedRecord]:
    # First live current record in listing order; later duplicates are ignored.
    for record in records:
        if record.is_current and not record.is_tombstone:
            return record
    return None


class VersionReconciler:
    """Diffs a source and a target listing.

    The reconciler operates on fully materialized listings (no API calls) and
    keeps no state between calls.
    """

    def compare_current(
        self,
        key: str,
        source_records: list[VersionedRecord],
        target_records: list[VersionedRecord]
    ) -> ComparisonOutcome:
        """Compare the current live version of one key.

        Tombstones and superseded versions are filtered out on both sides. If a
        side still has several candidates, the first in listing order is used.

        Args:
            key: Object key
            source_records: Source records for the key, in listing order
            target_records: Target records for the key, in listing order

        Returns:
            Single ComparisonOutcome identified by the key
        """
        return compare_records(
            key,
            _current_representative(source_records),
            _current_representative(target_records),
        )

    def compare_versions(
        self,
        key: str,
        source_records: list[VersionedRecord],
        target_records: list[VersionedRecord]
    ) -> list[ComparisonOutcome]:
        """Compare every version of one key, matched by version ID.

        No filtering is applied, so delete markers and superseded versions take
        part. A version ID repeated on one side keeps the last record listed.

        Args:
            key: Object key
            source_records: Source records for the key
            target_records: Target records for the key

        Returns:
            One ComparisonOutcome per distinct version ID, sorted by version ID
        """
        source_versions = {record.version_id: record for record in source_records}
        target_versions = {record.version_id: record for record in target_records}

        outcomes = []
        for version_id in sorted(source_versions.keys() | target_versions.keys()):
            outcomes.append(compare_records(
                version_identifier(key, version_id),
                source_versions.get(version_id),
                target_versions.get(version_id),
            ))
        return outcomes

    def reconcile(
        self,
        source_records: Iterable[VersionedRecord],
        target_records: Iterable[VersionedRecord],
        mode: Union[CompareMode, str] = CompareMode.CURRENT_ONLY
    ) -> list[ComparisonOutcome]:
        """Diff two listings.

        Args:
            source_records: Source namespace records, any order
            target_records: Target namespace records, any order
            mode: CompareMode or its string value ("current" / "versions")

        Returns:
            Outcomes sorted by key (then version ID in ALL_VERSIONS mode)

        Raises:
            ValueError: If mode is not a known CompareMode value
        """
        mode = CompareMode(mode)
        source_by_key = group_by_key(source_records)
        target_by_key = group_by_key(target_records)

        outcomes: list[ComparisonOutcome] = []
        for key in sorted(source_by_key.keys() | target_by_key.keys()):
            source_group = source_by_key.get(key, [])
            target_group = target_by_key.get(key, [])
            if mode is CompareMode.ALL_VERSIONS:
                outcomes.extend(self.compare_versions(key, source_group, target_group))
            else:
                outcomes.append(self.compare_current(key, source_group, target_group))

        log_debug(
            f"Reconciled {len(source_by_key)} source keys against {len(target_by_key)} "
            f"target keys ({mode.value}): {len(outcomes)} outcomes"
        )
        return outcomes


def reconcile(
    source_records: Iterable[VersionedRecord],
    target_records: Iterable[VersionedRecord],
    mode: Union[CompareMode, str] = CompareMode.CURRENT_ONLY
) -> list[ComparisonOutcome]:
    """Diff two listings with a fresh VersionReconciler. See VersionReconciler.reconcile."""
    return VersionReconciler().reconcile(source_records, target_records, mode)
