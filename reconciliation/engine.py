"""
Reconciliation engine orchestrator.

Connects the pure VersionReconciler and analyze_distribution logic to a
listing provider: resolve namespace URLs, enumerate the source fully, then the
target fully, and hand the materialized listings to the core.
"""

from dataclasses import dataclass, field
from typing import Union, TYPE_CHECKING

from reconciliation.analyzer import analyze_distribution
from reconciliation.detector import VersionReconciler
from reconciliation.models import (
    ComparisonOutcome,
    ComparisonStatus,
    CompareMode,
    DistributionSummary,
    VersionedRecord,
)
from shared.log import create_logger

if TYPE_CHECKING:
    from listing.provider import ListingProvider

_, log_debug, log_info, log_warn, log_error = create_logger("Engine")


@dataclass
class ReconciliationRunResult:
    """Outcomes of one comparison run with per-status counts.

    Attributes:
        outcomes: Every ComparisonOutcome produced, in reconciler order
        identical_count: Outcomes with status IDENTICAL
        different_count: Outcomes with status DIFFERENT
        missing_in_source_count: Outcomes with status MISSING_IN_SOURCE
        missing_in_target_count: Outcomes with status MISSING_IN_TARGET
        total_compared: Number of outcomes (sum of the above)
    """
    outcomes: list[ComparisonOutcome] = field(default_factory=list)
    identical_count: int = 0
    different_count: int = 0
    missing_in_source_count: int = 0
    missing_in_target_count: int = 0
    total_compared: int = 0

    @property
    def has_discrepancies(self) -> bool:
        """True if any outcome is not IDENTICAL."""
        return (self.different_count + self.missing_in_source_count + self.missing_in_target_count) > 0


def tally_outcomes(outcomes: list[ComparisonOutcome]) -> ReconciliationRunResult:
    """Count outcomes per status."""
    result = ReconciliationRunResult(outcomes=list(outcomes), total_compared=len(outcomes))
    for outcome in outcomes:
        if outcome.status is ComparisonStatus.IDENTICAL:
            result.identical_count += 1
        elif outcome.status is ComparisonStatus.DIFFERENT:
            result.different_count += 1
        elif outcome.status is ComparisonStatus.MISSING_IN_SOURCE:
            result.missing_in_source_count += 1
        else:
            result.missing_in_target_count += 1
    return result


class ReconciliationEngine:
    """Runs comparisons and analyses against a listing provider.

    Args:
        provider: ListingProvider used for every namespace
    """

    def __init__(self, provider: "ListingProvider"):
        self.provider = provider
        self.reconciler = VersionReconciler()

    def compare(
        self,
        source: str,
        target: str,
        mode: Union[CompareMode, str] = CompareMode.CURRENT_ONLY
    ) -> ReconciliationRunResult:
        """Compare two namespaces.

        Args:
            source: Source namespace URL (alias/bucket[/path])
            target: Target namespace URL (alias/bucket[/path])
            mode: CompareMode or its string value

        Returns:
            ReconciliationRunResult with outcomes and per-status counts

        Raises:
            ListingError: If either namespace cannot be parsed or listed. The
                source is listed first; a source failure means the target is
                never listed.
            ValueError: If mode is not a known CompareMode value
        """
        mode = CompareMode(mode)
        source_records = self._list("source", source)
        target_records = self._list("target", target)

        outcomes = self.reconciler.reconcile(source_records, target_records, mode)
        result = tally_outcomes(outcomes)

        log_info(
            f"Compared {source} -> {target} ({mode.value}): "
            f"{result.identical_count} identical, {result.different_count} different, "
            f"{result.missing_in_source_count} missing in source, "
            f"{result.missing_in_target_count} missing in target"
        )
        if result.has_discrepancies:
            log_warn(f"{result.total_compared - result.identical_count} of {result.total_compared} entries differ")
        return result

    def analyze(self, namespace: str) -> DistributionSummary:
        """Summarize the version distribution of one namespace.

        Raises:
            ListingError: If the namespace cannot be parsed or listed
        """
        records = self._list("namespace", namespace)
        summary = analyze_distribution(records)
        log_info(
            f"Analyzed {namespace}: {summary.total_records} records, "
            f"{summary.unique_key_count} unique keys, {summary.tombstone_count} delete markers"
        )
        return summary

    def _list(self, side: str, url: str) -> list[VersionedRecord]:
        """Parse a namespace URL and enumerate it completely.

        Raises:
            ListingError: Naming the side, chained to the underlying failure
        """
        from listing.exceptions import ListingError
        from listing.provider import parse_namespace

        try:
            namespace = parse_namespace(url)
            records = list(self.provider.list_records(namespace))
        except ListingError as e:
            log_error(f"Failed to list {side} objects: {e}")
            raise ListingError(f"failed to list {side} objects: {e}") from e

        log_debug(f"Listed {len(records)} {side} records from {namespace}")
        return records
