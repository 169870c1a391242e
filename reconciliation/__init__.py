"""Reconciliation package for versioned listing comparison and distribution analysis."""
from reconciliation.models import (
    ComparisonOutcome,
    ComparisonStatus,
    CompareMode,
    DistributionSummary,
    RecordState,
    VersionedRecord,
    group_by_key,
)
from reconciliation.detector import VersionReconciler, compare_records, reconcile
from reconciliation.analyzer import analyze_distribution, classify_record
from reconciliation.engine import ReconciliationEngine, ReconciliationRunResult, tally_outcomes

__all__ = [
    'VersionedRecord',
    'ComparisonOutcome',
    'ComparisonStatus',
    'CompareMode',
    'DistributionSummary',
    'RecordState',
    'group_by_key',
    'VersionReconciler',
    'compare_records',
    'reconcile',
    'analyze_distribution',
    'classify_record',
    'ReconciliationEngine',
    'ReconciliationRunResult',
    'tally_outcomes',
]
