"""
Validation module for versiondiff.

Provides run configuration validation.
"""

from validation.config import ReconcileConfig, validate_config

__all__ = [
    'ReconcileConfig',
    'validate_config',
]
