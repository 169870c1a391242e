"""
Configuration validation for versiondiff.

Provides pydantic v2 models for validating run configuration
with fail-fast behavior and sensible defaults.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, ValidationError
from typing import Optional
import logging

from listing.exceptions import NamespaceError
from listing.mc_json import JsonListingProvider
from listing.provider import parse_namespace
from shared.logging_config import configure_logging
from reconciliation.models import CompareMode

log = logging.getLogger('versiondiff.config')


class ReconcileConfig(BaseModel):
    """
    versiondiff run configuration with validation.

    Required:
        source: Source namespace URL (alias/bucket[/path])

    Optional tunables:
        target: Target namespace URL, required for comparisons (default: None)
        mode: "current" or "versions" (default: "current")
        versions_mode: Boolean shorthand for mode="versions" (default: False)
        log_level: debug, info, warning or error (default: "info")
        json_logs: Emit structured JSON log lines (default: False)
        listing_files: Mapping of alias/bucket -> exported listing file (default: {})
    """

    # Required fields
    source: str

    # Optional tunables with defaults
    target: Optional[str] = None
    mode: CompareMode = CompareMode.CURRENT_ONLY
    versions_mode: bool = Field(
        default=False,
        description="Compare all object versions instead of current versions only"
    )

    # Logging
    log_level: str = Field(
        default="info",
        description="Log level: debug, info, warning, error"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit structured JSON log lines"
    )

    # Listing exports
    listing_files: dict[str, str] = Field(
        default_factory=dict,
        description="Exported mc ls --versions --json files keyed by alias/bucket"
    )

    @field_validator('source', 'target', mode='after')
    @classmethod
    def validate_namespace(cls, v: Optional[str]) -> Optional[str]:
        """Validate namespace URLs have an alias and a bucket."""
        if v is None:
            return v
        try:
            parse_namespace(v)
        except NamespaceError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator('mode', mode='before')
    @classmethod
    def validate_mode(cls, v):
        """Validate mode is one of: current, versions."""
        if isinstance(v, CompareMode):
            return v
        valid = tuple(m.value for m in CompareMode)
        if isinstance(v, str) and v.lower() in valid:
            return v.lower()
        raise ValueError(f"mode must be one of {valid}, got: {v}")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is one of: debug, info, warning, error."""
        valid = ('debug', 'info', 'warning', 'error')
        if isinstance(v, str) and v.lower() in valid:
            return v.lower()
        raise ValueError(f"log_level must be one of {valid}, got: {v}")

    @field_validator('versions_mode', 'json_logs', mode='before')
    @classmethod
    def validate_booleans(cls, v):
        """Ensure boolean fields are actual booleans, not truthy strings."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            lower = v.lower()
            if lower in ('true', '1', 'yes'):
                return True
            if lower in ('false', '0', 'no'):
                return False
            raise ValueError(f"Invalid boolean value: {v}")
        raise ValueError(f"Expected boolean, got {type(v).__name__}")

    @model_validator(mode='after')
    def apply_versions_mode(self) -> 'ReconcileConfig':
        """versions_mode=True overrides mode."""
        if self.versions_mode:
            self.mode = CompareMode.ALL_VERSIONS
        return self

    def build_provider(self) -> JsonListingProvider:
        """Listing provider over the configured export files."""
        return JsonListingProvider(self.listing_files)

    def apply_logging(self) -> None:
        """Configure root logging from log_level and json_logs."""
        configure_logging(self.log_level, json_output=self.json_logs)

    def log_config(self) -> None:
        """Log the effective configuration."""
        target_info = f"target={self.target}" if self.target else "target=NONE (analysis only)"
        log.info(
            f"versiondiff config: source={self.source}, {target_info}, "
            f"mode={self.mode.value}, "
            f"log_level={self.log_level}, json_logs={self.json_logs}, "
            f"listing_files={len(self.listing_files)}"
        )
        if self.mode is CompareMode.ALL_VERSIONS:
            log.info("Version comparison enabled: every version and delete marker is compared by version ID")


def validate_config(config_dict: dict) -> tuple[Optional[ReconcileConfig], Optional[str]]:
    """
    Validate configuration dictionary and return ReconcileConfig or error message.

    Args:
        config_dict: Dictionary containing configuration values

    Returns:
        Tuple of (ReconcileConfig, None) on success,
        or (None, error_message) on validation failure
    """
    try:
        config = ReconcileConfig(**config_dict)
        return (config, None)
    except ValidationError as e:
        # Extract user-friendly error messages
        errors = []
        for error in e.errors():
            field = '.'.join(str(loc) for loc in error['loc'])
            msg = error['msg']
            errors.append(f"{field}: {msg}")
        error_message = '; '.join(errors)
        return (None, error_message)


# Re-export ValidationError for external use
__all__ = ['ReconcileConfig', 'validate_config', 'ValidationError']
