"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from buildinfo_ingest.limits import DocumentLimits

CONFIG_FILENAME = "buildinfo_ingest.toml"
DATA_DIRNAME = ".buildinfo_ingest"
MAX_DOCUMENT_BYTES_CAP = 16 * 1024 * 1024


@dataclass(slots=True, frozen=True)
class ParsingConfig:
    """Parser strictness settings."""

    strict_build_date: bool


@dataclass(slots=True, frozen=True)
class AuditConfig:
    """Audit log toggles."""

    enabled: bool


@dataclass(slots=True, frozen=True)
class IngestConfig:
    """Fully merged ingestion configuration."""

    root: Path
    data_dir: Path
    limits: DocumentLimits
    parsing: ParsingConfig
    audit: AuditConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "root": str(self.root),
            "data_dir": str(self.data_dir),
            "limits": {"max_document_bytes": self.limits.max_document_bytes},
            "parsing": {"strict_build_date": self.parsing.strict_build_date},
            "audit": {"enabled": self.audit.enabled},
        }


@dataclass(slots=True, frozen=True)
class ConfigOverrides:
    """Optional caller overrides applied at highest precedence."""

    data_dir: Path | None = None
    max_document_bytes: int | None = None
    strict_build_date: bool | None = None
    audit_enabled: bool | None = None


def default_config(root: Path) -> IngestConfig:
    """Build default config for a given root directory."""
    resolved_root = root.resolve()
    return IngestConfig(
        root=resolved_root,
        data_dir=resolved_root / DATA_DIRNAME,
        limits=DocumentLimits(),
        parsing=ParsingConfig(strict_build_date=False),
        audit=AuditConfig(enabled=True),
    )


def load_config_file(root: Path) -> dict[str, object]:
    """Load optional buildinfo_ingest.toml from root."""
    config_path = root / CONFIG_FILENAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILENAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{name}' must be a boolean.")
    return value


def merge_config(
    base: IngestConfig, payload: dict[str, object], overrides: ConfigOverrides
) -> IngestConfig:
    """Merge defaults, config file, then caller overrides."""
    limits_payload = _get_table(payload, "limits")
    parsing_payload = _get_table(payload, "parsing")
    audit_payload = _get_table(payload, "audit")

    max_document_bytes = _optional_positive_int_with_cap(
        limits_payload.get("max_document_bytes"),
        "limits.max_document_bytes",
        base.limits.max_document_bytes,
        MAX_DOCUMENT_BYTES_CAP,
    )
    strict_build_date = _optional_bool(
        parsing_payload.get("strict_build_date"),
        "parsing.strict_build_date",
        base.parsing.strict_build_date,
    )
    audit_enabled = _optional_bool(
        audit_payload.get("enabled"),
        "audit.enabled",
        base.audit.enabled,
    )

    merged = IngestConfig(
        root=base.root,
        data_dir=base.data_dir,
        limits=DocumentLimits(max_document_bytes=max_document_bytes),
        parsing=ParsingConfig(strict_build_date=strict_build_date),
        audit=AuditConfig(enabled=audit_enabled),
    )
    return apply_overrides(merged, overrides)


def apply_overrides(config: IngestConfig, overrides: ConfigOverrides) -> IngestConfig:
    """Apply caller overrides at highest precedence."""
    max_document_bytes = _optional_positive_int_with_cap(
        overrides.max_document_bytes,
        "overrides.max_document_bytes",
        config.limits.max_document_bytes,
        MAX_DOCUMENT_BYTES_CAP,
    )
    strict_build_date = _optional_bool(
        overrides.strict_build_date,
        "overrides.strict_build_date",
        config.parsing.strict_build_date,
    )
    audit_enabled = _optional_bool(
        overrides.audit_enabled,
        "overrides.audit_enabled",
        config.audit.enabled,
    )
    data_dir = overrides.data_dir or config.data_dir
    return IngestConfig(
        root=config.root,
        data_dir=data_dir.resolve(),
        limits=DocumentLimits(max_document_bytes=max_document_bytes),
        parsing=ParsingConfig(strict_build_date=strict_build_date),
        audit=AuditConfig(enabled=audit_enabled),
    )


def load_effective_config(root: Path, overrides: ConfigOverrides | None = None) -> IngestConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    resolved_root = root.resolve()
    base = default_config(resolved_root)
    payload = load_config_file(resolved_root)
    return merge_config(base, payload, overrides or ConfigOverrides())


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value
