from __future__ import annotations

from pathlib import Path

from buildinfo_ingest.config import ConfigOverrides, load_effective_config
from buildinfo_ingest.service import create_ingestor


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.limits.max_document_bytes == 4 * 1024 * 1024
    assert config.parsing.strict_build_date is False
    assert config.audit.enabled is True
    assert config.data_dir == (tmp_path / ".buildinfo_ingest").resolve()


def test_merge_order_defaults_then_file_then_overrides(tmp_path: Path) -> None:
    (tmp_path / "buildinfo_ingest.toml").write_text(
        "\n".join(
            [
                "[limits]",
                "max_document_bytes = 2048",
                "",
                "[parsing]",
                "strict_build_date = true",
                "",
                "[audit]",
                "enabled = false",
            ]
        ),
        encoding="utf-8",
    )
    overrides = ConfigOverrides(max_document_bytes=4096, audit_enabled=True)
    ingestor = create_ingestor(root=str(tmp_path), overrides=overrides)

    effective = ingestor.config.to_public_dict()

    assert effective["limits"] == {"max_document_bytes": 4096}
    assert effective["parsing"] == {"strict_build_date": True}
    assert effective["audit"] == {"enabled": True}


def test_data_dir_override_has_highest_precedence(tmp_path: Path) -> None:
    custom_data_dir = tmp_path / ".custom_data"
    ingestor = create_ingestor(
        root=str(tmp_path),
        overrides=ConfigOverrides(data_dir=custom_data_dir),
    )

    assert ingestor.config.to_public_dict()["data_dir"] == str(custom_data_dir.resolve())


def test_data_dir_argument_is_used_when_overrides_omit_it(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path), data_dir=str(tmp_path / "audit"))

    assert ingestor.config.data_dir == (tmp_path / "audit").resolve()
