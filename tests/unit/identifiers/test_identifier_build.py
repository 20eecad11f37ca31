from __future__ import annotations

from buildinfo_ingest.identifiers import build_identifier, build_source_reference, sanitize_name
from buildinfo_ingest.parser import BuildInfoRecord


def test_version_and_arch_produce_arch_qualifier() -> None:
    identifier = build_identifier("attr", "1:2.5.1-1", "amd64", "debian")

    assert identifier == "pkg:deb/debian/attr@1:2.5.1-1?arch=amd64"


def test_version_only_omits_qualifiers() -> None:
    assert build_identifier("attr", "1:2.5.1-1", "", "debian") == "pkg:deb/debian/attr@1:2.5.1-1"


def test_missing_version_is_not_representable() -> None:
    assert build_identifier("attr", "", "amd64", "debian") == ""
    assert build_identifier("attr", "", "", "debian") == ""


def test_identifier_is_deterministic() -> None:
    first = build_identifier("libstdc++6", "10.2.1-6", "amd64", "debian")
    second = build_identifier("libstdc++6", "10.2.1-6", "amd64", "debian")

    assert first == second == "pkg:deb/debian/libstdc%2B%2B6@10.2.1-6?arch=amd64"


def test_sanitize_name_escapes_separators() -> None:
    assert sanitize_name("a/b@c?d#e") == "a%2Fb%40c%3Fd%23e"
    assert sanitize_name("python3.9-dev") == "python3.9-dev"


def test_source_reference_uses_src_namespace() -> None:
    record = BuildInfoRecord(source="attr", distro="debian")

    source = build_source_reference(record)

    assert source.type == "deb"
    assert source.namespace == "debian-src"
    assert source.name == "attr"
