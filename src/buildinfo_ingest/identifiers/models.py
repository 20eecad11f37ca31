"""Typed package and source references."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PackageReference:
    """Structured form of a package identifier."""

    type: str
    namespace: str
    name: str
    version: str
    qualifiers: tuple[tuple[str, str], ...] = ()
    subpath: str = ""

    def qualifier(self, key: str) -> str | None:
        """Return the first qualifier value for key, if present."""
        for name, value in self.qualifiers:
            if name == key:
                return value
        return None

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view."""
        return {
            "type": self.type,
            "namespace": self.namespace,
            "name": self.name,
            "version": self.version,
            "qualifiers": [{"key": key, "value": value} for key, value in self.qualifiers],
            "subpath": self.subpath,
        }


@dataclass(slots=True, frozen=True)
class SourceReference:
    """Source package a set of binaries was built from."""

    type: str
    namespace: str
    name: str

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view."""
        return {"type": self.type, "namespace": self.namespace, "name": self.name}
