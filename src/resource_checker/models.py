from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping


MALFORMED_KEY = "MALFORMED_KEY"
DEAD_KEY = "DEAD_KEY"
MISSING_KEY = "MISSING_KEY"
INVALID_FORMAT = "INVALID_FORMAT"

FINDING_KINDS = (MALFORMED_KEY, DEAD_KEY, MISSING_KEY, INVALID_FORMAT)


@dataclass(frozen=True)
class Finding:
    kind: str
    subject: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ClassifierTables:
    known_required: frozenset[str] = frozenset()
    need_to_investigate: frozenset[str] = frozenset()
    no_resource_required: frozenset[str] = frozenset()


@dataclass(frozen=True)
class CheckSettings:
    find_dead_keys: bool = True
    find_missing_keys: bool = True
    check_formats: bool = True
    parallel: bool = False

    def enabled(self) -> tuple[str, ...]:
        names = []
        if self.find_dead_keys:
            names.append("dead_keys")
        if self.find_missing_keys:
            names.append("missing_keys")
        if self.check_formats:
            names.append("formats")
        return tuple(names)


@dataclass(frozen=True)
class AuditConfig:
    code_string_paths: tuple[str, ...]
    catalog_paths: tuple[str, ...]
    lint_options: frozenset[str]
    tables: ClassifierTables
    checks: CheckSettings = CheckSettings()


@dataclass(frozen=True)
class Catalog:
    name: str
    entries: Mapping[str, str | None] = field(default_factory=dict)


@dataclass(frozen=True)
class Corpus:
    code_strings: frozenset[str]
    catalogs: tuple[Catalog, ...]
    lint_options: frozenset[str] = frozenset()

    @property
    def resource_keys(self) -> frozenset[str]:
        keys: set[str] = set()
        for catalog in self.catalogs:
            keys.update(catalog.entries)
        return frozenset(keys)


@dataclass(frozen=True)
class AuditSummary:
    status: str
    checks_run: tuple[str, ...]
    code_strings: int
    resource_keys: int
    catalogs: int
    findings_count: int
    output_dir: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
