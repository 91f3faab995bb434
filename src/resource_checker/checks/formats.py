from __future__ import annotations

from typing import Iterable, Mapping

from resource_checker.models import INVALID_FORMAT, Finding
from resource_checker.patterns import FormatError, validate_pattern


def check_formats(catalogs: Iterable[Mapping[str, str | None]]) -> list[Finding]:
    findings: list[Finding] = []
    for entries in catalogs:
        for key in sorted(entries):
            try:
                validate_pattern(entries[key])
            except FormatError as exc:
                findings.append(
                    Finding(
                        kind=INVALID_FORMAT,
                        subject=key,
                        message=f'Invalid MessageFormat pattern for resource "{key}": {exc}',
                    )
                )
    return findings
