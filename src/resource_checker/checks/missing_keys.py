from __future__ import annotations

import re
from typing import AbstractSet, Iterable

from resource_checker.classifier import is_non_resource_code_string
from resource_checker.models import MISSING_KEY, ClassifierTables, Finding


KEY_FRAGMENT = re.compile(r"[A-Za-z][^.]*\..*")


def find_missing_keys(
    code_strings: AbstractSet[str],
    resource_keys: AbstractSet[str],
    tables: ClassifierTables,
) -> list[Finding]:
    findings: list[Finding] = []
    for value in sorted(code_strings):
        if not KEY_FRAGMENT.fullmatch(value):
            continue
        if is_non_resource_code_string(value, tables):
            continue
        if has_suffix_match(resource_keys, value):
            continue
        findings.append(
            Finding(
                kind=MISSING_KEY,
                subject=value,
                message=f'no match for "{value}"',
            )
        )
    return findings


def has_suffix_match(resource_keys: Iterable[str], fragment: str) -> bool:
    """Look for a resource key that ends in this string fragment."""
    return any(key.endswith(fragment) for key in resource_keys)
