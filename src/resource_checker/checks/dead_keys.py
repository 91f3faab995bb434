from __future__ import annotations

from typing import AbstractSet

from resource_checker.classifier import (
    is_known_required,
    is_known_suspect,
    is_lint_description_key,
    is_mandatory_warning_shape,
    is_synthesized_variant,
    strip_known_prefix,
)
from resource_checker.models import DEAD_KEY, MALFORMED_KEY, ClassifierTables, Finding


def find_dead_keys(
    code_strings: AbstractSet[str],
    resource_keys: AbstractSet[str],
    lint_options: AbstractSet[str],
    tables: ClassifierTables,
) -> list[Finding]:
    """Report catalog keys that are probably no longer required.

    A key counts as used when a code string names it, with or without its
    standard prefix, or when one of the known runtime conventions explains
    how the key is built.
    """
    findings: list[Finding] = []
    for key in sorted(resource_keys):
        # some keys are used directly, without a prefix
        if key in code_strings:
            continue

        suffix = strip_known_prefix(key)
        if suffix is None:
            findings.append(
                Finding(
                    kind=MALFORMED_KEY,
                    subject=key,
                    message=f"Resource key does not start with a standard prefix: {key}",
                )
            )
            continue

        if suffix in code_strings:
            continue
        if is_synthesized_variant(suffix, code_strings):
            continue
        if is_mandatory_warning_shape(suffix):
            continue
        if is_known_required(key, tables) or is_known_suspect(key, tables):
            continue
        if is_lint_description_key(suffix, lint_options):
            continue

        findings.append(
            Finding(
                kind=DEAD_KEY,
                subject=key,
                message=f"Resource key not found in code: {key}",
            )
        )

    return findings
