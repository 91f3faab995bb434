from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from resource_checker.checks.dead_keys import find_dead_keys
from resource_checker.checks.formats import check_formats
from resource_checker.checks.missing_keys import find_missing_keys
from resource_checker.models import CheckSettings, ClassifierTables, Corpus, Finding


def run_checks(corpus: Corpus, checks: CheckSettings, tables: ClassifierTables) -> list[Finding]:
    resource_keys = corpus.resource_keys
    jobs: list[tuple[str, Callable[[], list[Finding]]]] = []

    if checks.find_dead_keys:
        jobs.append(
            (
                "dead_keys",
                lambda: find_dead_keys(corpus.code_strings, resource_keys, corpus.lint_options, tables),
            )
        )
    if checks.find_missing_keys:
        jobs.append(
            (
                "missing_keys",
                lambda: find_missing_keys(corpus.code_strings, resource_keys, tables),
            )
        )
    if checks.check_formats:
        jobs.append(
            (
                "formats",
                lambda: check_formats(catalog.entries for catalog in corpus.catalogs),
            )
        )

    if checks.parallel and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="check") as executor:
            futures = [(name, executor.submit(job)) for name, job in jobs]
            results = [(name, future.result()) for name, future in futures]
    else:
        results = [(name, job()) for name, job in jobs]

    # Per-check lists are merged in a fixed order so output is scheduling independent.
    findings: list[Finding] = []
    for name, items in results:
        logging.info(f"Check {name}: {len(items)} finding(s)")
        findings.extend(items)
    return findings
