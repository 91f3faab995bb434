from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from resource_checker.checks import run_checks
from resource_checker.config import ConfigError
from resource_checker.corpora import load_corpus
from resource_checker.models import AuditConfig, AuditSummary, Finding
from resource_checker.reporting import write_reports


def run_audit(
    config: AuditConfig,
    *,
    output_dir: str | Path | None = None,
) -> tuple[AuditSummary, list[Finding]]:
    enabled = config.checks.enabled()
    if not enabled:
        raise ConfigError("At least one check must be enabled")

    # The corpus is complete before any check reads it.
    corpus = load_corpus(config)
    findings = run_checks(corpus, config.checks, config.tables)

    summary = AuditSummary(
        status="SUCCESS" if not findings else "FAILED",
        checks_run=enabled,
        code_strings=len(corpus.code_strings),
        resource_keys=len(corpus.resource_keys),
        catalogs=len(corpus.catalogs),
        findings_count=len(findings),
    )
    logging.info(f"Audit {summary.status.lower()} with {summary.findings_count} finding(s)")

    if output_dir is not None:
        summary = replace(summary, output_dir=str(Path(output_dir).resolve()))
        write_reports(summary, findings, output_dir)

    return summary, findings
