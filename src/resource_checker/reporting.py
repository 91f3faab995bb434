from __future__ import annotations

import csv
import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

from resource_checker.models import FINDING_KINDS, AuditSummary, Finding


FINDING_COLUMNS = ["kind", "subject", "message"]


def write_reports(summary: AuditSummary, findings: list[Finding], output_dir: str | Path) -> dict[str, str]:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    counts = Counter(item.kind for item in findings)
    by_kind = [
        {"kind": kind, "findings_count": counts[kind]}
        for kind in FINDING_KINDS
        if counts[kind]
    ]

    summary_json = out_dir / "audit_summary.json"
    findings_csv = out_dir / "findings.csv"
    by_kind_csv = out_dir / "findings_by_kind.csv"

    _write_csv(findings_csv, [item.to_dict() for item in findings], FINDING_COLUMNS)
    _write_csv(by_kind_csv, by_kind, ["kind", "findings_count"])

    files = {
        "audit_summary": str(summary_json.resolve()),
        "findings": str(findings_csv.resolve()),
        "findings_by_kind": str(by_kind_csv.resolve()),
    }
    _write_json(
        summary_json,
        {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "summary": summary.to_dict(),
            "counts": {item["kind"]: item["findings_count"] for item in by_kind},
            "files": files,
        },
    )
    return files


def _write_json(path: Path, payload: dict) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=True)


def _write_csv(path: Path, rows: list[dict], columns: list[str]) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        # the header is written even when there are no rows
        fieldnames = list(columns)
        seen = set(fieldnames)
        for row in rows:
            for key in row:
                if key not in seen:
                    seen.add(key)
                    fieldnames.append(key)

        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
