from __future__ import annotations

from resource_checker.checks.engine import run_checks

__all__ = ["run_checks"]
