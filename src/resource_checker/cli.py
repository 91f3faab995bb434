from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from resource_checker.config import ConfigError, load_config
from resource_checker.corpora import CorpusError
from resource_checker.models import AuditConfig, CheckSettings
from resource_checker.patterns import FormatError, validate_pattern
from resource_checker.pipeline import run_audit
from resource_checker.tables import DEFAULT_LINT_OPTIONS, DEFAULT_TABLES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resource-checker",
        description="Compare compiler code strings against resource bundle keys",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    audit_parser = subparsers.add_parser("audit", help="Check resource keys and message formats")
    audit_parser.add_argument("--config", default=None, help="JSON config path")
    audit_parser.add_argument(
        "--code-strings",
        action="append",
        default=[],
        help="File of harvested code strings, one per line (repeatable)",
    )
    audit_parser.add_argument(
        "--catalog",
        action="append",
        default=[],
        help="Resource bundle (.properties or .json) (repeatable)",
    )
    audit_parser.add_argument("--lint-options", default=None, help="Comma-separated valid -Xlint option names")
    audit_parser.add_argument(
        "--find-dead-keys",
        action="store_true",
        help="find keys in resource bundles which are no longer required",
    )
    audit_parser.add_argument(
        "--find-missing-keys",
        action="store_true",
        help="find keys in resource bundles that are required but missing",
    )
    audit_parser.add_argument(
        "--check-formats",
        action="store_true",
        help="validate MessageFormat patterns in resource bundles",
    )
    audit_parser.add_argument("--parallel", action="store_true", help="Run the checks concurrently")
    audit_parser.add_argument("--output-dir", default=None, help="Write JSON/CSV reports here")

    pattern_parser = subparsers.add_parser("check-pattern", help="Validate MessageFormat patterns")
    pattern_parser.add_argument("patterns", nargs="+")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.command == "audit":
        try:
            config = _audit_config(args)
        except ConfigError as exc:
            parser.error(str(exc))
            return 2

        if not config.checks.enabled():
            parser.error("All checks are disabled in the config")
            return 2
        if not config.catalog_paths:
            parser.error("No catalogs given; use --catalog or --config")
            return 2
        if (config.checks.find_dead_keys or config.checks.find_missing_keys) and not config.code_string_paths:
            parser.error("Key checks need code strings; use --code-strings or --config")
            return 2

        try:
            summary, findings = run_audit(config, output_dir=args.output_dir)
        except (ConfigError, CorpusError) as exc:
            parser.error(str(exc))
            return 2

        for finding in findings:
            print(f"Error: {finding.message}", file=sys.stderr)
        print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=True))
        return 0 if not findings else 1

    if args.command == "check-pattern":
        results = []
        for pattern in args.patterns:
            try:
                validate_pattern(pattern)
                results.append({"pattern": pattern, "valid": True, "reason": None})
            except FormatError as exc:
                results.append({"pattern": pattern, "valid": False, "reason": str(exc)})
        print(json.dumps(results, indent=2, ensure_ascii=True))
        return 0 if all(item["valid"] for item in results) else 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _audit_config(args: argparse.Namespace) -> AuditConfig:
    if args.config:
        config = load_config(args.config)
    else:
        config = AuditConfig(
            code_string_paths=(),
            catalog_paths=(),
            lint_options=DEFAULT_LINT_OPTIONS,
            tables=DEFAULT_TABLES,
        )

    if args.code_strings:
        config = replace(config, code_string_paths=tuple(args.code_strings))
    if args.catalog:
        config = replace(config, catalog_paths=tuple(args.catalog))
    if args.lint_options is not None:
        options = {item.strip() for item in args.lint_options.split(",") if item.strip()}
        config = replace(config, lint_options=frozenset(options))

    parallel = args.parallel or config.checks.parallel
    if args.find_dead_keys or args.find_missing_keys or args.check_formats:
        checks = CheckSettings(
            find_dead_keys=args.find_dead_keys,
            find_missing_keys=args.find_missing_keys,
            check_formats=args.check_formats,
            parallel=parallel,
        )
    else:
        checks = replace(config.checks, parallel=parallel)
    return replace(config, checks=checks)


if __name__ == "__main__":
    raise SystemExit(main())
