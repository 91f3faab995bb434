from __future__ import annotations

import json
from pathlib import Path

from resource_checker.models import AuditConfig, CheckSettings, ClassifierTables
from resource_checker.tables import DEFAULT_LINT_OPTIONS, DEFAULT_TABLES


class ConfigError(ValueError):
    pass


def load_config(path: str | Path) -> AuditConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config file is not valid UTF-8: {config_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config file is not valid JSON: {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object")

    base_dir = config_path.resolve().parent
    code_string_paths = [_resolve(base_dir, item) for item in _ensure_string_list(raw.get("code_strings", []))]
    catalog_paths = [_resolve(base_dir, item) for item in _ensure_string_list(raw.get("catalogs", []))]

    if "lint_options" in raw:
        lint_options = frozenset(_ensure_string_list(raw["lint_options"]))
    else:
        lint_options = DEFAULT_LINT_OPTIONS

    return AuditConfig(
        code_string_paths=tuple(code_string_paths),
        catalog_paths=tuple(catalog_paths),
        lint_options=lint_options,
        tables=load_tables(raw.get("tables", {})),
        checks=_load_checks(raw.get("checks", {})),
    )


def load_tables(raw: object) -> ClassifierTables:
    """Build the allow-lists from config, extending the built-in ones unless
    ``replace`` is set."""
    if not isinstance(raw, dict):
        raise ConfigError("'tables' must be an object")

    base = ClassifierTables() if bool(raw.get("replace", False)) else DEFAULT_TABLES
    return ClassifierTables(
        known_required=base.known_required | frozenset(_ensure_string_list(raw.get("known_required", []))),
        need_to_investigate=base.need_to_investigate
        | frozenset(_ensure_string_list(raw.get("need_to_investigate", []))),
        no_resource_required=base.no_resource_required
        | frozenset(_ensure_string_list(raw.get("no_resource_required", []))),
    )


def _load_checks(raw: object) -> CheckSettings:
    if not isinstance(raw, dict):
        raise ConfigError("'checks' must be an object")

    unknown = sorted(set(raw) - {"find_dead_keys", "find_missing_keys", "check_formats", "parallel"})
    if unknown:
        raise ConfigError(f"Unknown check settings: {', '.join(unknown)}")

    return CheckSettings(
        find_dead_keys=bool(raw.get("find_dead_keys", True)),
        find_missing_keys=bool(raw.get("find_missing_keys", True)),
        check_formats=bool(raw.get("check_formats", True)),
        parallel=bool(raw.get("parallel", False)),
    )


def _resolve(base_dir: Path, value: str) -> str:
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _ensure_string_list(value: object) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("Expected a list of strings")
    return [str(item) for item in value]
