import json
from pathlib import Path

import pytest

from resource_checker.config import ConfigError, load_config
from resource_checker.pipeline import run_audit
from resource_checker.tables import DEFAULT_LINT_OPTIONS, DEFAULT_TABLES


def test_example_config_loads_and_audits_clean():
    root = Path(__file__).resolve().parents[1]
    config = load_config(root / "configs" / "config.example.json")

    assert config.catalog_paths
    assert all(Path(item).is_absolute() for item in config.code_string_paths)
    assert config.lint_options == DEFAULT_LINT_OPTIONS
    assert "sample.home" in config.tables.no_resource_required
    assert DEFAULT_TABLES.known_required <= config.tables.known_required

    summary, findings = run_audit(config)

    assert findings == []
    assert summary.status == "SUCCESS"
    assert summary.checks_run == ("dead_keys", "missing_keys", "formats")
    assert summary.catalogs == 2


def test_tables_replace_drops_defaults(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "catalogs": ["bundle.properties"],
                "lint_options": ["cast"],
                "tables": {"known_required": ["compiler.err.only"], "replace": True},
                "checks": {"find_missing_keys": False},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.catalog_paths == (str(tmp_path.resolve() / "bundle.properties"),)
    assert config.lint_options == frozenset({"cast"})
    assert config.tables.known_required == frozenset({"compiler.err.only"})
    assert config.tables.need_to_investigate == frozenset()
    assert config.checks.find_dead_keys
    assert not config.checks.find_missing_keys


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"catalogs": "not-a-list"},
        {"tables": []},
        {"checks": {"find_everything": True}},
    ],
)
def test_invalid_configs(tmp_path: Path, payload):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_config(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.json")


def test_run_audit_with_no_checks_is_config_error(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "catalogs": ["bundle.properties"],
                "checks": {"find_dead_keys": False, "find_missing_keys": False, "check_formats": False},
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(ConfigError):
        run_audit(load_config(path))


def test_config_with_invalid_utf8(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"catalogs": ["\xff"]}')

    with pytest.raises(ConfigError):
        load_config(path)
