from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from resource_checker.models import AuditConfig, Catalog, Corpus


CODE_STRING = re.compile(r"[A-Za-z0-9\-_.]+")
# Properties lines end only at \n, \r or \r\n.
LINE_BREAK = re.compile(r"\r\n|\r|\n")

_PROPERTY_ESCAPE = re.compile(r"\\(u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_PROPERTY_CONTROL = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_PROPERTY_BLANK = " \t\f"


class CorpusError(ValueError):
    pass


def load_corpus(config: AuditConfig) -> Corpus:
    code_strings = load_code_strings(config.code_string_paths)
    catalogs = tuple(load_catalog(path) for path in config.catalog_paths)
    corpus = Corpus(
        code_strings=code_strings,
        catalogs=catalogs,
        lint_options=config.lint_options,
    )
    logging.info(
        f"Loaded {len(code_strings)} code strings and "
        f"{len(corpus.resource_keys)} resource keys from {len(catalogs)} catalog(s)"
    )
    return corpus


def load_code_strings(paths: Iterable[str | Path]) -> frozenset[str]:
    """Read harvested string constants, one per line.

    Only values that could be part of a resource key are kept; blank lines
    and ``#`` comment lines are skipped.
    """
    results: set[str] = set()
    for path in paths:
        source = Path(path)
        if not source.is_file():
            raise CorpusError(f"Code strings file not found: {source}")

        skipped = 0
        # undecodable bytes never form a valid code string
        text = source.read_text(encoding="utf-8", errors="replace")
        for line in LINE_BREAK.split(text):
            value = line.strip()
            if not value or value.startswith("#"):
                continue
            if CODE_STRING.fullmatch(value):
                results.add(value)
            else:
                skipped += 1
        if skipped:
            logging.debug(f"Ignored {skipped} non-key strings in {source}")

    return frozenset(results)


def load_catalog(path: str | Path) -> Catalog:
    source = Path(path)
    if not source.is_file():
        raise CorpusError(f"Catalog file not found: {source}")

    if source.suffix.lower() == ".json":
        entries = _read_json_catalog(source)
    else:
        entries = read_properties(_read_catalog_text(source))
    return Catalog(name=source.stem, entries=entries)


def read_properties(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_property(line)
        data[key] = value
    return data


def _read_catalog_text(path: Path) -> str:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # older bundles are ISO-8859-1 with \u escapes
        return raw.decode("latin-1")


def _read_json_catalog(path: Path) -> dict[str, str | None]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise CorpusError(f"Catalog is not valid UTF-8: {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CorpusError(f"Catalog is not valid JSON: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CorpusError(f"Catalog must be a JSON object: {path}")

    entries: dict[str, str | None] = {}
    for key, value in raw.items():
        if value is not None and not isinstance(value, str):
            raise CorpusError(f"Catalog value for {key!r} must be a string or null: {path}")
        entries[str(key)] = value
    return entries


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in LINE_BREAK.split(text):
        line = raw.lstrip(_PROPERTY_BLANK)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line

        if _is_continued(line):
            pending = line[:-1]
            continue
        pending = None
        yield line

    if pending is not None:
        yield pending


def _is_continued(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_property(line: str) -> tuple[str, str]:
    end = 0
    while end < len(line):
        ch = line[end]
        if ch == "\\":
            end += 2
            continue
        if ch in "=:" or ch in _PROPERTY_BLANK:
            break
        end += 1

    key = line[:end]
    rest = line[end:].lstrip(_PROPERTY_BLANK)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_PROPERTY_BLANK)
    return _unescape(key), _unescape(rest)


def _unescape(text: str) -> str:
    def replace(match: re.Match) -> str:
        token = match.group(1)
        if len(token) == 5 and token[0] == "u":
            return chr(int(token[1:], 16))
        return _PROPERTY_CONTROL.get(token, token)

    return _PROPERTY_ESCAPE.sub(replace, text)
