from __future__ import annotations

import re
from typing import AbstractSet

from resource_checker.models import ClassifierTables


STANDARD_PREFIXES = (
    "compiler.err.",
    "compiler.warn.",
    "compiler.note.",
    "compiler.misc.",
    "javac.",
    "launcher.err.",
)

MANDATORY_WARNING_BASES = ("deprecated", "unchecked", "varargs")
MANDATORY_WARNING_TAILS = (
    ".filename",
    ".filename.additional",
    ".plural",
    ".plural.additional",
    ".recompile",
)

LINT_DESCRIPTION_PREFIX = "opt.Xlint.desc."
VERBOSE_PREFIX = "verbose."

QUALIFIED_NAME = re.compile(r"(com|java|javax|jdk|sun)\.[A-Za-z.]+")
BARE_PACKAGE_ROOTS = {"java.", "javax.", "sun."}
DEBUG_FLAG_PREFIXES = ("debug.", "should-stop.", "diags.")


def strip_known_prefix(key: str) -> str | None:
    for prefix in STANDARD_PREFIXES:
        if key.startswith(prefix):
            return key[len(prefix) :]
    return None


def is_synthesized_variant(suffix: str, code_strings: AbstractSet[str]) -> bool:
    # numbered alternatives such as "foo.1" are built from "foo" at runtime
    if suffix.endswith(".1") and suffix[:-2] in code_strings:
        return True
    # verbose messages get their prefix added programmatically
    if suffix.startswith(VERBOSE_PREFIX) and suffix[len(VERBOSE_PREFIX) :] in code_strings:
        return True
    return False


def is_mandatory_warning_shape(suffix: str) -> bool:
    """Mandatory warning keys are concatenated at runtime, so no code string
    carries a recognizable piece of them."""
    for base in MANDATORY_WARNING_BASES:
        if suffix.startswith(base) and suffix[len(base) :] in MANDATORY_WARNING_TAILS:
            return True
    return False


def is_known_required(key: str, tables: ClassifierTables) -> bool:
    return key in tables.known_required


def is_known_suspect(key: str, tables: ClassifierTables) -> bool:
    return key in tables.need_to_investigate


def is_lint_description_key(suffix: str, lint_options: AbstractSet[str]) -> bool:
    if not suffix.startswith(LINT_DESCRIPTION_PREFIX):
        return False
    return suffix[len(LINT_DESCRIPTION_PREFIX) :] in lint_options


def is_non_resource_code_string(value: str, tables: ClassifierTables) -> bool:
    if value in tables.no_resource_required:
        return True
    # source file names, e.g. from SourceFile attributes
    if value.endswith(".java"):
        return True
    if QUALIFIED_NAME.fullmatch(value) or value in BARE_PACKAGE_ROOTS:
        return True
    return value.startswith(DEBUG_FLAG_PREFIXES)
