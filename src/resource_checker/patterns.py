from __future__ import annotations

import re


SEG_RAW = 0
SEG_INDEX = 1
SEG_TYPE = 2
SEG_MODIFIER = 3

# Quoted text without any of these characters did not need quoting.
_NEEDLESSLY_QUOTED = re.compile(r"[^'{},]+")


class FormatError(ValueError):
    pass


def validate_pattern(pattern: str | None) -> None:
    """Check a MessageFormat pattern for balanced braces and needless quoting.

    Mirrors the lexical pass of ``java.text.MessageFormat.applyPattern``:
    outside a ``{...}`` argument a doubled ``''`` is a literal apostrophe and
    a single ``'`` toggles a quoted run; inside an argument the segment only
    advances on ``,`` and nested braces are counted.

    Raises ``FormatError`` describing the first problem found.
    """
    if pattern is None:
        raise FormatError("null pattern")

    part = SEG_RAW
    brace_depth = 0
    quoted_start = -1
    length = len(pattern)
    i = 0
    while i < length:
        ch = pattern[i]
        if part == SEG_RAW:
            if ch == "'":
                if i + 1 < length and pattern[i + 1] == "'":
                    i += 1
                elif quoted_start == -1:
                    quoted_start = i
                else:
                    _validate_quoted(pattern[quoted_start + 1 : i])
                    quoted_start = -1
            elif ch == "{" and quoted_start == -1:
                part = SEG_INDEX
            i += 1
            continue

        if quoted_start != -1:
            if ch == "'":
                _validate_quoted(pattern[quoted_start + 1 : i])
                quoted_start = -1
            i += 1
            continue

        if ch == ",":
            if part < SEG_MODIFIER:
                part += 1
        elif ch == "{":
            brace_depth += 1
        elif ch == "}":
            if brace_depth == 0:
                part = SEG_RAW
            else:
                brace_depth -= 1
        elif ch == "'":
            quoted_start = i
        i += 1

    if part != SEG_RAW:
        raise FormatError("unmatched braces")
    if quoted_start != -1:
        raise FormatError(f"unmatched quote starting at offset {quoted_start}")


def _validate_quoted(quoted: str) -> None:
    # Quotes around plain text are dropped by MessageFormat, so they were
    # most likely meant as literal apostrophes.
    if _NEEDLESSLY_QUOTED.fullmatch(quoted):
        raise FormatError(f'unescaped single quotes around "{quoted}"')
