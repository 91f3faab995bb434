from pathlib import Path

import pytest

from resource_checker.corpora import CorpusError, load_catalog, load_code_strings, read_properties


def test_read_properties_handles_continuations_and_escapes():
    text = (
        "# comment\n"
        "! another comment\n"
        "\n"
        "compiler.err.cant.resolve=\\\n"
        "    cannot find symbol\\n\\\n"
        "    symbol: {0}\n"
        "compiler.misc.colon : value with colon\n"
        "compiler.misc.space value after space\n"
        "compiler.misc.unicode=caf\\u00e9\\t!\n"
        "compiler.misc.escaped\\=key=v\n"
        "compiler.misc.backslash=ends with \\\\\n"
        "compiler.misc.empty=\n"
        "compiler.misc.hash=\\\n"
        "    # not a comment\n"
    )

    data = read_properties(text)

    assert data["compiler.err.cant.resolve"] == "cannot find symbol\nsymbol: {0}"
    assert data["compiler.misc.colon"] == "value with colon"
    assert data["compiler.misc.space"] == "value after space"
    assert data["compiler.misc.unicode"] == "café\t!"
    assert data["compiler.misc.escaped=key"] == "v"
    assert data["compiler.misc.backslash"] == "ends with \\"
    assert data["compiler.misc.empty"] == ""
    assert data["compiler.misc.hash"] == "# not a comment"
    assert len(data) == 8


def test_load_code_strings_filters_non_key_values(tmp_path: Path):
    first = tmp_path / "a.txt"
    first.write_text("# header\ncant.resolve\n\n  padded.value  \nhas space\nLjava/lang/Object;\n", encoding="utf-8")
    second = tmp_path / "b.txt"
    second.write_text("cant.resolve\nmodule-info.class\n", encoding="utf-8")

    values = load_code_strings([first, second])

    assert values == frozenset({"cant.resolve", "padded.value", "module-info.class"})


def test_load_code_strings_missing_file(tmp_path: Path):
    with pytest.raises(CorpusError):
        load_code_strings([tmp_path / "nope.txt"])


def test_load_json_catalog(tmp_path: Path):
    path = tmp_path / "launcher.json"
    path.write_text('{"launcher.err.a": "x {0}", "launcher.err.b": null}', encoding="utf-8")

    catalog = load_catalog(path)

    assert catalog.name == "launcher"
    assert catalog.entries == {"launcher.err.a": "x {0}", "launcher.err.b": None}


def test_load_json_catalog_rejects_non_string_values(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text('{"launcher.err.a": 3}', encoding="utf-8")

    with pytest.raises(CorpusError):
        load_catalog(path)


def test_load_properties_catalog_latin1(tmp_path: Path):
    path = tmp_path / "compiler_de.properties"
    path.write_bytes("compiler.misc.x=Gr\xf6\xdfe\n".encode("latin-1"))

    catalog = load_catalog(path)

    assert catalog.name == "compiler_de"
    assert catalog.entries == {"compiler.misc.x": "Gr\xf6\xdfe"}


def test_read_properties_splits_only_on_line_terminators():
    text = "compiler.misc.a=x\fy\ncompiler.misc.b=p q\r\ncompiler.misc.c=r\x0bs\rcompiler.misc.d=t\n"

    data = read_properties(text)

    assert sorted(data) == ["compiler.misc.a", "compiler.misc.b", "compiler.misc.c", "compiler.misc.d"]
    assert data["compiler.misc.a"] == "x\fy"
    assert data["compiler.misc.b"] == "p q"
    assert data["compiler.misc.c"] == "r\x0bs"


def test_load_code_strings_skips_undecodable_bytes(tmp_path: Path):
    path = tmp_path / "strings.txt"
    path.write_bytes(b"cant.resolve\n\xff\xfebroken\nproc.messager\n")

    assert load_code_strings([path]) == frozenset({"cant.resolve", "proc.messager"})


def test_load_json_catalog_rejects_invalid_utf8(tmp_path: Path):
    path = tmp_path / "launcher.json"
    path.write_bytes(b'{"launcher.err.a": "\xff"}')

    with pytest.raises(CorpusError):
        load_catalog(path)
