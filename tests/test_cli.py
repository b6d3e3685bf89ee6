"""Tests for the word-stems command-line entry point."""

import io
import os

import pytest

from word_stems import __version__
from word_stems.cli import EXIT_INPUT_ERROR, EXIT_OK, main, run
from word_stems.formatting import FREQUENCY_HEADER


def u(text: str) -> bytes:
    return text.encode("utf-8")


def test_main_prints_report(tmp_path, capsysbinary) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(u("Добрым людям - добро!\n"))

    assert main([str(path)]) == EXIT_OK

    out = capsysbinary.readouterr().out
    assert out == u(
        "1 - добрым\n"
        "2 - людям\n"
        "3 - добро\n"
        "\n"
        "=== Повторы (по основе) ===\n"
        "добр : 2\n"
        "люд : 1\n"
    )


def test_main_missing_file(tmp_path, capsysbinary) -> None:
    missing = tmp_path / "nope.txt"

    assert main([str(missing)]) == EXIT_INPUT_ERROR

    out = capsysbinary.readouterr().out
    assert out == u(f"Невозможно открыть файл: {missing}\n")
    assert FREQUENCY_HEADER not in out


def test_run_continues_after_failed_file(tmp_path) -> None:
    good = tmp_path / "good.txt"
    good.write_bytes(u("кошка"))
    missing = tmp_path / "missing.txt"
    out = io.BytesIO()

    status = run([str(missing), str(good)], out)

    assert status == EXIT_INPUT_ERROR
    text = out.getvalue()
    assert text.startswith(u(f"Невозможно открыть файл: {missing}\n"))
    assert text.endswith(u("кошк : 1\n"))


def test_run_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    out = io.BytesIO()

    assert run([str(path)], out) == EXIT_OK
    assert out.getvalue() == b"\n" + FREQUENCY_HEADER + b"\n"


def test_main_requires_path(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_main_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_run_missing_path_with_undecodable_name(tmp_path) -> None:
    raw = os.fsencode(tmp_path) + b"/\xff.txt"
    out = io.BytesIO()

    assert run([os.fsdecode(raw)], out) == EXIT_INPUT_ERROR
    assert out.getvalue() == "Невозможно открыть файл: ".encode("utf-8") + raw + b"\n"
