from __future__ import annotations

import textwrap
from pathlib import Path

from utf8totex.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_translation(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "Café au lait\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"Caf{\\'e} au lait\n"


def test_cli_reads_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["-"], input="naïve")

    assert result.exit_code == 0
    assert result.stdout_bytes == b'na{\\"\\i}ve'


def test_cli_defaults_to_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [], input="50%")

    assert result.exit_code == 0
    assert result.stdout_bytes == b"50\\%"


def test_cli_fuzzy_keeps_existing_tex(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "\\emph{Caf} é $x^2$\n")

    result = cli_runner.invoke(cli, ["--fuzzy", str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"\\emph{Caf} {\\'e} $x^2$\n"


def test_cli_without_fuzzy_escapes_tex(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "{x}")

    result = cli_runner.invoke(cli, ["--no-fuzzy", str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"\\{x\\}"


def test_cli_math_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "formula.txt", "α ≤ β")

    result = cli_runner.invoke(cli, ["--environment", "math", str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"{\\alpha} {\\leq} {\\beta}"


def test_cli_writes_output_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "Straße")
    output = tmp_path / "doc.tex"

    result = cli_runner.invoke(cli, [str(target), "-o", str(output)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b""
    assert output.read_bytes() == b"Stra{\\ss}e"


def test_cli_reports_untranslatable_input(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "snow ☃ man")
    output = tmp_path / "doc.tex"

    result = cli_runner.invoke(cli, [str(target), "-o", str(output)])

    assert result.exit_code == 1
    assert "No TeX translation for U+2603" in result.output
    assert not output.exists()


def test_cli_failure_prints_no_partial_output(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "bad.txt"
    target.write_bytes(b"abc\xff")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Invalid UTF-8 sequence at byte 3" in result.output
    assert not result.stdout_bytes.startswith(b"ab")


def test_cli_reports_bad_literal(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "\\emph{é}")

    result = cli_runner.invoke(cli, ["--fuzzy", str(target)])

    assert result.exit_code == 1
    assert "Non-ASCII character U+00E9" in result.output


def test_cli_uses_pyproject_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.utf8totex]
        fuzzy = true
        """,
    )
    target = _write(tmp_path, "doc.txt", "\\LaTeX{}")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"\\LaTeX{}"


def test_cli_option_overrides_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(tmp_path, "[tool.utf8totex]\nfuzzy = true\n")
    target = _write(tmp_path, "doc.txt", "{}")

    result = cli_runner.invoke(cli, ["--no-fuzzy", str(target)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"\\{\\}"


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(tmp_path, '[tool.utf8totex]\nenvironment = "display"\n')
    target = _write(tmp_path, "doc.txt", "x")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 2
    assert "`environment` must be one of" in result.output


def test_cli_rejects_unknown_environment_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "x")

    result = cli_runner.invoke(cli, ["--environment", "display", str(target)])

    assert result.exit_code == 2


def test_cli_enforces_size_limit_from_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UTF8TOTEX_MAX_INPUT_SIZE", "4")
    target = _write(tmp_path, "doc.txt", "too long")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size of 4 bytes" in result.output


def test_cli_rejects_invalid_size_limit(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UTF8TOTEX_MAX_INPUT_SIZE", "lots")
    target = _write(tmp_path, "doc.txt", "x")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "UTF8TOTEX_MAX_INPUT_SIZE" in result.output


def test_cli_reports_missing_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "Error accessing" in result.output


def test_cli_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
