"""
Tests for the CLI entry point.

Verifies that:
1. Results go to stdout with exit code 0.
2. Conversion errors produce 'error: <description>' on stderr with exit code 1.
3. Option ranges are enforced by argparse.
4. Defaults come from pyproject.toml when present; a bad or unreadable file exits 1.
"""

import pytest

from nconv.cli.__main__ import main


def run_cli(argv, capsys):
  code = main(argv)
  captured = capsys.readouterr()
  return code, captured.out, captured.err


def test_hex_to_dec(isolated_cwd, capsys):
  code, out, err = run_cli(["hex", "dec", "0xFF", "-g", "3", "-w", "4"], capsys)

  assert code == 0
  assert out == "0 255\n"
  assert err == ""


def test_default_grouping_separates_every_digit(isolated_cwd, capsys):
  code, out, _ = run_cli(["bin", "dec", "1010"], capsys)

  assert code == 0
  assert out == "1 0\n"


def test_grouping_equal_to_length_is_unseparated(isolated_cwd, capsys):
  _, out, _ = run_cli(["dec", "hex", "255", "--grouping", "2"], capsys)
  assert out == "FF\n"


def test_width_and_grouping(isolated_cwd, capsys):
  _, out, _ = run_cli(["-g", "4", "-w", "12", "dec", "hex", "3735928559"], capsys)
  assert out == "0000 DEAD BEEF\n"


def test_custom_separator(isolated_cwd, capsys):
  _, out, _ = run_cli(["dec", "bin", "222", "-g", "4", "-s", "_"], capsys)
  assert out == "1101_1110\n"


@pytest.mark.parametrize(
  "argv, message",
  [
    (["bin", "dec", "0b12"], "error: invalid digit: '2'"),
    (["hex", "dec", "0x" + "F" * 256], "error: input value exceeds 128 bit limit"),
    (["bin", "dec", "0xFF"], "error: invalid base: prefix '0x' does not match source base 'bin'"),
    (["hex", "dec", "0x"], "error: missing digits: nothing follows prefix '0x'"),
  ],
)
def test_conversion_errors(isolated_cwd, capsys, argv, message):
  code, out, err = run_cli(argv, capsys)

  assert code == 1
  assert out == ""
  assert err.strip() == message


def test_invalid_separator_reports_error(isolated_cwd, capsys):
  code, _, err = run_cli(["dec", "hex", "255", "-s", "ab"], capsys)

  assert code == 1
  assert err.startswith("error: separator:")


@pytest.mark.parametrize("option", ["-g", "-w"])
@pytest.mark.parametrize("value", ["0", "257", "abc"])
def test_option_range_enforced(isolated_cwd, capsys, option, value):
  with pytest.raises(SystemExit) as excinfo:
    main(["dec", "hex", "255", option, value])

  assert excinfo.value.code == 2


def test_unknown_system_rejected_by_parser(isolated_cwd, capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["base3", "dec", "12"])

  assert excinfo.value.code == 2
  assert "invalid choice" in capsys.readouterr().err


def test_version(capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["--version"])

  assert excinfo.value.code == 0
  assert "nconv" in capsys.readouterr().out


def test_help_lists_examples(capsys):
  with pytest.raises(SystemExit):
    main(["--help"])

  assert "0000 DEAD BEEF" in capsys.readouterr().out


def test_defaults_from_pyproject(tmp_path, monkeypatch, capsys):
  (tmp_path / "pyproject.toml").write_text("[tool.nconv]\ngrouping = 4\nwidth = 8\n", encoding="utf-8")
  monkeypatch.chdir(tmp_path)

  _, out, _ = run_cli(["dec", "hex", "255"], capsys)
  assert out == "0000 00FF\n"


def test_malformed_pyproject(tmp_path, monkeypatch, capsys):
  (tmp_path / "pyproject.toml").write_text("[tool.nconv\n", encoding="utf-8")
  monkeypatch.chdir(tmp_path)

  code, out, err = run_cli(["dec", "hex", "255"], capsys)

  assert code == 1
  assert out == ""
  assert err.startswith("error: invalid configuration:")


def test_pyproject_width_above_range(tmp_path, monkeypatch, capsys):
  (tmp_path / "pyproject.toml").write_text("[tool.nconv]\nwidth = 5000\ngrouping = 0\n", encoding="utf-8")
  monkeypatch.chdir(tmp_path)

  code, out, err = run_cli(["dec", "hex", "255"], capsys)

  assert code == 1
  assert out == ""
  assert err.startswith("error: width:")


def test_pyproject_not_utf8(tmp_path, monkeypatch, capsys):
  (tmp_path / "pyproject.toml").write_bytes(b"\xff\xfe[tool.nconv]\n")
  monkeypatch.chdir(tmp_path)

  code, out, err = run_cli(["dec", "hex", "255"], capsys)

  assert code == 1
  assert out == ""
  assert err.startswith("error: invalid configuration:")


def test_unreadable_pyproject(isolated_cwd, monkeypatch, capsys):
  def deny(start_path):
    raise PermissionError(13, "Permission denied", str(start_path / "pyproject.toml"))

  monkeypatch.setattr("nconv.config._load_toml_settings", deny)

  code, out, err = run_cli(["dec", "hex", "255"], capsys)

  assert code == 1
  assert out == ""
  assert err.startswith("error: invalid configuration:")
  assert "Permission denied" in err


def test_verbose_logs_to_stderr(isolated_cwd, capsys):
  code, out, err = run_cli(["-v", "hex", "dec", "0xFF", "-g", "3"], capsys)

  assert code == 0
  assert out == "255\n"
  assert "Converting '0xFF' from hexadecimal to decimal" in err
