import os
import pathlib
import subprocess
import sys
import tempfile

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
PARSER = os.path.join(REPO_ROOT, "json_parser.py")


def _run(data, *flags):
    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8") as f:
        f.write(data)
        fname = f.name
    try:
        return subprocess.run([sys.executable, PARSER, fname, *flags], capture_output=True, text=True)
    finally:
        pathlib.Path(fname).unlink(missing_ok=True)


def test_cli_prints_ok():
    cp = _run("[1,2,3]")
    assert cp.returncode == 0
    assert cp.stdout.strip() == "OK"


def test_cli_echo_renders_value():
    cp = _run('{"a":[1,,2,], "b" : null}', "--echo")
    assert cp.returncode == 0
    assert cp.stdout.strip() == '{"a": [1, 2], "b": null}'


def test_cli_debug_dumps_tree():
    cp = _run("[true]", "--debug")
    assert cp.returncode == 0
    assert "Array(elements=(Bool(value=True),))" in cp.stdout


def test_cli_reports_syntax_error():
    cp = _run("[1.5]")
    assert cp.returncode == 1
    assert "SyntaxError: malformed JSON" in cp.stderr


def test_cli_debug_logging_shows_detail():
    cp = _run("[1] x", "--log-level", "DEBUG")
    assert cp.returncode == 1
    assert "parse stopped at offset" in cp.stderr


def test_cli_missing_file():
    cp = subprocess.run([sys.executable, PARSER, os.path.join(REPO_ROOT, "no-such-file.json")],
                        capture_output=True, text=True)
    assert cp.returncode == 2
    assert "cannot read" in cp.stderr
