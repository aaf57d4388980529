import os
import subprocess
import sys

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
PARSER = os.path.join(REPO_ROOT, "json_parser.py")

TEST_DIR = os.path.dirname(__file__)

json_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".json"))

VALID_FILES = [f for f in json_files if f.startswith("pass")]
INVALID_FILES = [f for f in json_files if f.startswith("fail")]

# Hard fail if fixtures are missing
if not VALID_FILES:
    raise RuntimeError("No pass*.json files found in harness directory")
if not INVALID_FILES:
    raise RuntimeError("No fail*.json files found in harness directory")


@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_json_returns_0(filename):
    path = os.path.join(TEST_DIR, filename)
    result = subprocess.run([sys.executable, PARSER, path])
    assert result.returncode == 0, f"Expected 0 from {filename}, got {result.returncode}"


@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_json_returns_1(filename):
    path = os.path.join(TEST_DIR, filename)
    result = subprocess.run([sys.executable, PARSER, path])
    assert result.returncode == 1, f"Expected 1 from {filename}, got {result.returncode}"


@pytest.mark.parametrize("filename", VALID_FILES)
def test_echo_output_parses_again(filename, tmp_path):
    # Rendering does not escape, so only fixtures without escapes re-parse.
    path = os.path.join(TEST_DIR, filename)
    with open(path, encoding="utf-8") as fh:
        if "\\" in fh.read():
            pytest.skip("escaped strings are not re-escaped on output")
    first = subprocess.run([sys.executable, PARSER, path, "--echo"], capture_output=True, text=True)
    assert first.returncode == 0
    echoed = tmp_path / "echo.json"
    echoed.write_text(first.stdout, encoding="utf-8")
    second = subprocess.run([sys.executable, PARSER, str(echoed), "--echo"], capture_output=True, text=True)
    assert second.stdout == first.stdout
