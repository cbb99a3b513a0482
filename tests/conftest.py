"""Test configuration helpers."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    for path in (root / "src", Path(__file__).resolve().parent):
        if str(path) not in sys.path:
            sys.path.insert(0, str(path))


_ensure_repo_root_on_path()

# Indices 1, 2, 3 give y = 4, 7, 12 on y = x^2 + 3.
EXAMPLE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def example_document() -> dict:
    return json.loads(json.dumps(EXAMPLE_DOCUMENT))


@pytest.fixture
def write_share_file(tmp_path):
    def _write(document: dict, name: str = "shares.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def int_digit_limit():
    """Run with the interpreter's default int/str conversion limit, restoring it afterwards."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
