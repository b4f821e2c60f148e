from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from nlu_utils.cli import app


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: Any) -> None:
    monkeypatch.delenv("NLU_UTILS_LANGUAGE", raising=False)
    monkeypatch.delenv("NLU_UTILS_LOG_LEVEL", raising=False)


def _run(*args: str) -> Any:
    return CliRunner().invoke(app, list(args))


def test_normalize() -> None:
    result = _run("normalize", "  HelöÀ ")
    assert result.exit_code == 0
    assert result.stdout.strip() == "heloa"


def test_strip_diacritics_keeps_case() -> None:
    result = _run("strip-diacritics", "çéaÀ")
    assert result.exit_code == 0
    assert result.stdout.strip() == "ceaA"


def test_shape_and_hash() -> None:
    assert _run("shape", "Hello").stdout.strip() == "Xxx"
    assert _run("hash", "a").stdout.strip() == "-2046694260"


def test_range_conversions() -> None:
    assert _run("to-char", "héllo", "3", "6").stdout.strip() == "2 5"
    assert _run("to-byte", "héllo", "2", "5").stdout.strip() == "3 6"
    assert _run("substring", "Hellö !!", "2", "5").stdout.strip() == "llö"


def test_json_output() -> None:
    result = _run("to-char", "héllo", "2", "6", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"byte_range": [2, 6], "char_range": [2, 5]}


def test_json_from_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("output:\n  format: json\n")
    result = _run("--config", str(cfg_file), "normalize", " Éa ")
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"input": " Éa ", "normalized": "ea"}
    result = _run("--config", str(cfg_file), "--format", "text", "normalize", " Éa ")
    assert result.stdout.strip() == "ea"


def test_language_default_and_explicit(tmp_path: Path) -> None:
    result = _run("language")
    assert result.exit_code == 0
    assert "language: en" in result.stdout

    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("language: fr\n")
    result = _run("--config", str(cfg_file), "language", "--json")
    assert json.loads(result.stdout)["language"] == "fr"

    result = _run("language", "--lang", "PT_BR", "--json")
    payload = json.loads(result.stdout)
    assert payload["language"] == "pt_br"
    assert payload["separator"] == " "
