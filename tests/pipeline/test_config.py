# tests/pipeline/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.config import load_config


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOTE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("DUCKDB_OUTPUT_PATH", raising=False)
    monkeypatch.delenv("LOTE_SEPARADOR", raising=False)
    monkeypatch.delenv("LOTE_COLUNA", raising=False)

    config = load_config()

    assert config.data_dir == tmp_path
    assert config.staging_dir == tmp_path / "staging"
    assert config.duckdb_output_path == tmp_path / "output" / "lote_cnpj.duckdb"
    assert config.separador == ","
    assert config.coluna == "cnpj"


def test_load_config_separador_invalido(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOTE_SEPARADOR", ";;")
    with pytest.raises(ValueError, match="LOTE_SEPARADOR"):
        load_config()


def test_load_config_coluna_vazia(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOTE_SEPARADOR", raising=False)
    monkeypatch.setenv("LOTE_COLUNA", "  ")
    with pytest.raises(ValueError, match="LOTE_COLUNA"):
        load_config()


def test_config_imutavel(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOTE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("LOTE_SEPARADOR", raising=False)
    monkeypatch.delenv("LOTE_COLUNA", raising=False)
    config = load_config()
    with pytest.raises(AttributeError):
        config.coluna = "outra"  # type: ignore[misc]
