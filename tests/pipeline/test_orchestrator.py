# tests/pipeline/test_orchestrator.py
#
# End-to-end runs of run_lote over tmp_path. No network, no mocks.
from __future__ import annotations

from pathlib import Path

import duckdb
import pytest

from api.domain.cnpj.gerador import ModoGeracao
from pipeline.config import LoteConfig
from pipeline.main import main, run_lote
from pipeline.output.build_duckdb import validate_tables
from pipeline.sources.entrada.validate import EntradaInvalidaError


def _config(tmp_path: Path) -> LoteConfig:
    return LoteConfig(data_dir=tmp_path / "data", duckdb_output_path=tmp_path / "out" / "lote.duckdb")


def _entrada(tmp_path: Path) -> Path:
    arquivo = tmp_path / "entrada.csv"
    arquivo.write_text(
        "cnpj\n12.ABC.345/01DE-35\n11444777000162\n11444777000161\n",
        encoding="utf-8",
    )
    return arquivo


def test_run_lote_so_validacao(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = _config(tmp_path)

    output = run_lote(config, _entrada(tmp_path))

    assert output == config.duckdb_output_path
    assert validate_tables(output) == {"fato_validacao": 3, "fato_geracao": 0}
    saida = capsys.readouterr().out
    assert "[lote " in saida
    assert "Validos: 2 / Invalidos: 1" in saida
    assert "Concluido. DuckDB gravado em" in saida


def test_run_lote_com_geracao(tmp_path: Path) -> None:
    config = _config(tmp_path)

    output = run_lote(config, _entrada(tmp_path), 7, modo=ModoGeracao.NUMERICO, seed=1)

    conn = duckdb.connect(str(output), read_only=True)
    try:
        total, modos = conn.execute("SELECT COUNT(*), COUNT(DISTINCT modo) FROM fato_geracao").fetchone()
        validos = conn.execute("SELECT COUNT(*) FROM fato_validacao WHERE valido").fetchone()[0]
    finally:
        conn.close()
    assert (total, modos) == (7, 1)
    assert validos == 2


def test_run_lote_remove_geracao_de_execucao_anterior(tmp_path: Path) -> None:
    config = _config(tmp_path)
    run_lote(config, _entrada(tmp_path), 3)
    output = run_lote(config, _entrada(tmp_path))

    assert validate_tables(output)["fato_geracao"] == 0
    assert not (config.staging_dir / "geracoes.parquet").exists()


def test_run_lote_entrada_vazia_nao_cria_banco(tmp_path: Path) -> None:
    config = _config(tmp_path)
    arquivo = tmp_path / "vazio.csv"
    arquivo.write_text("cnpj\n", encoding="utf-8")

    with pytest.raises(EntradaInvalidaError):
        run_lote(config, arquivo)
    assert not config.duckdb_output_path.exists()


def test_run_lote_quantidade_negativa(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        run_lote(_config(tmp_path), _entrada(tmp_path), -1)


def test_main_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOTE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DUCKDB_OUTPUT_PATH", str(tmp_path / "cli.duckdb"))
    monkeypatch.delenv("LOTE_SEPARADOR", raising=False)
    monkeypatch.delenv("LOTE_COLUNA", raising=False)

    main([str(_entrada(tmp_path)), "--gerar", "2", "--modo", "numerico", "--seed", "5"])

    assert validate_tables(tmp_path / "cli.duckdb") == {"fato_validacao": 3, "fato_geracao": 2}
