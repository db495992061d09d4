# pipeline/staging/parquet_writer.py
#
# Leitura e escrita padronizadas dos parquets de staging.
#
# Design decisions:
#   - Wrappers finos sobre o I/O do polars; o resto do pipeline nunca chama
#     polars diretamente para arquivo.
#   - write_parquet cria os diretorios pais.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Grava df em path (diretorios criados se preciso) e devolve path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path


def contar_linhas(path: Path) -> int:
    """Conta linhas sem materializar o arquivo."""
    return int(pl.scan_parquet(path).select(pl.len()).collect().item())
