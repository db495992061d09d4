# pipeline/sources/entrada/validate.py
#
# Limpeza estrutural da entrada: remove valores nulos/vazios e espacos nas
# pontas. A validacao de CNPJ em si (digitos verificadores) e feita no
# transform/validacao.py, nunca aqui.
from __future__ import annotations

import polars as pl


class EntradaInvalidaError(Exception):
    """Arquivo de entrada sem a coluna configurada ou sem nenhum valor."""


def validate_entrada(df: pl.DataFrame) -> pl.DataFrame:
    """Descarta linhas sem valor e apara espacos.

    Raises:
        EntradaInvalidaError: se nao sobrar nenhuma linha.
    """
    df = df.with_columns(pl.col("entrada").str.strip_chars())
    df = df.filter(pl.col("entrada").is_not_null() & (pl.col("entrada") != ""))
    if df.is_empty():
        raise EntradaInvalidaError("Arquivo de entrada nao contem nenhum CNPJ")
    return df
