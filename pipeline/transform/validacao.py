# pipeline/transform/validacao.py
#
# Valida cada entrada do lote.
#
# Design decisions:
#   - Normalizacao (maiusculas, remocao de pontuacao) e mascara sao
#     vetorizadas em polars.
#   - O veredito valido/invalido sempre passa pelo validador do dominio,
#     para o lote e a API nunca divergirem.
#
# Invariants:
#   - Ordem e quantidade de linhas sao preservadas.
#   - mascarado e nulo quando puro nao tem 14 caracteres.
from __future__ import annotations

import polars as pl

from api.domain.cnpj.algoritmo import TAMANHO_TOTAL
from api.domain.cnpj.validador import validar_cnpj

_PONTUACAO = r"[.\-/\s]"


def validar_df(df: pl.DataFrame) -> pl.DataFrame:
    """Adiciona puro, mascarado e valido a um DataFrame com coluna 'entrada'."""
    df = df.with_columns(
        pl.col("entrada").str.to_uppercase().str.replace_all(_PONTUACAO, "").alias("puro"),
    )
    return df.with_columns(
        mascarar_expr(pl.col("puro")).alias("mascarado"),
        pl.col("entrada")
        .map_elements(lambda valor: validar_cnpj(valor).valido, return_dtype=pl.Boolean)
        .alias("valido"),
    )


def mascarar_expr(puro: pl.Expr) -> pl.Expr:
    """Equivalente vetorizado de aplicar_mascara para valores completos."""
    return (
        pl.when(puro.str.len_chars() == TAMANHO_TOTAL)
        .then(
            pl.concat_str(
                [
                    puro.str.slice(0, 2),
                    pl.lit("."),
                    puro.str.slice(2, 3),
                    pl.lit("."),
                    puro.str.slice(5, 3),
                    pl.lit("/"),
                    puro.str.slice(8, 4),
                    pl.lit("-"),
                    puro.str.slice(12, 2),
                ]
            )
        )
        .otherwise(pl.lit(None, dtype=pl.Utf8))
    )


def resumir(df: pl.DataFrame) -> dict[str, int]:
    """Totais de um DataFrame devolvido por validar_df."""
    validos = int(df["valido"].sum())
    return {"total": len(df), "validos": validos, "invalidos": len(df) - validos}
