# pipeline/transform/geracao.py
from __future__ import annotations

import random

import polars as pl

from api.domain.cnpj.gerador import ModoGeracao, gerar_lote


def gerar_df(
    quantidade: int,
    modo: ModoGeracao = ModoGeracao.ALFANUMERICO,
    seed: int | None = None,
) -> pl.DataFrame:
    """Gera `quantidade` CNPJs em DataFrame (posicao, puro, mascarado, modo).

    Com seed o resultado e reproduzivel.

    Raises:
        GeracaoEsgotada: propagado do dominio.
    """
    gerados = gerar_lote(quantidade, modo, random.Random(seed))
    return pl.DataFrame(
        {
            "posicao": pl.int_range(1, len(gerados) + 1, eager=True),
            "puro": pl.Series("puro", [g.puro for g in gerados], dtype=pl.Utf8),
            "mascarado": pl.Series("mascarado", [g.mascarado for g in gerados], dtype=pl.Utf8),
            "modo": pl.Series("modo", [modo.value] * len(gerados), dtype=pl.Utf8),
        }
    )
