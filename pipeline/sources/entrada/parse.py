# pipeline/sources/entrada/parse.py
#
# Le o arquivo de entrada do job (CSV com cabecalho ou TXT livre) e devolve
# um DataFrame com as colunas (linha, entrada), ambas na ordem do arquivo.
#
# Design decisions:
#   - CSV e lido com infer_schema_length=0: toda coluna vira texto. CNPJs
#     numericos com zeros a esquerda nao podem ser convertidos para inteiro.
#   - TXT segue o formato do campo de validacao em lote: valores separados
#     por ';' ou ',' e/ou quebras de linha.
#   - 'linha' e a posicao 1-based do valor na entrada, nao a linha fisica
#     do arquivo.
from __future__ import annotations

from pathlib import Path

import polars as pl

from api.domain.cnpj.validador import separar_entradas

from .validate import EntradaInvalidaError

_EXTENSOES_TEXTO = {".txt"}


def parse_entrada(raw_path: Path, coluna: str = "cnpj", separador: str = ",") -> pl.DataFrame:
    """Le raw_path e devolve DataFrame (linha: Int64, entrada: Utf8).

    Raises:
        EntradaInvalidaError: CSV sem a coluna configurada.
    """
    if raw_path.suffix.lower() in _EXTENSOES_TEXTO:
        return _parse_texto(raw_path)

    raw = pl.read_csv(
        raw_path,
        separator=separador,
        infer_schema_length=0,
        null_values=["", "NULL"],
        truncate_ragged_lines=True,
    )
    if coluna not in raw.columns:
        raise EntradaInvalidaError(
            f"Coluna '{coluna}' ausente em {raw_path.name} (colunas: {', '.join(raw.columns)})"
        )

    n = len(raw)
    return pl.DataFrame(
        {
            "linha": pl.int_range(1, n + 1, eager=True),
            "entrada": raw[coluna].cast(pl.Utf8),
        }
    )


def _parse_texto(raw_path: Path) -> pl.DataFrame:
    valores: list[str] = []
    for linha in raw_path.read_text(encoding="utf-8").splitlines():
        valores.extend(separar_entradas(linha))

    return pl.DataFrame(
        {
            "linha": pl.int_range(1, len(valores) + 1, eager=True),
            "entrada": pl.Series("entrada", valores, dtype=pl.Utf8),
        }
    )
