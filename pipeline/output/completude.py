# pipeline/output/completude.py
#
# Garante que os parquets de staging obrigatorios existem e tem linhas antes
# do build do DuckDB.
#
# Design decisions:
#   - Funcao de guarda pura: le arquivos, nao escreve nada. A unica saida e a
#     excecao.
#   - Arquivo com 0 linhas conta como ausente: um relatorio vazio esconderia
#     uma entrada mal configurada.
#   - geracoes e opcional porque o job pode rodar so validando.
from __future__ import annotations

from pathlib import Path

from pipeline.log import log
from pipeline.staging.parquet_writer import contar_linhas

REQUIRED_SOURCES: tuple[str, ...] = ("validacoes",)

OPTIONAL_SOURCES: tuple[str, ...] = ("geracoes",)


class CompletudeError(Exception):
    """Parquet obrigatorio ausente ou vazio. A mensagem nomeia o arquivo."""


def validar_completude(staging_dir: Path) -> None:
    """Raises CompletudeError se algum arquivo de REQUIRED_SOURCES faltar ou estiver vazio."""
    for source in REQUIRED_SOURCES:
        path = staging_dir / f"{source}.parquet"

        if not path.exists():
            raise CompletudeError(f"Arquivo de staging ausente: {source}.parquet (esperado em {path})")

        if contar_linhas(path) == 0:
            raise CompletudeError(f"Arquivo de staging vazio: {source}.parquet (0 linhas)")

    for source in OPTIONAL_SOURCES:
        path = staging_dir / f"{source}.parquet"
        if not path.exists():
            log(f"  Fonte opcional '{source}' ausente; ignorada.")
        elif contar_linhas(path) == 0:
            log(f"  Fonte opcional '{source}' sem linhas; ignorada.")
