# pipeline/config.py
#
# Configuracao do job em lote, lida de variaveis de ambiente.
#
# Design decisions:
#   - Dataclass congelada (nao pydantic): o job e um processo offline e
#     pydantic fica restrito a camada HTTP.
#   - Caminhos tem default em pipeline/data, relativo a este arquivo, para o
#     job rodar logo apos o checkout.
#   - load_config valida separador e coluna antes de qualquer leitura de
#     arquivo; um valor ruim aborta o job com ValueError.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class LoteConfig:
    """Configuracao imutavel do job.

    Invariants:
      - separador tem exatamente um caractere.
      - coluna e nao vazia.
    """

    data_dir: Path
    duckdb_output_path: Path
    separador: str = ","
    coluna: str = "cnpj"

    @property
    def staging_dir(self) -> Path:
        """Parquets intermediarios."""
        return self.data_dir / "staging"


def load_config() -> LoteConfig:
    """Monta LoteConfig a partir do ambiente.

    Raises:
        ValueError: se LOTE_SEPARADOR nao tiver um caractere ou LOTE_COLUNA
            estiver vazia.
    """
    data_dir = Path(os.environ.get("LOTE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    duckdb_output_path = Path(
        os.environ.get(
            "DUCKDB_OUTPUT_PATH",
            str(data_dir / "output" / "lote_cnpj.duckdb"),
        )
    )

    separador = os.environ.get("LOTE_SEPARADOR", ",")
    if len(separador) != 1:
        raise ValueError(f"LOTE_SEPARADOR deve ter um unico caractere, recebido {separador!r}")

    coluna = os.environ.get("LOTE_COLUNA", "cnpj").strip()
    if not coluna:
        raise ValueError("LOTE_COLUNA nao pode ser vazia")

    return LoteConfig(
        data_dir=data_dir,
        duckdb_output_path=duckdb_output_path,
        separador=separador,
        coluna=coluna,
    )
