# pipeline/main.py
#
# Orquestrador do job em lote: valida um arquivo de CNPJs, opcionalmente gera
# um lote novo e grava o relatorio em DuckDB.
#
# Design decisions:
#   - run_lote e o unico ponto de entrada; recebe LoteConfig e o caminho do
#     arquivo, sem ler o ambiente por conta propria.
#   - Ordem fixa:
#       1. Parse + limpeza da entrada
#       2. Validacao (validacoes.parquet)
#       3. Geracao opcional (geracoes.parquet)
#       4. Completude do staging
#       5. Build atomico do DuckDB
#   - Parquets de geracao de execucoes anteriores sao removidos quando a
#     execucao atual nao gera nada, para o relatorio nao misturar execucoes.
#
# Invariant: o DuckDB so e substituido se todas as etapas terminarem e a
# completude passar.
from __future__ import annotations

import argparse
from pathlib import Path

from api.domain.cnpj.gerador import ModoGeracao
from pipeline.config import LoteConfig, load_config
from pipeline.log import log
from pipeline.output.build_duckdb import build_duckdb
from pipeline.output.completude import validar_completude
from pipeline.sources.entrada.parse import parse_entrada
from pipeline.sources.entrada.validate import validate_entrada
from pipeline.staging.parquet_writer import write_parquet
from pipeline.transform.geracao import gerar_df
from pipeline.transform.validacao import resumir, validar_df


def run_lote(
    config: LoteConfig,
    entrada: Path,
    quantidade_gerar: int = 0,
    *,
    modo: ModoGeracao = ModoGeracao.ALFANUMERICO,
    seed: int | None = None,
) -> Path:
    """Executa o job completo e devolve o caminho do DuckDB.

    Raises:
        EntradaInvalidaError: arquivo sem a coluna configurada ou sem valores.
        ValueError: quantidade_gerar negativa.
        pipeline.output.completude.CompletudeError: staging incompleto.
    """
    if quantidade_gerar < 0:
        raise ValueError("quantidade_gerar nao pode ser negativa")

    staging_dir = config.staging_dir
    staging_dir.mkdir(parents=True, exist_ok=True)

    log(f"Lendo entrada: {entrada}")
    entradas_df = validate_entrada(parse_entrada(entrada, config.coluna, config.separador))
    log(f"  {len(entradas_df):,} valores lidos")

    log("Validando...")
    validacoes_df = validar_df(entradas_df)
    write_parquet(validacoes_df, staging_dir / "validacoes.parquet")
    totais = resumir(validacoes_df)
    log(f"  Validos: {totais['validos']:,} / Invalidos: {totais['invalidos']:,}")

    geracoes_path = staging_dir / "geracoes.parquet"
    if quantidade_gerar:
        log(f"Gerando {quantidade_gerar:,} CNPJs ({modo.value})...")
        write_parquet(gerar_df(quantidade_gerar, modo, seed), geracoes_path)
    elif geracoes_path.exists():
        geracoes_path.unlink()

    log("Validando completude...")
    validar_completude(staging_dir)

    log("Gerando DuckDB...")
    output_path = build_duckdb(staging_dir, config.duckdb_output_path)
    log(f"Concluido. DuckDB gravado em: {output_path}")
    return output_path


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m pipeline.main",
        description="Valida um arquivo de CNPJs e grava o relatorio em DuckDB.",
    )
    parser.add_argument("arquivo", type=Path, help="CSV com cabecalho ou TXT com CNPJs")
    parser.add_argument("--gerar", type=int, default=0, metavar="N", help="gera N CNPJs novos")
    parser.add_argument(
        "--modo",
        choices=[m.value for m in ModoGeracao],
        default=ModoGeracao.ALFANUMERICO.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    run_lote(load_config(), args.arquivo, args.gerar, modo=ModoGeracao(args.modo), seed=args.seed)


if __name__ == "__main__":
    main()
