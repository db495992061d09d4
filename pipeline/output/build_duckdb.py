# pipeline/output/build_duckdb.py
#
# Build atomico do DuckDB: parquets de staging -> arquivo .duckdb final.
#
# Design decisions:
#   - Escreve em .tmp.duckdb e so renomeia para o caminho final quando tudo
#     deu certo. Em falha o tmp e removido e o arquivo anterior fica intacto.
#   - schema.sql e lido em tempo de build; o SQL e a unica fonte da estrutura
#     das tabelas.
#   - Parquets entram via read_parquet() do proprio DuckDB, sem passar por
#     DataFrames em memoria.
#   - O mapa staging -> tabela e explicito. Parquets sem entrada no mapa nao
#     sao carregados.
from __future__ import annotations

from pathlib import Path

import duckdb

from pipeline.log import log

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

STAGING_TO_TABLE: dict[str, str] = {
    "validacoes": "fato_validacao",
    "geracoes": "fato_geracao",
}


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Cria o banco a partir de schema.sql e dos parquets existentes em staging_dir.

    Returns:
        output_path, apos o rename atomico.

    Raises:
        Qualquer excecao do duckdb ou do filesystem, depois de remover o tmp.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # tmp de uma execucao anterior que falhou
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            _load_staging_data(conn, staging_dir)
        finally:
            conn.close()

        if output_path.exists():
            output_path.unlink()
        tmp_path.rename(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    """Carrega cada parquet mapeado que existir. Ausentes sao ignorados;
    a obrigatoriedade e checada antes, em completude.py.
    """
    loaded = 0
    for file_stem, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_dir / f"{file_stem}.parquet"
        if not parquet_path.exists():
            continue

        log(f"  Carregando {file_stem} -> {table_name}...")

        # table_name vem de STAGING_TO_TABLE e posix_path do filesystem local
        table_cols = [
            row[0]
            for row in conn.execute(
                "SELECT column_name FROM information_schema.columns "
                "WHERE table_name = ? ORDER BY ordinal_position",
                [table_name],
            ).fetchall()
        ]

        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(
                f"SELECT name FROM parquet_schema('{posix_path}')"  # noqa: S608
            ).fetchall()
        }

        shared_cols = [c for c in table_cols if c in parquet_cols]
        if not shared_cols:
            continue

        cols_sql = ", ".join(shared_cols)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {cols_sql} FROM read_parquet('{posix_path}')"
        )
        loaded += 1

    log(f"  DuckDB: {loaded} tabelas carregadas")


def validate_tables(output_path: Path) -> dict[str, int]:
    """Abre o banco pronto (read-only) e devolve contagem de linhas por tabela."""
    conn = duckdb.connect(str(output_path), read_only=True)
    try:
        counts: dict[str, int] = {}
        for (table_name,) in conn.execute("SHOW TABLES").fetchall():
            row = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()  # noqa: S608
            counts[table_name] = int(row[0]) if row else 0
        return counts
    finally:
        conn.close()
