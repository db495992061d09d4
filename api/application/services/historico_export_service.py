# api/application/services/historico_export_service.py
from __future__ import annotations

import csv
import io
import json

from api.domain.cnpj.algoritmo import TAMANHO_TOTAL
from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.historico import HistoricoLimitado
from api.domain.cnpj.mascara import aplicar_mascara
from api.domain.cnpj.validador import ResultadoValidacao


def _exibir(puro: str, mascarado: bool) -> str:
    return aplicar_mascara(puro) if mascarado and len(puro) == TAMANHO_TOTAL else puro


class HistoricoExportService:
    """Exporta historicos na ordem em que sao exibidos (mais recente primeiro)."""

    def exportar_gerados_txt(self, historico: HistoricoLimitado[CNPJGerado], mascarado: bool) -> str:
        # Mesmo formato do "copiar todos": valores separados por virgula.
        return ",".join(_exibir(g.puro, mascarado) for g in historico)

    def exportar_gerados_csv(self, historico: HistoricoLimitado[CNPJGerado], mascarado: bool) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["Posicao", "CNPJ"])
        for posicao, gerado in enumerate(historico, start=1):
            writer.writerow([posicao, _exibir(gerado.puro, mascarado)])
        return output.getvalue()

    def exportar_gerados_json(self, historico: HistoricoLimitado[CNPJGerado], mascarado: bool) -> str:
        return json.dumps([_exibir(g.puro, mascarado) for g in historico], indent=2)

    def exportar_validacoes_txt(self, historico: HistoricoLimitado[ResultadoValidacao], mascarado: bool) -> str:
        return ",".join(_exibir(r.puro, mascarado) for r in historico)

    def exportar_validacoes_csv(self, historico: HistoricoLimitado[ResultadoValidacao], mascarado: bool) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["Posicao", "CNPJ", "Valido"])
        for posicao, resultado in enumerate(historico, start=1):
            writer.writerow([posicao, _exibir(resultado.puro, mascarado), "sim" if resultado.valido else "nao"])
        return output.getvalue()

    def exportar_validacoes_json(self, historico: HistoricoLimitado[ResultadoValidacao], mascarado: bool) -> str:
        return json.dumps(
            [{"cnpj": _exibir(r.puro, mascarado), "valido": r.valido} for r in historico],
            indent=2,
        )
