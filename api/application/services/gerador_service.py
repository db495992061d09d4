# api/application/services/gerador_service.py
from __future__ import annotations

import random

from api.domain.cnpj.gerador import CNPJGerado, ModoGeracao, gerar_lote
from api.domain.cnpj.historico import HistoricoLimitado

from ..dtos.cnpj_dto import CNPJGeradoDTO


class GeradorService:
    """Imperative Shell: gera pelo Pure Core e registra no historico do chamador."""

    def __init__(
        self,
        historico: HistoricoLimitado[CNPJGerado],
        modo_padrao: ModoGeracao = ModoGeracao.ALFANUMERICO,
        rng: random.Random | None = None,
    ) -> None:
        self._historico = historico
        self._modo_padrao = modo_padrao
        self._rng = rng

    def gerar(self, modo: ModoGeracao | None = None, quantidade: int = 1) -> list[CNPJGeradoDTO]:
        """Gera `quantidade` CNPJs no modo pedido (ou no padrao configurado).

        Raises:
            GeracaoEsgotada: propagado do dominio; o chamador deve sugerir nova tentativa.
        """
        gerados = gerar_lote(quantidade, modo or self._modo_padrao, self._rng)
        for gerado in gerados:
            self._historico.adicionar(gerado)
        return [CNPJGeradoDTO.from_domain(g) for g in gerados]
