# api/application/services/validador_service.py
from __future__ import annotations

from api.domain.cnpj.historico import HistoricoLimitado
from api.domain.cnpj.validador import ResultadoValidacao, separar_entradas, validar_cnpj, validar_lote

from ..dtos.cnpj_dto import LoteValidacaoDTO, LoteValidacaoRequestDTO, ResultadoValidacaoDTO

LIMITE_LOTE = 100


class LoteInvalido(ValueError):
    """Lote vazio ou acima do limite. Nenhuma entrada e validada."""


class ValidadorService:
    def __init__(
        self,
        historico: HistoricoLimitado[ResultadoValidacao],
        limite_lote: int = LIMITE_LOTE,
    ) -> None:
        self._historico = historico
        self._limite_lote = limite_lote

    def validar(self, entrada: str) -> ResultadoValidacaoDTO:
        resultado = validar_cnpj(entrada.strip())
        self._historico.adicionar(resultado)
        return ResultadoValidacaoDTO.from_domain(resultado)

    def validar_lote(self, request: LoteValidacaoRequestDTO) -> LoteValidacaoDTO:
        entradas = self._entradas(request)
        if not entradas:
            raise LoteInvalido("Informe ao menos um CNPJ para validar")
        if len(entradas) > self._limite_lote:
            raise LoteInvalido(f"Limite de {self._limite_lote} CNPJs por validacao")

        resultados = validar_lote(entradas)
        for resultado in resultados:
            self._historico.adicionar(resultado)

        validos = sum(1 for r in resultados if r.valido)
        return LoteValidacaoDTO(
            total=len(resultados),
            validos=validos,
            invalidos=len(resultados) - validos,
            resultados=[ResultadoValidacaoDTO.from_domain(r) for r in resultados],
        )

    @staticmethod
    def _entradas(request: LoteValidacaoRequestDTO) -> list[str]:
        entradas = [c.strip() for c in request.cnpjs or [] if c.strip()]
        if request.texto:
            entradas.extend(separar_entradas(request.texto))
        return entradas
