# api/application/dtos/cnpj_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from api.domain.cnpj.algoritmo import TAMANHO_TOTAL
from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.mascara import aplicar_mascara
from api.domain.cnpj.validador import ResultadoValidacao


class CNPJGeradoDTO(BaseModel):
    puro: str
    mascarado: str

    @classmethod
    def from_domain(cls, gerado: CNPJGerado) -> CNPJGeradoDTO:
        return cls(puro=gerado.puro, mascarado=gerado.mascarado)


class ResultadoValidacaoDTO(BaseModel):
    puro: str
    mascarado: str | None
    valido: bool

    @classmethod
    def from_domain(cls, resultado: ResultadoValidacao) -> ResultadoValidacaoDTO:
        # mascara so faz sentido para valores com o comprimento completo
        mascarado = aplicar_mascara(resultado.puro) if len(resultado.puro) == TAMANHO_TOTAL else None
        return cls(puro=resultado.puro, mascarado=mascarado, valido=resultado.valido)


class LoteValidacaoRequestDTO(BaseModel):
    """Aceita lista de CNPJs ou texto livre separado por ';' ou ','."""

    cnpjs: list[str] | None = None
    texto: str | None = Field(default=None, max_length=20_000)

    @model_validator(mode="after")
    def _exige_uma_fonte(self) -> LoteValidacaoRequestDTO:
        if self.cnpjs is None and self.texto is None:
            raise ValueError("Informe 'cnpjs' ou 'texto'")
        return self


class LoteValidacaoDTO(BaseModel):
    total: int
    validos: int
    invalidos: int
    resultados: list[ResultadoValidacaoDTO]


class MascaraDTO(BaseModel):
    entrada: str
    puro: str
    mascarado: str
