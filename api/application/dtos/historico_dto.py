# api/application/dtos/historico_dto.py
from pydantic import BaseModel

from .cnpj_dto import CNPJGeradoDTO, ResultadoValidacaoDTO


class HistoricoGeradosDTO(BaseModel):
    total: int
    limite: int
    itens: list[CNPJGeradoDTO]


class HistoricoValidacoesDTO(BaseModel):
    total: int
    limite: int
    itens: list[ResultadoValidacaoDTO]
