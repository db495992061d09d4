# api/application/dtos/consulta_dto.py
from pydantic import BaseModel


class SocioDTO(BaseModel):
    nome: str
    qualificacao: str
    data_entrada: str


class DadosEmpresaDTO(BaseModel):
    cnpj: str
    cnpj_formatado: str
    nome_empresarial: str
    nome_fantasia: str
    situacao: str
    natureza_juridica: str
    capital_social: str
    porte: str
    cnae_principal: str
    cnaes_secundarios: list[str]
    endereco: str
    telefone: str
    email: str
    data_abertura: str
    socios: list[SocioDTO]


class ResultadoConsultaDTO(BaseModel):
    entrada: str
    valido: bool
    dados: DadosEmpresaDTO | None
    mensagem: str | None


class ConsultaLoteDTO(BaseModel):
    resultados: list[ResultadoConsultaDTO]
    ignorados: int
