# api/interfaces/api/dependencies.py
from fastapi import Depends

from api.application.services.consulta_service import ConsultaService
from api.application.services.gerador_service import GeradorService
from api.application.services.historico_export_service import HistoricoExportService
from api.application.services.validador_service import ValidadorService
from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.historico import HistoricoLimitado
from api.domain.cnpj.validador import ResultadoValidacao
from api.infrastructure.config import get_settings
from api.infrastructure.memoria import get_historico_gerados, get_historico_validacoes
from api.infrastructure.opencnpj_client import OpenCNPJClient


def get_gerador_service() -> GeradorService:
    return GeradorService(
        historico=get_historico_gerados(),
        modo_padrao=get_settings().modo_padrao,
    )


def get_validador_service() -> ValidadorService:
    return ValidadorService(
        historico=get_historico_validacoes(),
        limite_lote=get_settings().lote_limite,
    )


def get_export_service() -> HistoricoExportService:
    return HistoricoExportService()


def get_opencnpj_client() -> OpenCNPJClient:
    return OpenCNPJClient()


def get_consulta_service(
    cliente: OpenCNPJClient = Depends(get_opencnpj_client),  # noqa: B008
) -> ConsultaService:
    return ConsultaService(cliente=cliente)


def get_gerados() -> HistoricoLimitado[CNPJGerado]:
    return get_historico_gerados()


def get_validacoes() -> HistoricoLimitado[ResultadoValidacao]:
    return get_historico_validacoes()
