# api/interfaces/api/routes/historico_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from api.application.dtos.cnpj_dto import CNPJGeradoDTO, ResultadoValidacaoDTO
from api.application.dtos.historico_dto import HistoricoGeradosDTO, HistoricoValidacoesDTO
from api.application.services.historico_export_service import HistoricoExportService
from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.historico import HistoricoLimitado
from api.domain.cnpj.validador import ResultadoValidacao
from api.interfaces.api.dependencies import get_export_service, get_gerados, get_validacoes

router = APIRouter()

_MEDIA_TYPES = {"csv": "text/csv", "json": "application/json", "txt": "text/plain"}


@router.get("/historico/gerados/export")
def export_gerados(
    formato: Literal["csv", "json", "txt"] = Query(...),
    mascarado: bool = Query(default=False),
    historico: HistoricoLimitado[CNPJGerado] = Depends(get_gerados),  # noqa: B008
    export_service: HistoricoExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    if formato == "json":
        content = export_service.exportar_gerados_json(historico, mascarado)
    elif formato == "csv":
        content = export_service.exportar_gerados_csv(historico, mascarado)
    else:
        content = export_service.exportar_gerados_txt(historico, mascarado)
    return _anexo(content, formato, "cnpjs_gerados")


@router.get("/historico/validacoes/export")
def export_validacoes(
    formato: Literal["csv", "json", "txt"] = Query(...),
    mascarado: bool = Query(default=False),
    historico: HistoricoLimitado[ResultadoValidacao] = Depends(get_validacoes),  # noqa: B008
    export_service: HistoricoExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    if formato == "json":
        content = export_service.exportar_validacoes_json(historico, mascarado)
    elif formato == "csv":
        content = export_service.exportar_validacoes_csv(historico, mascarado)
    else:
        content = export_service.exportar_validacoes_txt(historico, mascarado)
    return _anexo(content, formato, "cnpjs_validados")


@router.get("/historico/gerados", response_model=HistoricoGeradosDTO)
def listar_gerados(
    historico: HistoricoLimitado[CNPJGerado] = Depends(get_gerados),  # noqa: B008
) -> HistoricoGeradosDTO:
    itens = historico.itens
    return HistoricoGeradosDTO(
        total=len(itens),
        limite=historico.limite,
        itens=[CNPJGeradoDTO.from_domain(g) for g in itens],
    )


@router.delete("/historico/gerados", status_code=204)
def limpar_gerados(
    historico: HistoricoLimitado[CNPJGerado] = Depends(get_gerados),  # noqa: B008
) -> Response:
    historico.limpar()
    return Response(status_code=204)


@router.get("/historico/validacoes", response_model=HistoricoValidacoesDTO)
def listar_validacoes(
    historico: HistoricoLimitado[ResultadoValidacao] = Depends(get_validacoes),  # noqa: B008
) -> HistoricoValidacoesDTO:
    itens = historico.itens
    return HistoricoValidacoesDTO(
        total=len(itens),
        limite=historico.limite,
        itens=[ResultadoValidacaoDTO.from_domain(r) for r in itens],
    )


@router.delete("/historico/validacoes", status_code=204)
def limpar_validacoes(
    historico: HistoricoLimitado[ResultadoValidacao] = Depends(get_validacoes),  # noqa: B008
) -> Response:
    historico.limpar()
    return Response(status_code=204)


def _anexo(content: str, formato: str, nome: str) -> Response:
    return Response(
        content=content,
        media_type=_MEDIA_TYPES[formato],
        headers={"Content-Disposition": f"attachment; filename={nome}.{formato}"},
    )
