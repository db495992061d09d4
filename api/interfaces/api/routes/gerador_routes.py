# api/interfaces/api/routes/gerador_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.cnpj_dto import CNPJGeradoDTO
from api.application.services.gerador_service import GeradorService
from api.domain.cnpj.gerador import GeracaoEsgotada, ModoGeracao
from api.interfaces.api.dependencies import get_gerador_service

router = APIRouter()


@router.get("/cnpj/gerar", response_model=list[CNPJGeradoDTO])
def gerar_cnpj(
    modo: ModoGeracao | None = Query(default=None),  # noqa: B008
    quantidade: int = Query(default=1, ge=1, le=100),
    service: GeradorService = Depends(get_gerador_service),  # noqa: B008
) -> list[CNPJGeradoDTO]:
    try:
        return service.gerar(modo, quantidade)
    except GeracaoEsgotada as err:
        raise HTTPException(
            status_code=503,
            detail="Nao foi possivel gerar um CNPJ valido. Tente novamente.",
        ) from err
