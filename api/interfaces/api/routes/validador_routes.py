# api/interfaces/api/routes/validador_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.cnpj_dto import LoteValidacaoDTO, LoteValidacaoRequestDTO, ResultadoValidacaoDTO
from api.application.services.validador_service import LoteInvalido, ValidadorService
from api.interfaces.api.dependencies import get_validador_service

router = APIRouter()


@router.get("/cnpj/validar", response_model=ResultadoValidacaoDTO)
def validar_cnpj(
    cnpj: str = Query(..., min_length=1, max_length=100),
    service: ValidadorService = Depends(get_validador_service),  # noqa: B008
) -> ResultadoValidacaoDTO:
    # CNPJ invalido e resposta normal (valido=false), nao erro HTTP
    return service.validar(cnpj)


@router.post("/cnpj/validar/lote", response_model=LoteValidacaoDTO)
def validar_lote(
    request: LoteValidacaoRequestDTO,
    service: ValidadorService = Depends(get_validador_service),  # noqa: B008
) -> LoteValidacaoDTO:
    try:
        return service.validar_lote(request)
    except LoteInvalido as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
