# api/interfaces/api/routes/consulta_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.consulta_dto import ConsultaLoteDTO, DadosEmpresaDTO
from api.application.services.consulta_service import ConsultaService
from api.infrastructure.opencnpj_client import (
    CNPJNaoEncontrado,
    ConsultaCNPJError,
    LimiteConsultaExcedido,
)
from api.interfaces.api.dependencies import get_consulta_service

router = APIRouter()


@router.get("/cnpj/consulta", response_model=ConsultaLoteDTO)
def consultar_cnpjs(
    cnpjs: str = Query(..., min_length=1, max_length=2_000),
    service: ConsultaService = Depends(get_consulta_service),  # noqa: B008
) -> ConsultaLoteDTO:
    return service.consultar(cnpjs)


@router.get("/cnpj/consulta/{cnpj_raw}", response_model=DadosEmpresaDTO)
def consultar_cnpj(
    cnpj_raw: str,
    service: ConsultaService = Depends(get_consulta_service),  # noqa: B008
) -> DadosEmpresaDTO:
    try:
        return service.consultar_um(cnpj_raw)
    except CNPJNaoEncontrado as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except LimiteConsultaExcedido as err:
        raise HTTPException(status_code=429, detail=str(err)) from err
    except ConsultaCNPJError as err:
        raise HTTPException(status_code=502, detail=str(err)) from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail="CNPJ invalido") from err
