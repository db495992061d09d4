# api/interfaces/api/routes/mascara_routes.py
from fastapi import APIRouter, Query

from api.application.dtos.cnpj_dto import MascaraDTO
from api.domain.cnpj.algoritmo import TAMANHO_TOTAL
from api.domain.cnpj.mascara import aplicar_mascara, aplicar_mascara_progressiva, remover_mascara

router = APIRouter()


@router.get("/cnpj/mascara", response_model=MascaraDTO)
def mascarar(
    valor: str = Query(..., max_length=100),
    progressiva: bool = Query(default=False),
) -> MascaraDTO:
    puro = remover_mascara(valor)[:TAMANHO_TOTAL]
    mascarado = aplicar_mascara_progressiva(puro) if progressiva else aplicar_mascara(puro)
    return MascaraDTO(entrada=valor, puro=puro, mascarado=mascarado)
