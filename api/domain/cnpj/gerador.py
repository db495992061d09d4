# api/domain/cnpj/gerador.py
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import StrEnum

from .algoritmo import (
    ALFABETO,
    ALFABETO_NUMERICO,
    TAMANHO_CORPO,
    TAMANHO_TOTAL,
    calcular_digitos_verificadores,
    sequencia_repetida,
)
from .mascara import aplicar_mascara

LIMITE_TENTATIVAS = 2000


class ModoGeracao(StrEnum):
    ALFANUMERICO = "alfanumerico"
    NUMERICO = "numerico"

    @property
    def alfabeto(self) -> str:
        return ALFABETO if self is ModoGeracao.ALFANUMERICO else ALFABETO_NUMERICO

    @property
    def padrao(self) -> re.Pattern[str]:
        return _PADROES[self]


_PADROES: dict[ModoGeracao, re.Pattern[str]] = {
    ModoGeracao.ALFANUMERICO: re.compile(r"^[0-9A-Z]{12}[0-9]{2}$"),
    ModoGeracao.NUMERICO: re.compile(r"^[0-9]{14}$"),
}


class GeracaoEsgotada(RuntimeError):
    """Nenhum candidato valido dentro do limite de tentativas. Repetir a operacao resolve."""


@dataclass(frozen=True)
class CNPJGerado:
    puro: str
    mascarado: str


def gerar_cnpj(
    modo: ModoGeracao = ModoGeracao.ALFANUMERICO,
    rng: random.Random | None = None,
    limite_tentativas: int = LIMITE_TENTATIVAS,
) -> CNPJGerado:
    """Gera um CNPJ valido: corpo aleatorio + dois digitos verificadores.

    Raises:
        GeracaoEsgotada: se nenhuma tentativa produzir um candidato aceitavel.
    """
    sorteio = rng or random
    alfabeto = modo.alfabeto

    for _ in range(limite_tentativas):
        corpo = "".join(sorteio.choice(alfabeto) for _ in range(TAMANHO_CORPO))
        if sequencia_repetida(corpo):
            continue

        puro = corpo + calcular_digitos_verificadores(corpo)
        if len(puro) != TAMANHO_TOTAL or not modo.padrao.match(puro):
            continue
        if sequencia_repetida(puro):
            continue

        return CNPJGerado(puro=puro, mascarado=aplicar_mascara(puro))

    raise GeracaoEsgotada(f"Nao foi possivel gerar um CNPJ valido em {limite_tentativas} tentativas")


def gerar_lote(
    quantidade: int,
    modo: ModoGeracao = ModoGeracao.ALFANUMERICO,
    rng: random.Random | None = None,
) -> list[CNPJGerado]:
    if quantidade < 0:
        raise ValueError("Quantidade nao pode ser negativa")
    return [gerar_cnpj(modo, rng) for _ in range(quantidade)]
