# api/domain/cnpj/validador.py
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .algoritmo import TAMANHO_CORPO, TAMANHO_TOTAL, calcular_digitos_verificadores, sequencia_repetida

_CARACTERE_NAO_TOLERADO = re.compile(r"[^0-9A-Z.\-/\s]")
_PONTUACAO = re.compile(r"[.\-/\s]")
_FORMATO_PURO = re.compile(r"^[0-9A-Z]{12}[0-9]{2}$")
_SEPARADORES_LOTE = re.compile(r"[;,]")


@dataclass(frozen=True)
class ResultadoValidacao:
    puro: str
    valido: bool


def validar_cnpj(entrada: str) -> ResultadoValidacao:
    """Valida entrada livre (com ou sem mascara). Nunca levanta excecao.

    Falha de validacao e resultado comum: o chamador recebe o valor puro
    possivel e valido=False.
    """
    normalizado = entrada.upper()
    puro = _PONTUACAO.sub("", normalizado)

    if _CARACTERE_NAO_TOLERADO.search(normalizado):
        return ResultadoValidacao(puro, False)
    if len(puro) != TAMANHO_TOTAL:
        return ResultadoValidacao(puro, False)
    if not _FORMATO_PURO.match(puro):
        return ResultadoValidacao(puro, False)
    if sequencia_repetida(puro):
        return ResultadoValidacao(puro, False)

    esperado = calcular_digitos_verificadores(puro[:TAMANHO_CORPO])
    informado = puro[TAMANHO_CORPO:]
    valido = int(esperado[0]) == int(informado[0]) and int(esperado[1]) == int(informado[1])
    return ResultadoValidacao(puro, valido)


def validar_lote(entradas: Iterable[str]) -> list[ResultadoValidacao]:
    """Valida cada entrada de forma independente, preservando a ordem."""
    return [validar_cnpj(e) for e in entradas]


def separar_entradas(texto: str) -> list[str]:
    """Divide texto livre em entradas por ';' ou ',', descartando partes vazias."""
    return [p.strip() for p in _SEPARADORES_LOTE.split(texto) if p.strip()]
