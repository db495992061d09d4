# api/domain/cnpj/algoritmo.py
from __future__ import annotations

from collections.abc import Sequence

ALFABETO = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALFABETO_NUMERICO = "0123456789"

TAMANHO_CORPO = 12
TAMANHO_TOTAL = 14

PESOS_PRIMEIRO_DV: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
PESOS_SEGUNDO_DV: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_CODIGO_ZERO = ord("0")


class CaractereInvalido(ValueError):
    """Caractere fora de [0-9A-Z] passado para conversao. Erro de programacao."""


def valor_do_caractere(caractere: str) -> int:
    """Valor do caractere para o modulo 11: codigo ASCII (maiusculo) menos ord('0').

    Digitos valem 0..9 e letras 17..42 ('A' - '0' = 17). O deslocamento literal
    e o definido pela Receita para o CNPJ alfanumerico; nao normalizar para 10..35.
    """
    if len(caractere) != 1:
        raise CaractereInvalido(f"Esperado um caractere, recebido {caractere!r}")
    maiusculo = caractere.upper()
    if maiusculo not in ALFABETO:
        raise CaractereInvalido(f"Caractere invalido para CNPJ alfanumerico: {caractere!r}")
    return ord(maiusculo) - _CODIGO_ZERO


def calcular_digito_verificador(valores: Sequence[int], pesos: Sequence[int]) -> int:
    """Digito verificador pelo modulo 11. Resultado sempre em [0, 9]."""
    soma = sum(v * p for v, p in zip(valores, pesos, strict=True))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def calcular_digitos_verificadores(corpo: str) -> str:
    """Par de digitos verificadores para um corpo de 12 caracteres."""
    valores = [valor_do_caractere(c) for c in corpo]
    dv1 = calcular_digito_verificador(valores, PESOS_PRIMEIRO_DV)
    dv2 = calcular_digito_verificador([*valores, dv1], PESOS_SEGUNDO_DV)
    return f"{dv1}{dv2}"


def sequencia_repetida(valor: str) -> bool:
    """True quando todos os caracteres sao iguais (ex: 00000000000000)."""
    return len(valor) > 0 and len(set(valor)) == 1
