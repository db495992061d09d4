# api/domain/cnpj/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from .algoritmo import TAMANHO_TOTAL, sequencia_repetida
from .mascara import aplicar_mascara
from .validador import validar_cnpj


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ alfanumerico. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 caracteres [0-9A-Z], sem formatacao

    def __init__(self, raw: str) -> None:
        resultado = validar_cnpj(raw)
        puro = resultado.puro
        if len(puro) != TAMANHO_TOTAL:
            raise ValueError(f"CNPJ invalido: comprimento {len(puro)}, esperado {TAMANHO_TOTAL}")
        if sequencia_repetida(puro):
            raise ValueError("CNPJ invalido: todos caracteres iguais")
        if not resultado.valido:
            raise ValueError("CNPJ invalido: formato ou digitos verificadores incorretos")
        object.__setattr__(self, "_valor", puro)

    @property
    def valor(self) -> str:
        """14 caracteres sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        return aplicar_mascara(self._valor)

    @property
    def alfanumerico(self) -> bool:
        """False para CNPJs no formato numerico legado."""
        return not self._valor.isdigit()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado
