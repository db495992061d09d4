# api/domain/cnpj/mascara.py
from __future__ import annotations

import re

MASCARA = "##.###.###/####-##"

# Larguras dos blocos e separador que antecede cada bloco (o primeiro nao tem).
_SEGMENTOS: tuple[tuple[str, int], ...] = (("", 2), (".", 3), (".", 3), ("/", 4), ("-", 2))

_NAO_ALFANUMERICO = re.compile(r"[^0-9A-Za-z]")


def aplicar_mascara(puro: str) -> str:
    """Sobrepoe ##.###.###/####-## ao valor puro, posicao a posicao.

    Posicoes '#' sem caractere correspondente ficam vazias; pontuacao e sempre
    mantida. Ex: "ABC12" -> "AB.C12./-".
    """
    caracteres = iter(puro)
    return "".join(next(caracteres, "") if m == "#" else m for m in MASCARA)


def aplicar_mascara_progressiva(parcial: str) -> str:
    """Mascara para digitacao em andamento: separadores so antes de blocos preenchidos."""
    partes: list[str] = []
    inicio = 0
    for separador, largura in _SEGMENTOS:
        bloco = parcial[inicio : inicio + largura]
        if bloco:
            partes.append(f"{separador}{bloco}")
        inicio += largura
    return "".join(partes)


def remover_mascara(valor: str) -> str:
    """Mantem apenas [0-9A-Z], em maiusculas."""
    return _NAO_ALFANUMERICO.sub("", valor).upper()
