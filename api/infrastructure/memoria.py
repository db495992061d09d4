# api/infrastructure/memoria.py
from __future__ import annotations

from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.historico import HistoricoLimitado
from api.domain.cnpj.validador import ResultadoValidacao

from .config import get_settings

# Historicos vivem so durante o processo; nada e persistido.
_gerados: HistoricoLimitado[CNPJGerado] | None = None
_validacoes: HistoricoLimitado[ResultadoValidacao] | None = None


def get_historico_gerados() -> HistoricoLimitado[CNPJGerado]:
    global _gerados  # noqa: PLW0603
    if _gerados is None:
        _gerados = HistoricoLimitado(get_settings().historico_limite)
    return _gerados


def get_historico_validacoes() -> HistoricoLimitado[ResultadoValidacao]:
    global _validacoes  # noqa: PLW0603
    if _validacoes is None:
        _validacoes = HistoricoLimitado(get_settings().historico_limite)
    return _validacoes


def reset_historicos() -> None:
    """Usado em testes para partir de historicos vazios."""
    global _gerados, _validacoes  # noqa: PLW0603
    _gerados = None
    _validacoes = None
