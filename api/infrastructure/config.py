# api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from api.domain.cnpj.gerador import ModoGeracao

load_dotenv()


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int
    debug: bool
    historico_limite: int
    lote_limite: int
    modo_padrao: ModoGeracao
    opencnpj_base_url: str
    opencnpj_timeout: float
    cors_origins: tuple[str, ...]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        historico_limite=int(os.environ.get("HISTORICO_LIMITE", "100")),
        lote_limite=int(os.environ.get("LOTE_LIMITE", "100")),
        modo_padrao=ModoGeracao(os.environ.get("GERACAO_MODO_PADRAO", "alfanumerico").lower()),
        opencnpj_base_url=os.environ.get("OPENCNPJ_BASE_URL", "https://opencnpj.org/api/cnpj"),
        opencnpj_timeout=float(os.environ.get("OPENCNPJ_TIMEOUT", "10")),
        cors_origins=tuple(
            o.strip()
            for o in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
            if o.strip()
        ),
    )
