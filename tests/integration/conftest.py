# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(autouse=True)
def historicos_vazios() -> Generator[None, None, None]:
    """Cada teste parte de historicos vazios."""
    from api.infrastructure.memoria import reset_historicos

    reset_historicos()
    yield
    reset_historicos()


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com settings recarregados do ambiente de teste."""
    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
