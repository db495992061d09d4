# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import math
import time
from collections import defaultdict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP. Chamadas com X-API-Key nao contam."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requisicoes: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0:
            return await call_next(request)

        if request.headers.get("X-API-Key"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        agora = time.monotonic()

        janela = [t for t in self._requisicoes[client_ip] if agora - t < JANELA_SEGUNDOS]
        self._requisicoes[client_ip] = janela

        if len(janela) >= limite:
            espera = max(1, math.ceil(JANELA_SEGUNDOS - (agora - janela[0])))
            return Response(
                content='{"detail": "Limite de requisicoes excedido. Tente novamente em instantes."}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(espera)},
            )

        janela.append(agora)
        return await call_next(request)
