# api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.memoria import get_historico_gerados, get_historico_validacoes

    # historicos criados no startup com o limite configurado
    get_historico_gerados()
    get_historico_validacoes()
    yield


settings = get_settings()

app = FastAPI(
    title="Gerador CNPJ Alfanumerico API",
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

# Routers
from api.interfaces.api.routes.consulta_routes import router as consulta_router  # noqa: E402
from api.interfaces.api.routes.gerador_routes import router as gerador_router  # noqa: E402
from api.interfaces.api.routes.historico_routes import router as historico_router  # noqa: E402
from api.interfaces.api.routes.mascara_routes import router as mascara_router  # noqa: E402
from api.interfaces.api.routes.validador_routes import router as validador_router  # noqa: E402

app.include_router(gerador_router, prefix="/api")
app.include_router(validador_router, prefix="/api")
app.include_router(mascara_router, prefix="/api")
app.include_router(consulta_router, prefix="/api")
app.include_router(historico_router, prefix="/api")
