"""Agregador de rotas: registra todos os routers do serviço.

Uso:
    from api.routes import create_api_router, submit_http_exception_handler

    app = FastAPI()
    app.include_router(create_api_router())
    app.add_exception_handler(StarletteHTTPException, submit_http_exception_handler)
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.health.router import router as health_router
from api.routes.survey.submit import method_not_allowed_response
from api.routes.survey.submit import router as survey_submit_router
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

# Caminho legado, ainda usado pelo formulário estático publicado
LEGACY_SUBMIT_PATH = "/.netlify/functions/submit"
SUBMIT_PATH = "/api/submit"
SUBMIT_PATHS = frozenset({SUBMIT_PATH, LEGACY_SUBMIT_PATH})


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check (sem prefixo)
    api_router.include_router(health_router, tags=["health"])

    # Questionário
    api_router.include_router(survey_submit_router, prefix=SUBMIT_PATH, tags=["survey"])
    api_router.include_router(
        survey_submit_router,
        prefix=LEGACY_SUBMIT_PATH,
        tags=["survey"],
        include_in_schema=False,
    )

    return api_router


async def submit_http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """405 dos caminhos de envio no formato do gate; o resto segue o padrão do FastAPI.

    Cobre métodos que o roteador rejeita antes do endpoint (TRACE, verbos
    WebDAV, verbos customizados).
    """
    is_submit_path = request.url.path in SUBMIT_PATHS
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or not is_submit_path:
        return await http_exception_handler(request, exc)

    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = method_not_allowed_response()
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
