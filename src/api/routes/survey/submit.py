"""Endpoint de envio do questionário de satisfação.

Endpoints:
- ANY /api/submit (e /.netlify/functions/submit): apenas POST é aceito

Fluxo:
1. Gate de método (405 para tudo que não for POST)
2. Normalização do body (nunca falha; pior caso = formulário vazio)
3. Use case: checa config, monta email e envia pela Brevo
4. Mapeia o resultado para JSON

Toda resposta é JSON (`application/json; charset=utf-8`). Qualquer
exceção não tratada vira 500 com o texto da exceção.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.normalizers.survey import parse_submission_body
from app.bootstrap.dependencies import (
    create_email_payload_builder,
    provide_brevo_settings,
    provide_email_sender,
)
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.protocols.email_sender import EmailSenderProtocol
from app.use_cases.survey import (
    MISSING_CONFIG,
    PROVIDER_ERROR,
    RelaySubmissionResult,
    RelaySurveySubmissionUseCase,
)
from config.settings import BrevoSettings

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"

# Métodos fora desta lista chegam como 405 do roteador; ver
# api.routes.router.submit_http_exception_handler
SUBMIT_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_ERROR_STATUS_BY_CODE = {
    MISSING_CONFIG: status.HTTP_500_INTERNAL_SERVER_ERROR,
    PROVIDER_ERROR: status.HTTP_502_BAD_GATEWAY,
}


class SubmitOkResponse(BaseModel):
    """Resposta de sucesso."""

    ok: bool = True


class ErrorResponse(BaseModel):
    """Resposta de erro estruturada."""

    error: str
    details: str | None = None


def _json_response(
    content: BaseModel,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        content=content.model_dump(exclude_none=True),
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
        headers=headers,
    )


def method_not_allowed_response() -> JSONResponse:
    """405 no formato do gate (usado também pelo exception handler do app)."""
    return _json_response(
        ErrorResponse(error=METHOD_NOT_ALLOWED_MESSAGE),
        status.HTTP_405_METHOD_NOT_ALLOWED,
    )


def _result_to_response(result: RelaySubmissionResult) -> JSONResponse:
    if result.success:
        return _json_response(
            SubmitOkResponse(),
            status.HTTP_200_OK,
            headers={"cache-control": "no-store"},
        )
    status_code = _ERROR_STATUS_BY_CODE.get(
        result.error_code or "", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return _json_response(
        ErrorResponse(error=result.error_message or "", details=result.details),
        status_code,
    )


async def _handle_submission(
    request: Request,
    settings: BrevoSettings,
    email_sender: EmailSenderProtocol,
) -> JSONResponse:
    if request.method != "POST":
        logger.info(
            "survey_submit_method_not_allowed",
            extra={"channel": "survey", "method": request.method},
        )
        return method_not_allowed_response()

    form = await parse_submission_body(request)
    logger.info(
        "survey_submit_received",
        extra={
            "channel": "survey",
            "content_type": request.headers.get("content-type", ""),
            "field_count": len(form),
        },
    )

    use_case = RelaySurveySubmissionUseCase(
        settings=settings,
        builder=create_email_payload_builder(),
        sender=email_sender,
    )
    result = await use_case.execute(form)
    return _result_to_response(result)


@router.api_route("", methods=SUBMIT_ROUTE_METHODS, response_model=None)
async def submit_survey(
    request: Request,
    settings: BrevoSettings = Depends(provide_brevo_settings),
    email_sender: EmailSenderProtocol = Depends(provide_email_sender),
) -> JSONResponse:
    """Recebe uma resposta do questionário e repassa por email.

    Returns:
        200 {"ok": true} | 405 | 500 (config/exceção) | 502 (Brevo)
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        try:
            response = await _handle_submission(request, settings, email_sender)
        except Exception as exc:
            logger.exception(
                "survey_submit_failed",
                extra={"channel": "survey", "error_type": type(exc).__name__},
            )
            response = _json_response(
                ErrorResponse(error=str(exc) or type(exc).__name__),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
