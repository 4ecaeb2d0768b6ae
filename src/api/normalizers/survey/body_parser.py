"""Normalização do body da requisição do questionário.

Aceita JSON, urlencoded, multipart e bodies sem content-type (ou com
content-type estranho). Nunca levanta exceção: o pior caso é um
formulário vazio.

Fluxo:
1. content-type decide a estratégia (json | urlencoded | multipart | text)
2. json/urlencoded/text usam a cascata de decoders de texto
3. Qualquer exceção (stream ilegível, bytes não UTF-8, multipart
   malformado) cai na recuperação: relê o body como texto (falha = "")
   e aplica JSON -> urlencoded
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from starlette.datastructures import UploadFile

from api.normalizers.survey.decoders import (
    TEXT_FALLBACK_DECODERS,
    collect_form_pairs,
    decode_json_text,
    decode_text,
    decode_urlencoded_text,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from starlette.requests import Request

    from app.domain.survey import SubmittedForm

logger = logging.getLogger(__name__)

BodyKind = Literal["json", "urlencoded", "multipart", "text"]

_TEXT_DECODERS_BY_KIND = {
    "json": (decode_json_text, decode_urlencoded_text),
    "urlencoded": (decode_urlencoded_text, decode_json_text),
    "text": TEXT_FALLBACK_DECODERS,
}


def detect_body_kind(content_type: str | None) -> BodyKind:
    """Classifica o content-type (substring, case-insensitive, ignora params)."""
    normalized = (content_type or "").lower()
    if "application/json" in normalized:
        return "json"
    if "application/x-www-form-urlencoded" in normalized:
        return "urlencoded"
    if "multipart/form-data" in normalized:
        return "multipart"
    return "text"


async def parse_submission_body(request: Request) -> SubmittedForm:
    """Converte o body da requisição em SubmittedForm.

    Args:
        request: Request Starlette/FastAPI (body ainda não consumido)

    Returns:
        Mapeamento campo -> valor; dict vazio no pior caso.
    """
    kind = detect_body_kind(request.headers.get("content-type"))
    try:
        if kind == "multipart":
            return await _parse_multipart(request)
        return decode_text(await _read_text(request), _TEXT_DECODERS_BY_KIND[kind])
    except Exception as exc:
        log_fallback(logger, "body_parser", reason=type(exc).__name__, strategy="text")
        return decode_text(await _read_text_or_empty(request))


async def _read_text(request: Request) -> str:
    # utf-8-sig descarta BOM; bytes inválidos levantam UnicodeDecodeError
    body = await request.body()
    return body.decode("utf-8-sig")


async def _read_text_or_empty(request: Request) -> str:
    try:
        return await _read_text(request)
    except Exception as exc:
        logger.debug("body_reread_failed", extra={"error_type": type(exc).__name__})
        return ""


async def _parse_multipart(request: Request) -> SubmittedForm:
    # Lê o body antes: a Starlette reaproveita o cache no form() e na releitura
    await request.body()
    form = await request.form()
    try:
        pairs = [(key, _form_value(value)) for key, value in form.multi_items()]
    finally:
        await form.close()
    return collect_form_pairs(pairs)


def _form_value(value: str | UploadFile) -> str:
    if isinstance(value, UploadFile):
        return value.filename or ""
    return value
