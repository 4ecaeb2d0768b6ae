"""Cliente HTTP para a API transacional da Brevo.

Comportamento:
- Autenticação via header `api-key`
- Uma única tentativa (sem retry): falha do provedor volta ao chamador
- Status não-2xx não levanta exceção; vira EmailSendResult(ok=False)
- Erros de transporte (timeout, conexão) propagam
- Logging sem PII (nada de api key, emails ou conteúdo)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.protocols.email_sender import EmailSendResult
from config.settings.brevo import BREVO_SMTP_EMAIL_URL

if TYPE_CHECKING:
    from config.settings import BrevoSettings

logger = logging.getLogger(__name__)


class BrevoHttpClient:
    """Envia emails via `POST /v3/smtp/email`.

    Um httpx.AsyncClient injetado é reutilizado (e não é fechado aqui);
    sem injeção, cada envio abre e fecha o seu.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = BREVO_SMTP_EMAIL_URL,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    async def send_email(self, payload: dict[str, Any]) -> EmailSendResult:
        """Envia o payload montado pelo BrevoEmailPayloadBuilder.

        A presença da api key é checada antes, no use case.

        Raises:
            httpx.HTTPError: Falhas de transporte
        """
        response = await self._post(payload, self._build_headers())

        if response.is_success:
            logger.info(
                "brevo_send_ok",
                extra={"endpoint": self._api_url, "status_code": response.status_code},
            )
            return EmailSendResult(ok=True, status_code=response.status_code)

        logger.warning(
            "brevo_send_failed",
            extra={"endpoint": self._api_url, "status_code": response.status_code},
        )
        return EmailSendResult(
            ok=False,
            status_code=response.status_code,
            details=_safe_response_text(response),
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "api-key": self._api_key,
            "accept": "application/json",
            "content-type": "application/json",
        }

    async def _post(self, payload: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self._api_url,
                json=payload,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        async with httpx.AsyncClient() as client:
            return await client.post(
                self._api_url,
                json=payload,
                headers=headers,
                timeout=self._timeout_seconds,
            )


def _safe_response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception as exc:
        logger.debug("brevo_error_body_unreadable", extra={"error_type": type(exc).__name__})
        return ""


def create_brevo_http_client(
    settings: BrevoSettings,
    http_client: httpx.AsyncClient | None = None,
) -> BrevoHttpClient:
    """Factory do cliente Brevo a partir das settings da requisição."""
    return BrevoHttpClient(
        api_key=settings.api_key,
        api_url=settings.api_url,
        timeout_seconds=settings.request_timeout_seconds,
        http_client=http_client,
    )
