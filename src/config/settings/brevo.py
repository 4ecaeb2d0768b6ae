"""Settings de entrega de email via Brevo (API transacional).

Diferente das demais settings, NÃO é cacheada: cada requisição lê o
ambiente de novo, permitindo trocar credenciais sem reiniciar o serviço
e injetar configuração nos testes.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# Endpoint da API transacional da Brevo
BREVO_SMTP_EMAIL_URL: str = "https://api.brevo.com/v3/smtp/email"

# Nome do remetente quando SITE_NAME não está definido
DEFAULT_SITE_NAME: str = "顧客滿意度調查"

MISSING_CONFIG_MESSAGE: str = (
    "Missing environment variables. Please configure BREVO_API_KEY, TO_EMAIL, FROM_EMAIL."
)

DEFAULT_TIMEOUT_SECONDS: float = 30.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrevoSettings:
    """Configuração de entrega do questionário.

    Attributes:
        api_key: API key da Brevo (header `api-key`)
        to_email: Destinatário único das respostas
        from_email: Remetente verificado na Brevo
        site_name: Nome exibido do remetente
        api_url: URL do endpoint de envio
        request_timeout_seconds: Timeout da chamada HTTP
    """

    api_key: str = ""
    to_email: str = ""
    from_email: str = ""
    site_name: str = DEFAULT_SITE_NAME
    api_url: str = BREVO_SMTP_EMAIL_URL
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def sender_name(self) -> str:
        """Nome do remetente com fallback para o padrão."""
        return self.site_name or DEFAULT_SITE_NAME

    def missing_fields(self) -> list[str]:
        """Lista as variáveis obrigatórias ausentes ou em branco (sem expor valores)."""
        required = {
            "BREVO_API_KEY": self.api_key,
            "TO_EMAIL": self.to_email,
            "FROM_EMAIL": self.from_email,
        }
        return [name for name, value in required.items() if not value.strip()]

    def validate(self) -> list[str]:
        """Valida configurações mínimas de entrega.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors = [f"{name} não configurado" for name in self.missing_fields()]
        if self.request_timeout_seconds <= 0:
            errors.append("BREVO_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def load_brevo_settings() -> BrevoSettings:
    """Carrega BrevoSettings das variáveis de ambiente (sem cache)."""
    return BrevoSettings(
        api_key=os.getenv("BREVO_API_KEY", ""),
        to_email=os.getenv("TO_EMAIL", ""),
        from_email=os.getenv("FROM_EMAIL", ""),
        site_name=os.getenv("SITE_NAME", "") or DEFAULT_SITE_NAME,
        api_url=os.getenv("BREVO_API_URL", "") or BREVO_SMTP_EMAIL_URL,
        request_timeout_seconds=_parse_timeout(os.getenv("BREVO_REQUEST_TIMEOUT_SECONDS", "")),
    )


def _parse_timeout(raw: str) -> float:
    """Timeout em segundos; valor ausente ou inválido usa o padrão."""
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "brevo_timeout_invalid",
            extra={"component": "settings", "fallback_seconds": DEFAULT_TIMEOUT_SECONDS},
        )
        return DEFAULT_TIMEOUT_SECONDS
