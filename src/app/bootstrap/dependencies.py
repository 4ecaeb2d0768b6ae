"""Factories de dependências: criação de implementações concretas.

Usadas como providers do FastAPI (`Depends`) pela rota do questionário.
Nada aqui é cacheado: settings e cliente são montados por requisição.
"""

from __future__ import annotations

from fastapi import Depends

from api.connectors.brevo import create_brevo_http_client
from api.payload_builders.brevo import BrevoEmailPayloadBuilder
from app.protocols.email_sender import EmailPayloadBuilderProtocol, EmailSenderProtocol
from config.settings import BrevoSettings, load_brevo_settings


def provide_brevo_settings() -> BrevoSettings:
    """Lê a configuração de entrega do ambiente (uma vez por requisição)."""
    return load_brevo_settings()


def provide_email_sender(
    settings: BrevoSettings = Depends(provide_brevo_settings),
) -> EmailSenderProtocol:
    """Cria o sender Brevo ligado às settings da requisição."""
    return create_brevo_http_client(settings)


def create_email_payload_builder() -> EmailPayloadBuilderProtocol:
    """Cria o builder de payload do provedor de email."""
    return BrevoEmailPayloadBuilder()
