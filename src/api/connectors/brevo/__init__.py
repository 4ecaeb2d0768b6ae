"""Connector Brevo: cliente HTTP da API transacional de email."""

from .http_client import BrevoHttpClient, create_brevo_http_client

__all__ = ["BrevoHttpClient", "create_brevo_http_client"]
