"""Connectors: adapters de borda para APIs externas.

Estrutura:
- brevo/: API transacional de email da Brevo
"""

from .brevo import BrevoHttpClient, create_brevo_http_client

__all__ = ["BrevoHttpClient", "create_brevo_http_client"]
