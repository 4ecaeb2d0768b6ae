"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- brevo/: POST /v3/smtp/email
"""

from .brevo import BrevoEmailPayloadBuilder

__all__ = ["BrevoEmailPayloadBuilder"]
