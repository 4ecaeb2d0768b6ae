"""Payload builders para a API transacional da Brevo."""

from .email import BrevoEmailPayloadBuilder

__all__ = ["BrevoEmailPayloadBuilder"]
