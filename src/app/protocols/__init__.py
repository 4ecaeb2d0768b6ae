"""Protocolos e contratos do core da aplicação."""

from .email_sender import (
    EmailMessage,
    EmailPayloadBuilderProtocol,
    EmailSenderProtocol,
    EmailSendResult,
)

__all__ = [
    "EmailMessage",
    "EmailPayloadBuilderProtocol",
    "EmailSendResult",
    "EmailSenderProtocol",
]
