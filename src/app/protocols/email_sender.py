"""Protocolo de envio de email transacional.

Evita dependência direta do app na camada api (connector Brevo).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class EmailSendResult:
    """Resultado do envio ao provedor.

    Attributes:
        ok: True para HTTP 2xx
        status_code: Status HTTP devolvido pelo provedor
        details: Corpo da resposta de erro ("" se ilegível ou sucesso)
    """

    ok: bool
    status_code: int
    details: str = ""


class EmailSenderProtocol(Protocol):
    """Contrato mínimo para enviar um payload de email já montado."""

    async def send_email(self, payload: dict[str, Any]) -> EmailSendResult: ...


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """Email transacional com um único destinatário."""

    sender_email: str
    sender_name: str
    to_email: str
    subject: str
    html_content: str


class EmailPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para montar o payload do provedor."""

    def build(self, message: EmailMessage) -> dict[str, Any]: ...
