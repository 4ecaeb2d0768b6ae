"""Builder do payload de `POST /v3/smtp/email` (Brevo)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.email_sender import EmailMessage


class BrevoEmailPayloadBuilder:
    """Builder para emails HTML via Brevo."""

    def build(self, message: EmailMessage) -> dict[str, Any]:
        """Constrói payload JSON conforme API Brevo.

        Args:
            message: Email a enviar

        Returns:
            {"sender": {...}, "to": [{...}], "subject": ..., "htmlContent": ...}
        """
        return {
            "sender": {
                "email": message.sender_email,
                "name": message.sender_name,
            },
            "to": [{"email": message.to_email}],
            "subject": message.subject,
            "htmlContent": message.html_content,
        }
