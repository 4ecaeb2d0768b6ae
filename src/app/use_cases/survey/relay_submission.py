"""Use case: repassar uma resposta do questionário por email."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.protocols.email_sender import EmailMessage
from app.services.survey_report import build_survey_report
from config.settings.brevo import MISSING_CONFIG_MESSAGE

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.survey import SubmittedForm
    from app.protocols.email_sender import EmailPayloadBuilderProtocol, EmailSenderProtocol
    from config.settings import BrevoSettings

logger = logging.getLogger(__name__)

MISSING_CONFIG = "MISSING_CONFIG"
PROVIDER_ERROR = "PROVIDER_ERROR"
PROVIDER_ERROR_MESSAGE = "Brevo API error"


@dataclass(frozen=True, slots=True)
class RelaySubmissionResult:
    """Resultado do repasse (sem conhecimento de HTTP)."""

    success: bool
    error_code: str | None = None
    error_message: str | None = None
    details: str | None = None


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RelaySurveySubmissionUseCase:
    """Orquestra checagem de config, montagem do email e envio."""

    def __init__(
        self,
        settings: BrevoSettings,
        builder: EmailPayloadBuilderProtocol,
        sender: EmailSenderProtocol,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._builder = builder
        self._sender = sender
        self._clock = clock

    async def execute(self, form: SubmittedForm) -> RelaySubmissionResult:
        """Valida config, renderiza e envia. Sem config, o provedor não é chamado."""
        missing = self._settings.missing_fields()
        if missing:
            logger.error(
                "survey_relay_config_missing",
                extra={"component": "relay_submission", "missing": missing},
            )
            return RelaySubmissionResult(
                success=False,
                error_code=MISSING_CONFIG,
                error_message=MISSING_CONFIG_MESSAGE,
            )

        report = build_survey_report(form, now=self._clock())
        payload = self._builder.build(
            EmailMessage(
                sender_email=self._settings.from_email,
                sender_name=self._settings.sender_name,
                to_email=self._settings.to_email,
                subject=report.subject,
                html_content=report.html_content,
            )
        )

        result = await self._sender.send_email(payload)
        if not result.ok:
            logger.warning(
                "survey_relay_provider_failed",
                extra={"component": "relay_submission", "status_code": result.status_code},
            )
            return RelaySubmissionResult(
                success=False,
                error_code=PROVIDER_ERROR,
                error_message=PROVIDER_ERROR_MESSAGE,
                details=result.details,
            )

        logger.info(
            "survey_relay_sent",
            extra={
                "component": "relay_submission",
                "row_count": report.row_count,
                "field_count": len(form),
            },
        )
        return RelaySubmissionResult(success=True)
