"""Testes do use case de repasse do questionário."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from api.payload_builders.brevo import BrevoEmailPayloadBuilder
from app.protocols.email_sender import EmailSendResult
from app.use_cases.survey import (
    MISSING_CONFIG,
    PROVIDER_ERROR,
    RelaySubmissionResult,
    RelaySurveySubmissionUseCase,
)
from config.settings import MISSING_CONFIG_MESSAGE, BrevoSettings

FIXED_NOW = datetime(2026, 10, 17, 1, 2, 3, tzinfo=UTC)

COMPLETE_SETTINGS = BrevoSettings(
    api_key="key",
    to_email="owner@example.com",
    from_email="noreply@example.com",
    site_name="",
)


class FakeEmailSender:
    def __init__(self, result: EmailSendResult | None = None) -> None:
        self.result = result or EmailSendResult(ok=True, status_code=201)
        self.payloads: list[dict[str, Any]] = []

    async def send_email(self, payload: dict[str, Any]) -> EmailSendResult:
        self.payloads.append(payload)
        return self.result


def _use_case(settings: BrevoSettings, sender: FakeEmailSender) -> RelaySurveySubmissionUseCase:
    return RelaySurveySubmissionUseCase(
        settings=settings,
        builder=BrevoEmailPayloadBuilder(),
        sender=sender,
        clock=lambda: FIXED_NOW,
    )


@pytest.mark.asyncio
async def test_success_sends_rendered_email() -> None:
    sender = FakeEmailSender()

    result = await _use_case(COMPLETE_SETTINGS, sender).execute(
        {"customer_name": "王小明", "q1": "5"}
    )

    assert result == RelaySubmissionResult(success=True)
    assert len(sender.payloads) == 1
    payload = sender.payloads[0]
    assert payload["sender"] == {"email": "noreply@example.com", "name": "顧客滿意度調查"}
    assert payload["to"] == [{"email": "owner@example.com"}]
    assert payload["subject"] == "【服務滿意度】新問卷回覆：王小明"
    assert "服務滿意度" in payload["htmlContent"]
    assert "2026-10-17T01:02:03.000Z" in payload["htmlContent"]


@pytest.mark.asyncio
async def test_site_name_used_as_sender_name() -> None:
    sender = FakeEmailSender()
    settings = BrevoSettings(
        api_key="key",
        to_email="owner@example.com",
        from_email="noreply@example.com",
        site_name="Acme 問卷",
    )

    await _use_case(settings, sender).execute({})

    assert sender.payloads[0]["sender"]["name"] == "Acme 問卷"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing",
    [
        {"api_key": ""},
        {"api_key": "   "},
        {"to_email": " \t"},
        {"to_email": ""},
        {"from_email": ""},
        {"api_key": "", "to_email": "", "from_email": ""},
    ],
)
async def test_missing_config_never_calls_provider(missing: dict[str, str]) -> None:
    sender = FakeEmailSender()
    values = {
        "api_key": "key",
        "to_email": "owner@example.com",
        "from_email": "noreply@example.com",
        **missing,
    }

    result = await _use_case(BrevoSettings(**values), sender).execute({"q1": "5"})

    assert result.success is False
    assert result.error_code == MISSING_CONFIG
    assert result.error_message == MISSING_CONFIG_MESSAGE
    assert sender.payloads == []


@pytest.mark.asyncio
async def test_provider_failure_carries_details() -> None:
    sender = FakeEmailSender(EmailSendResult(ok=False, status_code=400, details="bad request"))

    result = await _use_case(COMPLETE_SETTINGS, sender).execute({"q1": "5"})

    assert result == RelaySubmissionResult(
        success=False,
        error_code=PROVIDER_ERROR,
        error_message="Brevo API error",
        details="bad request",
    )
