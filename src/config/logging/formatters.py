"""Formatter JSON do serviço.

Campos obrigatórios: asctime, level, logger, message, correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios e nomes padronizados.

    Exemplo de output:
        {"asctime": "2026-10-17 10:30:00,123", "level": "INFO",
         "logger": "api.routes.survey.submit", "message": "survey_submit_ok",
         "correlation_id": "abc-123", "service": "survey_relay"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
