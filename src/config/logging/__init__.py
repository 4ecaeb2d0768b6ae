"""Logging estruturado (JSON) do Survey Relay.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="survey_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("survey_relay_sent", extra={"status_code": 201})

Todo record carrega correlation_id e service. Nunca logar valores do
formulário, emails ou a API key.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
