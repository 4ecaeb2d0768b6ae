"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging e valida settings no startup.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, load_brevo_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name.replace("-", "_"),
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup e loga o resultado.

    Nunca bloqueia o boot: a configuração de entrega é relida e checada
    a cada requisição, e a ausência vira resposta 500 estruturada.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"brevo: {error}" for error in load_brevo_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors
