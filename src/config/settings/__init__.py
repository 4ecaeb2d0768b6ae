"""Agregador de settings do Survey Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Email delivery (Brevo)
from config.settings.brevo import (
    BREVO_SMTP_EMAIL_URL,
    DEFAULT_SITE_NAME,
    MISSING_CONFIG_MESSAGE,
    BrevoSettings,
    load_brevo_settings,
)

__all__ = [
    # Constants
    "BREVO_SMTP_EMAIL_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SITE_NAME",
    "MISSING_CONFIG_MESSAGE",
    # Base
    "BaseSettings",
    # Brevo
    "BrevoSettings",
    "Environment",
    "get_base_settings",
    "load_brevo_settings",
]
