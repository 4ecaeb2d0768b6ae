"""Configuração do pytest para o projeto Survey Relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

_BREVO_ENV_VARS = (
    "BREVO_API_KEY",
    "TO_EMAIL",
    "FROM_EMAIL",
    "SITE_NAME",
    "BREVO_API_URL",
    "BREVO_REQUEST_TIMEOUT_SECONDS",
)


@pytest.fixture
def clean_brevo_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove do ambiente as variáveis de entrega."""
    for name in _BREVO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
