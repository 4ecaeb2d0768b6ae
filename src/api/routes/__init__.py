"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (questionário, health)
- Validação inicial de request (método, headers)
- Delegação para normalizers/use_cases
- Respostas HTTP apropriadas (sempre JSON)

Estrutura:
- routes/survey/: envio do questionário
- routes/health/: liveness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router, submit_http_exception_handler

__all__ = ["create_api_router", "submit_http_exception_handler"]
