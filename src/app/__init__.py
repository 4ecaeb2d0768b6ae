"""App: orquestração do repasse do questionário.

Subpastas:
- bootstrap/: composition root (logging, providers do FastAPI)
- domain/: tabelas fixas do questionário (rótulos, campos ignorados)
- use_cases/: caso de uso de repasse (sem conhecimento de HTTP)
- services/: montagem do email (funções puras)
- protocols/: contratos do envio de email
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; config configura.
"""
