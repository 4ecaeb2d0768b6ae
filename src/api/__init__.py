"""API: camada de borda do Survey Relay.

Responsabilidades:
- Receber o POST do formulário estático
- Normalizar o body (JSON, urlencoded, multipart, texto) para SubmittedForm
- Construir o payload da API da Brevo
- Chamar a Brevo via HTTP

Subpastas:
- connectors/: cliente HTTP da Brevo
- normalizers/: body HTTP → SubmittedForm
- payload_builders/: EmailMessage → payload da Brevo
- routes/: endpoints HTTP (questionário, health)

NÃO PODE conter: montagem do email, regras de configuração, orquestração.
"""
