"""Normalizers: conversão do body HTTP para modelos internos.

Estrutura:
- survey/: body do questionário (por Content-Type, com fallback)
"""

from .survey import detect_body_kind, parse_submission_body

__all__ = [
    "detect_body_kind",
    "parse_submission_body",
]
