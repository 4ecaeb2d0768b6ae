"""Serviços de aplicação.

Unidades puras (sem IO): montagem do email a partir do formulário.
"""

from app.services.survey_report import SurveyReport, build_survey_report

__all__ = [
    "SurveyReport",
    "build_survey_report",
]
