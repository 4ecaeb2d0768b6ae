"""Casos de uso do questionário de satisfação."""

from .relay_submission import (
    MISSING_CONFIG,
    PROVIDER_ERROR,
    PROVIDER_ERROR_MESSAGE,
    RelaySubmissionResult,
    RelaySurveySubmissionUseCase,
)

__all__ = [
    "MISSING_CONFIG",
    "PROVIDER_ERROR",
    "PROVIDER_ERROR_MESSAGE",
    "RelaySubmissionResult",
    "RelaySurveySubmissionUseCase",
]
