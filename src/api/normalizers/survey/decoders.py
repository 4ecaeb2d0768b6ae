"""Decoders de texto para o body do questionário.

Cada decoder recebe o body já como texto e devolve um ParseResult;
nenhum levanta exceção. `decode_text` percorre uma sequência ordenada de
decoders e fica com o primeiro resultado bem-sucedido.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl

from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from app.domain.survey import SubmittedForm

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Resultado de uma estratégia de parsing."""

    ok: bool
    strategy: str
    fields: SubmittedForm = field(default_factory=dict)


def collect_form_pairs(pairs: Iterable[tuple[str, str]]) -> SubmittedForm:
    """Agrupa pares (nome, valor) preservando a ordem da primeira ocorrência.

    Chave repetida vira lista com todos os valores, na ordem de chegada.
    """
    fields: SubmittedForm = {}
    for key, value in pairs:
        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields


def decode_json_text(text: str) -> ParseResult:
    """Decodifica JSON. Texto vazio equivale a objeto vazio.

    JSON válido que não é objeto (lista, número, null) conta como sucesso
    sem campos.
    """
    try:
        payload = json.loads(text or "{}")
    except (ValueError, RecursionError):
        return ParseResult(ok=False, strategy="json")
    if not isinstance(payload, dict):
        return ParseResult(ok=True, strategy="json")
    return ParseResult(ok=True, strategy="json", fields=payload)


def decode_urlencoded_text(text: str) -> ParseResult:
    """Decodifica application/x-www-form-urlencoded.

    Percent-escapes precisam formar UTF-8 válido; caso contrário falha.
    """
    try:
        pairs = parse_qsl(text, keep_blank_values=True, errors="strict")
    except ValueError:
        return ParseResult(ok=False, strategy="urlencoded")
    return ParseResult(ok=True, strategy="urlencoded", fields=collect_form_pairs(pairs))


# Cascata para content-type desconhecido/ausente e para recuperação de erro
TEXT_FALLBACK_DECODERS: tuple[Callable[[str], ParseResult], ...] = (
    decode_json_text,
    decode_urlencoded_text,
)


def decode_text(
    text: str,
    decoders: Sequence[Callable[[str], ParseResult]] = TEXT_FALLBACK_DECODERS,
) -> SubmittedForm:
    """Aplica os decoders em ordem; o primeiro sucesso vence.

    Returns:
        Campos decodificados, ou dict vazio se todos falharem.
    """
    for position, decoder in enumerate(decoders):
        result = decoder(text)
        if result.ok:
            if position > 0:
                log_fallback(logger, "body_decoder", strategy=result.strategy)
            return result.fields
    log_fallback(logger, "body_decoder", reason="all_decoders_failed", strategy="empty")
    return {}
