"""Normalizer do questionário: body HTTP -> SubmittedForm."""

from .body_parser import detect_body_kind, parse_submission_body
from .decoders import (
    TEXT_FALLBACK_DECODERS,
    ParseResult,
    collect_form_pairs,
    decode_json_text,
    decode_text,
    decode_urlencoded_text,
)

__all__ = [
    "TEXT_FALLBACK_DECODERS",
    "ParseResult",
    "collect_form_pairs",
    "decode_json_text",
    "decode_text",
    "decode_urlencoded_text",
    "detect_body_kind",
    "parse_submission_body",
]
