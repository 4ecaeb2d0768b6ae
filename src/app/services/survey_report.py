"""Montagem do email de resposta do questionário.

Funções puras: dado o formulário normalizado e o instante atual, produz
assunto e HTML. Ordem das linhas:
1. Campos do LABEL_MAP presentes no formulário, na ordem do LABEL_MAP
2. Demais campos, na ordem de chegada
3. Remove SKIP_KEYS (skip vence se a chave estiver nas duas tabelas)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.survey import (
    CUSTOMER_NAME_KEYS,
    LABEL_MAP,
    NAME_NOT_FILLED,
    NO_FIELD_DATA,
    SKIP_KEYS,
    SUBJECT_PREFIX,
    SUBMITTED_AT_KEY,
    SUBMITTED_AT_LABEL,
    USER_AGENT_KEY,
    USER_AGENT_LABEL,
    VALUE_NOT_FILLED,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from app.domain.survey import SubmittedForm

# `&` primeiro para não escapar duas vezes as entidades geradas
_HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


@dataclass(frozen=True, slots=True)
class ReportRow:
    """Linha da tabela (texto ainda sem escape)."""

    label: str
    value: str


@dataclass(frozen=True, slots=True)
class SurveyReport:
    """Assunto e corpo HTML prontos para envio."""

    subject: str
    html_content: str
    customer_name: str
    row_count: int


def escape_html(value: Any) -> str:
    """Escapa &, <, > e aspas duplas."""
    text = str(value)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def stringify_value(value: Any) -> str:
    """Converte valor de campo em texto de exibição.

    Listas viram "a, b"; None vira ""; objetos viram JSON compacto.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        # 9.0 vindo de JSON aparece como "9"
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify_value(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def extract_customer_name(form: Mapping[str, Any]) -> str:
    """Primeiro valor não vazio entre os aliases de nome."""
    for key in CUSTOMER_NAME_KEYS:
        name = stringify_value(form.get(key))
        if name:
            return name
    return ""


def build_subject(customer_name: str) -> str:
    return f"{SUBJECT_PREFIX}{customer_name or NAME_NOT_FILLED}"


def order_field_keys(
    form: Mapping[str, Any],
    label_map: Mapping[str, str] = LABEL_MAP,
    skip_keys: Collection[str] = SKIP_KEYS,
) -> list[str]:
    """Chaves a exibir: rotuladas (ordem do label_map) + restantes (ordem de chegada)."""
    labeled = [key for key in label_map if key in form]
    remaining = [key for key in form if key not in label_map]
    return [key for key in dict.fromkeys(labeled + remaining) if key not in skip_keys]


def build_rows(
    form: Mapping[str, Any],
    label_map: Mapping[str, str] = LABEL_MAP,
    skip_keys: Collection[str] = SKIP_KEYS,
) -> list[ReportRow]:
    return [
        ReportRow(label=label_map.get(key, key), value=stringify_value(form[key]))
        for key in order_field_keys(form, label_map, skip_keys)
    ]


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z (ex: 2026-10-17T09:30:00.000Z)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_row(row: ReportRow) -> str:
    value_html = escape_html(row.value).replace("\n", "<br/>") or VALUE_NOT_FILLED
    return (
        f'<tr><th align="left" style="white-space:nowrap">{escape_html(row.label)}</th>'
        f"<td>{value_html}</td></tr>"
    )


def render_report_html(
    *,
    subject: str,
    rows: list[ReportRow],
    submitted_at: str,
    user_agent: str,
    form: Mapping[str, Any],
) -> str:
    """Renderiza o documento HTML: título, tabela e dump JSON do formulário."""
    rows_html = "\n".join(render_row(row) for row in rows) or f"<tr><td>{NO_FIELD_DATA}</td></tr>"
    raw_json = json.dumps(form, ensure_ascii=False, indent=2, default=str)
    return f"""
      <div style="font-family:Arial,Helvetica,sans-serif;line-height:1.6">
        <h2>{escape_html(subject)}</h2>
        <table border="1" cellpadding="8" cellspacing="0" style="border-collapse:collapse;width:100%;max-width:760px">
          {rows_html}
          <tr><th align="left">{SUBMITTED_AT_LABEL}</th><td>{escape_html(submitted_at)}</td></tr>
          <tr><th align="left">{USER_AGENT_LABEL}</th><td>{escape_html(user_agent)}</td></tr>
        </table>
        <pre style="margin-top:12px;background:#f6f8fa;padding:12px;border-radius:6px;overflow:auto">{escape_html(raw_json)}</pre>
      </div>
    """  # noqa: E501


def build_survey_report(
    form: SubmittedForm,
    now: datetime | None = None,
) -> SurveyReport:
    """Monta assunto e HTML do email a partir do formulário.

    Args:
        form: Formulário normalizado
        now: Instante usado quando o formulário não traz submittedAt

    Returns:
        SurveyReport com subject e html_content.
    """
    customer_name = extract_customer_name(form)
    subject = build_subject(customer_name)
    rows = build_rows(form)
    submitted_at = stringify_value(form.get(SUBMITTED_AT_KEY)) or format_timestamp(
        now or datetime.now(UTC)
    )
    html_content = render_report_html(
        subject=subject,
        rows=rows,
        submitted_at=submitted_at,
        user_agent=stringify_value(form.get(USER_AGENT_KEY)),
        form=form,
    )
    return SurveyReport(
        subject=subject,
        html_content=html_content,
        customer_name=customer_name,
        row_count=len(rows),
    )
