"""Questionário de satisfação: tipos e tabelas fixas do domínio.

SubmittedForm é o resultado da normalização do body (campo -> valor).
LABEL_MAP define rótulos exibidos e a ordem primária das linhas;
SKIP_KEYS lista campos que nunca aparecem no email (honeypot, metadados
do formulário, envelope).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeAlias

# Valor de campo: texto único ou lista (inputs repetidos). Bodies JSON
# podem trazer qualquer valor JSON, por isso Any.
FieldValue: TypeAlias = Any
SubmittedForm: TypeAlias = dict[str, FieldValue]

# Ordem de inserção = ordem de exibição
LABEL_MAP: Mapping[str, str] = MappingProxyType(
    {
        "customer_name": "姓名/LINE",
        "q1": "服務滿意度",
        "q2": "專業程度",
        "q2_extra": "專業程度備註",
        "q3": "服務人員表現 (1-5)",
        "q4": "推薦度 (1-10)",
        "q5": "是否再次委託",
        "q6": "其他建議",
    }
)

SKIP_KEYS: frozenset[str] = frozenset(
    {
        "bot-field",
        "form-name",
        "g-recaptcha-response",
        "submit",
        "userAgent",
        "submittedAt",
    }
)

# Aliases aceitos para o nome do cliente, em ordem de prioridade
CUSTOMER_NAME_KEYS: tuple[str, ...] = ("customer_name", "name", "line", "姓名")

SUBMITTED_AT_KEY = "submittedAt"
USER_AGENT_KEY = "userAgent"

SUBJECT_PREFIX = "【服務滿意度】新問卷回覆："
NAME_NOT_FILLED = "未填姓名"
VALUE_NOT_FILLED = "(未填)"
NO_FIELD_DATA = "(沒有欄位資料)"
SUBMITTED_AT_LABEL = "送出時間"
USER_AGENT_LABEL = "User-Agent"
