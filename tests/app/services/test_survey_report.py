"""Testes da montagem do email do questionário."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from app.domain.survey import LABEL_MAP
from app.services.survey_report import (
    ReportRow,
    build_rows,
    build_subject,
    build_survey_report,
    escape_html,
    extract_customer_name,
    format_timestamp,
    order_field_keys,
    render_row,
    stringify_value,
)

FIXED_NOW = datetime(2026, 10, 17, 9, 30, 0, 123000, tzinfo=UTC)


class TestEscapeHtml:
    """Testes para escape_html."""

    def test_escapes_special_characters(self) -> None:
        assert escape_html('<script>alert("x")</script>') == (
            "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"
        )

    def test_ampersand_escaped_first(self) -> None:
        """Entidades já existentes são escapadas uma única vez."""
        assert escape_html("&lt;") == "&amp;lt;"

    def test_single_quote_untouched(self) -> None:
        assert escape_html("it's") == "it's"


class TestStringifyValue:
    """Testes para stringify_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("texto", "texto"),
            (["a", "b"], "a, b"),
            (None, ""),
            (True, "true"),
            (False, "false"),
            (5, "5"),
            (9.0, "9"),
            (4.5, "4.5"),
            ({"k": "v"}, '{"k":"v"}'),
        ],
    )
    def test_conversion(self, value: object, expected: str) -> None:
        assert stringify_value(value) == expected


class TestCustomerName:
    """Testes para extract_customer_name e build_subject."""

    def test_first_non_empty_alias_wins(self) -> None:
        form = {"customer_name": "", "name": "", "line": "line_id_42", "姓名": "王小明"}
        assert extract_customer_name(form) == "line_id_42"

    def test_chinese_label_alias(self) -> None:
        assert extract_customer_name({"姓名": "王小明"}) == "王小明"

    def test_defaults_to_empty(self) -> None:
        assert extract_customer_name({"q1": "5"}) == ""

    def test_subject_with_name(self) -> None:
        assert build_subject("王小明") == "【服務滿意度】新問卷回覆：王小明"

    def test_subject_placeholder(self) -> None:
        assert build_subject("") == "【服務滿意度】新問卷回覆：未填姓名"


class TestOrderFieldKeys:
    """Testes para a ordem das linhas."""

    def test_label_map_order_first(self) -> None:
        form = {"q2": "4", "q1": "5"}
        assert order_field_keys(form) == ["q1", "q2"]

    def test_unknown_fields_after_labeled_in_arrival_order(self) -> None:
        form = {"zeta": "1", "q3": "5", "custom_note": "hi", "customer_name": "A"}
        assert order_field_keys(form) == ["customer_name", "q3", "zeta", "custom_note"]

    def test_skip_keys_removed(self) -> None:
        form = {
            "bot-field": "x",
            "q1": "5",
            "form-name": "survey",
            "g-recaptcha-response": "token",
            "submit": "送出",
            "userAgent": "UA",
            "submittedAt": "2026-01-01",
        }
        assert order_field_keys(form) == ["q1"]

    def test_skip_wins_over_label(self) -> None:
        """Chave nas duas tabelas não é exibida."""
        label_map = {"q1": "服務滿意度", "secret": "Secret"}
        assert order_field_keys({"secret": "s", "q1": "5"}, label_map, {"secret"}) == ["q1"]

    def test_all_label_map_keys(self) -> None:
        form = {key: "v" for key in reversed(list(LABEL_MAP))}
        assert order_field_keys(form) == list(LABEL_MAP)


class TestRows:
    """Testes para build_rows e render_row."""

    def test_labels_resolved_with_raw_key_fallback(self) -> None:
        rows = build_rows({"q1": "5", "custom_note": "hi"})
        assert rows == [
            ReportRow(label="服務滿意度", value="5"),
            ReportRow(label="custom_note", value="hi"),
        ]

    def test_multi_value_joined(self) -> None:
        assert build_rows({"q5": ["yes", "maybe"]})[0].value == "yes, maybe"

    def test_newline_becomes_br_after_escape(self) -> None:
        html = render_row(ReportRow(label="q6", value="a\n<b>"))
        assert "a<br/>&lt;b&gt;" in html
        assert "\\n" not in html

    def test_empty_value_placeholder(self) -> None:
        assert "<td>(未填)</td>" in render_row(ReportRow(label="q6", value=""))

    def test_label_is_escaped(self) -> None:
        html = render_row(ReportRow(label="<i>", value="x"))
        assert "&lt;i&gt;" in html


class TestFormatTimestamp:
    """Testes para format_timestamp."""

    def test_utc_with_milliseconds(self) -> None:
        assert format_timestamp(FIXED_NOW) == "2026-10-17T09:30:00.123Z"

    def test_converts_other_timezones(self) -> None:
        taipei = FIXED_NOW.astimezone(timezone(timedelta(hours=8)))
        assert format_timestamp(taipei) == "2026-10-17T09:30:00.123Z"


class TestBuildSurveyReport:
    """Testes para build_survey_report."""

    def test_rows_order_in_html(self) -> None:
        report = build_survey_report({"q2": "4", "q1": "5"}, now=FIXED_NOW)
        html = report.html_content
        assert "姓名/LINE" not in html
        assert html.index("服務滿意度") < html.index("專業程度")
        assert report.row_count == 2

    def test_honeypot_never_rendered_in_table(self) -> None:
        report = build_survey_report({"bot-field": "x", "q1": "5"}, now=FIXED_NOW)
        table = report.html_content.split("<pre")[0]
        assert "bot-field" not in table

    def test_unknown_field_after_labeled(self) -> None:
        report = build_survey_report({"custom_note": "hi", "q6": "ok"}, now=FIXED_NOW)
        html = report.html_content
        assert html.index("其他建議") < html.index(">custom_note<")

    def test_script_never_unescaped(self) -> None:
        report = build_survey_report(
            {"q6": "<script>alert(1)</script>", "<script>": "k"},
            now=FIXED_NOW,
        )
        assert "<script>" not in report.html_content
        assert "&lt;script&gt;" in report.html_content

    def test_subject_escaped_in_heading(self) -> None:
        report = build_survey_report({"customer_name": "<b>Ann</b>"}, now=FIXED_NOW)
        assert report.subject == "【服務滿意度】新問卷回覆：<b>Ann</b>"
        assert "<h2>【服務滿意度】新問卷回覆：&lt;b&gt;Ann&lt;/b&gt;</h2>" in report.html_content

    def test_empty_form_placeholder_and_envelope_rows(self) -> None:
        report = build_survey_report({}, now=FIXED_NOW)
        html = report.html_content
        assert "<tr><td>(沒有欄位資料)</td></tr>" in html
        assert '<tr><th align="left">送出時間</th><td>2026-10-17T09:30:00.123Z</td></tr>' in html
        assert '<tr><th align="left">User-Agent</th><td></td></tr>' in html
        assert report.subject.endswith("未填姓名")
        assert report.row_count == 0

    def test_envelope_values_from_form(self) -> None:
        report = build_survey_report(
            {"submittedAt": "2026-10-01T00:00:00Z", "userAgent": 'Mozilla "X"'},
            now=FIXED_NOW,
        )
        html = report.html_content
        assert "<td>2026-10-01T00:00:00Z</td>" in html
        assert "<td>Mozilla &quot;X&quot;</td>" in html
        assert "2026-10-17T09:30:00.123Z" not in html

    def test_raw_json_dump_is_indented_and_escaped(self) -> None:
        report = build_survey_report({"q6": "a&b", "姓名": "王"}, now=FIXED_NOW)
        assert '{\n  &quot;q6&quot;: &quot;a&amp;b&quot;,\n  &quot;姓名&quot;: &quot;王&quot;\n}' in (
            report.html_content
        )

    def test_deterministic_for_fixed_time(self) -> None:
        form = {"q1": "5", "q5": ["yes", "no"]}
        first = build_survey_report(form, now=FIXED_NOW)
        second = build_survey_report(form, now=FIXED_NOW)
        assert first == second
