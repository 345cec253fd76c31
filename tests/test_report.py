from datetime import date

import pytest

from coin_report.config.constants import AccountStatus
from coin_report.models.account import AccountResult
from coin_report.services.aggregator import build_snapshot
from coin_report.services.report import ReportRenderer
from conftest import TODAY, make_basic, make_detail


@pytest.fixture
def full_result():
    snapshot = build_snapshot(make_basic(nickname="小明"), make_detail())
    return AccountResult(
        index=0,
        status=AccountStatus.SUCCESS,
        nickname=snapshot.nickname,
        snapshot=snapshot,
        today_earned_coins=4000,
    )


@pytest.fixture
def partial_result():
    snapshot = build_snapshot(make_basic(nickname="小红", total_cash="1", total_coin=20000))
    return AccountResult(
        index=1,
        status=AccountStatus.PARTIAL,
        nickname=snapshot.nickname,
        snapshot=snapshot,
        error="HTTP 500",
    )


@pytest.fixture
def failed_result():
    return AccountResult.failed(2, "接口返回异常：未登录")


def test_render_header_contains_title_and_date(full_result):
    html = ReportRenderer().render([full_result], TODAY)
    assert "快手多账号收益报告" in html
    assert "日期：2024-01-15" in html


def test_render_full_card(full_result):
    html = ReportRenderer().render([full_result], TODAY)

    assert html.count("<h3") == 1
    assert "账号1 · 小明" in html
    assert "12.34元" in html
    assert "3000枚" in html
    assert "(0.30元)" in html
    assert "今日金币" in html
    assert "累计收益" in html
    assert "88.80元" in html


def test_render_partial_card_omits_income(partial_result):
    html = ReportRenderer().render([partial_result], TODAY)

    assert html.count("<h3") == 1
    assert "账号2 · 小红" in html
    assert "1.00元" in html
    assert "20000枚" in html
    assert "(2.00元)" in html
    assert "累计收益" not in html
    assert "收益明细获取失败" in html


def test_render_failed_account_has_no_card(failed_result):
    html = ReportRenderer().render([failed_result], TODAY)

    assert "<h3" not in html
    assert "共处理1个账号，成功0个" in html


def test_render_mixed_results(full_result, partial_result, failed_result):
    html = ReportRenderer().render([full_result, partial_result, failed_result], TODAY)

    assert html.count("<h3") == 2
    assert html.count("累计收益") == 1
    assert "共处理3个账号，成功2个" in html
    assert "今日金币合计：4000枚" in html
    assert "当前金币合计：23000枚 (2.30元)" in html
    assert html.index("账号1") < html.index("账号2")


def test_render_is_deterministic(full_result, partial_result):
    renderer = ReportRenderer()
    first = renderer.render([full_result, partial_result], TODAY)
    second = renderer.render([full_result, partial_result], TODAY)
    assert first == second


def test_render_escapes_nickname():
    snapshot = build_snapshot(make_basic(nickname="<script>alert(1)</script>"), make_detail())
    result = AccountResult(
        index=0,
        status=AccountStatus.SUCCESS,
        nickname=snapshot.nickname,
        snapshot=snapshot,
    )

    html = ReportRenderer().render([result], TODAY)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_render_custom_heading(full_result):
    html = ReportRenderer(heading="测试报告").render([full_result], date(2024, 2, 1))
    assert "测试报告" in html
    assert "日期：2024-02-01" in html
