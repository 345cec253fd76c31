import logging
from unittest.mock import AsyncMock, MagicMock, patch

from coin_report.config.constants import BASIC_INFO_URL
from coin_report.core.exceptions import AccountFetchError
from coin_report.core.run_log import RunLog
from coin_report.services.notification import NullNotifier
from coin_report.tasks.report_job import run_report
from conftest import COOKIE_A, COOKIE_B, TODAY, FakeAdapter, make_basic, make_detail


async def test_no_credentials_exits_before_network(settings, notifier):
    settings.ksck = "&short&"
    adapter = FakeAdapter()

    code = await run_report(settings, adapter=adapter, notifier=notifier, today=TODAY)

    assert code == 1
    assert adapter.calls == []
    assert notifier.sent == []


async def test_single_failed_account_still_notifies(settings, notifier, fetch_error):
    settings.ksck = COOKIE_A
    adapter = FakeAdapter(basic={COOKIE_A: fetch_error})

    code = await run_report(settings, adapter=adapter, notifier=notifier, today=TODAY)

    assert code == 0
    assert adapter.calls == [("basic", COOKIE_A)]
    assert len(notifier.sent) == 1
    title, body = notifier.sent[0]
    assert title == "快手收益记录"
    assert "<h3" not in body
    assert "共处理1个账号，成功0个" in body


async def test_full_and_partial_accounts(settings, notifier):
    adapter = FakeAdapter(
        basic={COOKIE_A: make_basic(nickname="小明"), COOKIE_B: make_basic(nickname="小红")},
        detail={COOKIE_A: make_detail(), COOKIE_B: AccountFetchError("HTTP 502")},
    )

    code = await run_report(settings, adapter=adapter, notifier=notifier, today=TODAY)

    assert code == 0
    _, body = notifier.sent[0]
    assert body.count("<h3") == 2
    assert body.count("累计收益") == 1
    assert "共处理2个账号，成功2个" in body
    assert "日期：2024-01-15" in body


async def test_unexpected_error_sends_error_notification(settings, notifier):
    adapter = FakeAdapter(
        basic={COOKIE_A: make_basic(), COOKIE_B: make_basic()},
        detail={COOKIE_A: make_detail(), COOKIE_B: make_detail()},
    )
    run_log = RunLog(level=logging.ERROR)

    with patch("coin_report.tasks.report_job.ReportRenderer") as mock_renderer:
        mock_renderer.return_value.render.side_effect = RuntimeError("template broken")
        code = await run_report(
            settings, adapter=adapter, notifier=notifier, today=TODAY, run_log=run_log
        )

    assert code == 0
    assert len(notifier.sent) == 1
    title, body = notifier.sent[0]
    assert title == "脚本异常"
    assert "脚本执行出错：template broken" in body


async def test_notification_failure_does_not_change_exit_code(settings):
    class BrokenNotifier:
        async def send(self, title, body):
            raise RuntimeError("smtp down")

    adapter = FakeAdapter(
        basic={COOKIE_A: make_basic(), COOKIE_B: make_basic()},
        detail={COOKIE_A: make_detail(), COOKIE_B: make_detail()},
    )

    code = await run_report(settings, adapter=adapter, notifier=BrokenNotifier(), today=TODAY)

    assert code == 0


async def test_default_notifier_is_null(settings):
    adapter = FakeAdapter(
        basic={COOKIE_A: make_basic(), COOKIE_B: make_basic()},
        detail={COOKIE_A: make_detail(), COOKIE_B: make_detail()},
    )
    null = NullNotifier()

    with patch("coin_report.tasks.report_job.build_notifier", return_value=null):
        await run_report(settings, adapter=adapter, today=TODAY)

    assert len(null.sent) == 1


async def test_run_log_detached_after_run(settings, notifier):
    adapter = FakeAdapter(
        basic={COOKIE_A: make_basic(), COOKIE_B: make_basic()},
        detail={COOKIE_A: make_detail(), COOKIE_B: make_detail()},
    )
    run_log = RunLog()

    await run_report(settings, adapter=adapter, notifier=notifier, today=TODAY, run_log=run_log)

    assert run_log not in logging.getLogger("coin_report").handlers


def _api_response(body):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = body
    return response


@patch("coin_report.sites.kuaishou.AsyncSession")
async def test_out_of_range_account_does_not_abort_report(mock_session_cls, settings, notifier):
    basic = {
        COOKIE_A: {"userData": {"nickname": "小明"}, "totalCash": "1e30", "totalCoin": 100},
        COOKIE_B: {"userData": {"nickname": "小红"}, "totalCash": "1.50", "totalCoin": 20000},
    }
    detail = {"coinBalance": 20000, "accumulativeAmount": "3.00", "coinAccountPage": {"data": []}}

    async def fake_get(url, **kwargs):
        cookie = kwargs["headers"]["Cookie"]
        data = basic[cookie] if url == BASIC_INFO_URL else detail
        return _api_response({"result": 1, "data": data})

    session = MagicMock()
    session.get = AsyncMock(side_effect=fake_get)
    session.close = AsyncMock()
    mock_session_cls.return_value = session

    code = await run_report(settings, notifier=notifier, today=TODAY)

    assert code == 0
    assert len(notifier.sent) == 1
    title, body = notifier.sent[0]
    assert title == "快手收益记录"
    assert body.count("<h3") == 1
    assert "账号2 · 小红" in body
    assert "小明" not in body
    assert "共处理2个账号，成功1个" in body
