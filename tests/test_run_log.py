import logging

from coin_report.core.run_log import RunLog


def test_run_log_collects_messages():
    logger = logging.getLogger("coin_report.test_run_log")
    logger.setLevel(logging.INFO)
    run_log = RunLog().attach(logger)

    try:
        logger.info("[ℹ️] 【信息】 启动")
        logger.debug("不记录")
        logger.error("[❌] 【错误】 失败")
    finally:
        run_log.detach(logger)

    assert run_log.lines == ["[ℹ️] 【信息】 启动", "[❌] 【错误】 失败"]
    assert run_log.text == "[ℹ️] 【信息】 启动\n[❌] 【错误】 失败"


def test_run_log_stops_after_detach():
    logger = logging.getLogger("coin_report.test_run_log_detach")
    logger.setLevel(logging.INFO)
    run_log = RunLog().attach(logger)
    run_log.detach(logger)

    logger.info("ignored")

    assert run_log.lines == []
