import logging

import movie_record.config as cfg
import movie_record.logger as logger


def test_append_bounded_log_respects_limit(monkeypatch):
    monkeypatch.setattr(logger, "logs_limit", lambda: 2)
    logs = []

    for i in range(4):
        logger.append_bounded_log(logs, f"line-{i}")

    assert logs == ["line-0", "line-1", logger._LOGS_TRUNCATED_SENTINEL]


def test_append_bounded_log_zero_limit_drops_everything(monkeypatch):
    monkeypatch.setattr(logger, "logs_limit", lambda: 0)
    logs = []

    logger.append_bounded_log(logs, "dropped")

    assert logs == []


def test_truncate_line_uses_configured_limit(monkeypatch):
    monkeypatch.setattr(cfg, "LOGGER_LOG_LINE_MAX_CHARS", 40)

    out = logger.truncate_line("x" * 100)
    assert out.endswith("(truncated)")
    assert len(out) < 100
    assert logger.truncate_line("short") == "short"


def test_resolve_level_from_config(monkeypatch):
    monkeypatch.setattr(cfg, "LOG_LEVEL", "error")
    assert logger._resolve_level_from_config() == logging.ERROR

    monkeypatch.setattr(cfg, "LOG_LEVEL", None)
    monkeypatch.setattr(cfg, "DEBUG_MODE", True)
    assert logger._resolve_level_from_config() == logging.DEBUG

    monkeypatch.setattr(cfg, "DEBUG_MODE", False)
    assert logger._resolve_level_from_config() == logging.INFO


def test_silent_mode_suppresses_warning_but_not_error(monkeypatch, caplog):
    monkeypatch.setattr(cfg, "SILENT_MODE", True)
    monkeypatch.setattr(cfg, "LOG_LEVEL", None)

    with caplog.at_level(logging.INFO, logger=logger.LOGGER_NAME):
        logger.warning("hidden warning")
        logger.warning("forced warning", always=True)
        logger.error("visible error")

    assert "hidden warning" not in caplog.text
    assert "forced warning" in caplog.text
    assert "visible error" in caplog.text


def test_debug_ctx_goes_to_progress_in_silent_debug(monkeypatch, capsys):
    monkeypatch.setattr(cfg, "SILENT_MODE", True)
    monkeypatch.setattr(cfg, "DEBUG_MODE", True)

    logger.debug_ctx("cli", "hello")

    assert capsys.readouterr().out == "[CLI][DEBUG] hello\n"


def test_debug_ctx_noop_without_debug_mode(monkeypatch, capsys):
    monkeypatch.setattr(cfg, "SILENT_MODE", True)
    monkeypatch.setattr(cfg, "DEBUG_MODE", False)

    logger.debug_ctx("cli", "hello")

    assert capsys.readouterr().out == ""


def test_file_handler_and_progress_to_file(monkeypatch, tmp_path):
    target = tmp_path / "logs" / "run.log"
    monkeypatch.delenv("LOGGER_FILE_PATH", raising=False)
    monkeypatch.setattr(cfg, "LOGGER_FILE_ENABLED", True)
    monkeypatch.setattr(cfg, "LOGGER_FILE_PATH", target)

    root = logging.getLogger()
    try:
        logger._ensure_file_handler(root, level=logging.INFO)
        logger._ensure_file_handler(root, level=logging.INFO)
        ours = [h for h in root.handlers if getattr(h, logger._FILE_HANDLER_TAG, False)]
        assert len(ours) == 1

        logger.progress("heartbeat")
        assert "heartbeat" in target.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            if getattr(handler, logger._FILE_HANDLER_TAG, False):
                root.removeHandler(handler)
                handler.close()
