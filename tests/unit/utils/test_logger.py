"""
Logger 유틸리티 테스트
TerminalFormatter 들여쓰기, 카테고리 로그 함수, setup_logging 핸들러 구성
"""

import logging
import os
import time

import pytest

from mlscaffold.cli.utils.cli_progress import set_cli_line_active
from mlscaffold.settings import ScaffoldConfig
from mlscaffold.utils.core.logger import (
    CLI_LEVEL,
    TerminalFormatter,
    get_current_log_file,
    log_cmd,
    log_config,
    log_scaf,
    log_scaf_warning,
    setup_logging,
)


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0, msg=msg, args=(), exc_info=None
    )


class TestTerminalFormatter:
    def test_format_without_cli_active(self):
        assert TerminalFormatter().format(_record("메시지")) == "메시지"

    def test_format_with_cli_active_needs_newline(self):
        set_cli_line_active(True, needs_newline=True)
        assert TerminalFormatter().format(_record("[SCAF:logs] created")) == "\n  [SCAF:logs] created"

    def test_format_with_cli_active_no_newline(self):
        set_cli_line_active(True, needs_newline=False)
        assert TerminalFormatter().format(_record("[SCAF:logs] created")) == "  [SCAF:logs] created"

    def test_format_follows_flag_changes(self):
        formatter = TerminalFormatter()

        set_cli_line_active(True, needs_newline=True)
        assert formatter.format(_record("m")) == "\n  m"
        set_cli_line_active(False)
        assert formatter.format(_record("m")) == "m"


class TestCategoryLogFunctions:
    def test_log_scaf_with_phase(self, caplog):
        with caplog.at_level(logging.INFO, logger="mlscaffold"):
            log_scaf("created artifacts/", phase="directories")

        assert "[SCAF:directories] created artifacts/" in caplog.text

    def test_log_scaf_warning_level(self, caplog):
        with caplog.at_level(logging.INFO, logger="mlscaffold"):
            log_scaf_warning("failed logs/logs.log", phase="logs")

        assert caplog.records[-1].levelno == logging.WARNING
        assert "[SCAF:logs]" in caplog.records[-1].getMessage()

    def test_log_cmd_and_config(self, caplog):
        with caplog.at_level(logging.INFO, logger="mlscaffold"):
            log_cmd("exit 0", name="vcs_init")
            log_config("Config 로드 완료: scaffold.yaml")

        assert "[CMD:vcs_init] exit 0" in caplog.text
        assert "[CONFIG] Config 로드 완료: scaffold.yaml" in caplog.text

    def test_cli_level_registered(self):
        assert logging.getLevelName(CLI_LEVEL) == "CLI"


class TestSetupLogging:
    def test_console_only_by_default(self):
        setup_logging(ScaffoldConfig())

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, TerminalFormatter)
        assert handlers[0].level == CLI_LEVEL
        assert get_current_log_file() is None

    def test_verbose_lowers_console_level(self):
        setup_logging(ScaffoldConfig(), verbose=True)

        assert logging.getLogger().handlers[0].level == logging.DEBUG

    def test_quiet_level_respected(self):
        config = ScaffoldConfig()
        config.logging.level = "WARNING"

        setup_logging(config)

        assert logging.getLogger().handlers[0].level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(ScaffoldConfig())
        setup_logging(ScaffoldConfig())

        assert len(logging.getLogger().handlers) == 1

    def test_file_logging_when_base_path_set(self, tmp_path):
        config = ScaffoldConfig(logging={"base_path": str(tmp_path / "scaffold_logs")})

        setup_logging(config)
        log_scaf("phase started", phase="docs")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = get_current_log_file()
        assert log_file is not None
        assert log_file.parent == tmp_path / "scaffold_logs"
        assert log_file.name.startswith("mlscaffold_")
        assert "[SCAF:docs] phase started" in log_file.read_text(encoding="utf-8")

    def test_uncreatable_base_path_raises_os_error(self, tmp_path):
        (tmp_path / "blocker").write_text("")
        config = ScaffoldConfig(logging={"base_path": str(tmp_path / "blocker" / "logs")})

        with pytest.raises(OSError):
            setup_logging(config)

        assert get_current_log_file() is None

    def test_old_logs_cleaned_up(self, tmp_path):
        log_dir = tmp_path / "scaffold_logs"
        log_dir.mkdir()
        old_log = log_dir / "mlscaffold_20000101_000000.log"
        old_log.write_text("old")
        old_time = time.time() - 10 * 86400
        os.utime(old_log, (old_time, old_time))

        setup_logging(ScaffoldConfig(logging={"base_path": str(log_dir), "retention_days": 1}))

        assert not old_log.exists()
        assert get_current_log_file().exists()
