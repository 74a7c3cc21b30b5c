import logging

import pytest
from tcod.event import KeySym, Modifier

from board.logging_config import NAMESPACES, setup_logging
from conftest import key


def test_setup_logging_installs_handlers(tmp_path, restore_loggers):
    log_file = tmp_path / "board.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))  # no duplicates on a second call

    for name in NAMESPACES:
        logger = logging.getLogger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

    logging.getLogger("ui.controller").debug("hello from ui")
    for handler in logging.getLogger("ui").handlers:
        handler.flush()
    assert "hello from ui" in log_file.read_text(encoding="utf-8")


def test_session_lifecycle_logged(make_controller, terminal, caplog):
    board = make_controller()
    with caplog.at_level(logging.INFO, logger="ui.controller"):
        terminal.feed(key(KeySym.SPACE), key(KeySym.RETURN))
        board.start("m").wait()

    messages = [r.getMessage() for r in caplog.records]
    assert any("Session started on 3x3 board" in m for m in messages)
    assert any("1 selections" in m for m in messages)


def test_interrupt_logged(make_controller, terminal, caplog):
    board = make_controller()
    board.start("m")
    terminal.feed(key(KeySym.C, Modifier.LCTRL))
    with caplog.at_level(logging.WARNING, logger="ui.controller"):
        with pytest.raises(SystemExit):
            board.pump()
    assert any(r.levelno == logging.WARNING for r in caplog.records)
