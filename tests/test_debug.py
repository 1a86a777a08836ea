import logging

from canvas_connect4.debug import DebugLevel, DebugManager, debug


def test_level_filtering():
    manager = DebugManager()
    manager.configure(level=DebugLevel.INFO)
    assert manager.is_enabled_for(DebugLevel.ERROR)
    assert manager.is_enabled_for(DebugLevel.INFO)
    assert not manager.is_enabled_for(DebugLevel.DEBUG)
    assert not manager.is_enabled_for(DebugLevel.NONE)


def test_component_filtering():
    manager = DebugManager()
    manager.configure(level=DebugLevel.TRACE, components=["board"])
    assert manager.is_enabled_for(DebugLevel.DEBUG, "board")
    assert not manager.is_enabled_for(DebugLevel.DEBUG, "render")


def test_messages_are_tagged(caplog):
    debug.configure(level=DebugLevel.TRACE)
    debug.logger.addHandler(caplog.handler)
    try:
        debug.debug("column 3 is full", "session")
        debug.trace("frame", "render")
    finally:
        debug.logger.removeHandler(caplog.handler)

    messages = [record.getMessage() for record in caplog.records]
    assert "[session] column 3 is full" in messages
    assert "TRACE: [render] frame" in messages
    assert all(record.levelno == logging.DEBUG for record in caplog.records)


def test_disabled_manager_is_silent(caplog):
    debug.configure(level=DebugLevel.TRACE, enabled=False)
    debug.logger.addHandler(caplog.handler)
    try:
        debug.error("hidden")
    finally:
        debug.logger.removeHandler(caplog.handler)
    assert caplog.records == []


def test_timers():
    manager = DebugManager()
    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_set_from_string():
    debug.set_from_string("debug")
    assert debug.level is DebugLevel.DEBUG
    debug.set_from_string("nonsense")
    assert debug.level is DebugLevel.DEBUG


def test_log_file(tmp_path):
    path = tmp_path / "game.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(path))
    debug.info("Game ends in a draw", "session")
    debug.configure(log_file="")
    assert "[session] Game ends in a draw" in path.read_text()
