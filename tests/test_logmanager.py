import pytest

from lldkit.logmanager import (
    ConsoleLogger,
    DbLogger,
    FileLogger,
    LoggerObserver,
    LogLevel,
    LogManager,
)


class _Recorder(LoggerObserver):
    def __init__(self, name, sink):
        self.name = name
        self.sink = sink

    def log(self, level, message):
        self.sink.append((self.name, level, message))


def test_console_logger(capsys):
    ConsoleLogger().log(LogLevel.INFO, " started")
    assert capsys.readouterr().out == "[CONSOLE] INFO started\n"


@pytest.mark.parametrize("level", list(LogLevel))
def test_db_logger_level_names(capsys, level):
    DbLogger().log(level, "msg")
    assert capsys.readouterr().out == f"[DBLOG] {level.name}msg\n"


def test_file_logger_writes_and_echoes(tmp_path, capsys):
    path = tmp_path / "log.txt"
    with FileLogger(str(path)) as logger:
        logger.log(LogLevel.INFO, " a")
        logger.log(LogLevel.ERROR, " b")
    assert path.read_text(encoding="utf-8") == "INFO a\nERROR b\n"
    assert capsys.readouterr().out == "[FILELOG] INFO a\n[FILELOG] ERROR b\n"


def test_file_logger_appends(tmp_path):
    path = tmp_path / "log.txt"
    with FileLogger(str(path)) as logger:
        logger.log(LogLevel.INFO, "one")
    with FileLogger(str(path)) as logger:
        logger.log(LogLevel.DEBUG, "two")
    assert path.read_text(encoding="utf-8").splitlines() == ["INFOone", "DEBUGtwo"]


def test_closed_file_logger_only_echoes(tmp_path, capsys):
    path = tmp_path / "log.txt"
    logger = FileLogger(str(path))
    logger.close()
    logger.log(LogLevel.ERROR, "late")
    assert path.read_text(encoding="utf-8") == ""
    assert capsys.readouterr().out == "[FILELOG] ERRORlate\n"


def test_manager_forwards_in_order():
    sink = []
    manager = LogManager()
    manager.add_observer(_Recorder("first", sink))
    manager.add_observer(_Recorder("second", sink))
    manager.log(LogLevel.DEBUG, "hello")
    assert sink == [("first", LogLevel.DEBUG, "hello"), ("second", LogLevel.DEBUG, "hello")]


def test_get_instance_is_shared():
    sink = []
    LogManager.get_instance().add_observer(_Recorder("shared", sink))
    LogManager.get_instance().log(LogLevel.INFO, "via second lookup")
    assert sink == [("shared", LogLevel.INFO, "via second lookup")]


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        LoggerObserver()