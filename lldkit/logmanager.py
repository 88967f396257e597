"""A single log manager that forwards messages to registered loggers."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, TextIO


class LogLevel(Enum):
    INFO = "INFO"
    DEBUG = "DEBUG"
    ERROR = "ERROR"


class LoggerObserver(ABC):
    """Receives every message sent to a :class:`LogManager`."""

    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None:
        """Record ``message`` at ``level``."""


class ConsoleLogger(LoggerObserver):
    def log(self, level: LogLevel, message: str) -> None:
        print(f"[CONSOLE] {level.name}{message}")


class FileLogger(LoggerObserver):
    """Appends messages to a file and echoes them to standard output."""

    def __init__(self, filename: str = "log.txt") -> None:
        self._file: TextIO | None = open(filename, "a", encoding="utf-8")

    def log(self, level: LogLevel, message: str) -> None:
        line = f"{level.name}{message}"
        if self._file is not None:
            self._file.write(line + "\n")
            self._file.flush()
        print(f"[FILELOG] {line}")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class DbLogger(LoggerObserver):
    def log(self, level: LogLevel, message: str) -> None:
        print(f"[DBLOG] {level.name}{message}")


class LogManager:
    """Forwards each message to its observers in the order they were added."""

    _instance: ClassVar[LogManager | None] = None

    def __init__(self) -> None:
        self._observers: list[LoggerObserver] = []

    @classmethod
    def get_instance(cls) -> LogManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_observer(self, observer: LoggerObserver) -> None:
        self._observers.append(observer)

    def log(self, level: LogLevel, message: str) -> None:
        for observer in self._observers:
            observer.log(level, message)


def main(argv: list[str] | None = None) -> int:
    """Log three messages to the console, a file and a database stand-in."""
    argparse.ArgumentParser(description="Logger demonstration.").parse_args(argv)
    logger = LogManager.get_instance()
    with FileLogger("log.txt") as file_logger:
        logger.add_observer(ConsoleLogger())
        logger.add_observer(file_logger)
        logger.add_observer(DbLogger())
        logger.log(LogLevel.INFO, " Application started")
        logger.log(LogLevel.DEBUG, " Debugging main flow")
        logger.log(LogLevel.ERROR, " Something went wrong")
    return 0