"""Media players joined through an adapter to an advanced-format player."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass


class MediaPlayer(ABC):
    """A player that takes a file name and a format."""

    @abstractmethod
    def play(self, file: str, format: str) -> str:
        """Play ``file`` in ``format`` and return the line announced."""


class DefaultMediaPlayer(MediaPlayer):
    """Plays any file directly."""

    def play(self, file: str, format: str) -> str:
        line = f"Playing{file}.{format}"
        print(line)
        return line


@dataclass
class AdvancedFormat:
    """The description of a file handed to an advanced player."""

    file: str = ""
    format: str = ""
    res: str = ""


class AdvancedMediaPlayer(ABC):
    """A player that only understands :class:`AdvancedFormat` records."""

    @abstractmethod
    def play_advanced_format(self, advanced_format: AdvancedFormat) -> str:
        """Play the file described and return the line announced."""


class AviPlayer(AdvancedMediaPlayer):
    """Plays files described by an :class:`AdvancedFormat`."""

    def play_advanced_format(self, advanced_format: AdvancedFormat) -> str:
        line = f" Playing {advanced_format.file}.{advanced_format.format}"
        print(line)
        return line


class MediaPlayerAdapter(MediaPlayer):
    """Presents an :class:`AviPlayer` through the :class:`MediaPlayer` interface."""

    def __init__(self, advanced_format: AdvancedFormat) -> None:
        self._player: AdvancedMediaPlayer = AviPlayer()
        self._format = advanced_format

    def play(self, file: str, format: str) -> str:
        self._format.format = format
        self._format.file = file
        return self._player.play_advanced_format(self._format)


def main(argv: list[str] | None = None) -> int:
    """Play two files through the adapter."""
    argparse.ArgumentParser(description="Adapter demonstration.").parse_args(argv)
    adapter = MediaPlayerAdapter(AdvancedFormat())
    adapter.play("myfile", "avi")
    adapter.play("file", "mov")
    print("Hello, World!", end="")
    return 0