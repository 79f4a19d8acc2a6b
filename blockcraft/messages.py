"""The on-screen message log and frame-based timing helpers."""

from __future__ import annotations

from typing import Iterable

FPS = 60
MESSAGE_COUNT = 3
MESSAGE_CLEAR_DELAY = 512
TIME_WRAP = 100000


def sec_to_fps(seconds: int) -> int:
    """Number of frames in ``seconds`` seconds."""
    return seconds * FPS


def max_string_length(lines: Iterable[str]) -> int:
    """Length of the longest string, 0 for none."""
    return max((len(line) for line in lines), default=0)


class MessageLog:
    """A short scrolling log; the oldest message fades out periodically."""

    def __init__(self) -> None:
        self.messages: list[str] = [""] * MESSAGE_COUNT
        self.time = 0
        self.trigger_time = 1

    def oldest_index(self) -> int:
        """Index of the oldest message still shown."""
        for i in range(MESSAGE_COUNT - 1, -1, -1):
            if not self.messages[i]:
                return i if i == MESSAGE_COUNT - 1 else i + 1
        return 0

    def print_local(self, message: str) -> None:
        """Append a message, scrolling the older ones up."""
        self.messages = self.messages[1:] + [message]
        if self.oldest_index() == MESSAGE_COUNT - 1:
            self.trigger_time = self.time % MESSAGE_CLEAR_DELAY - 1
            if self.trigger_time < 0:
                self.trigger_time = MESSAGE_CLEAR_DELAY - 1

    def tick(self) -> int:
        """Advance the frame counter and return its new value."""
        self.time += 1
        if self.time > TIME_WRAP:
            self.time = 1
        return self.time

    def update(self) -> tuple[str, ...]:
        """Fade the oldest message when due and return the lines to show."""
        if self.time % MESSAGE_CLEAR_DELAY == self.trigger_time:
            self.messages[self.oldest_index()] = ""
        return tuple(self.messages)

    def clear(self) -> tuple[str, ...]:
        """Remove every message."""
        self.messages = [""] * MESSAGE_COUNT
        return self.update()