"""Play modes and playback states shared across the player."""

from __future__ import annotations

from enum import IntEnum


class Mode(IntEnum):
    """How the next song is chosen."""

    UNKNOWN = 0
    LIST_LOOP = 1
    ORDER = 2
    SINGLE_LOOP = 3
    RANDOM = 4
    INTELLIGENT = 5


class State(IntEnum):
    """Playback state of the player."""

    UNKNOWN = 0
    PLAYING = 1
    PAUSED = 2
    STOPPED = 3
    INTERRUPTED = 4


_MODE_NAMES = {
    Mode.LIST_LOOP: "列表",
    Mode.ORDER: "顺序",
    Mode.SINGLE_LOOP: "单曲",
    Mode.RANDOM: "随机",
    Mode.INTELLIGENT: "心动",
}

_UNKNOWN_NAME = "未知"


def mode_name(mode: Mode | int) -> str:
    """Display name of a play mode; unknown values give a fallback name."""
    try:
        mode = Mode(mode)
    except ValueError:
        return _UNKNOWN_NAME
    return _MODE_NAMES.get(mode, _UNKNOWN_NAME)