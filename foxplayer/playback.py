"""Playback information and the controller interface that system integrations drive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Protocol, runtime_checkable

from foxplayer.player_types import State


@dataclass
class PlayingInfo:
    """What is playing right now, as shown to the desktop."""

    total_duration: timedelta = field(default_factory=timedelta)
    passed_duration: timedelta = field(default_factory=timedelta)
    state: State = State.UNKNOWN
    volume: int = 0
    track_id: int = 0
    pic_url: str = ""
    name: str = ""
    artist: str = ""
    album: str = ""
    album_artist: str = ""
    as_text: str = ""


@runtime_checkable
class Controller(Protocol):
    """Commands a media-key or desktop integration may send to the player."""

    def ctrl_paused(self) -> None: ...

    def ctrl_resume(self) -> None: ...

    def ctrl_stop(self) -> None: ...

    def ctrl_toggle(self) -> None: ...

    def ctrl_next(self) -> None: ...

    def ctrl_previous(self) -> None: ...

    def ctrl_seek(self, duration: timedelta) -> None: ...

    def ctrl_set_volume(self, volume: int) -> None: ...


class NullHandler:
    """State handler for platforms without a media integration.

    Nothing is published to the desktop; the latest state is only kept
    on the handler itself.
    """

    def __init__(self, controller: Controller, info: PlayingInfo) -> None:
        self.controller: Optional[Controller] = controller
        self.info = info
        self.position = info.passed_duration
        self.released = False

    def set_position(self, position: timedelta) -> None:
        """Remember the current playback position."""
        self.position = position

    def set_playing_info(self, info: PlayingInfo) -> None:
        """Remember the latest playing info."""
        self.info = info

    def release(self) -> None:
        """Drop the controller and mark the handler as released."""
        self.controller = None
        self.released = True