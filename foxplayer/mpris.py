"""MPRIS media player model: properties and methods of the desktop media interface."""

from __future__ import annotations

import logging
import math
import os
from datetime import timedelta
from enum import Enum
from typing import Any

from foxplayer.playback import Controller, PlayingInfo
from foxplayer.player_types import State

log = logging.getLogger(__name__)

APP_NAME = "musicfox"
OBJECT_PATH = "/org/mpris/MediaPlayer2"
ROOT_INTERFACE = "org.mpris.MediaPlayer2"
PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"
NO_TRACK = "/org/mpris/MediaPlayer2/TrackList/NoTrack"

# Properties that are neither writable nor announced with a change signal.
_SILENT = frozenset({"Position"})


class PlaybackStatus(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


_STATUS_BY_STATE = {
    State.PLAYING: PlaybackStatus.PLAYING,
    State.PAUSED: PlaybackStatus.PAUSED,
    State.STOPPED: PlaybackStatus.STOPPED,
}


def playback_status_from_state(state: State | int) -> PlaybackStatus:
    """MPRIS status for a player state; other states raise ValueError."""
    try:
        return _STATUS_BY_STATE[State(state)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown playback status: {int(state)}") from None


def us_from_duration(duration: timedelta) -> int:
    """Whole microseconds in a duration."""
    return duration // timedelta(microseconds=1)


def duration_from_us(us: int) -> timedelta:
    """Duration of a number of microseconds."""
    return timedelta(microseconds=us)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _volume_fraction(volume: int) -> float:
    return max(0.0, volume / 100.0)


def metadata_from_playing_info(info: PlayingInfo) -> dict[str, Any]:
    """The ``Metadata`` map for a track; empty text fields are left out."""
    if info.track_id == 0:
        return {"mpris:trackid": NO_TRACK}

    metadata: dict[str, Any] = {
        "mpris:trackid": f"/org/mpd/Tracks/{info.track_id}",
        "mpris:length": us_from_duration(info.total_duration),
        "mpris:artUrl": info.pic_url,
    }
    for key, value in (
        ("xesam:album", info.album),
        ("xesam:title", info.name),
        ("xesam:asText", info.as_text),
    ):
        if value:
            metadata[key] = value
    for key, values in (
        ("xesam:albumArtist", [info.album_artist]),
        ("xesam:artist", [info.artist]),
    ):
        present = [v for v in values if v]
        if present:
            metadata[key] = present
    return metadata


def media_player_properties(identity: str) -> dict[str, Any]:
    """Properties of the root ``org.mpris.MediaPlayer2`` interface."""
    return {
        "CanQuit": True,
        "CanRaise": False,
        "HasTrackList": True,
        "Identity": identity,
        "SupportedUriSchemes": [],
        "SupportedMimeTypes": [],
    }


class MprisPlayer:
    """The player object: forwards MPRIS method calls and tracks property values.

    ``properties`` maps each interface name to its property values; ``changes``
    lists every ``(interface, name, value)`` that would be announced.
    """

    def __init__(self, controller: Controller, info: PlayingInfo) -> None:
        self.controller = controller
        self.bus_name = f"org.mpris.MediaPlayer2.{APP_NAME}.instance{os.getpid()}"
        self.changes: list[tuple[str, str, Any]] = []
        try:
            status: str = playback_status_from_state(info.state).value
        except ValueError:
            status = ""
        self.properties: dict[str, dict[str, Any]] = {
            ROOT_INTERFACE: media_player_properties(APP_NAME),
            PLAYER_INTERFACE: {
                "PlaybackStatus": status,
                "LoopStatus": "None",
                "Rate": 1.0,
                "Shuffle": False,
                "Metadata": metadata_from_playing_info(info),
                "Volume": _volume_fraction(info.volume),
                "Position": us_from_duration(info.passed_duration),
                "MinimumRate": 1.0,
                "MaximumRate": 1.0,
                "CanGoNext": True,
                "CanGoPrevious": True,
                "CanPlay": True,
                "CanPause": True,
                "CanSeek": False,
                "CanControl": True,
            },
        }

    def _set(self, interface: str, name: str, value: Any) -> None:
        self.properties[interface][name] = value
        if name not in _SILENT:
            self.changes.append((interface, name, value))

    def next(self) -> None:
        log.debug("Next requested")
        self.controller.ctrl_next()

    def previous(self) -> None:
        log.debug("Previous requested")
        self.controller.ctrl_previous()

    def pause(self) -> None:
        log.debug("Pause requested")
        self.controller.ctrl_paused()

    def play(self) -> None:
        log.debug("Play requested")
        self.controller.ctrl_resume()

    def stop(self) -> None:
        """Stop only pauses, so playback can be resumed."""
        log.debug("Stop requested")
        self.controller.ctrl_paused()

    def play_pause(self) -> None:
        log.debug("Play/Pause requested")
        self.controller.ctrl_toggle()

    def quit(self) -> None:
        """Quitting from the desktop only pauses playback."""
        self.controller.ctrl_paused()

    def on_volume(self, value: float) -> None:
        """Handle a volume written by the desktop, as a 0..1 fraction."""
        self.controller.ctrl_set_volume(_round_half_away(value * 100))

    def set_playing_info(self, info: PlayingInfo) -> None:
        """Update status, metadata (when a track is set) and volume."""
        try:
            status = playback_status_from_state(info.state)
        except ValueError:
            pass
        else:
            self._set(PLAYER_INTERFACE, "PlaybackStatus", status.value)
        if info.track_id != 0:
            self._set(PLAYER_INTERFACE, "Metadata", metadata_from_playing_info(info))
        self._set(PLAYER_INTERFACE, "Volume", _volume_fraction(info.volume))

    def set_position(self, position: timedelta) -> None:
        """Update the position without announcing it."""
        self._set(PLAYER_INTERFACE, "Position", us_from_duration(position))