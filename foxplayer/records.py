"""Records the player keeps in its local store."""

from __future__ import annotations

import json
import re
from contextlib import suppress
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar

from foxplayer.entities import Album, Artist, ParseError, Song
from foxplayer.kvstore import StorageError, Table

APP_DB_NAME = "foxplayer"
DEFAULT_BUCKET = "default_bucket"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


@dataclass
class ExtInfo:
    storage_version: str = ""
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "ext_info"


@dataclass
class LastSignIn:
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "last_sign_in"


@dataclass
class PlayModeRecord:
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "play_mode_int"


@dataclass
class UserRecord:
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "cur_user"


@dataclass
class VolumeRecord:
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "volume"


@dataclass
class LastfmUser:
    id: str = ""
    name: str = ""
    real_name: str = ""
    url: str = ""
    session_key: str = ""
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "lastfm_user"

    def init_from_storage(self, table: Table) -> None:
        """Fill fields from the stored record; missing data leaves them as they are."""
        try:
            raw = table.get_by_kv_model(self)
        except StorageError:
            return
        if raw is None:
            return
        try:
            stored = json.loads(raw)
        except ValueError:
            return
        if not isinstance(stored, dict):
            return
        for item in fields(self):
            value = stored.get(item.name)
            if isinstance(value, str):
                setattr(self, item.name, value)

    def store(self, table: Table) -> None:
        """Save this user; storage failures are ignored."""
        with suppress(StorageError):
            table.set_by_kv_model(self, self)

    def clear(self, table: Table) -> None:
        """Remove the stored user; storage failures are ignored."""
        with suppress(StorageError):
            table.delete_by_kv_model(self)


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _parse_time(text: Any) -> datetime:
    if not isinstance(text, str) or (match := _TIME_RE.match(text)) is None:
        raise ParseError(f"invalid time: {text!r}")
    base, fraction, zone = match.groups()
    fraction = (fraction or "")[:6].ljust(6, "0")
    zone = "+00:00" if zone == "Z" else zone
    try:
        return datetime.fromisoformat(f"{base}.{fraction}{zone}")
    except ValueError as exc:
        raise ParseError(f"invalid time: {text!r}") from exc


def _to_nanoseconds(duration: timedelta) -> int:
    return (duration // timedelta(microseconds=1)) * 1000


def _artist_to_dict(artist: Artist) -> dict[str, Any]:
    return {"id": artist.id, "name": artist.name}


def _song_to_dict(song: Song) -> dict[str, Any]:
    return {
        "id": song.id,
        "name": song.name,
        "duration": _to_nanoseconds(song.duration),
        "artists": [_artist_to_dict(a) for a in song.artists] or None,
        "album": {
            "id": song.album.id,
            "name": song.album.name,
            "pic_url": song.album.pic_url,
            "artists": [_artist_to_dict(a) for a in song.album.artists] or None,
        },
    }


def _field(obj: dict[str, Any], name: str, kind: type, default: Any) -> Any:
    value = obj.get(name)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ParseError(f"field {name!r} has the wrong type")
    return value


def _artists_from(value: Any) -> list[Artist]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError("artists must be a list")
    return [
        Artist(id=_field(item, "id", int, 0), name=_field(item, "name", str, ""))
        for item in value
        if isinstance(item, dict)
    ]


def _song_from_dict(obj: Any) -> Song:
    if not isinstance(obj, dict):
        raise ParseError("song must be an object")
    album_obj = obj.get("album") or {}
    if not isinstance(album_obj, dict):
        raise ParseError("album must be an object")
    return Song(
        id=_field(obj, "id", int, 0),
        name=_field(obj, "name", str, ""),
        duration=timedelta(microseconds=_field(obj, "duration", int, 0) // 1000),
        artists=_artists_from(obj.get("artists")),
        album=Album(
            id=_field(album_obj, "id", int, 0),
            name=_field(album_obj, "name", str, ""),
            pic_url=_field(album_obj, "pic_url", str, ""),
            artists=_artists_from(album_obj.get("artists")),
        ),
    )


@dataclass
class PlayerSnapshot:
    cur_song_index: int = 0
    playlist: list[Song] = field(default_factory=list)
    playlist_update_at: datetime = _ZERO_TIME
    db_name: ClassVar[str] = APP_DB_NAME
    table_name: ClassVar[str] = DEFAULT_BUCKET
    key: ClassVar[str] = "playlist_snapshot"

    def to_json(self) -> str:
        """Serialise the snapshot; durations are in nanoseconds."""
        return json.dumps(
            {
                "cur_song_index": self.cur_song_index,
                "playlist": [_song_to_dict(s) for s in self.playlist] or None,
                "playlist_update_at": _format_time(self.playlist_update_at),
            },
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> PlayerSnapshot:
        """Rebuild a snapshot written by :meth:`to_json`."""
        try:
            obj = json.loads(data)
        except ValueError as exc:
            raise ParseError(f"invalid json: {exc}") from exc
        if not isinstance(obj, dict):
            raise ParseError("snapshot must be an object")
        playlist = obj.get("playlist") or []
        if not isinstance(playlist, list):
            raise ParseError("playlist must be a list")
        update_at = obj.get("playlist_update_at")
        return cls(
            cur_song_index=_field(obj, "cur_song_index", int, 0),
            playlist=[_song_from_dict(item) for item in playlist],
            playlist_update_at=_ZERO_TIME if update_at is None else _parse_time(update_at),
        )