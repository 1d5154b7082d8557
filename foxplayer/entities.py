"""Music service entities and their construction from API JSON payloads."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Union

JsonInput = Union[bytes, bytearray, str, Mapping]

_MISSING = object()


class ParseError(ValueError):
    """Raised when a payload cannot be turned into an entity."""


@dataclass
class Artist:
    id: int = 0
    name: str = ""


@dataclass
class Album:
    id: int = 0
    name: str = ""
    pic_url: str = ""
    artists: list[Artist] = field(default_factory=list)

    def artist_name(self) -> str:
        """Names of all artists, comma separated."""
        return ",".join(artist.name for artist in self.artists)


@dataclass
class DjCategory:
    id: int = 0
    name: str = ""


@dataclass
class User:
    user_id: int = 0
    my_like_playlist_id: int = 0
    nickname: str = ""
    avatar_url: str = ""
    account_id: int = 0


@dataclass
class DjRadio:
    id: int = 0
    name: str = ""
    pic_url: str = ""
    dj: User = field(default_factory=User)


@dataclass
class Playlist:
    id: int = 0
    name: str = ""


@dataclass
class Rank:
    id: int = 0
    name: str = ""
    frequency: str = ""


@dataclass
class Song:
    id: int = 0
    name: str = ""
    duration: timedelta = field(default_factory=timedelta)
    artists: list[Artist] = field(default_factory=list)
    album: Album = field(default_factory=Album)

    def artist_name(self) -> str:
        """Names of all artists, comma separated."""
        return ",".join(artist.name for artist in self.artists)


# ---------------------------------------------------------------------------
# JSON access helpers


def _decode(data: JsonInput) -> Any:
    if isinstance(data, Mapping):
        return data
    if data is None or len(data) == 0:
        raise ParseError("json is empty")
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"invalid utf-8: {exc}") from exc
    try:
        return json.loads(data)
    except ValueError as exc:
        raise ParseError(f"invalid json: {exc}") from exc


def _lookup(obj: Any, path: tuple[str, ...]) -> Any:
    for key in path:
        if not isinstance(obj, Mapping) or key not in obj:
            return _MISSING
        obj = obj[key]
    return obj


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int(obj: Any, *path: str) -> int | None:
    value = _lookup(obj, path)
    return value if _is_int(value) else None


def _require_int(obj: Any, *path: str) -> int:
    value = _lookup(obj, path)
    if value is _MISSING:
        raise ParseError(f"key path not found: {'.'.join(path)}")
    if not _is_int(value):
        raise ParseError(f"value at {'.'.join(path)} is not an integer")
    return value


def _str(obj: Any, *path: str) -> str | None:
    value = _lookup(obj, path)
    return value if isinstance(value, str) else None


def _artists(obj: Any, *path: str) -> list[Artist]:
    items = _lookup(obj, path)
    if not isinstance(items, list):
        return []
    artists = []
    for item in items:
        try:
            artists.append(_artist(item))
        except ParseError:
            continue
    return artists


def _ms(value: int | None) -> timedelta | None:
    return None if value is None else timedelta(milliseconds=value)


# ---------------------------------------------------------------------------
# Artists and albums


def _artist(obj: Any) -> Artist:
    artist = Artist(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        artist.name = name
    return artist


def artist_from_json(data: JsonInput) -> Artist:
    """Build an artist from an object with ``id`` and ``name``."""
    return _artist(_decode(data))


def _album_in_song(obj: Any) -> Album:
    album = Album(id=_require_int(obj, "al", "id"))
    if (name := _str(obj, "al", "name")) is not None:
        album.name = name
    if (pic := _str(obj, "al", "picUrl")) is not None:
        album.pic_url = pic
    return album


def album_from_json(data: JsonInput) -> Album:
    """Build the album of a song entry (the ``al`` object)."""
    return _album_in_song(_decode(data))


def album_from_album_json(data: JsonInput) -> Album:
    """Build an album from an album list entry."""
    obj = _decode(data)
    album = Album(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        album.name = name
    if (pic := _str(obj, "picUrl")) is not None:
        album.pic_url = pic
    album.artists = _artists(obj, "artists")
    return album


# ---------------------------------------------------------------------------
# Radio, playlists, ranks


def dj_category_from_json(data: JsonInput) -> DjCategory:
    """Build a radio category."""
    obj = _decode(data)
    category = DjCategory(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        category.name = name
    return category


def dj_radio_from_json(data: JsonInput) -> DjRadio:
    """Build a radio station together with its host."""
    obj = _decode(data)
    radio = DjRadio(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        radio.name = name
    if (pic := _str(obj, "picUrl")) is not None:
        radio.pic_url = pic
    if (user_id := _int(obj, "dj", "userId")) is not None:
        radio.dj.user_id = user_id
    if (nickname := _str(obj, "dj", "nickname")) is not None:
        radio.dj.nickname = nickname
    if (avatar := _str(obj, "dj", "avatarUrl")) is not None:
        radio.dj.avatar_url = avatar
    return radio


def playlist_from_json(data: JsonInput) -> Playlist:
    """Build a playlist summary."""
    obj = _decode(data)
    playlist = Playlist(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        playlist.name = name
    return playlist


_RANK_FIELDS = {"id": "id", "name": "name", "updatefrequency": "frequency"}


def rank_from_json(data: JsonInput) -> Rank:
    """Build a chart entry; field names match case-insensitively."""
    obj = _decode(data)
    rank = Rank()
    if obj is None:
        return rank
    if not isinstance(obj, Mapping):
        raise ParseError("rank json must be an object")
    for key, value in obj.items():
        attr = _RANK_FIELDS.get(str(key).lower())
        if attr is None or value is None:
            continue
        if attr == "id":
            if not _is_int(value):
                raise ParseError(f"field {key!r} must be an integer")
        elif not isinstance(value, str):
            raise ParseError(f"field {key!r} must be a string")
        setattr(rank, attr, value)
    return rank


# ---------------------------------------------------------------------------
# Songs


def _song_from_nested(obj: Any, prefix: tuple[str, ...], duration_key: str,
                      album_key: str, artists_key: str) -> Song:
    song = Song(id=_require_int(obj, *prefix, "id"))
    if (name := _str(obj, *prefix, "name")) is not None:
        song.name = name
    if (duration := _ms(_int(obj, *prefix, duration_key))) is not None:
        song.duration = duration
    if (al_id := _int(obj, *prefix, album_key, "id")) is not None:
        song.album.id = al_id
    if (al_name := _str(obj, *prefix, album_key, "name")) is not None:
        song.album.name = al_name
    if (al_pic := _str(obj, *prefix, album_key, "picUrl")) is not None:
        song.album.pic_url = al_pic
    song.artists = _artists(obj, *prefix, artists_key)
    return song


def song_from_short_name_songs_json(data: JsonInput) -> Song:
    """Build a song from a playlist track entry (``dt``, ``al``, ``ar``)."""
    obj = _decode(data)
    song = Song(id=_require_int(obj, "id"))
    if (name := _str(obj, "name")) is not None:
        song.name = name
    if (duration := _ms(_int(obj, "dt"))) is not None:
        song.duration = duration
    try:
        song.album = _album_in_song(obj)
    except ParseError:
        pass
    song.artists = _artists(obj, "ar")
    return song


def song_from_fm_json(data: JsonInput) -> Song:
    """Build a song from a personal FM entry."""
    return _song_from_nested(_decode(data), (), "duration", "album", "artists")


def song_from_intelligence_json(data: JsonInput) -> Song:
    """Build a song from an intelligence-mode entry (``songInfo``)."""
    return _song_from_nested(_decode(data), ("songInfo",), "dt", "al", "ar")


def song_from_album_songs_json(data: JsonInput) -> Song:
    """Build a song from an album track entry."""
    return song_from_short_name_songs_json(data)


def song_from_artist_songs_json(data: JsonInput) -> Song:
    """Build a song from an artist top-song entry."""
    return song_from_short_name_songs_json(data)


def song_from_dj_radio_program_json(data: JsonInput) -> Song:
    """Build a song from a radio program; the host becomes the sole artist."""
    obj = _decode(data)
    song = _song_from_nested(obj, ("mainSong",), "duration", "album", "artists")
    artist = Artist()
    if (nickname := _str(obj, "dj", "nickname")) is not None:
        artist.name = nickname
    song.artists = [artist]
    return song


def song_from_cloud_json(data: JsonInput) -> Song:
    """Build a song from a cloud drive entry."""
    obj = _decode(data)
    song = Song(id=_require_int(obj, "songId"))
    if (name := _str(obj, "songName")) is not None:
        song.name = name
    if (duration := _ms(_int(obj, "simpleSong", "dt"))) is not None:
        song.duration = duration
    if (al_id := _int(obj, "simpleSong", "al", "id")) is not None:
        song.album.id = al_id
    if (al_name := _str(obj, "simpleSong", "al", "name")) is not None:
        song.album.name = al_name
    if (al_pic := _str(obj, "simpleSong", "al", "picUrl")) is not None:
        song.album.pic_url = al_pic
    song.artists = _artists(obj, "simpleSong", "ar")
    return song


def song_from_dj_rank_program_json(data: JsonInput) -> Song:
    """Build a song from a radio program chart entry."""
    return _song_from_nested(
        _decode(data), ("program", "mainSong"), "duration", "album", "artists"
    )


# ---------------------------------------------------------------------------
# Users


def user_from_local_json(data: JsonInput) -> User:
    """Build a user from the locally stored snake_case form."""
    obj = _decode(data)
    user = User(user_id=_require_int(obj, "user_id"))
    if (playlist_id := _int(obj, "my_like_playlist_id")) is not None:
        user.my_like_playlist_id = playlist_id
    if (nickname := _str(obj, "nickname")) is not None:
        user.nickname = nickname
    if (avatar := _str(obj, "avatar_url")) is not None:
        user.avatar_url = avatar
    if (account_id := _int(obj, "account_id")) is not None:
        user.account_id = account_id
    return user


def user_from_json(data: JsonInput) -> User:
    """Build a user from an account response (``profile`` and ``account``)."""
    obj = _decode(data)
    user = User(user_id=_require_int(obj, "profile", "userId"))
    if (nickname := _str(obj, "profile", "nickname")) is not None:
        user.nickname = nickname
    if (avatar := _str(obj, "profile", "avatarUrl")) is not None:
        user.avatar_url = avatar
    if (account_id := _int(obj, "account", "id")) is not None:
        user.account_id = account_id
    return user


def user_from_search_result_json(data: JsonInput) -> User:
    """Build a user from a search result entry."""
    obj = _decode(data)
    user = User(user_id=_require_int(obj, "userId"))
    if (nickname := _str(obj, "nickname")) is not None:
        user.nickname = nickname
    if (avatar := _str(obj, "avatarUrl")) is not None:
        user.avatar_url = avatar
    return user