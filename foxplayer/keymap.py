"""Keyboard bindings of the player's terminal interface."""

from __future__ import annotations

from enum import Enum


class OperateType(str, Enum):
    """An action the interface can carry out in response to a key."""

    ENTER = "enter"
    CUR_PLAYLIST = "curPlaylist"
    SPACE = "space"
    TOGGLE = "toggle"
    FORWARD_FIVE_SEC = "forwardFiveSec"
    FORWARD_TEN_SEC = "forwardTenSec"
    BACKWARD_ONE_SEC = "backwardOneSec"
    BACKWARD_FIVE_SEC = "backwardFiceSec"
    PREVIOUS = "previous"
    NEXT = "next"
    SWITCH_PLAY_MODE = "switchPlayMode"
    INTELLIGENCE = "intelligence"
    LIKE_PLAYING_SONG = "likePlayingSong"
    LIKE_SELECTED_SONG = "likeSelectedSong"
    DISLIKE_PLAYING_SONG = "dislikePlayingSong"
    DISLIKE_SELECTED_SONG = "dislikeSelectedSong"
    LOGOUT = "logout"
    DOWN_VOLUME = "downVolume"
    UP_VOLUME = "upVolume"
    DOWNLOAD_PLAYING_SONG = "downloadPlayingSong"
    DOWNLOAD_SELECTED_SONG = "downloadSelectedSong"
    TRASH_PLAYING_SONG = "trashPlayingSong"
    TRASH_SELECTED_SONG = "trashSelectedSong"
    HELP = "help"
    ADD_SELECTED_SONG_TO_USER_PLAYLIST = "addSelectedSongToUserPlaylist"
    REMOVE_SELECTED_SONG_FROM_USER_PLAYLIST = "removeSelectedSongFromUserPlaylist"
    ADD_PLAYING_SONG_TO_USER_PLAYLIST = "addPlayingSongToUserPlaylist"
    REMOVE_PLAYING_SONG_FROM_USER_PLAYLIST = "removePlayingSongFromUserPlaylist"
    OPEN_ALBUM_OF_PLAYING_SONG = "openAlbumOfPlayingSong"
    OPEN_ALBUM_OF_SELECTED_SONG = "openAlbumOfSelectedSong"
    OPEN_ARTIST_OF_PLAYING_SONG = "openArtistOfPlayingSong"
    OPEN_ARTIST_OF_SELECTED_SONG = "openArtistOfSelectedSong"
    OPEN_PLAYING_SONG_IN_WEB = "openPlayingSongInWeb"
    OPEN_SELECTED_ITEM_IN_WEB = "openSelectedItemInWeb"
    COLLECT_SELECTED_PLAYLIST = "collectSelectedPlaylist"
    DISCOLLECT_SELECTED_PLAYLIST = "discollectSelectedPlaylist"
    DEL_SONG_FROM_CUR_PLAYLIST = "delSongFromCurPlaylist"
    ADD_SONG_TO_NEXT = "addSongToNext"
    APPEND_SONG_TO_CUR_PLAYLIST = "appendSongToCurPlaylist"
    CLEAR_SONG_CACHE = "clearSongCache"
    RERENDER = "rerender"


_Op = OperateType

# Half-width, full-width, Japanese, Chinese and French variants share an action.
_KEY_OPERATIONS: dict[str, OperateType] = {
    "enter": _Op.ENTER,
    "c": _Op.CUR_PLAYLIST,
    "C": _Op.CUR_PLAYLIST,
    " ": _Op.SPACE,
    "\u3000": _Op.SPACE,
    "v": _Op.FORWARD_FIVE_SEC,
    "V": _Op.FORWARD_TEN_SEC,
    "x": _Op.BACKWARD_ONE_SEC,
    "X": _Op.BACKWARD_FIVE_SEC,
    "[": _Op.PREVIOUS,
    "【": _Op.PREVIOUS,
    "]": _Op.NEXT,
    "】": _Op.NEXT,
    "p": _Op.SWITCH_PLAY_MODE,
    "P": _Op.INTELLIGENCE,
    ",": _Op.LIKE_PLAYING_SONG,
    "，": _Op.LIKE_PLAYING_SONG,
    ".": _Op.DISLIKE_PLAYING_SONG,
    "。": _Op.DISLIKE_PLAYING_SONG,
    "w": _Op.LOGOUT,
    "W": _Op.LOGOUT,
    "=": _Op.UP_VOLUME,
    "＝": _Op.UP_VOLUME,
    "-": _Op.DOWN_VOLUME,
    "−": _Op.DOWN_VOLUME,
    "ー": _Op.DOWN_VOLUME,
    "d": _Op.DOWNLOAD_PLAYING_SONG,
    "D": _Op.DOWNLOAD_SELECTED_SONG,
    "t": _Op.TRASH_PLAYING_SONG,
    "T": _Op.TRASH_SELECTED_SONG,
    "<": _Op.LIKE_SELECTED_SONG,
    "〈": _Op.LIKE_SELECTED_SONG,
    "＜": _Op.LIKE_SELECTED_SONG,
    "《": _Op.LIKE_SELECTED_SONG,
    "«": _Op.LIKE_SELECTED_SONG,
    ">": _Op.DISLIKE_SELECTED_SONG,
    "〉": _Op.DISLIKE_SELECTED_SONG,
    "＞": _Op.DISLIKE_SELECTED_SONG,
    "》": _Op.DISLIKE_SELECTED_SONG,
    "»": _Op.DISLIKE_SELECTED_SONG,
    "?": _Op.HELP,
    "？": _Op.HELP,
    "tab": _Op.ADD_SELECTED_SONG_TO_USER_PLAYLIST,
    "shift+tab": _Op.REMOVE_SELECTED_SONG_FROM_USER_PLAYLIST,
    "`": _Op.ADD_PLAYING_SONG_TO_USER_PLAYLIST,
    "~": _Op.REMOVE_PLAYING_SONG_FROM_USER_PLAYLIST,
    "～": _Op.REMOVE_PLAYING_SONG_FROM_USER_PLAYLIST,
    "a": _Op.OPEN_ALBUM_OF_PLAYING_SONG,
    "A": _Op.OPEN_ALBUM_OF_SELECTED_SONG,
    "s": _Op.OPEN_ARTIST_OF_PLAYING_SONG,
    "S": _Op.OPEN_ARTIST_OF_SELECTED_SONG,
    "o": _Op.OPEN_PLAYING_SONG_IN_WEB,
    "O": _Op.OPEN_SELECTED_ITEM_IN_WEB,
    ";": _Op.COLLECT_SELECTED_PLAYLIST,
    ":": _Op.COLLECT_SELECTED_PLAYLIST,
    "：": _Op.COLLECT_SELECTED_PLAYLIST,
    "；": _Op.COLLECT_SELECTED_PLAYLIST,
    "'": _Op.DISCOLLECT_SELECTED_PLAYLIST,
    '"': _Op.DISCOLLECT_SELECTED_PLAYLIST,
    "\\": _Op.DEL_SONG_FROM_CUR_PLAYLIST,
    "、": _Op.DEL_SONG_FROM_CUR_PLAYLIST,
    "e": _Op.ADD_SONG_TO_NEXT,
    "E": _Op.APPEND_SONG_TO_CUR_PLAYLIST,
    "u": _Op.CLEAR_SONG_CACHE,
    "U": _Op.CLEAR_SONG_CACHE,
    "r": _Op.RERENDER,
    "R": _Op.RERENDER,
}


def operate_for_key(key: str) -> OperateType | None:
    """The action bound to a key as the terminal names it, or None if unbound."""
    return _KEY_OPERATIONS.get(key)