# foxplayer

Building blocks for a terminal music player. It has no third-party dependencies.

## Modules

- **`foxplayer.entities`**: data classes `Song`, `Album`, `Artist`, `Playlist`, `Rank`, `User`, `DjRadio` and `DjCategory`.
  - Parsers build them from streaming-service JSON responses. Examples are `song_from_short_name_songs_json`, `song_from_fm_json`, `song_from_cloud_json`, `album_from_album_json` and `user_from_json`.
  - Each parser accepts bytes, a string or an already decoded mapping.
  - Empty input, invalid JSON or a missing or non-integer id raises `ParseError`, which is a subclass of `ValueError`.
  - Other fields are optional. Artists that cannot be parsed are skipped.
  - `Song.artist_name()` and `Album.artist_name()` join artist names with commas.
- **`foxplayer.player_types`**: the play modes (`Mode`) and playback states (`State`), both `IntEnum`s.
  - `mode_name` returns a mode's display name.
  - Unknown values get a fallback name.
- **`foxplayer.kvstore`**: a bucketed key/value store backed by SQLite files.
  - `LocalDB` is one database file. It offers `get`, `put`, `delete`, `next_sequence` and `items`.
  - `DBManager` opens `<data_dir>/db/<name>.db` and caches the open files by name.
  - `Table` stores JSON-encoded records in the bucket that a model names. Its methods are `set`, `get`, `delete`, `incr_add` and `all_items`, plus the `*_by_id` and `*_by_kv_model` variants.
  - Reading from a bucket that was never written raises `BucketNotFoundError`.
  - `id_to_bin` encodes ids as 8 big-endian bytes.
- **`foxplayer.records`**: typed records kept in that store.
  - The records are `ExtInfo`, `LastSignIn`, `LastfmUser`, `PlayModeRecord`, `PlayerSnapshot`, `UserRecord` and `VolumeRecord`.
  - `LastfmUser` can `store`, `init_from_storage` and `clear` itself through a `Table`.
  - `PlayerSnapshot` has `to_json` and `from_json`. Song durations are serialised as nanoseconds.
- **`foxplayer.playback`**: `PlayingInfo`, the `Controller` protocol (`ctrl_paused`, `ctrl_resume`, `ctrl_next`, and so on) and `NullHandler`.
  - `NullHandler` publishes nothing.
  - It keeps the latest info and position on itself, and drops the controller on `release`.
- **`foxplayer.mpris`**: an MPRIS-style player model.
  - `MprisPlayer` holds the property values of the `org.mpris.MediaPlayer2` and `org.mpris.MediaPlayer2.Player` interfaces in `properties`.
  - It records announced changes in `changes` and forwards method calls to a `Controller`.
  - `stop` and `quit` only pause.
  - Helpers: `playback_status_from_state`, `metadata_from_playing_info`, `media_player_properties`, `us_from_duration`, `duration_from_us`.
- **`foxplayer.keymap`**: `operate_for_key` maps a key name to an `OperateType` action, or to `None` if the key is unbound. Full-width and other variant characters are covered.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Parsing a song:

```python
from foxplayer.entities import song_from_fm_json
from foxplayer.keymap import OperateType, operate_for_key

song = song_from_fm_json(b'{"id": 1, "name": "Tune", "duration": 180000, '
                         b'"artists": [{"id": 2, "name": "A"}, {"id": 3, "name": "B"}]}')
print(song.name, song.artist_name())         # Tune A,B
print(song.duration.total_seconds())         # 180.0

print(operate_for_key("]") is OperateType.NEXT)   # True
print(operate_for_key("】") is OperateType.NEXT)  # True
```

Persisting a record:

```python
from foxplayer.kvstore import DBManager, Table
from foxplayer.records import LastfmUser

with DBManager("/tmp/foxplayer-data") as manager:
    table = Table(manager)
    LastfmUser(name="listener", session_key="token").store(table)

    restored = LastfmUser()
    restored.init_from_storage(table)
    print(restored.name)   # listener
```

Driving the MPRIS model:

```python
from datetime import timedelta
from foxplayer.mpris import MprisPlayer, PLAYER_INTERFACE
from foxplayer.playback import PlayingInfo
from foxplayer.player_types import State

class Printer:
    def __getattr__(self, name):
        return lambda *args: print(name, *args)

player = MprisPlayer(Printer(), PlayingInfo())
player.play_pause()     # ctrl_toggle
player.on_volume(0.5)   # ctrl_set_volume 50
player.set_playing_info(PlayingInfo(state=State.PLAYING, track_id=7, name="Tune",
                                    total_duration=timedelta(seconds=3), volume=80))
print(player.properties[PLAYER_INTERFACE]["PlaybackStatus"])  # Playing
```

## What this package does not do

- It plays no audio.
- It talks to no music service. The entity parsers only read JSON that you supply.
- It has no terminal screen and no command-line program. `foxplayer.keymap` only resolves key names to actions.
- `MprisPlayer` is an in-memory model. It does not connect to D-Bus or export anything on a session bus.