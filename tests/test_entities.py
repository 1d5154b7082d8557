import json
from datetime import timedelta

import pytest

from foxplayer import entities as e


def dumps(obj):
    return json.dumps(obj).encode("utf-8")


@pytest.mark.parametrize(
    "parser",
    [
        e.artist_from_json,
        e.album_from_json,
        e.album_from_album_json,
        e.dj_category_from_json,
        e.dj_radio_from_json,
        e.playlist_from_json,
        e.rank_from_json,
        e.song_from_short_name_songs_json,
        e.song_from_fm_json,
        e.song_from_intelligence_json,
        e.song_from_album_songs_json,
        e.song_from_artist_songs_json,
        e.song_from_dj_radio_program_json,
        e.song_from_cloud_json,
        e.song_from_dj_rank_program_json,
        e.user_from_local_json,
        e.user_from_json,
        e.user_from_search_result_json,
    ],
)
def test_empty_input_raises(parser):
    with pytest.raises(e.ParseError, match="json is empty"):
        parser(b"")


def test_artist_parsing():
    artist = e.artist_from_json(dumps({"id": 42, "name": "Alice"}))
    assert artist == e.Artist(id=42, name="Alice")


def test_artist_missing_id_raises():
    with pytest.raises(e.ParseError):
        e.artist_from_json(dumps({"name": "Alice"}))


def test_artist_float_id_raises():
    with pytest.raises(e.ParseError):
        e.artist_from_json('{"id": 1.5}')


def test_invalid_json_raises():
    with pytest.raises(e.ParseError):
        e.playlist_from_json("{not json")


def test_album_from_song_entry():
    album = e.album_from_json(dumps({"al": {"id": 7, "name": "Blue", "picUrl": "http://img.example.com/a.jpg"}}))
    assert album.id == 7
    assert album.name == "Blue"
    assert album.pic_url == "http://img.example.com/a.jpg"
    assert album.artists == []


def test_album_from_album_json_skips_bad_artists():
    payload = {
        "id": 9,
        "name": "Red",
        "artists": [{"id": 1, "name": "Alice"}, {"name": "NoId"}, {"id": 2, "name": "Bob"}],
    }
    album = e.album_from_album_json(dumps(payload))
    assert [a.id for a in album.artists] == [1, 2]
    assert album.artist_name() == "Alice,Bob"


def test_album_artist_name_empty():
    assert e.Album().artist_name() == ""


def test_dj_category_and_playlist():
    assert e.dj_category_from_json(dumps({"id": 3, "name": "Talk"})) == e.DjCategory(3, "Talk")
    assert e.playlist_from_json(dumps({"id": 5, "name": 123})) == e.Playlist(5, "")


def test_dj_radio_with_host():
    payload = {
        "id": 11,
        "name": "Night",
        "picUrl": "p",
        "dj": {"userId": 99, "nickname": "host", "avatarUrl": "av"},
    }
    radio = e.dj_radio_from_json(dumps(payload))
    assert radio.id == 11
    assert radio.dj == e.User(user_id=99, nickname="host", avatar_url="av")


def test_rank_parsing():
    rank = e.rank_from_json(dumps({"id": 19723756, "name": "Soaring", "updateFrequency": "daily", "extra": 1}))
    assert rank == e.Rank(id=19723756, name="Soaring", frequency="daily")


def test_rank_case_insensitive_and_type_error():
    assert e.rank_from_json(dumps({"ID": 4, "Name": "x"})) == e.Rank(id=4, name="x")
    with pytest.raises(e.ParseError):
        e.rank_from_json(dumps({"id": "4"}))


def test_song_from_short_name_songs():
    payload = {
        "id": 100,
        "name": "Track",
        "dt": 215000,
        "al": {"id": 8, "name": "Album", "picUrl": "pic"},
        "ar": [{"id": 1, "name": "Alice"}],
    }
    song = e.song_from_short_name_songs_json(dumps(payload))
    assert song.id == 100
    assert song.duration == timedelta(milliseconds=215000)
    assert song.album == e.Album(id=8, name="Album", pic_url="pic")
    assert song.artists == [e.Artist(1, "Alice")]
    assert e.song_from_album_songs_json(dumps(payload)) == song
    assert e.song_from_artist_songs_json(dumps(payload)) == song


def test_song_album_without_id_is_empty():
    song = e.song_from_short_name_songs_json(dumps({"id": 1, "al": {"name": "lost"}}))
    assert song.album == e.Album()
    assert song.artists == []


def test_song_missing_id_raises():
    with pytest.raises(e.ParseError):
        e.song_from_short_name_songs_json(dumps({"name": "x"}))


def test_song_from_fm():
    payload = {
        "id": 5,
        "name": "FM",
        "duration": 1000,
        "album": {"id": 2, "name": "A", "picUrl": "p"},
        "artists": [{"id": 3, "name": "B"}],
    }
    song = e.song_from_fm_json(dumps(payload))
    assert song.album.id == 2
    assert song.duration == timedelta(milliseconds=1000)
    assert song.artist_name() == "B"


def test_song_from_intelligence():
    payload = {"songInfo": {"id": 6, "name": "I", "dt": 500, "al": {"id": 4}, "ar": [{"id": 1, "name": "C"}]}}
    song = e.song_from_intelligence_json(dumps(payload))
    assert (song.id, song.name, song.album.id) == (6, "I", 4)
    assert song.artists == [e.Artist(1, "C")]
    with pytest.raises(e.ParseError):
        e.song_from_intelligence_json(dumps({"id": 6}))


def test_song_from_dj_radio_program_uses_host_as_artist():
    payload = {
        "mainSong": {"id": 7, "name": "Ep", "duration": 60000, "album": {"id": 1}, "artists": [{"id": 9, "name": "X"}]},
        "dj": {"nickname": "host"},
    }
    song = e.song_from_dj_radio_program_json(dumps(payload))
    assert song.artists == [e.Artist(id=0, name="host")]
    assert song.duration == timedelta(seconds=60)


def test_song_from_dj_radio_program_without_host():
    song = e.song_from_dj_radio_program_json(dumps({"mainSong": {"id": 7}}))
    assert song.artists == [e.Artist()]


def test_song_from_cloud():
    payload = {
        "songId": 12,
        "songName": "Cloud",
        "simpleSong": {"dt": 3000, "al": {"id": 5, "name": "Al"}, "ar": [{"id": 2, "name": "D"}]},
    }
    song = e.song_from_cloud_json(dumps(payload))
    assert (song.id, song.name) == (12, "Cloud")
    assert song.album.name == "Al"
    assert song.artists == [e.Artist(2, "D")]


def test_song_from_dj_rank_program():
    payload = {"program": {"mainSong": {"id": 13, "name": "R", "artists": [{"id": 4, "name": "E"}]}}}
    song = e.song_from_dj_rank_program_json(dumps(payload))
    assert song.id == 13
    assert song.artists == [e.Artist(4, "E")]
    assert song.duration == timedelta()


def test_user_from_local_json():
    payload = {"user_id": 1, "my_like_playlist_id": 2, "nickname": "n", "avatar_url": "a", "account_id": 3}
    assert e.user_from_local_json(dumps(payload)) == e.User(1, 2, "n", "a", 3)


def test_user_from_json_and_search():
    payload = {"profile": {"userId": 10, "nickname": "n", "avatarUrl": "a"}, "account": {"id": 20}}
    user = e.user_from_json(dumps(payload))
    assert user == e.User(user_id=10, nickname="n", avatar_url="a", account_id=20)
    found = e.user_from_search_result_json(dumps({"userId": 10, "nickname": "n", "avatarUrl": "a"}))
    assert found == e.User(user_id=10, nickname="n", avatar_url="a")
    with pytest.raises(e.ParseError):
        e.user_from_json(dumps({"account": {"id": 20}}))


def test_accepts_str_and_mapping():
    payload = {"id": 1, "name": "P"}
    assert e.playlist_from_json(json.dumps(payload)) == e.playlist_from_json(payload)