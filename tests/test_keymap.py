import pytest

from foxplayer.keymap import OperateType, operate_for_key


@pytest.mark.parametrize(
    "key, expected",
    [
        ("enter", OperateType.ENTER),
        ("c", OperateType.CUR_PLAYLIST),
        ("C", OperateType.CUR_PLAYLIST),
        (" ", OperateType.SPACE),
        ("\u3000", OperateType.SPACE),
        ("v", OperateType.FORWARD_FIVE_SEC),
        ("V", OperateType.FORWARD_TEN_SEC),
        ("x", OperateType.BACKWARD_ONE_SEC),
        ("X", OperateType.BACKWARD_FIVE_SEC),
        ("[", OperateType.PREVIOUS),
        ("【", OperateType.PREVIOUS),
        ("]", OperateType.NEXT),
        ("】", OperateType.NEXT),
        ("p", OperateType.SWITCH_PLAY_MODE),
        ("P", OperateType.INTELLIGENCE),
        ("，", OperateType.LIKE_PLAYING_SONG),
        ("。", OperateType.DISLIKE_PLAYING_SONG),
        ("＝", OperateType.UP_VOLUME),
        ("ー", OperateType.DOWN_VOLUME),
        ("−", OperateType.DOWN_VOLUME),
        ("«", OperateType.LIKE_SELECTED_SONG),
        ("》", OperateType.DISLIKE_SELECTED_SONG),
        ("？", OperateType.HELP),
        ("tab", OperateType.ADD_SELECTED_SONG_TO_USER_PLAYLIST),
        ("shift+tab", OperateType.REMOVE_SELECTED_SONG_FROM_USER_PLAYLIST),
        ("`", OperateType.ADD_PLAYING_SONG_TO_USER_PLAYLIST),
        ("～", OperateType.REMOVE_PLAYING_SONG_FROM_USER_PLAYLIST),
        ("A", OperateType.OPEN_ALBUM_OF_SELECTED_SONG),
        ("s", OperateType.OPEN_ARTIST_OF_PLAYING_SONG),
        ("O", OperateType.OPEN_SELECTED_ITEM_IN_WEB),
        ("；", OperateType.COLLECT_SELECTED_PLAYLIST),
        ('"', OperateType.DISCOLLECT_SELECTED_PLAYLIST),
        ("\\", OperateType.DEL_SONG_FROM_CUR_PLAYLIST),
        ("、", OperateType.DEL_SONG_FROM_CUR_PLAYLIST),
        ("e", OperateType.ADD_SONG_TO_NEXT),
        ("E", OperateType.APPEND_SONG_TO_CUR_PLAYLIST),
        ("U", OperateType.CLEAR_SONG_CACHE),
        ("r", OperateType.RERENDER),
        ("w", OperateType.LOGOUT),
        ("d", OperateType.DOWNLOAD_PLAYING_SONG),
        ("T", OperateType.TRASH_SELECTED_SONG),
    ],
)
def test_bound_keys(key, expected):
    assert operate_for_key(key) is expected


@pytest.mark.parametrize("key", ["z", "", "ctrl+c", "q", "toggle", "spaces"])
def test_unbound_keys_give_none(key):
    assert operate_for_key(key) is None


def test_operate_values_match_wire_names():
    assert OperateType.FORWARD_FIVE_SEC.value == "forwardFiveSec"
    assert OperateType.BACKWARD_FIVE_SEC.value == "backwardFiceSec"
    assert OperateType("removeSelectedSongFromUserPlaylist") is (
        OperateType.REMOVE_SELECTED_SONG_FROM_USER_PLAYLIST
    )


def test_result_compares_equal_to_its_name():
    assert operate_for_key("?") == "help"


def test_keys_are_case_sensitive():
    assert operate_for_key("v") is not operate_for_key("V")
    assert operate_for_key("ENTER") is None
    assert operate_for_key("enter") is OperateType.ENTER


def test_full_width_variants_agree_with_half_width():
    pairs = [("=", "＝"), ("?", "？"), (",", "，"), ("<", "＜"), (">", "＞"), ("~", "～"), (":", "：")]
    for half, full in pairs:
        assert operate_for_key(half) is operate_for_key(full)
        assert operate_for_key(half) is not None


def test_unknown_operate_name_raises():
    with pytest.raises(ValueError):
        OperateType("fastForward")