from types import SimpleNamespace
from vibeswipe.schemas.preferences import UserPreferences, decode_tag_list, encode_tag_list


def test_decode_tag_list():
    assert decode_tag_list('["cocktail", "rooftop"]') == ["cocktail", "rooftop"]
    assert decode_tag_list(None) == []
    assert decode_tag_list("") == []
    assert decode_tag_list(["already", "decoded"]) == ["already", "decoded"]


def test_decode_tag_list_tolerates_bad_input():
    assert decode_tag_list("not json") == []
    assert decode_tag_list('{"a": 1}') == []
    assert decode_tag_list('["ok", 3, null]') == ["ok"]


def test_encode_round_trip_for_storage():
    assert encode_tag_list(None) == "[]"
    assert decode_tag_list(encode_tag_list(["friday"])) == ["friday"]


def test_preferences_from_profile():
    profile = SimpleNamespace(
        vibe_styles='["underground"]',
        go_out_days=None,
        budget_level=None,
        music_genres="broken["
    )
    prefs = UserPreferences.from_profile(profile)
    assert prefs.vibe_styles == ["underground"]
    assert prefs.go_out_days == []
    assert prefs.budget_level == "any"
    assert prefs.music_genres == []


def test_preferences_accept_null_collections():
    prefs = UserPreferences(vibe_styles=None, music_genres=None)
    assert prefs.vibe_styles == []
    assert prefs.music_genres == []
