from vibeswipe.models import Alert, Profile, Swipe, User
from vibeswipe.services.alerts import ALERT_LIST_LIMIT

API = "/api/v1"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestFeedEndpoint:
    def test_feed_without_city(self, client):
        response = client.get(f"{API}/feed")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Set your city first"
        assert data["feed"] == []

    def test_feed_for_city(self, client, make_venue, make_event):
        make_venue("club", rating=4.0, tags=["techno"])
        make_event("party", day_of_week="saturday", hype_score=60)

        response = client.get(f"{API}/feed", params={"city": "Berlin"})

        assert response.status_code == 200
        data = response.json()
        assert data["city"] == "Berlin"
        assert data["count"] == 2
        assert {card["card_type"] for card in data["feed"]} == {"venue", "event"}
        for card in data["feed"]:
            assert 0 <= card["match_score"] <= 100
            assert card["match_label"]

    def test_feed_type_query_param(self, client, make_venue, make_event):
        make_venue("club")
        make_event("party")
        response = client.get(f"{API}/feed", params={"city": "Berlin", "type": "events"})
        assert [card["card_type"] for card in response.json()["feed"]] == ["event"]


class TestSwipeEndpoint:
    def test_missing_fields(self, client):
        response = client.post(f"{API}/swipe", json={"venue_card_id": "club"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required fields"

    def test_missing_card(self, client, make_user):
        user = make_user()
        response = client.post(f"{API}/swipe", json={"user_id": user.id, "action": "like"})
        assert response.status_code == 400
        assert "venue_card_id or event_card_id" in response.json()["detail"]

    def test_unknown_action(self, client, make_user, make_venue):
        user = make_user()
        make_venue("club")
        response = client.post(f"{API}/swipe", json={"user_id": user.id, "venue_card_id": "club", "action": "maybe"})
        assert response.status_code == 400

    def test_unknown_user(self, client, make_venue):
        make_venue("club")
        response = client.post(f"{API}/swipe", json={"user_id": 999, "venue_card_id": "club", "action": "like"})
        assert response.status_code == 404

    def test_reswipe_updates_action(self, client, test_db, make_user, make_venue):
        user = make_user()
        make_venue("club")
        payload = {"user_id": user.id, "venue_card_id": "club", "action": "like"}

        assert client.post(f"{API}/swipe", json=payload).json() == {"success": True, "action": "like"}
        client.post(f"{API}/swipe", json={**payload, "action": "pass"})

        swipes = test_db.query(Swipe).filter_by(user_id=user.id).all()
        assert len(swipes) == 1
        assert swipes[0].action == "pass"

    def test_liking_event_creates_single_alert(self, client, test_db, make_user, make_event):
        user = make_user()
        make_event("rave", title="Warehouse Rave", genre="techno")
        payload = {"user_id": user.id, "event_card_id": "rave", "action": "superlike"}

        client.post(f"{API}/swipe", json=payload)
        client.post(f"{API}/swipe", json={**payload, "action": "like"})

        alerts = test_db.query(Alert).filter_by(user_id=user.id).all()
        assert len(alerts) == 1
        assert alerts[0].message == "Saved: Warehouse Rave"
        assert alerts[0].target_city == "Berlin"
        assert alerts[0].target_genre == "techno"

    def test_pass_creates_no_alert(self, client, test_db, make_user, make_event):
        user = make_user()
        make_event("rave")
        client.post(f"{API}/swipe", json={"user_id": user.id, "event_card_id": "rave", "action": "pass"})
        assert test_db.query(Alert).count() == 0

    def test_swiped_card_leaves_feed(self, client, make_user, make_venue):
        user = make_user()
        make_venue("club")
        make_venue("bar")
        client.post(f"{API}/swipe", json={"user_id": user.id, "venue_card_id": "club", "action": "pass"})

        data = client.get(f"{API}/feed", params={"user_id": user.id}).json()
        assert [card["id"] for card in data["feed"]] == ["bar"]


def test_saved_lists_likes_only(client, make_user, make_venue, make_event):
    user = make_user()
    make_venue("liked_bar", tags=["cocktail"])
    make_venue("passed_bar")
    make_event("liked_party", artists=["DJ One"])
    for payload in (
        {"venue_card_id": "liked_bar", "action": "like"},
        {"venue_card_id": "passed_bar", "action": "pass"},
        {"event_card_id": "liked_party", "action": "superlike"},
    ):
        client.post(f"{API}/swipe", json={"user_id": user.id, **payload})

    data = client.get(f"{API}/saved", params={"user_id": user.id}).json()

    assert data["total"] == 2
    assert [venue["id"] for venue in data["venues"]] == ["liked_bar"]
    assert data["venues"][0]["tags"] == ["cocktail"]
    assert data["events"][0]["artists"] == ["DJ One"]
    assert data["events"][0]["swipe_action"] == "superlike"


class TestPreferencesEndpoint:
    def test_missing_profile(self, client):
        response = client.get(f"{API}/preferences", params={"user_id": 42})
        assert response.status_code == 404

    def test_get_decoded_profile(self, client, make_user):
        user = make_user(vibe_styles=["underground"], music_genres=["techno"])
        profile = client.get(f"{API}/preferences", params={"user_id": user.id}).json()["profile"]
        assert profile["vibe_styles"] == ["underground"]
        assert profile["go_out_days"] == ["friday", "saturday"]
        assert profile["budget_level"] == "medium"
        assert profile["current_city"] == "Berlin"

    def test_partial_update(self, client, test_db, make_user):
        user = make_user(vibe_styles=["underground"], music_genres=["techno"])

        response = client.put(f"{API}/preferences", json={
            "user_id": user.id,
            "music_genres": ["house", "disco"],
            "budget_level": "premium"
        })

        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["music_genres"] == ["house", "disco"]
        assert profile["budget_level"] == "premium"
        assert profile["vibe_styles"] == ["underground"]
        stored = test_db.get(Profile, user.id)
        assert stored.music_genres == '["house", "disco"]'

    def test_update_missing_profile(self, client):
        response = client.put(f"{API}/preferences", json={"user_id": 7, "budget_level": "any"})
        assert response.status_code == 404


class TestOnboardingEndpoint:
    def test_requires_email_city_country(self, client):
        response = client.post(f"{API}/onboarding", json={"email": "a@example.com", "current_city": "Berlin"})
        assert response.status_code == 400

    def test_creates_user_with_defaults(self, client, test_db):
        response = client.post(f"{API}/onboarding", json={
            "email": "new@example.com",
            "current_city": "Barcelona",
            "current_country": "Spain"
        })

        assert response.status_code == 200
        user_id = response.json()["user_id"]
        profile = client.get(f"{API}/preferences", params={"user_id": user_id}).json()["profile"]
        assert profile["go_out_days"] == ["friday", "saturday"]
        assert profile["budget_level"] == "medium"
        assert profile["vibe_styles"] == []

    def test_same_email_updates_profile(self, client, test_db):
        payload = {"email": "same@example.com", "current_city": "Paris", "current_country": "France"}
        first = client.post(f"{API}/onboarding", json=payload).json()["user_id"]
        second = client.post(f"{API}/onboarding", json={**payload, "current_city": "Lyon"}).json()["user_id"]

        assert first == second
        assert test_db.query(User).count() == 1
        assert test_db.get(Profile, first).current_city == "Lyon"


class TestAlertsEndpoint:
    def test_list_and_mark_read(self, client, make_user, make_event):
        user = make_user()
        make_event("rave", title="Rave")
        client.post(f"{API}/swipe", json={"user_id": user.id, "event_card_id": "rave", "action": "like"})

        alerts = client.get(f"{API}/alerts", params={"user_id": user.id}).json()
        assert alerts["count"] == 1
        alert_id = alerts["alerts"][0]["id"]
        assert alerts["alerts"][0]["is_read"] is False

        response = client.post(f"{API}/alerts/{alert_id}/read")
        assert response.status_code == 200
        assert response.json()["alert"]["is_read"] is True

        unread = client.get(f"{API}/alerts", params={"user_id": user.id, "unread_only": True}).json()
        assert unread["count"] == 0

    def test_mark_missing_alert(self, client):
        assert client.post(f"{API}/alerts/123/read").status_code == 404


class TestMissingUserId:
    def test_get_preferences(self, client):
        response = client.get(f"{API}/preferences")
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing user_id"

    def test_put_preferences(self, client):
        response = client.put(f"{API}/preferences", json={"budget_level": "any"})
        assert response.status_code == 400

    def test_saved(self, client):
        assert client.get(f"{API}/saved").status_code == 400

    def test_alerts(self, client):
        assert client.get(f"{API}/alerts").status_code == 400


class TestAlertSubscriptions:
    def test_create_subscription(self, client, make_user, make_venue):
        user = make_user()
        make_venue("club", neighborhood="Friedrichshain")

        response = client.post(f"{API}/alerts", json={
            "user_id": user.id,
            "alert_type": "price_drop",
            "target_artist": "DJ One",
            "venue_card_id": "club"
        })

        assert response.status_code == 200
        alert = response.json()["alert"]
        assert alert["message"] == "Alert set for price drop"
        assert alert["target_artist"] == "DJ One"
        assert alert["target_city"] == ""
        assert alert["triggered"] is False
        assert alert["venue"]["name"] == "Club"
        assert alert["venue"]["neighborhood"] == "Friedrichshain"
        assert alert["event"] is None

    def test_missing_alert_type(self, client, make_user):
        user = make_user()
        response = client.post(f"{API}/alerts", json={"user_id": user.id})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required fields"

    def test_unknown_user(self, client):
        response = client.post(f"{API}/alerts", json={"user_id": 999, "alert_type": "new_event"})
        assert response.status_code == 404

    def test_unknown_card(self, client, make_user):
        user = make_user()
        response = client.post(f"{API}/alerts", json={
            "user_id": user.id,
            "alert_type": "new_event",
            "event_card_id": "missing"
        })
        assert response.status_code == 400

    def test_list_includes_event_summary(self, client, make_user, make_event):
        user = make_user()
        make_event("rave", title="Rave", venue_name="Tresor", artists=["DJ One"])
        client.post(f"{API}/swipe", json={"user_id": user.id, "event_card_id": "rave", "action": "like"})

        alert = client.get(f"{API}/alerts", params={"user_id": user.id}).json()["alerts"][0]

        assert alert["event"]["title"] == "Rave"
        assert alert["event"]["venue_name"] == "Tresor"
        assert alert["event"]["artists"] == ["DJ One"]
        assert alert["venue"] is None

    def test_list_is_capped(self, client, test_db, make_user):
        user = make_user()
        for i in range(ALERT_LIST_LIMIT + 5):
            test_db.add(Alert(user_id=user.id, alert_type="new_event", message=f"Alert {i}"))
        test_db.commit()

        data = client.get(f"{API}/alerts", params={"user_id": user.id}).json()

        assert data["count"] == ALERT_LIST_LIMIT == 50
        assert data["alerts"][0]["message"] == f"Alert {ALERT_LIST_LIMIT + 4}"
