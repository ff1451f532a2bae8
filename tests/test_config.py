from vibeswipe.core.config import Settings, clean_int_value


def test_defaults():
    settings = Settings()
    assert settings.API_V1_STR == "/api/v1"
    assert settings.FEED_CANDIDATE_LIMIT == 30
    assert settings.DEFAULT_GO_OUT_DAYS == ["friday", "saturday"]
    assert settings.DEFAULT_BUDGET_LEVEL == "any"
    assert settings.SCORING_NORMALIZE_TAGS is False


def test_clean_int_value():
    assert clean_int_value("8000  # dev port") == 8000
    assert clean_int_value(25) == 25


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FEED_CANDIDATE_LIMIT", "12 # smaller feed")
    monkeypatch.setenv("SCORING_NORMALIZE_TAGS", "true")
    settings = Settings()
    assert settings.FEED_CANDIDATE_LIMIT == 12
    assert settings.SCORING_NORMALIZE_TAGS is True


def test_run_serves_on_configured_host_and_port(monkeypatch):
    from vibeswipe import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.run()

    assert calls == [(main.app, {"host": main.settings.HOST, "port": main.settings.PORT})]
