from examcell.core.config import Settings, get_settings


def test_defaults_match_staffing_rules():
    settings = Settings(_env_file=None)

    assert settings.students_per_supervisor == 30
    assert settings.senior_supervisor_seniority == 4
    assert settings.external_min_seniority == 3


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STUDENTS_PER_SUPERVISOR", "25")
    monkeypatch.setenv("EXTERNAL_MIN_SENIORITY", "2")

    settings = Settings(_env_file=None)

    assert settings.students_per_supervisor == 25
    assert settings.external_min_seniority == 2


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
