import pytest

from app.errors import ConfigurationError
from app.main import create_app
from app.settings import load_settings

REQUIRED = {
    "database_url": "sqlite://",
    "supabase_url": "http://identity.test",
    "supabase_anon_key": "anon-key",
    "LOVABLE_API_KEY": "gateway-key",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "SUPABASE_URL", "SUPABASE_ANON_KEY", "LOVABLE_API_KEY", "LLM_PROVIDER"):
        monkeypatch.delenv(name, raising=False)


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/roadmaps")
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.setenv("LOVABLE_API_KEY", "key")

    settings = load_settings(_env_file=None)

    assert settings.database_url == "postgresql://db/roadmaps"
    assert settings.LOVABLE_API_KEY == "key"
    assert settings.LLM_PROVIDER == "gateway"
    assert settings.GATEWAY_MODEL == "google/gemini-2.5-flash"
    assert settings.differentiate_error_status is False


@pytest.mark.parametrize("missing", sorted(REQUIRED))
def test_missing_secret_is_configuration_error(missing):
    values = {k: v for k, v in REQUIRED.items() if k != missing}

    with pytest.raises(ConfigurationError, match=missing):
        load_settings(_env_file=None, **values)


def test_blank_secret_is_configuration_error():
    with pytest.raises(ConfigurationError, match="LOVABLE_API_KEY"):
        load_settings(_env_file=None, **dict(REQUIRED, LOVABLE_API_KEY="   "))


def test_unknown_provider_is_configuration_error():
    with pytest.raises(ConfigurationError, match="LLM_PROVIDER"):
        load_settings(_env_file=None, **dict(REQUIRED, LLM_PROVIDER="carrier-pigeon"))


def test_app_refuses_to_start_without_configuration(monkeypatch):
    monkeypatch.chdir("/")  # keep any local .env out of the lookup
    with pytest.raises(ConfigurationError):
        create_app()
