"""
Configuration loading.
"""

from medilingo.config.settings import AppConfig


def test_from_env(monkeypatch):
    monkeypatch.setenv("MEDILINGO_LLM_PROVIDER", "groq")
    monkeypatch.setenv("WATSON_API_KEY", "secret")
    monkeypatch.setenv("MEDILINGO_HTTP_TIMEOUT", "12.5")
    monkeypatch.setenv("MEDILINGO_SETTINGS_PATH", "/tmp/settings.json")

    config = AppConfig.from_env()

    assert config.llm.type == "groq"
    assert config.llm.api_key == "secret"
    assert config.drug_records.timeout == 12.5
    assert config.storage.settings_path == "/tmp/settings.json"


def test_defaults():
    config = AppConfig()

    assert config.llm.model == "meta-llama/llama-3-405b-instruct"
    assert config.llm.max_new_tokens == 1500
    assert config.vision.max_labels == 5
    assert config.storage.settings_key == "userSettings"


def test_to_dict_hides_secrets():
    config = AppConfig.from_dict({"llm": {"api_key": "secret", "project_id": "p"}})

    dumped = str(config.to_dict())

    assert config.llm.api_key == "secret"
    assert "secret" not in dumped
