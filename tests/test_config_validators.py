# tests/test_config_validators.py

import config
import pytest
from config import GuardianSettings
from pydantic import ValidationError


def test_non_positive_max_tokens_raises():
    with pytest.raises(ValidationError):
        GuardianSettings(OPENAI_API_KEY="valid", DEFAULT_MAX_TOKENS=0)


def test_non_positive_concurrency_raises():
    with pytest.raises(ValidationError):
        GuardianSettings(OPENAI_API_KEY="valid", MAX_CONCURRENT_LLM_CALLS=0)


@pytest.mark.parametrize("key", ["", "nope", "dummy-key-for-development"])
def test_placeholder_api_key_warns(monkeypatch, key):
    warnings: list[str] = []

    def fake_warning(msg: str, **_kw: object) -> None:
        warnings.append(msg)

    monkeypatch.setattr(config.logger, "warning", fake_warning)
    GuardianSettings(OPENAI_API_KEY=key)
    assert any("OPENAI_API_KEY" in msg for msg in warnings)


def test_log_level_alias(monkeypatch):
    monkeypatch.setenv("GUARDIAN_LOG_LEVEL", "DEBUG")
    assert GuardianSettings(OPENAI_API_KEY="valid").LOG_LEVEL_STR == "DEBUG"


def test_reports_dir_under_output_dir():
    assert config.REPORTS_DIR.startswith(config.settings.BASE_OUTPUT_DIR)
