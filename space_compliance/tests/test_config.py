"""
Tests: Settings and rule-config overrides.

Run with:
    pytest space_compliance/tests/test_config.py -v
"""

import json

import pytest

from space_compliance.config import get_settings
from space_compliance.exceptions import ComplianceEngineError
from space_compliance.rules.rules_config import RulesConfigStore


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, fresh_settings):
        settings = get_settings()
        assert settings.api_port == 8000
        assert settings.rules_config_path == ""

    def test_env_prefix(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("SPACE_COMPLIANCE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SPACE_COMPLIANCE_API_PORT", "9100")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.api_port == 9100

    def test_store_reads_path_from_settings(self, fresh_settings, monkeypatch, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"timeline": {"max_months": 36}}))
        monkeypatch.setenv("SPACE_COMPLIANCE_RULES_CONFIG_PATH", str(path))
        assert RulesConfigStore().get_timeline_config().max_months == 36


class TestRulesConfigStore:
    def test_defaults_without_file(self):
        store = RulesConfigStore(config_path="")
        assert store.get_risk_config().critical_at_or_below == 25
        assert store.get_ranking_config().base_score == 50
        assert store.get_action_config().max_immediate_actions == 5

    def test_partial_override_from_file(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"risk": {"low_above": 85}, "unknown": {}}))
        store = RulesConfigStore(config_path=str(path))
        risk = store.get_risk_config()
        assert risk.low_above == 85
        assert risk.medium_above == 60
        assert store.get_scoring_config().partial_credit == 0.5

    def test_missing_file(self, tmp_path):
        store = RulesConfigStore(config_path=str(tmp_path / "absent.json"))
        with pytest.raises(ComplianceEngineError):
            store.get_scoring_config()

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text("{not json")
        with pytest.raises(ComplianceEngineError):
            RulesConfigStore(config_path=str(path)).get_risk_config()

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text("[1, 2]")
        with pytest.raises(ComplianceEngineError):
            RulesConfigStore(config_path=str(path)).get_risk_config()

    def test_invalid_value(self):
        store = RulesConfigStore(overrides={"scoring": {"partial_credit": "half"}})
        with pytest.raises(ComplianceEngineError, match="scoring"):
            store.get_scoring_config()

    def test_configs_cached(self):
        store = RulesConfigStore(config_path="")
        assert store.get_timeline_config() is store.get_timeline_config()
