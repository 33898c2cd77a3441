"""
Notes API — Settings Tests
===========================

What we test:
    ✅ log_level is normalized to upper case and validated
    ✅ ownership_policy accepts any case and surrounding whitespace
    ✅ cors_origins splits into a list without blanks
"""

import pydantic
import pytest

from app.config import OwnershipPolicy, Settings


class TestLogLevel:

    def test_lower_case_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="verbose")


class TestOwnershipPolicy:

    def test_default_is_strict(self, monkeypatch):
        monkeypatch.delenv("OWNERSHIP_POLICY", raising=False)

        assert Settings(_env_file=None).ownership_policy is OwnershipPolicy.STRICT

    def test_case_and_whitespace_are_ignored(self):
        assert Settings(ownership_policy=" LEGACY ").ownership_policy is OwnershipPolicy.LEGACY

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("OWNERSHIP_POLICY", "Legacy")

        assert Settings().ownership_policy is OwnershipPolicy.LEGACY

    def test_unknown_policy_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(ownership_policy="open")


def test_cors_origins_list():
    config = Settings(cors_origins="http://a.test, ,http://b.test ")

    assert config.cors_origins_list == ["http://a.test", "http://b.test"]
