"""
Unit tests for environment profile loading.
"""

import os
from unittest.mock import patch

import pytest

from pwsuite.core.config import Config
from pwsuite.core.exceptions import ConfigurationError
from pwsuite.core.profiles import (
    DEFAULT_PROFILES,
    expand_env,
    list_profiles,
    load_profile,
    override_profile,
    resolve_profile,
)


class TestExpandEnv:
    """Test cases for placeholder expansion."""

    def test_expands_set_variable(self):
        assert expand_env("${HOST}/api", {"HOST": "http://qa"}) == "http://qa/api"

    def test_default_used_when_unset(self):
        assert expand_env("${HOST:-http://localhost:3000}", {}) == "http://localhost:3000"

    def test_default_used_when_empty(self):
        assert expand_env("${HOST:-fallback}", {"HOST": ""}) == "fallback"

    def test_unset_without_default_is_empty(self):
        assert expand_env("token=${TOKEN}", {}) == "token="

    def test_nested_structures(self):
        value = {"urls": ["${A}", "${B:-b}"], "retries": 2}

        assert expand_env(value, {"A": "a"}) == {"urls": ["a", "b"], "retries": 2}

    def test_non_strings_untouched(self):
        assert expand_env(42, {}) == 42
        assert expand_env(None, {}) is None


class TestLoadProfile:
    """Test cases for load_profile."""

    def test_builtin_dev_profile(self):
        """Test loading the built-in dev defaults."""
        profile = load_profile("dev", ci=False)

        assert profile.name == "dev"
        assert profile.base_url == "http://localhost:3000"
        assert profile.headless is False
        assert profile.slow_mo == 100
        assert profile.trace == "on"

    @patch.dict(os.environ, {"STAGING_BASE_URL": "https://qa.internal", "STAGING_AUTH_TOKEN": "t0k"})
    def test_placeholders_read_environment(self):
        profile = load_profile("staging", ci=False)

        assert profile.base_url == "https://qa.internal"
        assert profile.extra_http_headers() == {"Authorization": "Bearer t0k"}

    def test_builtin_defaults_are_not_mutated(self):
        load_profile("prod", ci=True)

        assert DEFAULT_PROFILES["prod"]["workers"] == 4
        assert "ci_workers" in DEFAULT_PROFILES["prod"]

    def test_ci_workers_applied_in_ci(self):
        assert load_profile("prod", ci=True).workers == 1
        assert load_profile("prod", ci=False).workers == 4

    @patch.dict(os.environ, {"CI": "true"})
    def test_ci_detected_from_environment(self):
        assert load_profile("prod").workers == 1

    def test_builtin_project_extends_environment(self):
        profile = load_profile("prod-mobile", ci=False)

        assert profile.name == "prod-mobile"
        assert profile.device == "Pixel 5"
        assert profile.retries == 2

    def test_yaml_file_overrides_builtin(self, configs_dir):
        (configs_dir / "dev.yaml").write_text(
            "base_url: http://dev.local:8080\nheadless: true\nworkers: 3\n"
        )

        profile = load_profile("dev", configs_dir, ci=False)

        assert profile.base_url == "http://dev.local:8080"
        assert profile.headless is True
        assert profile.workers == 3
        # Values missing from the file fall back to model defaults
        assert profile.slow_mo == 0

    def test_custom_environment_file(self, configs_dir):
        (configs_dir / "qa.yaml").write_text("browser: webkit\nretries: 1\n")

        profile = load_profile("qa", configs_dir, ci=False)

        assert profile.name == "qa"
        assert profile.browser == "webkit"

    def test_unified_projects(self, configs_dir):
        (configs_dir / "prod.yaml").write_text("base_url: https://shop.example\nworkers: 6\n")
        (configs_dir / "unified.yaml").write_text(
            "projects:\n"
            "  prod-webkit:\n"
            "    extends: prod\n"
            "    browser: webkit\n"
        )

        profile = load_profile("prod-webkit", configs_dir, ci=False)

        assert profile.name == "prod-webkit"
        assert profile.browser == "webkit"
        assert profile.base_url == "https://shop.example"
        assert profile.workers == 6

    def test_project_extending_unknown_environment(self, configs_dir):
        (configs_dir / "unified.yaml").write_text(
            "projects:\n  broken:\n    extends: nowhere\n"
        )

        with pytest.raises(ConfigurationError) as exc_info:
            load_profile("broken", configs_dir, ci=False)

        assert exc_info.value.profile_name == "broken"

    def test_unknown_profile(self, configs_dir):
        with pytest.raises(ConfigurationError, match="Unknown profile 'qa'"):
            load_profile("qa", configs_dir)

    def test_invalid_settings(self, configs_dir):
        (configs_dir / "qa.yaml").write_text("browser: opera\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_profile("qa", configs_dir, ci=False)

        assert exc_info.value.source == "qa.yaml"
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

    def test_unknown_key_rejected(self, configs_dir):
        (configs_dir / "dev.yaml").write_text("wokers: 2\n")

        with pytest.raises(ConfigurationError):
            load_profile("dev", configs_dir, ci=False)

    def test_unparsable_yaml(self, configs_dir):
        (configs_dir / "dev.yaml").write_text("base_url: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_profile("dev", configs_dir, ci=False)

    def test_yaml_must_be_mapping(self, configs_dir):
        (configs_dir / "dev.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_profile("dev", configs_dir, ci=False)


class TestListProfiles:
    """Test cases for list_profiles."""

    def test_builtin_names(self):
        names = list_profiles()

        assert names == sorted(names)
        assert {"dev", "staging", "prod", "prod-firefox", "prod-mobile", "staging-firefox"} <= set(names)

    def test_includes_preset_files(self, configs_dir):
        (configs_dir / "qa.yaml").write_text("workers: 1\n")
        (configs_dir / "unified.yaml").write_text("projects:\n  qa-webkit:\n    extends: qa\n")

        names = list_profiles(configs_dir)

        assert "qa" in names
        assert "qa-webkit" in names
        assert "unified" not in names


class TestResolveProfile:
    """Test cases for resolve_profile."""

    def test_resolves_project_before_environment(self, temp_config):
        temp_config.environment = "prod"
        temp_config.project = "prod-firefox"

        profile = resolve_profile(temp_config)

        assert profile.name == "prod-firefox"
        assert profile.browser == "firefox"

    def test_headless_override(self, temp_config):
        temp_config.headless_mode = True

        profile = resolve_profile(temp_config)

        assert profile.name == "dev"
        assert profile.headless is True

    def test_no_override_keeps_profile_value(self, temp_config):
        assert resolve_profile(temp_config).headless is False

    @patch.dict(os.environ, {"CI": "1"})
    def test_ci_config(self, tmp_path):
        config = Config(environment="prod", configs_dir=tmp_path)

        profile = resolve_profile(config)

        assert profile.workers == 1
        assert profile.headless is True


class TestOverrideProfile:
    """Test cases for override_profile."""

    def test_applies_overrides(self):
        profile = load_profile("staging")

        updated = override_profile(profile, workers=3, retries=0)

        assert (updated.workers, updated.retries) == (3, 0)
        assert updated.browser == profile.browser
        assert profile.workers == 2

    @pytest.mark.parametrize("overrides", [{"retries": -1}, {"workers": 0}, {"colour": "red"}])
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError) as exc_info:
            override_profile(load_profile("staging"), **overrides)

        assert exc_info.value.profile_name == "staging"
