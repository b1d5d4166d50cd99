"""
Environment profile loading for the PW training suite.

Profiles come from ``configs/<env>.yaml`` and the named projects of
``configs/unified.yaml``. When no preset file exists the built-in defaults
below are used, so the package works from any directory.
"""

import copy
import os
import re
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config import Config, EnvironmentProfile
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

UNIFIED_FILE = "unified.yaml"

# Keys the loader consumes before validation
LOADER_KEYS = ("extends", "ci_workers")


DEFAULT_PROFILES: Dict[str, Dict[str, Any]] = {
    "dev": {
        "base_url": "${DEV_BASE_URL:-http://localhost:3000}",
        "auth_token": "${DEV_AUTH_TOKEN:-}",
        "api_key": "${DEV_API_KEY:-}",
        "client_id": "${DEV_CLIENT_ID:-}",
        "headless": False,
        "slow_mo": 100,
        "retries": 0,
        "workers": 1,
        "timeout": 60000,
        "expect_timeout": 10000,
        "action_timeout": 15000,
        "navigation_timeout": 30000,
        "screenshot": "on",
        "video": "on",
        "trace": "on",
        "ignore_https_errors": True,
    },
    "staging": {
        "base_url": "${STAGING_BASE_URL:-https://staging.example.com}",
        "auth_token": "${STAGING_AUTH_TOKEN:-}",
        "api_key": "${STAGING_API_KEY:-}",
        "client_id": "${STAGING_CLIENT_ID:-}",
        "headless": True,
        "retries": 1,
        "workers": 2,
        "timeout": 45000,
        "expect_timeout": 7000,
        "action_timeout": 10000,
        "navigation_timeout": 30000,
        "screenshot": "only-on-failure",
        "video": "retain-on-failure",
        "trace": "on-first-retry",
        "ignore_https_errors": False,
    },
    "prod": {
        "base_url": "${PROD_BASE_URL:-https://www.example.com}",
        "auth_token": "${PROD_AUTH_TOKEN:-}",
        "api_key": "${PROD_API_KEY:-}",
        "client_id": "${PROD_CLIENT_ID:-}",
        "headless": True,
        "retries": 2,
        "workers": 4,
        "ci_workers": 1,
        "timeout": 30000,
        "expect_timeout": 5000,
        "action_timeout": 10000,
        "navigation_timeout": 30000,
        "screenshot": "only-on-failure",
        "video": "retain-on-failure",
        "trace": "retain-on-failure",
        "ignore_https_errors": False,
    },
}

DEFAULT_PROJECTS: Dict[str, Dict[str, Any]] = {
    "dev": {"extends": "dev"},
    "staging": {"extends": "staging"},
    "staging-firefox": {"extends": "staging", "browser": "firefox"},
    "prod": {"extends": "prod"},
    "prod-firefox": {"extends": "prod", "browser": "firefox"},
    "prod-mobile": {"extends": "prod", "device": "Pixel 5"},
}


def expand_env(value: Any, environ: Optional[Dict[str, str]] = None) -> Any:
    """
    Expand ``${VAR}`` and ``${VAR:-default}`` placeholders recursively.

    Unset variables without a default expand to an empty string.
    """
    env = os.environ if environ is None else environ

    if isinstance(value, str):
        def replace(match):
            name, default = match.group(1), match.group(2)
            resolved = env.get(name)
            if resolved is None or resolved == "":
                return default if default is not None else ""
            return resolved

        return ENV_PATTERN.sub(replace, value)

    if isinstance(value, dict):
        return {k: expand_env(v, env) for k, v in value.items()}

    if isinstance(value, list):
        return [expand_env(v, env) for v in value]

    return value


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Could not parse preset file {path}: {e}", source=str(path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Preset file {path} must contain a mapping", source=str(path)
        )
    return data


def _environment_settings(name: str, configs_dir: Optional[Path]) -> Optional[Dict[str, Any]]:
    """Raw settings of one environment preset, file first, then built-in."""
    if configs_dir is not None:
        path = configs_dir / f"{name}.yaml"
        if path.exists():
            logger.debug(f"Loading environment preset {path}")
            return _read_yaml(path)

    if name in DEFAULT_PROFILES:
        return copy.deepcopy(DEFAULT_PROFILES[name])
    return None


def _project_settings(configs_dir: Optional[Path]) -> Dict[str, Dict[str, Any]]:
    if configs_dir is not None:
        path = configs_dir / UNIFIED_FILE
        if path.exists():
            projects = _read_yaml(path).get("projects") or {}
            if not isinstance(projects, dict):
                raise ConfigurationError(
                    f"'projects' in {path} must be a mapping", source=str(path)
                )
            return projects
    return copy.deepcopy(DEFAULT_PROJECTS)


def _build_profile(
    name: str, settings: Dict[str, Any], source: str, ci: bool
) -> EnvironmentProfile:
    settings = expand_env(settings)
    ci_workers = settings.get("ci_workers")
    for key in LOADER_KEYS:
        settings.pop(key, None)

    if ci and ci_workers is not None:
        settings["workers"] = ci_workers

    settings["name"] = name

    try:
        return EnvironmentProfile(**settings)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid settings for profile '{name}': {e}",
            profile_name=name,
            source=source,
        ) from e


def load_profile(
    name: str, configs_dir: Optional[Path] = None, ci: Optional[bool] = None
) -> EnvironmentProfile:
    """
    Load an environment profile by name.

    Unified projects take precedence over plain environment presets, so
    ``prod-mobile`` resolves to the ``prod`` settings plus its overrides.

    Args:
        name: Environment (``dev``) or project (``prod-firefox``) name
        configs_dir: Directory holding the YAML presets
        ci: Whether CI-specific values apply; detected from ``CI`` when None

    Returns:
        Validated EnvironmentProfile

    Raises:
        ConfigurationError: If the name is unknown or the settings are invalid
    """
    if ci is None:
        ci = os.getenv("CI", "").lower() in ("1", "true", "yes")

    projects = _project_settings(configs_dir)
    if name in projects:
        project = dict(projects[name] or {})
        base_name = project.get("extends", name)
        base = _environment_settings(base_name, configs_dir)
        if base is None:
            raise ConfigurationError(
                f"Project '{name}' extends unknown environment '{base_name}'",
                profile_name=name,
                source=UNIFIED_FILE,
            )
        base.update(project)
        return _build_profile(name, base, UNIFIED_FILE, ci)

    settings = _environment_settings(name, configs_dir)
    if settings is None:
        raise ConfigurationError(
            f"Unknown profile '{name}'. Available: {', '.join(list_profiles(configs_dir))}",
            profile_name=name,
        )
    return _build_profile(name, settings, f"{name}.yaml", ci)


def list_profiles(configs_dir: Optional[Path] = None) -> List[str]:
    """Names of every environment and project that can be loaded."""
    names = set(DEFAULT_PROFILES)
    if configs_dir is not None and configs_dir.exists():
        names.update(
            p.stem for p in configs_dir.glob("*.yaml") if p.name != UNIFIED_FILE
        )
    names.update(_project_settings(configs_dir))
    return sorted(names)


def override_profile(profile: EnvironmentProfile, **overrides: Any) -> EnvironmentProfile:
    """Copy of ``profile`` with ``overrides`` applied and validated again."""
    try:
        return EnvironmentProfile.model_validate({**profile.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid overrides for profile '{profile.name}': {e}",
            profile_name=profile.name,
        ) from e


def resolve_profile(config: Config) -> EnvironmentProfile:
    """Load the profile selected by a runtime Config and apply its overrides."""
    profile = load_profile(config.profile_name, config.configs_dir, ci=config.is_ci_mode)

    if config.headless_mode is not None:
        profile = override_profile(profile, headless=config.headless_mode)

    logger.info(
        f"Resolved profile {profile.name}",
        extra={
            "metadata": {
                "profile": profile.name,
                "browser": profile.browser,
                "base_url": profile.base_url,
                "workers": profile.workers,
                "retries": profile.retries,
            }
        },
    )
    return profile
