"""
Provider configuration from environment. Endpoint paths and the issuer are public
identifiers, not secrets. Unset variables keep the ProviderSettings defaults.
"""
import json
import logging
import os
from typing import Mapping

from provider_config.provider_settings import (
    AUTHORIZATION_ENDPOINT,
    JWK_SET_ENDPOINT,
    OIDC_CLIENT_REGISTRATION_ENDPOINT,
    TOKEN_ENDPOINT,
    TOKEN_INTROSPECTION_ENDPOINT,
    TOKEN_REVOCATION_ENDPOINT,
    ProviderSettings,
)

logger = logging.getLogger(__name__)

# Issuer URL (public identifier). No default: resolved from the request when unset.
ISSUER = os.environ.get("OAUTH_ISSUER", "").strip().rstrip("/") or None

# Env var -> endpoint path setting it overrides
ENDPOINT_ENV_VARS = {
    "OAUTH_AUTHORIZATION_ENDPOINT": AUTHORIZATION_ENDPOINT,
    "OAUTH_TOKEN_ENDPOINT": TOKEN_ENDPOINT,
    "OAUTH_JWK_SET_ENDPOINT": JWK_SET_ENDPOINT,
    "OAUTH_TOKEN_REVOCATION_ENDPOINT": TOKEN_REVOCATION_ENDPOINT,
    "OAUTH_TOKEN_INTROSPECTION_ENDPOINT": TOKEN_INTROSPECTION_ENDPOINT,
    "OAUTH_OIDC_CLIENT_REGISTRATION_ENDPOINT": OIDC_CLIENT_REGISTRATION_ENDPOINT,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_custom_settings(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"OAUTH_PROVIDER_SETTINGS is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("OAUTH_PROVIDER_SETTINGS must be a JSON object")
    return data


def load_provider_settings(environ: Mapping[str, str] | None = None) -> ProviderSettings:
    """
    Build ProviderSettings from environment (os.environ by default).
    OAUTH_ISSUER, OAUTH_*_ENDPOINT, OAUTH_OIDC_CLIENT_REGISTRATION_ENABLED and
    OAUTH_PROVIDER_SETTINGS (JSON object of custom settings).
    """
    env = os.environ if environ is None else environ
    provider_settings = ProviderSettings()

    issuer = env.get("OAUTH_ISSUER", "").strip().rstrip("/")
    if issuer:
        provider_settings.set_issuer(issuer)
        logger.info("Issuer set to %s", issuer)

    for var, name in ENDPOINT_ENV_VARS.items():
        path = env.get(var, "").strip()
        if path:
            provider_settings.set_setting(name, path)
            logger.info("Overriding %s from %s", name, var)

    enabled = env.get("OAUTH_OIDC_CLIENT_REGISTRATION_ENABLED", "").strip().lower()
    if enabled:
        provider_settings.set_oidc_client_registration_endpoint_enabled(enabled in _TRUE_VALUES)
        logger.info(
            "OIDC client registration endpoint %s",
            "enabled" if provider_settings.oidc_client_registration_endpoint_enabled else "disabled",
        )

    raw_custom = env.get("OAUTH_PROVIDER_SETTINGS", "").strip()
    if raw_custom:
        custom = _parse_custom_settings(raw_custom)
        provider_settings.merge_settings(lambda settings: settings.update(custom))
        logger.info("Loaded %d custom provider settings", len(custom))

    return provider_settings
