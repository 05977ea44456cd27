"""
Provider settings for the authorization server: endpoint paths, issuer and the
OIDC client registration flag, with typed accessors over the generic registry.
Issuer has no default; it must be configured (or resolved per request) before use.
"""
from types import MappingProxyType

from provider_config.settings import Settings

ISSUER = "issuer"
AUTHORIZATION_ENDPOINT = "authorization-endpoint"
TOKEN_ENDPOINT = "token-endpoint"
JWK_SET_ENDPOINT = "jwk-set-endpoint"
TOKEN_REVOCATION_ENDPOINT = "token-revocation-endpoint"
TOKEN_INTROSPECTION_ENDPOINT = "token-introspection-endpoint"
OIDC_CLIENT_REGISTRATION_ENDPOINT = "oidc-client-registration-endpoint"
OIDC_CLIENT_REGISTRATION_ENABLED = "oidc-client-registration-enabled"

DEFAULT_SETTINGS = MappingProxyType({
    AUTHORIZATION_ENDPOINT: "/oauth2/authorize",
    TOKEN_ENDPOINT: "/oauth2/token",
    JWK_SET_ENDPOINT: "/oauth2/jwks",
    TOKEN_REVOCATION_ENDPOINT: "/oauth2/revoke",
    TOKEN_INTROSPECTION_ENDPOINT: "/oauth2/introspect",
    OIDC_CLIENT_REGISTRATION_ENDPOINT: "/connect/register",
    OIDC_CLIENT_REGISTRATION_ENABLED: False,
})


class ProviderSettings(Settings):
    """Settings registry seeded with the provider defaults. Setters return self for chaining."""

    def __init__(self):
        super().__init__(DEFAULT_SETTINGS)

    @property
    def issuer(self) -> str | None:
        """Public issuer identifier (URL). None until configured."""
        return self.setting(ISSUER, str)

    def set_issuer(self, issuer: str) -> "ProviderSettings":
        """Set the issuer URL. Raises ValueError if None."""
        return self.set_setting(ISSUER, issuer)

    @property
    def authorization_endpoint(self) -> str | None:
        return self.setting(AUTHORIZATION_ENDPOINT, str)

    def set_authorization_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the authorization endpoint, relative to the issuer."""
        return self.set_setting(AUTHORIZATION_ENDPOINT, path)

    @property
    def token_endpoint(self) -> str | None:
        return self.setting(TOKEN_ENDPOINT, str)

    def set_token_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the token endpoint."""
        return self.set_setting(TOKEN_ENDPOINT, path)

    @property
    def jwk_set_endpoint(self) -> str | None:
        return self.setting(JWK_SET_ENDPOINT, str)

    def set_jwk_set_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the JWK Set endpoint (published as jwks_uri)."""
        return self.set_setting(JWK_SET_ENDPOINT, path)

    @property
    def token_revocation_endpoint(self) -> str | None:
        return self.setting(TOKEN_REVOCATION_ENDPOINT, str)

    def set_token_revocation_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the token revocation endpoint."""
        return self.set_setting(TOKEN_REVOCATION_ENDPOINT, path)

    @property
    def token_introspection_endpoint(self) -> str | None:
        return self.setting(TOKEN_INTROSPECTION_ENDPOINT, str)

    def set_token_introspection_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the token introspection endpoint."""
        return self.set_setting(TOKEN_INTROSPECTION_ENDPOINT, path)

    @property
    def oidc_client_registration_endpoint(self) -> str | None:
        return self.setting(OIDC_CLIENT_REGISTRATION_ENDPOINT, str)

    def set_oidc_client_registration_endpoint(self, path: str) -> "ProviderSettings":
        """Path of the OIDC client registration endpoint."""
        return self.set_setting(OIDC_CLIENT_REGISTRATION_ENDPOINT, path)

    @property
    def oidc_client_registration_endpoint_enabled(self) -> bool:
        """Whether the OIDC dynamic client registration endpoint is published."""
        return bool(self.setting(OIDC_CLIENT_REGISTRATION_ENABLED, bool))

    def set_oidc_client_registration_endpoint_enabled(self, enabled: bool) -> "ProviderSettings":
        """Turn publishing of the client registration endpoint on or off."""
        return self.set_setting(OIDC_CLIENT_REGISTRATION_ENABLED, enabled)
