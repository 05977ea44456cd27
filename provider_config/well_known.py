"""
Well-known endpoints: OAuth 2.0 Authorization Server Metadata (RFC 8414) and
OpenID Connect discovery. Endpoint URLs are built from the provider settings.
"""
from fastapi import APIRouter, Depends, Request

from provider_config.provider_settings import ProviderSettings

router = APIRouter()

CLIENT_AUTH_METHODS = ["client_secret_basic", "client_secret_post"]
GRANT_TYPES = ["authorization_code", "client_credentials", "refresh_token"]


def get_provider_settings(request: Request) -> ProviderSettings:
    """Dependency: the ProviderSettings the app was created with."""
    return request.app.state.provider_settings


def resolve_issuer(provider_settings: ProviderSettings, request: Request) -> str:
    """Configured issuer, or this request's base URL when none is configured."""
    issuer = provider_settings.issuer
    if issuer is None:
        issuer = str(request.base_url)
    return issuer.rstrip("/")


def _endpoint_metadata(provider_settings: ProviderSettings, issuer: str) -> dict:
    """Fields shared by both discovery documents."""
    return {
        "issuer": issuer,
        "authorization_endpoint": f"{issuer}{provider_settings.authorization_endpoint}",
        "token_endpoint": f"{issuer}{provider_settings.token_endpoint}",
        "token_endpoint_auth_methods_supported": CLIENT_AUTH_METHODS,
        "jwks_uri": f"{issuer}{provider_settings.jwk_set_endpoint}",
        "response_types_supported": ["code"],
        "grant_types_supported": GRANT_TYPES,
    }


@router.get("/.well-known/oauth-authorization-server")
def authorization_server_metadata(
    request: Request,
    provider_settings: ProviderSettings = Depends(get_provider_settings),
):
    """OAuth 2.0 Authorization Server Metadata."""
    issuer = resolve_issuer(provider_settings, request)
    metadata = _endpoint_metadata(provider_settings, issuer)
    metadata.update({
        "revocation_endpoint": f"{issuer}{provider_settings.token_revocation_endpoint}",
        "revocation_endpoint_auth_methods_supported": CLIENT_AUTH_METHODS,
        "introspection_endpoint": f"{issuer}{provider_settings.token_introspection_endpoint}",
        "introspection_endpoint_auth_methods_supported": CLIENT_AUTH_METHODS,
        "code_challenge_methods_supported": ["S256"],
    })
    return metadata


@router.get("/.well-known/openid-configuration")
def openid_configuration(
    request: Request,
    provider_settings: ProviderSettings = Depends(get_provider_settings),
):
    """OpenID Connect discovery document. registration_endpoint only when registration is enabled."""
    issuer = resolve_issuer(provider_settings, request)
    metadata = _endpoint_metadata(provider_settings, issuer)
    metadata.update({
        "subject_types_supported": ["public"],
        "id_token_signing_alg_values_supported": ["RS256"],
        "scopes_supported": ["openid"],
    })
    if provider_settings.oidc_client_registration_endpoint_enabled:
        metadata["registration_endpoint"] = f"{issuer}{provider_settings.oidc_client_registration_endpoint}"
    return metadata
