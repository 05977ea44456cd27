"""
Provider configuration service. Publishes the discovery documents for the
configured ProviderSettings. Port 9000, as for the authorization server it describes.
"""
from fastapi import FastAPI

from provider_config.config import load_provider_settings
from provider_config.provider_settings import ProviderSettings
from provider_config.well_known import router as well_known_router


def create_app(provider_settings: ProviderSettings | None = None) -> FastAPI:
    """Build the app around the given settings, or settings loaded from env."""
    app = FastAPI(title="Provider Config", version="0.1.0")
    app.state.provider_settings = provider_settings if provider_settings is not None else load_provider_settings()
    app.include_router(well_known_router, tags=["well-known"])

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "ok", "service": "provider_config"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "provider_config.main:app",
        host="127.0.0.1",
        port=9000,
        reload=True,
    )
