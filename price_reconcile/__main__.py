"""Run the reconciliation API with uvicorn."""

import uvicorn

from price_reconcile.config.settings import get_settings


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "price_reconcile.api.main:app",
        host=settings.fastapi_host,
        port=settings.fastapi_port,
        log_level=settings.log_level.lower(),
    )


# Only execute when run directly as a module
if __name__ == "__main__":
    main()
