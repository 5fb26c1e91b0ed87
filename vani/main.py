import uvicorn

from vani.api.app import create_app
from vani.config.settings import Settings


def main() -> None:
    """Entry point: load settings -> build the app and its analyzer -> serve."""
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
