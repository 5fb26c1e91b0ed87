"""FastAPI application for the writing style profiler."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vani.analysis.base import BaseStyleAnalyzer
from vani.analysis.exceptions import AnalysisConfigurationError
from vani.analysis.factory import AnalyzerFactory
from vani.api import routes
from vani.config.settings import Settings
from vani.logging.logger import Log


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.analyzer is None:
        Log.warning(f"Analysis is disabled: {app.state.configuration_error}")
    else:
        Log.info(f"Style analyzer ready (provider: {app.state.provider})")
    yield
    Log.info("Shutting down")


def create_app(
    settings: Settings | None = None,
    analyzer: BaseStyleAnalyzer | None = None,
) -> FastAPI:
    """Build the API with an explicitly constructed analyzer.

    Configures the ``vani`` logger from settings, so any launcher gets log
    output. When ``analyzer`` is not given it is created from settings. A missing
    API key does not stop the app from starting; ``/api/analyze`` reports it
    on every request instead.

    Raises:
        ValueError: if the configured provider is unknown.
    """
    settings = settings or Settings()
    Log.configure(settings.log_level)
    configuration_error = ""
    if analyzer is None:
        try:
            analyzer = AnalyzerFactory.create(settings)
        except AnalysisConfigurationError as exc:
            configuration_error = str(exc)

    app = FastAPI(
        title="Vani – Writing Style Profiler API",
        description="Analyze writing style using AI-powered literary analysis",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.analyzer = analyzer
    app.state.configuration_error = configuration_error
    app.state.provider = settings.analysis_provider.lower()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app
