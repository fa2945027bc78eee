"""FastAPI diagnostics application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from runtimeinfo import __version__
from runtimeinfo.api.errors import register_exception_handlers
from runtimeinfo.api.models import ConfigResponse, EnvironmentResponse, HealthResponse
from runtimeinfo.config import get_settings
from runtimeinfo.core.container import ContainerCheck, get_container_check
from runtimeinfo.core.report import collect_environment_report
from runtimeinfo.utils import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the detected environment on startup."""
    report = await collect_environment_report(app.state.container_check)

    logger.info("=" * 60)
    logger.info(f"runtimeinfo - Runtime Environment Diagnostics v{__version__}")
    logger.info("=" * 60)
    logger.info(f"OS family: {report.os_family.value}")
    logger.info(f"Container: {report.is_container}")
    logger.info(f"CI: {report.is_github_action}")
    logger.info(f"Azure Function: {report.is_azure_function}")
    logger.info(f"Azure App Service: {report.is_azure_app_service}")
    logger.info("=" * 60)

    yield


def create_app(container_check: Optional[ContainerCheck] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="runtimeinfo - Runtime Environment Diagnostics",
        version=__version__,
        debug=settings.server_debug,
        lifespan=lifespan,
    )

    app.state.container_check = container_check or get_container_check()

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.get("/environment", response_model=EnvironmentResponse)
    async def get_environment(request: Request) -> EnvironmentResponse:
        """Report the detected runtime environment."""
        report = await collect_environment_report(request.app.state.container_check)
        return EnvironmentResponse(**report.to_dict())

    @app.get("/config", response_model=ConfigResponse)
    async def get_config(request: Request) -> ConfigResponse:
        """Get the container probe configuration."""
        return ConfigResponse(
            probe=request.app.state.container_check.probe.name,
            dockerenv_path=settings.dockerenv_path,
            cgroup_path=settings.cgroup_path,
            read_buffer_size=settings.read_buffer_size,
        )

    return app


def main():
    """Run the FastAPI application."""
    import uvicorn

    settings = get_settings()

    setup_logging(
        level=settings.log_level,
        use_colors=settings.log_use_colors,
        json_format=settings.log_json_format,
        log_file=settings.log_file,
    )

    uvicorn.run(
        "runtimeinfo.main:create_app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_debug,
        factory=True,
    )


if __name__ == "__main__":
    main()
