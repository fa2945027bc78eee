"""Pydantic models for API responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response model."""

    error: str = Field(..., description="Error message")
    code: str = Field("ERROR", description="Error code for programmatic handling")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")


class EnvironmentResponse(BaseModel):
    """Detected runtime environment."""

    os_family: str = Field(..., description="Host OS family (windows, macos, linux, ...)")
    is_container: bool = Field(..., description="Whether the process runs in a container")
    is_github_action: bool = Field(..., description="Whether the process runs in CI")
    is_azure_function: bool = Field(..., description="Whether the process is an Azure Function")
    is_azure_app_service: bool = Field(
        ..., description="Whether the process runs in an Azure App Service"
    )


class ConfigResponse(BaseModel):
    """Container probe configuration in effect."""

    probe: str = Field(..., description="Name of the selected platform probe")
    dockerenv_path: str = Field(..., description="Docker marker file path")
    cgroup_path: str = Field(..., description="Control group file path")
    read_buffer_size: int = Field(..., description="Line reader chunk size in bytes")
