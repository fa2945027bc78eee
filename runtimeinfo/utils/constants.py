"""Application-wide constants: environment variable names, paths and sentinels."""

# Explicit container override (primary name first, legacy alias second)
CONTAINER_OVERRIDE_ENV_VARS: tuple[str, ...] = (
    "DOTNET_RUNNING_IN_CONTAINER",
    "DOTNET_RUNNING_IN_CONTAINERS",
)

# CI detection (GitHub Actions first, generic CI fallback)
CI_ENV_VARS: tuple[str, ...] = ("GITHUB_ACTIONS", "CI")

# Azure hosting
AZURE_FUNCTION_ENV_VARS: tuple[str, ...] = ("FUNCTIONS_WORKER_RUNTIME",)
AZURE_APP_SERVICE_ENV_VARS: tuple[str, ...] = ("WEBSITE_SITE_NAME", "WEBSITE_INSTANCE_ID")

# Linux container markers
DOCKERENV_PATH: str = "/.dockerenv"
CGROUP_PATH: str = "/proc/1/cgroup"
CGROUP_CONTAINER_MARKERS: tuple[str, ...] = ("docker", "kubepods", "containerd")

# Windows container markers
WINDOWS_CONTAINER_USER: str = "ContainerAdministrator"
WINDOWS_CONTAINER_DOMAIN: str = "User Manager"
WINDOWS_CONTROL_KEY: str = r"SYSTEM\CurrentControlSet\Control"
WINDOWS_CONTAINER_TYPE_VALUE: str = "ContainerType"
WINDOWS_CONTAINER_TYPE_CONTAINER: int = 2

# Line reader
DEFAULT_READ_BUFFER_SIZE: int = 4096
DEFAULT_ENCODING: str = "utf-8"

# Diagnostics server
DEFAULT_SERVER_HOST: str = "0.0.0.0"
DEFAULT_SERVER_PORT: int = 9100
