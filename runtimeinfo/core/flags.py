"""Memoized hosting flags driven by environment variables.

Each flag is evaluated on first access and cached for the life of the
process. Evaluation is synchronous and side-effect free, so racing first
reads may evaluate twice; the cell keeps whichever result lands first.
"""

from typing import Callable, Mapping, Optional

from runtimeinfo.core.cells import OnceCell
from runtimeinfo.utils.constants import (
    AZURE_APP_SERVICE_ENV_VARS,
    AZURE_FUNCTION_ENV_VARS,
    CI_ENV_VARS,
)
from runtimeinfo.utils.env_utils import env_has_content, env_is_true
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


class EnvironmentFlag:
    """A lazily evaluated, cached boolean environment check."""

    def __init__(self, name: str, evaluate: Callable[[Optional[Mapping[str, str]]], bool]):
        self.name = name
        self._evaluate = evaluate
        self._cell: OnceCell[bool] = OnceCell(name)

    def __call__(self) -> bool:
        return self._cell.get_or_init(self._compute)

    def evaluate(self, environ: Optional[Mapping[str, str]] = None) -> bool:
        """Evaluate the check without touching the cache."""
        return self._evaluate(environ)

    @property
    def cached(self) -> Optional[bool]:
        return self._cell.get()

    def reset(self) -> None:
        self._cell.reset()

    def _compute(self) -> bool:
        result = self._evaluate(None)
        logger.debug(f"Flag {self.name} evaluated to {result}")
        return result


def _check_ci(environ: Optional[Mapping[str, str]]) -> bool:
    return env_is_true(*CI_ENV_VARS, environ=environ)


def _check_azure_function(environ: Optional[Mapping[str, str]]) -> bool:
    return env_has_content(*AZURE_FUNCTION_ENV_VARS, environ=environ)


def _check_azure_app_service(environ: Optional[Mapping[str, str]]) -> bool:
    return env_has_content(*AZURE_APP_SERVICE_ENV_VARS, environ=environ)


github_action_flag = EnvironmentFlag("github_action", _check_ci)
azure_function_flag = EnvironmentFlag("azure_function", _check_azure_function)
azure_app_service_flag = EnvironmentFlag("azure_app_service", _check_azure_app_service)

_FLAGS = (github_action_flag, azure_function_flag, azure_app_service_flag)


def is_github_action() -> bool:
    """Check whether the process runs in GitHub Actions or a compatible CI runner."""
    return github_action_flag()


def is_azure_function() -> bool:
    """Check whether the process runs inside an Azure Function."""
    return azure_function_flag()


def is_azure_app_service() -> bool:
    """Check whether the process runs inside an Azure App Service."""
    return azure_app_service_flag()


def reset_flags() -> None:
    """Forget every cached flag so the next access re-reads the environment."""
    for flag in _FLAGS:
        flag.reset()
