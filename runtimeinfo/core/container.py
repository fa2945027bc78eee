"""Container detection with a process-wide cached verdict.

``detect_is_container`` runs the heuristic: the explicit override variables
first, then the host platform's probe. ``ContainerCheck`` wraps it so the
heuristic runs once; callers that arrive while the first evaluation is in
flight wait for it and share its result. A verdict is cached only when an
evaluation completes, so a cancelled check can be retried.
"""

import asyncio
import concurrent.futures
import threading
from typing import Mapping, Optional

from runtimeinfo.config import get_settings
from runtimeinfo.core.cells import OnceCell
from runtimeinfo.core.probes import PlatformProbe, create_host_probe
from runtimeinfo.utils.constants import CONTAINER_OVERRIDE_ENV_VARS
from runtimeinfo.utils.env_utils import env_is_true
from runtimeinfo.utils.exceptions import DetectionCancelledError
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


async def detect_is_container(
    probe: PlatformProbe,
    cancel_event: Optional[asyncio.Event] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Decide whether the current process runs inside a container.

    Args:
        probe: Platform probe for the host
        cancel_event: When set, pending filesystem or registry reads are abandoned
        environ: Environment mapping, defaults to os.environ

    Returns:
        True if any container signal is present

    Raises:
        DetectionCancelledError: If cancel_event was set before a verdict
    """
    if env_is_true(*CONTAINER_OVERRIDE_ENV_VARS, environ=environ):
        logger.debug("Container override variable is set")
        return True

    return await probe.detect(cancel_event)


class _EvaluationAbandoned(Exception):
    """The in-flight evaluation ended without a verdict."""


class ContainerCheck:
    """Single-flight, cached container verdict.

    One evaluation may be in flight per process. It is tracked as a
    ``concurrent.futures.Future`` so callers on other threads' event loops
    wait on the same evaluation instead of starting their own.
    """

    def __init__(
        self,
        probe: Optional[PlatformProbe] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        if probe is None:
            probe = create_host_probe(get_settings())

        self.probe = probe
        self.environ = environ
        self.evaluations = 0
        self._verdict: OnceCell[bool] = OnceCell("is_container")
        self._state_lock = threading.Lock()
        self._inflight: Optional[concurrent.futures.Future] = None

    @property
    def cached(self) -> Optional[bool]:
        """The cached verdict, or None if no evaluation has completed."""
        return self._verdict.get()

    async def get(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        """Return the container verdict, evaluating it on first use.

        Args:
            cancel_event: When set, this call stops waiting; an evaluation
                started by this call is abandoned and nothing is cached

        Raises:
            DetectionCancelledError: If cancel_event was set before a verdict
        """
        while True:
            if self._verdict.is_set:
                return self._verdict.get()

            with self._state_lock:
                if self._verdict.is_set:
                    return self._verdict.get()
                shared = self._inflight
                if shared is None:
                    shared = self._inflight = concurrent.futures.Future()
                    self.evaluations += 1
                    owner = True
                else:
                    owner = False

            if owner:
                return await self._evaluate(shared, cancel_event)

            try:
                return await self._wait_for(shared, cancel_event)
            except _EvaluationAbandoned:
                logger.debug("In-flight container evaluation was abandoned, retrying")

    async def _evaluate(
        self, shared: concurrent.futures.Future, cancel_event: Optional[asyncio.Event]
    ) -> bool:
        logger.debug(f"Evaluating container verdict with {self.probe!r}")
        try:
            verdict = await detect_is_container(self.probe, cancel_event, self.environ)
        except BaseException:
            with self._state_lock:
                self._inflight = None
            shared.set_exception(_EvaluationAbandoned())
            raise

        with self._state_lock:
            if self._verdict.try_set(verdict):
                logger.info(f"Container detection: {verdict}")
            self._inflight = None
        shared.set_result(self._verdict.get())
        return self._verdict.get()

    async def _wait_for(
        self, shared: concurrent.futures.Future, cancel_event: Optional[asyncio.Event]
    ) -> bool:
        # shield keeps a cancelled waiter from cancelling the shared future
        result = asyncio.shield(asyncio.wrap_future(shared))
        if cancel_event is None:
            return await result

        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait({result, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not result.done():
                result.add_done_callback(_consume_result)

        if result in done:
            return result.result()

        raise DetectionCancelledError("Container check was cancelled", check="is_container")

    def reset(self) -> None:
        """Forget the cached verdict."""
        self._verdict.reset()


def _consume_result(future: asyncio.Future) -> None:
    if not future.cancelled():
        future.exception()


# Global container check instance
_container_check: Optional[ContainerCheck] = None
_container_check_lock = threading.Lock()


def get_container_check() -> ContainerCheck:
    """Get or create the process-wide container check."""
    global _container_check
    if _container_check is None:
        with _container_check_lock:
            if _container_check is None:
                _container_check = ContainerCheck()
    return _container_check


def reset_container_check() -> None:
    """Drop the process-wide container check and its cached verdict."""
    global _container_check
    with _container_check_lock:
        _container_check = None


async def is_container(cancel_event: Optional[asyncio.Event] = None) -> bool:
    """Determine whether the current process runs inside a container.

    The heuristic runs at most once per process; concurrent first callers
    share one evaluation.

    Args:
        cancel_event: When set, pending filesystem or registry reads are abandoned

    Returns:
        True if the process appears to run inside a container

    Raises:
        DetectionCancelledError: If the evaluation was cancelled
    """
    return await get_container_check().get(cancel_event)
