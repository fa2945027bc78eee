"""Environment variable readers."""

import os
from typing import Mapping, Optional


def _source(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def env_is_true(*names: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether any of the variables is set to ``"true"`` (case-insensitive).

    Presence alone is not enough: ``"1"``, ``"yes"`` or ``"false"`` do not count.
    """
    env = _source(environ)
    for name in names:
        value = env.get(name)
        if value is not None and value.lower() == "true":
            return True
    return False


def env_has_content(*names: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether any of the variables is set to a non-blank value."""
    env = _source(environ)
    return any((env.get(name) or "").strip() for name in names)
