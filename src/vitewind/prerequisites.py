"""Host prerequisite checks."""

from __future__ import annotations

import shutil
from typing import Callable

from .log import Logger
from .services.errors import DependencyMissingError

Which = Callable[[str], str | None]

_DISPLAY_NAMES = {"node": "Node.js"}
_INSTALL_HINT = "Install Node.js (which bundles npm) from https://nodejs.org/"


def check_prerequisites(
    logger: Logger,
    *,
    executables: tuple[str, ...] = ("node", "npm"),
    which: Which = shutil.which,
) -> None:
    """Ensure every required executable is on ``PATH``.

    Raises:
        DependencyMissingError: On the first executable that cannot be found.
    """
    logger.info("Checking prerequisites...")
    for name in executables:
        if which(name) is None:
            display = _DISPLAY_NAMES.get(name, name)
            raise DependencyMissingError(
                f"{display} is not installed. Please install {display} first.",
                recovery_hint=_INSTALL_HINT,
            )
        logger.debug(f"found {name}")
    logger.success("Prerequisites check passed")
