"""Pre-flight check for the external executables the sync relies on."""

import shutil
from pathlib import Path
from typing import Callable, Iterable

import structlog

from claude_md_sync.configuration.exceptions import DependencyMissingError
from claude_md_sync.utils.constants import INSTALL_HINTS

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

Which = Callable[[str], str | None]


def check_dependencies(executables: Iterable[str], which: Which = shutil.which) -> None:
    """Ensure every executable resolves on the search path.

    Raises:
        DependencyMissingError: For the first executable that cannot be found.
    """
    for executable in executables:
        resolved = which(executable)
        if resolved is None:
            raise DependencyMissingError(executable, INSTALL_HINTS.get(Path(executable).name))
        logger.debug("Found required executable", executable=executable, path=resolved)
