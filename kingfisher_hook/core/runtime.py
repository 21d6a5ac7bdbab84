"""
kingfisher-hook - Container Runtime Probe
Chooses the binary that launches the scanner image.
"""

import logging
import shutil
from pathlib import Path
from typing import Callable, List, Optional

from ..config import SCAN_ARGS
from .models import ContainerRuntime, InstallerConfig

logger = logging.getLogger(__name__)


def detect_container_runtime(
    config: Optional[InstallerConfig] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> ContainerRuntime:
    """
    Probes for the alternate runtime and falls back to the default path.

    Args:
        config: Installer configuration (default: built-in values)
        which: Lookup function, ``shutil.which`` compatible

    Returns:
        The runtime the generated wrapper would pick on this machine
    """
    config = config or InstallerConfig()

    found = which(config.alternate_runtime)
    if found:
        logger.debug("Found %s at %s", config.alternate_runtime, found)
        return ContainerRuntime(
            name=config.alternate_runtime,
            command=found,
            preferred=True,
        )

    logger.debug(
        "%s not found, using %s", config.alternate_runtime, config.default_runtime
    )
    return ContainerRuntime(
        name=Path(config.default_runtime).name,
        command=config.default_runtime,
    )


def build_scan_command(
    runtime: ContainerRuntime,
    repo_root: Path,
    image: str,
) -> List[str]:
    """Argv the wrapper runs from the repository root."""
    return [
        runtime.command,
        "run",
        "--rm",
        "-v",
        f"{repo_root}:/src",
        image,
    ] + SCAN_ARGS


__all__ = [
    "build_scan_command",
    "detect_container_runtime",
]
