"""
kingfisher-hook - Hooks Directory Resolution
Decides which hooks directory an install or uninstall targets.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from ..core.git import Git
from ..core.models import InstallerConfig

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


def _log_report(message: str) -> None:
    logger.info(message)


def resolve_global_hooks_dir(
    git: Git,
    config: InstallerConfig,
    report: Reporter = _log_report,
    configure: bool = True,
) -> Path:
    """
    Global hooks directory from ``core.hooksPath``.

    When unset, the configured default is written to the global config and
    reported. An existing value is reused without writing.

    Args:
        git: Git client
        config: Installer configuration
        report: Callback for user-facing messages
        configure: If False, never write the global config
    """
    configured = git.get_global_hooks_path()
    if configured:
        logger.debug("Using global core.hooksPath %s", configured)
        return Path(configured).expanduser()

    hooks_dir = config.global_hooks_path()
    if configure:
        git.set_global_hooks_path(str(hooks_dir))
        report(f"Configured global Git hooks at {hooks_dir}")
    return hooks_dir


def resolve_repo_hooks_dir(
    git: Git,
    hooks_path: Optional[str] = None,
    report: Reporter = _log_report,
) -> Path:
    """
    Repository hooks directory.

    Order: explicit path, git's own hooks path, ``<cwd>/.git/hooks``.
    """
    if hooks_path:
        return git.cwd / hooks_path

    if git.is_git_repository():
        return git.hooks_path()

    hooks_dir = git.cwd / ".git" / "hooks"
    report(f"Git repository not detected; using fallback hooks path {hooks_dir}")
    return hooks_dir


def resolve_hooks_dir(
    global_mode: bool = False,
    hooks_path: Optional[str] = None,
    config: Optional[InstallerConfig] = None,
    cwd: Optional[Path] = None,
    report: Reporter = _log_report,
    create: bool = True,
) -> Path:
    """
    Resolves the target hooks directory and creates it if missing.

    Args:
        global_mode: Target the global hooks directory
        hooks_path: Explicit repo hooks directory (ignored in global mode)
        config: Installer configuration (default: built-in values)
        cwd: Working directory (default: current directory)
        report: Callback for user-facing messages
        create: If False, only resolve (no mkdir, no global config write)

    Returns:
        Resolved hooks directory
    """
    config = config or InstallerConfig()
    git = Git(cwd)

    if global_mode:
        if hooks_path:
            logger.debug("Ignoring --hooks-path %s in global mode", hooks_path)
        hooks_dir = resolve_global_hooks_dir(git, config, report, configure=create)
    else:
        hooks_dir = resolve_repo_hooks_dir(git, hooks_path, report)

    if create:
        hooks_dir.mkdir(parents=True, exist_ok=True)

    logger.debug("Hooks directory: %s", hooks_dir)
    return hooks_dir


__all__ = [
    "resolve_global_hooks_dir",
    "resolve_hooks_dir",
    "resolve_repo_hooks_dir",
]
