"""
kingfisher-hook - Git Hooks Installer
Installs, removes and inspects the Kingfisher pre-commit hook chain.
"""

import logging
import shlex
import stat
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from ..config import IMAGE_ENV_VAR, OWNERSHIP_MARKER
from ..core.models import ContainerRuntime, HookPaths, HookState, InstallerConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class HookInstallerError(Exception):
    """Exception raised when hook installation fails."""
    pass


# =============================================================================
# Hook Templates
# =============================================================================

WRAPPER_TEMPLATE = """#!/usr/bin/env bash
set -euo pipefail

if command -v {alternate_runtime} &> /dev/null; then
    container_runtime={alternate_runtime}
else
    container_runtime={default_runtime}
fi

default_image={image}
image="${{{image_env}:-$default_image}}"

repo_root="$(git rev-parse --show-toplevel)"
cd "$repo_root"

"$container_runtime" run --rm \\
    -v "$PWD":/src \\
    "$image" scan /src --staged --no-update-check
"""

PRE_COMMIT_TEMPLATE = """#!/usr/bin/env bash
{marker}
set -euo pipefail

legacy_hook={legacy}
kf_hook={wrapper}

if [[ -f "$legacy_hook" && -x "$legacy_hook" ]]; then
  "$legacy_hook" "$@"
fi

"$kf_hook" "$@"
"""


def render_wrapper(config: InstallerConfig) -> str:
    """Scanner wrapper script for the given configuration."""
    return WRAPPER_TEMPLATE.format(
        alternate_runtime=shlex.quote(config.alternate_runtime),
        default_runtime=shlex.quote(config.default_runtime),
        image=shlex.quote(config.image),
        image_env=IMAGE_ENV_VAR,
    )


def render_pre_commit(paths: HookPaths) -> str:
    """Pre-commit entry point chaining the legacy hook and the wrapper."""
    return PRE_COMMIT_TEMPLATE.format(
        marker=OWNERSHIP_MARKER,
        legacy=shlex.quote(str(paths.legacy)),
        wrapper=shlex.quote(str(paths.wrapper)),
    )


def _make_executable(path: Path) -> None:
    """Adds execute bits, keeping the rest of the mode."""
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def _is_executable(path: Path) -> bool:
    return path.is_file() and path.stat().st_mode & 0o111 != 0


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """Manages the pre-commit hook chain in one hooks directory."""

    def __init__(self, hooks_dir: Path, config: Optional[InstallerConfig] = None):
        """
        Args:
            hooks_dir: Resolved hooks directory
            config: Installer configuration (default: built-in values)
        """
        self.paths = HookPaths.for_directory(hooks_dir)
        self.config = config or InstallerConfig()

    def _require_hooks_dir(self) -> None:
        if not self.paths.hooks_dir.is_dir():
            raise HookInstallerError(
                f"Hooks directory does not exist: {self.paths.hooks_dir}"
            )

    def state(self) -> HookState:
        """Ownership state of the current pre-commit file."""
        return self.paths.pre_commit_state()

    def install(self) -> Dict[str, Any]:
        """
        Installs the wrapper and the chaining pre-commit hook.

        A foreign pre-commit hook is moved to the legacy name first. A
        pre-commit hook we already own is overwritten in place, so repeated
        installs never produce a second backup.

        Returns:
            Dict with the action taken and the messages to show
        """
        self._require_hooks_dir()
        paths = self.paths
        messages: List[str] = []

        paths.wrapper.write_text(render_wrapper(self.config), encoding="utf-8")
        paths.wrapper.chmod(0o755)
        logger.debug("Wrote scanner wrapper %s", paths.wrapper)

        previous = self.state()
        preserved = False

        if previous == HookState.FOREIGN:
            paths.pre_commit.replace(paths.legacy)
            _make_executable(paths.legacy)
            preserved = True
            messages.append(f"Existing pre-commit hook preserved at {paths.legacy}")
            logger.debug("Moved %s to %s", paths.pre_commit, paths.legacy)

        paths.pre_commit.write_text(render_pre_commit(paths), encoding="utf-8")
        paths.pre_commit.chmod(0o755)

        messages.append(f"Kingfisher pre-commit hook installed at {paths.pre_commit}")

        has_legacy = paths.legacy.is_file()
        if has_legacy:
            messages.append(f"Existing hook will run first from {paths.legacy}")

        return {
            "success": True,
            "action": "reinstalled" if previous == HookState.INSTALLED else "installed",
            "previous_state": previous,
            "preserved": preserved,
            "hook": str(paths.pre_commit),
            "wrapper": str(paths.wrapper),
            "legacy": str(paths.legacy) if has_legacy else None,
            "messages": messages,
        }

    def uninstall(self) -> Dict[str, Any]:
        """
        Removes the hook chain and restores the preserved hook, if any.

        The wrapper and legacy files are always deleted, so running this on
        a directory without an installed hook is a harmless no-op.

        Returns:
            Dict with the action taken and the messages to show
        """
        self._require_hooks_dir()
        paths = self.paths
        messages: List[str] = []
        action = "not_installed"

        if self.state() == HookState.INSTALLED:
            if paths.legacy.is_file():
                paths.legacy.replace(paths.pre_commit)
                _make_executable(paths.pre_commit)
                action = "restored"
                messages.append(f"Restored previous pre-commit hook from {paths.legacy}")
            else:
                paths.pre_commit.unlink()
                action = "removed"
                messages.append("Removed Kingfisher pre-commit wrapper.")

        paths.wrapper.unlink(missing_ok=True)
        paths.legacy.unlink(missing_ok=True)
        messages.append("Kingfisher pre-commit hook uninstalled.")

        return {
            "success": True,
            "action": action,
            "restored": action == "restored",
            "messages": messages,
        }

    def status(self) -> Dict[str, Any]:
        """Returns detailed status of the managed files."""
        paths = self.paths
        status: Dict[str, Any] = {
            "hooks_dir": str(paths.hooks_dir),
            "state": self.state(),
            "files": {},
        }

        for label, path in (
            ("pre-commit", paths.pre_commit),
            ("wrapper", paths.wrapper),
            ("legacy", paths.legacy),
        ):
            status["files"][label] = {
                "path": str(path),
                "exists": path.is_file(),
                "executable": _is_executable(path),
            }

        return status


# =============================================================================
# Helper Functions
# =============================================================================

def install_hook(hooks_dir: Path, config: Optional[InstallerConfig] = None) -> Dict[str, Any]:
    """Installs the hook chain into an existing hooks directory."""
    return HookInstaller(hooks_dir, config).install()


def uninstall_hook(hooks_dir: Path) -> Dict[str, Any]:
    """Removes the hook chain from a hooks directory."""
    return HookInstaller(hooks_dir).uninstall()


def check_hook_status(hooks_dir: Path) -> Dict[str, Any]:
    """Status of the hook chain in a hooks directory."""
    return HookInstaller(hooks_dir).status()


def print_messages(result: Dict[str, Any], console: Optional[Console] = None):
    """Prints install/uninstall messages (helper for the CLI)."""
    console = console or Console()

    for message in result["messages"]:
        console.print(message, style="green", soft_wrap=True, highlight=False, markup=False)


def print_status(
    status: Dict[str, Any],
    runtime: Optional[ContainerRuntime] = None,
    scan_command: Optional[List[str]] = None,
    console: Optional[Console] = None,
):
    """Prints hook status (helper for the CLI)."""
    console = console or Console()

    state: HookState = status["state"]
    state_styles = {
        HookState.INSTALLED: "green",
        HookState.FOREIGN: "yellow",
        HookState.ABSENT: "red",
    }

    console.print(f"\n📂 Hooks dir: {status['hooks_dir']}", soft_wrap=True, highlight=False, markup=False)
    console.print(f"🪝 pre-commit: {state.value}", style=state_styles[state])

    table = Table(title="Kingfisher Hook Files")
    table.add_column("File", style="cyan")
    table.add_column("Present", style="yellow")
    table.add_column("Executable", style="magenta")
    table.add_column("Path")

    for label, info in status["files"].items():
        present = "✅" if info["exists"] else "❌"
        executable = "✅" if info["executable"] else "❌"
        table.add_row(label, present, executable, info["path"])

    console.print(table)

    if runtime is not None:
        flag = "" if runtime.available else " (not found)"
        console.print(
            f"🐳 Container runtime: {runtime.name} -> {runtime.command}{flag}",
            soft_wrap=True,
            highlight=False,
        )
    if scan_command:
        console.print(
            f"🔍 Scan command: {shlex.join(scan_command)}",
            soft_wrap=True,
            highlight=False,
            markup=False,
        )
