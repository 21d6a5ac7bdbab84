"""
kingfisher-hook - Command Line Interface
Installs or removes the Kingfisher pre-commit hook.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console

from kingfisher_hook.__version__ import __version__
from kingfisher_hook.core.config_loader import ConfigLoadError, resolve_config
from kingfisher_hook.core.git import Git, GitError
from kingfisher_hook.core.models import InstallerConfig
from kingfisher_hook.core.runtime import build_scan_command, detect_container_runtime
from kingfisher_hook.hooks.install import (
    HookInstallerError,
    check_hook_status,
    install_hook,
    print_messages,
    print_status,
    uninstall_hook,
)
from kingfisher_hook.hooks.resolve import resolve_hooks_dir


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="kingfisher-hook",
    help="Installs a Git pre-commit hook that runs Kingfisher.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("kingfisher_hook")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def version_callback(value: bool):
    """Callback for --version."""
    if value:
        console.print(f"kingfisher-hook version {__version__}")
        raise typer.Exit()


def report(message: str) -> None:
    console.print(message, soft_wrap=True, highlight=False, markup=False)


# =============================================================================
# Command
# =============================================================================

@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    global_mode: bool = typer.Option(
        False,
        "--global",
        help="Install in the global Git hooks directory.",
    ),
    hooks_path: Optional[str] = typer.Option(
        None,
        "--hooks-path",
        metavar="PATH",
        help="Override hooks directory (repo only).",
    ),
    uninstall: bool = typer.Option(
        False,
        "--uninstall",
        help="Remove the installed hook.",
    ),
    status: bool = typer.Option(
        False,
        "--status",
        help="Show the hook state without changing anything.",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        metavar="PATH",
        help="YAML file overriding image, runtimes or the global hooks dir.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log git commands and file operations.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    Installs a Git pre-commit hook that runs Kingfisher.

    \b
    Modes:
      (default)     Install in the current repo.
      --global      Install in the global Git hooks directory.
      --hooks-path  Override hooks directory (repo only).
      --uninstall   Remove the installed hook.
    """
    setup_logging(verbose)

    try:
        config = resolve_config(config_file)

        hooks_dir = resolve_hooks_dir(
            global_mode=global_mode,
            hooks_path=hooks_path,
            config=config,
            report=report,
            create=not status,
        )

        if status:
            show_status(hooks_dir, config)
            return

        if uninstall:
            result = uninstall_hook(hooks_dir)
        else:
            result = install_hook(hooks_dir, config)

        print_messages(result, console)

    except (ConfigLoadError, GitError, HookInstallerError, OSError) as e:
        logger.debug("Aborting", exc_info=True)
        err_console.print(f"❌ {e}", style="red", soft_wrap=True, highlight=False, markup=False)
        raise typer.Exit(1)


def show_status(hooks_dir: Path, config: InstallerConfig) -> None:
    """Prints the hook state, the runtime the wrapper would pick and its command."""
    runtime = detect_container_runtime(config)

    scan_command = None
    git = Git()
    if git.is_inside_work_tree():
        scan_command = build_scan_command(runtime, git.toplevel(), config.image)

    print_status(check_hook_status(hooks_dir), runtime, scan_command, console)


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> int:
    """
    Entry point.

    Usage errors exit with 1 and print usage on stderr.
    """
    try:
        rv = app(standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return 1
    except click.Abort:
        err_console.print("Aborted!")
        return 1

    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
