"""Git hook installation and hooks directory resolution."""

from .install import (
    HookInstaller,
    HookInstallerError,
    check_hook_status,
    install_hook,
    uninstall_hook,
)
from .resolve import resolve_hooks_dir

__all__ = [
    "HookInstaller",
    "HookInstallerError",
    "check_hook_status",
    "install_hook",
    "resolve_hooks_dir",
    "uninstall_hook",
]
