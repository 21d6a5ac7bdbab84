"""Core modules for kingfisher-hook."""

from .config_loader import ConfigLoadError, load_config, resolve_config
from .git import Git, GitError, NotGitRepositoryError
from .models import ContainerRuntime, HookPaths, HookState, InstallerConfig
from .runtime import build_scan_command, detect_container_runtime

__all__ = [
    # Models
    "ContainerRuntime",
    "HookPaths",
    "HookState",
    "InstallerConfig",
    # Git
    "Git",
    "GitError",
    "NotGitRepositoryError",
    # Runtime
    "build_scan_command",
    "detect_container_runtime",
    # Config
    "ConfigLoadError",
    "load_config",
    "resolve_config",
]
