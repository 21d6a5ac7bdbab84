"""Configuration constants for kingfisher-hook."""

# Hook file names inside the hooks directory
PRE_COMMIT_NAME = "pre-commit"
LEGACY_HOOK_NAME = "pre-commit.legacy.kingfisher"
WRAPPER_HOOK_NAME = "kingfisher-pre-commit"

OWNERSHIP_MARKER = "# Kingfisher pre-commit wrapper"

# Scanner invocation
SCANNER_IMAGE = "ghcr.io/mongodb/kingfisher:latest"
SCAN_ARGS = ["scan", "/src", "--staged", "--no-update-check"]
IMAGE_ENV_VAR = "KINGFISHER_IMAGE"

# Container runtimes
ALTERNATE_RUNTIME = "podman"
DEFAULT_RUNTIME = "/usr/bin/docker"

DEFAULT_GLOBAL_HOOKS_DIR = "~/.git-hooks"

CONFIG_ENV_VAR = "KINGFISHER_HOOK_CONFIG"

__all__ = [
    "PRE_COMMIT_NAME",
    "LEGACY_HOOK_NAME",
    "WRAPPER_HOOK_NAME",
    "OWNERSHIP_MARKER",
    "SCANNER_IMAGE",
    "SCAN_ARGS",
    "IMAGE_ENV_VAR",
    "ALTERNATE_RUNTIME",
    "DEFAULT_RUNTIME",
    "DEFAULT_GLOBAL_HOOKS_DIR",
    "CONFIG_ENV_VAR",
]
