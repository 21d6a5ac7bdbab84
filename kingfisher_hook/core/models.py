"""
kingfisher-hook - Core Data Models
Hook state, hook file layout, container runtime and installer configuration.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import List

from ..config import (
    ALTERNATE_RUNTIME,
    DEFAULT_GLOBAL_HOOKS_DIR,
    DEFAULT_RUNTIME,
    LEGACY_HOOK_NAME,
    OWNERSHIP_MARKER,
    PRE_COMMIT_NAME,
    SCANNER_IMAGE,
    WRAPPER_HOOK_NAME,
)


# =============================================================================
# Enums
# =============================================================================

class HookState(str, Enum):
    """Ownership state of the pre-commit file in a hooks directory."""
    ABSENT = "absent"
    FOREIGN = "foreign"
    INSTALLED = "installed"


# =============================================================================
# Hook Layout
# =============================================================================

@dataclass(frozen=True)
class HookPaths:
    """The three files managed inside a hooks directory."""
    hooks_dir: Path
    pre_commit: Path
    legacy: Path
    wrapper: Path

    @classmethod
    def for_directory(cls, hooks_dir: Path) -> "HookPaths":
        hooks_dir = Path(hooks_dir)
        return cls(
            hooks_dir=hooks_dir,
            pre_commit=hooks_dir / PRE_COMMIT_NAME,
            legacy=hooks_dir / LEGACY_HOOK_NAME,
            wrapper=hooks_dir / WRAPPER_HOOK_NAME,
        )

    def pre_commit_state(self) -> HookState:
        """
        Classifies the current pre-commit file.

        The marker is searched anywhere in the file so hooks written by
        older installers are still recognised.
        """
        if not self.pre_commit.is_file():
            return HookState.ABSENT

        content = self.pre_commit.read_text(encoding="utf-8", errors="replace")
        if OWNERSHIP_MARKER in content:
            return HookState.INSTALLED
        return HookState.FOREIGN


# =============================================================================
# Container Runtime
# =============================================================================

@dataclass(frozen=True)
class ContainerRuntime:
    """Container runtime chosen by the capability probe."""
    name: str
    command: str
    preferred: bool = False

    @property
    def available(self) -> bool:
        """True if the command exists on disk."""
        return Path(self.command).is_file()


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class InstallerConfig:
    """Settings that end up in the generated wrapper and global mode."""
    image: str = SCANNER_IMAGE
    alternate_runtime: str = ALTERNATE_RUNTIME
    default_runtime: str = DEFAULT_RUNTIME
    global_hooks_dir: str = DEFAULT_GLOBAL_HOOKS_DIR
    source_file: str = field(default="defaults", compare=False)

    @classmethod
    def field_names(cls) -> List[str]:
        """Keys accepted in a YAML config file."""
        return [f.name for f in fields(cls) if f.name != "source_file"]

    def global_hooks_path(self) -> Path:
        """Default global hooks directory with ``~`` expanded."""
        return Path(self.global_hooks_dir).expanduser()
