"""
kingfisher-hook - Git Helpers
Runs the handful of git commands needed to locate hook directories.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class GitError(Exception):
    """A git command failed or git is not available."""
    pass


class NotGitRepositoryError(GitError):
    """Directory is not inside a git working tree."""
    pass


# =============================================================================
# Git Client
# =============================================================================

class Git:
    """
    Minimal git client bound to a working directory.

    Responsibilities:
    - Read and write ``core.hooksPath``
    - Detect whether the directory is inside a working tree
    - Ask git where the hooks directory and repository root live
    """

    def __init__(self, cwd: Optional[Path] = None):
        """
        Args:
            cwd: Directory git commands run in (default: current directory)
        """
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def get_global_hooks_path(self) -> Optional[str]:
        """
        Reads ``core.hooksPath`` from the global config.

        Returns:
            The configured value, or None when unset or empty
        """
        # git config exits with 1 when the key is unset
        output = self._run(["config", "--global", "core.hooksPath"], check=False)
        value = output.strip()
        return value or None

    def set_global_hooks_path(self, path: str) -> None:
        """Writes ``core.hooksPath`` to the global config."""
        self._run(["config", "--global", "core.hooksPath", path])

    def is_inside_work_tree(self) -> bool:
        """True if ``cwd`` is inside a git working tree."""
        try:
            output = self._run(["rev-parse", "--is-inside-work-tree"])
        except GitError:
            return False
        return output.strip() == "true"

    def is_git_repository(self) -> bool:
        """
        True if ``cwd`` belongs to a repository, with or without a work tree.

        Inside ``.git/`` or a bare repository ``rev-parse`` prints ``false``
        but still succeeds.
        """
        try:
            self._run(["rev-parse", "--is-inside-work-tree"])
        except GitError:
            return False
        return True

    def hooks_path(self) -> Path:
        """
        Hooks directory git uses for this repository.

        Honours ``core.hooksPath``. Relative output is resolved against ``cwd``.

        Raises:
            NotGitRepositoryError: If ``cwd`` is not inside a repository
        """
        if not self.is_git_repository():
            raise NotGitRepositoryError(f"Not a git repository: {self.cwd}")

        output = self._run(["rev-parse", "--git-path", "hooks"])
        return self.cwd / output.strip()

    def toplevel(self) -> Path:
        """Root directory of the working tree."""
        if not self.is_inside_work_tree():
            raise NotGitRepositoryError(f"Not a git repository: {self.cwd}")

        output = self._run(["rev-parse", "--show-toplevel"])
        return Path(output.strip())

    def _run(self, args: List[str], check: bool = True) -> str:
        """
        Runs ``git <args>`` and returns stdout.

        Raises:
            GitError: If git is missing, or the command fails and check=True
        """
        cmd = ["git"] + args
        logger.debug("Running %s in %s", " ".join(cmd), self.cwd)

        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise GitError("git not found in PATH") from e

        if check and result.returncode != 0:
            raise GitError(
                f"git command failed: {' '.join(cmd)}\n"
                f"Stderr: {result.stderr.strip()}"
            )

        return result.stdout


__all__ = [
    "Git",
    "GitError",
    "NotGitRepositoryError",
]
