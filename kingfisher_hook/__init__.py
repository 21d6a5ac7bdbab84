"""
kingfisher-hook - Kingfisher pre-commit hook installer

Installs a Git pre-commit hook that runs the containerized Kingfisher
secret scanner on staged changes, chained after any existing hook.
"""

from .__version__ import __version__

__all__ = ["__version__"]
