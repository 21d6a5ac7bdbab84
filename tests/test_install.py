"""Tests for the hook installer."""

import pytest

from kingfisher_hook.config import OWNERSHIP_MARKER
from kingfisher_hook.core.models import HookPaths, HookState, InstallerConfig
from kingfisher_hook.hooks.install import (
    HookInstaller,
    HookInstallerError,
    render_pre_commit,
    render_wrapper,
)

from conftest import FOREIGN_HOOK, is_executable


def test_install_creates_executable_hook_chain(hooks_dir):
    """Install writes pre-commit, wrapper and no legacy hook."""
    result = HookInstaller(hooks_dir).install()

    pre_commit = hooks_dir / "pre-commit"
    wrapper = hooks_dir / "kingfisher-pre-commit"

    assert result["action"] == "installed"
    assert result["legacy"] is None
    assert is_executable(pre_commit)
    assert is_executable(wrapper)
    assert not (hooks_dir / "pre-commit.legacy.kingfisher").exists()
    assert result["messages"] == [f"Kingfisher pre-commit hook installed at {pre_commit}"]


def test_marker_is_first_content_line(hooks_dir):
    HookInstaller(hooks_dir).install()

    lines = (hooks_dir / "pre-commit").read_text().splitlines()

    assert lines[0] == "#!/usr/bin/env bash"
    assert lines[1] == OWNERSHIP_MARKER


def test_reinstall_does_not_back_up_own_hook(hooks_dir):
    installer = HookInstaller(hooks_dir)
    installer.install()
    result = installer.install()

    assert result["action"] == "reinstalled"
    assert result["preserved"] is False
    assert list(hooks_dir.glob("pre-commit.legacy*")) == []
    assert (hooks_dir / "pre-commit").read_text().splitlines()[1] == OWNERSHIP_MARKER


def test_install_preserves_foreign_hook(hooks_dir, foreign_hook):
    result = HookInstaller(hooks_dir).install()
    legacy = hooks_dir / "pre-commit.legacy.kingfisher"

    assert result["preserved"] is True
    assert result["previous_state"] == HookState.FOREIGN
    assert legacy.read_bytes() == FOREIGN_HOOK
    assert is_executable(legacy)
    assert result["messages"] == [
        f"Existing pre-commit hook preserved at {legacy}",
        f"Kingfisher pre-commit hook installed at {foreign_hook}",
        f"Existing hook will run first from {legacy}",
    ]


def test_reinstall_over_foreign_keeps_single_backup(hooks_dir, foreign_hook):
    installer = HookInstaller(hooks_dir)
    installer.install()
    installer.install()

    backups = list(hooks_dir.glob("pre-commit.legacy*"))

    assert len(backups) == 1
    assert backups[0].read_bytes() == FOREIGN_HOOK


def test_non_executable_foreign_hook_becomes_executable(hooks_dir, foreign_hook):
    foreign_hook.chmod(0o644)

    HookInstaller(hooks_dir).install()

    assert is_executable(hooks_dir / "pre-commit.legacy.kingfisher")


def test_install_then_uninstall_leaves_nothing(hooks_dir):
    installer = HookInstaller(hooks_dir)
    installer.install()
    result = installer.uninstall()

    assert result["action"] == "removed"
    assert sorted(p.name for p in hooks_dir.iterdir()) == []
    assert result["messages"] == [
        "Removed Kingfisher pre-commit wrapper.",
        "Kingfisher pre-commit hook uninstalled.",
    ]


def test_uninstall_restores_foreign_hook(hooks_dir, foreign_hook):
    installer = HookInstaller(hooks_dir)
    installer.install()
    result = installer.uninstall()

    assert result["action"] == "restored"
    assert result["restored"] is True
    assert foreign_hook.read_bytes() == FOREIGN_HOOK
    assert is_executable(foreign_hook)
    assert sorted(p.name for p in hooks_dir.iterdir()) == ["pre-commit"]


def test_uninstall_without_hook_is_noop(hooks_dir):
    result = HookInstaller(hooks_dir).uninstall()

    assert result["success"] is True
    assert result["action"] == "not_installed"
    assert result["messages"] == ["Kingfisher pre-commit hook uninstalled."]


def test_uninstall_leaves_foreign_pre_commit(hooks_dir, foreign_hook):
    """A hook we do not own stays; our stray files are still removed."""
    (hooks_dir / "kingfisher-pre-commit").write_text("#!/bin/sh\n")
    (hooks_dir / "pre-commit.legacy.kingfisher").write_text("#!/bin/sh\n")

    result = HookInstaller(hooks_dir).uninstall()

    assert result["action"] == "not_installed"
    assert foreign_hook.read_bytes() == FOREIGN_HOOK
    assert not (hooks_dir / "kingfisher-pre-commit").exists()
    assert not (hooks_dir / "pre-commit.legacy.kingfisher").exists()


def test_marker_anywhere_counts_as_installed(hooks_dir):
    (hooks_dir / "pre-commit").write_text(f"#!/bin/sh\necho hi\n{OWNERSHIP_MARKER}\n")

    assert HookInstaller(hooks_dir).state() == HookState.INSTALLED


def test_install_into_missing_directory_fails(tmp_path):
    with pytest.raises(HookInstallerError):
        HookInstaller(tmp_path / "missing").install()


def test_status_reports_states(hooks_dir, foreign_hook):
    installer = HookInstaller(hooks_dir)

    status = installer.status()
    assert status["state"] == HookState.FOREIGN
    assert status["files"]["wrapper"]["exists"] is False

    installer.install()
    status = installer.status()
    assert status["state"] == HookState.INSTALLED
    assert status["files"]["legacy"]["executable"] is True

    installer.uninstall()
    foreign_hook.unlink()
    assert installer.status()["state"] == HookState.ABSENT


def test_status_on_missing_directory(tmp_path):
    status = HookInstaller(tmp_path / "missing").status()

    assert status["state"] == HookState.ABSENT
    assert not any(info["exists"] for info in status["files"].values())


# =============================================================================
# Templates
# =============================================================================

def test_wrapper_uses_runtime_probe_and_scan_args():
    script = render_wrapper(InstallerConfig())

    assert script.startswith("#!/usr/bin/env bash\nset -euo pipefail\n")
    assert "command -v podman" in script
    assert "container_runtime=podman" in script
    assert "container_runtime=/usr/bin/docker" in script
    assert "default_image=ghcr.io/mongodb/kingfisher:latest" in script
    assert 'image="${KINGFISHER_IMAGE:-$default_image}"' in script
    assert "git rev-parse --show-toplevel" in script
    assert "scan /src --staged --no-update-check" in script
    assert "docker()" not in script


def test_wrapper_uses_configured_values():
    config = InstallerConfig(
        image="registry.local/kingfisher:1.0",
        alternate_runtime="nerdctl",
        default_runtime="/opt/docker/bin/docker",
    )

    script = render_wrapper(config)

    assert "command -v nerdctl" in script
    assert "container_runtime=/opt/docker/bin/docker" in script
    assert "default_image=registry.local/kingfisher:1.0" in script


def test_pre_commit_quotes_paths_with_spaces(tmp_path):
    paths = HookPaths.for_directory(tmp_path / "my hooks")

    script = render_pre_commit(paths)

    assert f"legacy_hook='{paths.legacy}'" in script
    assert f"kf_hook='{paths.wrapper}'" in script
