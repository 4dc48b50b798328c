"""Tests for `colonsh setup` profile handling."""

import datetime

import pytest

from colonsh.core.errors import ColonshError, ShellUnsupported
from colonsh.shell.generator import ShellKind
from colonsh.shell.setup import (
    BLOCK_END,
    BLOCK_START,
    install_setup,
    profile_path,
    setup_block,
    setup_shell,
)

TODAY = datetime.date(2026, 10, 19)


class TestSetupShell:
    def test_known(self):
        assert setup_shell({"SHELL": "/bin/zsh"}, "linux") == ShellKind.ZSH
        assert setup_shell({"SHELL": "/usr/bin/fish"}, "linux") == ShellKind.FISH

    def test_pwsh(self):
        assert setup_shell({"SHELL": "/usr/local/bin/pwsh"}, "darwin") == ShellKind.POWERSHELL

    def test_unset_uses_platform_default(self):
        assert setup_shell({}, "win32") == ShellKind.POWERSHELL
        assert setup_shell({}, "linux") == ShellKind.ZSH

    def test_unknown_is_unsupported(self):
        with pytest.raises(ShellUnsupported) as exc:
            setup_shell({"SHELL": "/bin/tcsh"}, "linux")
        assert "tcsh" in str(exc.value)


class TestProfilePath:
    def test_zsh(self, tmp_path):
        assert profile_path(ShellKind.ZSH, "linux", tmp_path) == tmp_path / ".zshrc"

    def test_bash_linux(self, tmp_path):
        assert profile_path(ShellKind.BASH, "linux", tmp_path) == tmp_path / ".bashrc"

    def test_bash_macos_without_bashrc(self, tmp_path):
        assert profile_path(ShellKind.BASH, "darwin", tmp_path) == tmp_path / ".bash_profile"

    def test_bash_macos_with_bashrc(self, tmp_path):
        (tmp_path / ".bashrc").write_text("")
        assert profile_path(ShellKind.BASH, "darwin", tmp_path) == tmp_path / ".bashrc"

    def test_fish(self, tmp_path):
        expected = tmp_path / ".config" / "fish" / "config.fish"
        assert profile_path(ShellKind.FISH, "linux", tmp_path) == expected

    def test_powershell_is_manual(self, tmp_path):
        assert profile_path(ShellKind.POWERSHELL, "win32", tmp_path) is None


class TestSetupBlock:
    def test_posix(self):
        block = setup_block(ShellKind.ZSH, TODAY)
        assert BLOCK_START in block
        assert BLOCK_END in block
        assert "# Added by 'colonsh setup' on 2026-10-19" in block
        assert 'eval "$(colonsh init zsh)"' in block
        assert "command -v colonsh" in block

    def test_fish_syntax(self):
        block = setup_block(ShellKind.FISH, TODAY)
        assert "colonsh init fish | source" in block
        assert "then" not in block
        assert "end\n" in block


class TestInstallSetup:
    def test_appends_to_existing(self, tmp_path):
        rc = tmp_path / ".zshrc"
        rc.write_text("export EDITOR=vim\n")
        assert install_setup(rc, ShellKind.ZSH, TODAY) is True
        text = rc.read_text()
        assert text.startswith("export EDITOR=vim\n")
        assert BLOCK_START in text

    def test_idempotent(self, tmp_path):
        rc = tmp_path / ".zshrc"
        assert install_setup(rc, ShellKind.ZSH, TODAY) is True
        before = rc.read_text()
        assert install_setup(rc, ShellKind.ZSH, TODAY) is False
        assert rc.read_text() == before

    def test_creates_missing_parents(self, tmp_path):
        rc = tmp_path / ".config" / "fish" / "config.fish"
        assert install_setup(rc, ShellKind.FISH, TODAY) is True
        assert rc.exists()

    def test_profile_is_directory(self, tmp_path):
        rc = tmp_path / ".zshrc"
        rc.mkdir()
        with pytest.raises(ColonshError, match="failed to read") as exc:
            install_setup(rc, ShellKind.ZSH, TODAY)
        assert str(rc) in str(exc.value)

    def test_unwritable_parent(self, tmp_path):
        (tmp_path / ".config").write_text("")
        rc = tmp_path / ".config" / "fish" / "config.fish"
        with pytest.raises(ColonshError, match="failed to write"):
            install_setup(rc, ShellKind.FISH, TODAY)

    def test_non_utf8_profile_still_checked(self, tmp_path):
        rc = tmp_path / ".bashrc"
        rc.write_bytes(b"# caf\xe9\n")
        assert install_setup(rc, ShellKind.BASH, TODAY) is True
        assert install_setup(rc, ShellKind.BASH, TODAY) is False
