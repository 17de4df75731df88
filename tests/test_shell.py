"""Tests for the shell runner and local filesystem."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from dumpstage.exceptions import UtilityError
from dumpstage.utilities import CommandRunner, Filesystem, LocalFilesystem, ShellRunner


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args="cmd", returncode=returncode, stdout=stdout, stderr=stderr)


class TestProtocols:
    """Implementations satisfy the collaborator protocols."""

    def test_shell_runner_is_command_runner(self):
        assert isinstance(ShellRunner(logger=MagicMock()), CommandRunner)

    def test_local_filesystem_is_filesystem(self):
        assert isinstance(LocalFilesystem(), Filesystem)


class TestShellRunnerRun:
    """Tests for ShellRunner.run()."""

    def test_returns_stripped_stdout(self):
        runner = ShellRunner(logger=MagicMock())
        with patch("dumpstage.utilities.shell.subprocess.run",
                   return_value=completed(stdout="OK\n")) as run:
            assert runner.run("redis-cli SAVE") == "OK"

        run.assert_called_once_with(
            "redis-cli SAVE", shell=True, capture_output=True, text=True
        )

    def test_nonzero_exit_raises(self):
        runner = ShellRunner(logger=MagicMock())
        with patch("dumpstage.utilities.shell.subprocess.run",
                   return_value=completed(returncode=127, stderr="redis-cli: not found\n")):
            with pytest.raises(UtilityError) as exc_info:
                runner.run("redis-cli SAVE")

        err = exc_info.value
        assert err.code == "COMMAND_FAILED"
        assert err.details["command"] == "redis-cli SAVE"
        assert err.details["returncode"] == 127
        assert err.details["stderr"] == "redis-cli: not found"

    def test_stderr_logged_as_warnings(self):
        logger = MagicMock()
        runner = ShellRunner(logger=logger)
        with patch("dumpstage.utilities.shell.subprocess.run",
                   return_value=completed(stdout="OK", stderr="line one\nline two\n")):
            runner.run("cmd")

        assert [c.args[0] for c in logger.warning.call_args_list] == ["line one", "line two"]

    def test_os_error_wrapped(self):
        runner = ShellRunner(logger=MagicMock())
        with patch("dumpstage.utilities.shell.subprocess.run", side_effect=OSError("no shell")):
            with pytest.raises(UtilityError, match="no shell"):
                runner.run("cmd")

    def test_real_command(self):
        """A real shell pipeline runs end to end."""
        runner = ShellRunner(logger=MagicMock())
        assert runner.run("echo '  +OK  '") == "+OK"

    def test_real_failure(self):
        runner = ShellRunner(logger=MagicMock())
        with pytest.raises(UtilityError):
            runner.run("exit 3")


class TestShellRunnerUtility:
    """Tests for ShellRunner.utility()."""

    def test_configured_path_wins(self):
        runner = ShellRunner(utility_paths={"redis-cli": "/opt/redis-cli"}, logger=MagicMock())
        with patch("dumpstage.utilities.shell.shutil.which") as which:
            assert runner.utility("redis-cli") == "/opt/redis-cli"
        which.assert_not_called()

    def test_found_on_path(self):
        runner = ShellRunner(logger=MagicMock())
        with patch("dumpstage.utilities.shell.shutil.which", return_value="/usr/bin/redis-cli"):
            assert runner.utility("redis-cli") == "/usr/bin/redis-cli"

    def test_not_found(self):
        runner = ShellRunner(logger=MagicMock())
        with patch("dumpstage.utilities.shell.shutil.which", return_value=None):
            with pytest.raises(UtilityError) as exc_info:
                runner.utility("redis-cli")

        assert exc_info.value.code == "UTILITY_NOT_FOUND"
        assert exc_info.value.details == {"utility": "redis-cli"}


class TestLocalFilesystem:
    """Tests for LocalFilesystem."""

    def test_exists(self, tmp_path):
        fs = LocalFilesystem()
        target = tmp_path / "dump.rdb"
        assert fs.exists(str(target)) is False
        target.write_bytes(b"x")
        assert fs.exists(str(target)) is True

    def test_copy(self, tmp_path):
        fs = LocalFilesystem()
        src = tmp_path / "dump.rdb"
        src.write_bytes(b"REDIS")
        dst = tmp_path / "Redis.rdb"

        fs.copy(str(src), str(dst))

        assert dst.read_bytes() == b"REDIS"

    def test_makedirs_is_idempotent(self, tmp_path):
        fs = LocalFilesystem()
        target = tmp_path / "a" / "b"
        fs.makedirs(str(target))
        fs.makedirs(str(target))
        assert target.is_dir()
