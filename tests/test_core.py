"""Tests for command building and bounded execution."""

import json
import shlex
import time
from unittest.mock import patch

import pytest

from weztap.config import WeztapConfig
from weztap.wezterm.core import build_command, run_wezterm
from weztap.wezterm.exceptions import (
    CommandFailedError,
    CommandTimeoutError,
    OutputLimitError,
    WeztermError,
)

HOSTILE_TOKENS = [
    "plain",
    "two words",
    "semi;colon",
    "pi|pe",
    'double"quote',
    "single'quote",
    "new\nline",
    "&& echo injected",
    "$(echo injected)",
    "`echo injected`",
    "\x03",
    "",
]


class TestBuildCommand:
    """Tests for build_command."""

    def test_simple_tokens_unquoted(self):
        assert build_command(["wezterm", "cli", "list"]) == "wezterm cli list"

    def test_metacharacters_quoted(self):
        command = build_command(["wezterm", "cli", "send-text", "echo hi; ls"])
        assert command == "wezterm cli send-text 'echo hi; ls'"

    def test_shell_split_round_trips(self):
        assert shlex.split(build_command(HOSTILE_TOKENS)) == HOSTILE_TOKENS


class TestRunWeztermArgv:
    """The shell must hand the child exactly the tokens it was given."""

    def test_hostile_tokens_arrive_intact(self, echo_argv):
        config = WeztapConfig(cli=echo_argv)
        result = run_wezterm(HOSTILE_TOKENS, config)
        assert json.loads(result.stdout) == HOSTILE_TOKENS

    def test_injection_does_not_execute(self, tmp_path, echo_argv):
        marker = tmp_path / "pwned"
        config = WeztapConfig(cli=echo_argv)
        tokens = [f"; touch {marker}", f"| touch {marker}", f"$(touch {marker})", f"`touch {marker}`"]

        result = run_wezterm(tokens, config)

        assert json.loads(result.stdout) == tokens
        assert not marker.exists()

    def test_cli_prefix_tokens_are_separate(self, echo_argv):
        config = WeztapConfig(cli=(*echo_argv, "cli"))
        result = run_wezterm(["list"], config)
        assert json.loads(result.stdout) == ["cli", "list"]


class TestRunWeztermOutput:
    """Tests for captured output on success."""

    def test_returns_stdout(self, python_cli):
        result = run_wezterm([], python_cli("print('hello')"))
        assert result.stdout == "hello\n"

    def test_escape_sequences_preserved(self, python_cli):
        config = python_cli("import sys; sys.stdout.write('\\x1b[31mred\\x1b[0m')")
        result = run_wezterm([], config)
        assert result.stdout == "\x1b[31mred\x1b[0m"

    def test_stderr_captured_on_success(self, python_cli):
        result = run_wezterm([], python_cli("import sys; sys.stderr.write('note\\n')"))
        assert result.stdout == ""
        assert result.stderr == "note"

    def test_output_at_limit_allowed(self, python_cli):
        config = python_cli("import sys; sys.stdout.write('x' * 1000)", max_output=1000)
        assert run_wezterm([], config).stdout == "x" * 1000


class TestRunWeztermFailures:
    """Tests for non-zero exit, spawn failure, timeout and output cap."""

    def test_nonzero_exit_raises_with_stderr(self, python_cli):
        config = python_cli("import sys; sys.stderr.write('no mux server'); sys.exit(2)")

        with pytest.raises(CommandFailedError) as exc_info:
            run_wezterm(["list"], config)

        assert exc_info.value.returncode == 2
        assert exc_info.value.stderr == "no mux server"
        assert "exit code 2" in str(exc_info.value)
        assert "no mux server" in str(exc_info.value)

    def test_missing_program_fails(self, tmp_path):
        config = WeztapConfig(cli=(str(tmp_path / "no-such-wezterm"), "cli"))

        with pytest.raises(CommandFailedError) as exc_info:
            run_wezterm(["list"], config)

        assert exc_info.value.returncode == 127

    def test_spawn_error_wrapped(self, config):
        with patch("weztap.wezterm.core.subprocess.Popen", side_effect=OSError("no shell")):
            with pytest.raises(CommandFailedError, match="Failed to start command.*no shell"):
                run_wezterm(["list"], config)

    def test_timeout_kills_process(self, python_cli):
        config = python_cli("import time; time.sleep(30)", timeout=0.5)

        start = time.monotonic()
        with pytest.raises(CommandTimeoutError, match="timed out after 0.5s"):
            run_wezterm([], config)

        assert time.monotonic() - start < 10

    def test_background_child_holding_pipes_times_out(self):
        config = WeztapConfig(cli=("sh", "-c", "sleep 6 & exit 0", "x"), timeout=1.0)

        start = time.monotonic()
        with pytest.raises(CommandTimeoutError, match="timed out after 1s"):
            run_wezterm([], config)

        assert time.monotonic() - start < 5

    def test_stdout_over_limit_raises(self, python_cli):
        config = python_cli("import sys; sys.stdout.write('x' * 100000)", max_output=1000)
        with pytest.raises(OutputLimitError, match="exceeded maximum size of 1000 bytes"):
            run_wezterm([], config)

    def test_combined_output_counts_toward_limit(self, python_cli):
        code = "import sys; sys.stdout.write('x' * 600); sys.stdout.flush(); sys.stderr.write('y' * 600)"
        with pytest.raises(OutputLimitError):
            run_wezterm([], python_cli(code, max_output=1000))

    def test_endless_output_stopped(self, python_cli):
        config = python_cli("import sys\nwhile True: sys.stdout.write('x' * 4096)", max_output=64 * 1024)

        start = time.monotonic()
        with pytest.raises(OutputLimitError):
            run_wezterm([], config)

        assert time.monotonic() - start < 10

    def test_all_failures_share_base(self):
        assert issubclass(CommandTimeoutError, WeztermError)
        assert issubclass(OutputLimitError, WeztermError)
        assert issubclass(CommandFailedError, WeztermError)
