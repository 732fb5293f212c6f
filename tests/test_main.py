"""Tests for the weztap entry point."""

import logging
import sys
from unittest.mock import patch

from weztap import __main__ as entry


class TestMain:
    """Mode selection and log setup."""

    def test_mcp_mode_logs_warnings_to_stderr(self):
        with (
            patch.object(sys, "argv", ["weztap", "--mcp"]),
            patch.object(entry.logging, "basicConfig") as basic_config,
            patch.object(entry, "app") as app,
        ):
            entry.main()

        app.mcp.run.assert_called_once_with()
        app.run.assert_not_called()
        assert basic_config.call_args.kwargs["stream"] is sys.stderr
        assert basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_repl_mode(self):
        with (
            patch.object(sys, "argv", ["weztap"]),
            patch.object(entry.logging, "basicConfig") as basic_config,
            patch.object(entry, "app") as app,
        ):
            entry.main()

        app.run.assert_called_once()
        app.mcp.run.assert_not_called()
        assert basic_config.call_args.kwargs["level"] == logging.INFO
