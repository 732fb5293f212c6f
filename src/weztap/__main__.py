"""WezTerm pane control with MCP support.

Entry point for weztap that runs either a REPL interface or an MCP server
depending on command line arguments.
"""

import sys
import logging
from .app import app

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(mcp: bool) -> None:
    """Send log records to stderr.

    In MCP mode stdout carries the protocol, so only warnings and above are
    logged to keep the client's stderr pane quiet.
    """
    logging.basicConfig(
        level=logging.WARNING if mcp else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main():
    """Run weztap as REPL or MCP server based on command line arguments.

    Checks for --mcp flag to determine mode:
    - With --mcp: Runs as MCP server over stdio
    - Without --mcp: Runs as interactive REPL
    """
    mcp = "--mcp" in sys.argv
    configure_logging(mcp)
    if mcp:
        app.mcp.run()
    else:
        app.run(title="weztap - WezTerm Pane Control")


if __name__ == "__main__":
    main()
